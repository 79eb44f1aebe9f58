"""FEN parsing and serialization."""

from __future__ import annotations

import logging

from chessfen.core.board import Board
from chessfen.core.castling import FEN_CASTLING_LETTERS
from chessfen.core.enums import CastlingRights, Color
from chessfen.core.errors import (
    FenError,
    InvalidCastlingRights,
    InvalidEnPassantSquare,
    InvalidFullmoveNumber,
    InvalidHalfmoveClock,
    InvalidPieceLetter,
    InvalidSideToMove,
    RankOverflow,
    RankUnderflow,
    WrongFieldCount,
    WrongRankCount,
)
from chessfen.core.piece import Piece, piece_from_letter
from chessfen.core.position import Position
from chessfen.core.types import BOARD_SLOTS, Coordinate, make_square

_LOGGER = logging.getLogger(__name__)

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"
FEN_FIELD_COUNT = 6

_SIDE_CODES: dict[str, Color] = {"w": Color.WHITE, "b": Color.BLACK}
_SIDE_LETTERS: dict[Color, str] = {v: k for k, v in _SIDE_CODES.items()}
_RUN_DIGITS = "12345678"
_MAX_COUNTER_DIGITS = 32


def position_from_fen(fen: str) -> Position:
    """Parse a FEN string into a :class:`Position`.

    Raises a :class:`~chessfen.core.errors.FenError` subclass describing the
    first field that fails to decode.
    """
    try:
        return _decode(fen)
    except FenError as exc:
        _LOGGER.debug("Rejected FEN %r: %s", fen, exc)
        raise


def _decode(fen: str) -> Position:
    parts = fen.split(" ")
    if len(parts) != FEN_FIELD_COUNT:
        raise WrongFieldCount(fen, detail=f"got {len(parts)}")

    placement, side_part, castling_part, ep_part, halfmove_part, fullmove_part = parts

    return Position(
        board=_decode_placement(placement),
        side_to_move=_decode_side(side_part),
        castling=_decode_castling(castling_part),
        en_passant=_decode_en_passant(ep_part),
        halfmove_clock=_decode_counter(halfmove_part, InvalidHalfmoveClock, minimum=0),
        fullmove_number=_decode_counter(fullmove_part, InvalidFullmoveNumber, minimum=1),
    )


def _decode_placement(placement: str) -> Board:
    ranks = placement.split("/")
    if len(ranks) != 8:
        raise WrongRankCount(placement, detail=f"got {len(ranks)}")

    cells: list[Piece | None] = [None] * BOARD_SLOTS
    for rank_idx, rank_text in enumerate(ranks):
        rank = 7 - rank_idx
        file = 0
        for ch in rank_text:
            if ch in _RUN_DIGITS:
                file += int(ch)
                if file > 8:
                    raise RankOverflow(rank_text, detail=f"rank {rank + 1}")
                continue
            if file >= 8:
                raise RankOverflow(rank_text, detail=f"rank {rank + 1}")
            try:
                piece = piece_from_letter(ch)
            except InvalidPieceLetter as exc:
                raise InvalidPieceLetter(ch, detail=f"rank {rank + 1}") from exc
            cells[make_square(file, rank)] = piece
            file += 1
        if file != 8:
            raise RankUnderflow(rank_text, detail=f"rank {rank + 1} covers {file} squares")
    return Board(tuple(cells))


def _decode_side(text: str) -> Color:
    try:
        return _SIDE_CODES[text]
    except KeyError:
        raise InvalidSideToMove(text) from None


def _decode_castling(text: str) -> CastlingRights:
    if text == "-":
        return CastlingRights.NONE
    if not 1 <= len(text) <= 4:
        raise InvalidCastlingRights(text)

    castling = CastlingRights.NONE
    for ch in text:
        right = FEN_CASTLING_LETTERS.get(ch)
        if right is None or castling & right:
            raise InvalidCastlingRights(text)
        castling |= right
    return castling


def _decode_en_passant(text: str) -> Coordinate | None:
    if text == "-":
        return None
    try:
        return Coordinate.from_name(text)
    except ValueError:
        raise InvalidEnPassantSquare(text) from None


def _decode_counter(text: str, error: type[FenError], *, minimum: int) -> int:
    # str.isdigit() also accepts non-ASCII digits such as '²'.
    if not (text.isascii() and text.isdigit()):
        raise error(text)
    # Keeps int() below the interpreter's digit limit for str conversion.
    if len(text) > _MAX_COUNTER_DIGITS:
        raise error(text[:20] + "...", detail=f"{len(text)} digits")
    value = int(text)
    if value < minimum:
        raise error(text)
    return value


def position_to_fen(pos: Position) -> str:
    """Serialise a :class:`Position` to FEN."""
    # 1. Board
    rows: list[str] = []
    for rank in range(7, -1, -1):
        empty = 0
        row = ""
        for file in range(8):
            piece = pos.board[make_square(file, rank)]
            if piece is None:
                empty += 1
            else:
                if empty:
                    row += str(empty)
                    empty = 0
                row += str(piece)
        if empty:
            row += str(empty)
        rows.append(row)
    board_str = "/".join(rows)

    # 2. Side
    side_str = _SIDE_LETTERS[pos.side_to_move]

    # 3. Castling
    castling_str = "".join(
        letter for letter, right in FEN_CASTLING_LETTERS.items() if pos.castling & right
    )
    if not castling_str:
        castling_str = "-"

    # 4. En passant
    ep_str = pos.en_passant.name if pos.en_passant is not None else "-"

    return f"{board_str} {side_str} {castling_str} {ep_str} {pos.halfmove_clock} {pos.fullmove_number}"
