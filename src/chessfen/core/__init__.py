"""Core domain layer — position model and FEN codec with zero external dependencies.

Quick start::

    from chessfen.core import Coordinate, position_from_fen, position_to_fen, STARTING_FEN

    pos = position_from_fen(STARTING_FEN)
    print(pos.piece_at(Coordinate.from_name("e1")))  # K
    print(position_to_fen(pos))
"""

from chessfen.core.board import Board
from chessfen.core.castling import can_castle, castling_right
from chessfen.core.display import RenderOptions, render_board, render_position
from chessfen.core.enums import CastlingRights, CastlingSide, Color, PieceType
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
from chessfen.core.move import CastlingMove, Move
from chessfen.core.notation import STARTING_FEN, position_from_fen, position_to_fen
from chessfen.core.piece import EMPTY_GLYPH, Piece, piece_from_letter, piece_letter
from chessfen.core.position import Position
from chessfen.core.types import (
    Coordinate,
    File,
    Rank,
    Square,
    file_of,
    is_on_board,
    make_square,
    parse_square,
    rank_of,
    square_name,
)

__all__ = [
    # Enums / flags
    "CastlingRights",
    "CastlingSide",
    "Color",
    "PieceType",
    # Types / helpers
    "Coordinate",
    "File",
    "Rank",
    "Square",
    "file_of",
    "is_on_board",
    "make_square",
    "parse_square",
    "rank_of",
    "square_name",
    "can_castle",
    "castling_right",
    # Domain objects
    "Board",
    "CastlingMove",
    "Move",
    "Piece",
    "Position",
    "EMPTY_GLYPH",
    "piece_from_letter",
    "piece_letter",
    # Notation
    "STARTING_FEN",
    "position_from_fen",
    "position_to_fen",
    # Display
    "RenderOptions",
    "render_board",
    "render_position",
    # Errors
    "FenError",
    "InvalidCastlingRights",
    "InvalidEnPassantSquare",
    "InvalidFullmoveNumber",
    "InvalidHalfmoveClock",
    "InvalidPieceLetter",
    "InvalidSideToMove",
    "RankOverflow",
    "RankUnderflow",
    "WrongFieldCount",
    "WrongRankCount",
]
