"""Tests for the Position value object."""

import dataclasses

import pytest

from chessfen.core.board import Board
from chessfen.core.enums import CastlingRights, CastlingSide, Color, PieceType
from chessfen.core.notation import STARTING_FEN, position_from_fen
from chessfen.core.piece import Piece
from chessfen.core.position import Position
from chessfen.core.types import E1, Coordinate


class TestInitial:
    def test_defaults(self) -> None:
        pos = Position.initial()
        assert pos.board == Board.initial()
        assert pos.side_to_move == Color.WHITE
        assert pos.castling == CastlingRights.ALL
        assert pos.en_passant is None
        assert pos.halfmove_clock == 0
        assert pos.fullmove_number == 1

    def test_no_arg_constructor_matches_initial(self) -> None:
        assert Position() == Position.initial()

    def test_matches_starting_fen(self) -> None:
        assert position_from_fen(STARTING_FEN) == Position.initial()


class TestReadApi:
    def test_piece_at(self, starting_position: Position) -> None:
        assert starting_position.piece_at(Coordinate.from_name("e1")) == Piece(
            Color.WHITE, PieceType.KING
        )
        assert starting_position.piece_at(Coordinate.from_name("e4")) is None

    def test_can_castle(self) -> None:
        pos = Position(castling=CastlingRights.WHITE_KINGSIDE | CastlingRights.BLACK_QUEENSIDE)
        assert pos.can_castle(Color.WHITE, CastlingSide.KINGSIDE)
        assert not pos.can_castle(Color.WHITE, CastlingSide.QUEENSIDE)
        assert not pos.can_castle(Color.BLACK, CastlingSide.KINGSIDE)
        assert pos.can_castle(Color.BLACK, CastlingSide.QUEENSIDE)

    def test_plausible_en_passant(self) -> None:
        assert Position().has_plausible_en_passant()
        assert Position(en_passant=Coordinate.from_name("e3")).has_plausible_en_passant()
        assert Position(en_passant=Coordinate.from_name("d6")).has_plausible_en_passant()
        assert not Position(en_passant=Coordinate.from_name("e4")).has_plausible_en_passant()


class TestImmutability:
    def test_fields_frozen(self, starting_position: Position) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            starting_position.halfmove_clock = 5  # type: ignore[misc]

    def test_replace_builds_new_position(self, starting_position: Position) -> None:
        moved = starting_position.replace(
            board=starting_position.board.with_piece(E1, None),
            side_to_move=Color.BLACK,
        )
        assert moved.side_to_move == Color.BLACK
        assert moved.board[E1] is None
        assert starting_position.side_to_move == Color.WHITE
        assert starting_position.board[E1] is not None

    def test_structural_equality(self) -> None:
        assert Position() == Position()
        assert Position() != Position(fullmove_number=2)
        assert Position() != Position(en_passant=Coordinate.from_name("e3"))

    def test_hashable(self) -> None:
        assert hash(Position()) == hash(Position.initial())


class TestValidation:
    def test_negative_halfmove_rejected(self) -> None:
        with pytest.raises(ValueError, match="Halfmove"):
            Position(halfmove_clock=-1)

    def test_zero_fullmove_rejected(self) -> None:
        with pytest.raises(ValueError, match="Fullmove"):
            Position(fullmove_number=0)

    def test_str_renders_grid(self) -> None:
        lines = str(Position()).splitlines()
        assert lines[0] == "rnbqkbnr"
        assert lines[-1] == "RNBQKBNR"
