"""Notation package: FEN parsing and serialization."""

from chessfen.core.notation.fen import (
    FEN_FIELD_COUNT,
    STARTING_FEN,
    position_from_fen,
    position_to_fen,
)

__all__ = [
    "FEN_FIELD_COUNT",
    "STARTING_FEN",
    "position_from_fen",
    "position_to_fen",
]
