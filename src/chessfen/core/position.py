"""Position — complete game state (board + metadata) as an immutable value."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Any

from chessfen.core.board import Board
from chessfen.core.castling import can_castle
from chessfen.core.enums import CastlingRights, CastlingSide, Color
from chessfen.core.piece import Piece
from chessfen.core.types import Coordinate, Rank

# Ranks a double pawn push can skip over.
_EN_PASSANT_RANKS = (Rank.THREE, Rank.SIX)


@dataclass(frozen=True, slots=True)
class Position:
    """Full chess position: board + side to move + castling + en passant + clocks.

    Instances are never modified. Code that plays a move builds a new
    position, usually through :meth:`replace`.
    """

    board: Board = field(default_factory=Board.initial)
    side_to_move: Color = Color.WHITE
    castling: CastlingRights = CastlingRights.ALL
    en_passant: Coordinate | None = None
    halfmove_clock: int = 0
    fullmove_number: int = 1

    def __post_init__(self) -> None:
        if self.halfmove_clock < 0:
            raise ValueError(f"Halfmove clock must be non-negative: {self.halfmove_clock}")
        if self.fullmove_number < 1:
            raise ValueError(f"Fullmove number must be positive: {self.fullmove_number}")

    @classmethod
    def initial(cls) -> Position:
        """Standard new-game position."""
        return cls(Board.initial())

    # ── Read API ─────────────────────────────────────────────────────────

    def piece_at(self, coord: Coordinate) -> Piece | None:
        return self.board.piece_at(coord)

    def can_castle(self, color: Color, side: CastlingSide) -> bool:
        return can_castle(self.castling, color, side)

    def has_plausible_en_passant(self) -> bool:
        """Whether the en-passant target, if any, sits on rank 3 or 6."""
        return self.en_passant is None or self.en_passant.rank in _EN_PASSANT_RANKS

    # ── Utilities ────────────────────────────────────────────────────────

    def replace(self, **changes: Any) -> Position:
        """New position with *changes* applied to the named fields."""
        return dataclasses.replace(self, **changes)

    def __str__(self) -> str:
        from chessfen.core.display import render_position

        return render_position(self)
