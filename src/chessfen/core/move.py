"""Move value objects (UCI-style representation).

Moves here are plain data. Nothing in this package applies them to a
position.
"""

from __future__ import annotations

from dataclasses import dataclass

from chessfen.core.enums import CastlingSide, Color, PieceType
from chessfen.core.types import Coordinate, File, Rank

_PROMO_CHARS: dict[PieceType, str] = {
    PieceType.KNIGHT: "n",
    PieceType.BISHOP: "b",
    PieceType.ROOK: "r",
    PieceType.QUEEN: "q",
}
_PROMO_TYPES: dict[str, PieceType] = {v: k for k, v in _PROMO_CHARS.items()}

# (king from, king to, rook from, rook to) files per castling side.
_CASTLING_FILES: dict[CastlingSide, tuple[File, File, File, File]] = {
    CastlingSide.KINGSIDE: (File.E, File.G, File.H, File.F),
    CastlingSide.QUEENSIDE: (File.E, File.C, File.A, File.D),
}


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable value object representing a single piece movement."""

    from_coord: Coordinate
    to_coord: Coordinate
    promotion: PieceType | None = None

    def __post_init__(self) -> None:
        if self.promotion is not None and self.promotion not in _PROMO_CHARS:
            raise ValueError(f"Cannot promote to {self.promotion.name}")

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        base = f"{self.from_coord}{self.to_coord}"
        if self.promotion is not None:
            base += _PROMO_CHARS[self.promotion]
        return base

    @property
    def uci(self) -> str:
        """UCI long-algebraic notation."""
        return str(self)

    @classmethod
    def from_uci(cls, text: str) -> Move:
        """Parse ``'e2e4'`` or ``'e7e8q'``."""
        if len(text) not in (4, 5):
            raise ValueError(f"Invalid UCI move: {text!r}")
        try:
            from_coord = Coordinate.from_name(text[0:2])
            to_coord = Coordinate.from_name(text[2:4])
        except ValueError:
            raise ValueError(f"Invalid UCI move: {text!r}") from None
        promotion = None
        if len(text) == 5:
            promotion = _PROMO_TYPES.get(text[4])
            if promotion is None:
                raise ValueError(f"Invalid UCI promotion piece: {text!r}")
        return cls(from_coord, to_coord, promotion)


@dataclass(frozen=True, slots=True)
class CastlingMove:
    """Castling expressed as its king and rook movements."""

    king: Move
    rook: Move

    def __str__(self) -> str:
        return str(self.king)

    @classmethod
    def for_side(cls, color: Color, side: CastlingSide) -> CastlingMove:
        rank = Rank.ONE if color == Color.WHITE else Rank.EIGHT
        king_from, king_to, rook_from, rook_to = _CASTLING_FILES[side]
        return cls(
            king=Move(Coordinate(king_from, rank), Coordinate(king_to, rank)),
            rook=Move(Coordinate(rook_from, rank), Coordinate(rook_to, rank)),
        )
