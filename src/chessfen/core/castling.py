"""Castling-rights lookup by color and side."""

from __future__ import annotations

from chessfen.core.enums import CastlingRights, CastlingSide, Color

_RIGHTS: dict[tuple[Color, CastlingSide], CastlingRights] = {
    (Color.WHITE, CastlingSide.KINGSIDE): CastlingRights.WHITE_KINGSIDE,
    (Color.WHITE, CastlingSide.QUEENSIDE): CastlingRights.WHITE_QUEENSIDE,
    (Color.BLACK, CastlingSide.KINGSIDE): CastlingRights.BLACK_KINGSIDE,
    (Color.BLACK, CastlingSide.QUEENSIDE): CastlingRights.BLACK_QUEENSIDE,
}

# FEN letter for each single right, in canonical output order.
FEN_CASTLING_LETTERS: dict[str, CastlingRights] = {
    "K": CastlingRights.WHITE_KINGSIDE,
    "Q": CastlingRights.WHITE_QUEENSIDE,
    "k": CastlingRights.BLACK_KINGSIDE,
    "q": CastlingRights.BLACK_QUEENSIDE,
}


def castling_right(color: Color, side: CastlingSide) -> CastlingRights:
    """The single flag for *color* castling towards *side*."""
    return _RIGHTS[(color, side)]


def can_castle(rights: CastlingRights, color: Color, side: CastlingSide) -> bool:
    return bool(rights & castling_right(color, side))
