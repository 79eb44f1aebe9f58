"""Piece value object and its FEN letter codec.

Letter case carries the color (upper = White) and the lower-case letter
carries the kind, so the codec is two small lookups rather than a table of
all twelve pieces.
"""

from __future__ import annotations

from dataclasses import dataclass

from chessfen.core.enums import Color, PieceType
from chessfen.core.errors import InvalidPieceLetter

EMPTY_GLYPH = "."

_KIND_LETTERS: dict[PieceType, str] = {
    PieceType.PAWN: "p",
    PieceType.KNIGHT: "n",
    PieceType.BISHOP: "b",
    PieceType.ROOK: "r",
    PieceType.QUEEN: "q",
    PieceType.KING: "k",
}
_LETTER_KINDS: dict[str, PieceType] = {v: k for k, v in _KIND_LETTERS.items()}

# Unicode chess block: white king U+2654 through white pawn U+2659,
# the black set follows six code points later in the same order.
_UNICODE_ORDER = (
    PieceType.KING,
    PieceType.QUEEN,
    PieceType.ROOK,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.PAWN,
)
_WHITE_KING_CODEPOINT = 0x2654


def piece_from_letter(char: str) -> Piece:
    """Decode a single FEN piece letter, e.g. 'N' → white knight."""
    # ASCII only: the Kelvin sign lower-cases to "k".
    kind = _LETTER_KINDS.get(char.lower()) if len(char) == 1 and char.isascii() else None
    if kind is None:
        raise InvalidPieceLetter(char)
    color = Color.BLACK if char.islower() else Color.WHITE
    return Piece(color, kind)


def piece_letter(piece: Piece | None, empty: str = EMPTY_GLYPH) -> str:
    """FEN letter for *piece*, or *empty* for a vacant cell."""
    if piece is None:
        return empty
    letter = _KIND_LETTERS[piece.piece_type]
    return letter.upper() if piece.color == Color.WHITE else letter


@dataclass(frozen=True, slots=True)
class Piece:
    """A colored chess piece. Vacant squares are ``None``, not a Piece."""

    color: Color
    piece_type: PieceType

    def __str__(self) -> str:
        return piece_letter(self)

    @classmethod
    def from_char(cls, char: str) -> Piece:
        return piece_from_letter(char)

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        offset = _UNICODE_ORDER.index(self.piece_type) + 6 * int(self.color)
        return chr(_WHITE_KING_CODEPOINT + offset)
