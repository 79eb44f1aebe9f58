"""FEN decoding errors.

Every rejection raised by :func:`chessfen.core.notation.position_from_fen`
is a :class:`FenError`. The base class derives from :class:`ValueError` so
callers that only care about "bad input" can keep catching that.
"""

from __future__ import annotations


class FenError(ValueError):
    """Base class for malformed FEN input.

    ``text`` is the offending substring and ``expected`` a short description
    of the accepted shape.
    """

    expected: str = "valid Forsyth-Edwards Notation"

    def __init__(self, text: str, expected: str | None = None, *, detail: str = "") -> None:
        self.text = text
        if expected is not None:
            self.expected = expected
        self.detail = detail
        super().__init__(self._format())

    def _format(self) -> str:
        msg = f"Invalid FEN {self.field_label}: {self.text!r} (expected {self.expected})"
        if self.detail:
            msg += f"; {self.detail}"
        return msg

    @property
    def field_label(self) -> str:
        return "string"


class WrongFieldCount(FenError):
    expected = "6 space-separated fields"

    @property
    def field_label(self) -> str:
        return "field count"


class WrongRankCount(FenError):
    expected = "8 '/'-separated ranks"

    @property
    def field_label(self) -> str:
        return "rank count"


class RankOverflow(FenError):
    expected = "at most 8 squares per rank"

    @property
    def field_label(self) -> str:
        return "rank width"


class RankUnderflow(FenError):
    expected = "exactly 8 squares per rank"

    @property
    def field_label(self) -> str:
        return "rank width"


class InvalidPieceLetter(FenError):
    expected = "one of 'pnbrqkPNBRQK'"

    @property
    def field_label(self) -> str:
        return "piece letter"


class InvalidSideToMove(FenError):
    expected = "'w' or 'b'"

    @property
    def field_label(self) -> str:
        return "side-to-move field"


class InvalidCastlingRights(FenError):
    expected = "'-' or distinct letters from 'KQkq'"

    @property
    def field_label(self) -> str:
        return "castling field"


class InvalidEnPassantSquare(FenError):
    expected = "'-' or a square like 'e3'"

    @property
    def field_label(self) -> str:
        return "en-passant square"


class InvalidHalfmoveClock(FenError):
    expected = "a non-negative integer"

    @property
    def field_label(self) -> str:
        return "halfmove clock"


class InvalidFullmoveNumber(FenError):
    expected = "a positive integer"

    @property
    def field_label(self) -> str:
        return "fullmove number"


__all__ = [
    "FenError",
    "WrongFieldCount",
    "WrongRankCount",
    "RankOverflow",
    "RankUnderflow",
    "InvalidPieceLetter",
    "InvalidSideToMove",
    "InvalidCastlingRights",
    "InvalidEnPassantSquare",
    "InvalidHalfmoveClock",
    "InvalidFullmoveNumber",
]
