"""Plain-text board rendering for people, not for persistence."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from chessfen.core.piece import EMPTY_GLYPH, Piece
from chessfen.core.types import make_square

if TYPE_CHECKING:
    from chessfen.core.board import Board
    from chessfen.core.position import Position

_FILE_LEGEND = "  a b c d e f g h"


@dataclass(frozen=True, slots=True)
class RenderOptions:
    """How :func:`render_board` draws cells.

    The default produces eight lines of eight characters, rank 8 first.
    ``coordinates`` adds rank numbers, a file legend and spaces between
    cells.
    """

    empty_glyph: str = EMPTY_GLYPH
    coordinates: bool = False
    unicode: bool = False


def _cell_text(piece: Piece | None, options: RenderOptions) -> str:
    if piece is None:
        return options.empty_glyph
    return piece.symbol if options.unicode else str(piece)


def render_board(board: Board, options: RenderOptions = RenderOptions()) -> str:
    rows: list[str] = []
    for rank in range(7, -1, -1):
        cells = [_cell_text(board[make_square(file, rank)], options) for file in range(8)]
        if options.coordinates:
            rows.append(f"{rank + 1} {' '.join(cells)}")
        else:
            rows.append("".join(cells))
    if options.coordinates:
        rows.append(_FILE_LEGEND)
    return "\n".join(rows)


def render_position(position: Position, options: RenderOptions = RenderOptions()) -> str:
    """Grid of *position*'s board, one line per rank from 8 down to 1."""
    return render_board(position.board, options)
