"""Tests for human-readable rendering."""

from chessfen.core.display import RenderOptions, render_board, render_position
from chessfen.core.notation import position_from_fen
from chessfen.core.position import Position

_STARTING_GRID = "\n".join(
    [
        "rnbqkbnr",
        "pppppppp",
        "........",
        "........",
        "........",
        "........",
        "PPPPPPPP",
        "RNBQKBNR",
    ]
)


class TestRenderPosition:
    def test_starting_grid(self, starting_position: Position) -> None:
        assert render_position(starting_position) == _STARTING_GRID

    def test_eight_lines_of_eight(self, starting_position: Position) -> None:
        lines = render_position(starting_position).splitlines()
        assert len(lines) == 8
        assert all(len(line) == 8 for line in lines)

    def test_custom_empty_glyph(self, empty_position: Position) -> None:
        text = render_position(empty_position, RenderOptions(empty_glyph="*"))
        assert text == "\n".join(["********"] * 8)

    def test_rank_eight_first(self) -> None:
        pos = position_from_fen("k7/8/8/8/8/8/8/7K w - - 0 1")
        lines = render_position(pos).splitlines()
        assert lines[0] == "k......."
        assert lines[-1] == ".......K"

    def test_unicode(self, starting_position: Position) -> None:
        lines = render_position(starting_position, RenderOptions(unicode=True)).splitlines()
        assert lines[0] == "♜♞♝♛♚♝♞♜"
        assert lines[7] == "♖♘♗♕♔♗♘♖"


class TestRenderCoordinates:
    def test_labels(self, starting_position: Position) -> None:
        lines = render_board(starting_position.board, RenderOptions(coordinates=True)).splitlines()
        assert len(lines) == 9
        assert lines[0] == "8 r n b q k b n r"
        assert lines[3] == "5 . . . . . . . ."
        assert lines[-1] == "  a b c d e f g h"

    def test_board_repr_uses_coordinates(self, starting_position: Position) -> None:
        assert repr(starting_position.board).startswith("8 r n b q k b n r")
