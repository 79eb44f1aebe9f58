"""Board - immutable piece placement stored with 0x88 addressing."""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence

from chessfen.core.enums import Color, PieceType
from chessfen.core.piece import Piece
from chessfen.core.types import (
    BOARD_SLOTS,
    SQUARES,
    Coordinate,
    Square,
    is_on_board,
    make_square,
)

_BACK_RANK = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """64-square board backed by a 128-slot 0x88 array.

    Boards never change after construction; :meth:`with_piece` returns a new
    board instead.
    """

    __slots__ = ("_cells",)

    def __init__(self, cells: Sequence[Piece | None] | None = None) -> None:
        if cells is None:
            self._cells: tuple[Piece | None, ...] = (None,) * BOARD_SLOTS
            return
        # Snapshot so later changes to the caller's sequence cannot leak in.
        snapshot = tuple(cells)
        if len(snapshot) != BOARD_SLOTS:
            raise ValueError(f"Board needs {BOARD_SLOTS} cells, got {len(snapshot)}")
        for sq, piece in enumerate(snapshot):
            if piece is not None and not is_on_board(sq):
                raise ValueError(f"Padding slot {sq:#04x} must be empty, got {piece!r}")
        self._cells = snapshot

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        if not is_on_board(sq):
            raise IndexError(f"Square index {sq!r} is off the board")
        return self._cells[sq]

    def piece_at(self, coord: Coordinate) -> Piece | None:
        return self._cells[coord.square]

    def is_empty(self, sq: Square) -> bool:
        return self[sq] is None

    def items(self) -> Iterator[tuple[Square, Piece | None]]:
        """All 64 squares with their contents, a1 to h8."""
        for sq in SQUARES:
            yield sq, self._cells[sq]

    def occupied(self) -> Iterator[tuple[Square, Piece]]:
        for sq, piece in self.items():
            if piece is not None:
                yield sq, piece

    # -- Derivation ---------------------------------------------------------

    def with_piece(self, sq: Square, piece: Piece | None) -> Board:
        """Copy of this board with *sq* set to *piece* (``None`` clears it)."""
        if not is_on_board(sq):
            raise IndexError(f"Square index {sq!r} is off the board")
        cells = list(self._cells)
        cells[sq] = piece
        return Board(tuple(cells))

    # -- Factory ------------------------------------------------------------

    @classmethod
    def from_pieces(cls, pieces: Mapping[Square, Piece]) -> Board:
        cells: list[Piece | None] = [None] * BOARD_SLOTS
        for sq, piece in pieces.items():
            if not is_on_board(sq):
                raise IndexError(f"Square index {sq!r} is off the board")
            cells[sq] = piece
        return cls(tuple(cells))

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        pieces: dict[Square, Piece] = {}
        for f, pt in enumerate(_BACK_RANK):
            pieces[make_square(f, 0)] = Piece(Color.WHITE, pt)
            pieces[make_square(f, 1)] = Piece(Color.WHITE, PieceType.PAWN)
            pieces[make_square(f, 6)] = Piece(Color.BLACK, PieceType.PAWN)
            pieces[make_square(f, 7)] = Piece(Color.BLACK, pt)
        return cls.from_pieces(pieces)

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    def __hash__(self) -> int:
        return hash(self._cells)

    def __repr__(self) -> str:
        from chessfen.core.display import RenderOptions, render_board

        return render_board(self, RenderOptions(coordinates=True))
