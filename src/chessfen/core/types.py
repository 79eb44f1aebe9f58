"""Square index and coordinate helpers.

Board storage uses 0x88 addressing: the low nibble of an index holds the
file and the high nibble holds the rank::

    a1=0x00, b1=0x01, ..., h1=0x07
    a2=0x10, b2=0x11, ..., h2=0x17
    ...
    a8=0x70, b8=0x71, ..., h8=0x77

Only indices with ``sq & 0x88 == 0`` are real squares, so walking off the
board by arithmetic is detected with a single mask test.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import TypeAlias

Square: TypeAlias = int  # 0x00–0x77, see module docstring

BOARD_SLOTS = 128
OFF_BOARD_MASK = 0x88

_FILE_NAMES = "abcdefgh"
_RANK_NAMES = "12345678"


class File(IntEnum):
    """Board file, A–H from White's left."""

    A = 0
    B = 1
    C = 2
    D = 3
    E = 4
    F = 5
    G = 6
    H = 7

    def __str__(self) -> str:
        return _FILE_NAMES[self.value]


class Rank(IntEnum):
    """Board rank, rank 1 is White's back rank."""

    ONE = 0
    TWO = 1
    THREE = 2
    FOUR = 3
    FIVE = 4
    SIX = 5
    SEVEN = 6
    EIGHT = 7

    def __str__(self) -> str:
        return _RANK_NAMES[self.value]


def make_square(file: int, rank: int) -> Square:
    """Create square from file (0–7) and rank (0–7)."""
    assert 0 <= file < 8, f"file out of range: {file}"
    assert 0 <= rank < 8, f"rank out of range: {rank}"
    return (rank << 4) | file


def file_of(sq: Square) -> int:
    """File index 0–7 (a–h)."""
    return sq & 0x0F


def rank_of(sq: Square) -> int:
    """Rank index 0–7 (1–8)."""
    return sq >> 4


def is_on_board(sq: int) -> bool:
    """Check whether integer is a real square of the 0x88 layout."""
    return 0 <= sq < BOARD_SLOTS and not sq & OFF_BOARD_MASK


def square_name(sq: Square) -> str:
    """Human-readable name, e.g. 0x00 → 'a1', 0x77 → 'h8'."""
    return _FILE_NAMES[file_of(sq)] + _RANK_NAMES[rank_of(sq)]


def parse_square(name: str) -> Square:
    """Parse square name, e.g. 'e4' → 0x34."""
    if len(name) != 2 or name[0] not in _FILE_NAMES or name[1] not in _RANK_NAMES:
        raise ValueError(f"Invalid square name: {name!r}")
    return make_square(_FILE_NAMES.index(name[0]), _RANK_NAMES.index(name[1]))


@dataclass(frozen=True, slots=True)
class Coordinate:
    """A (file, rank) pair addressing one of the 64 squares."""

    file: File
    rank: Rank

    def __post_init__(self) -> None:
        # Accept plain ints and normalise them to the enums.
        object.__setattr__(self, "file", File(self.file))
        object.__setattr__(self, "rank", Rank(self.rank))

    @property
    def square(self) -> Square:
        return make_square(self.file, self.rank)

    @property
    def name(self) -> str:
        return f"{self.file}{self.rank}"

    def __str__(self) -> str:
        return self.name

    @classmethod
    def from_square(cls, sq: Square) -> Coordinate:
        if not is_on_board(sq):
            raise ValueError(f"Not an on-board square index: {sq:#04x}")
        return cls(File(file_of(sq)), Rank(rank_of(sq)))

    @classmethod
    def from_name(cls, name: str) -> Coordinate:
        """Parse a square reference like ``'c6'``."""
        return cls.from_square(parse_square(name))


# 64 real squares in a1, b1, ..., h8 order.
SQUARES: tuple[Square, ...] = tuple(
    make_square(file, rank) for rank in range(8) for file in range(8)
)


# ── Named square constants ──────────────────────────────────────────────────

A1, B1, C1, D1, E1, F1, G1, H1 = SQUARES[0:8]
A2, B2, C2, D2, E2, F2, G2, H2 = SQUARES[8:16]
A3, B3, C3, D3, E3, F3, G3, H3 = SQUARES[16:24]
A4, B4, C4, D4, E4, F4, G4, H4 = SQUARES[24:32]
A5, B5, C5, D5, E5, F5, G5, H5 = SQUARES[32:40]
A6, B6, C6, D6, E6, F6, G6, H6 = SQUARES[40:48]
A7, B7, C7, D7, E7, F7, G7, H7 = SQUARES[48:56]
A8, B8, C8, D8, E8, F8, G8, H8 = SQUARES[56:64]
