"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import pytest

from chessfen.core.notation import STARTING_FEN, position_from_fen
from chessfen.core.position import Position


@pytest.fixture
def starting_position() -> Position:
    """Starting position decoded from FEN rather than built in code."""
    return position_from_fen(STARTING_FEN)


@pytest.fixture
def empty_position() -> Position:
    return position_from_fen("8/8/8/8/8/8/8/8 w - - 0 1")
