"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator

import pytest

from chesslet.core.board import Board
from chesslet.core.move import LegalityTable
from chesslet.core.position import Position


@pytest.fixture
def empty_board() -> Board:
    return Board()


@pytest.fixture
def start_position() -> Position:
    return Position()


@pytest.fixture
def destinations() -> Callable[[LegalityTable, int], list[int]]:
    """Destination squares listed for one origin, in table order."""

    def _destinations(table: LegalityTable, sq: int) -> list[int]:
        return [move.end for move in table[sq]]

    return _destinations


@pytest.fixture(autouse=True)
def _debug_logging(caplog: pytest.LogCaptureFixture) -> Iterator[None]:
    """Capture library debug output so failing tests show the move trace."""
    caplog.set_level(logging.DEBUG, logger="chesslet")
    yield
