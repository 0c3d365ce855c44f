"""Precomputed distance-to-edge table.

``SQUARES_TO_EDGE[sq][direction]`` is the number of steps a piece on *sq*
can take in *direction* before leaving the board.  Every ray, king step and
pawn step is range-checked against this table rather than by offset
arithmetic, which would wrap across rows on the flat board.
"""

from __future__ import annotations

from typing import Final

from chesslet.core.enums import Direction
from chesslet.core.types import BOARD_SIZE, Square

EdgeSteps = tuple[int, int, int, int, int, int, int, int]


def build_geometry(size: int = BOARD_SIZE) -> tuple[EdgeSteps, ...]:
    """Steps to the board edge for each square, in :class:`Direction` order."""
    table: list[EdgeSteps] = []
    for row in range(size):
        for col in range(size):
            north = row
            south = size - 1 - row
            west = col
            east = size - 1 - col
            table.append(
                (
                    north,
                    south,
                    west,
                    east,
                    min(north, west),
                    min(south, east),
                    min(north, east),
                    min(south, west),
                )
            )
    return tuple(table)


SQUARES_TO_EDGE: Final = build_geometry()


def steps_to_edge(sq: Square, direction: Direction) -> int:
    return SQUARES_TO_EDGE[sq][direction]
