"""Core enumerations for the rules engine."""

from __future__ import annotations

from enum import IntEnum


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Chess piece types ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6

    @property
    def is_sliding(self) -> bool:
        return self in (PieceType.BISHOP, PieceType.ROOK, PieceType.QUEEN)


class Direction(IntEnum):
    """Compass directions, indexed the same way as the geometry table.

    The first four are orthogonal, the last four diagonal.
    """

    NORTH = 0
    SOUTH = 1
    WEST = 2
    EAST = 3
    NORTH_WEST = 4
    SOUTH_EAST = 5
    NORTH_EAST = 6
    SOUTH_WEST = 7

    @property
    def offset(self) -> int:
        """Flat-index offset of one step in this direction."""
        return DIRECTION_OFFSETS[self]

    @property
    def opposite(self) -> Direction:
        return Direction(self.value ^ 1)


# Flat-index offsets, indexed by Direction.
DIRECTION_OFFSETS: tuple[int, ...] = (-8, 8, -1, 1, -9, 9, -7, 7)

ORTHOGONALS: tuple[Direction, ...] = (
    Direction.NORTH,
    Direction.SOUTH,
    Direction.WEST,
    Direction.EAST,
)
DIAGONALS: tuple[Direction, ...] = (
    Direction.NORTH_WEST,
    Direction.SOUTH_EAST,
    Direction.NORTH_EAST,
    Direction.SOUTH_WEST,
)
ALL_DIRECTIONS: tuple[Direction, ...] = ORTHOGONALS + DIAGONALS


class MoveAction(IntEnum):
    """Outcome of validating a single move request."""

    INCORRECT = 0
    MOVE = 1
    TAKE = 2
    CASTLE = 3
