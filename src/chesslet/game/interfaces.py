"""Abstract interfaces for the game layer.

Front ends (window, sound, input mapping) depend on these, not on the
concrete controller.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum, auto
from typing import TYPE_CHECKING

from chesslet.core.enums import MoveAction

if TYPE_CHECKING:
    from chesslet.core.move import Move
    from chesslet.core.types import Square
    from chesslet.game.settings import GameSettings


# ── Game phase FSM states ────────────────────────────────────────────────────


class GamePhase(IntEnum):
    """Finite-state-machine states for a single ply."""

    NOT_STARTED = auto()
    IDLE = auto()  # waiting for the side to move to pick a piece
    PIECE_HELD = auto()


class IGameController(ABC):
    """Interface for the game orchestrator."""

    @abstractmethod
    def new_game(self, settings: GameSettings | None = None) -> None:
        """Set up a new game."""

    @abstractmethod
    def select(self, row: int, col: int) -> bool:
        """Pick up the piece on ``(row, col)``. Returns True if one is held."""

    @abstractmethod
    def release(self, row: int, col: int) -> MoveAction:
        """Drop the held piece on ``(row, col)``."""

    @abstractmethod
    def cancel_hold(self) -> None:
        """Put the held piece back without moving."""

    @abstractmethod
    def play(self, start: Square, end: Square) -> MoveAction:
        """Select and release in one step."""

    @abstractmethod
    def highlighted_moves(self) -> list[Move]:
        """Legal moves of the held piece, for display."""
