"""GameController: drives a game one ply at a time.

Coordinates: Position (board + legality table), the held piece, and the
listeners that turn move outcomes into sound or animation.
Emits events via simple callbacks so front ends / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from chesslet.core.enums import MoveAction
from chesslet.core.layout import board_from_layout
from chesslet.core.move import Move
from chesslet.core.position import Position
from chesslet.core.types import BOARD_SIZE, Square, make_square
from chesslet.game.interfaces import GamePhase, IGameController
from chesslet.game.settings import GameSettings

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[Move, MoveAction, Position], None]  # move, action, position
RejectedCallback = Callable[[Move], None]
PhaseCallback = Callable[[GamePhase], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_rejected: list[RejectedCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController(IGameController):
    """Runs the select → release cycle for the side to move.

    Holding a piece does not lift it off the board: the board only changes
    through :meth:`Position.play`, so the legality table stays in step with
    it.  A rejected release simply drops the hold and the piece is still on
    its origin square.

    Thread-safety: methods are designed to be called from a single thread.
    """

    __slots__ = ("_position", "_phase", "_held", "events")

    def __init__(self) -> None:
        self._position: Position | None = None
        self._phase = GamePhase.NOT_STARTED
        self._held: Square | None = None
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def position(self) -> Position:
        if self._position is None:
            raise RuntimeError("No game in progress; call new_game() first")
        return self._position

    @property
    def phase(self) -> GamePhase:
        return self._phase

    @property
    def held_square(self) -> Square | None:
        return self._held

    # ── IGameController impl ─────────────────────────────────────────────

    def new_game(self, settings: GameSettings | None = None) -> None:
        settings = settings or GameSettings()
        board = board_from_layout(settings.layout)
        self._position = Position(board, settings.first_player)
        self._held = None
        _LOGGER.info(
            "New game: %s to move, layout %s", settings.first_player, settings.layout
        )
        self._set_phase(GamePhase.IDLE)

    def select(self, row: int, col: int) -> bool:
        if self._phase == GamePhase.NOT_STARTED or not _on_board(row, col):
            return False
        sq = make_square(row, col)
        piece = self.position.board.get(row, col)
        if piece is None or piece.color != self.position.side_to_move:
            return False

        self._held = sq
        self._set_phase(GamePhase.PIECE_HELD)
        return True

    def release(self, row: int, col: int) -> MoveAction:
        if self._held is None:
            return MoveAction.INCORRECT
        if not _on_board(row, col):
            self.cancel_hold()
            return MoveAction.INCORRECT
        return self._submit(self._held, make_square(row, col))

    def cancel_hold(self) -> None:
        if self._held is None:
            return
        self._held = None
        self._set_phase(GamePhase.IDLE)

    def play(self, start: Square, end: Square) -> MoveAction:
        if self._phase == GamePhase.NOT_STARTED:
            return MoveAction.INCORRECT
        return self._submit(start, end)

    def highlighted_moves(self) -> list[Move]:
        if self._held is None:
            return []
        return list(self.position.moves_from(self._held))

    # ── Internal helpers ─────────────────────────────────────────────────

    def _submit(self, start: Square, end: Square) -> MoveAction:
        self._held = None
        position = self.position
        action = position.play(start, end)
        move = Move(start, end)

        if action == MoveAction.INCORRECT:
            _LOGGER.info("Rejected move %s for %s", move, position.side_to_move)
            self._emit_rejected(move)
        else:
            self._emit_move(move, action)
        self._set_phase(GamePhase.IDLE)
        return action

    def _set_phase(self, phase: GamePhase) -> None:
        if phase == self._phase:
            return
        self._phase = phase
        for cb in self.events.on_phase_changed:
            cb(phase)

    def _emit_move(self, move: Move, action: MoveAction) -> None:
        for cb in self.events.on_move:
            cb(move, action, self.position)

    def _emit_rejected(self, move: Move) -> None:
        for cb in self.events.on_rejected:
            cb(move)


def _on_board(row: int, col: int) -> bool:
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE
