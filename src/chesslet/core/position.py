"""Position: board, side to move and the legality table that belongs to them."""

from __future__ import annotations

import logging

from chesslet.core.board import Board
from chesslet.core.enums import Color, MoveAction
from chesslet.core.move import LegalityTable, Move
from chesslet.core.move_generator import MoveGenerator
from chesslet.core.move_validator import apply_move
from chesslet.core.types import Square

_LOGGER = logging.getLogger(__name__)


class Position:
    """Owns a :class:`Board` together with its legality table.

    The table is only valid for the board it was generated from, so the
    board must change through :meth:`play` alone, which regenerates the
    table for the next side after every applied move.  Code that edits the
    board directly (test setup, for instance) must call :meth:`regenerate`
    before relying on the table again.
    """

    __slots__ = ("_board", "_side_to_move", "_legal_moves", "_last_move")

    def __init__(
        self,
        board: Board | None = None,
        side_to_move: Color = Color.WHITE,
    ) -> None:
        self._board = board if board is not None else Board.initial()
        self._side_to_move = side_to_move
        self._last_move: Move | None = None
        self._legal_moves: LegalityTable = {}
        self.regenerate()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def board(self) -> Board:
        """The live board. Read it freely; change it only via :meth:`play`."""
        return self._board

    @property
    def side_to_move(self) -> Color:
        return self._side_to_move

    @property
    def legal_moves(self) -> LegalityTable:
        return self._legal_moves

    @property
    def last_move(self) -> Move | None:
        """The most recently applied move, kept for display."""
        return self._last_move

    def moves_from(self, sq: Square) -> list[Move]:
        """Legal moves starting on *sq* (empty for squares without an entry)."""
        return self._legal_moves.get(sq, [])

    # ── Core move operations ─────────────────────────────────────────────

    def play(self, start: Square, end: Square) -> MoveAction:
        """Validate and apply ``start -> end`` for the side to move.

        On success the side switches and the table is rebuilt; on
        :attr:`MoveAction.INCORRECT` nothing changes.
        """
        piece = self._board[start]
        if piece is None or piece.color != self._side_to_move:
            _LOGGER.debug("No %s piece on square %s", self._side_to_move, start)
            return MoveAction.INCORRECT

        action = apply_move(start, end, self._board, piece, self._legal_moves)
        if action == MoveAction.INCORRECT:
            return action

        self._last_move = Move(start, end)
        self._side_to_move = self._side_to_move.opposite
        self.regenerate()
        _LOGGER.debug("Played %s (%s)", self._last_move, action.name)
        return action

    def regenerate(self) -> LegalityTable:
        """Rebuild the legality table for the side to move."""
        self._legal_moves = MoveGenerator(self._board).generate(self._side_to_move)
        return self._legal_moves
