"""Pseudo-legal move generation into a legality table.

Moves that leave the own king attacked are not filtered out.
"""

from __future__ import annotations

import logging

from chesslet.core.board import Board
from chesslet.core.enums import (
    ALL_DIRECTIONS,
    DIAGONALS,
    ORTHOGONALS,
    Color,
    Direction,
    PieceType,
)
from chesslet.core.geometry import SQUARES_TO_EDGE
from chesslet.core.move import LegalityTable, Move
from chesslet.core.piece import Piece
from chesslet.core.types import SQUARE_COUNT, Square, col_of, is_valid_square, row_of

_LOGGER = logging.getLogger(__name__)

KNIGHT_OFFSETS: tuple[int, ...] = (-17, -15, -10, -6, 6, 10, 15, 17)

_SLIDING_DIRECTIONS: dict[PieceType, tuple[Direction, ...]] = {
    PieceType.BISHOP: DIAGONALS,
    PieceType.ROOK: ORTHOGONALS,
    PieceType.QUEEN: ALL_DIRECTIONS,
}

_LEFT_EDGE = (0, 1)
_RIGHT_EDGE = (6, 7)

# color -> (forward, capture towards west, capture towards east)
_PAWN_DIRECTIONS: dict[Color, tuple[Direction, Direction, Direction]] = {
    Color.WHITE: (Direction.NORTH, Direction.NORTH_WEST, Direction.NORTH_EAST),
    Color.BLACK: (Direction.SOUTH, Direction.SOUTH_WEST, Direction.SOUTH_EAST),
}
_PAWN_HOME_ROW: dict[Color, int] = {Color.WHITE: 6, Color.BLACK: 1}


class MoveGenerator:
    """Builds the legality table for one side of a :class:`Board`.

    Generation consumes pending en passant flags: a pawn's
    ``can_en_passant`` is cleared on the board as soon as it has been
    considered, so the opportunity lasts for exactly one pass.
    """

    __slots__ = ("_board",)

    def __init__(self, board: Board) -> None:
        self._board = board

    # -- Public API ---------------------------------------------------------

    def generate(self, side_to_move: Color) -> LegalityTable:
        """Moves for every square occupied by *side_to_move*.

        Each such square gets an entry, empty when the piece cannot move.
        """
        table: LegalityTable = {}
        for sq in range(SQUARE_COUNT):
            piece = self._board[sq]
            if piece is None or piece.color != side_to_move:
                continue
            table[sq] = self.moves_for(sq, piece)
        _LOGGER.debug(
            "Generated %d moves for %s across %d squares",
            sum(len(moves) for moves in table.values()),
            side_to_move,
            len(table),
        )
        return table

    def moves_for(self, sq: Square, piece: Piece) -> list[Move]:
        moves: list[Move] = []
        ptype = piece.piece_type
        if ptype.is_sliding:
            self._gen_sliding(sq, piece, _SLIDING_DIRECTIONS[ptype], moves)
        elif ptype == PieceType.KNIGHT:
            self._gen_knight(sq, piece, moves)
        elif ptype == PieceType.KING:
            self._gen_king(sq, piece, moves)
        else:
            self._gen_pawn(sq, piece, moves)
        return moves

    # -- Piece-specific generators (private) -------------------------------

    def _gen_sliding(
        self,
        sq: Square,
        piece: Piece,
        directions: tuple[Direction, ...],
        moves: list[Move],
    ) -> None:
        board = self._board
        edge = SQUARES_TO_EDGE[sq]
        for direction in directions:
            offset = direction.offset
            for n in range(1, edge[direction] + 1):
                to_sq = sq + offset * n
                target = board[to_sq]
                if target is None:
                    moves.append(Move(sq, to_sq))
                    continue
                if piece.is_enemy(target):
                    moves.append(Move(sq, to_sq))
                break

    def _gen_knight(self, sq: Square, piece: Piece, moves: list[Move]) -> None:
        board = self._board
        col = col_of(sq)
        for offset in KNIGHT_OFFSETS:
            to_sq = sq + offset
            if not is_valid_square(to_sq):
                continue
            to_col = col_of(to_sq)
            # A jump of at most two files that lands on the far edge wrapped a row.
            if col in _LEFT_EDGE and to_col in _RIGHT_EDGE:
                continue
            if col in _RIGHT_EDGE and to_col in _LEFT_EDGE:
                continue
            if not piece.is_ally(board[to_sq]):
                moves.append(Move(sq, to_sq))

    def _gen_king(self, sq: Square, piece: Piece, moves: list[Move]) -> None:
        board = self._board
        edge = SQUARES_TO_EDGE[sq]
        for direction in ALL_DIRECTIONS:
            if edge[direction] < 1:
                continue
            to_sq = sq + direction.offset
            if not piece.is_ally(board[to_sq]):
                moves.append(Move(sq, to_sq))

        if piece.can_castle:
            self._gen_castling(sq, piece, moves)

    def _gen_castling(self, king_sq: Square, king: Piece, moves: list[Move]) -> None:
        board = self._board
        edge = SQUARES_TO_EDGE[king_sq]
        for direction in (Direction.WEST, Direction.EAST):
            distance = edge[direction]
            # The king travels two files and the rook lands beside it.
            if distance < 3:
                continue
            offset = direction.offset
            rook = board[king_sq + offset * distance]
            if (
                rook is None
                or rook.piece_type != PieceType.ROOK
                or not king.is_ally(rook)
                or not rook.can_castle
            ):
                continue
            if all(board.is_empty(king_sq + offset * n) for n in range(1, distance)):
                moves.append(Move(king_sq, king_sq + offset * 2))

    def _gen_pawn(self, sq: Square, piece: Piece, moves: list[Move]) -> None:
        board = self._board
        edge = SQUARES_TO_EDGE[sq]
        forward, west_capture, east_capture = _PAWN_DIRECTIONS[piece.color]

        # Forward pushes never capture.
        count = 2 if row_of(sq) == _PAWN_HOME_ROW[piece.color] else 1
        for n in range(1, min(count, edge[forward]) + 1):
            to_sq = sq + forward.offset * n
            if not board.is_empty(to_sq):
                break
            moves.append(Move(sq, to_sq))

        for capture in (west_capture, east_capture):
            if edge[capture] < 1:
                continue
            to_sq = sq + capture.offset
            if piece.is_enemy(board[to_sq]):
                moves.append(Move(sq, to_sq))

        side = piece.can_en_passant
        if side is not None:
            capture = west_capture if side == Direction.WEST else east_capture
            # The passed-over square is empty right after the double step.
            if edge[capture] >= 1 and board.is_empty(sq + capture.offset):
                moves.append(Move(sq, sq + capture.offset))
            board[sq] = piece.with_en_passant(None)
            _LOGGER.debug("En passant towards %s consumed at square %d", side.name, sq)
