"""Move validation against a legality table, and move application.

:func:`apply_move` trusts the table it is given: no legality is recomputed
here, so the caller must hand over a table generated for the current board.
"""

from __future__ import annotations

import logging

from chesslet.core.board import Board
from chesslet.core.enums import Direction, MoveAction, PieceType
from chesslet.core.move import LegalityTable, is_listed
from chesslet.core.piece import Piece
from chesslet.core.types import Square, col_of, make_square, row_of

_LOGGER = logging.getLogger(__name__)


class CastlingError(ValueError):
    """A castling-shaped move that cannot be carried out on the board."""


def apply_move(
    start: Square,
    end: Square,
    board: Board,
    piece: Piece,
    legality_table: LegalityTable,
) -> MoveAction:
    """Validate ``start -> end`` for *piece* and apply it to *board*.

    Returns :attr:`MoveAction.INCORRECT` without touching the board when the
    move is not listed for *start*.  Otherwise the origin square is cleared,
    the piece is placed on *end* and special-move flags are updated.

    Raises:
        CastlingError: the king move looks like castling but the rook or the
            file delta does not fit.  Raised before any mutation.
    """
    if not is_listed(start, end, legality_table):
        _LOGGER.debug("Rejected move %d -> %d: not in legality table", start, end)
        return MoveAction.INCORRECT

    delta_row = row_of(end) - row_of(start)
    delta_col = col_of(end) - col_of(start)

    if piece.piece_type == PieceType.KING and piece.can_castle and abs(delta_col) == 2:
        return _castle(start, end, delta_col, board, piece)

    if piece.piece_type == PieceType.PAWN:
        if abs(delta_row) == 2:
            return _double_step(start, end, board, piece)
        if abs(delta_row) == 1 and abs(delta_col) == 1:
            return _pawn_capture(start, end, board, piece)

    captured = board[end]
    if (
        piece.piece_type == PieceType.ROOK
        and piece.can_castle
        and delta_row == 0
        and abs(delta_col) == 2
    ):
        piece = piece.without_castling()
    board[start] = None
    board[end] = piece
    return MoveAction.MOVE if captured is None else MoveAction.TAKE


# ── Special-move branches ────────────────────────────────────────────────────


def castling_rook_squares(king_end: Square, delta_col: int) -> tuple[Square, Square]:
    """Rook origin and destination for a king landing on *king_end*.

    A king moving two files west takes the rook from column 0; two files
    east, from column 7.  The rook lands next to the king on the inner side.
    """
    row = row_of(king_end)
    if delta_col == -2:
        return make_square(row, 0), king_end + 1
    if delta_col == 2:
        return make_square(row, 7), king_end - 1
    raise CastlingError(f"Castling requires a file delta of +/-2, got {delta_col}")


def _castle(
    start: Square, end: Square, delta_col: int, board: Board, king: Piece
) -> MoveAction:
    try:
        rook_from, rook_to = castling_rook_squares(end, delta_col)
    except CastlingError:
        _LOGGER.error("Malformed castling move %d -> %d", start, end)
        raise
    rook = board[rook_from]
    if rook is None or rook.piece_type != PieceType.ROOK or not king.is_ally(rook):
        _LOGGER.error("Castling %d -> %d without a rook on %d", start, end, rook_from)
        raise CastlingError(f"No castling rook on square {rook_from}")

    board[rook_from] = None
    board[rook_to] = rook.without_castling()
    board[start] = None
    board[end] = king.without_castling()
    return MoveAction.CASTLE


def _double_step(start: Square, end: Square, board: Board, pawn: Piece) -> MoveAction:
    col = col_of(end)
    # neighbour square -> side the neighbour must capture towards
    neighbours: list[tuple[Square, Direction]] = []
    if col > 0:
        neighbours.append((end - 1, Direction.EAST))
    if col < board.size - 1:
        neighbours.append((end + 1, Direction.WEST))

    for sq, side in neighbours:
        other = board[sq]
        if _is_enemy_pawn(pawn, other):
            board[sq] = other.with_en_passant(side)
            _LOGGER.debug("Pawn on %d may take en passant towards %s", sq, side.name)

    board[start] = None
    board[end] = pawn
    return MoveAction.MOVE


def _pawn_capture(start: Square, end: Square, board: Board, pawn: Piece) -> MoveAction:
    if board[end] is None:
        # En passant: the passed pawn sits beside the origin, on the target file.
        passed_sq = make_square(row_of(start), col_of(end))
        passed = board[passed_sq]
        if _is_enemy_pawn(pawn, passed):
            board[passed_sq] = None
            _LOGGER.debug("En passant capture removed pawn on %d", passed_sq)

    board[start] = None
    board[end] = pawn
    return MoveAction.TAKE


def _is_enemy_pawn(pawn: Piece, other: Piece | None) -> bool:
    return (
        other is not None
        and other.piece_type == PieceType.PAWN
        and pawn.is_enemy(other)
    )
