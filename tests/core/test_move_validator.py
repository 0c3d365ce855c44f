"""Tests for apply_move: validation, branches, flag updates."""

import logging

import pytest

from chesslet.core.board import Board
from chesslet.core.enums import Color, Direction, MoveAction, PieceType
from chesslet.core.layout import STARTING_LAYOUT, board_from_layout
from chesslet.core.move import Move, is_listed
from chesslet.core.move_generator import MoveGenerator
from chesslet.core.move_validator import (
    CastlingError,
    apply_move,
    castling_rook_squares,
)
from chesslet.core.piece import Piece

WHITE_PAWN = Piece(Color.WHITE, PieceType.PAWN)
BLACK_PAWN = Piece(Color.BLACK, PieceType.PAWN)


def _play(board: Board, side: Color, start: int, end: int) -> MoveAction:
    table = MoveGenerator(board).generate(side)
    piece = board[start]
    assert piece is not None
    return apply_move(start, end, board, piece, table)


class TestIsListed:
    def test_listed_move(self) -> None:
        table = {52: [Move(52, 44), Move(52, 36)]}
        assert is_listed(52, 36, table)

    def test_unlisted_destination(self) -> None:
        table = {52: [Move(52, 44), Move(52, 36)]}
        assert not is_listed(52, 28, table)

    def test_origin_without_entry(self) -> None:
        assert not is_listed(12, 20, {52: [Move(52, 44)]})

    def test_origin_with_empty_list(self) -> None:
        assert not is_listed(56, 48, {56: []})


class TestRejection:
    def test_move_not_in_table_leaves_board_unchanged(self) -> None:
        board = board_from_layout(STARTING_LAYOUT)
        before = board.copy()
        table = MoveGenerator(board).generate(Color.WHITE)
        piece = board[52]
        assert piece is not None

        action = apply_move(52, 28, board, piece, table)  # e2-e5

        assert action == MoveAction.INCORRECT
        assert board == before

    def test_unknown_origin(self) -> None:
        board = board_from_layout(STARTING_LAYOUT)
        before = board.copy()
        action = apply_move(36, 28, board, WHITE_PAWN, {})
        assert action == MoveAction.INCORRECT
        assert board == before

    def test_rejection_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        board = Board()
        apply_move(0, 1, board, WHITE_PAWN, {})
        assert any("not in legality table" in r.message for r in caplog.records)


class TestDefaultBranch:
    def test_quiet_move(self) -> None:
        board = board_from_layout(STARTING_LAYOUT)
        assert _play(board, Color.WHITE, 57, 42) == MoveAction.MOVE  # Nb1-c3
        assert board[57] is None
        assert board[42] == Piece(Color.WHITE, PieceType.KNIGHT)

    def test_capture(self) -> None:
        board = board_from_layout("r7/8/8/8/8/8/8/R7")
        assert _play(board, Color.WHITE, 56, 0) == MoveAction.TAKE
        assert board[0] == Piece(Color.WHITE, PieceType.ROOK)
        assert board[56] is None

    def test_single_pawn_push_is_a_move(self) -> None:
        board = board_from_layout(STARTING_LAYOUT)
        assert _play(board, Color.WHITE, 52, 44) == MoveAction.MOVE

    def test_rook_two_file_move_clears_castle_flag(self) -> None:
        board = board_from_layout("8/8/8/8/8/8/8/R7")
        _play(board, Color.WHITE, 56, 58)
        rook = board[58]
        assert rook is not None and rook.can_castle is False

    def test_rook_other_moves_keep_castle_flag(self) -> None:
        board = board_from_layout("8/8/8/8/8/8/8/R7")
        _play(board, Color.WHITE, 56, 57)
        rook = board[57]
        assert rook is not None and rook.can_castle is True

    def test_king_one_step_keeps_castle_flag(self) -> None:
        board = board_from_layout("8/8/8/8/8/8/8/4K3")
        _play(board, Color.WHITE, 60, 59)
        king = board[59]
        assert king is not None and king.can_castle is True

    def test_origin_already_lifted(self) -> None:
        board = board_from_layout(STARTING_LAYOUT)
        table = MoveGenerator(board).generate(Color.WHITE)
        knight = board[62]
        assert knight is not None
        board[62] = None  # piece held by the caller
        assert apply_move(62, 45, board, knight, table) == MoveAction.MOVE
        assert board[45] == knight


class TestCastling:
    def test_west_castle_top_row(self) -> None:
        board = Board()
        board[4] = Piece(Color.WHITE, PieceType.KING)
        board[0] = Piece(Color.WHITE, PieceType.ROOK)
        table = MoveGenerator(board).generate(Color.WHITE)
        assert Move(4, 2) in table[4]

        action = apply_move(4, 2, board, board[4], table)

        assert action == MoveAction.CASTLE
        assert board[0] is None
        assert board[4] is None
        assert board[3] == Piece(Color.WHITE, PieceType.ROOK, can_castle=False)
        assert board[2] == Piece(Color.WHITE, PieceType.KING, can_castle=False)

    def test_east_castle(self) -> None:
        board = board_from_layout("8/8/8/8/8/8/8/R3K2R")
        assert _play(board, Color.WHITE, 60, 62) == MoveAction.CASTLE
        assert board[63] is None
        assert board[61] == Piece(Color.WHITE, PieceType.ROOK, can_castle=False)
        assert board[62] == Piece(Color.WHITE, PieceType.KING, can_castle=False)
        # the untouched rook keeps its right
        assert board[56] == Piece(Color.WHITE, PieceType.ROOK)

    def test_rook_squares(self) -> None:
        assert castling_rook_squares(58, -2) == (56, 59)
        assert castling_rook_squares(62, 2) == (63, 61)
        assert castling_rook_squares(2, -2) == (0, 3)

    @pytest.mark.parametrize("delta", [-3, -1, 0, 1, 3])
    def test_malformed_delta(self, delta: int) -> None:
        with pytest.raises(CastlingError, match="file delta"):
            castling_rook_squares(58, delta)

    def test_missing_rook_raises_without_mutation(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        board = board_from_layout("8/8/8/8/8/8/8/4K3")
        before = board.copy()
        king = board[60]
        assert king is not None
        stale_table = {60: [Move(60, 62)]}

        with pytest.raises(CastlingError, match="No castling rook"):
            apply_move(60, 62, board, king, stale_table)

        assert board == before
        assert any(r.levelno == logging.ERROR for r in caplog.records)


class TestPawnDoubleStep:
    def test_flags_adjacent_enemy_and_regenerates_capture(self) -> None:
        board = Board()
        board[11] = BLACK_PAWN  # d7
        board[28] = WHITE_PAWN  # e5

        assert _play(board, Color.BLACK, 11, 27) == MoveAction.MOVE

        assert board[11] is None
        assert board[27] == BLACK_PAWN
        white = board[28]
        assert white is not None and white.can_en_passant == Direction.WEST

        table = MoveGenerator(board).generate(Color.WHITE)
        assert Move(28, 19) in table[28]

    def test_neighbour_to_the_west_gets_east(self) -> None:
        board = Board()
        board[52] = WHITE_PAWN  # e2
        board[35] = BLACK_PAWN  # d4
        _play(board, Color.WHITE, 52, 36)
        black = board[35]
        assert black is not None and black.can_en_passant == Direction.EAST

    def test_both_neighbours_flagged(self) -> None:
        board = Board()
        board[52] = WHITE_PAWN
        board[35] = BLACK_PAWN
        board[37] = BLACK_PAWN
        _play(board, Color.WHITE, 52, 36)
        assert board[35] == BLACK_PAWN.with_en_passant(Direction.EAST)
        assert board[37] == BLACK_PAWN.with_en_passant(Direction.WEST)

    def test_ally_and_non_pawn_neighbours_ignored(self) -> None:
        board = Board()
        board[52] = WHITE_PAWN
        board[35] = WHITE_PAWN
        board[37] = Piece(Color.BLACK, PieceType.KNIGHT)
        _play(board, Color.WHITE, 52, 36)
        assert board[35] == WHITE_PAWN
        assert board[37] == Piece(Color.BLACK, PieceType.KNIGHT)

    def test_edge_landing_does_not_wrap(self) -> None:
        board = Board()
        board[15] = BLACK_PAWN  # h7
        board[30] = WHITE_PAWN  # g5
        board[32] = WHITE_PAWN  # a4, next index after h5
        _play(board, Color.BLACK, 15, 31)
        assert board[30] == WHITE_PAWN.with_en_passant(Direction.EAST)
        assert board[32] == WHITE_PAWN

    def test_a_file_landing(self) -> None:
        board = Board()
        board[8] = BLACK_PAWN  # a7
        board[25] = WHITE_PAWN  # b5
        board[23] = WHITE_PAWN  # h6, previous index before a5
        _play(board, Color.BLACK, 8, 24)
        assert board[25] == WHITE_PAWN.with_en_passant(Direction.WEST)
        assert board[23] == WHITE_PAWN


class TestPawnDiagonal:
    def test_plain_capture(self) -> None:
        board = Board()
        board[36] = WHITE_PAWN  # e4
        board[27] = BLACK_PAWN  # d5
        assert _play(board, Color.WHITE, 36, 27) == MoveAction.TAKE
        assert board[36] is None
        assert board[27] == WHITE_PAWN

    def test_en_passant_removes_passed_pawn(self) -> None:
        board = Board()
        board[27] = BLACK_PAWN  # d5, just arrived from d7
        board[28] = WHITE_PAWN.with_en_passant(Direction.WEST)  # e5

        assert _play(board, Color.WHITE, 28, 19) == MoveAction.TAKE

        assert board[19] == WHITE_PAWN
        assert board[27] is None
        assert board[28] is None
