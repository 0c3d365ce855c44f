"""Piece-placement strings: parsing and serialization.

A layout is the placement field of FEN, read from the top row down:
letters are pieces (uppercase = white), digits are runs of empty squares,
and ``/`` separates rows.
"""

from __future__ import annotations

from chesslet.core.board import Board
from chesslet.core.piece import Piece
from chesslet.core.types import BOARD_SIZE, SQUARE_COUNT, make_square

STARTING_LAYOUT = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"


def board_from_layout(layout: str) -> Board:
    """Parse a placement string into a :class:`Board`, filling from square 0."""
    board = Board()
    index = 0
    for ch in layout.strip():
        if ch == "/":
            continue
        if ch.isdigit():
            step = int(ch)
            if not (1 <= step <= BOARD_SIZE):
                raise ValueError(f"Invalid layout digit {ch!r}: {layout!r}")
            index += step
        else:
            if index >= SQUARE_COUNT:
                raise ValueError(f"Layout overflows the board: {layout!r}")
            board[index] = Piece.from_char(ch)
            index += 1
        if index > SQUARE_COUNT:
            raise ValueError(f"Layout overflows the board: {layout!r}")
    if index != SQUARE_COUNT:
        raise ValueError(
            f"Layout describes {index} squares, expected {SQUARE_COUNT}: {layout!r}"
        )
    return board


def board_to_layout(board: Board) -> str:
    """Serialise the piece placement of *board*."""
    rows: list[str] = []
    for row in range(BOARD_SIZE):
        empty = 0
        text = ""
        for col in range(BOARD_SIZE):
            piece = board[make_square(row, col)]
            if piece is None:
                empty += 1
            else:
                if empty:
                    text += str(empty)
                    empty = 0
                text += str(piece)
        if empty:
            text += str(empty)
        rows.append(text)
    return "/".join(rows)
