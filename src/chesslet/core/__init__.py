"""Core rules layer: move generation and application with zero external dependencies.

Quick start::

    from chesslet.core import Position, parse_square

    pos = Position()
    for move in pos.moves_from(parse_square("e2")):
        print(move)
    pos.play(parse_square("e2"), parse_square("e4"))
"""

from chesslet.core.board import Board
from chesslet.core.enums import Color, Direction, MoveAction, PieceType
from chesslet.core.geometry import SQUARES_TO_EDGE, build_geometry, steps_to_edge
from chesslet.core.layout import STARTING_LAYOUT, board_from_layout, board_to_layout
from chesslet.core.move import LegalityTable, Move
from chesslet.core.move_generator import MoveGenerator
from chesslet.core.move_validator import CastlingError, apply_move
from chesslet.core.piece import Piece
from chesslet.core.position import Position
from chesslet.core.types import (
    Square,
    col_of,
    make_square,
    parse_square,
    row_of,
    square_name,
)

__all__ = [
    # Enums
    "Color",
    "Direction",
    "MoveAction",
    "PieceType",
    # Types / helpers
    "Square",
    "col_of",
    "make_square",
    "parse_square",
    "row_of",
    "square_name",
    # Geometry
    "SQUARES_TO_EDGE",
    "build_geometry",
    "steps_to_edge",
    # Domain objects
    "Board",
    "LegalityTable",
    "Move",
    "MoveGenerator",
    "Piece",
    "Position",
    # Validation
    "CastlingError",
    "apply_move",
    # Layout
    "STARTING_LAYOUT",
    "board_from_layout",
    "board_to_layout",
]
