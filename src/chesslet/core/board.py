"""Board - piece placement on an 8x8 board."""

from __future__ import annotations

from collections.abc import Iterator

from chesslet.core.enums import Color, PieceType
from chesslet.core.piece import Piece
from chesslet.core.types import BOARD_SIZE, SQUARE_COUNT, Square, make_square


class Board:
    """Mutable flat array of 64 optional pieces.

    Out-of-range reads return ``None`` and out-of-range writes are ignored,
    so callers may probe transient candidate squares without guarding.
    """

    __slots__ = ("size", "_squares")

    def __init__(self) -> None:
        self.size = BOARD_SIZE
        self._squares: list[Piece | None] = [None] * SQUARE_COUNT

    # -- Element access -----------------------------------------------------

    def get(self, row: int, col: int) -> Piece | None:
        if not (0 <= row < self.size and 0 <= col < self.size):
            return None
        return self._squares[row * self.size + col]

    def get_square(self, sq: Square) -> Piece | None:
        if not (0 <= sq < self.size * self.size):
            return None
        return self._squares[sq]

    def set(self, row: int, col: int, piece: Piece | None) -> None:
        if not (0 <= row < self.size and 0 <= col < self.size):
            return
        self._squares[row * self.size + col] = piece

    def set_square(self, sq: Square, piece: Piece | None) -> None:
        if not (0 <= sq < self.size * self.size):
            return
        self._squares[sq] = piece

    def __getitem__(self, sq: Square) -> Piece | None:
        return self.get_square(sq)

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        self.set_square(sq, piece)

    def __iter__(self) -> Iterator[Piece | None]:
        return iter(self._squares)

    def __len__(self) -> int:
        return len(self._squares)

    def is_empty(self, sq: Square) -> bool:
        return self.get_square(sq) is None

    # -- Query helpers ------------------------------------------------------

    def occupied(self, color: Color) -> list[Square]:
        """Squares occupied by *color*, in index order."""
        return [
            sq
            for sq, piece in enumerate(self._squares)
            if piece is not None and piece.color == color
        ]

    def pieces(self, color: Color, piece_type: PieceType) -> list[Square]:
        """Squares occupied by *color*'s *piece_type*."""
        return [
            sq
            for sq, piece in enumerate(self._squares)
            if piece is not None
            and piece.color == color
            and piece.piece_type == piece_type
        ]

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._squares = self._squares.copy()
        return b

    def clear(self) -> None:
        self._squares = [None] * SQUARE_COUNT

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position (Black on rows 0–1, White on rows 6–7)."""
        b = cls()
        for col in range(8):
            b.set(1, col, Piece(Color.BLACK, PieceType.PAWN))
            b.set(6, col, Piece(Color.WHITE, PieceType.PAWN))

        back_rank = [
            PieceType.ROOK,
            PieceType.KNIGHT,
            PieceType.BISHOP,
            PieceType.QUEEN,
            PieceType.KING,
            PieceType.BISHOP,
            PieceType.KNIGHT,
            PieceType.ROOK,
        ]
        for col, pt in enumerate(back_rank):
            b.set(0, col, Piece(Color.BLACK, pt))
            b.set(7, col, Piece(Color.WHITE, pt))
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    def __repr__(self) -> str:
        rows: list[str] = []
        for row in range(self.size):
            cells = []
            for col in range(self.size):
                p = self._squares[make_square(row, col)]
                cells.append(str(p) if p else ".")
            rows.append(f"{self.size - row} {' '.join(cells)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
