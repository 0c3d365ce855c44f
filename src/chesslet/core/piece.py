"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass, replace

from chesslet.core.enums import Color, Direction, PieceType

# Layout character ↔ (Color, PieceType)
_CHAR_MAP: dict[str, tuple[Color, PieceType]] = {
    "P": (Color.WHITE, PieceType.PAWN),
    "N": (Color.WHITE, PieceType.KNIGHT),
    "B": (Color.WHITE, PieceType.BISHOP),
    "R": (Color.WHITE, PieceType.ROOK),
    "Q": (Color.WHITE, PieceType.QUEEN),
    "K": (Color.WHITE, PieceType.KING),
    "p": (Color.BLACK, PieceType.PAWN),
    "n": (Color.BLACK, PieceType.KNIGHT),
    "b": (Color.BLACK, PieceType.BISHOP),
    "r": (Color.BLACK, PieceType.ROOK),
    "q": (Color.BLACK, PieceType.QUEEN),
    "k": (Color.BLACK, PieceType.KING),
}

_UNICODE: dict[tuple[Color, PieceType], str] = {
    (Color.WHITE, PieceType.PAWN): "♙",
    (Color.WHITE, PieceType.KNIGHT): "♘",
    (Color.WHITE, PieceType.BISHOP): "♗",
    (Color.WHITE, PieceType.ROOK): "♖",
    (Color.WHITE, PieceType.QUEEN): "♕",
    (Color.WHITE, PieceType.KING): "♔",
    (Color.BLACK, PieceType.PAWN): "♟",
    (Color.BLACK, PieceType.KNIGHT): "♞",
    (Color.BLACK, PieceType.BISHOP): "♝",
    (Color.BLACK, PieceType.ROOK): "♜",
    (Color.BLACK, PieceType.QUEEN): "♛",
    (Color.BLACK, PieceType.KING): "♚",
}

_LAYOUT_CHARS: dict[tuple[Color, PieceType], str] = {v: k for k, v in _CHAR_MAP.items()}

_EN_PASSANT_SIDES = (None, Direction.WEST, Direction.EAST)


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object representing a piece and its special-move flags.

    ``can_castle`` defaults to ``True`` for kings and rooks only.  It is
    cleared the first time the unit makes a two-file horizontal move; other
    moves leave it untouched.

    ``can_en_passant`` is ``Direction.WEST`` or ``Direction.EAST`` for a pawn
    that may capture a just-double-stepped neighbour on that side, and
    ``None`` otherwise.  It lives for one move-generation pass only.

    Flag changes produce a new piece; the board stores pieces by value.
    """

    color: Color
    piece_type: PieceType
    can_castle: bool | None = None
    can_en_passant: Direction | None = None

    def __post_init__(self) -> None:
        if self.can_castle is None:
            object.__setattr__(
                self,
                "can_castle",
                self.piece_type in (PieceType.KING, PieceType.ROOK),
            )
        if self.can_en_passant not in _EN_PASSANT_SIDES:
            raise ValueError(
                f"En passant side must be WEST or EAST: {self.can_en_passant!r}"
            )

    # ── Queries ──────────────────────────────────────────────────────────

    def is_enemy(self, other: Piece | None) -> bool:
        """Whether *other* is a piece of the opposite color."""
        return other is not None and other.color != self.color

    def is_ally(self, other: Piece | None) -> bool:
        return other is not None and other.color == self.color

    @property
    def is_sliding(self) -> bool:
        return self.piece_type.is_sliding

    # ── Flag updates ─────────────────────────────────────────────────────

    def without_castling(self) -> Piece:
        return replace(self, can_castle=False)

    def with_en_passant(self, side: Direction | None) -> Piece:
        return replace(self, can_en_passant=side)

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """Layout character (uppercase = white, lowercase = black)."""
        return _LAYOUT_CHARS[(self.color, self.piece_type)]

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Create piece from layout character, e.g. 'N' → white knight."""
        try:
            color, ptype = _CHAR_MAP[char]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        return cls(color, ptype)

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        return _UNICODE[(self.color, self.piece_type)]
