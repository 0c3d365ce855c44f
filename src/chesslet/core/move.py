"""Move value object and the legality table built from it."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from chesslet.core.types import Square, square_name


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable value object representing a single move."""

    start: Square
    end: Square

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        return f"{square_name(self.start)}{square_name(self.end)}"


# Origin square -> legal moves from it. Valid only until the next board mutation.
LegalityTable: TypeAlias = dict[Square, list[Move]]


def is_listed(start: Square, end: Square, table: LegalityTable) -> bool:
    """Whether ``start -> end`` appears in the table entry for *start*."""
    return Move(start, end) in table.get(start, ())
