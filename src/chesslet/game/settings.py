"""Game configuration."""

from __future__ import annotations

from dataclasses import dataclass

from chesslet.core.enums import Color
from chesslet.core.layout import STARTING_LAYOUT


@dataclass
class GameSettings:
    """Everything needed to start a game."""

    # Piece placement, top row first
    layout: str = STARTING_LAYOUT
    first_player: Color = Color.WHITE
