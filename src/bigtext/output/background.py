# SPDX-License-Identifier: Apache-2.0
"""Background palette and text colors for the display screen."""

from __future__ import annotations

import random
from enum import Enum
from typing import Optional

BLACK = "#000000"
WHITE = "#FFFFFF"


class BackgroundColor(str, Enum):
    """Background modes selectable for the display."""

    BLACK = "black"
    WHITE = "white"
    GRADIENT = "gradient"

    @property
    def label(self) -> str:
        return self.value.capitalize()


class GradientColor(Enum):
    """Two-stop diagonal gradients."""

    PURPLE_PINK = ("Purple to Pink", ("#6200EE", "#BB86FC"))
    BLUE_PURPLE = ("Blue to Purple", ("#2196F3", "#9C27B0"))
    PINK_ORANGE = ("Pink to Orange", ("#E91E63", "#FF9800"))
    TEAL_BLUE = ("Teal to Blue", ("#009688", "#2196F3"))
    RED_PURPLE = ("Red to Purple", ("#F44336", "#9C27B0"))
    DARK_PURPLE_CYAN = ("Dark Purple to Cyan", ("#42047E", "#07F49E"))
    YELLOW_GREEN = ("Yellow to Green", ("#F4F269", "#5CB270"))
    PEACH_RED = ("Peach to Red", ("#FFB88E", "#EA5753"))

    def __init__(self, display_name: str, colors: tuple[str, str]) -> None:
        self.display_name = display_name
        self.colors = colors


def random_gradient(rng: Optional[random.Random] = None) -> GradientColor:
    """Pick a gradient uniformly at random."""
    chooser = rng or random
    return chooser.choice(list(GradientColor))


def text_color(background: BackgroundColor) -> str:
    """Text color readable on ``background``: black on white, white otherwise."""
    if background == BackgroundColor.WHITE:
        return BLACK
    return WHITE


def background_colors(
    background: BackgroundColor,
    gradient: Optional[GradientColor] = None,
) -> tuple[str, str]:
    """Start and end colors to paint for a background.

    Solid backgrounds return the same color twice. A gradient background
    without an explicit gradient uses a random one.
    """
    if background == BackgroundColor.BLACK:
        return BLACK, BLACK
    if background == BackgroundColor.WHITE:
        return WHITE, WHITE
    return (gradient or random_gradient()).colors
