# SPDX-License-Identifier: Apache-2.0
"""Shared test fixtures."""

from __future__ import annotations

import pytest

from bigtext.core.models import TextStyle


class GridMeasurer:
    """Deterministic measurer: every character is half an em wide, every
    line one em tall. Records every call."""

    def __init__(self, char_width: float = 0.5, line_height: float = 1.0) -> None:
        self.char_width = char_width
        self.line_height = line_height
        self.calls: list[tuple[str, float]] = []

    def measure(self, text: str, font_size: float, style: TextStyle) -> tuple[float, float]:
        self.calls.append((text, font_size))
        if not text:
            return 0.0, 0.0
        lines = text.split("\n")
        width = max(len(line) for line in lines) * self.char_width * font_size
        height = len(lines) * self.line_height * font_size
        return width, height


@pytest.fixture
def grid_measurer() -> GridMeasurer:
    """Create a GridMeasurer instance."""
    return GridMeasurer()


@pytest.fixture
def style() -> TextStyle:
    """Default text style."""
    return TextStyle()
