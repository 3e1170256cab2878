# SPDX-License-Identifier: Apache-2.0
"""Data models for the auto-fit text layout engine.

This module defines the request/result types exchanged with the fit engine,
the text style handed through to measurers, and the display defaults
(font bounds, line budgets per orientation, padding).
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Iterable, Optional

from .errors import InvalidArgumentError

# Font size search bounds (inclusive)
DEFAULT_MIN_FONT_SIZE = 6.0
DEFAULT_MAX_FONT_SIZE = 900.0

# Binary search stops once the size interval is narrower than this
SIZE_PRECISION = 0.5

# Pixel slack allowed on each axis when comparing against the box
FIT_TOLERANCE = 0.5

# Maximum number of line-count candidates tried per orientation
DEFAULT_MAX_LINES_LANDSCAPE = 6
DEFAULT_MAX_LINES_PORTRAIT = 4

# Padding applied on every side of the screen before fitting
DEFAULT_PADDING = 24.0

# History / input limits
MAX_TEXT_LENGTH = 200
PREVIEW_LABEL_LENGTH = 15
ELLIPSIS = "..."

LINE_BREAK = "\n"


class Orientation(str, Enum):
    """Screen orientation the text is displayed in."""

    LANDSCAPE = "landscape"
    PORTRAIT = "portrait"

    @property
    def label(self) -> str:
        return self.value.capitalize()


def max_line_candidates_for(orientation: Orientation) -> int:
    """Return the line-count budget for an orientation.

    Landscape screens are wide enough to benefit from trying more
    candidates, so they get the larger budget.
    """
    if orientation == Orientation.LANDSCAPE:
        return DEFAULT_MAX_LINES_LANDSCAPE
    return DEFAULT_MAX_LINES_PORTRAIT


class InputFont(Enum):
    """Selectable display fonts.

    Each entry carries its UI label and the font file names searched for
    when resolving it on disk.
    """

    MONTSERRAT = ("Montserrat", ("Montserrat-Black.ttf", "montserrat_black.ttf"))
    PANGOLIN = ("Pangolin", ("Pangolin-Regular.ttf", "pangolin_regular.ttf"))
    ROBOTO_SLAB = ("Roboto", ("RobotoSlab-Regular.ttf", "robotoslab_regular.ttf"))
    PLAYFAIR_DISPLAY = (
        "Playfair",
        ("PlayfairDisplay-Regular.ttf", "playfairdisplay_regular.ttf"),
    )

    def __init__(self, label: str, file_names: tuple[str, ...]) -> None:
        self.label = label
        self.file_names = file_names

    @classmethod
    def from_label(cls, label: str) -> InputFont:
        """Look up a font by its label (case-insensitive) or enum name."""
        key = label.strip().lower()
        for font in cls:
            if font.label.lower() == key or font.name.lower() == key:
                return font
        raise InvalidArgumentError(f"Unknown font: {label}")


DEFAULT_INPUT_FONT = InputFont.MONTSERRAT
DEFAULT_ORIENTATION = Orientation.LANDSCAPE


def resolve_font_path(font: InputFont, search_dirs: Iterable[Path]) -> Optional[Path]:
    """Find the font file for ``font`` in the given directories.

    Args:
        font: Font to resolve.
        search_dirs: Directories searched in order.

    Returns:
        Path to the first matching file, or None if the font is not installed.
    """
    for directory in search_dirs:
        for name in font.file_names:
            candidate = Path(directory) / name
            if candidate.is_file():
                return candidate
    return None


@dataclass(frozen=True)
class TextStyle:
    """Font and alignment passed through to the measurer.

    The engine never inspects the style; it must be hashable so measurement
    caches can key on it.

    Attributes:
        font_path: TrueType/OpenType file, or None for the default font.
        align: Horizontal alignment of lines ("left", "center", "right").
        line_spacing: Extra pixels between lines.
    """

    font_path: Optional[str] = None
    align: str = "center"
    line_spacing: float = 4.0

    @classmethod
    def for_font(
        cls,
        font: InputFont,
        search_dirs: Iterable[Path] = (),
        **kwargs: Any,
    ) -> TextStyle:
        path = resolve_font_path(font, search_dirs)
        return cls(font_path=str(path) if path else None, **kwargs)


def content_box(
    screen_width: float,
    screen_height: float,
    padding: float = DEFAULT_PADDING,
) -> tuple[float, float]:
    """Reduce screen dimensions by ``padding`` on every side.

    Returns:
        Tuple of (box_width, box_height), never negative.
    """
    return (
        max(screen_width - padding * 2, 0.0),
        max(screen_height - padding * 2, 0.0),
    )


def validate_font_bounds(min_font_size: float, max_font_size: float) -> None:
    """Reject inverted or non-numeric font size bounds.

    Raises:
        InvalidArgumentError: If either bound is NaN or min > max.
    """
    if math.isnan(min_font_size) or math.isnan(max_font_size):
        raise InvalidArgumentError("Font size bounds must be numbers")
    if min_font_size > max_font_size:
        raise InvalidArgumentError(
            f"min_font_size ({min_font_size}) must not exceed "
            f"max_font_size ({max_font_size})"
        )


@dataclass(frozen=True)
class FitRequest:
    """Input of one layout pass."""

    text: str
    box_width: float
    box_height: float
    style: TextStyle = field(default_factory=TextStyle)
    min_font_size: float = DEFAULT_MIN_FONT_SIZE
    max_font_size: float = DEFAULT_MAX_FONT_SIZE
    max_line_candidates: int = DEFAULT_MAX_LINES_LANDSCAPE

    def __post_init__(self) -> None:
        validate_font_bounds(self.min_font_size, self.max_font_size)

    @property
    def box_area(self) -> float:
        if self.box_width <= 0 or self.box_height <= 0:
            return 0.0
        return self.box_width * self.box_height


@dataclass(frozen=True)
class FitResult:
    """Chosen layout for a request.

    Attributes:
        rendered_text: Words re-flowed into lines joined by "\\n".
        font_size: Chosen font size within the request bounds.
        utilization_fraction: Share of the box area covered (0.0-1.0).
        width: Measured width of rendered_text at font_size.
        height: Measured height of rendered_text at font_size.
        fits_in_box: False when even the minimum font size overflows.
    """

    rendered_text: str
    font_size: float
    utilization_fraction: float
    width: float = 0.0
    height: float = 0.0
    fits_in_box: bool = True

    @property
    def lines(self) -> list[str]:
        if not self.rendered_text:
            return []
        return self.rendered_text.split(LINE_BREAK)

    @property
    def line_count(self) -> int:
        return len(self.lines)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "rendered_text": self.rendered_text,
            "font_size": self.font_size,
            "utilization_fraction": self.utilization_fraction,
            "width": self.width,
            "height": self.height,
            "fits_in_box": self.fits_in_box,
            "line_count": self.line_count,
        }
