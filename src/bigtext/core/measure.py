# SPDX-License-Identifier: Apache-2.0
"""Text measurement backends for the fit engine.

The engine only needs ``measure(text, font_size, style) -> (width, height)``.
This module provides:
- A Pillow measurer using real font metrics
- A font-free estimating measurer (character width heuristics)
- A thread-safe memoizing wrapper

Every measurer treats "\\n" as a hard line break and never re-wraps lines.
"""

from __future__ import annotations

import logging
import threading
from functools import lru_cache
from typing import Protocol, Union, runtime_checkable

from PIL import Image, ImageDraw, ImageFont

from .errors import FontLoadError
from .models import LINE_BREAK, TextStyle

logger = logging.getLogger(__name__)

PillowFont = Union[ImageFont.FreeTypeFont, ImageFont.ImageFont]

# Heuristic em-width factors (share of font size per character)
LATIN_CHAR_WIDTH = 0.55
CJK_CHAR_WIDTH = 0.9
DEFAULT_LINE_HEIGHT_FACTOR = 1.2


@runtime_checkable
class TextMeasurer(Protocol):
    """Protocol for text measurement collaborators."""

    def measure(self, text: str, font_size: float, style: TextStyle) -> tuple[float, float]:
        """Measure ``text`` laid out with its explicit line breaks.

        Args:
            text: Text to measure; "\\n" separates lines.
            font_size: Font size in pixels.
            style: Font and alignment to measure with.

        Returns:
            Tuple of (width, height) in pixels.
        """
        ...


def is_cjk_char(char: str) -> bool:
    """Check if a character is CJK (Chinese, Japanese, Korean) or fullwidth."""
    code = ord(char)
    return (
        0x4E00 <= code <= 0x9FFF  # CJK Unified Ideographs
        or 0x3040 <= code <= 0x309F  # Hiragana
        or 0x30A0 <= code <= 0x30FF  # Katakana
        or 0x3400 <= code <= 0x4DBF  # CJK Extension A
        or 0xAC00 <= code <= 0xD7AF  # Hangul Syllables
        or 0x3000 <= code <= 0x303F  # CJK Punctuation
        or 0xFF00 <= code <= 0xFFEF  # Fullwidth Forms
    )


@lru_cache(maxsize=256)
def load_font(font_path: str | None, font_size: float) -> PillowFont:
    """Load a font at ``font_size``, with caching.

    Args:
        font_path: Font file path, or None for Pillow's bundled default.
        font_size: Size in pixels (fractional sizes are supported).

    Returns:
        Pillow font object.

    Raises:
        FontLoadError: If the font file cannot be opened.
    """
    if font_path is None:
        return ImageFont.load_default(size=font_size)
    try:
        return ImageFont.truetype(font_path, font_size)
    except OSError as e:
        raise FontLoadError(f"Cannot load font: {font_path}", font_path) from e


class PillowTextMeasurer:
    """Measure text with Pillow's multiline text bounding box."""

    def __init__(self) -> None:
        # multiline_textbbox needs a draw context; a 1x1 image is enough.
        self._draw = ImageDraw.Draw(Image.new("L", (1, 1)))
        self._lock = threading.Lock()

    def measure(self, text: str, font_size: float, style: TextStyle) -> tuple[float, float]:
        if not text:
            return 0.0, 0.0

        font = load_font(style.font_path, font_size)
        with self._lock:
            left, top, right, bottom = self._draw.multiline_textbbox(
                (0, 0),
                text,
                font=font,
                spacing=style.line_spacing,
                align=style.align,
            )
        return float(right - left), float(bottom - top)


class EstimatedTextMeasurer:
    """Estimate text extents from per-character width factors.

    Needs no font file. Width is the widest line, each character counting
    ``LATIN_CHAR_WIDTH`` em (``CJK_CHAR_WIDTH`` for CJK); height is
    ``line_height_factor`` em per line plus line spacing between lines.
    """

    def __init__(
        self,
        latin_char_width: float = LATIN_CHAR_WIDTH,
        cjk_char_width: float = CJK_CHAR_WIDTH,
        line_height_factor: float = DEFAULT_LINE_HEIGHT_FACTOR,
    ) -> None:
        """Initialize EstimatedTextMeasurer.

        Args:
            latin_char_width: Width factor for non-CJK characters.
            cjk_char_width: Width factor for CJK characters.
            line_height_factor: Line height as a multiple of font size.
        """
        self._latin_char_width = latin_char_width
        self._cjk_char_width = cjk_char_width
        self._line_height_factor = line_height_factor

    def line_width(self, line: str, font_size: float) -> float:
        total = 0.0
        for char in line:
            factor = self._cjk_char_width if is_cjk_char(char) else self._latin_char_width
            total += font_size * factor
        return total

    def measure(self, text: str, font_size: float, style: TextStyle) -> tuple[float, float]:
        if not text:
            return 0.0, 0.0

        lines = text.split(LINE_BREAK)
        width = max(self.line_width(line, font_size) for line in lines)
        height = (
            font_size * self._line_height_factor * len(lines)
            + style.line_spacing * (len(lines) - 1)
        )
        return width, height


class CachingTextMeasurer:
    """Memoize another measurer's results.

    Safe to share between threads; the wrapped measurer is called outside
    the lock so slow measurements do not serialize concurrent fits.
    """

    def __init__(self, measurer: TextMeasurer, max_entries: int = 4096) -> None:
        self._measurer = measurer
        self._max_entries = max_entries
        self._cache: dict[tuple[str, float, TextStyle], tuple[float, float]] = {}
        self._lock = threading.Lock()
        self.hits = 0
        self.misses = 0

    def measure(self, text: str, font_size: float, style: TextStyle) -> tuple[float, float]:
        key = (text, font_size, style)
        with self._lock:
            cached = self._cache.get(key)
            if cached is not None:
                self.hits += 1
                return cached
            self.misses += 1

        size = self._measurer.measure(text, font_size, style)

        with self._lock:
            if len(self._cache) >= self._max_entries:
                logger.debug("Measurement cache full (%d entries), clearing", len(self._cache))
                self._cache.clear()
            self._cache[key] = size
        return size

    def clear(self) -> None:
        with self._lock:
            self._cache.clear()
            self.hits = 0
            self.misses = 0

    def __len__(self) -> int:
        with self._lock:
            return len(self._cache)
