# SPDX-License-Identifier: Apache-2.0
"""Font size search for a fixed line-broken text."""

from __future__ import annotations

import logging
import math

from .measure import TextMeasurer
from .models import FIT_TOLERANCE, SIZE_PRECISION, TextStyle

logger = logging.getLogger(__name__)


def max_search_iterations(min_font_size: float, max_font_size: float, precision: float) -> int:
    """Upper bound on binary search steps for a size range.

    A monotonic measurer never needs more; the bound keeps a misbehaving one
    from looping forever.
    """
    span = max_font_size - min_font_size
    if span <= precision:
        return 0
    return math.ceil(math.log2(span / precision)) + 1


class FontSizeSearcher:
    """Find the largest font size at which a text fits into a box."""

    def __init__(
        self,
        measurer: TextMeasurer,
        precision: float = SIZE_PRECISION,
        tolerance: float = FIT_TOLERANCE,
    ) -> None:
        """Initialize FontSizeSearcher.

        Args:
            measurer: Text measurement backend.
            precision: Search stops once the size interval is this narrow.
            tolerance: Pixel slack allowed on each axis.
        """
        self._measurer = measurer
        self._precision = float(precision)
        self._tolerance = float(tolerance)

    def fits(
        self,
        width: float,
        height: float,
        box_width: float,
        box_height: float,
    ) -> bool:
        return width <= box_width + self._tolerance and height <= box_height + self._tolerance

    def search(
        self,
        text: str,
        box_width: float,
        box_height: float,
        style: TextStyle,
        min_font_size: float,
        max_font_size: float,
    ) -> float:
        """Binary search the font size for ``text``.

        The text keeps its explicit line breaks; measurement is assumed to
        grow monotonically with font size.

        Args:
            text: Line-broken candidate text.
            box_width: Available width in pixels.
            box_height: Available height in pixels.
            style: Style passed to the measurer.
            min_font_size: Lower search bound.
            max_font_size: Upper search bound.

        Returns:
            Largest fitting size found, or min_font_size if nothing fits.
        """
        low = float(min_font_size)
        high = float(max_font_size)
        best = low

        iterations = max_search_iterations(low, high, self._precision)
        while high - low > self._precision and iterations > 0:
            iterations -= 1
            mid = (low + high) / 2
            width, height = self._measurer.measure(text, mid, style)
            if self.fits(width, height, box_width, box_height):
                best = mid
                low = mid
            else:
                high = mid

        logger.debug("Font size for %r: %.2f", text, best)
        return best
