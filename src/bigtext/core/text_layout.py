# SPDX-License-Identifier: Apache-2.0
"""Auto-fit layout engine for displaying text as large as possible.

This module provides:
- Whitespace word tokenization
- Balanced line building for a given line count
- Candidate scoring by box area utilization
- Selection of the best (line count, font size) combination

The engine tries every line count from 1 up to the candidate budget, finds
the largest fitting font size for each by binary search, and keeps the
candidate covering the most box area. Equal coverage goes to the larger font.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Optional, Sequence

from .font_adjuster import FontSizeSearcher
from .measure import TextMeasurer
from .models import (
    DEFAULT_MAX_FONT_SIZE,
    DEFAULT_MAX_LINES_LANDSCAPE,
    DEFAULT_MIN_FONT_SIZE,
    FIT_TOLERANCE,
    LINE_BREAK,
    SIZE_PRECISION,
    FitRequest,
    FitResult,
    TextStyle,
)

logger = logging.getLogger(__name__)

# ASCII whitespace only; non-breaking and other Unicode spaces stay inside words
_WORD_SEPARATOR = re.compile(r"[ \t\n\x0b\f\r]+")


def tokenize_words(text: str) -> list[str]:
    """Split text into words on runs of ASCII whitespace, newlines included."""
    return [word for word in _WORD_SEPARATOR.split(text) if word]


def build_balanced_lines(words: Sequence[str], lines_count: int) -> str:
    """Distribute words over lines with counts as equal as possible.

    Each line gets ``len(words) // lines_count`` words and the first
    ``len(words) % lines_count`` lines one more. Word order is preserved and
    lines that would be empty are dropped.

    Args:
        words: Words in display order.
        lines_count: Target number of lines; values <= 1 give a single line.

    Returns:
        Lines joined by "\\n", or "" for no words.
    """
    if lines_count <= 1:
        return " ".join(words)

    total = len(words)
    base, extra = divmod(total, lines_count)
    lines: list[str] = []
    idx = 0
    for line in range(lines_count):
        take = base + (1 if line < extra else 0)
        if take <= 0:
            continue
        lines.append(" ".join(words[idx : idx + take]))
        idx += take

    if idx < total:
        lines.append(" ".join(words[idx:]))

    return LINE_BREAK.join(lines)


def utilization_fraction(
    width: float,
    height: float,
    box_width: float,
    box_height: float,
) -> float:
    """Share of the box area covered by a block of ``width`` x ``height``.

    Dimensions are clipped to the box so an overflowing block never scores
    above 1.0. A box without positive area scores 0.0.
    """
    if box_width <= 0 or box_height <= 0:
        return 0.0
    used_area = min(width, box_width) * min(height, box_height)
    return used_area / (box_width * box_height)


@dataclass(frozen=True)
class FitCandidate:
    """One evaluated (line-broken text, font size) pairing."""

    text: str
    lines_count: int
    font_size: float
    width: float
    height: float
    fraction: float
    fits: bool = True

    def to_result(self) -> FitResult:
        return FitResult(
            rendered_text=self.text,
            font_size=self.font_size,
            utilization_fraction=self.fraction,
            width=self.width,
            height=self.height,
            fits_in_box=self.fits,
        )


def is_better_candidate(candidate: FitCandidate, best: Optional[FitCandidate]) -> bool:
    """Return True if ``candidate`` should replace ``best``.

    Higher utilization wins; equal utilization goes to the larger font.
    """
    if best is None:
        return True
    if candidate.fraction > best.fraction:
        return True
    return candidate.fraction == best.fraction and candidate.font_size > best.font_size


def select_best_candidate(candidates: Sequence[FitCandidate]) -> Optional[FitCandidate]:
    """Pick the winner from evaluated candidates in evaluation order."""
    best: Optional[FitCandidate] = None
    for candidate in candidates:
        if is_better_candidate(candidate, best):
            best = candidate
    return best


class AutoFitEngine:
    """Engine choosing line breaks and font size to fill a box.

    The engine holds no per-request state, so one instance can serve
    concurrent fits as long as its measurer is thread-safe.
    """

    def __init__(
        self,
        measurer: TextMeasurer,
        precision: float = SIZE_PRECISION,
        tolerance: float = FIT_TOLERANCE,
    ) -> None:
        """Initialize AutoFitEngine.

        Args:
            measurer: Text measurement backend.
            precision: Font size search precision.
            tolerance: Pixel slack allowed on each axis.
        """
        self._measurer = measurer
        self._searcher = FontSizeSearcher(measurer, precision=precision, tolerance=tolerance)

    @property
    def measurer(self) -> TextMeasurer:
        return self._measurer

    def evaluate_candidate(
        self,
        words: Sequence[str],
        lines_count: int,
        request: FitRequest,
    ) -> FitCandidate:
        """Build, size and score the layout for one line count.

        Args:
            words: Tokenized words of the request text.
            lines_count: Target line count.
            request: Request supplying box, style and size bounds.

        Returns:
            Evaluated candidate.
        """
        text = build_balanced_lines(words, lines_count)
        font_size = self._searcher.search(
            text,
            request.box_width,
            request.box_height,
            request.style,
            request.min_font_size,
            request.max_font_size,
        )
        width, height = self._measurer.measure(text, font_size, request.style)
        fraction = utilization_fraction(width, height, request.box_width, request.box_height)
        return FitCandidate(
            text=text,
            lines_count=lines_count,
            font_size=font_size,
            width=width,
            height=height,
            fraction=fraction,
            fits=self._searcher.fits(width, height, request.box_width, request.box_height),
        )

    def fit(self, request: FitRequest) -> FitResult:
        """Choose the layout for ``request``.

        Args:
            request: Text, box and search bounds.

        Returns:
            FitResult of the winning candidate. Empty text gives an empty
            result at the minimum font size.
        """
        words = tokenize_words(request.text)
        if not words:
            return FitResult(
                rendered_text="",
                font_size=request.min_font_size,
                utilization_fraction=0.0,
            )

        max_try = min(max(request.max_line_candidates, 1), len(words))

        candidates: list[FitCandidate] = []
        for lines_count in range(1, max_try + 1):
            candidate = self.evaluate_candidate(words, lines_count, request)
            logger.debug(
                "Candidate %d line(s): size=%.2f fraction=%.4f",
                lines_count,
                candidate.font_size,
                candidate.fraction,
            )
            candidates.append(candidate)

        best = select_best_candidate(candidates)
        if best is None:
            raise RuntimeError("No layout candidate was evaluated")
        if not best.fits:
            logger.info(
                "Text does not fit %.0fx%.0f even at font size %.1f",
                request.box_width,
                request.box_height,
                request.min_font_size,
            )
        return best.to_result()


def fit(
    text: str,
    box_width: float,
    box_height: float,
    style: TextStyle,
    measurer: TextMeasurer,
    min_font_size: float = DEFAULT_MIN_FONT_SIZE,
    max_font_size: float = DEFAULT_MAX_FONT_SIZE,
    max_line_candidates: int = DEFAULT_MAX_LINES_LANDSCAPE,
) -> FitResult:
    """Fit ``text`` into a box of ``box_width`` x ``box_height`` pixels.

    Raises:
        InvalidArgumentError: If min_font_size > max_font_size.
    """
    request = FitRequest(
        text=text,
        box_width=box_width,
        box_height=box_height,
        style=style,
        min_font_size=min_font_size,
        max_font_size=max_font_size,
        max_line_candidates=max_line_candidates,
    )
    return AutoFitEngine(measurer).fit(request)
