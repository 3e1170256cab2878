# SPDX-License-Identifier: Apache-2.0
"""Core auto-fit layout modules."""

from .errors import (
    BigTextError,
    FontLoadError,
    HistoryError,
    HistoryValidationError,
    InvalidArgumentError,
)
from .font_adjuster import FontSizeSearcher
from .measure import (
    CachingTextMeasurer,
    EstimatedTextMeasurer,
    PillowTextMeasurer,
    TextMeasurer,
)
from .models import (
    FitRequest,
    FitResult,
    InputFont,
    Orientation,
    TextStyle,
    content_box,
    max_line_candidates_for,
)
from .text_layout import (
    AutoFitEngine,
    FitCandidate,
    build_balanced_lines,
    fit,
    tokenize_words,
)

__all__ = [
    "AutoFitEngine",
    "BigTextError",
    "CachingTextMeasurer",
    "EstimatedTextMeasurer",
    "FitCandidate",
    "FitRequest",
    "FitResult",
    "FontLoadError",
    "FontSizeSearcher",
    "HistoryError",
    "HistoryValidationError",
    "InputFont",
    "InvalidArgumentError",
    "Orientation",
    "PillowTextMeasurer",
    "TextMeasurer",
    "TextStyle",
    "build_balanced_lines",
    "content_box",
    "fit",
    "max_line_candidates_for",
    "tokenize_words",
]
