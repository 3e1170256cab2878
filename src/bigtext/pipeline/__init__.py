# SPDX-License-Identifier: Apache-2.0
"""Display pipeline package."""

from .display_pipeline import DisplayConfig, DisplayPipeline, DisplayResult
from .errors import DisplayError, RenderError
from .fit_runner import LatestFitRunner
from .progress import ProgressCallback

__all__ = [
    "DisplayConfig",
    "DisplayError",
    "DisplayPipeline",
    "DisplayResult",
    "LatestFitRunner",
    "ProgressCallback",
    "RenderError",
]
