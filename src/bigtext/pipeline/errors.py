# SPDX-License-Identifier: Apache-2.0
"""Display pipeline error definitions."""

from __future__ import annotations


class DisplayError(Exception):
    """Base exception for display pipeline errors."""

    def __init__(
        self,
        message: str,
        stage: str,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.stage = stage
        self.cause = cause


class RenderError(DisplayError):
    """Screen rendering error."""
