# SPDX-License-Identifier: Apache-2.0
"""Exception types shared across bigtext modules."""

from __future__ import annotations


class BigTextError(Exception):
    """Base exception for bigtext."""

    pass


class InvalidArgumentError(BigTextError, ValueError):
    """Caller passed arguments that violate an API contract.

    Raised for inverted font size bounds or invalid configuration values.
    The caller must fix its arguments; nothing is corrected silently.
    """

    pass


class FontLoadError(BigTextError):
    """A configured font file could not be loaded."""

    def __init__(self, message: str, font_path: str | None = None) -> None:
        super().__init__(message)
        self.font_path = font_path


class HistoryError(BigTextError):
    """History storage failed (unreadable or unwritable file)."""

    pass


class HistoryValidationError(HistoryError, ValueError):
    """Text was rejected before being stored in the history."""

    pass
