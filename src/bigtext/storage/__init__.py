# SPDX-License-Identifier: Apache-2.0
"""History storage package."""

from .text_history import (
    TextEntry,
    TextHistory,
    clamp_input_text,
    preview_label,
    validate_text,
)

__all__ = [
    "TextEntry",
    "TextHistory",
    "clamp_input_text",
    "preview_label",
    "validate_text",
]
