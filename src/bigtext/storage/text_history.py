# SPDX-License-Identifier: Apache-2.0
"""Local history of displayed texts.

Entries are kept newest first and optionally persisted as a versioned JSON
file. Texts are validated before storing: blank texts and texts longer than
MAX_TEXT_LENGTH are rejected.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Any, Callable, Optional

from bigtext.core.errors import HistoryError, HistoryValidationError
from bigtext.core.models import ELLIPSIS, MAX_TEXT_LENGTH, PREVIEW_LABEL_LENGTH

logger = logging.getLogger(__name__)

HISTORY_VERSION = "1.0.0"


@dataclass(frozen=True)
class TextEntry:
    """A stored history text."""

    id: int
    text: str
    timestamp: str

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "id": self.id,
            "text": self.text,
            "timestamp": self.timestamp,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TextEntry:
        """Create from dictionary."""
        return cls(
            id=int(data["id"]),
            text=str(data["text"]),
            timestamp=str(data["timestamp"]),
        )


def validate_text(text: str) -> Optional[str]:
    """Return the reason ``text`` cannot be stored, or None if it is valid."""
    if not text.strip():
        return "Text cannot be empty"
    if len(text) > MAX_TEXT_LENGTH:
        return f"Text exceeds maximum length of {MAX_TEXT_LENGTH} characters"
    return None


def clamp_input_text(current: str, new: str) -> str:
    """Apply an input edit, ignoring edits that exceed MAX_TEXT_LENGTH."""
    if len(new) <= MAX_TEXT_LENGTH:
        return new
    return current


def preview_label(text: str) -> str:
    """Shorten ``text`` for a button label."""
    if len(text) <= PREVIEW_LABEL_LENGTH:
        return text
    return text[:PREVIEW_LABEL_LENGTH] + ELLIPSIS


class TextHistory:
    """History of displayed texts.

    Without a path the history lives in memory only.
    """

    def __init__(
        self,
        path: Path | None = None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        """Initialize TextHistory.

        Args:
            path: JSON file to load from and save to.
            clock: Source of entry timestamps.
        """
        self._path = path
        self._clock = clock
        self._entries: list[TextEntry] = []
        if path is not None:
            self._entries = self._load(path)

    @staticmethod
    def _load(path: Path) -> list[TextEntry]:
        if not path.exists():
            return []
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
            version = data.get("version", "unknown")
            if version != HISTORY_VERSION:
                raise ValueError(
                    f"Unsupported version: {version} (expected {HISTORY_VERSION})"
                )
            return [TextEntry.from_dict(e) for e in data["entries"]]
        except (OSError, ValueError, KeyError, TypeError, AttributeError) as e:
            logger.error("Error loading history from %s: %s", path, e)
            return []

    def to_json(self, indent: int = 2) -> str:
        """Export to JSON string."""
        data = {
            "version": HISTORY_VERSION,
            "entries": [e.to_dict() for e in self._entries],
        }
        return json.dumps(data, indent=indent, ensure_ascii=False)

    def save(self) -> None:
        """Write the history to its file, if it has one.

        Raises:
            HistoryError: If the file cannot be written.
        """
        if self._path is None:
            return
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(self.to_json(), encoding="utf-8")
        except OSError as e:
            logger.error("Error saving history to %s", self._path, exc_info=True)
            raise HistoryError(f"Cannot save history: {self._path}") from e

    def entries(self) -> list[TextEntry]:
        """All entries, newest first."""
        return sorted(self._entries, key=lambda e: (e.timestamp, e.id), reverse=True)

    def add(self, text: str) -> TextEntry:
        """Validate, trim and store ``text``.

        Args:
            text: Text to store.

        Returns:
            The stored entry.

        Raises:
            HistoryValidationError: If the text is blank or too long.
            HistoryError: If saving fails.
        """
        error = validate_text(text)
        if error is not None:
            raise HistoryValidationError(error)

        next_id = max((e.id for e in self._entries), default=0) + 1
        entry = TextEntry(
            id=next_id,
            text=text.strip(),
            timestamp=self._clock().isoformat(),
        )
        self._commit([*self._entries, entry])
        return entry

    def delete(self, entry_id: int) -> bool:
        """Remove an entry.

        Returns:
            True if an entry was removed.
        """
        remaining = [e for e in self._entries if e.id != entry_id]
        if len(remaining) == len(self._entries):
            return False
        self._commit(remaining)
        return True

    def clear(self) -> None:
        self._commit([])

    def _commit(self, entries: list[TextEntry]) -> None:
        """Replace the entries and save, restoring the old ones if saving fails."""
        previous = self._entries
        self._entries = entries
        try:
            self.save()
        except HistoryError:
            self._entries = previous
            raise

    def __len__(self) -> int:
        return len(self._entries)
