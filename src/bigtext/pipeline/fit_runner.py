# SPDX-License-Identifier: Apache-2.0
"""Off-thread fit execution where the newest request wins."""

from __future__ import annotations

import asyncio
import logging
from typing import Optional

from bigtext.core.models import FitRequest, FitResult
from bigtext.core.text_layout import AutoFitEngine

logger = logging.getLogger(__name__)


class LatestFitRunner:
    """Run fits in a worker thread and drop superseded results.

    Every submission gets a generation number. When a fit finishes after a
    newer submission was made, its result is discarded and ``None`` is
    returned instead. Fits are never cancelled; they simply lose.
    """

    def __init__(self, engine: AutoFitEngine) -> None:
        self._engine = engine
        self._generation = 0
        self._latest: Optional[FitResult] = None

    @property
    def latest(self) -> Optional[FitResult]:
        """Most recent result that was not superseded."""
        return self._latest

    async def submit(self, request: FitRequest) -> Optional[FitResult]:
        """Fit ``request`` off the event loop.

        Returns:
            The FitResult, or None if a newer request was submitted meanwhile.
        """
        self._generation += 1
        generation = self._generation

        result = await asyncio.to_thread(self._engine.fit, request)

        if generation != self._generation:
            logger.debug(
                "Discarding stale fit (generation %d, current %d)",
                generation,
                self._generation,
            )
            return None
        self._latest = result
        return result
