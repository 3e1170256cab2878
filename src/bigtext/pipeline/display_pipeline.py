# SPDX-License-Identifier: Apache-2.0
"""Display pipeline: fit text to the screen, render it, record history."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Optional

from bigtext.core.errors import BigTextError, HistoryError, InvalidArgumentError
from bigtext.core.measure import CachingTextMeasurer, PillowTextMeasurer, TextMeasurer
from bigtext.core.models import (
    DEFAULT_INPUT_FONT,
    DEFAULT_MAX_FONT_SIZE,
    DEFAULT_MAX_LINES_LANDSCAPE,
    DEFAULT_MAX_LINES_PORTRAIT,
    DEFAULT_MIN_FONT_SIZE,
    DEFAULT_ORIENTATION,
    DEFAULT_PADDING,
    FitRequest,
    FitResult,
    InputFont,
    Orientation,
    TextStyle,
    content_box,
    validate_font_bounds,
)
from bigtext.core.text_layout import AutoFitEngine
from bigtext.output.background import BackgroundColor, GradientColor, random_gradient
from bigtext.output.renderer import RenderConfig, TextRenderer
from bigtext.pipeline.errors import DisplayError, RenderError
from bigtext.pipeline.fit_runner import LatestFitRunner
from bigtext.pipeline.progress import ProgressCallback
from bigtext.storage.text_history import TextEntry, TextHistory

logger = logging.getLogger(__name__)


@dataclass
class DisplayConfig:
    """Display pipeline configuration."""

    # Screen size in pixels
    width: int = 1920
    height: int = 1080
    padding: float = DEFAULT_PADDING

    orientation: Orientation = DEFAULT_ORIENTATION

    font: InputFont = DEFAULT_INPUT_FONT
    # Explicit font file; overrides font lookup in font_dirs
    font_file: Path | None = None
    font_dirs: tuple[Path, ...] = ()
    line_spacing: float = 4.0

    background: BackgroundColor = BackgroundColor.BLACK
    # Gradient for BackgroundColor.GRADIENT; picked at random if None
    gradient: GradientColor | None = None

    min_font_size: float = DEFAULT_MIN_FONT_SIZE
    max_font_size: float = DEFAULT_MAX_FONT_SIZE

    # Line-count budgets per orientation; max_line_candidates overrides both
    max_lines_landscape: int = DEFAULT_MAX_LINES_LANDSCAPE
    max_lines_portrait: int = DEFAULT_MAX_LINES_PORTRAIT
    max_line_candidates: int | None = None

    history_path: Path | None = None

    def validate(self) -> None:
        """Check configuration values.

        Raises:
            InvalidArgumentError: On non-positive screen size, negative
                padding or inverted font size bounds.
        """
        if self.width <= 0 or self.height <= 0:
            raise InvalidArgumentError(
                f"Screen size must be positive, got {self.width}x{self.height}"
            )
        if self.padding < 0:
            raise InvalidArgumentError(f"Padding must not be negative, got {self.padding}")
        validate_font_bounds(self.min_font_size, self.max_font_size)

    @property
    def line_budget(self) -> int:
        if self.max_line_candidates is not None:
            return self.max_line_candidates
        if self.orientation == Orientation.LANDSCAPE:
            return self.max_lines_landscape
        return self.max_lines_portrait

    def text_style(self) -> TextStyle:
        if self.font_file is not None:
            return TextStyle(font_path=str(self.font_file), line_spacing=self.line_spacing)
        style = TextStyle.for_font(self.font, self.font_dirs, line_spacing=self.line_spacing)
        if style.font_path is None:
            logger.info("Font %s not found, using default font", self.font.label)
        return style


@dataclass
class DisplayResult:
    """Display pipeline result."""

    fit: FitResult
    image_bytes: bytes
    entry: Optional[TextEntry] = None
    stats: dict[str, float] = field(default_factory=dict)


class DisplayPipeline:
    """Fit, render and optionally record a text."""

    def __init__(
        self,
        config: DisplayConfig | None = None,
        measurer: TextMeasurer | None = None,
        progress_callback: ProgressCallback | None = None,
        history: TextHistory | None = None,
    ) -> None:
        """Initialize DisplayPipeline.

        Raises:
            InvalidArgumentError: If the configuration is invalid.
        """
        config = config or DisplayConfig()
        config.validate()
        # Copy; the caller's config is never modified
        self._config = replace(config)
        if self._config.background == BackgroundColor.GRADIENT and self._config.gradient is None:
            self._config.gradient = random_gradient()
            logger.debug("Picked gradient %s", self._config.gradient.display_name)

        self._measurer = measurer or CachingTextMeasurer(PillowTextMeasurer())
        self._engine = AutoFitEngine(self._measurer)
        self._runner = LatestFitRunner(self._engine)
        self._progress_callback = progress_callback
        self._history = history
        self._style = self._config.text_style()

    @property
    def config(self) -> DisplayConfig:
        return self._config

    @property
    def history(self) -> TextHistory:
        if self._history is None:
            self._history = TextHistory(self._config.history_path)
        return self._history

    def build_request(self, text: str) -> FitRequest:
        box_width, box_height = content_box(
            self._config.width, self._config.height, self._config.padding
        )
        return FitRequest(
            text=text,
            box_width=box_width,
            box_height=box_height,
            style=self._style,
            min_font_size=self._config.min_font_size,
            max_font_size=self._config.max_font_size,
            max_line_candidates=self._config.line_budget,
        )

    def compute_layout(self, text: str) -> FitResult:
        """Fit ``text`` synchronously."""
        return self._engine.fit(self.build_request(text))

    async def relayout(self, text: str) -> Optional[FitResult]:
        """Recompute the layout after an input change.

        Returns:
            The FitResult, or None if a later call superseded this one.
        """
        return await self._runner.submit(self.build_request(text))

    async def display(
        self,
        text: str,
        output_path: Path | None = None,
        save_history: bool = False,
    ) -> DisplayResult:
        """Fit ``text``, render the screen and optionally save it to history.

        Args:
            text: Text to display.
            output_path: Where to write the PNG, if given.
            save_history: Store the text in the history.

        Returns:
            DisplayResult with the layout and PNG bytes.

        Raises:
            DisplayError: If a stage fails.
        """
        fit_result = await self._stage_fit(text)
        image_bytes = await self._stage_render(fit_result)

        if output_path is not None:
            self._write_output(image_bytes, output_path)

        entry = self._stage_history(text) if save_history else None

        stats = {
            "font_size": fit_result.font_size,
            "line_count": fit_result.line_count,
            "utilization_fraction": fit_result.utilization_fraction,
        }
        return DisplayResult(fit=fit_result, image_bytes=image_bytes, entry=entry, stats=stats)

    async def _stage_fit(self, text: str) -> FitResult:
        request = self.build_request(text)
        try:
            result = await asyncio.to_thread(self._engine.fit, request)
        except BigTextError as exc:
            raise DisplayError("Layout failed", stage="fit", cause=exc) from exc

        self._notify(
            "fit",
            result.line_count,
            request.max_line_candidates,
            f"{result.line_count} line(s) at font size {result.font_size:.1f}",
        )
        return result

    async def _stage_render(self, fit_result: FitResult) -> bytes:
        renderer = TextRenderer(
            RenderConfig(
                width=self._config.width,
                height=self._config.height,
                background=self._config.background,
                gradient=self._config.gradient,
                style=self._style,
            )
        )
        try:
            image_bytes = await asyncio.to_thread(renderer.render, fit_result)
        except (BigTextError, OSError, ValueError) as exc:
            raise RenderError("Rendering failed", stage="render", cause=exc) from exc

        self._notify("render", 1, 1, f"{self._config.width}x{self._config.height} PNG")
        return image_bytes

    def _write_output(self, image_bytes: bytes, output_path: Path) -> None:
        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_bytes(image_bytes)
        except OSError as exc:
            raise RenderError(
                f"Cannot write output: {output_path}", stage="render", cause=exc
            ) from exc
        logger.info("Wrote %s", output_path)

    def _stage_history(self, text: str) -> TextEntry:
        try:
            entry = self.history.add(text)
        except HistoryError as exc:
            raise DisplayError(str(exc), stage="history", cause=exc) from exc

        self._notify(
            "history", len(self.history), len(self.history), f"Saved entry #{entry.id}"
        )
        return entry

    def _notify(self, stage: str, current: int, total: int, message: str = "") -> None:
        if self._progress_callback is None:
            return
        self._progress_callback(stage, current, total, message)
