# SPDX-License-Identifier: Apache-2.0
"""Full-screen renderer for fitted text."""

from __future__ import annotations

import io
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from PIL import Image, ImageChops, ImageDraw

from bigtext.core.measure import load_font
from bigtext.core.models import FitResult, TextStyle
from bigtext.output.background import (
    BackgroundColor,
    GradientColor,
    background_colors,
    text_color,
)

logger = logging.getLogger(__name__)


@dataclass
class RenderConfig:
    """Configuration for screen rendering.

    Attributes:
        width: Screen width in pixels.
        height: Screen height in pixels.
        background: Background mode.
        gradient: Gradient used for BackgroundColor.GRADIENT.
            A random one is picked when None.
        style: Style the text was fitted with.

    Note:
        Output format is fixed to PNG.
    """

    width: int = 1920
    height: int = 1080
    background: BackgroundColor = BackgroundColor.BLACK
    gradient: Optional[GradientColor] = None
    style: TextStyle = field(default_factory=TextStyle)


def gradient_image(size: tuple[int, int], start: str, end: str) -> Image.Image:
    """Diagonal gradient from ``start`` (top-left) to ``end`` (bottom-right)."""
    vertical = Image.linear_gradient("L").resize(size)
    horizontal = Image.linear_gradient("L").rotate(90).resize(size)
    mask = ImageChops.add(horizontal, vertical, scale=2.0)
    return Image.composite(
        Image.new("RGB", size, end),
        Image.new("RGB", size, start),
        mask,
    )


class TextRenderer:
    """Render a FitResult centered on a full-screen background."""

    def __init__(self, config: RenderConfig | None = None) -> None:
        """Initialize TextRenderer.

        Args:
            config: Screen and background configuration.
        """
        self._config = config or RenderConfig()

    def render_image(self, result: FitResult) -> Image.Image:
        config = self._config
        size = (config.width, config.height)
        start, end = background_colors(config.background, config.gradient)
        if start == end:
            image = Image.new("RGB", size, start)
        else:
            image = gradient_image(size, start, end)

        if not result.rendered_text:
            return image

        font = load_font(config.style.font_path, result.font_size)
        draw = ImageDraw.Draw(image)
        draw.multiline_text(
            (config.width / 2, config.height / 2),
            result.rendered_text,
            fill=text_color(config.background),
            font=font,
            anchor="mm",
            spacing=config.style.line_spacing,
            align=config.style.align,
        )
        return image

    def render(self, result: FitResult) -> bytes:
        """Render to PNG bytes.

        Args:
            result: Fitted layout to draw.

        Returns:
            PNG image bytes.
        """
        image = self.render_image(result)
        buffer = io.BytesIO()
        image.save(buffer, format="PNG")
        logger.debug(
            "Rendered %dx%d screen at font size %.1f",
            image.width,
            image.height,
            result.font_size,
        )
        return buffer.getvalue()

    def render_to_file(self, result: FitResult, output_path: Path) -> None:
        """Render and save to ``output_path``."""
        image_bytes = self.render(result)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_bytes(image_bytes)
