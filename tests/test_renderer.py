# SPDX-License-Identifier: Apache-2.0
"""Tests for backgrounds and TextRenderer."""

from __future__ import annotations

import io
import random
from pathlib import Path

from PIL import Image

from bigtext.core.models import FitResult
from bigtext.output.background import (
    BLACK,
    WHITE,
    BackgroundColor,
    GradientColor,
    background_colors,
    random_gradient,
    text_color,
)
from bigtext.output.renderer import RenderConfig, TextRenderer, gradient_image

PNG_HEADER = b"\x89PNG\r\n\x1a\n"


def _open(image_bytes: bytes) -> Image.Image:
    return Image.open(io.BytesIO(image_bytes))


def _close(actual: tuple[int, ...], expected: tuple[int, ...], tolerance: int = 12) -> bool:
    return all(abs(a - e) <= tolerance for a, e in zip(actual, expected))


class TestBackground:
    """Tests for background helpers."""

    def test_gradient_palette(self) -> None:
        assert len(GradientColor) == 8
        assert GradientColor.PURPLE_PINK.display_name == "Purple to Pink"
        assert GradientColor.PURPLE_PINK.colors == ("#6200EE", "#BB86FC")

    def test_text_color(self) -> None:
        assert text_color(BackgroundColor.WHITE) == BLACK
        assert text_color(BackgroundColor.BLACK) == WHITE
        assert text_color(BackgroundColor.GRADIENT) == WHITE

    def test_background_colors(self) -> None:
        assert background_colors(BackgroundColor.BLACK) == (BLACK, BLACK)
        assert background_colors(BackgroundColor.WHITE) == (WHITE, WHITE)
        assert (
            background_colors(BackgroundColor.GRADIENT, GradientColor.TEAL_BLUE)
            == GradientColor.TEAL_BLUE.colors
        )

    def test_random_gradient_uses_rng(self) -> None:
        first = random_gradient(random.Random(7))
        second = random_gradient(random.Random(7))
        assert first is second
        assert isinstance(random_gradient(), GradientColor)


def test_gradient_image_corners() -> None:
    image = gradient_image((200, 100), "#000000", "#FFFFFF")
    assert image.size == (200, 100)
    assert _close(image.getpixel((0, 0)), (0, 0, 0))
    assert _close(image.getpixel((199, 99)), (255, 255, 255))


class TestTextRenderer:
    """Tests for TextRenderer."""

    def test_png_of_screen_size(self) -> None:
        renderer = TextRenderer(RenderConfig(width=320, height=200))
        image_bytes = renderer.render(FitResult("Hello\nworld", 40.0, 0.5))

        assert image_bytes[:8] == PNG_HEADER
        assert _open(image_bytes).size == (320, 200)

    def test_white_text_on_black(self) -> None:
        renderer = TextRenderer(RenderConfig(width=320, height=200))
        image = _open(renderer.render(FitResult("Hello", 60.0, 0.5))).convert("L")
        low, high = image.getextrema()
        assert low == 0
        assert high > 128

    def test_black_text_on_white(self) -> None:
        config = RenderConfig(width=320, height=200, background=BackgroundColor.WHITE)
        image = _open(TextRenderer(config).render(FitResult("Hello", 60.0, 0.5))).convert("L")
        low, high = image.getextrema()
        assert high == 255
        assert low < 128

    def test_empty_text_renders_background_only(self) -> None:
        renderer = TextRenderer(RenderConfig(width=100, height=50))
        image = _open(renderer.render(FitResult("", 6.0, 0.0))).convert("L")
        assert image.getextrema() == (0, 0)

    def test_gradient_background(self) -> None:
        config = RenderConfig(
            width=200,
            height=100,
            background=BackgroundColor.GRADIENT,
            gradient=GradientColor.DARK_PURPLE_CYAN,
        )
        image = TextRenderer(config).render_image(FitResult("", 6.0, 0.0))
        assert _close(image.getpixel((0, 0)), (0x42, 0x04, 0x7E))
        assert _close(image.getpixel((199, 99)), (0x07, 0xF4, 0x9E))

    def test_render_to_file(self, tmp_path: Path) -> None:
        output_path = tmp_path / "nested" / "screen.png"
        TextRenderer(RenderConfig(width=100, height=50)).render_to_file(
            FitResult("Hi", 20.0, 0.3), output_path
        )
        assert output_path.read_bytes()[:8] == PNG_HEADER
