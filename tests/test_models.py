# SPDX-License-Identifier: Apache-2.0
"""Tests for core data models."""

from __future__ import annotations

from pathlib import Path

import pytest

from bigtext.core.errors import InvalidArgumentError
from bigtext.core.models import (
    DEFAULT_MAX_LINES_LANDSCAPE,
    DEFAULT_MAX_LINES_PORTRAIT,
    FitRequest,
    FitResult,
    InputFont,
    Orientation,
    TextStyle,
    content_box,
    max_line_candidates_for,
    resolve_font_path,
)


class TestOrientation:
    """Tests for Orientation and its line budgets."""

    def test_labels(self) -> None:
        assert Orientation.LANDSCAPE.label == "Landscape"
        assert Orientation.PORTRAIT.label == "Portrait"

    def test_landscape_budget_is_larger(self) -> None:
        assert max_line_candidates_for(Orientation.LANDSCAPE) == DEFAULT_MAX_LINES_LANDSCAPE
        assert max_line_candidates_for(Orientation.PORTRAIT) == DEFAULT_MAX_LINES_PORTRAIT
        assert DEFAULT_MAX_LINES_LANDSCAPE > DEFAULT_MAX_LINES_PORTRAIT


class TestInputFont:
    """Tests for InputFont."""

    def test_entries(self) -> None:
        assert len(InputFont) == 4
        assert InputFont.MONTSERRAT.label == "Montserrat"
        assert InputFont.PANGOLIN.label == "Pangolin"
        assert InputFont.ROBOTO_SLAB.label == "Roboto"
        assert InputFont.PLAYFAIR_DISPLAY.label == "Playfair"

    def test_from_label(self) -> None:
        assert InputFont.from_label("playfair") is InputFont.PLAYFAIR_DISPLAY
        assert InputFont.from_label("ROBOTO_SLAB") is InputFont.ROBOTO_SLAB
        with pytest.raises(InvalidArgumentError):
            InputFont.from_label("Comic Sans")

    def test_resolve_font_path(self, tmp_path: Path) -> None:
        assert resolve_font_path(InputFont.PANGOLIN, [tmp_path]) is None

        font_file = tmp_path / "Pangolin-Regular.ttf"
        font_file.write_bytes(b"")
        assert resolve_font_path(InputFont.PANGOLIN, [tmp_path]) == font_file

        style = TextStyle.for_font(InputFont.PANGOLIN, [tmp_path], align="left")
        assert style.font_path == str(font_file)
        assert style.align == "left"


def test_content_box() -> None:
    assert content_box(1920, 1080, 24) == (1872, 1032)
    assert content_box(30, 30, 24) == (0.0, 0.0)


class TestFitRequest:
    """Tests for FitRequest."""

    def test_defaults(self) -> None:
        request = FitRequest("hi", 100, 50)
        assert request.min_font_size == 6.0
        assert request.max_font_size == 900.0
        assert request.style == TextStyle()
        assert request.box_area == 5000

    def test_inverted_bounds(self) -> None:
        with pytest.raises(InvalidArgumentError):
            FitRequest("hi", 100, 50, min_font_size=20.0, max_font_size=10.0)

    def test_nan_bounds(self) -> None:
        with pytest.raises(InvalidArgumentError):
            FitRequest("hi", 100, 50, min_font_size=float("nan"))

    def test_zero_area(self) -> None:
        assert FitRequest("hi", 0, 50).box_area == 0.0


class TestFitResult:
    """Tests for FitResult."""

    def test_lines(self) -> None:
        result = FitResult("a b\nc", 40.0, 0.5)
        assert result.lines == ["a b", "c"]
        assert result.line_count == 2

    def test_empty(self) -> None:
        result = FitResult("", 6.0, 0.0)
        assert result.lines == []
        assert result.line_count == 0

    def test_to_dict(self) -> None:
        data = FitResult("a\nb", 40.0, 0.5, width=80.0, height=90.0).to_dict()
        assert data["rendered_text"] == "a\nb"
        assert data["font_size"] == 40.0
        assert data["line_count"] == 2
        assert data["fits_in_box"] is True
