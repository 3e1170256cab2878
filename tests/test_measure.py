# SPDX-License-Identifier: Apache-2.0
"""Tests for text measurement backends."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from bigtext.core.errors import FontLoadError
from bigtext.core.measure import (
    CachingTextMeasurer,
    EstimatedTextMeasurer,
    PillowTextMeasurer,
    TextMeasurer,
    is_cjk_char,
    load_font,
)
from bigtext.core.models import TextStyle


class TestEstimatedTextMeasurer:
    """Tests for EstimatedTextMeasurer."""

    @pytest.fixture
    def measurer(self) -> EstimatedTextMeasurer:
        return EstimatedTextMeasurer()

    def test_empty_text(self, measurer: EstimatedTextMeasurer) -> None:
        assert measurer.measure("", 12.0, TextStyle()) == (0.0, 0.0)

    def test_single_line(self, measurer: EstimatedTextMeasurer) -> None:
        width, height = measurer.measure("ab", 10.0, TextStyle())
        assert width == pytest.approx(11.0)
        assert height == pytest.approx(12.0)

    def test_widest_line_and_spacing(self, measurer: EstimatedTextMeasurer) -> None:
        """Width follows the widest line; spacing sits between lines only."""
        width, height = measurer.measure("abcd\nab", 10.0, TextStyle(line_spacing=3.0))
        assert width == pytest.approx(22.0)
        assert height == pytest.approx(2 * 12.0 + 3.0)

    def test_cjk_chars_are_wider(self, measurer: EstimatedTextMeasurer) -> None:
        latin, _ = measurer.measure("aa", 10.0, TextStyle())
        cjk, _ = measurer.measure("漢字", 10.0, TextStyle())
        assert cjk == pytest.approx(18.0)
        assert cjk > latin

    def test_conforms_to_protocol(self, measurer: EstimatedTextMeasurer) -> None:
        assert isinstance(measurer, TextMeasurer)


def test_is_cjk_char() -> None:
    assert is_cjk_char("あ")
    assert is_cjk_char("ア")
    assert is_cjk_char("漢")
    assert is_cjk_char("한")
    assert not is_cjk_char("A")
    assert not is_cjk_char("1")


class TestPillowTextMeasurer:
    """Tests for PillowTextMeasurer with Pillow's default font."""

    @pytest.fixture
    def measurer(self) -> PillowTextMeasurer:
        return PillowTextMeasurer()

    def test_empty_text(self, measurer: PillowTextMeasurer) -> None:
        assert measurer.measure("", 40.0, TextStyle()) == (0.0, 0.0)

    def test_grows_with_font_size(self, measurer: PillowTextMeasurer) -> None:
        small = measurer.measure("Hello", 20.0, TextStyle())
        large = measurer.measure("Hello", 80.0, TextStyle())
        assert large[0] > small[0]
        assert large[1] > small[1]

    def test_respects_explicit_breaks(self, measurer: PillowTextMeasurer) -> None:
        """Two lines are narrower and taller than the same words on one line."""
        one_line = measurer.measure("Hello world", 40.0, TextStyle())
        two_lines = measurer.measure("Hello\nworld", 40.0, TextStyle())
        assert two_lines[0] < one_line[0]
        assert two_lines[1] > one_line[1]

    def test_missing_font_file(self, measurer: PillowTextMeasurer, tmp_path: Path) -> None:
        style = TextStyle(font_path=str(tmp_path / "missing.ttf"))
        with pytest.raises(FontLoadError) as exc_info:
            measurer.measure("Hello", 20.0, style)
        assert exc_info.value.font_path == style.font_path

    def test_load_font_is_cached(self) -> None:
        assert load_font(None, 33.0) is load_font(None, 33.0)


class TestCachingTextMeasurer:
    """Tests for CachingTextMeasurer."""

    def test_repeated_measurement_hits_cache(self) -> None:
        inner = MagicMock()
        inner.measure.return_value = (10.0, 20.0)
        measurer = CachingTextMeasurer(inner)

        assert measurer.measure("abc", 12.0, TextStyle()) == (10.0, 20.0)
        assert measurer.measure("abc", 12.0, TextStyle()) == (10.0, 20.0)

        inner.measure.assert_called_once_with("abc", 12.0, TextStyle())
        assert measurer.hits == 1
        assert measurer.misses == 1
        assert len(measurer) == 1

    def test_style_is_part_of_key(self) -> None:
        inner = MagicMock()
        inner.measure.return_value = (1.0, 1.0)
        measurer = CachingTextMeasurer(inner)

        measurer.measure("abc", 12.0, TextStyle(align="left"))
        measurer.measure("abc", 12.0, TextStyle(align="right"))
        assert inner.measure.call_count == 2

    def test_cache_is_bounded(self) -> None:
        inner = MagicMock()
        inner.measure.return_value = (1.0, 1.0)
        measurer = CachingTextMeasurer(inner, max_entries=2)

        for size in (1.0, 2.0, 3.0):
            measurer.measure("abc", size, TextStyle())
        assert len(measurer) <= 2

    def test_len_holds_lock(self) -> None:
        inner = MagicMock()
        inner.measure.return_value = (1.0, 1.0)
        measurer = CachingTextMeasurer(inner)
        measurer.measure("abc", 12.0, TextStyle())

        lock = MagicMock()
        measurer._lock = lock
        assert len(measurer) == 1
        lock.__enter__.assert_called_once()

    def test_clear(self) -> None:
        inner = MagicMock()
        inner.measure.return_value = (1.0, 1.0)
        measurer = CachingTextMeasurer(inner)
        measurer.measure("abc", 12.0, TextStyle())
        measurer.clear()
        assert len(measurer) == 0
        assert measurer.hits == 0
        assert measurer.misses == 0
