# SPDX-License-Identifier: Apache-2.0
"""Output modules for bigtext.

This module provides background palettes and the full-screen PNG renderer.
"""

from bigtext.output.background import (
    BackgroundColor,
    GradientColor,
    background_colors,
    random_gradient,
    text_color,
)
from bigtext.output.renderer import RenderConfig, TextRenderer, gradient_image

__all__ = [
    # Background
    "BackgroundColor",
    "GradientColor",
    "background_colors",
    "random_gradient",
    "text_color",
    # Renderer
    "RenderConfig",
    "TextRenderer",
    "gradient_image",
]
