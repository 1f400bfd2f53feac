# Copyright (c) 2026 Lumitheme
# SPDX-License-Identifier: MIT

"""
Lumitheme -- UI color themes derived from images.

Quantizes an image into a perceptual (Oklab) palette and arranges it into
a 16-color theme: background, foreground, surfaces, text and accents.

Quick start::

    from lumitheme import generate_theme

    result = generate_theme("wallpaper.png", luminosity=0.2)
    result.theme.background.hex   # "#1D1F2B"
    result.theme.to_json()        # All 16 roles
"""

from __future__ import annotations

__version__ = "1.0.0"

from lumitheme.engine import (
    GeneratedTheme,
    QuantizerKind,
    ThemeConfig,
    extract_palette,
    generate_theme,
)
from lumitheme.schema import (
    ColorSpace,
    OklabColor,
    OklchColor,
    Palette,
    RGBColor,
    Theme,
)

__all__ = [
    # Core API
    "generate_theme",
    "extract_palette",
    "GeneratedTheme",
    "ThemeConfig",
    "QuantizerKind",
    # Types (commonly needed)
    "Theme",
    "Palette",
    "RGBColor",
    "OklabColor",
    "OklchColor",
    "ColorSpace",
    # Version
    "__version__",
]
