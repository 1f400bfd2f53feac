# Copyright (c) 2026 Lumitheme
# SPDX-License-Identifier: MIT

"""
Schema definitions for colors, palettes and themes.

All types in this module are immutable (frozen dataclasses).
Once a theme is produced, it cannot be altered.
"""

from lumitheme.schema.colors import (
    Color,
    ColorSpace,
    OklabColor,
    OklchColor,
    RGBColor,
    color_from_dict,
    convert,
)
from lumitheme.schema.theme import (
    ACCENT_COUNT,
    DARK_THEME_THRESHOLD,
    ROLE_NAMES,
    SCHEMA_VERSION,
    SURFACE_COUNT,
    Palette,
    Theme,
)

__all__ = [
    # Version
    "SCHEMA_VERSION",
    # Color types
    "Color",
    "ColorSpace",
    "RGBColor",
    "OklabColor",
    "OklchColor",
    "convert",
    "color_from_dict",
    # Pipeline products
    "Palette",
    "Theme",
    "ROLE_NAMES",
    "SURFACE_COUNT",
    "ACCENT_COUNT",
    "DARK_THEME_THRESHOLD",
]
