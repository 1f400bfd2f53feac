# Copyright (c) 2026 Lumitheme
# SPDX-License-Identifier: MIT

"""Base types and utilities for serializers."""

from enum import Enum


class SerializerFormat(Enum):
    """Output format for serializers."""

    JSON = "json"
    JSON_PRETTY = "json_pretty"
    NATURAL = "natural"


def hue_to_name(hue: float) -> str:
    """Convert an OkLCh hue angle in degrees to an approximate color name.

    OkLCh hue wheel (approximate ranges used here):
      0-29, 340-359: Red
      30-59: Orange
      60-109: Yellow
      110-159: Green
      160-199: Cyan
      200-259: Blue
      260-309: Purple
      310-339: Pink
    """
    if hue < 30 or hue >= 340:
        return "Red"
    elif hue < 60:
        return "Orange"
    elif hue < 110:
        return "Yellow"
    elif hue < 160:
        return "Green"
    elif hue < 200:
        return "Cyan"
    elif hue < 260:
        return "Blue"
    elif hue < 310:
        return "Purple"
    else:
        return "Pink"


def describe_color(color) -> str:
    """Short human-readable name for any color ("Dark blue", "Light gray")."""
    lch = color.to_oklch()
    if lch.C < 0.02:
        if lch.L > 0.9:
            return "White"
        elif lch.L < 0.1:
            return "Black"
        elif lch.L < 0.35:
            return "Dark gray"
        elif lch.L > 0.75:
            return "Light gray"
        return "Gray"

    name = hue_to_name(lch.hue_degrees)
    if lch.L > 0.75:
        return f"Light {name.lower()}"
    elif lch.L < 0.35:
        return f"Dark {name.lower()}"
    return name
