# Copyright (c) 2026 Lumitheme
# SPDX-License-Identifier: MIT

"""
Template data context.

Builds the data handed to a text templating engine (for example jinja2)
to render config files from a theme. Every role becomes an entry with
hex, decimal RGB and OkLCh fields:

    {
      "background": {"hex": "#1D1F2B", "rgb": "29, 31, 43",
                     "L": 0.2, "C": 0.02, "hue": 275.1},
      ...
      "accent_luminosity": 0.8,
      "accent_chroma": 0.11,
      "closest_hue": <callable>,
      "make_color_lch": <callable>,
    }

``closest_hue`` and ``make_color_lch`` let templates ask for colors at
hues outside the fixed eight accents.
"""

from __future__ import annotations

import math
from functools import partial

from lumitheme.schema import Color, OklchColor, Theme


def color_data(color: Color) -> dict:
    """Template fields for one color; hue in degrees."""
    rgb = color.to_rgb()
    lch = rgb.to_oklch()
    return {
        "hex": rgb.hex,
        "rgb": rgb.rgb_string,
        "L": lch.L,
        "C": lch.C,
        "hue": lch.hue_degrees,
    }


def closest_hue(theme: Theme, hue: float) -> dict:
    """
    The hue-bearing theme color pointing closest to ``hue``.

    Compares the normalized (a, b) direction of primary and accents with
    the unit vector of the target hue. Achromatic colors have no direction
    and are skipped; if all are achromatic, primary is returned.

    Args:
        theme: Theme in any color space
        hue: Target hue in degrees

    Returns:
        Template fields of the picked color
    """
    target_a = math.cos(math.radians(hue))
    target_b = math.sin(math.radians(hue))

    picked = theme.primary
    smallest = math.inf
    for color in theme.hue_colors:
        lab = color.to_rgb().to_oklab()
        m = math.hypot(lab.a, lab.b)
        if m < 1e-6:
            continue
        d = math.hypot(lab.a / m - target_a, lab.b / m - target_b)
        if d < smallest:
            smallest = d
            picked = color

    return color_data(picked)


def make_color_lch(L: float, C: float, hue: float) -> dict:
    """
    Synthesize a color from arbitrary lightness, chroma and hue.

    Args:
        L: Lightness 0-1
        C: Chroma (>= 0)
        hue: Hue in degrees

    Returns:
        Template fields of the color, clipped to the sRGB gamut
    """
    return color_data(OklchColor(L, C, math.radians(hue)))


def to_template_data(theme: Theme) -> dict:
    """Build the template context for a theme.

    Args:
        theme: Theme in any color space.

    Returns:
        Dictionary with one entry per role, the accent search parameters
        and the ``closest_hue`` / ``make_color_lch`` callables.
    """
    data: dict = {name: color_data(color) for name, color in theme.roles}
    data["accent_luminosity"] = theme.accent_luminosity
    data["accent_chroma"] = theme.accent_chroma
    data["closest_hue"] = partial(closest_hue, theme)
    data["make_color_lch"] = make_color_lch
    return data
