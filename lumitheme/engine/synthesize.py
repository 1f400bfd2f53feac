# Copyright (c) 2026 Lumitheme
# SPDX-License-Identifier: MIT

"""
Theme synthesis from a quantized palette.

The synthesizer picks palette colors for each UI role and fills gaps with
synthetic colors:

1. Base family: three anchors are taken from the palette at the target
   luminosity and at two offsets away from it (toward lighter for dark
   themes, toward darker for light themes). Each anchor keeps its hue and
   chroma but gets the exact target lightness, so surfaces are always
   separated no matter what the palette offers. Background, foreground
   and surfaces are blends of these anchors.
2. Text: near-neutral palette colors at a fixed high-contrast lightness.
3. Accents: eight hue targets 45° apart starting at the image's dominant
   hue. Each is filled with the closest palette color near the accent
   lightness, or synthesized at the target hue with the average chroma.

The output theme is in OkLCh; convert it for display.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Optional

import numpy as np
from numpy.typing import NDArray

from lumitheme.schema import (
    ACCENT_COUNT,
    DARK_THEME_THRESHOLD,
    SURFACE_COUNT,
    OklchColor,
    Palette,
    Theme,
)
from lumitheme.engine.colorspace import hue_distance, lerp_oklch, oklab_to_oklch

logger = logging.getLogger(__name__)

# Primary plus the accents, 45° apart
HUE_STEPS = ACCENT_COUNT + 1


# (role, from anchor, to anchor, blend weight) for the base family.
# The weights are product choices, kept per branch as a lookup table.
DARK_LAYOUT: tuple[tuple[str, str, str, float], ...] = (
    ("background", "start", "start", 0.0),
    ("foreground", "start", "mid", 0.5),
    ("surface0", "mid", "mid", 0.0),
    ("surface1", "mid", "end", 0.33),
    ("surface2", "mid", "end", 0.66),
    ("surface3", "end", "end", 0.0),
)

LIGHT_LAYOUT: tuple[tuple[str, str, str, float], ...] = (
    ("background", "start", "start", 0.0),
    ("foreground", "start", "mid", 0.5),
    ("surface0", "mid", "mid", 0.0),
    ("surface1", "start", "end", 0.2),
    ("surface2", "mid", "end", 0.2),
    ("surface3", "mid", "end", 0.8),
)


@dataclass(frozen=True)
class SynthesisConfig:
    """Constants of the theme heuristic."""

    # Base luminosities below this produce a dark theme
    dark_threshold: float = DARK_THEME_THRESHOLD

    # Anchor offsets from the base luminosity (sign flips for light themes)
    mid_offset: float = 0.05
    end_offset: float = 0.30

    # Text lightness per branch; subtext sits closer to the background
    text_luminosity_dark: float = 0.8
    text_luminosity_light: float = 0.4
    subtext_offset: float = 0.07
    max_text_chroma: float = 0.8

    # Accent search
    accent_luminosity_dark: float = 0.8
    accent_luminosity_light: float = 0.7
    hue_min_lightness: float = 0.1
    hue_max_lightness: float = 0.98
    min_accent_chroma: float = 0.04
    default_accent_chroma: float = 0.1
    accent_lightness_window: float = 0.3
    accent_hue_window: float = 0.3  # radians
    accent_max_distance: float = 0.18  # ΔL² + Δh²
    accent_blend: float = 0.5

    dark_layout: tuple = field(default=DARK_LAYOUT, repr=False)
    light_layout: tuple = field(default=LIGHT_LAYOUT, repr=False)


@dataclass(frozen=True)
class AccentSlot:
    """One hue target of the accent search."""
    target_hue: float
    color: OklchColor
    from_palette: bool


def closest_by_lightness(lab: NDArray[np.float64], luminosity: float) -> int:
    """
    Index of the palette color whose L is closest to ``luminosity``.

    Ties go to the first color in palette order.
    """
    return int(np.argmin(np.abs(lab[:, 0] - luminosity)))


def _anchor(lab: NDArray[np.float64], lch: NDArray[np.float64], luminosity: float) -> OklchColor:
    """Closest palette color by lightness, moved to exactly ``luminosity``."""
    index = closest_by_lightness(lab, luminosity)
    return OklchColor(luminosity, float(lch[index, 1]), float(lch[index, 2]))


def _lerp(a: OklchColor, b: OklchColor, t: float) -> OklchColor:
    if t == 0.0:
        return a
    L, C, h = lerp_oklch((a.L, a.C, a.h), (b.L, b.C, b.h), t)
    return OklchColor(float(L), max(0.0, float(C)), float(h))


def _clamp01(value: float) -> float:
    return min(1.0, max(0.0, value))


def dominant_hue(
    lab: NDArray[np.float64],
    config: Optional[SynthesisConfig] = None,
) -> tuple[float, float, int]:
    """
    Average hue and chroma of the saturated palette colors.

    Only colors with L in [hue_min_lightness, hue_max_lightness] and chroma
    above min_accent_chroma take part, which keeps near-black, near-white
    and gray entries out of the average. Hue is the angle of the mean
    (a, b) vector.

    Returns:
        (hue in radians, average chroma, number of contributing colors).
        With no contributing colors the hue is 0 and the chroma falls back
        to default_accent_chroma.
    """
    cfg = config or SynthesisConfig()
    lch = oklab_to_oklch(lab)

    mask = (
        (lab[:, 0] >= cfg.hue_min_lightness)
        & (lab[:, 0] <= cfg.hue_max_lightness)
        & (lch[:, 1] > cfg.min_accent_chroma)
    )
    count = int(mask.sum())
    if count == 0:
        return 0.0, cfg.default_accent_chroma, 0

    hue = math.atan2(float(lab[mask, 2].mean()), float(lab[mask, 1].mean()))
    chroma = float(lch[mask, 1].mean())
    return hue, chroma, count


def search_accents(
    lch: NDArray[np.float64],
    start_hue: float,
    accent_luminosity: float,
    accent_chroma: float,
    config: Optional[SynthesisConfig] = None,
) -> list[AccentSlot]:
    """
    Fill HUE_STEPS evenly spaced hue targets from the palette.

    For each target, candidates must lie within the lightness and hue
    windows and have at least min_accent_chroma; the one minimising
    ΔL² + Δh² is used if within accent_max_distance. Otherwise a color is
    synthesized at the target hue, the accent lightness and the average
    chroma.

    Args:
        lch: Palette as an (N, 3) OkLCh array
        start_hue: First hue target in radians
        accent_luminosity: Lightness the search is centred on
        accent_chroma: Chroma of synthesized colors

    Returns:
        One AccentSlot per hue target, in hue-wheel order
    """
    cfg = config or SynthesisConfig()
    step = 2.0 * math.pi / HUE_STEPS

    delta_l = np.abs(lch[:, 0] - accent_luminosity)
    saturated = lch[:, 1] >= cfg.min_accent_chroma

    slots: list[AccentSlot] = []
    for j in range(HUE_STEPS):
        target = math.remainder(start_hue + j * step, 2.0 * math.pi)
        delta_h = hue_distance(lch[:, 2], target)

        eligible = (
            (delta_l <= cfg.accent_lightness_window)
            & (delta_h <= cfg.accent_hue_window)
            & saturated
        )
        distance = np.where(eligible, delta_l ** 2 + delta_h ** 2, np.inf)
        best = int(np.argmin(distance))

        if distance[best] <= cfg.accent_max_distance:
            L, C, h = lch[best]
            slots.append(AccentSlot(target, OklchColor(float(L), float(C), float(h)), True))
        else:
            slots.append(AccentSlot(target, OklchColor(accent_luminosity, accent_chroma, target), False))

    return slots


def synthesize_theme(
    palette: Palette,
    luminosity: float,
    config: Optional[SynthesisConfig] = None,
) -> Theme:
    """
    Build a 16-color theme from a lightness-sorted palette.

    Args:
        palette: Quantized palette (Oklab, sorted by L)
        luminosity: Base luminosity, 0 = darkest, 1 = lightest. Values
            below the dark threshold (0.65) produce a dark theme.
        config: Heuristic constants (defaults if None)

    Returns:
        Theme with OkLCh colors
    """
    if not 0.0 <= luminosity <= 1.0:
        raise ValueError(f"Luminosity must be 0-1, got {luminosity}")

    cfg = config or SynthesisConfig()
    lab = palette.to_array()
    lch = oklab_to_oklch(lab)

    is_dark = luminosity < cfg.dark_threshold
    sign = 1.0 if is_dark else -1.0
    logger.debug("%s theme at luminosity %.2f", "dark" if is_dark else "light", luminosity)

    # Base family
    anchors = {
        "start": _anchor(lab, lch, luminosity),
        "mid": _anchor(lab, lch, _clamp01(luminosity + cfg.mid_offset * sign)),
        "end": _anchor(lab, lch, _clamp01(luminosity + cfg.end_offset * sign)),
    }
    layout = cfg.dark_layout if is_dark else cfg.light_layout
    base = {
        role: _lerp(anchors[a], anchors[b], t)
        for role, a, b, t in layout
    }

    # Text & subtext
    text_luminosity = cfg.text_luminosity_dark if is_dark else cfg.text_luminosity_light
    subtext_luminosity = _clamp01(text_luminosity - cfg.subtext_offset * sign)

    text = _anchor(lab, lch, text_luminosity)
    text = OklchColor(text.L, min(text.C, cfg.max_text_chroma), text.h)
    subtext = _anchor(lab, lch, subtext_luminosity)
    subtext = OklchColor(subtext.L, min(subtext.C, cfg.max_text_chroma), subtext.h)

    # Accents
    accent_luminosity = cfg.accent_luminosity_dark if is_dark else cfg.accent_luminosity_light
    hue, accent_chroma, count = dominant_hue(lab, cfg)
    if count == 0:
        logger.warning(
            "no saturated colors in palette; using default accent chroma %.2f",
            accent_chroma,
        )
    else:
        logger.debug(
            "dominant hue %.1f° from %d colors, average chroma %.3f",
            math.degrees(hue) % 360.0, count, accent_chroma,
        )

    slots = search_accents(lch, hue, accent_luminosity, accent_chroma, cfg)

    blended = []
    for slot in slots:
        color = slot.color
        if slot.from_palette:
            L = color.L + (accent_luminosity - color.L) * cfg.accent_blend
            color = OklchColor(L, color.C, color.h)
        blended.append(color)

    # The first slot filled from the palette leads; the rest follow it
    # around the wheel.
    primary_index = next((i for i, s in enumerate(slots) if s.from_palette), 0)
    order = [(primary_index + k) % len(slots) for k in range(len(slots))]
    logger.debug(
        "accents: %d of %d from palette, primary at slot %d",
        sum(s.from_palette for s in slots), len(slots), primary_index,
    )

    return Theme(
        background=base["background"],
        foreground=base["foreground"],
        surfaces=tuple(base[f"surface{i}"] for i in range(SURFACE_COUNT)),
        text=text,
        subtext=subtext,
        primary=blended[order[0]],
        accents=tuple(blended[i] for i in order[1:]),
        luminosity=luminosity,
        accent_luminosity=accent_luminosity,
        accent_chroma=accent_chroma,
    )
