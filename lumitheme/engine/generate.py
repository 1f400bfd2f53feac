# Copyright (c) 2026 Lumitheme
# SPDX-License-Identifier: MIT

"""
Main theme generation API.

This is the primary entry point for Lumitheme's engine:

    Image → sample buffer → Quantizer → Palette → synthesizer → Theme

Configuration is validated before any pixel is read, so a run either
fails fast with a descriptive error or produces a complete theme.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

import numpy as np
from numpy.typing import NDArray

from lumitheme.schema import ColorSpace, Palette, Theme
from lumitheme.engine.quantize import QuantizerKind, create_quantizer
from lumitheme.engine.sampler import (
    SAMPLE_STRIDE,
    ImageSource,
    load_image,
    sample_count,
    sample_pixels,
)
from lumitheme.engine.synthesize import SynthesisConfig, synthesize_theme

logger = logging.getLogger(__name__)

ImageInput = Union[str, Path, NDArray[np.uint8], ImageSource]

# Luminosities used by the --dark and --light presets
DARK_LUMINOSITY = 0.20
LIGHT_LUMINOSITY = 0.99


@dataclass(frozen=True)
class ThemeConfig:
    """Configuration for a generation run."""

    # Number of colors the image is quantized to
    palette_size: int = 32

    # Base luminosity: 0 = darkest, 1 = lightest
    luminosity: float = DARK_LUMINOSITY

    quantizer: QuantizerKind = QuantizerKind.MEDIAN_CUT

    # K-means seed; None gives a different palette on every run
    seed: Optional[int] = None

    # Every stride-th pixel is sampled
    stride: int = SAMPLE_STRIDE

    def __post_init__(self) -> None:
        """Validate settings."""
        if isinstance(self.palette_size, bool) or not isinstance(self.palette_size, (int, np.integer)):
            raise ValueError(f"Palette size must be an integer, got {self.palette_size!r}")
        if self.palette_size < 1:
            raise ValueError(f"Palette size must be >= 1, got {self.palette_size}")
        if not 0.0 <= self.luminosity <= 1.0:
            raise ValueError(f"Luminosity must be 0-1, got {self.luminosity}")
        if self.stride < 1:
            raise ValueError(f"Sampling stride must be >= 1, got {self.stride}")
        if not isinstance(self.quantizer, QuantizerKind):
            # Accept the string form ("median-cut", "k-mean")
            try:
                object.__setattr__(self, "quantizer", QuantizerKind(self.quantizer))
            except ValueError:
                choices = ", ".join(k.value for k in QuantizerKind)
                raise ValueError(
                    f"Unknown quantizer {self.quantizer!r}; expected one of: {choices}"
                ) from None


@dataclass(frozen=True)
class GeneratedTheme:
    """
    Result of a generation run.

    Attributes:
        palette: The quantized palette (Oklab, sorted by L)
        theme: The theme in RGB, ready for display
        theme_oklch: The theme as synthesized, in OkLCh
    """
    palette: Palette
    theme: Theme
    theme_oklch: Theme


def _prepare(image: ImageInput, config: ThemeConfig) -> ImageSource:
    source = image if isinstance(image, ImageSource) else load_image(image)

    available = sample_count(source.width, source.height, config.stride)
    if config.palette_size > available:
        raise ValueError(
            f"Palette size {config.palette_size} exceeds the {available} samples "
            f"available from a {source.width}x{source.height} image"
        )
    return source


def _quantize(source: ImageSource, config: ThemeConfig) -> Palette:
    samples = sample_pixels(source, config.stride)
    logger.debug(
        "quantizing %d samples to %d colors with %s",
        len(samples), config.palette_size, config.quantizer.value,
    )
    quantizer = create_quantizer(config.quantizer, seed=config.seed)
    return quantizer.quantize(samples, config.palette_size)


def extract_palette(
    image: ImageInput,
    *,
    palette_size: int = 32,
    quantizer: Union[QuantizerKind, str] = QuantizerKind.MEDIAN_CUT,
    seed: Optional[int] = None,
    stride: int = SAMPLE_STRIDE,
) -> Palette:
    """
    Quantize an image to a lightness-sorted palette.

    Args:
        image: File path, (H, W, 3) uint8 array, or any ImageSource
        palette_size: Number of colors (1 to the number of samples)
        quantizer: Algorithm to use
        seed: K-means seed (ignored by median cut)
        stride: Sampling step in pixels

    Returns:
        Palette of exactly ``palette_size`` Oklab colors
    """
    config = ThemeConfig(
        palette_size=palette_size,
        quantizer=quantizer,
        seed=seed,
        stride=stride,
    )
    return _quantize(_prepare(image, config), config)


def generate_theme(
    image: ImageInput,
    *,
    palette_size: int = 32,
    luminosity: float = DARK_LUMINOSITY,
    quantizer: Union[QuantizerKind, str] = QuantizerKind.MEDIAN_CUT,
    seed: Optional[int] = None,
    stride: int = SAMPLE_STRIDE,
    synthesis: Optional[SynthesisConfig] = None,
) -> GeneratedTheme:
    """
    Generate a 16-color theme from an image.

    Args:
        image: File path, (H, W, 3) uint8 array, or any ImageSource
        palette_size: Intermediate palette size (default: 32)
        luminosity: Base luminosity 0-1 (default: 0.20, a dark theme).
            Values below 0.65 produce a dark theme.
        quantizer: "median-cut" (default, deterministic) or "k-mean"
        seed: K-means seed; fix it for reproducible palettes
        stride: Sampling step in pixels (default: 8)
        synthesis: Theme heuristic constants (defaults if None)

    Returns:
        GeneratedTheme holding the palette and the theme

    Example:
        >>> from lumitheme import generate_theme
        >>> result = generate_theme("wallpaper.png", luminosity=0.2)
        >>> result.theme.background.hex
        '#1D1F2B'
    """
    config = ThemeConfig(
        palette_size=palette_size,
        luminosity=luminosity,
        quantizer=quantizer,
        seed=seed,
        stride=stride,
    )
    source = _prepare(image, config)
    palette = _quantize(source, config)

    theme_oklch = synthesize_theme(palette, config.luminosity, synthesis)
    return GeneratedTheme(
        palette=palette,
        theme=theme_oklch.convert(ColorSpace.RGB),
        theme_oklch=theme_oklch,
    )
