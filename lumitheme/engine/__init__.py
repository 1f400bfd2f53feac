# Copyright (c) 2026 Lumitheme
# SPDX-License-Identifier: MIT

"""
Theme engine for Lumitheme.

This module provides color conversion, palette quantization and theme
synthesis. All operations are pure computations over pixels; the only
randomness is the optional k-means seed.
"""

from lumitheme.engine.generate import (
    GeneratedTheme,
    ThemeConfig,
    extract_palette,
    generate_theme,
)
from lumitheme.engine.quantize import (
    KMeanQuantizer,
    MedianCutQuantizer,
    Quantizer,
    QuantizerKind,
    create_quantizer,
)
from lumitheme.engine.sampler import ImageSource, RasterImage, load_image, sample_pixels
from lumitheme.engine.synthesize import SynthesisConfig, synthesize_theme

__all__ = [
    "generate_theme",
    "extract_palette",
    "GeneratedTheme",
    "ThemeConfig",
    "Quantizer",
    "MedianCutQuantizer",
    "KMeanQuantizer",
    "QuantizerKind",
    "create_quantizer",
    "ImageSource",
    "RasterImage",
    "load_image",
    "sample_pixels",
    "SynthesisConfig",
    "synthesize_theme",
]
