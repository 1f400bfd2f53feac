# Copyright (c) 2026 Lumitheme
# SPDX-License-Identifier: MIT

"""End-to-end tests for palette extraction and theme generation."""

import numpy as np
import pytest

from lumitheme import (
    ColorSpace,
    GeneratedTheme,
    QuantizerKind,
    RGBColor,
    ThemeConfig,
    extract_palette,
    generate_theme,
)
from lumitheme.engine.generate import DARK_LUMINOSITY, LIGHT_LUMINOSITY
from lumitheme.schema import OklchColor


def _solid_image(r, g, b, height=64, width=64):
    return np.full((height, width, 3), [r, g, b], dtype=np.uint8)


def _banded_image(height=64, width=64):
    """Horizontal bands: navy, teal, orange, cream."""
    img = np.zeros((height, width, 3), dtype=np.uint8)
    band = height // 4
    img[:band] = [20, 24, 60]
    img[band : 2 * band] = [30, 140, 130]
    img[2 * band : 3 * band] = [230, 120, 40]
    img[3 * band :] = [240, 230, 210]
    return img


class _GrayRamp:
    """ImageSource whose lightness ramps with the pixel index."""

    width = 32
    height = 32

    def oklab_at(self, indices):
        L = np.asarray(indices, dtype=np.float64) / (self.width * self.height)
        return np.stack([L, np.zeros_like(L), np.zeros_like(L)], axis=-1)


class TestThemeConfig:

    def test_defaults(self):
        config = ThemeConfig()
        assert config.palette_size == 32
        assert config.luminosity == DARK_LUMINOSITY
        assert config.quantizer == QuantizerKind.MEDIAN_CUT
        assert config.seed is None
        assert config.stride == 8

    def test_quantizer_from_string(self):
        assert ThemeConfig(quantizer="k-mean").quantizer == QuantizerKind.K_MEAN

    def test_unknown_quantizer(self):
        with pytest.raises(ValueError, match="Unknown quantizer"):
            ThemeConfig(quantizer="octree")

    @pytest.mark.parametrize("size", [0, -3])
    def test_invalid_palette_size(self, size):
        with pytest.raises(ValueError, match="Palette size"):
            ThemeConfig(palette_size=size)

    def test_palette_size_not_integer(self):
        with pytest.raises(ValueError, match="integer"):
            ThemeConfig(palette_size="32")

    def test_palette_size_numpy_integer(self):
        assert ThemeConfig(palette_size=np.int64(8)).palette_size == 8

    @pytest.mark.parametrize("luminosity", [-0.01, 1.5])
    def test_invalid_luminosity(self, luminosity):
        with pytest.raises(ValueError, match="Luminosity"):
            ThemeConfig(luminosity=luminosity)

    def test_invalid_stride(self):
        with pytest.raises(ValueError, match="stride"):
            ThemeConfig(stride=0)


class TestExtractPalette:

    def test_size_and_order(self):
        palette = extract_palette(_banded_image(), palette_size=8)
        assert len(palette) == 8
        lightness = [c.L for c in palette]
        assert lightness == sorted(lightness)

    def test_solid_image(self):
        palette = extract_palette(_solid_image(200, 40, 40), palette_size=4)
        lab = palette.to_array()
        np.testing.assert_allclose(lab, np.tile(lab[0], (4, 1)))

    def test_palette_larger_than_samples(self):
        img = _solid_image(10, 10, 10, height=4, width=4)
        with pytest.raises(ValueError, match="exceeds the 2 samples"):
            extract_palette(img, palette_size=3)

    def test_stride_changes_sample_count(self):
        img = _solid_image(10, 10, 10, height=4, width=4)
        palette = extract_palette(img, palette_size=16, stride=1)
        assert len(palette) == 16

    def test_custom_image_source(self):
        palette = extract_palette(_GrayRamp(), palette_size=4)
        lightness = [c.L for c in palette]
        assert lightness[0] < lightness[-1]

    def test_kmean_seeded(self):
        a = extract_palette(_banded_image(), palette_size=6, quantizer="k-mean", seed=9)
        b = extract_palette(_banded_image(), palette_size=6, quantizer="k-mean", seed=9)
        assert a == b


class TestGenerateTheme:

    def test_result_shape(self):
        result = generate_theme(_banded_image())
        assert isinstance(result, GeneratedTheme)
        assert len(result.palette) == 32
        assert len(result.theme) == 16
        assert all(isinstance(c, RGBColor) for c in result.theme.colors)
        assert all(isinstance(c, OklchColor) for c in result.theme_oklch.colors)

    def test_rgb_matches_oklch(self):
        result = generate_theme(_banded_image())
        assert result.theme == result.theme_oklch.convert(ColorSpace.RGB)

    def test_dark_by_default(self):
        result = generate_theme(_banded_image())
        assert result.theme.is_dark
        assert result.theme_oklch.background.L == pytest.approx(DARK_LUMINOSITY)

    def test_light(self):
        result = generate_theme(_banded_image(), luminosity=LIGHT_LUMINOSITY)
        assert not result.theme.is_dark
        assert result.theme_oklch.background.L == pytest.approx(LIGHT_LUMINOSITY)
        assert result.theme_oklch.text.L < result.theme_oklch.background.L

    def test_median_cut_is_deterministic(self):
        a = generate_theme(_banded_image())
        b = generate_theme(_banded_image())
        assert a.theme.to_json() == b.theme.to_json()

    def test_colorful_image_finds_palette_accents(self):
        result = generate_theme(_banded_image())
        assert result.theme.accent_chroma > 0.04
        assert result.theme.accent_chroma != pytest.approx(0.1)

    def test_single_gray_pixel(self):
        result = generate_theme(_solid_image(128, 128, 128, height=1, width=1), palette_size=1)
        values = np.array([[c.L, c.C, c.h] for c in result.theme_oklch.colors])
        assert np.all(np.isfinite(values))
        assert result.theme.accent_chroma == 0.1
        assert len(result.theme) == 16

    def test_file_input(self, tmp_path):
        from PIL import Image

        path = tmp_path / "bands.png"
        Image.fromarray(_banded_image()).save(path)
        from_file = generate_theme(path)
        from_array = generate_theme(_banded_image())
        assert from_file.theme == from_array.theme

    def test_numpy_palette_size(self):
        result = generate_theme(_banded_image(), palette_size=np.int64(8))
        assert len(result.palette) == 8

    def test_config_checked_before_sampling(self):
        with pytest.raises(ValueError, match="Luminosity"):
            generate_theme(_banded_image(), luminosity=2.0)
