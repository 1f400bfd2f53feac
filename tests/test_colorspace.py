# Copyright (c) 2026 Lumitheme
# SPDX-License-Identifier: MIT

"""Tests for color space conversions (sRGB ↔ linear ↔ Oklab ↔ OkLCh)."""

import math

import numpy as np
import pytest

from lumitheme.engine.colorspace import (
    hue_distance,
    lerp_oklch,
    linear_rgb_to_oklab,
    linear_to_srgb,
    oklab_to_linear_rgb,
    oklab_to_oklch,
    oklab_to_rgb,
    oklch_to_oklab,
    rgb_to_oklab,
    srgb_to_linear,
    srgb_uint8_to_oklab,
    wrap_hue,
)


class TestSRGBLinearRoundtrip:
    """sRGB ↔ Linear RGB conversions must roundtrip accurately."""

    def test_roundtrip_mid_gray(self):
        srgb = np.array([0.5, 0.5, 0.5])
        np.testing.assert_allclose(linear_to_srgb(srgb_to_linear(srgb)), srgb, atol=1e-10)

    def test_roundtrip_extremes(self):
        srgb = np.array([[0.0, 0.0, 0.0], [1.0, 1.0, 1.0], [1.0, 0.0, 0.0]])
        np.testing.assert_allclose(linear_to_srgb(srgb_to_linear(srgb)), srgb, atol=1e-10)

    def test_gamma_threshold(self):
        """Values below 0.04045 use the linear segment."""
        linear = srgb_to_linear(np.array([0.03]))
        assert float(linear[0]) == pytest.approx(0.03 / 12.92, abs=1e-12)

    def test_negative_linear_floored(self):
        result = linear_to_srgb(np.array([-0.5, 0.0]))
        assert not np.any(np.isnan(result))
        np.testing.assert_allclose(result, [0.0, 0.0])

    def test_batch_roundtrip(self):
        srgb = np.random.default_rng(42).random((100, 3))
        np.testing.assert_allclose(linear_to_srgb(srgb_to_linear(srgb)), srgb, atol=1e-10)


class TestOklab:
    """Linear RGB ↔ Oklab uses the published matrices."""

    def test_white(self):
        lab = rgb_to_oklab([1.0, 1.0, 1.0])
        np.testing.assert_allclose(lab, [1.0, 0.0, 0.0], atol=1e-4)

    def test_black(self):
        lab = rgb_to_oklab([0.0, 0.0, 0.0])
        np.testing.assert_allclose(lab, [0.0, 0.0, 0.0], atol=1e-10)

    def test_gray_is_neutral(self):
        lab = rgb_to_oklab([0.4, 0.4, 0.4])
        assert abs(lab[1]) < 1e-4
        assert abs(lab[2]) < 1e-4

    def test_red_is_positive_a(self):
        lab = rgb_to_oklab([1.0, 0.0, 0.0])
        assert lab[1] > 0.2
        assert lab[0] == pytest.approx(0.628, abs=0.01)

    def test_linear_roundtrip(self):
        linear = np.random.default_rng(7).random((50, 3))
        recovered = oklab_to_linear_rgb(linear_rgb_to_oklab(linear))
        np.testing.assert_allclose(recovered, linear, atol=1e-6)

    def test_rgb_roundtrip(self):
        """Full chain roundtrip stays within 1e-3 for in-gamut colors."""
        rgb = np.random.default_rng(0).random((200, 3))
        recovered = oklab_to_rgb(rgb_to_oklab(rgb))
        np.testing.assert_allclose(recovered, rgb, atol=1e-3)

    def test_out_of_gamut_is_clipped(self):
        rgb = oklab_to_rgb([1.2, 0.0, 0.0])
        np.testing.assert_allclose(rgb, [1.0, 1.0, 1.0])

        rgb = oklab_to_rgb([0.6, 0.4, 0.0])
        assert np.all(rgb >= 0.0) and np.all(rgb <= 1.0)

    def test_uint8_matches_float(self):
        pixels = np.array([[12, 200, 99], [255, 255, 255]], dtype=np.uint8)
        np.testing.assert_allclose(
            srgb_uint8_to_oklab(pixels),
            rgb_to_oklab(pixels / 255.0),
        )

    def test_shape_preserved(self):
        image = np.zeros((4, 5, 3))
        assert rgb_to_oklab(image).shape == (4, 5, 3)


class TestOklch:

    def test_polar_roundtrip(self):
        lab = np.random.default_rng(3).uniform(-0.3, 0.3, (100, 3))
        lab[:, 0] = np.abs(lab[:, 0])
        np.testing.assert_allclose(oklch_to_oklab(oklab_to_oklch(lab)), lab, atol=1e-12)

    def test_hue_in_radians(self):
        lch = oklab_to_oklch([0.5, 0.0, 0.1])
        assert lch[1] == pytest.approx(0.1)
        assert lch[2] == pytest.approx(math.pi / 2)

    def test_neutral_has_zero_chroma(self):
        lch = oklab_to_oklch([0.5, 0.0, 0.0])
        assert lch[1] == 0.0


class TestLerpOklch:

    def test_endpoints(self):
        a = np.array([0.2, 0.1, 0.5])
        b = np.array([0.8, 0.3, 1.5])
        np.testing.assert_allclose(lerp_oklch(a, b, 0.0), a, atol=1e-12)
        np.testing.assert_allclose(lerp_oklch(a, b, 1.0), b, atol=1e-12)

    def test_linear_lightness_and_chroma(self):
        result = lerp_oklch([0.2, 0.1, 0.0], [0.6, 0.3, 0.0], 0.25)
        assert result[0] == pytest.approx(0.3)
        assert result[1] == pytest.approx(0.15)
        assert result[2] == pytest.approx(0.0)

    def test_hue_takes_shortest_path(self):
        """350° and 10° meet at 0°, not at 180°."""
        a = [0.5, 0.1, math.radians(350)]
        b = [0.5, 0.1, math.radians(10)]
        result = lerp_oklch(a, b, 0.5)
        assert abs(result[2]) < 1e-9


class TestHueHelpers:

    def test_wrap_hue(self):
        assert float(wrap_hue(-math.pi / 2)) == pytest.approx(3 * math.pi / 2)
        assert float(wrap_hue(5 * math.pi)) == pytest.approx(math.pi)

    def test_hue_distance_across_zero(self):
        assert float(hue_distance(0.1, 2 * math.pi - 0.1)) == pytest.approx(0.2)

    def test_hue_distance_max_is_pi(self):
        assert float(hue_distance(0.0, math.pi)) == pytest.approx(math.pi)
        assert float(hue_distance(-math.pi / 2, math.pi / 2)) == pytest.approx(math.pi)

    def test_hue_distance_vectorised(self):
        result = hue_distance(np.array([0.0, 1.0, 3.0]), 1.0)
        np.testing.assert_allclose(result, [1.0, 0.0, 2.0])
