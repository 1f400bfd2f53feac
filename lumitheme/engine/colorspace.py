# Copyright (c) 2026 Lumitheme
# SPDX-License-Identifier: MIT

"""
Color space conversions.

Conversion chain: sRGB → Linear RGB → Oklab → OkLCh

References:
- Oklab: https://bottosson.github.io/posts/oklab/
- sRGB transfer: https://bottosson.github.io/posts/colorwrong/

All functions are pure NumPy and accept arrays of shape (..., 3) or a
single triple. Hue is expressed in radians throughout, as returned by atan2.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray


# =============================================================================
# sRGB ↔ Linear RGB
# =============================================================================


def srgb_to_linear(srgb: ArrayLike) -> NDArray[np.float64]:
    """
    Convert sRGB values [0,1] to linear RGB.

    sRGB uses a piecewise gamma curve:
    - For values < 0.04045: value / 12.92
    - Otherwise: ((value + 0.055) / 1.055) ^ 2.4
    """
    srgb = np.asarray(srgb, dtype=np.float64)
    return np.where(
        srgb < 0.04045,
        srgb / 12.92,
        np.power((np.maximum(srgb, 0.04045) + 0.055) / 1.055, 2.4),
    )


def linear_to_srgb(linear: ArrayLike) -> NDArray[np.float64]:
    """
    Convert linear RGB to sRGB values.

    Inverse of srgb_to_linear. Not clamped; see oklab_to_rgb.
    """
    linear = np.asarray(linear, dtype=np.float64)
    # Clip negative values to avoid NaN in power function
    linear_safe = np.maximum(linear, 0.0)
    return np.where(
        linear_safe < 0.0031308,
        linear_safe * 12.92,
        1.055 * np.power(linear_safe, 1.0 / 2.4) - 0.055,
    )


# =============================================================================
# Linear RGB ↔ Oklab
# =============================================================================

# Matrices from https://bottosson.github.io/posts/oklab/
# The inverses are the published ones, not np.linalg.inv, so palettes stay
# identical to other Oklab implementations.

# Linear sRGB to LMS (cone responses)
_M1 = np.array([
    [0.4122214708, 0.5363325363, 0.0514459929],
    [0.2119034982, 0.6806995451, 0.1073969566],
    [0.0883024619, 0.2817188376, 0.6299787005],
], dtype=np.float64)

# LMS' to Oklab
_M2 = np.array([
    [0.2104542553, 0.7936177850, -0.0040720468],
    [1.9779984951, -2.4285922050, 0.4505937099],
    [0.0259040371, 0.7827717662, -0.8086757660],
], dtype=np.float64)

# Oklab to LMS'
_M2_INV = np.array([
    [1.0, 0.3963377774, 0.2158037573],
    [1.0, -0.1055613458, -0.0638541728],
    [1.0, -0.0894841775, -1.2914855480],
], dtype=np.float64)

# LMS to linear sRGB
_M1_INV = np.array([
    [4.0767416621, -3.3077115913, 0.2309699292],
    [-1.2684380046, 2.6097574011, -0.3413193965],
    [-0.0041960863, -0.7034186147, 1.7076147010],
], dtype=np.float64)


def linear_rgb_to_oklab(rgb: ArrayLike) -> NDArray[np.float64]:
    """
    Convert linear RGB to Oklab.

    Args:
        rgb: Array of shape (..., 3) with linear RGB values

    Returns:
        Array of shape (..., 3) with Oklab values (L, a, b)
    """
    rgb = np.asarray(rgb, dtype=np.float64)
    lms = np.einsum('...j,ij->...i', rgb, _M1)
    # cbrt keeps the sign of out-of-gamut values
    lms_cbrt = np.cbrt(lms)
    return np.einsum('...j,ij->...i', lms_cbrt, _M2)


def oklab_to_linear_rgb(lab: ArrayLike) -> NDArray[np.float64]:
    """
    Convert Oklab to linear RGB.

    Args:
        lab: Array of shape (..., 3) with Oklab values (L, a, b)

    Returns:
        Array of shape (..., 3) with linear RGB values (unclamped)
    """
    lab = np.asarray(lab, dtype=np.float64)
    lms_cbrt = np.einsum('...j,ij->...i', lab, _M2_INV)
    lms = lms_cbrt ** 3
    return np.einsum('...j,ij->...i', lms, _M1_INV)


# =============================================================================
# sRGB ↔ Oklab (full chain)
# =============================================================================


def rgb_to_oklab(rgb: ArrayLike) -> NDArray[np.float64]:
    """
    Convert gamma-encoded sRGB [0,1] to Oklab.

    Full chain: sRGB → Linear RGB → Oklab
    """
    return linear_rgb_to_oklab(srgb_to_linear(rgb))


def oklab_to_rgb(lab: ArrayLike) -> NDArray[np.float64]:
    """
    Convert Oklab to gamma-encoded sRGB.

    Full chain: Oklab → Linear RGB → sRGB. Each channel is clamped to
    [0, 1], so out-of-gamut colors are clipped rather than rejected.
    """
    srgb = linear_to_srgb(oklab_to_linear_rgb(lab))
    return np.clip(srgb, 0.0, 1.0)


def srgb_uint8_to_oklab(pixels: ArrayLike) -> NDArray[np.float64]:
    """
    Convert uint8 sRGB pixels [0,255] to Oklab.

    Args:
        pixels: Array of shape (..., 3) with uint8 sRGB values

    Returns:
        Array of shape (..., 3) with Oklab values
    """
    srgb = np.asarray(pixels).astype(np.float64) / 255.0
    return rgb_to_oklab(srgb)


# =============================================================================
# Oklab ↔ OkLCh
# =============================================================================


def oklab_to_oklch(lab: ArrayLike) -> NDArray[np.float64]:
    """
    Convert Oklab to OkLCh (cylindrical coordinates).

    Returns:
        Array of shape (..., 3) with (L, C, h); h in radians (-π, π]
    """
    lab = np.asarray(lab, dtype=np.float64)
    L = lab[..., 0]
    a = lab[..., 1]
    b = lab[..., 2]
    return np.stack([L, np.hypot(a, b), np.arctan2(b, a)], axis=-1)


def oklch_to_oklab(lch: ArrayLike) -> NDArray[np.float64]:
    """
    Convert OkLCh to Oklab.

    Args:
        lch: Array of shape (..., 3) with (L, C, h), h in radians
    """
    lch = np.asarray(lch, dtype=np.float64)
    L = lch[..., 0]
    C = lch[..., 1]
    h = lch[..., 2]
    return np.stack([L, C * np.cos(h), C * np.sin(h)], axis=-1)


def lerp_oklch(a: ArrayLike, b: ArrayLike, t: float) -> NDArray[np.float64]:
    """
    Interpolate between two OkLCh colors.

    Lightness and chroma are interpolated linearly. Hue follows the
    shortest arc: the (cos, sin) unit vectors of both hues are blended
    and the angle is recovered with atan2, so there is no jump at the
    0/2π boundary.
    """
    a = np.asarray(a, dtype=np.float64)
    b = np.asarray(b, dtype=np.float64)
    x = (1.0 - t) * np.cos(a[..., 2]) + t * np.cos(b[..., 2])
    y = (1.0 - t) * np.sin(a[..., 2]) + t * np.sin(b[..., 2])
    L = (1.0 - t) * a[..., 0] + t * b[..., 0]
    C = (1.0 - t) * a[..., 1] + t * b[..., 1]
    return np.stack([L, C, np.arctan2(y, x)], axis=-1)


# =============================================================================
# Hue helpers
# =============================================================================


def wrap_hue(h: ArrayLike) -> NDArray[np.float64]:
    """Normalize hue angles to [0, 2π)."""
    return np.mod(np.asarray(h, dtype=np.float64), 2.0 * np.pi)


def hue_distance(h1: ArrayLike, h2: ArrayLike) -> NDArray[np.float64]:
    """Shortest absolute angular difference between hues, in [0, π]."""
    diff = np.abs(wrap_hue(h1) - wrap_hue(h2))
    return np.minimum(diff, 2.0 * np.pi - diff)
