# Copyright (c) 2026 Lumitheme
# SPDX-License-Identifier: MIT

"""
Image access and pixel sampling.

The pipeline only needs an image's dimensions and a way to read Oklab
pixels by row-major index (the ImageSource protocol). RasterImage is the
in-memory implementation backed by an (H, W, 3) uint8 array, and
load_image() builds one from a file or an array.

Sampling takes every ``stride``-th pixel, which bounds running time on
large images without materially changing the color distribution.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol, Union, runtime_checkable

import numpy as np
from numpy.typing import NDArray

from lumitheme.schema import OklabColor
from lumitheme.engine.colorspace import srgb_uint8_to_oklab

logger = logging.getLogger(__name__)

SAMPLE_STRIDE = 8


@runtime_checkable
class ImageSource(Protocol):
    """Anything that exposes dimensions and Oklab pixels by flat index."""

    @property
    def width(self) -> int: ...

    @property
    def height(self) -> int: ...

    def oklab_at(self, indices: NDArray[np.int64]) -> NDArray[np.float64]:
        """Oklab values, shape (len(indices), 3), for row-major pixel indices."""
        ...


class RasterImage:
    """
    A decoded sRGB image held in memory.

    Args:
        pixels: Array of shape (H, W, 3) with uint8 sRGB values
    """

    def __init__(self, pixels: NDArray[np.uint8]):
        if pixels.ndim != 3 or pixels.shape[2] != 3:
            raise ValueError(
                f"Expected (H, W, 3) array, got shape {pixels.shape}"
            )
        if pixels.dtype != np.uint8:
            raise ValueError(
                f"Expected uint8 array, got {pixels.dtype}"
            )
        self._pixels = pixels
        self._flat = pixels.reshape(-1, 3)

    @property
    def width(self) -> int:
        return self._pixels.shape[1]

    @property
    def height(self) -> int:
        return self._pixels.shape[0]

    @property
    def pixels(self) -> NDArray[np.uint8]:
        return self._pixels

    def oklab_at(self, indices: NDArray[np.int64]) -> NDArray[np.float64]:
        return srgb_uint8_to_oklab(self._flat[indices])

    def pixel_oklab(self, index: int) -> OklabColor:
        """Oklab color of a single pixel by row-major index."""
        L, a, b = srgb_uint8_to_oklab(self._flat[index])
        return OklabColor(float(L), float(a), float(b))


def load_image(image: Union[str, Path, NDArray[np.uint8], RasterImage]) -> RasterImage:
    """
    Load an image from file or wrap an array.

    Applies ICC profile conversion to sRGB if the file has an embedded
    color profile, so colors match what color pickers show.

    Args:
        image: One of:
            - Path to image file (str or Path)
            - NumPy array of shape (H, W, 3) with uint8 sRGB values
            - An existing RasterImage (returned unchanged)

    Returns:
        RasterImage
    """
    if isinstance(image, RasterImage):
        return image

    if isinstance(image, (str, Path)):
        try:
            from PIL import Image
        except ImportError as e:
            raise ImportError(
                "Pillow is required for image loading. "
                "Install with: pip install Pillow"
            ) from e

        with Image.open(image) as img:
            img.load()
            if "icc_profile" in img.info:
                img = _to_srgb(img)
            elif img.mode != "RGB":
                img = img.convert("RGB")
            pixels = np.array(img, dtype=np.uint8)

        logger.debug("loaded %s (%dx%d)", image, pixels.shape[1], pixels.shape[0])
        return RasterImage(pixels)

    if isinstance(image, np.ndarray):
        return RasterImage(image)

    raise TypeError(
        f"Expected file path or numpy array, got {type(image)}"
    )


def _to_srgb(img):
    """Convert a Pillow image with an embedded ICC profile to sRGB."""
    import io

    from PIL import ImageCms

    if img.mode != "RGB":
        img = img.convert("RGB")
    try:
        embedded_profile = ImageCms.ImageCmsProfile(io.BytesIO(img.info["icc_profile"]))
        srgb_profile = ImageCms.createProfile("sRGB")
        return ImageCms.profileToProfile(img, embedded_profile, srgb_profile)
    except (OSError, ImageCms.PyCMSError) as e:
        # Broken profiles are common; fall back to the raw RGB values
        logger.warning("ignoring unreadable ICC profile: %s", e)
        return img


def sample_count(width: int, height: int, stride: int = SAMPLE_STRIDE) -> int:
    """Number of samples drawn from a width x height image (at least 1)."""
    return max(1, (width * height) // stride)


def sample_pixels(image: ImageSource, stride: int = SAMPLE_STRIDE) -> NDArray[np.float64]:
    """
    Extract every ``stride``-th pixel in row-major order as Oklab.

    Images with fewer pixels than the stride still yield one sample
    (pixel 0), so downstream averages never divide by zero.

    Args:
        image: Source image
        stride: Sampling step in pixels

    Returns:
        Read-only array of shape (n, 3) with Oklab samples
    """
    if stride < 1:
        raise ValueError(f"Sampling stride must be >= 1, got {stride}")
    if image.width * image.height == 0:
        raise ValueError("Cannot sample an image without pixels")

    n = sample_count(image.width, image.height, stride)
    indices = np.arange(n, dtype=np.int64) * stride
    samples = np.asarray(image.oklab_at(indices), dtype=np.float64).reshape(n, 3)
    samples.setflags(write=False)
    return samples
