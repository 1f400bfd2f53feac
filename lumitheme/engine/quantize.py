# Copyright (c) 2026 Lumitheme
# SPDX-License-Identifier: MIT

"""
Palette quantization.

Two approaches reduce a sample buffer to exactly N Oklab colors:
1. Median cut: repeatedly splits the most spread-out bucket along its
   widest channel (deterministic)
2. K-means: Lloyd's algorithm from randomly seeded centroids
   (reproducible only with a fixed seed)

Both return a Palette sorted ascending by lightness. The palette may hold
duplicate colors when the image lacks diversity; its length is always N.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from enum import Enum
from typing import Optional, Union

import numpy as np
from numpy.typing import NDArray

from lumitheme.schema import Palette

logger = logging.getLogger(__name__)


class Channel(Enum):
    """Column of an Oklab sample array."""
    L = 0
    A = 1
    B = 2


class QuantizerKind(Enum):
    """Available quantization algorithms."""
    MEDIAN_CUT = "median-cut"
    K_MEAN = "k-mean"


class Quantizer(ABC):
    """Reduces Oklab samples to a fixed number of representative colors."""

    @abstractmethod
    def quantize(self, samples: NDArray[np.float64], size: int) -> Palette:
        """
        Quantize samples into ``size`` colors.

        Args:
            samples: Array of shape (n, 3) with Oklab values
            size: Number of colors, 1 <= size <= n

        Returns:
            Palette of exactly ``size`` colors, sorted by lightness
        """


def _validate(samples: NDArray[np.float64], size: int) -> NDArray[np.float64]:
    """Check quantizer inputs and return samples as an (n, 3) float array."""
    data = np.asarray(samples, dtype=np.float64)
    if data.ndim != 2 or data.shape[1] != 3:
        raise ValueError(f"Expected (n, 3) sample array, got shape {data.shape}")
    if len(data) == 0:
        raise ValueError("Cannot quantize an empty sample buffer")
    if isinstance(size, bool) or not isinstance(size, (int, np.integer)):
        raise ValueError(f"Palette size must be an integer, got {size!r}")
    if size < 1:
        raise ValueError(f"Palette size must be >= 1, got {size}")
    if size > len(data):
        raise ValueError(
            f"Palette size {size} exceeds the {len(data)} available samples"
        )
    return data


def _sorted_palette(colors: NDArray[np.float64]) -> Palette:
    order = np.argsort(colors[:, Channel.L.value], kind="stable")
    return Palette.from_array(colors[order])


def widest_channel(samples: NDArray[np.float64]) -> tuple[Channel, float]:
    """
    Find the channel with the largest value range.

    Returns:
        (channel, range) where range is max - min along that channel.
        Ties favor the earlier channel (L before a before b).
    """
    ranges = samples.max(axis=0) - samples.min(axis=0)
    index = int(np.argmax(ranges))
    return Channel(index), float(ranges[index])


# =============================================================================
# Median cut
# =============================================================================


class MedianCutQuantizer(Quantizer):
    """
    Adaptive-axis median cut.

    Buckets are contiguous ranges of a working copy of the samples. Each
    step picks the bucket with the widest single-channel range among those
    holding at least ``min_bucket_size`` samples, sorts it along that
    channel and cuts it at the median index. Smaller buckets are never
    split further, so a low-diversity image can stop before ``size``
    buckets exist; the missing slots then repeat the previous color.

    Args:
        min_bucket_size: Buckets below this many samples are not split
    """

    def __init__(self, min_bucket_size: int = 16):
        if min_bucket_size < 2:
            raise ValueError(f"min_bucket_size must be >= 2, got {min_bucket_size}")
        self.min_bucket_size = min_bucket_size

    def quantize(self, samples: NDArray[np.float64], size: int) -> Palette:
        work = _validate(samples, size).copy()
        buckets: list[tuple[int, int]] = [(0, len(work))]

        while len(buckets) < size:
            best: Optional[int] = None
            best_range = -1.0
            best_channel = Channel.L

            for i, (start, end) in enumerate(buckets):
                if end - start < self.min_bucket_size:
                    continue
                channel, channel_range = widest_channel(work[start:end])
                if channel_range > best_range:
                    best, best_range, best_channel = i, channel_range, channel

            if best is None:
                logger.debug(
                    "median cut stopped at %d of %d buckets: no bucket has %d samples",
                    len(buckets), size, self.min_bucket_size,
                )
                break

            start, end = buckets[best]
            segment = work[start:end]
            order = np.argsort(segment[:, best_channel.value], kind="stable")
            work[start:end] = segment[order]

            mid = start + (end - start) // 2
            buckets[best] = (start, mid)
            buckets.append((mid, end))

        colors = np.empty((size, 3), dtype=np.float64)
        for i in range(size):
            if i < len(buckets) and buckets[i][1] > buckets[i][0]:
                start, end = buckets[i]
                colors[i] = work[start:end].mean(axis=0)
            else:
                # No samples for this slot; bucket 0 is never empty
                colors[i] = colors[i - 1]

        return _sorted_palette(colors)


# =============================================================================
# K-means
# =============================================================================


class KMeanQuantizer(Quantizer):
    """
    Lloyd's algorithm in Oklab space.

    Centroids start at randomly chosen samples. Each pass assigns every
    sample to its nearest centroid (squared Euclidean distance, the first
    centroid wins ties) and moves each centroid to the mean of its
    members. A centroid that attracts no samples is re-seeded with a
    fresh random sample.

    Results vary between runs unless ``seed`` is fixed; the same seed and
    the same samples always reproduce the same palette.

    Args:
        seed: Random seed for centroid seeding (None for random)
        passes: Number of refinement passes
    """

    def __init__(self, seed: Optional[int] = None, passes: int = 10):
        if passes < 1:
            raise ValueError(f"passes must be >= 1, got {passes}")
        self.seed = seed
        self.passes = passes

    def quantize(self, samples: NDArray[np.float64], size: int) -> Palette:
        data = _validate(samples, size)
        rng = np.random.default_rng(self.seed)
        n = len(data)

        centroids = data[rng.integers(n, size=size)].copy()

        for _ in range(self.passes):
            labels = _nearest_centroid(data, centroids)
            counts = np.bincount(labels, minlength=size)

            sums = np.stack([
                np.bincount(labels, weights=data[:, c], minlength=size)
                for c in range(3)
            ], axis=-1)

            filled = counts > 0
            centroids[filled] = sums[filled] / counts[filled, np.newaxis]

            empty = np.flatnonzero(~filled)
            if empty.size:
                logger.debug("re-seeding %d empty k-means clusters", empty.size)
                centroids[empty] = data[rng.integers(n, size=empty.size)]

        return _sorted_palette(centroids)


def _nearest_centroid(
    data: NDArray[np.float64],
    centroids: NDArray[np.float64],
) -> NDArray[np.int64]:
    """Index of the nearest centroid for every row of ``data``.

    Keeps a running minimum over the centroids so memory stays O(n).
    Strict ``<`` means the lowest index wins a tie.
    """
    best = np.sum((data - centroids[0]) ** 2, axis=1)
    labels = np.zeros(len(data), dtype=np.int64)
    for j in range(1, len(centroids)):
        dist = np.sum((data - centroids[j]) ** 2, axis=1)
        closer = dist < best
        best[closer] = dist[closer]
        labels[closer] = j
    return labels


def create_quantizer(
    kind: Union[QuantizerKind, str] = QuantizerKind.MEDIAN_CUT,
    seed: Optional[int] = None,
) -> Quantizer:
    """
    Build a quantizer from configuration.

    Args:
        kind: QuantizerKind or its value ("median-cut", "k-mean")
        seed: Seed for k-means (ignored by median cut)
    """
    if not isinstance(kind, QuantizerKind):
        try:
            kind = QuantizerKind(kind)
        except ValueError:
            choices = ", ".join(k.value for k in QuantizerKind)
            raise ValueError(f"Unknown quantizer {kind!r}; expected one of: {choices}") from None

    if kind == QuantizerKind.K_MEAN:
        return KMeanQuantizer(seed=seed)
    return MedianCutQuantizer()
