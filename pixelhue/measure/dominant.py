# Copyright (c) 2026 Pixelhue
# SPDX-License-Identifier: MIT

"""
Dominant color: the most frequent exact pixel value.

Two phases:
1. Counting: tally every exact RGB value (alpha ignored) into an
   order-preserving ColorCount keyed by hex, in order of first occurrence.
2. Selection: walk the tally in that order and keep the running best,
   replacing it only on a strictly greater count.

Ties therefore go to the color that appears first in scan order, and an
image where every pixel is unique reports its first pixel.
"""

from __future__ import annotations

import numpy as np

from pixelhue.errors import InvalidInput
from pixelhue.measure.buffer import PixelBuffer, as_pixel_array
from pixelhue.measure.codec import from_hex, to_hex
from pixelhue.schema import RGB, ColorCount


def count_colors(buffer: PixelBuffer) -> ColorCount:
    """
    Count exact colors in a pixel buffer.

    No bucketing or quantization: two pixels share an entry only if their
    R, G and B values are identical.

    Returns:
        Dict of hex -> count, ordered by first occurrence in the buffer.
    """
    pixels = as_pixel_array(buffer)

    # Pack RGB into one 24-bit key per pixel
    rgb = pixels[:, :3].astype(np.uint32)
    keys = (rgb[:, 0] << 16) | (rgb[:, 1] << 8) | rgb[:, 2]

    unique, first_index, counts = np.unique(
        keys, return_index=True, return_counts=True
    )
    # np.unique sorts by value; restore first-occurrence order
    order = np.argsort(first_index, kind="stable")

    counts_by_hex: ColorCount = {}
    for key, count in zip(unique[order], counts[order]):
        key = int(key)
        counts_by_hex[to_hex(key >> 16, (key >> 8) & 0xFF, key & 0xFF)] = int(count)
    return counts_by_hex


def select_dominant(counts: ColorCount) -> str:
    """
    Pick the most frequent color from a ColorCount.

    Scans in insertion order; a candidate replaces the current best only
    when its count is strictly greater.

    Raises:
        InvalidInput: If ``counts`` is empty.
    """
    best: str | None = None
    best_count = 0
    for color, count in counts.items():
        if best is None or count > best_count:
            best, best_count = color, count

    if best is None:
        raise InvalidInput("Cannot select a dominant color from an empty count")
    return best


def dominant_hex(buffer: PixelBuffer) -> str:
    """Most frequent exact color of a pixel buffer as ``#rrggbb``."""
    return select_dominant(count_colors(buffer))


def dominant_color(buffer: PixelBuffer) -> RGB:
    """Most frequent exact color of a pixel buffer."""
    return from_hex(dominant_hex(buffer))
