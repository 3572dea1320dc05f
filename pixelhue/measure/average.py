# Copyright (c) 2026 Pixelhue
# SPDX-License-Identifier: MIT

"""
Average color: channel-wise arithmetic mean of a pixel buffer.

Alpha is ignored. Each channel mean is truncated (floor division), not
rounded, so [(0,0,0), (3,3,3)] averages to (1,1,1).
"""

from __future__ import annotations

import numpy as np

from pixelhue.measure.buffer import PixelBuffer, as_pixel_array
from pixelhue.measure.codec import to_hex
from pixelhue.schema import RGB


def average_color(buffer: PixelBuffer) -> RGB:
    """
    Compute the mean RGB color of a pixel buffer.

    Args:
        buffer: RGBA pixel buffer (see ``as_pixel_array``)

    Returns:
        RGB whose channels are floor(sum / pixel_count)

    Raises:
        InvalidInput: Empty or misaligned buffer.
    """
    pixels = as_pixel_array(buffer)
    count = len(pixels)

    # uint64 accumulators: a uint8 sum would wrap after 256 pixels
    sums = pixels[:, :3].sum(axis=0, dtype=np.uint64)
    r, g, b = (int(s) // count for s in sums)
    return RGB(r, g, b)


def average_hex(buffer: PixelBuffer) -> str:
    """Mean color of a pixel buffer as ``#rrggbb``."""
    color = average_color(buffer)
    return to_hex(color.r, color.g, color.b)
