# Copyright (c) 2026 Pixelhue
# SPDX-License-Identifier: MIT

"""
Analysis core for pixelhue.

Pure reductions from an RGBA pixel buffer to a single color. Nothing in
this package keeps state between calls.
"""

from pixelhue.measure.average import average_color, average_hex
from pixelhue.measure.buffer import (
    PixelBuffer,
    as_pixel_array,
    pixels_from_image,
    validate_buffer,
)
from pixelhue.measure.codec import from_hex, to_hex
from pixelhue.measure.dominant import (
    count_colors,
    dominant_color,
    dominant_hex,
    select_dominant,
)

__all__ = [
    # Codec
    "to_hex",
    "from_hex",
    # Analyzers
    "average_color",
    "average_hex",
    "count_colors",
    "select_dominant",
    "dominant_color",
    "dominant_hex",
    # Buffers
    "PixelBuffer",
    "as_pixel_array",
    "validate_buffer",
    "pixels_from_image",
]
