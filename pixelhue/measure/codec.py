# Copyright (c) 2026 Pixelhue
# SPDX-License-Identifier: MIT

"""
Color codec: RGB triple <-> canonical ``#rrggbb`` string.

Both analyzers report through this module so their output is always
lowercase, zero-padded and exactly 7 characters long.
"""

from __future__ import annotations

import re
from numbers import Integral

from pixelhue.schema import RGB

_HEX_PARSE_RE = re.compile(r"^#?([0-9a-fA-F]{2})([0-9a-fA-F]{2})([0-9a-fA-F]{2})$")


def to_hex(r: int, g: int, b: int) -> str:
    """
    Encode an 8-bit RGB triple as ``#rrggbb``.

    Args:
        r: Red channel (0-255)
        g: Green channel (0-255)
        b: Blue channel (0-255)

    Returns:
        Hex string like "#0a7fff"

    Raises:
        ValueError: If any channel is not an integer or is outside 0-255.
    """
    for channel in (r, g, b):
        if not isinstance(channel, Integral):
            raise ValueError(f"Channels must be integers, got {channel!r}")
    r, g, b = int(r), int(g), int(b)
    if not (0 <= r <= 255 and 0 <= g <= 255 and 0 <= b <= 255):
        raise ValueError(f"Channels must be 0-255, got ({r}, {g}, {b})")
    return f"#{r:02x}{g:02x}{b:02x}"


def from_hex(value: str) -> RGB:
    """
    Parse a hex color string into an RGB.

    Accepts upper or lower case digits, with or without the leading '#'.
    """
    m = _HEX_PARSE_RE.match(value.strip())
    if not m:
        raise ValueError(f"Expected '#rrggbb' hex color, got {value!r}")
    return RGB(*(int(part, 16) for part in m.groups()))
