# Copyright (c) 2026 Pixelhue
# SPDX-License-Identifier: MIT

"""
Pixel buffer validation and coercion.

A pixel buffer is a flat run of RGBA samples, 8 bits per channel,
row-major. The analyzers only ever read it; every helper here returns a
view or a copy and leaves the caller's buffer untouched.
"""

from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Optional, Union

import numpy as np
from numpy.typing import NDArray

from pixelhue.errors import InvalidInput

if TYPE_CHECKING:
    from PIL import Image

logger = logging.getLogger(__name__)

CHANNELS = 4

PixelBuffer = Union[bytes, bytearray, memoryview, NDArray[np.uint8]]


def as_pixel_array(buffer: PixelBuffer) -> NDArray[np.uint8]:
    """
    View a pixel buffer as an (N, 4) uint8 array, one row per pixel.

    Args:
        buffer: bytes-like object, a flat uint8 NumPy array, or a uint8
            array whose last axis is RGBA (e.g. (H, W, 4) as returned by
            ``pixels_from_image``).

    Returns:
        Read-only array of shape (N, 4)

    Raises:
        InvalidInput: Empty buffer, length not a multiple of 4, or a
            NumPy array whose dtype is not uint8 or whose last axis is not 4.
        TypeError: Anything that is not bytes-like or an ndarray.
    """
    if isinstance(buffer, np.ndarray):
        if buffer.dtype != np.uint8:
            raise InvalidInput(f"Expected uint8 array, got {buffer.dtype}")
        if buffer.ndim > 1 and buffer.shape[-1] != CHANNELS:
            raise InvalidInput(
                f"Expected (..., 4) RGBA array, got shape {buffer.shape}"
            )
        flat = buffer.reshape(-1)
    elif isinstance(buffer, (bytes, bytearray, memoryview)):
        if isinstance(buffer, memoryview) and not buffer.c_contiguous:
            # Strided views cannot be wrapped in place
            buffer = buffer.tobytes()
        flat = np.frombuffer(buffer, dtype=np.uint8)
    else:
        raise TypeError(
            f"Expected bytes-like object or numpy array, got {type(buffer)}"
        )

    if flat.size == 0:
        raise InvalidInput("Pixel buffer is empty: at least one pixel is required")
    if flat.size % CHANNELS != 0:
        raise InvalidInput(
            f"Pixel buffer length {flat.size} is not a multiple of {CHANNELS} "
            f"(RGBA)"
        )

    pixels = flat.reshape(-1, CHANNELS)
    pixels.flags.writeable = False
    return pixels


def validate_buffer(buffer: PixelBuffer) -> int:
    """Check a pixel buffer and return its pixel count."""
    return len(as_pixel_array(buffer))


def to_message(buffer: PixelBuffer) -> bytes:
    """
    Copy a validated pixel buffer into an immutable request payload.

    The copy is what crosses the process boundary, so later changes to
    the caller's buffer cannot reach a running analysis.
    """
    return as_pixel_array(buffer).tobytes()


def pixels_from_image(
    image: Union[str, Path, "Image.Image"],
    *,
    size: Optional[tuple[int, int]] = None,
) -> NDArray[np.uint8]:
    """
    Decode an image into an (H, W, 4) RGBA uint8 array.

    Args:
        image: Path to an image file, or an already opened PIL image.
        size: Optional (width, height) to resize to before sampling,
            like drawing onto a fixed-size canvas.

    Returns:
        Array of shape (H, W, 4) suitable as a pixel buffer.
    """
    try:
        from PIL import Image
    except ImportError as e:
        raise ImportError(
            "Pillow is required for image loading. "
            "Install with: pip install Pillow"
        ) from e

    if isinstance(image, (str, Path)):
        with Image.open(image) as opened:
            img = _to_srgb_rgba(opened)
    elif isinstance(image, Image.Image):
        img = _to_srgb_rgba(image)
    else:
        raise TypeError(f"Expected file path or PIL image, got {type(image)}")

    if size is not None:
        width, height = size
        if width < 1 or height < 1:
            raise InvalidInput(f"Canvas size must be positive, got {size}")
        img = img.resize((width, height), Image.Resampling.BILINEAR)

    return np.array(img, dtype=np.uint8)


def _to_srgb_rgba(img: "Image.Image") -> "Image.Image":
    """
    Convert to RGBA, remapping an embedded ICC profile to sRGB first.

    Alpha is carried over unchanged. If the profile cannot be applied the
    image is converted without remapping.
    """
    icc_profile = img.info.get("icc_profile")
    rgba = img.convert("RGBA")
    if not icc_profile:
        return rgba

    try:
        from PIL import ImageCms
    except ImportError:
        logger.warning("PIL.ImageCms unavailable; ignoring embedded ICC profile")
        return rgba

    try:
        embedded_profile = ImageCms.ImageCmsProfile(io.BytesIO(icc_profile))
        srgb_profile = ImageCms.createProfile("sRGB")
        rgb = ImageCms.profileToProfile(
            rgba.convert("RGB"), embedded_profile, srgb_profile
        )
    except (ImageCms.PyCMSError, OSError) as e:
        logger.warning("Could not apply embedded ICC profile: %s", e)
        return rgba

    rgb.putalpha(rgba.getchannel("A"))
    return rgb
