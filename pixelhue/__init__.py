# Copyright (c) 2026 Pixelhue
# SPDX-License-Identifier: MIT

"""
Pixelhue -- average and dominant color of an RGBA pixel buffer.

Both colors are computed in parallel, each in its own worker process,
and returned together.

Quick start::

    from pixelhue import AnalysisCoordinator, pixels_from_image

    with AnalysisCoordinator() as coordinator:
        result = coordinator.analyze(pixels_from_image("photo.jpg"))
    result.average_hex    # "#6b5a4c"
    result.dominant_hex   # "#ffffff"
"""

from __future__ import annotations

__version__ = "1.0.0"

from pixelhue.errors import ExecutionFailure, InvalidInput
from pixelhue.measure import (
    average_color,
    dominant_color,
    pixels_from_image,
    to_hex,
)
from pixelhue.runtime import AnalysisCoordinator, CoordinatorConfig
from pixelhue.schema import RGB, AnalysisResult

__all__ = [
    # Core API
    "AnalysisCoordinator",
    "CoordinatorConfig",
    "AnalysisResult",
    # Analyzers
    "average_color",
    "dominant_color",
    "to_hex",
    "pixels_from_image",
    # Types
    "RGB",
    # Errors
    "InvalidInput",
    "ExecutionFailure",
    # Version
    "__version__",
]
