# Copyright (c) 2026 Pixelhue
# SPDX-License-Identifier: MIT

"""
Schema definitions for analysis results.

All types in this module are immutable (frozen dataclasses).
"""

from pixelhue.schema.analysis import (
    SCHEMA_VERSION,
    RGB,
    AnalysisResult,
    ColorCount,
    is_color_hex,
)

__all__ = [
    # Version
    "SCHEMA_VERSION",
    # Core types
    "RGB",
    "ColorCount",
    "AnalysisResult",
    # Helpers
    "is_color_hex",
]
