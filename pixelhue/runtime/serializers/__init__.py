# Copyright (c) 2026 Pixelhue
# SPDX-License-Identifier: MIT

"""
Serializers for AnalysisResult delivery.

All serializers preserve the result exactly; they only change its form.
"""

from __future__ import annotations

from pixelhue.runtime.serializers.base import SerializerFormat
from pixelhue.runtime.serializers.css import css_properties, to_css_properties
from pixelhue.schema import AnalysisResult


def serialize(
    result: AnalysisResult,
    format: SerializerFormat = SerializerFormat.JSON,
) -> str:
    """Serialize an AnalysisResult in the requested format."""
    if format == SerializerFormat.JSON:
        return result.to_json(indent=None)
    elif format == SerializerFormat.JSON_PRETTY:
        return result.to_json(indent=2)
    else:
        return to_css_properties(result, selector=":root")


__all__ = [
    "SerializerFormat",
    "serialize",
    "css_properties",
    "to_css_properties",
]
