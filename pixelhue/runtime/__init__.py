# Copyright (c) 2026 Pixelhue
# SPDX-License-Identifier: MIT

"""
Parallel execution runtime for pixelhue.

The coordinator runs each analyzer in its own worker process and joins
their results. Serializers format the joined result for delivery.
"""

from pixelhue.runtime.coordinator import AnalysisCoordinator, CoordinatorConfig
from pixelhue.runtime.serializers import (
    SerializerFormat,
    css_properties,
    serialize,
    to_css_properties,
)
from pixelhue.runtime.workers import ANALYZERS, AnalyzerWorker

__all__ = [
    "AnalysisCoordinator",
    "CoordinatorConfig",
    "AnalyzerWorker",
    "ANALYZERS",
    "SerializerFormat",
    "serialize",
    "css_properties",
    "to_css_properties",
]
