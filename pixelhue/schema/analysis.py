# Copyright (c) 2026 Pixelhue
# SPDX-License-Identifier: MIT

"""
Value types for pixel color analysis.

Design principles:
- Immutable: results are frozen dataclasses
- Canonical: every color leaves the core as a lowercase ``#rrggbb`` string
- Transient: nothing here is cached or persisted between analyses
"""

from __future__ import annotations

import json
import re
from dataclasses import dataclass
from numbers import Integral
from typing import Iterator


# =============================================================================
# Schema Version
# =============================================================================

SCHEMA_VERSION = "1.0"

_HEX_RE = re.compile(r"^#[0-9a-f]{6}$")


def is_color_hex(value: object) -> bool:
    """True if ``value`` is a canonical ``#rrggbb`` lowercase string."""
    return isinstance(value, str) and _HEX_RE.match(value) is not None


# Order-preserving tally of exact colors: ColorHex -> occurrence count.
# Insertion order is the order of first occurrence in the buffer.
ColorCount = dict[str, int]


# =============================================================================
# Core Color Type
# =============================================================================


@dataclass(frozen=True, slots=True)
class RGB:
    """
    An 8-bit sRGB triple.

    Attributes:
        r: Red channel (0-255)
        g: Green channel (0-255)
        b: Blue channel (0-255)
    """
    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        """Validate channel values are 8-bit integers."""
        for name in ("r", "g", "b"):
            value = getattr(self, name)
            if not isinstance(value, Integral):
                raise ValueError(f"Channel {name} must be an integer, got {value!r}")
            if not 0 <= value <= 255:
                raise ValueError(f"Channel {name} must be 0-255, got {value}")

    @property
    def hex(self) -> str:
        """Canonical ``#rrggbb`` form of this color."""
        from pixelhue.measure.codec import to_hex
        return to_hex(self.r, self.g, self.b)

    def __iter__(self) -> Iterator[int]:
        return iter((self.r, self.g, self.b))

    def to_dict(self) -> dict:
        return {"r": self.r, "g": self.g, "b": self.b}

    @classmethod
    def from_dict(cls, data: dict) -> RGB:
        return cls(r=int(data["r"]), g=int(data["g"]), b=int(data["b"]))


# =============================================================================
# Analysis Result
# =============================================================================


@dataclass(frozen=True, slots=True)
class AnalysisResult:
    """
    The joined output of one analysis request.

    Produced exactly once per ``analyze`` call, only after both analyzers
    have responded. Unpacks as a pair::

        average_hex, dominant_hex = coordinator.analyze(buffer)

    Attributes:
        average_hex: Arithmetic mean color (channel-wise, truncated)
        dominant_hex: Most frequent exact color (earliest wins ties)
    """
    average_hex: str
    dominant_hex: str

    def __post_init__(self) -> None:
        if not is_color_hex(self.average_hex):
            raise ValueError(f"average_hex must be '#rrggbb', got {self.average_hex!r}")
        if not is_color_hex(self.dominant_hex):
            raise ValueError(f"dominant_hex must be '#rrggbb', got {self.dominant_hex!r}")

    def __iter__(self) -> Iterator[str]:
        return iter((self.average_hex, self.dominant_hex))

    @property
    def average(self) -> RGB:
        from pixelhue.measure.codec import from_hex
        return from_hex(self.average_hex)

    @property
    def dominant(self) -> RGB:
        from pixelhue.measure.codec import from_hex
        return from_hex(self.dominant_hex)

    def to_dict(self) -> dict:
        """Serialize to dictionary for JSON output."""
        return {
            "version": SCHEMA_VERSION,
            "average": self.average_hex,
            "dominant": self.dominant_hex,
        }

    def to_json(self, indent: int | None = 2) -> str:
        """Serialize to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, data: dict) -> AnalysisResult:
        """Deserialize from dictionary."""
        return cls(average_hex=data["average"], dominant_hex=data["dominant"])

    @classmethod
    def from_json(cls, json_str: str) -> AnalysisResult:
        """Deserialize from JSON string."""
        return cls.from_dict(json.loads(json_str))
