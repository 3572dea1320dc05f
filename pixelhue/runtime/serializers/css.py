# Copyright (c) 2026 Pixelhue
# SPDX-License-Identifier: MIT

"""
CSS custom property serializer.

Formats an AnalysisResult as ``--average-color`` / ``--dominant-color``
declarations, ready to be set on a document root by a presentation layer.
"""

from __future__ import annotations

from typing import Optional

from pixelhue.schema import AnalysisResult

AVERAGE_PROPERTY = "average-color"
DOMINANT_PROPERTY = "dominant-color"


def css_properties(result: AnalysisResult, *, prefix: str = "") -> dict[str, str]:
    """Map custom property names (with leading ``--``) to hex values."""
    return {
        f"--{prefix}{AVERAGE_PROPERTY}": result.average_hex,
        f"--{prefix}{DOMINANT_PROPERTY}": result.dominant_hex,
    }


def to_css_properties(
    result: AnalysisResult,
    *,
    prefix: str = "",
    selector: Optional[str] = None,
) -> str:
    """Serialize an AnalysisResult as CSS custom property declarations.

    Args:
        result: The AnalysisResult to serialize.
        prefix: Optional namespace inserted after ``--``.
        selector: If given, wrap the declarations in a rule for it.

    Returns:
        CSS text.

    Example (selector=":root")::

        :root {
          --average-color: #6b5a4c;
          --dominant-color: #ffffff;
        }
    """
    declarations = [
        f"{name}: {value};" for name, value in css_properties(result, prefix=prefix).items()
    ]
    if selector is None:
        return "\n".join(declarations)

    lines = [f"{selector} {{"]
    lines.extend(f"  {d}" for d in declarations)
    lines.append("}")
    return "\n".join(lines)
