# Copyright (c) 2026 Pixelhue
# SPDX-License-Identifier: MIT

"""
Error types raised by pixelhue.

Both kinds surface as a failed analysis. Nothing is retried and no
partial result is ever returned.
"""

from __future__ import annotations


class InvalidInput(ValueError):
    """The pixel buffer cannot be analyzed (empty, or not whole RGBA pixels).

    Raised synchronously, before any work is dispatched to a worker.
    """


class ExecutionFailure(RuntimeError):
    """A worker terminated abnormally or failed before responding.

    The underlying exception, when there is one, is chained as ``__cause__``.
    """

    def __init__(self, message: str, *, analyzer: str | None = None) -> None:
        super().__init__(message)
        self.analyzer = analyzer


__all__ = ["InvalidInput", "ExecutionFailure"]
