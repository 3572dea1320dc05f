# Copyright (c) 2026 Pixelhue
# SPDX-License-Identifier: MIT

"""
Analysis coordinator.

Sends one copy of a pixel buffer to every analyzer, runs them in parallel
in separate worker processes, and joins their answers into a single
AnalysisResult. Either both analyzers answer or the call fails.
"""

from __future__ import annotations

import asyncio
import logging
import multiprocessing
from concurrent.futures import Future, wait
from dataclasses import dataclass
from typing import Optional

from pixelhue.errors import ExecutionFailure
from pixelhue.measure.buffer import PixelBuffer, to_message
from pixelhue.runtime.workers import ANALYZERS, AnalyzerWorker
from pixelhue.schema import AnalysisResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CoordinatorConfig:
    """Configuration for the analysis coordinator."""

    # multiprocessing start method for worker processes
    # None = platform default; otherwise "fork", "spawn" or "forkserver"
    start_method: Optional[str] = None


class AnalysisCoordinator:
    """
    Owns one worker process per analyzer kind and joins their results.

    Workers are created on first use and reused across calls. Calls may
    overlap (from several threads or event loop tasks); each is an
    independent request with no caching or deduplication.

    Usage::

        with AnalysisCoordinator() as coordinator:
            result = coordinator.analyze(pixels)
            result.average_hex, result.dominant_hex
    """

    def __init__(self, config: Optional[CoordinatorConfig] = None) -> None:
        self.config = config or CoordinatorConfig()
        mp_context = (
            multiprocessing.get_context(self.config.start_method)
            if self.config.start_method is not None
            else None
        )
        self._workers = {
            name: AnalyzerWorker(name, task, mp_context=mp_context)
            for name, task in ANALYZERS.items()
        }

    def __enter__(self) -> AnalysisCoordinator:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    @property
    def closed(self) -> bool:
        return all(worker.closed for worker in self._workers.values())

    def analyze(self, buffer: PixelBuffer) -> AnalysisResult:
        """
        Compute average and dominant colors of a pixel buffer in parallel.

        Blocks the calling thread until both workers have answered.

        Args:
            buffer: RGBA pixel buffer (bytes-like or uint8 array)

        Returns:
            AnalysisResult(average_hex, dominant_hex)

        Raises:
            InvalidInput: Empty or misaligned buffer; nothing is dispatched.
            ExecutionFailure: A worker crashed or failed before answering.
        """
        futures = self._dispatch(buffer)
        wait(futures.values())
        return self._join(futures)

    async def analyze_async(self, buffer: PixelBuffer) -> AnalysisResult:
        """
        Awaitable form of ``analyze``.

        Suspends the calling task, not the event loop, while the workers run.
        """
        futures = self._dispatch(buffer)
        await asyncio.gather(
            *(asyncio.wrap_future(f) for f in futures.values()),
            return_exceptions=True,
        )
        return self._join(futures)

    def close(self, wait: bool = True) -> None:
        """Shut down all worker processes."""
        for worker in self._workers.values():
            worker.close(wait=wait)

    def _dispatch(self, buffer: PixelBuffer) -> dict[str, Future]:
        # Validation happens here, before anything reaches a worker
        payload = to_message(buffer)
        logger.debug(
            "Dispatching %d pixels to %s", len(payload) // 4, ", ".join(self._workers)
        )
        return {name: worker.submit(payload) for name, worker in self._workers.items()}

    def _join(self, futures: dict[str, Future]) -> AnalysisResult:
        responses: dict[str, str] = {}
        for name, future in futures.items():
            exc = future.exception()
            if exc is not None:
                logger.warning("%s analyzer failed: %r", name, exc)
                raise ExecutionFailure(
                    f"{name} analyzer failed: {exc!r}", analyzer=name
                ) from exc
            responses[name] = future.result()

        result = AnalysisResult(
            average_hex=responses["average"],
            dominant_hex=responses["dominant"],
        )
        logger.debug("Joined %s", result)
        return result
