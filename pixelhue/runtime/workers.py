# Copyright (c) 2026 Pixelhue
# SPDX-License-Identifier: MIT

"""
Isolated execution contexts for the analyzers.

Each analyzer kind gets its own single-process pool. A request is the raw
pixel bytes; the response is one ``#rrggbb`` string. Nothing else crosses
the process boundary and no state is kept between requests.
"""

from __future__ import annotations

import logging
import threading
from concurrent.futures import Future, ProcessPoolExecutor
from concurrent.futures.process import BrokenProcessPool
from multiprocessing.context import BaseContext
from typing import Callable, Optional

from pixelhue.measure.average import average_hex
from pixelhue.measure.dominant import dominant_hex

logger = logging.getLogger(__name__)

AnalyzerTask = Callable[[bytes], str]


def average_task(payload: bytes) -> str:
    """Worker entry point: mean color of the request payload."""
    return average_hex(payload)


def dominant_task(payload: bytes) -> str:
    """Worker entry point: most frequent color of the request payload."""
    return dominant_hex(payload)


# Analyzer kind -> worker entry point, in result order
ANALYZERS: dict[str, AnalyzerTask] = {
    "average": average_task,
    "dominant": dominant_task,
}


class AnalyzerWorker:
    """
    One long-lived execution context for a single analyzer kind.

    Wraps a ProcessPoolExecutor with exactly one process. The process is
    started lazily on the first request and reused afterwards. If it dies,
    the request in flight fails and the next request gets a fresh process.

    Args:
        name: Analyzer kind, used in logs and errors
        task: Module-level function run in the worker process
        mp_context: Optional multiprocessing context (start method)
    """

    def __init__(
        self,
        name: str,
        task: AnalyzerTask,
        *,
        mp_context: Optional[BaseContext] = None,
    ) -> None:
        self.name = name
        self._task = task
        self._mp_context = mp_context
        self._lock = threading.Lock()
        self._executor: Optional[ProcessPoolExecutor] = None
        self._retired: list[ProcessPoolExecutor] = []
        self._closed = False

    def __repr__(self) -> str:
        state = "closed" if self._closed else ("running" if self._executor else "idle")
        return f"AnalyzerWorker({self.name!r}, {state})"

    @property
    def closed(self) -> bool:
        return self._closed

    def submit(self, payload: bytes) -> Future:
        """
        Send one request to the worker process.

        Returns:
            Future resolving to the analyzer's hex color.
        """
        executor = self._current()
        try:
            future = executor.submit(self._task, payload)
        except BrokenProcessPool:
            # Died after its last request completed; this request is new,
            # so route it to a fresh process
            self._discard(executor)
            executor = self._current()
            future = executor.submit(self._task, payload)

        future.add_done_callback(lambda f, ex=executor: self._on_done(f, ex))
        return future

    def close(self, wait: bool = True) -> None:
        """Shut the worker process down. Further submits raise RuntimeError."""
        with self._lock:
            self._closed = True
            executors = self._retired + ([self._executor] if self._executor else [])
            self._executor = None
            self._retired = []
        for executor in executors:
            executor.shutdown(wait=wait)
        logger.debug("Closed %s worker", self.name)

    def _current(self) -> ProcessPoolExecutor:
        with self._lock:
            if self._closed:
                raise RuntimeError(f"{self.name} worker is closed")
            retired, self._retired = self._retired, []
            if self._executor is None:
                self._executor = ProcessPoolExecutor(
                    max_workers=1, mp_context=self._mp_context
                )
                logger.debug("Started %s worker", self.name)
            executor = self._executor
        for old in retired:
            old.shutdown(wait=False)
        return executor

    def _discard(self, executor: ProcessPoolExecutor) -> None:
        # Only mark the executor; it is shut down from the next _current()
        # call, never from the executor's own management thread.
        with self._lock:
            if self._executor is executor:
                self._executor = None
                self._retired.append(executor)
                logger.warning("%s worker terminated abnormally; it will be restarted", self.name)

    def _on_done(self, future: Future, executor: ProcessPoolExecutor) -> None:
        if not future.cancelled() and isinstance(future.exception(), BrokenProcessPool):
            self._discard(executor)


__all__ = [
    "ANALYZERS",
    "AnalyzerTask",
    "AnalyzerWorker",
    "average_task",
    "dominant_task",
]
