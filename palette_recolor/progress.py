"""Combine per-chunk progress into one job-level percentage."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import NamedTuple

logger = logging.getLogger(__name__)


class ProgressEvent(NamedTuple):
    """Emitted by a running chunk every ``progress_interval`` pixels."""

    chunk_index: int
    done: int
    total: int


class ProgressAggregator:
    """Job progress as ``trunc(100 * mean(fraction per chunk))``.

    Only the latest fraction per chunk is kept, and a chunk's fraction never
    moves backwards, so late or reordered events cannot make the reported
    percentage regress.  The callback fires only when the percentage rises.

    Not thread-safe: feed it from a single thread (the scheduler drains the
    workers' event queue on the calling thread).
    """

    def __init__(
        self,
        chunks: int,
        callback: Callable[[int], None] | None = None,
    ) -> None:
        self._fractions = [0.0] * chunks
        self._callback = callback
        self._reported = 0

    @property
    def percent(self) -> int:
        return self._reported

    @property
    def fractions(self) -> list[float]:
        return list(self._fractions)

    def update(self, chunk_index: int, done: int, total: int) -> int:
        """Record a chunk's progress and return the job percentage."""
        fraction = 1.0 if total <= 0 else min(done / total, 1.0)
        if fraction > self._fractions[chunk_index]:
            self._fractions[chunk_index] = fraction
            self._emit(self._aggregate())
        return self._reported

    def handle(self, event: ProgressEvent) -> int:
        return self.update(event.chunk_index, event.done, event.total)

    def complete(self, chunk_index: int) -> int:
        """Mark a chunk as done, whatever its last reported fraction."""
        return self.update(chunk_index, 1, 1)

    def finish(self) -> int:
        """Mark every chunk done; the job reads 100."""
        self._fractions = [1.0] * len(self._fractions)
        self._emit(100)
        return self._reported

    def _aggregate(self) -> int:
        if not self._fractions:
            return self._reported
        return int(100 * sum(self._fractions) / len(self._fractions))

    def _emit(self, percent: int) -> None:
        if percent <= self._reported:
            return
        self._reported = percent
        logger.debug("Progress %d%%", percent)
        if self._callback is not None:
            self._callback(percent)
