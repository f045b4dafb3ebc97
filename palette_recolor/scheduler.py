"""Row-chunked parallel recolouring.

The image is cut into ``workers`` contiguous row bands.  Each band is copied
into its own task, recoloured by a pool worker and returned as a new array;
workers share nothing and report progress by putting
:class:`~palette_recolor.progress.ProgressEvent` messages on a queue that the
calling thread drains.  Results are written back at their original offsets
once every band has finished.
"""

from __future__ import annotations

import logging
import multiprocessing
import os
import queue
import time
from collections.abc import Callable
from concurrent.futures import (
    FIRST_COMPLETED,
    Future,
    ProcessPoolExecutor,
    ThreadPoolExecutor,
    wait,
)
from contextlib import ExitStack
from dataclasses import dataclass

import numpy as np

from palette_recolor.config import EXECUTORS
from palette_recolor.errors import WorkerFailure
from palette_recolor.matcher import recolor_pixels
from palette_recolor.palette import PreparedPalette
from palette_recolor.progress import ProgressAggregator, ProgressEvent

logger = logging.getLogger(__name__)

# How long the calling thread waits for a chunk before draining progress again.
_POLL_SECONDS = 0.05


@dataclass(frozen=True)
class ChunkTask:
    """Rows ``[start_row, end_row)``, i.e. pixels ``[start, end)``."""

    index: int
    start_row: int
    end_row: int
    start: int
    end: int

    @property
    def size(self) -> int:
        return self.end - self.start


@dataclass(frozen=True, eq=False)
class ChunkResult:
    index: int
    start: int
    pixels: np.ndarray


def split_rows(height: int, workers: int) -> list[tuple[int, int]]:
    """Partition ``[0, height)`` into exactly *workers* row ranges.

    The first ``workers - 1`` ranges get ``height // workers`` rows each and
    the last one takes the remainder, so ranges may be empty when
    *workers* exceeds *height*.
    """
    if workers < 1:
        msg = f"workers must be >= 1, got {workers}"
        raise ValueError(msg)
    if height < 0:
        msg = f"height must be >= 0, got {height}"
        raise ValueError(msg)
    step = height // workers
    spans = [(i * step, (i + 1) * step) for i in range(workers - 1)]
    spans.append(((workers - 1) * step, height))
    return spans


def plan_chunks(height: int, width: int, workers: int) -> list[ChunkTask]:
    return [
        ChunkTask(i, r0, r1, r0 * width, r1 * width)
        for i, (r0, r1) in enumerate(split_rows(height, workers))
    ]


def validate_image(image: np.ndarray) -> None:
    """Require an (H, W, 3|4) uint8 array."""
    if not isinstance(image, np.ndarray):
        msg = f"Expected a numpy array, got {type(image).__name__}"
        raise ValueError(msg)
    if image.ndim != 3 or image.shape[2] not in (3, 4):
        msg = f"Expected an (H, W, 3) or (H, W, 4) image, got shape {image.shape}"
        raise ValueError(msg)
    if image.dtype != np.uint8:
        msg = f"Expected uint8 pixels, got {image.dtype}"
        raise ValueError(msg)


def recolor_chunk(
    task: ChunkTask,
    pixels: np.ndarray,
    palette: PreparedPalette,
    interval: int,
    events=None,
) -> ChunkResult:
    """Worker body: recolour one (N, C) slice in blocks of *interval* pixels.

    A :class:`ProgressEvent` is put on *events* after every complete block.
    """
    total = len(pixels)
    out = np.empty_like(pixels)
    for lo in range(0, total, interval):
        hi = min(lo + interval, total)
        out[lo:hi] = recolor_pixels(pixels[lo:hi], palette)
        if events is not None and hi % interval == 0:
            events.put(ProgressEvent(task.index, hi, total))
    return ChunkResult(task.index, task.start, out)


def _drain(events, aggregator: ProgressAggregator) -> None:
    while True:
        try:
            event = events.get_nowait()
        except queue.Empty:
            return
        aggregator.handle(event)


def run_chunks(
    image: np.ndarray,
    palette: PreparedPalette,
    workers: int,
    *,
    executor: str = "thread",
    progress_interval: int = 100_000,
    on_progress: Callable[[int], None] | None = None,
) -> np.ndarray:
    """Recolour *image* with *palette* across *workers* row chunks.

    Args:
        image:             (H, W, 3|4) uint8.
        palette:           Palette prepared once for this job.
        workers:           Number of chunks (pool size is capped by CPU count).
        executor:          ``"thread"`` or ``"process"``.
        progress_interval: Pixels between progress events of one chunk.
        on_progress:       Called with each new job percentage (0-100).

    Returns:
        New (H, W, 3|4) uint8 array; *image* is not modified.

    Raises:
        WorkerFailure: a chunk raised; no partial output is returned.
    """
    validate_image(image)
    if executor not in EXECUTORS:
        msg = f"Unknown executor '{executor}'. Available: {', '.join(EXECUTORS)}"
        raise ValueError(msg)

    h, w, c = image.shape
    tasks = plan_chunks(h, w, workers)
    flat = image.reshape(-1, c)
    aggregator = ProgressAggregator(len(tasks), on_progress)
    pool_size = max(1, min(workers, os.cpu_count() or 1))

    logger.info(
        "Dispatching %dx%d image as %d chunks (%s pool of %d)",
        w, h, len(tasks), executor, pool_size,
    )
    t0 = time.perf_counter()

    results: list[ChunkResult] = []
    with ExitStack() as stack:
        if executor == "process":
            manager = stack.enter_context(multiprocessing.Manager())
            events = manager.Queue()
            pool = stack.enter_context(ProcessPoolExecutor(max_workers=pool_size))
        else:
            events = queue.Queue()
            pool = stack.enter_context(
                ThreadPoolExecutor(max_workers=pool_size, thread_name_prefix="recolor"),
            )

        futures: dict[Future, ChunkTask] = {
            pool.submit(
                recolor_chunk, task, flat[task.start:task.end].copy(),
                palette, progress_interval, events,
            ): task
            for task in tasks
        }
        pending = set(futures)
        while pending:
            done, pending = wait(pending, timeout=_POLL_SECONDS, return_when=FIRST_COMPLETED)
            _drain(events, aggregator)
            for fut in done:
                task = futures[fut]
                try:
                    result = fut.result()
                except Exception as exc:
                    for other in pending:
                        other.cancel()
                    logger.error("Chunk %d (rows %d-%d) failed: %s",
                                 task.index, task.start_row, task.end_row, exc)
                    raise WorkerFailure(task.index) from exc
                logger.debug("Chunk %d done (%d px)", task.index, task.size)
                results.append(result)
                aggregator.complete(task.index)

    output = np.empty_like(flat)
    for res in results:
        output[res.start:res.start + len(res.pixels)] = res.pixels
    aggregator.finish()

    logger.info("Recoloured %d pixels  (%.2f s)", h * w, time.perf_counter() - t0)
    return output.reshape(h, w, c)
