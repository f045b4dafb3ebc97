"""Conversion requests: cache lookup, job state and superseded results.

A :class:`JobContext` is an immutable snapshot of one session (source
image, what is currently shown, and the session's :class:`ResultCache`).
:class:`Recolorer` takes a context and a palette key and hands back a new
context plus a :class:`ConversionResult`; on error it raises and the
caller's previous context, and therefore the previous image, stays valid.
"""

from __future__ import annotations

import itertools
import logging
import threading
import time
from collections.abc import Callable, Sequence
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass, field, replace
from enum import Enum

import numpy as np

from palette_recolor.cache import ResultCache
from palette_recolor.config import RecolorConfig
from palette_recolor.palette import ORIGINAL, get_palette, prepare_palette
from palette_recolor.scheduler import run_chunks, validate_image

logger = logging.getLogger(__name__)


class JobState(Enum):
    IDLE = "idle"
    RUNNING = "running"
    COMPLETED = "completed"
    FAILED = "failed"


@dataclass(frozen=True, eq=False)
class JobContext:
    """Session snapshot; every change returns a new context.

    Attributes:
        source:          The decoded (H, W, 3|4) uint8 source, or None.
        source_name:     File name of the source, if known.
        image:           What is currently shown (source or a result).
        current_palette: Key of the palette *image* was produced with.
        cache:           Results for *source*, keyed by palette name.
        generation:      Bumped each time the source changes.
    """

    source: np.ndarray | None = None
    source_name: str | None = None
    image: np.ndarray | None = None
    current_palette: str = ORIGINAL
    cache: ResultCache = field(default_factory=ResultCache)
    generation: int = 0

    @classmethod
    def empty(cls) -> JobContext:
        return cls()

    @property
    def has_source(self) -> bool:
        return self.source is not None

    def with_source(self, image: np.ndarray, name: str | None = None) -> JobContext:
        """Load a new source image; every cached result is dropped."""
        validate_image(image)
        self.cache.invalidate_all()
        return replace(
            self,
            source=image,
            source_name=name,
            image=image,
            current_palette=ORIGINAL,
            generation=self.generation + 1,
        )

    def cleared(self) -> JobContext:
        """Forget the source image and its cached results."""
        self.cache.invalidate_all()
        return replace(
            self,
            source=None,
            source_name=None,
            image=None,
            current_palette=ORIGINAL,
            generation=self.generation + 1,
        )

    def showing(self, palette_key: str, image: np.ndarray) -> JobContext:
        return replace(self, current_palette=palette_key, image=image)


@dataclass(frozen=True, eq=False)
class ConversionResult:
    """Outcome of one conversion request.

    Attributes:
        image:       The recoloured (or original) image.
        palette_key: Palette the request asked for.
        cache_hit:   True when the result came from the cache.
        superseded:  True when a newer request was issued, or the source
                     image changed, while this one ran; the result was
                     neither cached nor applied.
        elapsed:     Wall time in seconds.
    """

    image: np.ndarray
    palette_key: str
    cache_hit: bool = False
    superseded: bool = False
    elapsed: float = 0.0


class Recolorer:
    """Runs conversion requests against a :class:`JobContext`.

    Every request takes a ticket.  A job that finishes after a later
    request was issued, or after the source image was replaced, is
    reported as superseded and leaves the context untouched; the in-flight work itself is not interrupted.
    """

    def __init__(self, config: RecolorConfig | None = None) -> None:
        self.config = config or RecolorConfig()
        self._tickets = itertools.count(1)
        self._latest = 0
        self._lock = threading.Lock()
        self._state = JobState.IDLE
        self._dispatcher: ThreadPoolExecutor | None = None

    @property
    def state(self) -> JobState:
        return self._state

    def convert(
        self,
        context: JobContext,
        palette_key: str,
        colors: Sequence[str] | None = None,
        on_progress: Callable[[int], None] | None = None,
    ) -> tuple[JobContext, ConversionResult]:
        """Recolour the context's source with a palette, synchronously.

        Args:
            context:     Current session snapshot; must hold a source image.
            palette_key: Catalog name, or :data:`ORIGINAL` for no transform.
                         Also the cache key when *colors* is given.
            colors:      Explicit ``#RRGGBB`` list instead of a catalog
                         lookup.
            on_progress: Called with each new percentage (0-100).

        Raises:
            ValueError: the context has no source image.
            UnknownPaletteError, PaletteParseError, EmptyPaletteError,
            WorkerFailure: the job failed; nothing was cached.
        """
        return self._run(
            context, palette_key, colors, on_progress,
            self._issue(), context.cache.epoch,
        )

    def submit(
        self,
        context: JobContext,
        palette_key: str,
        colors: Sequence[str] | None = None,
        on_progress: Callable[[int], None] | None = None,
    ) -> Future:
        """Queue :meth:`convert` on a background thread.

        The ticket is taken now, so a later :meth:`submit` or
        :meth:`convert` supersedes this request even before it starts.
        Loading a new source into *context* after this call supersedes it
        too.
        """
        ticket = self._issue()
        if self._dispatcher is None:
            self._dispatcher = ThreadPoolExecutor(
                max_workers=1, thread_name_prefix="recolor-job",
            )
        return self._dispatcher.submit(
            self._run, context, palette_key, colors, on_progress,
            ticket, context.cache.epoch,
        )

    def close(self) -> None:
        if self._dispatcher is not None:
            self._dispatcher.shutdown(wait=True)
            self._dispatcher = None

    def __enter__(self) -> Recolorer:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # -- internals -----------------------------------------------------

    def _issue(self) -> int:
        with self._lock:
            self._latest = next(self._tickets)
            return self._latest

    def _is_current(self, ticket: int) -> bool:
        with self._lock:
            return ticket == self._latest

    def _run(
        self,
        context: JobContext,
        palette_key: str,
        colors: Sequence[str] | None,
        on_progress: Callable[[int], None] | None,
        ticket: int,
        epoch: int,
    ) -> tuple[JobContext, ConversionResult]:
        if not context.has_source:
            msg = "No source image loaded"
            raise ValueError(msg)

        if palette_key == ORIGINAL:
            result = ConversionResult(context.source, ORIGINAL)
            return self._apply(context, result, ticket, epoch)

        cached = context.cache.get(palette_key)
        if cached is not None:
            logger.debug("Cache hit for palette '%s'", palette_key)
            result = ConversionResult(cached, palette_key, cache_hit=True)
            return self._apply(context, result, ticket, epoch)

        self._state = JobState.RUNNING
        t0 = time.perf_counter()
        try:
            prepared = prepare_palette(
                get_palette(palette_key) if colors is None else colors,
            )
            logger.info("Palette '%s': %d colours", palette_key, len(prepared))
            output = run_chunks(
                context.source,
                prepared,
                self.config.resolved_workers(),
                executor=self.config.executor,
                progress_interval=self.config.progress_interval,
                on_progress=on_progress,
            )
        except Exception:
            self._state = JobState.FAILED
            logger.error("Conversion with palette '%s' failed", palette_key)
            raise
        self._state = JobState.COMPLETED

        result = ConversionResult(output, palette_key, elapsed=time.perf_counter() - t0)
        return self._apply(context, result, ticket, epoch, store=True)

    def _apply(
        self,
        context: JobContext,
        result: ConversionResult,
        ticket: int,
        epoch: int,
        store: bool = False,
    ) -> tuple[JobContext, ConversionResult]:
        if not self._is_current(ticket):
            logger.info("Discarding result for '%s': superseded by a newer request",
                        result.palette_key)
            return context, replace(result, superseded=True)
        if context.cache.epoch != epoch:
            logger.info("Discarding result for '%s': the source image changed",
                        result.palette_key)
            return context, replace(result, superseded=True)
        if store:
            result = replace(result, image=context.cache.put(result.palette_key, result.image))
        return context.showing(result.palette_key, result.image), result
