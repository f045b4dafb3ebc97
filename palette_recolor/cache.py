"""Session memo of finished conversions, keyed by palette name."""

from __future__ import annotations

import logging

import numpy as np

logger = logging.getLogger(__name__)


class ResultCache:
    """One output image per palette key for the current source image.

    There is no eviction; the whole cache is dropped with
    :meth:`invalidate_all` when the source image changes.  Each drop bumps
    :attr:`epoch`, so a job can tell whether the cache it started against
    still belongs to the same source.
    """

    def __init__(self) -> None:
        self._entries: dict[str, np.ndarray] = {}
        self._epoch = 0

    @property
    def epoch(self) -> int:
        return self._epoch

    def get(self, key: str) -> np.ndarray | None:
        return self._entries.get(key)

    def put(self, key: str, image: np.ndarray) -> np.ndarray:
        """Store a read-only copy of *image* and return it.

        The caller's array is left writable.
        """
        stored = image.copy()
        stored.flags.writeable = False
        self._entries[key] = stored
        logger.debug("Cached result for palette '%s' (%d entries)", key, len(self._entries))
        return stored

    def invalidate_all(self) -> None:
        if self._entries:
            logger.debug("Dropping %d cached results", len(self._entries))
        self._entries.clear()
        self._epoch += 1

    def keys(self) -> list[str]:
        return list(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)
