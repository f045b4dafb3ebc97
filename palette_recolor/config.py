"""Centralised configuration via a frozen dataclass."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

EXECUTORS = ("thread", "process")


def default_workers() -> int:
    """Available parallelism minus one, never below 1."""
    return max(1, (os.cpu_count() or 1) - 1)


@dataclass(frozen=True)
class RecolorConfig:
    """All tuneable parameters for a recolouring run.

    Attributes:
        workers:           Number of chunks an image is split into
                           (None = CPU count minus one, minimum 1).
        executor:          "thread" or "process" worker pool.
        progress_interval: A chunk reports progress every this many pixels.
        output_format:     Image format for saved files.
        save_comparison:   Generate a side-by-side comparison grid.
        input_dir:         Folder to scan for source images.
        output_dir:        Folder for results.
    """

    # Parallelism
    workers: int | None = None
    executor: str = "thread"  # "thread" | "process"

    # Progress
    progress_interval: int = 100_000

    # Output
    output_format: str = "png"
    save_comparison: bool = False

    # Paths
    input_dir: Path = field(default_factory=lambda: Path("images"))
    output_dir: Path = field(default_factory=lambda: Path("output"))

    SUPPORTED_EXTENSIONS: frozenset[str] = frozenset(
        {".jpg", ".jpeg", ".png", ".bmp", ".tiff", ".tif", ".webp", ".gif"}
    )

    def __post_init__(self) -> None:
        if self.workers is not None and self.workers < 1:
            msg = f"workers must be >= 1, got {self.workers}"
            raise ValueError(msg)
        if self.progress_interval < 1:
            msg = f"progress_interval must be >= 1, got {self.progress_interval}"
            raise ValueError(msg)
        if self.executor not in EXECUTORS:
            msg = f"Unknown executor '{self.executor}'. Available: {', '.join(EXECUTORS)}"
            raise ValueError(msg)

    def resolved_workers(self) -> int:
        return self.workers if self.workers is not None else default_workers()
