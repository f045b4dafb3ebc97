"""
Palette Recolor
===============

Recolour any image so every pixel takes the perceptually nearest colour
of a fixed palette (an editor colourscheme).  Distances are measured in
OKLab; the image is processed in parallel row chunks with aggregated
progress, and finished results are memoised per palette.
"""

__version__ = "1.0.0"

from palette_recolor.cache import ResultCache
from palette_recolor.color_utils import PerceptualColor, to_perceptual, to_rgb
from palette_recolor.config import RecolorConfig, default_workers
from palette_recolor.errors import (
    EmptyPaletteError,
    PaletteParseError,
    RecolorError,
    UnknownPaletteError,
    WorkerFailure,
)
from palette_recolor.image_io import load_rgba, save_rgba
from palette_recolor.matcher import match, recolor_pixels
from palette_recolor.orchestrator import (
    ConversionResult,
    JobContext,
    JobState,
    Recolorer,
)
from palette_recolor.palette import (
    ORIGINAL,
    get_palette,
    palette_names,
    prepare_palette,
)
from palette_recolor.progress import ProgressAggregator
from palette_recolor.scheduler import run_chunks, split_rows

__all__ = [
    "ORIGINAL",
    "ConversionResult",
    "EmptyPaletteError",
    "JobContext",
    "JobState",
    "PaletteParseError",
    "PerceptualColor",
    "ProgressAggregator",
    "RecolorConfig",
    "RecolorError",
    "Recolorer",
    "ResultCache",
    "UnknownPaletteError",
    "WorkerFailure",
    "default_workers",
    "get_palette",
    "load_rgba",
    "match",
    "palette_names",
    "prepare_palette",
    "recolor_pixels",
    "run_chunks",
    "save_rgba",
    "split_rows",
    "to_perceptual",
    "to_rgb",
]
