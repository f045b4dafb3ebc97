"""Palette catalog lookup and per-job palette preprocessing."""

from __future__ import annotations

import difflib
import logging
import re
from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

from palette_recolor.color_utils import (
    oklab_to_lch,
    oklch_to_rgb,
    perceptual_coordinates,
    quantize,
)
from palette_recolor.errors import EmptyPaletteError, PaletteParseError, UnknownPaletteError
from palette_recolor.palette_data import PALETTES

logger = logging.getLogger(__name__)

# Selecting this key means "no transform": the source image is shown as-is.
ORIGINAL = "original"

_HEX_RE = re.compile(r"#[0-9a-fA-F]{6}")


@dataclass(frozen=True, eq=False)
class PreparedPalette:
    """A palette converted once, ready to be shared by every chunk.

    Attributes:
        hex_codes: The palette as given, in order.
        rgb:       (K, 3) uint8 parsed colours.
        lab:       (K, 3) float64 OKLab coordinates used for matching.
        lch:       (K, 3) float64 OKLCh form of the same colours.
        render:    (K, 3) uint8 colour written for a pixel matched to entry k
                   (the entry sent back through OKLCh -> RGB).
    """

    hex_codes: tuple[str, ...]
    rgb: np.ndarray
    lab: np.ndarray
    lch: np.ndarray
    render: np.ndarray

    def __len__(self) -> int:
        return len(self.hex_codes)


def parse_hex(value: str, index: int | None = None) -> tuple[int, int, int]:
    """Parse ``#RRGGBB`` (either case) into 8-bit components."""
    if not isinstance(value, str) or _HEX_RE.fullmatch(value) is None:
        raise PaletteParseError(value, index)
    return int(value[1:3], 16), int(value[3:5], 16), int(value[5:7], 16)


def prepare_palette(colors: Sequence[str]) -> PreparedPalette:
    """Parse and convert a hex palette once for a whole job.

    Every entry is parsed before anything is converted, so a malformed
    colour anywhere aborts the job without producing a partial palette.

    Raises:
        EmptyPaletteError: *colors* is empty.
        PaletteParseError: an entry is not ``#RRGGBB``.
    """
    if len(colors) == 0:
        raise EmptyPaletteError
    parsed = [parse_hex(c, i) for i, c in enumerate(colors)]

    rgb = np.array(parsed, dtype=np.uint8)
    lab = perceptual_coordinates(rgb)
    lch = oklab_to_lch(lab)
    render = quantize(oklch_to_rgb(lch))

    if len(set(parsed)) != len(parsed):
        logger.debug("Palette has duplicate colours; first occurrence wins ties")

    for arr in (rgb, lab, lch, render):
        arr.flags.writeable = False
    return PreparedPalette(tuple(colors), rgb, lab, lch, render)


# -- Catalog -----------------------------------------------------------


def palette_names(search: str = "") -> list[str]:
    """Catalog names containing *search* (case-insensitive), sorted."""
    needle = search.lower()
    names = [n for n in PALETTES if needle in n.lower()]
    return sorted(names, key=str.casefold)


def get_palette(name: str) -> list[str]:
    """Look up a catalog palette by name.

    Raises:
        UnknownPaletteError: no palette has that name; close matches are
            attached to the error.
    """
    try:
        return list(PALETTES[name])
    except KeyError:
        suggestions = difflib.get_close_matches(name, list(PALETTES), n=3)
        raise UnknownPaletteError(name, suggestions) from None


def palette_swatch(palette: PreparedPalette, size: int = 16) -> np.ndarray:
    """Render the palette as a (size, size * K, 3) uint8 strip."""
    strip = np.repeat(palette.render[np.newaxis, :, :], size, axis=0)
    return np.repeat(strip, size, axis=1)
