"""Nearest-palette-colour search in OKLab."""

from __future__ import annotations

import numpy as np

from palette_recolor.color_utils import PerceptualColor, perceptual_coordinates
from palette_recolor.palette import PreparedPalette


def match(sample: PerceptualColor, palette_lab: np.ndarray) -> int:
    """Index of the palette entry closest to *sample*.

    Squared Euclidean distance over ``(L, a, b)``; the first entry reaching
    the minimum wins.
    """
    best, best_dist = 0, np.inf
    for k, (L, a, b) in enumerate(np.asarray(palette_lab, dtype=np.float64)):
        dL, da, db = sample.L - L, sample.a - a, sample.b - b
        dist = dL * dL + da * da + db * db
        if dist < best_dist:
            best, best_dist = k, dist
    return best


def match_pixels(lab: np.ndarray, palette_lab: np.ndarray) -> np.ndarray:
    """Vectorised :func:`match` for (N, 3) samples.

    Walks the palette once, keeping a running minimum; only a strictly
    smaller distance replaces the current best, so ties go to the earlier
    entry exactly as in :func:`match`.

    Returns:
        (N,) intp palette indices.
    """
    n = len(lab)
    best = np.zeros(n, dtype=np.intp)
    best_dist = np.full(n, np.inf)
    for k, (L, a, b) in enumerate(palette_lab):
        dist = (lab[:, 0] - L) ** 2 + (lab[:, 1] - a) ** 2 + (lab[:, 2] - b) ** 2
        closer = dist < best_dist
        best[closer] = k
        best_dist[closer] = dist[closer]
    return best


def recolor_pixels(pixels: np.ndarray, palette: PreparedPalette) -> np.ndarray:
    """Replace each (N, 3|4) uint8 pixel by its nearest palette colour.

    Alpha, when present, is copied through untouched.
    """
    out = pixels.copy()
    if len(pixels) == 0:
        return out
    idx = match_pixels(perceptual_coordinates(pixels[:, :3]), palette.lab)
    out[:, :3] = palette.render[idx]
    return out
