"""OKLab / OKLCh colour-space conversion.

All array functions take ``(N, 3)`` inputs and return ``(N, 3)`` float64.
RGB values are on the 0-255 scale.  The matrices are the reference OKLab
coefficients (linear sRGB -> LMS -> OKLab and back); matching is sensitive
to them, so they are written out in full rather than derived.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

# linear sRGB -> LMS
_M1 = np.array([
    [0.4122214708, 0.5363325363, 0.0514459929],
    [0.2119034982, 0.6806995451, 0.1073969566],
    [0.0883024619, 0.2817188376, 0.6299787005],
])

# cube-rooted LMS -> OKLab
_M2 = np.array([
    [0.2104542553, 0.7936177850, -0.0040720468],
    [1.9779984951, -2.4285922050, 0.4505937099],
    [0.0259040371, 0.7827717662, -0.8086757660],
])

# OKLab -> cube-rooted LMS
_M2_INV = np.array([
    [1.0, 0.3963377774, 0.2158037573],
    [1.0, -0.1055613458, -0.0638541728],
    [1.0, -0.0894841775, -1.2914855480],
])

# LMS -> linear sRGB
_M1_INV = np.array([
    [4.0767416621, -3.3077115913, 0.2309699292],
    [-1.2684380046, 2.6097574011, -0.3413193965],
    [-0.0041960863, -0.7034186147, 1.7076147010],
])


@dataclass(frozen=True)
class PerceptualColor:
    """One colour in OKLab with its equivalent OKLCh polar form.

    ``a == C * cos(h)`` and ``b == C * sin(h)`` always hold; build instances
    through :meth:`from_lab` or :meth:`from_lch` to keep them in step.
    """

    L: float
    a: float
    b: float
    C: float
    h: float

    @classmethod
    def from_lab(cls, L: float, a: float, b: float) -> PerceptualColor:
        C = np.sqrt(a * a + b * b)
        return cls(float(L), float(a), float(b), float(C), float(np.arctan2(b, a)))

    @classmethod
    def from_lch(cls, L: float, C: float, h: float) -> PerceptualColor:
        return cls(float(L), float(C * np.cos(h)), float(C * np.sin(h)), float(C), float(h))

    @property
    def lab(self) -> tuple[float, float, float]:
        return self.L, self.a, self.b


def _as_rows(values: np.ndarray) -> np.ndarray:
    return np.asarray(values, dtype=np.float64).reshape(-1, 3)


def srgb_to_linear(c: np.ndarray) -> np.ndarray:
    """Undo the sRGB transfer curve for values in [0, 1]."""
    c = np.asarray(c, dtype=np.float64)
    return np.where(c <= 0.04045, c / 12.92, ((c + 0.055) / 1.055) ** 2.4)


def linear_to_srgb(c: np.ndarray) -> np.ndarray:
    """Apply the sRGB transfer curve; negative inputs stay on the linear segment."""
    c = np.asarray(c, dtype=np.float64)
    # max() keeps the discarded branch away from fractional powers of negatives
    curved = 1.055 * np.power(np.maximum(c, 0.0031308), 1 / 2.4) - 0.055
    return np.where(c <= 0.0031308, 12.92 * c, curved)


def rgb_to_oklab(rgb: np.ndarray) -> np.ndarray:
    """Convert (N, 3) 0-255 RGB → (N, 3) OKLab ``(L, a, b)``."""
    linear = srgb_to_linear(_as_rows(rgb) / 255.0)
    # cbrt is the signed real cube root, so negative LMS values are fine
    lms = np.cbrt(linear @ _M1.T)
    return lms @ _M2.T


def oklab_to_lch(lab: np.ndarray) -> np.ndarray:
    """(L, a, b) → (L, C, h) with h in radians."""
    lab = _as_rows(lab)
    L, a, b = lab[:, 0], lab[:, 1], lab[:, 2]
    return np.stack([L, np.sqrt(a * a + b * b), np.arctan2(b, a)], axis=1)


def lch_to_oklab(lch: np.ndarray) -> np.ndarray:
    """(L, C, h) → (L, a, b)."""
    lch = _as_rows(lch)
    L, C, h = lch[:, 0], lch[:, 1], lch[:, 2]
    return np.stack([L, C * np.cos(h), C * np.sin(h)], axis=1)


def oklab_to_rgb(lab: np.ndarray) -> np.ndarray:
    """Convert (N, 3) OKLab → (N, 3) float RGB clamped to [0, 255]."""
    lms = (_as_rows(lab) @ _M2_INV.T) ** 3
    linear = lms @ _M1_INV.T
    return np.clip(linear_to_srgb(linear) * 255.0, 0.0, 255.0)


def oklch_to_rgb(lch: np.ndarray) -> np.ndarray:
    """Convert (N, 3) OKLCh → (N, 3) float RGB clamped to [0, 255]."""
    return oklab_to_rgb(lch_to_oklab(lch))


def perceptual_coordinates(rgb: np.ndarray) -> np.ndarray:
    """OKLab coordinates used for matching.

    The Cartesian ``a, b`` are re-derived from the polar form, so a sample
    and a palette entry carrying the same colour always land on exactly the
    same point.
    """
    return lch_to_oklab(oklab_to_lch(rgb_to_oklab(rgb)))


def quantize(rgb: np.ndarray) -> np.ndarray:
    """Round float RGB to uint8 (round-half-to-even, then clip)."""
    return np.clip(np.rint(rgb), 0, 255).astype(np.uint8)


def to_perceptual(r: int, g: int, b: int) -> PerceptualColor:
    """Scalar form of :func:`rgb_to_oklab`."""
    L, C, h = oklab_to_lch(rgb_to_oklab([r, g, b]))[0]
    return PerceptualColor.from_lch(L, C, h)


def to_rgb(color: PerceptualColor) -> tuple[float, float, float]:
    """Scalar inverse of :func:`to_perceptual`, via the polar form."""
    r, g, b = oklch_to_rgb([color.L, color.C, color.h])[0]
    return float(r), float(g), float(b)
