"""Image loading, saving, and comparison-grid generation."""

from __future__ import annotations

import re
from pathlib import Path

import numpy as np
from PIL import Image, ImageDraw, ImageFont

from palette_recolor.palette import PreparedPalette, palette_swatch


def load_rgba(path: str | Path) -> np.ndarray:
    """Load any Pillow-readable image.

    Returns:
        (H, W, 4) uint8 array.
    """
    with Image.open(path) as img:
        return np.array(img.convert("RGBA"), dtype=np.uint8)


def save_rgba(array: np.ndarray, path: str | Path) -> None:
    """Save an (H, W, 3|4) uint8 array; the format follows the suffix."""
    img = Image.fromarray(np.ascontiguousarray(array, dtype=np.uint8))
    if Path(path).suffix.lower() in {".jpg", ".jpeg"} and img.mode == "RGBA":
        img = img.convert("RGB")
    img.save(path)


def output_name(source: str | Path, palette_key: str, fmt: str = "png") -> str:
    """``photo.jpg`` + ``"rose pine"`` → ``photo-rose-pine.png``."""
    stem = Path(source).name.split(".")[0] or "unnamed"
    slug = re.sub(r"\s+", "-", palette_key)
    return f"{stem}-{slug}.{fmt}"


_LABEL_FONTS = (
    "DejaVuSans-Bold.ttf",
    "/usr/share/fonts/truetype/dejavu/DejaVuSans-Bold.ttf",
)


def _label_font(size: int) -> ImageFont.ImageFont | ImageFont.FreeTypeFont:
    for name in _LABEL_FONTS:
        try:
            return ImageFont.truetype(name, size)
        except OSError:
            continue
    return ImageFont.load_default()


def make_comparison_grid(
    original: np.ndarray,
    recolored: np.ndarray,
    palette: PreparedPalette,
    output_path: str | Path,
    palette_key: str = "Palette",
) -> None:
    """Create a 3-panel comparison: Original | Palette | Recolored.

    The palette panel is the swatch strip stretched to the image size.
    """
    h, w = original.shape[:2]
    label_height, gap = 36, 8

    swatch = Image.fromarray(palette_swatch(palette, size=1)).resize((w, h), Image.NEAREST)
    panels = [
        ("Original", Image.fromarray(original).convert("RGB")),
        (palette_key, swatch),
        ("Recolored", Image.fromarray(recolored).convert("RGB")),
    ]

    canvas = Image.new("RGB", (3 * w + 2 * gap, h + label_height), (30, 30, 30))
    draw = ImageDraw.Draw(canvas)
    font = _label_font(18)

    for x, (label, panel) in zip(range(0, 3 * (w + gap), w + gap), panels, strict=True):
        canvas.paste(panel, (x, label_height))
        offset = max(0, (w - int(draw.textlength(label, font=font))) // 2)
        draw.text((x + offset, 6), label, fill=(220, 220, 220), font=font)

    canvas.save(output_path)
