"""Tests for image I/O helpers and the command line."""

from __future__ import annotations

from pathlib import Path

import numpy as np
import pytest
from PIL import Image
from typer.testing import CliRunner

from palette_recolor.cli import app
from palette_recolor.image_io import (
    load_rgba,
    make_comparison_grid,
    output_name,
    save_rgba,
)
from palette_recolor.palette import get_palette, prepare_palette

runner = CliRunner()


@pytest.fixture
def tmp_image(tmp_path: Path) -> Path:
    """Write a small non-square RGB test PNG to disk."""
    img = Image.fromarray(
        np.random.default_rng(0).integers(0, 256, (5, 8, 3), dtype=np.uint8),
    )
    p = tmp_path / "photo.png"
    img.save(p)
    return p


# -- Image I/O ---------------------------------------------------------

class TestImageIO:
    def test_load_is_rgba(self, tmp_image: Path) -> None:
        arr = load_rgba(tmp_image)
        assert arr.shape == (5, 8, 4)
        assert arr.dtype == np.uint8
        assert (arr[..., 3] == 255).all()

    def test_save_round_trip(self, tmp_path: Path) -> None:
        arr = np.random.default_rng(1).integers(0, 256, (4, 6, 4), dtype=np.uint8)
        out = tmp_path / "out.png"
        save_rgba(arr, out)
        np.testing.assert_array_equal(load_rgba(out), arr)

    def test_save_jpeg_drops_alpha(self, tmp_path: Path) -> None:
        arr = np.zeros((4, 6, 4), dtype=np.uint8)
        out = tmp_path / "out.jpg"
        save_rgba(arr, out)
        assert Image.open(out).mode == "RGB"

    def test_output_name(self) -> None:
        assert output_name("photo.jpg", "rose pine") == "photo-rose-pine.png"
        assert output_name("dir/my.photo.webp", "nord", "webp") == "my-nord.webp"
        assert output_name("a.png", "gruvbox  dark\tsoft") == "a-gruvbox-dark-soft.png"

    def test_comparison_grid(self, tmp_path: Path) -> None:
        original = np.zeros((10, 12, 4), dtype=np.uint8)
        p = prepare_palette(get_palette("nord"))
        out = tmp_path / "grid.png"
        make_comparison_grid(original, original, p, out, palette_key="nord")
        img = Image.open(out)
        assert img.size == (3 * 12 + 2 * 8, 10 + 36)


# -- CLI ---------------------------------------------------------------

class TestCLI:
    def test_palettes_filter(self) -> None:
        result = runner.invoke(app, ["palettes", "rose"])
        assert result.exit_code == 0
        assert "rose-pine-dawn" in result.output

    def test_palettes_no_match(self) -> None:
        result = runner.invoke(app, ["palettes", "zzz-nothing"])
        assert result.exit_code == 1

    def test_convert(self, tmp_image: Path, tmp_path: Path) -> None:
        out_dir = tmp_path / "out"
        result = runner.invoke(app, [
            "convert", str(tmp_image), "-p", "rose-pine", "-p", "original",
            "-o", str(out_dir), "--workers", "2", "--comparison",
        ])
        assert result.exit_code == 0, result.output
        recolored = out_dir / "photo-rose-pine.png"
        assert recolored.exists()
        assert (out_dir / "photo-original.png").exists()
        assert (out_dir / "photo-rose-pine_comparison.png").exists()
        assert Image.open(recolored).size == (8, 5)

    def test_convert_unknown_palette(self, tmp_image: Path, tmp_path: Path) -> None:
        result = runner.invoke(app, [
            "convert", str(tmp_image), "-p", "rose-pin", "-o", str(tmp_path / "out"),
        ])
        assert result.exit_code == 1

    def test_convert_bad_workers(self, tmp_image: Path, tmp_path: Path) -> None:
        result = runner.invoke(app, [
            "convert", str(tmp_image), "-p", "nord", "-o", str(tmp_path), "--workers", "0",
        ])
        assert result.exit_code != 0

    def test_batch(self, tmp_image: Path, tmp_path: Path) -> None:
        out_dir = tmp_path / "results"
        result = runner.invoke(app, [
            "batch", "-p", "nord", "-i", str(tmp_image.parent), "-o", str(out_dir),
        ])
        assert result.exit_code == 0, result.output
        assert (out_dir / "photo-nord.png").exists()

    def test_batch_empty_folder(self, tmp_path: Path) -> None:
        empty = tmp_path / "empty"
        empty.mkdir()
        result = runner.invoke(app, ["batch", "-p", "nord", "-i", str(empty)])
        assert result.exit_code == 0
        assert "No images found" in result.output

    def test_batch_skips_hidden_and_unsupported(self, tmp_image: Path, tmp_path: Path) -> None:
        (tmp_path / ".hidden.png").write_bytes(tmp_image.read_bytes())
        (tmp_path / "notes.txt").write_text("not an image")
        out_dir = tmp_path / "results"
        result = runner.invoke(app, [
            "batch", "-p", "nord", "-i", str(tmp_path), "-o", str(out_dir),
        ])
        assert result.exit_code == 0, result.output
        assert sorted(p.name for p in out_dir.iterdir()) == ["photo-nord.png"]
