"""Tests for the recolouring engine: colours, palettes, matching, chunks."""

from __future__ import annotations

import queue

import numpy as np
import pytest

import palette_recolor.scheduler as scheduler
from palette_recolor.cache import ResultCache
from palette_recolor.color_utils import (
    PerceptualColor,
    linear_to_srgb,
    oklab_to_rgb,
    perceptual_coordinates,
    quantize,
    rgb_to_oklab,
    srgb_to_linear,
    to_perceptual,
    to_rgb,
)
from palette_recolor.config import RecolorConfig, default_workers
from palette_recolor.errors import (
    EmptyPaletteError,
    PaletteParseError,
    UnknownPaletteError,
    WorkerFailure,
)
from palette_recolor.matcher import match, match_pixels, recolor_pixels
from palette_recolor.palette import (
    get_palette,
    palette_names,
    palette_swatch,
    parse_hex,
    prepare_palette,
)
from palette_recolor.palette_data import PALETTES
from palette_recolor.progress import ProgressAggregator, ProgressEvent
from palette_recolor.scheduler import (
    ChunkTask,
    plan_chunks,
    recolor_chunk,
    run_chunks,
    split_rows,
)

# -- Fixtures ----------------------------------------------------------

W, H = 11, 7  # non-square, height not a multiple of most worker counts


@pytest.fixture
def image() -> np.ndarray:
    """Synthetic RGBA image with a varied alpha channel."""
    rng = np.random.default_rng(456)
    return rng.integers(0, 256, size=(H, W, 4), dtype=np.uint8)


@pytest.fixture
def palette():
    return prepare_palette(get_palette("catppuccin-mocha"))


# -- Config ------------------------------------------------------------

class TestConfig:
    def test_defaults(self) -> None:
        cfg = RecolorConfig()
        assert cfg.progress_interval == 100_000
        assert cfg.executor == "thread"
        assert cfg.resolved_workers() == default_workers()

    def test_default_workers_at_least_one(self, monkeypatch) -> None:
        monkeypatch.setattr("os.cpu_count", lambda: 1)
        assert default_workers() == 1
        monkeypatch.setattr("os.cpu_count", lambda: None)
        assert default_workers() == 1
        monkeypatch.setattr("os.cpu_count", lambda: 8)
        assert default_workers() == 7

    def test_frozen(self) -> None:
        cfg = RecolorConfig()
        with pytest.raises(AttributeError):
            cfg.workers = 4  # type: ignore[misc]

    @pytest.mark.parametrize(
        "kwargs",
        [{"workers": 0}, {"progress_interval": 0}, {"executor": "gpu"}],
    )
    def test_invalid(self, kwargs) -> None:
        with pytest.raises(ValueError):
            RecolorConfig(**kwargs)


# -- Colour space ------------------------------------------------------

class TestColorSpace:
    def test_white_and_black(self) -> None:
        white = to_perceptual(255, 255, 255)
        assert white.L == pytest.approx(1.0, abs=1e-4)
        assert white.C == pytest.approx(0.0, abs=1e-4)
        black = to_perceptual(0, 0, 0)
        assert (black.L, black.a, black.b) == (0.0, 0.0, 0.0)

    def test_reference_red(self) -> None:
        red = to_perceptual(255, 0, 0)
        assert red.L == pytest.approx(0.627955, abs=1e-4)
        assert red.a == pytest.approx(0.224863, abs=1e-4)
        assert red.b == pytest.approx(0.125846, abs=1e-4)

    def test_polar_and_cartesian_agree(self) -> None:
        c = to_perceptual(30, 144, 200)
        assert c.a == pytest.approx(c.C * np.cos(c.h))
        assert c.b == pytest.approx(c.C * np.sin(c.h))
        same = PerceptualColor.from_lab(c.L, c.a, c.b)
        assert same.C == pytest.approx(c.C)
        assert same.h == pytest.approx(c.h)

    def test_round_trip(self) -> None:
        rng = np.random.default_rng(0)
        rgb = rng.integers(0, 256, size=(500, 3))
        back = oklab_to_rgb(rgb_to_oklab(rgb))
        np.testing.assert_allclose(back, rgb, atol=1e-3)
        np.testing.assert_array_equal(quantize(back), rgb)
        for r, g, b in rgb[:20]:
            np.testing.assert_array_equal(quantize(np.array(to_rgb(to_perceptual(r, g, b)))), (r, g, b))

    def test_out_of_gamut_is_clamped(self) -> None:
        rgb = oklab_to_rgb(np.array([[1.2, 0.4, -0.4], [-0.1, 0.0, 0.0]]))
        assert rgb.min() >= 0.0
        assert rgb.max() <= 255.0
        assert not np.isnan(rgb).any()

    def test_gamma_thresholds(self) -> None:
        assert float(srgb_to_linear(0.04045)) == pytest.approx(0.04045 / 12.92)
        assert float(linear_to_srgb(0.0031308)) == pytest.approx(12.92 * 0.0031308)
        assert float(linear_to_srgb(-0.01)) == pytest.approx(-0.1292)

    def test_quantize_rounds_half_to_even(self) -> None:
        out = quantize(np.array([0.5, 1.5, 254.6, 300.0, -2.0]))
        np.testing.assert_array_equal(out, [0, 2, 255, 255, 0])
        assert out.dtype == np.uint8


# -- Palette -----------------------------------------------------------

class TestPalette:
    def test_parse_hex(self) -> None:
        assert parse_hex("#1f1f28") == (31, 31, 40)
        assert parse_hex("#FFAA00") == (255, 170, 0)

    @pytest.mark.parametrize("bad", ["red", "#fff", "1f1f28", "#1f1f2g", "#1f1f280", " #1f1f28", 123])
    def test_parse_hex_rejects(self, bad) -> None:
        with pytest.raises(PaletteParseError):
            parse_hex(bad)

    def test_prepare_keeps_order(self) -> None:
        colors = ["#ffffff", "#000000", "#ff0000"]
        p = prepare_palette(colors)
        assert p.hex_codes == tuple(colors)
        assert p.lab.shape == (3, 3)
        np.testing.assert_array_equal(p.rgb, [[255, 255, 255], [0, 0, 0], [255, 0, 0]])

    def test_malformed_entry_aborts(self) -> None:
        with pytest.raises(PaletteParseError) as info:
            prepare_palette(["#000000", "red"])
        assert info.value.index == 1
        assert isinstance(info.value, ValueError)

    def test_empty(self) -> None:
        with pytest.raises(EmptyPaletteError):
            prepare_palette([])

    def test_catalog_entries_are_valid(self) -> None:
        for name, colors in PALETTES.items():
            assert colors, name
            for c in colors:
                parse_hex(c)

    def test_render_colours_reproduce_palette(self) -> None:
        """Every palette colour maps back to itself within 1/255."""
        for name in ["kanagawa paper", "rose-pine", "nord", "GruvboxDark", "Dracula"]:
            p = prepare_palette(get_palette(name))
            pixels = p.rgb.copy()
            out = recolor_pixels(pixels, p)
            diff = np.abs(out.astype(int) - p.rgb.astype(int))
            assert diff.max() <= 1, name

    def test_names_filter_and_sort(self) -> None:
        names = palette_names("ROSE")
        assert names == ["rose-pine", "rose-pine-dawn", "rose-pine-moon"]
        everything = palette_names()
        assert len(everything) == len(PALETTES)
        assert everything == sorted(everything, key=str.casefold)

    def test_unknown_palette(self) -> None:
        with pytest.raises(UnknownPaletteError) as info:
            get_palette("rose-pin")
        assert "rose-pine" in info.value.suggestions
        assert isinstance(info.value, KeyError)

    def test_get_palette_returns_copy(self) -> None:
        colors = get_palette("nord")
        colors.append("#000000")
        assert len(PALETTES["nord"]) == len(colors) - 1

    def test_swatch(self) -> None:
        p = prepare_palette(["#000000", "#ffffff"])
        s = palette_swatch(p, size=4)
        assert s.shape == (4, 8, 3)
        np.testing.assert_array_equal(s[0, 0], [0, 0, 0])
        np.testing.assert_array_equal(s[3, 7], [255, 255, 255])


# -- Matcher -----------------------------------------------------------

class TestMatcher:
    def test_dark_grey_goes_to_black(self) -> None:
        p = prepare_palette(["#000000", "#ffffff"])
        assert match(to_perceptual(10, 10, 10), p.lab) == 0
        assert match(to_perceptual(240, 240, 240), p.lab) == 1

    def test_tie_goes_to_first_entry(self) -> None:
        palette_lab = np.array([[0.0, 0.0, 0.0], [1.0, 0.0, 0.0]])
        sample = PerceptualColor.from_lab(0.5, 0.0, 0.0)
        assert match(sample, palette_lab) == 0
        assert match(sample, palette_lab[::-1]) == 0
        idx = match_pixels(np.array([[0.5, 0.0, 0.0]]), palette_lab)
        assert idx[0] == 0

    def test_vectorised_agrees_with_scalar(self, palette) -> None:
        rng = np.random.default_rng(3)
        rgb = rng.integers(0, 256, size=(200, 3), dtype=np.uint8)
        lab = perceptual_coordinates(rgb)
        idx = match_pixels(lab, palette.lab)
        for (r, g, b), k in zip(rgb, idx, strict=True):
            assert match(to_perceptual(r, g, b), palette.lab) == k

    def test_single_entry_palette(self, image) -> None:
        p = prepare_palette(["#ff0000"])
        out = recolor_pixels(image.reshape(-1, 4), p)
        assert (out[:, :3] == [255, 0, 0]).all()

    def test_alpha_passes_through(self, image, palette) -> None:
        flat = image.reshape(-1, 4)
        out = recolor_pixels(flat, palette)
        np.testing.assert_array_equal(out[:, 3], flat[:, 3])

    def test_output_uses_only_palette_colours(self, image, palette) -> None:
        out = recolor_pixels(image.reshape(-1, 4), palette)
        allowed = {tuple(c) for c in palette.render}
        assert {tuple(c) for c in out[:, :3]} <= allowed

    def test_empty_input(self, palette) -> None:
        out = recolor_pixels(np.empty((0, 4), dtype=np.uint8), palette)
        assert out.shape == (0, 4)


# -- Chunk scheduling --------------------------------------------------

class TestChunks:
    def test_coverage(self) -> None:
        for height in range(0, 40):
            for workers in range(1, 20):
                spans = split_rows(height, workers)
                assert len(spans) == workers
                assert spans[0][0] == 0
                assert spans[-1][1] == height
                for (_, end), (start, _) in zip(spans, spans[1:]):
                    assert end == start
                assert sum(e - s for s, e in spans) == height

    def test_last_chunk_takes_remainder(self) -> None:
        assert split_rows(10, 3) == [(0, 3), (3, 6), (6, 10)]

    def test_more_workers_than_rows(self) -> None:
        tasks = plan_chunks(1, 1, 8)
        assert len(tasks) == 8
        assert [t.size for t in tasks] == [0] * 7 + [1]

    def test_invalid_workers(self) -> None:
        with pytest.raises(ValueError):
            split_rows(10, 0)

    def test_chunk_reports_every_interval(self, palette) -> None:
        pixels = np.zeros((25, 4), dtype=np.uint8)
        events: queue.Queue = queue.Queue()
        task = ChunkTask(2, 0, 5, 0, 25)
        result = recolor_chunk(task, pixels, palette, 10, events)
        got = []
        while not events.empty():
            got.append(events.get())
        assert got == [ProgressEvent(2, 10, 25), ProgressEvent(2, 20, 25)]
        assert result.pixels.shape == (25, 4)
        assert result.start == 0
        assert (pixels == 0).all()

    def test_single_pixel_many_workers(self, palette) -> None:
        img = np.array([[[200, 30, 60, 128]]], dtype=np.uint8)
        out = run_chunks(img, palette, workers=8)
        expected = recolor_pixels(img.reshape(-1, 4), palette).reshape(1, 1, 4)
        np.testing.assert_array_equal(out, expected)

    def test_worker_count_invariance(self, image, palette) -> None:
        one = run_chunks(image, palette, workers=1)
        per_row = run_chunks(image, palette, workers=H)
        too_many = run_chunks(image, palette, workers=H + 5)
        np.testing.assert_array_equal(one, per_row)
        np.testing.assert_array_equal(one, too_many)

    def test_deterministic(self, image, palette) -> None:
        a = run_chunks(image, palette, workers=3)
        b = run_chunks(image, palette, workers=3)
        assert a.tobytes() == b.tobytes()

    def test_source_untouched(self, image, palette) -> None:
        before = image.copy()
        out = run_chunks(image, palette, workers=3)
        np.testing.assert_array_equal(image, before)
        assert out is not image
        assert out.shape == image.shape

    def test_rgb_image(self, palette) -> None:
        img = np.full((4, 5, 3), 17, dtype=np.uint8)
        out = run_chunks(img, palette, workers=2)
        assert out.shape == (4, 5, 3)

    def test_empty_image(self, palette) -> None:
        img = np.zeros((0, 5, 4), dtype=np.uint8)
        out = run_chunks(img, palette, workers=3)
        assert out.shape == (0, 5, 4)

    @pytest.mark.parametrize(
        "bad",
        [np.zeros((4, 4), dtype=np.uint8), np.zeros((4, 4, 2), dtype=np.uint8),
         np.zeros((4, 4, 4), dtype=np.float32)],
    )
    def test_rejects_bad_images(self, bad, palette) -> None:
        with pytest.raises(ValueError):
            run_chunks(bad, palette, workers=2)

    def test_progress_monotonic_and_complete(self, palette) -> None:
        img = np.random.default_rng(1).integers(0, 256, (20, 15, 4), dtype=np.uint8)
        seen: list[int] = []
        run_chunks(img, palette, workers=3, progress_interval=7, on_progress=seen.append)
        assert seen == sorted(seen)
        assert len(seen) == len(set(seen))
        assert seen[-1] == 100

    def test_worker_failure(self, image, palette, monkeypatch) -> None:
        def boom(pixels, palette):
            raise RuntimeError("worker crashed")

        monkeypatch.setattr(scheduler, "recolor_pixels", boom)
        with pytest.raises(WorkerFailure) as info:
            run_chunks(image, palette, workers=2)
        assert isinstance(info.value.__cause__, RuntimeError)

    def test_process_pool_matches_threads(self, image, palette) -> None:
        threaded = run_chunks(image, palette, workers=2)
        processed = run_chunks(image, palette, workers=2, executor="process",
                               progress_interval=10)
        np.testing.assert_array_equal(threaded, processed)

    def test_unknown_executor(self, image, palette) -> None:
        with pytest.raises(ValueError):
            run_chunks(image, palette, workers=2, executor="gpu")


# -- Progress ----------------------------------------------------------

class TestProgress:
    def test_average_of_fractions(self) -> None:
        agg = ProgressAggregator(4)
        agg.update(0, 50, 100)
        assert agg.percent == 12  # trunc(100 * 0.5 / 4)
        agg.update(1, 1, 1)
        assert agg.percent == 37

    def test_out_of_order_events_never_regress(self) -> None:
        seen: list[int] = []
        agg = ProgressAggregator(2, seen.append)
        agg.handle(ProgressEvent(0, 80, 100))
        agg.handle(ProgressEvent(0, 40, 100))
        agg.handle(ProgressEvent(1, 20, 100))
        assert agg.fractions == [0.8, 0.2]
        assert seen == [40, 50]

    def test_complete_and_finish(self) -> None:
        seen: list[int] = []
        agg = ProgressAggregator(3, seen.append)
        agg.complete(1)
        assert agg.percent == 33
        agg.finish()
        assert seen == [33, 100]
        agg.finish()
        assert seen == [33, 100]

    def test_zero_total_chunk_counts_as_done(self) -> None:
        agg = ProgressAggregator(2)
        agg.update(0, 0, 0)
        assert agg.percent == 50

    def test_no_chunks(self) -> None:
        agg = ProgressAggregator(0)
        assert agg.finish() == 100


# -- Cache -------------------------------------------------------------

class TestCache:
    def test_get_put(self) -> None:
        cache = ResultCache()
        assert cache.get("nord") is None
        img = np.zeros((2, 2, 4), dtype=np.uint8)
        stored = cache.put("nord", img)
        assert cache.get("nord") is stored
        np.testing.assert_array_equal(stored, img)
        assert "nord" in cache
        assert len(cache) == 1
        assert cache.keys() == ["nord"]

    def test_results_are_read_only(self) -> None:
        cache = ResultCache()
        cache.put("nord", np.zeros((2, 2, 4), dtype=np.uint8))
        with pytest.raises(ValueError):
            cache.get("nord")[0, 0, 0] = 1

    def test_caller_array_stays_writable(self) -> None:
        cache = ResultCache()
        img = np.zeros((2, 2, 4), dtype=np.uint8)
        cache.put("nord", img)
        assert img.flags.writeable
        img[0, 0, 0] = 9
        assert cache.get("nord")[0, 0, 0] == 0

    def test_invalidate_all_bumps_epoch(self) -> None:
        cache = ResultCache()
        assert cache.epoch == 0
        cache.invalidate_all()
        cache.invalidate_all()
        assert cache.epoch == 2

    def test_invalidate_all(self) -> None:
        cache = ResultCache()
        cache.put("a", np.zeros((1, 1, 4), dtype=np.uint8))
        cache.put("b", np.zeros((1, 1, 4), dtype=np.uint8))
        cache.invalidate_all()
        assert len(cache) == 0
        assert cache.get("a") is None
