"""Rich command-line interface powered by Typer."""

from __future__ import annotations

import logging
import time
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.progress import BarColumn, Progress, TextColumn, TimeElapsedColumn
from rich.table import Table

from palette_recolor.config import EXECUTORS, RecolorConfig
from palette_recolor.errors import RecolorError
from palette_recolor.image_io import (
    load_rgba,
    make_comparison_grid,
    output_name,
    save_rgba,
)
from palette_recolor.orchestrator import JobContext, Recolorer
from palette_recolor.palette import ORIGINAL, get_palette, palette_names, prepare_palette
from palette_recolor.palette_data import PALETTES

app = typer.Typer(
    name="palette-recolor",
    help="Recolour images with the colours of an editor colourscheme.",
    add_completion=False,
    rich_markup_mode="rich",
)
console = Console()
logger = logging.getLogger("palette_recolor")


def _setup_logging(verbose: bool) -> None:
    """Route the package's loggers through Rich; repeated calls reuse the handler."""
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(console=console, show_path=False, markup=False)
        handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
        logger.addHandler(handler)
        logger.propagate = False


def _collect_images(cfg: RecolorConfig) -> list[Path]:
    """Non-hidden files in the input folder with a supported suffix, by name."""
    if not cfg.input_dir.is_dir():
        return []
    found = (
        p for p in cfg.input_dir.iterdir()
        if p.suffix.lower() in cfg.SUPPORTED_EXTENSIONS and not p.name.startswith(".")
    )
    return sorted((p for p in found if p.is_file()), key=lambda p: p.name.casefold())


def _make_config(workers: int | None, executor: str, **kwargs) -> RecolorConfig:
    try:
        return RecolorConfig(workers=workers, executor=executor, **kwargs)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc


def _recolor_file(
    recolorer: Recolorer,
    context: JobContext,
    image_path: Path,
    palette_keys: list[str],
    cfg: RecolorConfig,
) -> JobContext:
    """Run every palette against one loaded image, saving each result."""
    for key in palette_keys:
        t0 = time.perf_counter()
        with Progress(
            TextColumn("[cyan]{task.description}"),
            BarColumn(),
            TextColumn("{task.percentage:>3.0f}%"),
            TimeElapsedColumn(),
            console=console,
            transient=True,
        ) as progress:
            task = progress.add_task(key, total=100)
            context, result = recolorer.convert(
                context, key,
                on_progress=lambda pct, t=task: progress.update(t, completed=pct),
            )

        out_path = cfg.output_dir / output_name(image_path, key, cfg.output_format)
        save_rgba(result.image, out_path)

        if cfg.save_comparison and key != ORIGINAL:
            comp_path = out_path.with_name(f"{out_path.stem}_comparison.{cfg.output_format}")
            make_comparison_grid(
                context.source, result.image,
                prepare_palette(get_palette(key)), comp_path, palette_key=key,
            )

        source = "cached" if result.cache_hit else f"{time.perf_counter() - t0:.1f}s"
        console.print(f"  [green]✓[/green] {out_path.name}  [dim]{key} ({source})[/dim]")
    return context


# -- palettes command --------------------------------------------------

@app.command()
def palettes(
    search: str = typer.Argument("", help="Only show names containing this text"),
) -> None:
    """List the available palettes."""
    names = palette_names(search)
    if not names:
        console.print(f"[yellow]No palette matches '{search}'[/yellow]")
        raise typer.Exit(1)

    table = Table(title=f"{len(names)} palettes", show_lines=False)
    table.add_column("Name", style="cyan")
    table.add_column("Colours", justify="right")
    table.add_column("Swatch")
    for name in names:
        colors = PALETTES[name]
        swatch = "".join(f"[{c}]█[/]" for c in colors)
        table.add_row(name, str(len(colors)), swatch)
    console.print(table)


# -- convert command ---------------------------------------------------

_DEFAULTS = RecolorConfig()


@app.command()
def convert(
    image: Path = typer.Argument(..., exists=True, dir_okay=False, help="Image to recolour"),
    palette: list[str] = typer.Option(
        ..., "--palette", "-p", help="Palette name (repeatable; 'original' = unchanged)",
    ),
    output_dir: Path = typer.Option(_DEFAULTS.output_dir, "--output", "-o", help="Results folder"),
    workers: int | None = typer.Option(
        None, "--workers", "-w", help="Number of chunks (default: CPU count - 1)",
    ),
    executor: str = typer.Option(
        _DEFAULTS.executor, "--executor", help=f"One of: {', '.join(EXECUTORS)}",
    ),
    comparison: bool = typer.Option(
        _DEFAULTS.save_comparison, "--comparison/--no-comparison",
        help="Also save an Original | Palette | Recolored grid",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Recolour a single image with one or more palettes."""
    _setup_logging(verbose)
    cfg = _make_config(
        workers, executor, output_dir=output_dir, save_comparison=comparison,
    )
    output_dir.mkdir(parents=True, exist_ok=True)

    context = JobContext.empty().with_source(load_rgba(image), image.name)
    h, w = context.source.shape[:2]
    logger.info("Source: %s (%dx%d)", image.name, w, h)

    try:
        with Recolorer(cfg) as recolorer:
            _recolor_file(recolorer, context, image, palette, cfg)
    except RecolorError as exc:
        console.print(f"[red]✗ {escape(str(exc))}[/red]")
        raise typer.Exit(1) from exc


# -- batch command -----------------------------------------------------

@app.command()
def batch(
    palette: list[str] = typer.Option(..., "--palette", "-p", help="Palette name (repeatable)"),
    input_dir: Path = typer.Option(
        _DEFAULTS.input_dir, "--input", "-i", help="Folder with source images",
    ),
    output_dir: Path = typer.Option(_DEFAULTS.output_dir, "--output", "-o", help="Results folder"),
    workers: int | None = typer.Option(None, "--workers", "-w"),
    executor: str = typer.Option(_DEFAULTS.executor, "--executor"),
    comparison: bool = typer.Option(_DEFAULTS.save_comparison, "--comparison/--no-comparison"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Recolour every image in INPUT_DIR and write results to OUTPUT_DIR."""
    _setup_logging(verbose)
    cfg = _make_config(
        workers, executor,
        input_dir=input_dir, output_dir=output_dir, save_comparison=comparison,
    )

    images = _collect_images(cfg)
    if not images:
        console.print(f"\n[yellow]No images found in {input_dir}/[/yellow]")
        console.print("Place .jpg / .png / ... files there and re-run.\n")
        raise typer.Exit(0)
    output_dir.mkdir(parents=True, exist_ok=True)

    console.print(Panel.fit(
        f"[bold]PALETTE RECOLOR[/bold]\n"
        f"Palettes: {', '.join(palette)}\n"
        f"Workers: {cfg.resolved_workers()} ({cfg.executor})  |  Images: {len(images)}",
        border_style="cyan",
    ))

    context = JobContext.empty()
    try:
        with Recolorer(cfg) as recolorer:
            for idx, img_path in enumerate(images, 1):
                console.rule(f"[bold cyan][{idx}/{len(images)}] {img_path.name}[/bold cyan]")
                context = context.with_source(load_rgba(img_path), img_path.name)
                context = _recolor_file(recolorer, context, img_path, palette, cfg)
    except RecolorError as exc:
        console.print(f"[red]✗ {escape(str(exc))}[/red]")
        raise typer.Exit(1) from exc

    console.print(Panel.fit(
        f"[bold green]ALL DONE[/bold green] - results in [bold]{output_dir}/[/bold]",
        border_style="green",
    ))


if __name__ == "__main__":
    app()
