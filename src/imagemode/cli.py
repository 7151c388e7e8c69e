"""Image content-mode CLI application.

This module provides a command-line interface for computing watermark
placement rectangles and reshaping images to a canvas aspect ratio.
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import Final, Optional

import typer
from PIL import Image

from imagemode.common.enums import ContentMode
from imagemode.errors import TransformError
from imagemode.geometry import Size
from imagemode.layout import rect_for_content
from imagemode.raster.pillow import PillowBackend
from imagemode.reshape import image_for_content
from imagemode.settings import FitSettings

# ── CLI setup ────────────────────────────────────────────────────────────────
app = typer.Typer(help="Image content-mode CLI", add_completion=False)
config_app = typer.Typer(help="Config helpers")
app.add_typer(config_app, name="config")

logger: Final = logging.getLogger(__name__)  # Will be "imagemode.cli"

MODE_HELP = "Content mode: " + ", ".join(mode.cli_name for mode in ContentMode)

IMAGE_SIZE_OPTION = typer.Option(..., "--image", "-i", help="Content image size, e.g. 100x100")
CANVAS_OPTION = typer.Option(..., "--canvas", "-c", help="Canvas size, e.g. 200x100")
MODE_OPTION = typer.Option(None, "--mode", "-m", help=MODE_HELP)
RATIO_OPTION = typer.Option(None, "--ratio", "-r", help="Canvas aspect ratio, e.g. 1x1")
CONFIG_OPTION = typer.Option(None, "--config", exists=True, dir_okay=False)
DEBUG_OPTION = typer.Option(False, "--debug", help="Enable debug logging")
INPUT_ARGUMENT = typer.Argument(..., exists=True, dir_okay=False, help="Source image")
OUTPUT_ARGUMENT = typer.Argument(..., help="Output image (PNG keeps transparency)")


def _configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )


def _parse_size(text: str) -> Size:
    try:
        return Size.from_string(text)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc


def _parse_mode(text: str) -> ContentMode:
    try:
        return ContentMode.parse(text)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc


def _load_settings(config: Optional[Path]) -> FitSettings:
    """Load settings from ``config``, else from the env var or default paths.

    Built-in defaults apply only when no config file is found at all.
    """
    try:
        return FitSettings.load(config)
    except FileNotFoundError as exc:
        if config is not None or os.environ.get("IMAGEMODE_CONFIG"):
            typer.secho(str(exc), fg=typer.colors.RED, err=True)
            raise typer.Exit(code=1) from exc
        logger.debug("No config file found, using built-in defaults")
        return FitSettings()
    except RuntimeError as exc:
        typer.secho(str(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc


@app.command()
def rect(
    image: str = IMAGE_SIZE_OPTION,
    canvas: str = CANVAS_OPTION,
    mode: Optional[str] = MODE_OPTION,
) -> None:
    """Print where an image of the given size lands in the canvas."""
    content_mode = _parse_mode(mode) if mode else ContentMode.SCALE_ASPECT_FIT
    result = rect_for_content(_parse_size(image), _parse_size(canvas), content_mode)
    typer.echo(
        f"origin=({result.x:g}, {result.y:g}) size=({result.width:g}, {result.height:g})"
    )


@app.command()
def reshape(
    source: Path = INPUT_ARGUMENT,
    output: Path = OUTPUT_ARGUMENT,
    ratio: Optional[str] = RATIO_OPTION,
    mode: Optional[str] = MODE_OPTION,
    config: Optional[Path] = CONFIG_OPTION,
    debug: bool = DEBUG_OPTION,
) -> None:
    """Reshape an image file to a canvas aspect ratio."""
    _configure_logging(debug)

    settings = _load_settings(config)
    canvas_ratio = _parse_size(ratio) if ratio else settings.canvas_size
    content_mode = _parse_mode(mode) if mode else settings.mode

    try:
        with Image.open(source) as img:
            img.load()
            result = image_for_content(
                img,
                canvas_ratio,
                content_mode,
                backend=PillowBackend(settings.resample),
                rel_tol=settings.ratio_tolerance,
            )
            output.parent.mkdir(parents=True, exist_ok=True)
            result.save(output)
    except TransformError as exc:
        typer.secho(f"Transform failed: {exc}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc
    except OSError as exc:
        # Unreadable source, or an output format that cannot hold the result
        typer.secho(f"Image I/O failed: {exc}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc

    logger.info("Wrote %s (%dx%d)", output, result.width, result.height)
    typer.echo(f"{output} {result.width}x{result.height}")


@app.command()
def modes() -> None:
    """List the supported content modes."""
    for mode in ContentMode:
        typer.echo(f"{mode.cli_name}: {mode.description}")


# ───────────────────────── config sub-commands ───────────────────────────────
@config_app.command("validate")
def validate_config(file: Path):
    """Validate a YAML config file against the schema."""
    try:
        FitSettings.load(file)
        typer.echo("✅ Config valid")
    except RuntimeError as exc:
        typer.secho(str(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc


# ───────────────────────── module entrypoint ────────────────────────────────
if __name__ == "__main__":
    try:
        app()
    except KeyboardInterrupt:
        sys.exit(0)
