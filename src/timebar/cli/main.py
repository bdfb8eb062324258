"""Typer CLI application."""
from __future__ import annotations

import logging
from typing import Optional

import typer
from rich.logging import RichHandler

from timebar.content.loader import ConfigLoadError

app = typer.Typer(
    name="timebar",
    help="Render a seasons calendar into time bars",
    no_args_is_help=True,
)


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        handlers=[RichHandler(show_path=False)],
    )


def _build_app(config: Optional[str]):
    from timebar.app import TimeBarApp

    time_bar = TimeBarApp(config_path=config)
    try:
        time_bar.config
    except ConfigLoadError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=2)
    return time_bar


@app.command()
def preview(
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to a seasons bar TOML config"),
    ticks: int = typer.Option(0, "--ticks", "-t", help="World game time in ticks"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Render one bar for a simulated world."""
    _setup_logging(verbose)
    _build_app(config).preview(ticks)


@app.command()
def watch(
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to a seasons bar TOML config"),
    interval: float = typer.Option(1.0, "--interval", "-i", help="Seconds between ticks"),
    speed: int = typer.Option(100, "--speed", "-s", help="Game ticks the world advances per frame"),
    frames: Optional[int] = typer.Option(None, "--frames", "-f", help="Stop after this many frames"),
    reload: bool = typer.Option(False, "--reload", "-r", help="Re-read the config file when it changes"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Keep redrawing the bar while the simulated world runs."""
    _setup_logging(verbose)
    _build_app(config).watch(interval=interval, speed=speed, frames=frames, reload_on_change=reload)


@app.command()
def check(
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to a seasons bar TOML config"),
) -> None:
    """Validate every month section and time word."""
    _setup_logging(False)
    if _build_app(config).check():
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
