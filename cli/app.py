from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from cli.config import load_config
from cli.render import ConsoleRenderer, JsonRenderer, render_banner, render_log_entries
from cli.runner import run_session
from logging_config import configure_logging
from services.monitor import build_default_monitor
from storage.reading_log import LogReadError, LogWriteError, ReadingLog


app = typer.Typer(
    help="Simulated machine health monitoring with trend-based failure prediction.",
    context_settings={"help_option_names": ["-h", "--help"]},
)


@app.callback()
def main() -> None:
    """Entry point for the CLI."""
    configure_logging()


@app.command("run")
def run_command(
    seed: Optional[int] = typer.Option(
        None,
        "--seed",
        help="Seed for sensor noise (defaults to MONITOR_SEED env or the clock).",
    ),
    log_path: Optional[str] = typer.Option(
        None,
        "--log-path",
        "-o",
        help="CSV reading log (defaults to MONITOR_LOG_PATH env or machine_logs.csv).",
    ),
    max_ticks: Optional[int] = typer.Option(
        None,
        "--max-ticks",
        help="Stop after this many ticks even if no critical condition occurs.",
    ),
    as_json: bool = typer.Option(
        False,
        "--json/--no-json",
        help="Emit one JSON document per tick instead of the dashboard.",
    ),
    clear: bool = typer.Option(
        True,
        "--clear/--no-clear",
        help="Clear the terminal before each dashboard refresh.",
    ),
) -> None:
    """Run a monitoring session until the machine reaches a critical state."""
    config = load_config(log_path=log_path, seed=seed, max_ticks=max_ticks)
    renderer = JsonRenderer() if as_json else ConsoleRenderer(clear=clear)
    monitor = build_default_monitor(config.log_path, renderer=renderer)

    if not as_json:
        render_banner()
    try:
        run_session(
            monitor,
            seed=config.seed,
            interval=config.tick_interval,
            max_ticks=config.max_ticks,
        )
    except LogWriteError as exc:
        typer.secho(f"Could not start session: {exc}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)


@app.command("show")
def show_command(
    path: Optional[Path] = typer.Argument(
        None, dir_okay=False, help="Reading log to display (defaults to MONITOR_LOG_PATH)."
    ),
) -> None:
    """Display the readings recorded by the last session."""
    log_path = path if path is not None else Path(load_config().log_path)
    try:
        entries = ReadingLog(log_path).read_entries()
    except LogReadError as exc:
        typer.secho(str(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    render_log_entries(entries, str(log_path))
