from __future__ import annotations

import json
from typing import Any, Dict, Iterable, Optional

import typer

from models.records import Forecast, HealthStatus, LogEntry, Reading
from models.schemas import ForecastReport, ReadingReport, SessionSummary

RULE = "=" * 52
THIN_RULE = "-" * 52

_STATUS_LABELS = {
    HealthStatus.OK: ("NORMAL [ OK ]", typer.colors.GREEN),
    HealthStatus.WARNING: ("WARNING [ ! ]", typer.colors.YELLOW),
    HealthStatus.CRITICAL: ("CRITICAL [ X ]", typer.colors.RED),
}


def echo_heading(text: str) -> None:
    typer.secho(text, bold=True)


def echo_key_values(pairs: Iterable[tuple[str, Any]]) -> None:
    for key, value in pairs:
        typer.echo(f"{key}: {value}")


def temperature_bar(temperature: float) -> str:
    if temperature < 60:
        return "[====      ]"
    if temperature < 90:
        return "[========  ]"
    return "[==========] !!!"


def render_banner() -> None:
    typer.echo("Booting machine health monitor...")
    typer.echo("Connecting to sensors...")


def render_dashboard(reading: Reading) -> None:
    typer.echo(RULE)
    echo_heading("  MACHINE HEALTH MONITOR")
    typer.echo(RULE)
    typer.echo(f"  Time step     : {reading.time_step}")
    typer.echo(
        f"  [+] Temperature : {reading.temperature:.2f} C  {temperature_bar(reading.temperature)}"
    )
    typer.echo(f"  [+] Vibration   : {reading.vibration:.2f}")
    typer.echo(THIN_RULE)
    label, colour = _STATUS_LABELS[reading.status]
    typer.echo("  SYSTEM STATUS   : ", nl=False)
    typer.secho(label, fg=colour)
    typer.echo(RULE)


def render_forecast(forecast: Optional[Forecast]) -> None:
    typer.echo()
    echo_heading("   [ TREND ANALYTICS ]")
    if forecast is None:
        typer.echo("   >> Insufficient data: waiting for a second reading.")
        return
    if forecast.stable:
        typer.echo("   >> Status: Stable. No immediate risk detected.")
        return
    typer.echo(f"   >> Trend detected: temperature rising by {forecast.rate:.2f} C/tick")
    if forecast.urgent:
        typer.secho(
            f"   >> ALERT: PREDICTED FAILURE IN {forecast.eta:.0f} TICKS!",
            fg=typer.colors.RED,
            bold=True,
        )
        typer.secho("   >> ACTION: RECOMMENDING EMERGENCY SHUTDOWN.", fg=typer.colors.RED)
    else:
        typer.echo(f"   >> PREDICTION: Safe operation for next {forecast.eta:.0f} ticks.")


def render_summary(summary: SessionSummary) -> None:
    typer.echo()
    echo_heading("Session Summary")
    echo_key_values(
        [
            ("ticks", summary.ticks),
            ("records_written", summary.records_written),
            ("failed_writes", summary.failed_writes),
            ("phase", summary.phase.value),
            ("halt_reason", summary.halt_reason or "-"),
        ]
    )
    typer.echo(f"Session data saved to '{summary.log_path}'.")


def render_log_entries(entries: Iterable[LogEntry], path: str) -> None:
    echo_heading(f"Reading log {path}")
    counts: Dict[HealthStatus, int] = {status: 0 for status in HealthStatus}
    rows = list(entries)
    if not rows:
        typer.echo("No readings recorded.")
    for entry in rows:
        counts[entry.status] += 1
        label, colour = _STATUS_LABELS[entry.status]
        typer.echo(
            f"  t={entry.time_step:>4}  temperature={entry.temperature:7.2f}  "
            f"vibration={entry.vibration:6.2f}  ",
            nl=False,
        )
        typer.secho(label, fg=colour)
    typer.echo()
    echo_key_values((status.name, count) for status, count in counts.items())


class ConsoleRenderer:
    """Dashboard-style terminal output for an interactive session."""

    def __init__(self, clear: bool = True) -> None:
        self.clear = clear

    def render(self, reading: Reading, forecast: Optional[Forecast]) -> None:
        if self.clear:
            typer.clear()
        render_dashboard(reading)
        render_forecast(forecast)

    def alert(self, reading: Reading) -> None:
        typer.echo()
        typer.secho("*** CRITICAL FAILURE DETECTED ***", fg=typer.colors.RED, bold=True)
        typer.secho("*** SYSTEM HALTED TO PREVENT DAMAGE ***", fg=typer.colors.RED, bold=True)

    def summary(self, summary: SessionSummary) -> None:
        render_summary(summary)


class JsonRenderer:
    """Emit one JSON document per tick, suitable for piping."""

    def render(self, reading: Reading, forecast: Optional[Forecast]) -> None:
        payload = {
            "reading": ReadingReport.from_reading(reading).model_dump(mode="json"),
            "forecast": (
                ForecastReport.from_forecast(forecast).model_dump(mode="json")
                if forecast is not None
                else None
            ),
        }
        typer.echo(json.dumps(payload, sort_keys=True))

    def alert(self, reading: Reading) -> None:
        return None

    def summary(self, summary: SessionSummary) -> None:
        typer.echo(summary.model_dump_json())
