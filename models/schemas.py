"""Pydantic schemas for what the monitoring cycle reports to collaborators."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from models.records import Forecast, HealthStatus, Reading


class CyclePhase(str, Enum):
    """Lifecycle states of the monitoring cycle."""

    running = "running"
    halted = "halted"


class ReadingReport(BaseModel):
    """Serializable view of a single reading."""

    time_step: int = Field(..., ge=1)
    temperature: float
    vibration: float
    status: HealthStatus

    @classmethod
    def from_reading(cls, reading: Reading) -> "ReadingReport":
        return cls(
            time_step=reading.time_step,
            temperature=reading.temperature,
            vibration=reading.vibration,
            status=reading.status,
        )


class ForecastReport(BaseModel):
    """Serializable view of a trend forecast."""

    stable: bool
    urgent: bool = False
    eta: Optional[float] = Field(
        default=None, description="Ticks until the critical temperature is crossed."
    )
    rate: Optional[float] = Field(
        default=None, description="Temperature change per tick."
    )

    @classmethod
    def from_forecast(cls, forecast: Forecast) -> "ForecastReport":
        return cls(
            stable=forecast.stable,
            urgent=forecast.urgent,
            eta=forecast.eta,
            rate=forecast.rate,
        )


class TickReport(BaseModel):
    """Everything one tick emits: the reading, its forecast and the resulting phase."""

    reading: ReadingReport
    forecast: Optional[ForecastReport] = Field(
        default=None, description="Absent on the first tick (insufficient data)."
    )
    persisted: bool = True
    phase: CyclePhase


class SessionSummary(BaseModel):
    """End-of-session account of a monitoring run."""

    ticks: int = Field(..., ge=0)
    records_written: int = Field(..., ge=0)
    failed_writes: int = Field(..., ge=0)
    phase: CyclePhase
    halt_reason: Optional[str] = None
    last_reading: Optional[ReadingReport] = None
    log_path: str
