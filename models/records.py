"""Domain models shared across services."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional

CRITICAL_TEMP = 100.0
CRITICAL_VIBRATION = 50.0
WARNING_TEMP = CRITICAL_TEMP * 0.8


class HealthStatus(IntEnum):
    """Machine health classes, valued by their on-disk status code."""

    OK = 0
    WARNING = 1
    CRITICAL = 2


class InvariantViolation(AssertionError):
    """A reading's status disagrees with the classification of its own fields."""


@dataclass(frozen=True, slots=True)
class Reading:
    """One sampled observation of the machine plus its derived health status."""

    time_step: int
    temperature: float
    vibration: float
    status: HealthStatus


@dataclass(frozen=True, slots=True)
class Forecast:
    """Two-point trend extrapolation towards ``CRITICAL_TEMP``."""

    stable: bool
    urgent: bool = False
    eta: Optional[float] = None
    rate: Optional[float] = None


@dataclass(frozen=True, slots=True)
class LogEntry:
    """A data row read back from the reading log."""

    time_step: int
    temperature: float
    vibration: float
    status: HealthStatus
