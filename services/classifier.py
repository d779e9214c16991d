"""Threshold classification of machine health."""

from __future__ import annotations

from models.records import (
    CRITICAL_TEMP,
    CRITICAL_VIBRATION,
    WARNING_TEMP,
    HealthStatus,
    InvariantViolation,
    Reading,
)


def classify(temperature: float, vibration: float) -> HealthStatus:
    """Map a temperature/vibration pair to a health status.

    Either value above its critical limit is CRITICAL. Only temperature can
    raise a WARNING; vibration below its limit never does.
    """
    if temperature > CRITICAL_TEMP or vibration > CRITICAL_VIBRATION:
        return HealthStatus.CRITICAL
    if temperature > WARNING_TEMP:
        return HealthStatus.WARNING
    return HealthStatus.OK


def ensure_consistent(reading: Reading) -> Reading:
    expected = classify(reading.temperature, reading.vibration)
    if reading.status is not expected:
        raise InvariantViolation(
            f"Reading at time step {reading.time_step} has status "
            f"{reading.status.name} but its fields classify as {expected.name}."
        )
    return reading
