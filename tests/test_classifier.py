"""Unit tests for health classification."""

from __future__ import annotations

import pytest

from models.records import HealthStatus, InvariantViolation, Reading
from services.classifier import classify, ensure_consistent


@pytest.mark.parametrize(
    ("temperature", "vibration"),
    [
        (100.01, 0.0),
        (150.0, 10.0),
        (20.0, 50.01),
        (-40.0, 80.0),
        (120.0, 75.0),
    ],
)
def test_classify_critical_when_either_limit_exceeded(temperature: float, vibration: float) -> None:
    assert classify(temperature, vibration) is HealthStatus.CRITICAL


@pytest.mark.parametrize(
    ("temperature", "vibration"),
    [
        (80.01, 0.0),
        (90.0, 50.0),
        (100.0, 49.9),
    ],
)
def test_classify_warning_for_hot_but_not_critical(temperature: float, vibration: float) -> None:
    assert classify(temperature, vibration) is HealthStatus.WARNING


@pytest.mark.parametrize(
    ("temperature", "vibration"),
    [
        (80.0, 0.0),
        (40.0, 10.0),
        (-10.0, 50.0),
    ],
)
def test_classify_ok_below_thresholds(temperature: float, vibration: float) -> None:
    assert classify(temperature, vibration) is HealthStatus.OK


def test_high_vibration_alone_never_warns() -> None:
    # Vibration is only checked against the critical limit.
    assert classify(50.0, 49.99) is HealthStatus.OK


def test_ensure_consistent_accepts_matching_status() -> None:
    reading = Reading(time_step=1, temperature=85.0, vibration=12.0, status=HealthStatus.WARNING)

    assert ensure_consistent(reading) is reading


def test_ensure_consistent_rejects_mismatched_status() -> None:
    reading = Reading(time_step=3, temperature=120.0, vibration=12.0, status=HealthStatus.OK)

    with pytest.raises(InvariantViolation) as excinfo:
        ensure_consistent(reading)

    assert "time step 3" in str(excinfo.value)
