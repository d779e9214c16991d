"""Unit tests for the two-point trend predictor."""

from __future__ import annotations

from models.records import Reading
from services.classifier import classify
from services.predictor import TrendPredictor, predict


def _reading(time_step: int, temperature: float, vibration: float = 10.0) -> Reading:
    """Helper to build a correctly classified reading."""

    return Reading(
        time_step=time_step,
        temperature=temperature,
        vibration=vibration,
        status=classify(temperature, vibration),
    )


def test_falling_temperature_is_stable() -> None:
    forecast = predict(_reading(2, 95.0), _reading(1, 97.0))

    assert forecast.stable is True
    assert forecast.urgent is False
    assert forecast.eta is None


def test_flat_temperature_is_stable_even_when_hot() -> None:
    forecast = predict(_reading(2, 99.5), _reading(1, 99.5))

    assert forecast.stable is True


def test_fast_rise_near_limit_is_urgent() -> None:
    forecast = predict(_reading(2, 94.0), _reading(1, 88.0))

    assert forecast.stable is False
    assert forecast.rate == 6.0
    assert forecast.eta == 1.0
    assert forecast.urgent is True


def test_slow_rise_far_from_limit_is_not_urgent() -> None:
    forecast = predict(_reading(2, 10.0), _reading(1, 9.5))

    assert forecast.stable is False
    assert forecast.eta == 180.0
    assert forecast.urgent is False


def test_eta_is_clamped_at_zero_past_the_limit() -> None:
    forecast = predict(_reading(2, 104.0), _reading(1, 101.0))

    assert forecast.eta == 0.0
    assert forecast.urgent is True


def test_uses_only_the_two_readings_given() -> None:
    predictor = TrendPredictor()

    forecast = predictor.predict(_reading(5, 70.0), _reading(4, 60.0))

    assert forecast.rate == 10.0
    assert forecast.eta == 3.0
