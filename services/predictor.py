"""Time-to-failure estimation from the latest temperature trend."""

from __future__ import annotations

from models.records import CRITICAL_TEMP, Forecast, Reading

URGENT_STEPS = 10.0


def predict(current: Reading, previous: Reading) -> Forecast:
    """Extrapolate the slope between two consecutive readings.

    A flat or falling temperature is reported as stable whatever its level.
    Otherwise the forecast carries the number of ticks until
    ``CRITICAL_TEMP`` would be crossed at the current rate, clamped at zero.
    """
    rate = current.temperature - previous.temperature
    if rate <= 0:
        return Forecast(stable=True)

    steps_to_failure = max(0.0, (CRITICAL_TEMP - current.temperature) / rate)
    return Forecast(
        stable=False,
        urgent=steps_to_failure < URGENT_STEPS,
        eta=steps_to_failure,
        rate=rate,
    )


class TrendPredictor:
    """Pure prediction component that can be swapped out in tests."""

    def predict(self, current: Reading, previous: Reading) -> Forecast:
        return predict(current, previous)
