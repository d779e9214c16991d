"""Simulated sensor sampling along a linear degradation curve."""

from __future__ import annotations

import random
from typing import Optional

from models.records import Reading
from services.classifier import classify

BASE_TEMPERATURE = 40.0
TEMPERATURE_SLOPE = 3.0
TEMPERATURE_NOISE = 2.0

BASE_VIBRATION = 10.0
VIBRATION_SLOPE = 1.5
VIBRATION_NOISE = 1.0


class SampleGenerator:
    """Produces one classified reading per time step."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._rng = rng if rng is not None else random.Random()

    def seed(self, value: Optional[int]) -> None:
        self._rng.seed(value)

    def generate(self, time_step: int) -> Reading:
        if time_step < 0:
            raise ValueError(f"time_step must be non-negative, got {time_step}.")

        # Temperature noise is drawn first so a seeded run is reproducible.
        temperature_noise = self._rng.random() * TEMPERATURE_NOISE
        vibration_noise = self._rng.random() * VIBRATION_NOISE

        temperature = BASE_TEMPERATURE + TEMPERATURE_SLOPE * time_step + temperature_noise
        vibration = BASE_VIBRATION + VIBRATION_SLOPE * time_step + vibration_noise
        return Reading(
            time_step=time_step,
            temperature=temperature,
            vibration=vibration,
            status=classify(temperature, vibration),
        )
