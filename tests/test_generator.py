from __future__ import annotations

import random

import pytest

from models.records import HealthStatus
from services.classifier import classify
from services.generator import SampleGenerator


class ZeroRandom(random.Random):
    def random(self) -> float:
        return 0.0


def test_noise_free_readings_follow_baseline() -> None:
    generator = SampleGenerator(rng=ZeroRandom())

    for time_step in range(1, 40):
        reading = generator.generate(time_step)
        assert reading.time_step == time_step
        assert reading.temperature == 40.0 + 3.0 * time_step
        assert reading.vibration == 10.0 + 1.5 * time_step


def test_noise_stays_within_bounds() -> None:
    generator = SampleGenerator(rng=random.Random(7))

    for time_step in range(1, 200):
        reading = generator.generate(time_step)
        assert 0.0 <= reading.temperature - (40.0 + 3.0 * time_step) < 2.0
        assert 0.0 <= reading.vibration - (10.0 + 1.5 * time_step) < 1.0


def test_status_is_derived_from_fields() -> None:
    generator = SampleGenerator(rng=random.Random(3))

    for time_step in range(1, 30):
        reading = generator.generate(time_step)
        assert reading.status is classify(reading.temperature, reading.vibration)


def test_seed_makes_sequence_reproducible() -> None:
    first = SampleGenerator()
    second = SampleGenerator()
    first.seed(42)
    second.seed(42)

    assert [first.generate(t) for t in range(1, 10)] == [second.generate(t) for t in range(1, 10)]


def test_time_step_zero_is_accepted() -> None:
    reading = SampleGenerator(rng=ZeroRandom()).generate(0)

    assert reading.temperature == 40.0
    assert reading.status is HealthStatus.OK


def test_negative_time_step_is_rejected() -> None:
    with pytest.raises(ValueError):
        SampleGenerator().generate(-1)
