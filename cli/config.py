from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from settings import get_settings

TICK_INTERVAL_SECONDS = 1.0


@dataclass(frozen=True)
class RunConfig:
    log_path: str
    seed: Optional[int] = None
    max_ticks: Optional[int] = None
    tick_interval: float = TICK_INTERVAL_SECONDS


def load_config(
    log_path: Optional[str] = None,
    seed: Optional[int] = None,
    max_ticks: Optional[int] = None,
) -> RunConfig:
    settings = get_settings()
    if max_ticks is not None and max_ticks <= 0:
        max_ticks = None
    return RunConfig(
        log_path=log_path or settings.log_path,
        seed=seed if seed is not None else settings.seed,
        max_ticks=max_ticks,
    )
