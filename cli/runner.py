"""Process lifecycle around the monitoring cycle: boot, pacing, shutdown."""

from __future__ import annotations

import logging
import time
from typing import Callable, Optional

from models.schemas import SessionSummary
from services.monitor import MonitorService

logger = logging.getLogger(__name__)


def run_session(
    monitor: MonitorService,
    seed: Optional[int],
    interval: float,
    max_ticks: Optional[int] = None,
    sleep: Optional[Callable[[float], None]] = None,
) -> SessionSummary:
    """Tick ``monitor`` until it halts, pausing ``interval`` seconds between ticks.

    ``max_ticks`` and Ctrl-C stop the session through ``MonitorService.halt``.
    The summary is handed to the monitor's renderer before it is returned.
    """
    pause = sleep if sleep is not None else time.sleep
    monitor.initialize(seed)

    try:
        while not monitor.is_halted():
            monitor.tick()
            if monitor.is_halted():
                break
            if max_ticks is not None and monitor.state.time_step >= max_ticks:
                monitor.halt("max_ticks")
                break
            pause(interval)
    except KeyboardInterrupt:
        monitor.halt("interrupted")

    summary = monitor.summary()
    logger.info(
        "Monitoring session finished",
        extra={
            "reason": summary.halt_reason,
            "records_written": summary.records_written,
            "failed_writes": summary.failed_writes,
        },
    )
    monitor.renderer.summary(summary)
    return summary
