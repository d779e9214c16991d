"""Monitoring cycle orchestration: sample, classify, persist, predict, decide."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Optional, Protocol

from models.records import Forecast, HealthStatus, Reading
from models.schemas import (
    CyclePhase,
    ForecastReport,
    ReadingReport,
    SessionSummary,
    TickReport,
)
from services.classifier import ensure_consistent
from services.generator import SampleGenerator
from services.predictor import TrendPredictor
from storage.reading_log import LogWriteError, ReadingLog, build_default_log

logger = logging.getLogger(__name__)


class Renderer(Protocol):
    """Presentation collaborator notified by the monitoring cycle."""

    def render(self, reading: Reading, forecast: Optional[Forecast]) -> None:
        ...

    def alert(self, reading: Reading) -> None:
        ...

    def summary(self, summary: SessionSummary) -> None:
        ...


class NullRenderer:
    """Renderer that discards everything."""

    def render(self, reading: Reading, forecast: Optional[Forecast]) -> None:
        return None

    def alert(self, reading: Reading) -> None:
        return None

    def summary(self, summary: SessionSummary) -> None:
        return None


@dataclass(frozen=True)
class MonitorState:
    phase: CyclePhase = CyclePhase.running
    time_step: int = 0
    previous: Optional[Reading] = None
    halt_reason: Optional[str] = None


def next_state(state: MonitorState, current: Reading) -> MonitorState:
    """Decide the state that follows a tick which produced ``current``.

    A CRITICAL reading halts the cycle; anything else keeps it running with
    ``current`` retained as the previous reading.
    """
    if state.phase is CyclePhase.halted:
        raise RuntimeError("Cannot advance a halted monitoring cycle.")
    if current.status is HealthStatus.CRITICAL:
        return MonitorState(
            phase=CyclePhase.halted,
            time_step=current.time_step,
            previous=None,
            halt_reason="critical",
        )
    return MonitorState(
        phase=CyclePhase.running,
        time_step=current.time_step,
        previous=current,
    )


class MonitorService:
    """Runs the monitoring cycle one tick at a time."""

    def __init__(
        self,
        generator: SampleGenerator,
        log: ReadingLog,
        predictor: TrendPredictor,
        renderer: Optional[Renderer] = None,
    ) -> None:
        self.generator = generator
        self.log = log
        self.predictor = predictor
        self.renderer: Renderer = renderer if renderer is not None else NullRenderer()
        self._state = MonitorState()
        self._initialized = False
        self._records_written = 0
        self._failed_writes = 0
        self._last_reading: Optional[Reading] = None

    @property
    def state(self) -> MonitorState:
        return self._state

    def initialize(self, seed: Optional[int] = None) -> None:
        """Reset the cycle and start a new session in the reading log."""
        self.generator.seed(seed)
        self.log.initialize()
        self._state = MonitorState()
        self._records_written = 0
        self._failed_writes = 0
        self._last_reading = None
        self._initialized = True
        logger.info("Monitoring session started", extra={"path": str(self.log.path)})

    def is_halted(self) -> bool:
        return self._state.phase is CyclePhase.halted

    def tick(self) -> TickReport:
        if not self._initialized:
            raise RuntimeError("Monitoring cycle has not been initialized.")
        if self.is_halted():
            raise RuntimeError("Monitoring cycle has halted.")

        state = self._state
        time_step = state.time_step + 1
        current = ensure_consistent(self.generator.generate(time_step))
        self._last_reading = current

        persisted = True
        try:
            self.log.append(current)
        except LogWriteError as exc:
            persisted = False
            self._failed_writes += 1
            logger.warning(
                "Reading not persisted; continuing to monitor",
                extra={"time_step": time_step, "path": str(exc.path), "reason": exc.reason},
            )
        else:
            self._records_written += 1

        forecast: Optional[Forecast] = None
        if state.previous is not None:
            forecast = self.predictor.predict(current, state.previous)
            if forecast.urgent:
                logger.warning(
                    "Predicted failure imminent",
                    extra={"time_step": time_step, "eta": round(forecast.eta or 0.0, 2)},
                )

        self.renderer.render(current, forecast)

        self._state = next_state(state, current)
        if self.is_halted():
            logger.error(
                "Critical condition detected; monitoring halted",
                extra={
                    "time_step": time_step,
                    "status": current.status.name,
                    "temperature": f"{current.temperature:.2f}",
                    "vibration": f"{current.vibration:.2f}",
                },
            )
            self.renderer.alert(current)

        return TickReport(
            reading=ReadingReport.from_reading(current),
            forecast=ForecastReport.from_forecast(forecast) if forecast is not None else None,
            persisted=persisted,
            phase=self._state.phase,
        )

    def halt(self, reason: str) -> None:
        """Stop the cycle from outside, e.g. a tick limit or an interrupt."""
        if self.is_halted():
            return
        self._state = replace(
            self._state, phase=CyclePhase.halted, previous=None, halt_reason=reason
        )
        logger.info("Monitoring halted", extra={"reason": reason})

    def summary(self) -> SessionSummary:
        last = self._last_reading
        return SessionSummary(
            ticks=self._state.time_step,
            records_written=self._records_written,
            failed_writes=self._failed_writes,
            phase=self._state.phase,
            halt_reason=self._state.halt_reason,
            last_reading=ReadingReport.from_reading(last) if last is not None else None,
            log_path=str(self.log.path),
        )


def build_default_monitor(
    log_path: Optional[str] = None,
    renderer: Optional[Renderer] = None,
) -> MonitorService:
    """Wire a fresh monitor, with its own renderer, to the default store."""
    return MonitorService(
        generator=SampleGenerator(),
        log=build_default_log(log_path),
        predictor=TrendPredictor(),
        renderer=renderer,
    )
