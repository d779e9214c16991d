from __future__ import annotations

import csv
import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import List, Optional

from models.records import HealthStatus, LogEntry, Reading
from settings import get_settings

logger = logging.getLogger(__name__)

HEADER = ("Timestamp", "Temperature", "Vibration", "Status")


class LogWriteError(OSError):
    """The reading log could not be opened or written."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Could not write reading log {str(path)!r}: {reason}")
        self.path = path
        self.reason = reason


class LogReadError(OSError):
    """The reading log could not be read back or holds a malformed row."""


def format_record(reading: Reading) -> list[str]:
    return [
        str(reading.time_step),
        f"{reading.temperature:.2f}",
        f"{reading.vibration:.2f}",
        str(int(reading.status)),
    ]


class ReadingLog:
    """Append-only CSV store, reopened for every write."""

    def __init__(self, path: Path) -> None:
        self.path = path

    def initialize(self) -> None:
        """Truncate the store and write the header line for a new session."""
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with self.path.open("w", encoding="utf-8", newline="") as handle:
                csv.writer(handle, lineterminator="\n").writerow(HEADER)
                self._sync(handle)
        except OSError as exc:
            raise LogWriteError(self.path, exc.strerror or str(exc)) from exc

    def append(self, reading: Reading) -> None:
        try:
            with self.path.open("a", encoding="utf-8", newline="") as handle:
                csv.writer(handle, lineterminator="\n").writerow(format_record(reading))
                self._sync(handle)
        except OSError as exc:
            raise LogWriteError(self.path, exc.strerror or str(exc)) from exc

        logger.debug(
            "Persisted reading",
            extra={"time_step": reading.time_step, "path": str(self.path)},
        )

    def read_entries(self) -> List[LogEntry]:
        """Parse every data row of the store, in file order."""
        try:
            with self.path.open("r", encoding="utf-8", newline="") as handle:
                rows = list(csv.reader(handle))
        except OSError as exc:
            raise LogReadError(
                f"Could not read reading log {str(self.path)!r}: {exc.strerror or exc}"
            ) from exc
        except (UnicodeDecodeError, csv.Error) as exc:
            raise LogReadError(f"Reading log {str(self.path)!r} is not a readable CSV: {exc}") from exc

        if not rows or tuple(rows[0]) != HEADER:
            raise LogReadError(f"Reading log {str(self.path)!r} is missing its header row.")

        entries: List[LogEntry] = []
        for line_number, row in enumerate(rows[1:], start=2):
            if len(row) != len(HEADER):
                raise LogReadError(
                    f"Line {line_number} has {len(row)} fields, expected {len(HEADER)}."
                )
            try:
                entries.append(
                    LogEntry(
                        time_step=int(row[0]),
                        temperature=float(row[1]),
                        vibration=float(row[2]),
                        status=HealthStatus(int(row[3])),
                    )
                )
            except ValueError as exc:
                raise LogReadError(f"Line {line_number} is malformed: {exc}") from exc
        return entries

    @staticmethod
    def _sync(handle) -> None:
        handle.flush()
        os.fsync(handle.fileno())


@lru_cache
def build_default_log(path: Optional[str] = None) -> ReadingLog:
    settings = get_settings()
    log_path = settings.log_path if path is None else path
    return ReadingLog(path=Path(log_path))
