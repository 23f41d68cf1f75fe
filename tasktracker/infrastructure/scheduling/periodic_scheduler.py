"""Unique-name periodic jobs driven by Qt timers."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from PyQt6.QtCore import QObject, QTimer, pyqtSignal

logger = logging.getLogger(__name__)

MIN_PERIODIC_INTERVAL_MINUTES = 15.0


class ExistingWorkPolicy(str, Enum):
    KEEP = "keep"
    REPLACE = "replace"


@dataclass(slots=True)
class PeriodicWork:
    name: str
    interval_minutes: float
    job: Callable[[], object]
    timer: QTimer
    run_count: int = 0


class PeriodicWorkScheduler(QObject):
    work_ran = pyqtSignal(str, object)  # name, job result (None on failure)

    def __init__(self, min_interval_minutes: float = MIN_PERIODIC_INTERVAL_MINUTES, parent: QObject | None = None):
        super().__init__(parent)
        self._min_interval_minutes = min_interval_minutes
        self._works: dict[str, PeriodicWork] = {}

    def enqueue_unique_periodic_work(
        self,
        name: str,
        interval_minutes: float,
        job: Callable[[], object],
        policy: ExistingWorkPolicy = ExistingWorkPolicy.REPLACE,
    ) -> bool:
        if name in self._works:
            if policy == ExistingWorkPolicy.KEEP:
                return False
            self.cancel_unique_work(name)

        if interval_minutes < self._min_interval_minutes:
            logger.warning(
                "Interval of %s min for %s is below the minimum; using %s min.",
                interval_minutes,
                name,
                self._min_interval_minutes,
            )
            interval_minutes = self._min_interval_minutes

        timer = QTimer(self)
        timer.setInterval(max(1, int(interval_minutes * 60_000)))
        timer.timeout.connect(lambda: self._run(name))
        self._works[name] = PeriodicWork(name=name, interval_minutes=interval_minutes, job=job, timer=timer)
        timer.start()
        logger.info("Scheduled periodic work %s every %s min.", name, interval_minutes)
        return True

    def cancel_unique_work(self, name: str) -> bool:
        work = self._works.pop(name, None)
        if work is None:
            return False
        work.timer.stop()
        work.timer.deleteLater()
        logger.info("Cancelled periodic work %s.", name)
        return True

    def cancel_all(self) -> None:
        for name in list(self._works):
            self.cancel_unique_work(name)

    def is_scheduled(self, name: str) -> bool:
        return name in self._works

    def interval_minutes(self, name: str) -> float | None:
        work = self._works.get(name)
        return work.interval_minutes if work else None

    def run_count(self, name: str) -> int:
        work = self._works.get(name)
        return work.run_count if work else 0

    def run_now(self, name: str) -> object:
        if name not in self._works:
            raise KeyError(name)
        return self._run(name)

    def _run(self, name: str) -> object:
        work = self._works.get(name)
        if work is None:
            return None

        work.run_count += 1
        try:
            result = work.job()
        except Exception:
            logger.exception("Periodic work %s raised.", name)
            result = None
        self.work_ran.emit(name, result)
        return result
