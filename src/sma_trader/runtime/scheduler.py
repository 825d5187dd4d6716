"""Periodic tick schedulers."""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING, Callable, Optional

if TYPE_CHECKING:
    from sma_trader.monitoring.audit import AuditLog

Callback = Callable[[], object]


class TickScheduler:
    def schedule(self, interval_seconds: float, callback: Callback) -> None:  # pragma: no cover - interface
        raise NotImplementedError

    def cancel(self) -> None:  # pragma: no cover - interface
        raise NotImplementedError

    @property
    def active(self) -> bool:  # pragma: no cover - interface
        raise NotImplementedError


class ThreadedScheduler(TickScheduler):
    """Runs the callback on a single worker thread at a fixed cadence.

    Invocations never overlap. After ``cancel`` returns no further
    invocation starts.
    """

    def __init__(self, audit_log: Optional[AuditLog] = None, name: str = "sma-ticker") -> None:
        self._audit_log = audit_log
        self._name = name
        self._thread: Optional[threading.Thread] = None
        self._stop_event = threading.Event()
        self._lock = threading.Lock()

    def _log(self, event: str, payload: dict) -> None:
        if self._audit_log is None:
            return
        self._audit_log.log(event, payload)

    @property
    def active(self) -> bool:
        return self._thread is not None and self._thread.is_alive() and not self._stop_event.is_set()

    def schedule(self, interval_seconds: float, callback: Callback) -> None:
        if interval_seconds <= 0:
            raise ValueError("Interval must be > 0")
        with self._lock:
            if self.active:
                return
            self._stop_event = threading.Event()
            self._thread = threading.Thread(
                target=self._run,
                args=(interval_seconds, callback, self._stop_event),
                name=self._name,
                daemon=True,
            )
            self._thread.start()

    def _run(self, interval: float, callback: Callback, stop_event: threading.Event) -> None:
        while not stop_event.wait(interval):
            try:
                callback()
            except Exception as exc:  # pragma: no cover - defensive
                self._log("scheduler_error", {"scheduler": self._name, "error": str(exc)})

    def cancel(self) -> None:
        with self._lock:
            thread = self._thread
            self._stop_event.set()
            self._thread = None
        if thread is not None and thread is not threading.current_thread():
            thread.join()


class ManualScheduler(TickScheduler):
    """Fires the armed callback only when told to; used for virtual time."""

    def __init__(self) -> None:
        self.interval_seconds: Optional[float] = None
        self.schedule_calls = 0
        self._callback: Optional[Callback] = None

    @property
    def active(self) -> bool:
        return self._callback is not None

    def schedule(self, interval_seconds: float, callback: Callback) -> None:
        self.schedule_calls += 1
        self.interval_seconds = interval_seconds
        self._callback = callback

    def cancel(self) -> None:
        self._callback = None

    def fire(self, times: int = 1) -> int:
        fired = 0
        for _ in range(times):
            if self._callback is None:
                break
            self._callback()
            fired += 1
        return fired
