"""Cancellable periodic task on a daemon thread.

Runs a callback every ``interval`` seconds until cancelled. Cancellation is
a one-way transition: the callback runs exactly once more as the terminal
cleanup, then the thread exits. Cancelling twice, or from several threads,
is safe.

Cancellation sources:
    - ``PeriodicTask.cancel()``
    - setting the ``cancel_event`` supplied by the owner (e.g. from a
      SIGTERM handler)

Usage:
    task = PeriodicTask(interval=60.0, callback=cache.clear, name="janitor")
    task.start()
    ...
    task.cancel()  # one final cache.clear(), thread exits
"""

from __future__ import annotations

import threading
from collections.abc import Callable

from secretguard.domain.protocols import LoggerProtocol


class PeriodicTask:
    """Scheduled callback + cancellation token + single terminal run.

    Args:
        interval: Seconds between callback runs.
        callback: Zero-argument callable run on every tick and once on cancel.
        name: Thread name.
        cancel_event: Optional externally owned cancellation token.
        logger: Optional logger for callback failures.
    """

    def __init__(
        self,
        *,
        interval: float,
        callback: Callable[[], None],
        name: str = "periodic-task",
        cancel_event: threading.Event | None = None,
        logger: LoggerProtocol | None = None,
    ) -> None:
        if interval <= 0:
            raise ValueError("interval must be greater than zero")
        self._interval = interval
        self._callback = callback
        self._name = name
        self._cancel = cancel_event if cancel_event is not None else threading.Event()
        self._logger = logger
        self._lock = threading.Lock()
        self._thread: threading.Thread | None = None
        self._finished = threading.Event()

    @property
    def running(self) -> bool:
        """True while the worker thread is alive."""
        thread = self._thread
        return thread is not None and thread.is_alive()

    @property
    def cancelled(self) -> bool:
        return self._cancel.is_set()

    def start(self) -> bool:
        """Start the worker thread.

        Returns:
            True if a thread was started; False if already started or the
            task was cancelled before starting.
        """
        with self._lock:
            if self._thread is not None or self._cancel.is_set():
                return False
            self._thread = threading.Thread(
                target=self._run, name=self._name, daemon=True
            )
            self._thread.start()
            return True

    def cancel(self, timeout: float | None = None) -> None:
        """Request termination and wait for the terminal run.

        Args:
            timeout: Max seconds to wait for the worker to finish; None waits
                indefinitely. Never waits when called from the worker itself.
        """
        self._cancel.set()
        thread = self._thread
        if thread is not None and thread is not threading.current_thread():
            thread.join(timeout)

    def wait_finished(self, timeout: float | None = None) -> bool:
        """Block until the terminal run completed."""
        return self._finished.wait(timeout)

    def _run(self) -> None:
        try:
            while not self._cancel.wait(self._interval):
                self._run_callback()
            self._run_callback()
        finally:
            self._finished.set()

    def _run_callback(self) -> None:
        try:
            self._callback()
        except Exception as e:  # noqa: BLE001 - keep the schedule alive
            if self._logger is not None:
                self._logger.error("Periodic task callback failed", error=e, task=self._name)
