"""In-memory cache of secret stage snapshots plus a rejection blacklist.

Holds the CURRENT, PREVIOUS and PENDING snapshots of one secret and the set
of presented values already confirmed invalid. A janitor (PeriodicTask)
clears everything on a fixed interval, which also bounds how long a value
rejected before a rotation stays rejected.

Thread-safety:
    One lock guards the three slots and the blacklist together. Readers
    never observe a mix of two set() calls, and a clear is seen either
    fully or not at all. No I/O happens under the lock.

Usage:
    cache = SecretCache(clear_interval=1200.0, logger=logger)
    cache.start(on_cleanup=lambda: logger.info("Secret cache cleared"))

    current, previous, pending, found = cache.get()
    cache.set(current, previous, pending)

    cache.stop()  # final clear, janitor exits
"""

from __future__ import annotations

import threading
from collections.abc import Callable

from secretguard.domain.protocols import LoggerProtocol
from secretguard.domain.value_objects import SecretSnapshot
from secretguard.infrastructure.cache.periodic_task import PeriodicTask

_EMPTY = SecretSnapshot()

# 20 minutes
DEFAULT_CLEAR_INTERVAL = 20 * 60.0


class SecretCache:
    """Three-slot secret cache with blacklist and periodic janitor.

    Args:
        clear_interval: Seconds between wholesale clears.
        logger: Optional logger for janitor events.
    """

    def __init__(
        self,
        clear_interval: float = DEFAULT_CLEAR_INTERVAL,
        logger: LoggerProtocol | None = None,
    ) -> None:
        self._clear_interval = clear_interval
        self._logger = logger
        self._lock = threading.Lock()
        self._current = _EMPTY
        self._previous = _EMPTY
        self._pending = _EMPTY
        self._blacklist: set[str] = set()
        self._janitor: PeriodicTask | None = None

    @property
    def clear_interval(self) -> float:
        return self._clear_interval

    def get(self) -> tuple[SecretSnapshot, SecretSnapshot, SecretSnapshot, bool]:
        """Read all three slots at once.

        Returns:
            (current, previous, pending, found) where found is True iff
            current is not the empty snapshot.
        """
        with self._lock:
            current, previous, pending = self._current, self._previous, self._pending
        return current, previous, pending, not current.is_empty

    def set(
        self,
        current: SecretSnapshot,
        previous: SecretSnapshot,
        pending: SecretSnapshot,
    ) -> None:
        """Overwrite all three slots atomically."""
        with self._lock:
            self._current, self._previous, self._pending = current, previous, pending

    def blacklist(self, value: str) -> None:
        """Remember ``value`` as confirmed invalid until the next clear."""
        with self._lock:
            self._blacklist.add(value)

    def is_blacklisted(self, value: str) -> bool:
        with self._lock:
            return value in self._blacklist

    def clear(self) -> None:
        """Reset all slots and the blacklist atomically."""
        with self._lock:
            self._current = self._previous = self._pending = _EMPTY
            self._blacklist = set()

    def start(
        self,
        on_cleanup: Callable[[], None] | None = None,
        cancel_event: threading.Event | None = None,
    ) -> bool:
        """Start the janitor.

        Every ``clear_interval`` seconds the janitor clears the cache and then
        calls ``on_cleanup``. When cancelled (``stop()`` or ``cancel_event``
        set) it clears one final time, calls ``on_cleanup`` and exits for good.
        If ``cancel_event`` is already set, no thread starts: that final clear
        and ``on_cleanup`` run once in the calling thread.

        Args:
            on_cleanup: Optional callback run after every clear.
            cancel_event: Optional external cancellation token.

        Returns:
            True if the janitor thread was started by this call.
        """

        def cleanup() -> None:
            self.clear()
            if on_cleanup is not None:
                on_cleanup()

        with self._lock:
            if self._janitor is not None:
                return False
            self._janitor = PeriodicTask(
                interval=self._clear_interval,
                callback=cleanup,
                name="secret-cache-janitor",
                cancel_event=cancel_event,
                logger=self._logger,
            )
            janitor = self._janitor

        started = janitor.start()
        if started:
            if self._logger is not None:
                self._logger.info(
                    "Secret cache janitor started",
                    interval_seconds=self._clear_interval,
                )
        elif janitor.cancelled:
            if self._logger is not None:
                self._logger.info("Secret cache janitor cancelled before start")
            cleanup()
        return started

    def stop(self, timeout: float | None = 5.0) -> None:
        """Cancel the janitor. Safe to call repeatedly or before start()."""
        with self._lock:
            janitor = self._janitor
        if janitor is None:
            return
        was_cancelled = janitor.cancelled
        janitor.cancel(timeout)
        if not was_cancelled and self._logger is not None:
            self._logger.info("Secret cache janitor stopped")
