"""Authorization metrics tracking for observability.

Lightweight, thread-safe, in-memory counters for authorization outcomes and
remote secret fetches. The cache janitor flushes them as one structured log
line per clear interval and resets them, so each line covers one window.

Usage:
    from secretguard.infrastructure.metrics import AuthorizationMetrics

    metrics = AuthorizationMetrics()
    metrics.record_outcome("authorized")
    metrics.record_secret_request()

    logger.info("Authorization metrics", **metrics.snapshot(reset=True))
"""

from dataclasses import dataclass
from threading import Lock
from typing import Any

OUTCOMES = ("authorized", "unauthorized", "invalid_input", "internal_error")


@dataclass
class AuthorizationStats:
    """Counters for one metrics window.

    Attributes:
        authorized: Requests accepted.
        unauthorized: Requests rejected as invalid.
        invalid_input: Requests with an empty key.
        internal_error: Requests that could not be confirmed.
        secret_requests: Requests that triggered at least one store call.
    """

    authorized: int = 0
    unauthorized: int = 0
    invalid_input: int = 0
    internal_error: int = 0
    secret_requests: int = 0

    @property
    def total_requests(self) -> int:
        return self.authorized + self.unauthorized + self.invalid_input + self.internal_error

    @property
    def remote_call_rate(self) -> float:
        """Share of requests that reached the store (0.0 to 1.0)."""
        if self.total_requests == 0:
            return 0.0
        return self.secret_requests / self.total_requests

    def to_dict(self) -> dict[str, Any]:
        """Convert stats to dictionary for structured logging."""
        return {
            "authorized_count": self.authorized,
            "unauthorized_count": self.unauthorized,
            "invalid_input_count": self.invalid_input,
            "internal_error_count": self.internal_error,
            "secret_request_count": self.secret_requests,
            "total_requests": self.total_requests,
            "remote_call_rate": round(self.remote_call_rate, 4),
        }


class AuthorizationMetrics:
    """Thread-safe authorization counters."""

    def __init__(self) -> None:
        self._stats = AuthorizationStats()
        self._lock = Lock()

    def record_outcome(self, outcome: str) -> None:
        """Count one authorization outcome.

        Args:
            outcome: One of ``OUTCOMES``.

        Raises:
            ValueError: If the outcome name is unknown.
        """
        if outcome not in OUTCOMES:
            raise ValueError(f"Unknown authorization outcome: {outcome}")
        with self._lock:
            setattr(self._stats, outcome, getattr(self._stats, outcome) + 1)

    def record_secret_request(self) -> None:
        with self._lock:
            self._stats.secret_requests += 1

    def snapshot(self, *, reset: bool = False) -> dict[str, Any]:
        """Current counters, optionally starting a new window."""
        with self._lock:
            data = self._stats.to_dict()
            if reset:
                self._stats = AuthorizationStats()
        return data

    def reset(self) -> None:
        with self._lock:
            self._stats = AuthorizationStats()
