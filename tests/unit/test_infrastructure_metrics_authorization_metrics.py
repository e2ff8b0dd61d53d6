"""Unit tests for AuthorizationMetrics.

Tests cover:
- Outcome and remote-call counters
- Derived totals and remote call rate
- Snapshot with and without reset
- Thread safety under concurrent updates
"""

import threading

import pytest

from secretguard.infrastructure.metrics import AuthorizationMetrics, AuthorizationStats


@pytest.mark.unit
class TestAuthorizationStats:
    """Test AuthorizationStats dataclass."""

    def test_empty_stats(self):
        stats = AuthorizationStats()

        assert stats.total_requests == 0
        assert stats.remote_call_rate == 0.0

    def test_remote_call_rate(self):
        stats = AuthorizationStats(authorized=3, unauthorized=1, secret_requests=1)

        assert stats.total_requests == 4
        assert stats.remote_call_rate == 0.25

    def test_to_dict(self):
        stats = AuthorizationStats(
            authorized=2, invalid_input=1, internal_error=1, secret_requests=3
        )

        assert stats.to_dict() == {
            "authorized_count": 2,
            "unauthorized_count": 0,
            "invalid_input_count": 1,
            "internal_error_count": 1,
            "secret_request_count": 3,
            "total_requests": 4,
            "remote_call_rate": 0.75,
        }


@pytest.mark.unit
class TestAuthorizationMetrics:
    """Test AuthorizationMetrics recording."""

    def test_record_outcomes(self):
        metrics = AuthorizationMetrics()

        metrics.record_outcome("authorized")
        metrics.record_outcome("authorized")
        metrics.record_outcome("unauthorized")
        metrics.record_secret_request()

        snapshot = metrics.snapshot()
        assert snapshot["authorized_count"] == 2
        assert snapshot["unauthorized_count"] == 1
        assert snapshot["secret_request_count"] == 1

    def test_unknown_outcome_rejected(self):
        with pytest.raises(ValueError, match="Unknown authorization outcome"):
            AuthorizationMetrics().record_outcome("maybe")

    def test_snapshot_with_reset_starts_new_window(self):
        metrics = AuthorizationMetrics()
        metrics.record_outcome("authorized")

        first = metrics.snapshot(reset=True)
        second = metrics.snapshot()

        assert first["total_requests"] == 1
        assert second["total_requests"] == 0

    def test_snapshot_without_reset_keeps_counts(self):
        metrics = AuthorizationMetrics()
        metrics.record_outcome("internal_error")

        metrics.snapshot()

        assert metrics.snapshot()["internal_error_count"] == 1

    def test_reset(self):
        metrics = AuthorizationMetrics()
        metrics.record_outcome("authorized")

        metrics.reset()

        assert metrics.snapshot()["total_requests"] == 0

    def test_concurrent_updates(self):
        metrics = AuthorizationMetrics()

        def work():
            for _ in range(500):
                metrics.record_outcome("authorized")
                metrics.record_secret_request()

        threads = [threading.Thread(target=work) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        snapshot = metrics.snapshot()
        assert snapshot["authorized_count"] == 4000
        assert snapshot["secret_request_count"] == 4000
