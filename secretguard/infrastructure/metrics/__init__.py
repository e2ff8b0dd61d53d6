"""Metrics infrastructure package."""

from secretguard.infrastructure.metrics.authorization_metrics import (
    AuthorizationMetrics,
    AuthorizationStats,
)

__all__ = ["AuthorizationMetrics", "AuthorizationStats"]
