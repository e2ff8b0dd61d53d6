"""CDN distribution update error types."""

from dataclasses import dataclass

from secretguard.core.errors import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class DistributionError(DomainError):
    """Distribution config update failure.

    Attributes:
        code: DISTRIBUTION_NO_MUTATORS or DISTRIBUTION_UPDATE_FAILED.
        message: Human-readable message.
        details: Additional context (distribution_id, backend error code).
    """

    pass
