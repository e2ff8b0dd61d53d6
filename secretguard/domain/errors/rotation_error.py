"""Rotation error types.

Returned by the rotator and the rotation command handler for failures the
rotation protocol itself detects. Store failures are passed through as
SecretsError unchanged.
"""

from dataclasses import dataclass

from secretguard.core.errors import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class RotationError(DomainError):
    """Rotation precondition or dispatch failure.

    Attributes:
        code: ROTATION_DISABLED, ROTATION_INVALID_STEP or ROTATION_TEST_FAILED.
        message: Human-readable message.
        details: Additional context (secret_id, step).
    """

    pass
