"""Authorization error types.

Three outcomes are distinguished for callers:
- INVALID_INPUT: the presented value is empty
- UNAUTHORIZED: the value was confirmed not to match any tolerated version
- AUTHORIZATION_FAILED: the store could not be consulted; ``cause`` holds
  the store error and nothing is known about the value
"""

from dataclasses import dataclass

from secretguard.core.enums import ErrorCode
from secretguard.core.errors import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthorizationError(DomainError):
    """API key authorization failure.

    Attributes:
        code: INVALID_INPUT, UNAUTHORIZED or AUTHORIZATION_FAILED.
        message: Human-readable message.
        cause: Underlying error for AUTHORIZATION_FAILED.
        details: Additional context.
    """

    cause: DomainError | None = None

    @property
    def is_unauthorized(self) -> bool:
        """True when the value was confirmed invalid."""
        return self.code == ErrorCode.UNAUTHORIZED

    def __str__(self) -> str:
        """String representation including the wrapped cause."""
        base = f"{self.code.value}: {self.message}"
        if self.cause is not None:
            return f"{base}: {self.cause}"
        return base
