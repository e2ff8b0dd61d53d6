"""Secrets store error types.

Returned by secret store adapters when a call to the backend fails.
SECRET_NOT_FOUND is the one code callers tolerate; everything else is a
failure to reach or use the store.

Usage:
    from secretguard.domain.errors import SecretsError
    from secretguard.core.enums import ErrorCode
    from secretguard.core.result import Failure

    return Failure(error=SecretsError(
        code=ErrorCode.SECRET_NOT_FOUND,
        message="Secret version not found: AWSPENDING",
    ))
"""

from dataclasses import dataclass

from secretguard.core.enums import ErrorCode
from secretguard.core.errors import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class SecretsError(DomainError):
    """Secrets store failure.

    Attributes:
        code: SECRET_NOT_FOUND, SECRET_ACCESS_DENIED or SECRET_STORE_UNAVAILABLE.
        message: Human-readable message.
        details: Additional context (backend error code, operation).
    """

    @property
    def is_not_found(self) -> bool:
        """True when the requested secret or version does not exist."""
        return self.code == ErrorCode.SECRET_NOT_FOUND
