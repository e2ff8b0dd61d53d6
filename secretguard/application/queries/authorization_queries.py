"""Authorization queries (CQRS read operations).

Pattern:
- Queries are data containers (no logic)
- Handlers return a decision; the presented key is never stored
"""

from dataclasses import dataclass, field
from enum import Enum

from secretguard.domain.errors import AuthorizationError


@dataclass(frozen=True, kw_only=True)
class AuthorizeApiKey:
    """Check a presented API key against the configured secret.

    Attributes:
        api_key: Key presented by the caller; surrounding whitespace is ignored.

    Example:
        >>> query = AuthorizeApiKey(api_key=request_key)
        >>> decision = handler.handle(query)
    """

    api_key: str = field(repr=False)


class AuthorizationOutcome(str, Enum):
    """Transport-facing outcome of an authorization."""

    ALLOW = "allow"
    DENY = "deny"
    ERROR = "error"


@dataclass(frozen=True, kw_only=True)
class AuthorizationDecision:
    """Result of AuthorizeApiKey.

    Attributes:
        outcome: ALLOW (key accepted), DENY (key confirmed invalid) or ERROR
            (malformed request or the secret could not be checked).
        used_remote_call: Whether the secret store was called.
        error: The authorization error for DENY and ERROR.
    """

    outcome: AuthorizationOutcome
    used_remote_call: bool = False
    error: AuthorizationError | None = None

    @property
    def allowed(self) -> bool:
        return self.outcome == AuthorizationOutcome.ALLOW
