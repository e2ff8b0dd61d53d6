"""Application queries (CQRS read side)."""

from secretguard.application.queries.authorization_queries import (
    AuthorizationDecision,
    AuthorizationOutcome,
    AuthorizeApiKey,
)

__all__ = ["AuthorizationDecision", "AuthorizationOutcome", "AuthorizeApiKey"]
