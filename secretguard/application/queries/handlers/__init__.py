"""Query handlers."""

from secretguard.application.queries.handlers.authorize_api_key_handler import (
    AuthorizeApiKeyHandler,
)

__all__ = ["AuthorizeApiKeyHandler"]
