"""Application services.

Usage:
    from secretguard.application.services import SecretAuthorizer, SecretRotator
"""

from secretguard.application.services.secret_authorizer import (
    AuthorizerConfig,
    SecretAuthorizer,
)
from secretguard.application.services.secret_rotator import SecretRotator

__all__ = ["AuthorizerConfig", "SecretAuthorizer", "SecretRotator"]
