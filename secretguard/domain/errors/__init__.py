"""Domain errors package.

Usage:
    from secretguard.domain.errors import AuthorizationError, SecretsError
"""

from secretguard.domain.errors.authorization_error import AuthorizationError
from secretguard.domain.errors.distribution_error import DistributionError
from secretguard.domain.errors.rotation_error import RotationError
from secretguard.domain.errors.secrets_error import SecretsError

__all__ = [
    "AuthorizationError",
    "DistributionError",
    "RotationError",
    "SecretsError",
]
