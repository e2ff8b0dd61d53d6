"""Domain protocols (ports).

Usage:
    from secretguard.domain.protocols import SecretStoreProtocol, LoggerProtocol
"""

from secretguard.domain.protocols.distribution_updater_protocol import (
    ConfigMutator,
    DistributionConfig,
    DistributionUpdaterProtocol,
)
from secretguard.domain.protocols.logger_protocol import LoggerProtocol
from secretguard.domain.protocols.rotation_protocols import (
    ApplySecretFn,
    SecretAuthorizerProtocol,
    SecretRotatorProtocol,
    TestSecretFn,
)
from secretguard.domain.protocols.secret_store_protocol import SecretStoreProtocol

__all__ = [
    "ApplySecretFn",
    "ConfigMutator",
    "DistributionConfig",
    "DistributionUpdaterProtocol",
    "LoggerProtocol",
    "SecretAuthorizerProtocol",
    "SecretRotatorProtocol",
    "SecretStoreProtocol",
    "TestSecretFn",
]
