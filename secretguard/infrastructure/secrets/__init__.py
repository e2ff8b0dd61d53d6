"""Secrets infrastructure package.

Provides the AWS Secrets Manager adapter implementing SecretStoreProtocol.
Use secretguard.core.container.get_secret_store() for dependency injection.
"""

from secretguard.infrastructure.secrets.aws_adapter import AWSSecretStore

__all__ = ["AWSSecretStore"]
