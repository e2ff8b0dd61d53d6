"""Pytest configuration and shared fixtures.

This configuration ensures:
1. Fake AWS credentials so no test can reach a real account
2. Container singletons and cached settings are reset between tests
3. Shared helpers for building secret snapshots and store results
"""

from datetime import UTC, datetime
from unittest.mock import Mock

import pytest

from secretguard.core.enums import ErrorCode
from secretguard.core.result import Failure, Success
from secretguard.domain.errors import SecretsError
from secretguard.domain.protocols import LoggerProtocol, SecretStoreProtocol
from secretguard.domain.value_objects import SecretSnapshot, SecretValue

SECRET_ID = "arn:aws:secretsmanager:us-east-1:123456789012:secret:api-key-AbCdEf"


# Test helper functions for store results
def secret_found(
    value: str,
    version_id: str | None = None,
    created_at: datetime | None = None,
) -> Success[SecretValue]:
    """Store result for an existing secret version."""
    return Success(
        value=SecretValue(value=value, version_id=version_id, created_at=created_at)
    )


def secret_not_found(stage: str = "AWSCURRENT") -> Failure[SecretsError]:
    """Store result for a missing secret version."""
    return Failure(
        error=SecretsError(
            code=ErrorCode.SECRET_NOT_FOUND,
            message=f"Secret version not found: {stage}",
        )
    )


def store_unavailable() -> Failure[SecretsError]:
    """Store result for a transport failure."""
    return Failure(
        error=SecretsError(
            code=ErrorCode.SECRET_STORE_UNAVAILABLE,
            message="GetSecretValue could not reach Secrets Manager",
        )
    )


def snapshot(
    value: str,
    fetched_at: datetime | None = None,
    created_at: datetime | None = None,
) -> SecretSnapshot:
    """Build a snapshot fetched at ``fetched_at`` (default: now)."""
    return SecretSnapshot(
        value=value,
        fetched_at=fetched_at or datetime.now(UTC),
        created_at=created_at,
    )


# Pytest markers for different test types
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
    config.addinivalue_line(
        "markers", "integration: Tests with real threads or moto-backed AWS APIs"
    )


@pytest.fixture(autouse=True)
def aws_credentials(monkeypatch):
    """Fake AWS credentials and region for boto3/moto."""
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_SECURITY_TOKEN", "testing")
    monkeypatch.setenv("AWS_SESSION_TOKEN", "testing")
    monkeypatch.setenv("AWS_DEFAULT_REGION", "us-east-1")


@pytest.fixture(autouse=True)
def reset_singletons():
    """Drop cached settings and container singletons around each test."""
    from secretguard.core.container import reset_container

    reset_container()
    yield
    reset_container()


@pytest.fixture
def mock_store():
    """Secret store test double (spec'd on the protocol)."""
    return Mock(spec=SecretStoreProtocol)


@pytest.fixture
def mock_logger():
    """Logger test double; bind() returns the same mock."""
    logger = Mock(spec=LoggerProtocol)
    logger.bind.return_value = logger
    logger.with_context.return_value = logger
    return logger

