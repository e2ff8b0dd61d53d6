"""Unit tests for the rotation Lambda entry point.

Tests cover:
- Event parsing into RotateSecret
- Missing event fields
- Failure surfaced as RotationFailedError (so Secrets Manager retries)
"""

from unittest.mock import Mock, patch

import pytest

from secretguard.application.commands.rotation_commands import RotateSecret
from secretguard.core.enums import ErrorCode
from secretguard.core.result import Failure, Success
from secretguard.domain.errors import RotationError
from secretguard.presentation.lambda_handlers import RotationFailedError, handler
from secretguard.presentation.lambda_handlers.rotation import parse_event

MODULE = "secretguard.presentation.lambda_handlers.rotation"

EVENT = {
    "SecretId": "arn:aws:secretsmanager:us-east-1:123456789012:secret:api-key-AbCdEf",
    "ClientRequestToken": "0d3ea5c4-6f7b-4f8a-9f1b-3c3e1e0e6a11",
    "Step": "createSecret",
}


@pytest.fixture
def rotate_handler():
    rotate_handler = Mock()
    rotate_handler.handle.return_value = Success(value=None)
    with patch(f"{MODULE}.get_rotate_secret_handler", return_value=rotate_handler):
        yield rotate_handler


@pytest.mark.unit
class TestParseEvent:
    """Test rotation event parsing."""

    def test_parse_event(self):
        assert parse_event(EVENT) == RotateSecret(
            secret_id=EVENT["SecretId"],
            token=EVENT["ClientRequestToken"],
            step="createSecret",
        )

    def test_missing_fields_listed(self):
        with pytest.raises(RotationFailedError, match="ClientRequestToken, Step"):
            parse_event({"SecretId": EVENT["SecretId"], "Step": ""})


@pytest.mark.unit
class TestRotationHandler:
    """Test handler(event, context)."""

    def test_success_returns_none(self, rotate_handler):
        assert handler(EVENT, None) is None

        rotate_handler.handle.assert_called_once_with(parse_event(EVENT))

    def test_failure_raises_with_domain_error(self, rotate_handler):
        error = RotationError(code=ErrorCode.ROTATION_DISABLED, message="off")
        rotate_handler.handle.return_value = Failure(error=error)

        with pytest.raises(RotationFailedError) as exc_info:
            handler(EVENT, None)

        assert exc_info.value.error is error
        assert "rotation_disabled" in str(exc_info.value)

    def test_invalid_event_logged_and_raised(self, rotate_handler):
        with patch(f"{MODULE}.get_logger") as get_logger:
            with pytest.raises(RotationFailedError):
                handler({"Step": "createSecret"}, None)

        get_logger.return_value.error.assert_called_once()
        rotate_handler.handle.assert_not_called()
