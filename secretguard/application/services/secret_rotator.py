"""Four-step secret rotation (createSecret, setSecret, testSecret, finishSecret).

Secrets Manager drives the steps, passing the same client request token to
each one, and retries any step that fails. Every step therefore has to be
safe to replay:

- create_secret: no-op if a PENDING version already exists for the token
- set_secret / test_secret: no-op if there is no PENDING version for the
  token (the step does not apply yet); callbacks must be idempotent
- finish_secret: no-op if the token already holds CURRENT

The rotator never retries on its own and keeps no state between calls
beyond the store client. Store errors are returned unchanged except where a
"not found" is explicitly tolerated.
"""

from __future__ import annotations

from secretguard.core.enums import ErrorCode
from secretguard.core.errors import DomainError
from secretguard.core.result import Failure, Result, Success
from secretguard.domain.enums import VersionStage
from secretguard.domain.errors import RotationError
from secretguard.domain.protocols import (
    ApplySecretFn,
    LoggerProtocol,
    SecretStoreProtocol,
    TestSecretFn,
)

# Generated secret shape: 64 chars, punctuation allowed, no spaces,
# at least one character of each included class.
PASSWORD_LENGTH = 64


class SecretRotator:
    """Rotation steps against a secret store.

    Args:
        store: Secret store port.
        logger: Optional structured logger.
    """

    def __init__(
        self,
        store: SecretStoreProtocol,
        logger: LoggerProtocol | None = None,
    ) -> None:
        self._store = store
        self._logger = logger

    def rotation_enabled(self, secret_id: str) -> Result[None, DomainError]:
        """Check rotation is turned on for the secret.

        Returns:
            Success(None) if enabled.
            Failure(RotationError ROTATION_DISABLED) if disabled.
            Failure(SecretsError) if the secret cannot be described.
        """
        result = self._store.describe_secret(secret_id)
        if isinstance(result, Failure):
            return result
        if not result.value.rotation_enabled:
            return Failure(
                error=RotationError(
                    code=ErrorCode.ROTATION_DISABLED,
                    message=f"Rotation disabled for {secret_id}",
                    details={"secret_id": secret_id},
                )
            )
        return Success(value=None)

    def create_secret(self, secret_id: str, token: str) -> Result[None, DomainError]:
        """Generate a new value and store it as PENDING under ``token``.

        Replays are detected by looking up PENDING for ``token``: if it exists
        nothing is generated.
        """
        current = self._store.get_secret_value(secret_id, VersionStage.CURRENT)
        if isinstance(current, Failure):
            return current

        pending = self._store.get_secret_value(
            secret_id, VersionStage.PENDING, version_id=token
        )
        if isinstance(pending, Success):
            self._info("Pending version already exists", secret_id, token)
            return Success(value=None)
        if not pending.error.is_not_found:
            return pending

        password = self._store.get_random_password(
            length=PASSWORD_LENGTH,
            exclude_punctuation=False,
            include_space=False,
            require_each_included_type=True,
        )
        if isinstance(password, Failure):
            return password

        stored = self._store.put_secret_value(
            secret_id,
            password.value,
            stages=(VersionStage.PENDING,),
            client_request_token=token,
        )
        if isinstance(stored, Failure):
            return stored

        self._info("Pending version created", secret_id, token)
        return Success(value=None)

    def set_secret(
        self, secret_id: str, token: str, apply_fn: ApplySecretFn | None
    ) -> Result[None, DomainError]:
        """Hand CURRENT and PENDING values to ``apply_fn``.

        ``apply_fn`` performs the downstream side effect of adopting the new
        secret (e.g. updating the CDN origin header) and must be idempotent.
        """
        if apply_fn is None:
            return Success(value=None)

        pending = self._store.get_secret_value(
            secret_id, VersionStage.PENDING, version_id=token
        )
        if isinstance(pending, Failure):
            self._info("No pending version for token, set step skipped", secret_id, token)
            return Success(value=None)

        current = self._store.get_secret_value(secret_id, VersionStage.CURRENT)
        if isinstance(current, Failure):
            return current

        return apply_fn(current.value.value, pending.value.value)

    def test_secret(
        self, secret_id: str, token: str, test_fn: TestSecretFn | None
    ) -> Result[None, DomainError]:
        """Hand the PENDING value to ``test_fn`` for validation."""
        if test_fn is None:
            return Success(value=None)

        pending = self._store.get_secret_value(
            secret_id, VersionStage.PENDING, version_id=token
        )
        if isinstance(pending, Failure):
            self._info("No pending version for token, test step skipped", secret_id, token)
            return Success(value=None)

        return test_fn(pending.value.value)

    def finish_secret(self, secret_id: str, token: str) -> Result[None, DomainError]:
        """Move the CURRENT label onto ``token``.

        The store moves the label atomically; PREVIOUS follows the version
        that lost CURRENT.
        """
        description = self._store.describe_secret(secret_id)
        if isinstance(description, Failure):
            return description

        holder = description.value.version_with_stage(VersionStage.CURRENT)
        if holder == token:
            self._info("Version already marked current", secret_id, token)
            return Success(value=None)

        moved = self._store.update_secret_version_stage(
            secret_id,
            VersionStage.CURRENT,
            move_to_version_id=token,
            remove_from_version_id=holder,
        )
        if isinstance(moved, Failure):
            return moved

        if self._logger is not None:
            self._logger.info(
                "Current stage moved",
                secret_id=secret_id,
                token=token,
                previous_version=holder,
            )
        return Success(value=None)

    def _info(self, message: str, secret_id: str, token: str) -> None:
        if self._logger is not None:
            self._logger.info(message, secret_id=secret_id, token=token)
