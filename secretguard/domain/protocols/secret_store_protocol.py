"""Secret store protocol (port) for hexagonal architecture.

Defines what the authorizer and the rotator need from a versioned secrets
backend. The infrastructure layer provides the adapter (AWSSecretStore);
tests substitute a Mock built from this protocol.

Protocol Pattern:
    - Domain defines the PORT (this protocol)
    - Infrastructure implements ADAPTERS (AWSSecretStore)
    - Application services use the protocol (backend-agnostic)

Every method returns a Result. SecretsError with code SECRET_NOT_FOUND is
the distinguished "missing secret or version" case.
"""

from collections.abc import Sequence
from typing import Protocol

from secretguard.core.result import Result
from secretguard.domain.enums import VersionStage
from secretguard.domain.errors import SecretsError
from secretguard.domain.value_objects import SecretDescription, SecretValue


class SecretStoreProtocol(Protocol):
    """Protocol for versioned secrets backends with staging labels."""

    def get_secret_value(
        self,
        secret_id: str,
        stage: VersionStage,
        version_id: str | None = None,
    ) -> Result[SecretValue, SecretsError]:
        """Fetch the version holding ``stage`` (optionally pinned to ``version_id``).

        Args:
            secret_id: Secret ARN or name.
            stage: Staging label to read.
            version_id: When set, the version must also have this id.

        Returns:
            Success(SecretValue) if found.
            Failure(SecretsError) with SECRET_NOT_FOUND if the secret, stage
            or version does not exist; another code on any other failure.
        """
        ...

    def put_secret_value(
        self,
        secret_id: str,
        value: str,
        stages: Sequence[VersionStage] = (VersionStage.PENDING,),
        client_request_token: str | None = None,
    ) -> Result[None, SecretsError]:
        """Store a new secret version with the given staging labels.

        Args:
            secret_id: Secret ARN or name.
            value: New secret string.
            stages: Labels to attach to the new version.
            client_request_token: Version id for the new version; makes the
                call idempotent for a given token.

        Returns:
            Success(None) when stored, Failure(SecretsError) otherwise.
        """
        ...

    def describe_secret(self, secret_id: str) -> Result[SecretDescription, SecretsError]:
        """Read rotation flag and version-to-stage mapping.

        Args:
            secret_id: Secret ARN or name.

        Returns:
            Success(SecretDescription) or Failure(SecretsError).
        """
        ...

    def update_secret_version_stage(
        self,
        secret_id: str,
        stage: VersionStage,
        move_to_version_id: str,
        remove_from_version_id: str | None = None,
    ) -> Result[None, SecretsError]:
        """Atomically move a staging label between versions.

        Args:
            secret_id: Secret ARN or name.
            stage: Label to move.
            move_to_version_id: Version receiving the label.
            remove_from_version_id: Version currently holding the label.

        Returns:
            Success(None) when moved, Failure(SecretsError) otherwise.
        """
        ...

    def get_random_password(
        self,
        length: int = 64,
        exclude_punctuation: bool = False,
        include_space: bool = False,
        require_each_included_type: bool = True,
    ) -> Result[str, SecretsError]:
        """Generate a high-entropy random value server-side.

        Returns:
            Success(password) or Failure(SecretsError).
        """
        ...
