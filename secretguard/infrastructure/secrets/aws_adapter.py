"""AWS Secrets Manager adapter.

Implements SecretStoreProtocol on top of a boto3 ``secretsmanager`` client.

Error mapping:
    - ResourceNotFoundException -> SECRET_NOT_FOUND (tolerated by callers)
    - any other ClientError     -> SECRET_ACCESS_DENIED
    - BotoCoreError (network, endpoint, credentials) -> SECRET_STORE_UNAVAILABLE

Timeouts and retries are owned by the botocore client config; the adapter
never retries on its own.

File: aws_adapter.py → class AWSSecretStore (PEP 8 naming)
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from secretguard.core.enums import ErrorCode
from secretguard.core.result import Failure, Result, Success
from secretguard.domain.enums import VersionStage
from secretguard.domain.errors import SecretsError
from secretguard.domain.value_objects import SecretDescription, SecretValue

if TYPE_CHECKING:
    from mypy_boto3_secretsmanager.client import SecretsManagerClient

_NOT_FOUND = "ResourceNotFoundException"

DEFAULT_CLIENT_CONFIG = Config(
    connect_timeout=2,
    read_timeout=5,
    retries={"max_attempts": 3, "mode": "standard"},
)


def _stage(label: str) -> VersionStage | str:
    try:
        return VersionStage(label)
    except ValueError:
        return label


class AWSSecretStore:
    """Secrets Manager backed secret store.

    Args:
        client: Pre-built boto3 secretsmanager client. Built from ``region``
            and ``endpoint_url`` when omitted.
        region: AWS region name.
        endpoint_url: Custom Secrets Manager endpoint (VPC endpoint, proxy).
    """

    def __init__(
        self,
        client: SecretsManagerClient | None = None,
        *,
        region: str = "us-east-1",
        endpoint_url: str | None = None,
    ) -> None:
        if client is None:
            client = boto3.client(
                "secretsmanager",
                region_name=region,
                endpoint_url=endpoint_url,
                config=DEFAULT_CLIENT_CONFIG,
            )
        self.client = client

    def get_secret_value(
        self,
        secret_id: str,
        stage: VersionStage,
        version_id: str | None = None,
    ) -> Result[SecretValue, SecretsError]:
        """Fetch the version holding ``stage``.

        Example:
            >>> store = AWSSecretStore(region="eu-west-1")
            >>> store.get_secret_value(arn, VersionStage.PENDING, version_id=token)
            >>> # Failure(SecretsError(code=SECRET_NOT_FOUND, ...)) if no rotation is ongoing
        """
        params: dict[str, Any] = {"SecretId": secret_id, "VersionStage": stage.value}
        if version_id:
            params["VersionId"] = version_id

        try:
            response = self.client.get_secret_value(**params)
        except (ClientError, BotoCoreError) as e:
            return Failure(error=self._map_error(e, "GetSecretValue", secret_id))

        return Success(
            value=SecretValue(
                value=response.get("SecretString") or "",
                version_id=response.get("VersionId"),
                created_at=response.get("CreatedDate"),
            )
        )

    def put_secret_value(
        self,
        secret_id: str,
        value: str,
        stages: Sequence[VersionStage] = (VersionStage.PENDING,),
        client_request_token: str | None = None,
    ) -> Result[None, SecretsError]:
        params: dict[str, Any] = {
            "SecretId": secret_id,
            "SecretString": value,
            "VersionStages": [stage.value for stage in stages],
        }
        if client_request_token:
            params["ClientRequestToken"] = client_request_token

        try:
            self.client.put_secret_value(**params)
        except (ClientError, BotoCoreError) as e:
            return Failure(error=self._map_error(e, "PutSecretValue", secret_id))
        return Success(value=None)

    def describe_secret(self, secret_id: str) -> Result[SecretDescription, SecretsError]:
        try:
            response = self.client.describe_secret(SecretId=secret_id)
        except (ClientError, BotoCoreError) as e:
            return Failure(error=self._map_error(e, "DescribeSecret", secret_id))

        versions = response.get("VersionIdsToStages") or {}
        return Success(
            value=SecretDescription(
                rotation_enabled=bool(response.get("RotationEnabled", False)),
                version_ids_to_stages={
                    version_id: frozenset(_stage(label) for label in labels)
                    for version_id, labels in versions.items()
                },
            )
        )

    def update_secret_version_stage(
        self,
        secret_id: str,
        stage: VersionStage,
        move_to_version_id: str,
        remove_from_version_id: str | None = None,
    ) -> Result[None, SecretsError]:
        params: dict[str, Any] = {
            "SecretId": secret_id,
            "VersionStage": stage.value,
            "MoveToVersionId": move_to_version_id,
        }
        if remove_from_version_id:
            params["RemoveFromVersionId"] = remove_from_version_id

        try:
            self.client.update_secret_version_stage(**params)
        except (ClientError, BotoCoreError) as e:
            return Failure(
                error=self._map_error(e, "UpdateSecretVersionStage", secret_id)
            )
        return Success(value=None)

    def get_random_password(
        self,
        length: int = 64,
        exclude_punctuation: bool = False,
        include_space: bool = False,
        require_each_included_type: bool = True,
    ) -> Result[str, SecretsError]:
        try:
            response = self.client.get_random_password(
                PasswordLength=length,
                ExcludePunctuation=exclude_punctuation,
                IncludeSpace=include_space,
                RequireEachIncludedType=require_each_included_type,
            )
        except (ClientError, BotoCoreError) as e:
            return Failure(error=self._map_error(e, "GetRandomPassword", ""))
        return Success(value=response["RandomPassword"])

    @staticmethod
    def _map_error(
        error: ClientError | BotoCoreError, operation: str, secret_id: str
    ) -> SecretsError:
        if isinstance(error, ClientError):
            aws_code = error.response.get("Error", {}).get("Code", "Unknown")
            code = (
                ErrorCode.SECRET_NOT_FOUND
                if aws_code == _NOT_FOUND
                else ErrorCode.SECRET_ACCESS_DENIED
            )
            return SecretsError(
                code=code,
                message=f"{operation} failed for secret: {secret_id}",
                details={"aws_error_code": aws_code, "error": str(error)},
            )
        return SecretsError(
            code=ErrorCode.SECRET_STORE_UNAVAILABLE,
            message=f"{operation} could not reach Secrets Manager",
            details={"error": str(error)},
        )
