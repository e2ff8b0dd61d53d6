"""CloudFront distribution updater.

Implements DistributionUpdaterProtocol with a boto3 ``cloudfront`` client:
GetDistributionConfig, apply mutators in order, UpdateDistribution guarded
by the returned ETag (optimistic concurrency).

The ``update_custom_header`` mutator factory rewrites an origin custom
header; the rotation setSecret step uses it to hand the pending API key to
the CDN so the origin keeps receiving a valid key.

File: cloudfront_adapter.py → class CloudFrontDistributionUpdater
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from secretguard.core.enums import ErrorCode
from secretguard.core.result import Failure, Result, Success
from secretguard.domain.errors import DistributionError
from secretguard.domain.protocols import ConfigMutator, DistributionConfig

if TYPE_CHECKING:
    from mypy_boto3_cloudfront.client import CloudFrontClient


def update_custom_header(header_name: str, header_value: str) -> ConfigMutator:
    """Build a mutator setting ``header_name`` on every origin that has it.

    Header names compare case-insensitively. Origins without the header are
    left untouched; the header is never added.

    Args:
        header_name: Origin custom header name.
        header_value: New header value.

    Returns:
        Mutator returning the (in-place updated) config.
    """
    wanted = header_name.lower()

    def mutate(config: DistributionConfig) -> DistributionConfig:
        origins = (config.get("Origins") or {}).get("Items") or []
        for origin in origins:
            headers = (origin.get("CustomHeaders") or {}).get("Items") or []
            for header in headers:
                if str(header.get("HeaderName", "")).lower() == wanted:
                    header["HeaderValue"] = header_value
                    break
        return config

    return mutate


class CloudFrontDistributionUpdater:
    """Distribution updater backed by the CloudFront API.

    Args:
        client: Pre-built boto3 cloudfront client; built when omitted.
        region: Signing region for the built client (CloudFront is global).
    """

    def __init__(
        self, client: CloudFrontClient | None = None, *, region: str = "us-east-1"
    ) -> None:
        if client is None:
            client = boto3.client("cloudfront", region_name=region)
        self.client = client

    def update(
        self,
        distribution_id: str,
        mutators: Sequence[ConfigMutator | None],
    ) -> Result[None, DistributionError]:
        if not mutators:
            return Failure(
                error=DistributionError(
                    code=ErrorCode.DISTRIBUTION_NO_MUTATORS,
                    message="No config mutators supplied",
                    details={"distribution_id": distribution_id},
                )
            )

        try:
            response = self.client.get_distribution_config(Id=distribution_id)
            config: DistributionConfig = response["DistributionConfig"]
            for mutator in mutators:
                if mutator is None:
                    continue
                config = mutator(config)
            self.client.update_distribution(
                Id=distribution_id,
                IfMatch=response["ETag"],
                DistributionConfig=config,
            )
        except (ClientError, BotoCoreError) as e:
            details = {"distribution_id": distribution_id, "error": str(e)}
            if isinstance(e, ClientError):
                details["aws_error_code"] = e.response.get("Error", {}).get(
                    "Code", "Unknown"
                )
            return Failure(
                error=DistributionError(
                    code=ErrorCode.DISTRIBUTION_UPDATE_FAILED,
                    message=f"Failed to update distribution: {distribution_id}",
                    details=details,
                )
            )

        return Success(value=None)
