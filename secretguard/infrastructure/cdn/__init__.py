"""CDN infrastructure package (CloudFront distribution updates)."""

from secretguard.infrastructure.cdn.cloudfront_adapter import (
    CloudFrontDistributionUpdater,
    update_custom_header,
)

__all__ = ["CloudFrontDistributionUpdater", "update_custom_header"]
