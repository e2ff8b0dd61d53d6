"""Secret version stage labels.

A rotating secret keeps up to three versions valid at the same time. Each
version carries one or more staging labels; exactly one version holds
CURRENT at any moment.
"""

from enum import Enum


class VersionStage(str, Enum):
    """Staging labels used by AWS Secrets Manager."""

    CURRENT = "AWSCURRENT"
    PREVIOUS = "AWSPREVIOUS"
    PENDING = "AWSPENDING"
