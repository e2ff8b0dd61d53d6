"""Records returned by the secret store port.

These are backend-agnostic views of what a secrets backend reports about a
secret: one stored version, and the secret's description (rotation flag and
version-to-stage mapping).
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime

from secretguard.domain.enums import VersionStage


@dataclass(frozen=True, slots=True, kw_only=True)
class SecretValue:
    """One stored secret version.

    Attributes:
        value: Secret string.
        version_id: Version identifier (the rotation token that created it).
        created_at: Creation date reported by the store, if any.
    """

    value: str
    version_id: str | None = None
    created_at: datetime | None = None

    def __repr__(self) -> str:
        return (
            f"SecretValue(value='***', version_id={self.version_id!r}, "
            f"created_at={self.created_at!r})"
        )


@dataclass(frozen=True, slots=True, kw_only=True)
class SecretDescription:
    """Secret metadata relevant to rotation.

    Attributes:
        rotation_enabled: Whether rotation is turned on for the secret.
        version_ids_to_stages: Version id -> staging labels attached to it.
            Labels outside the three known stages are kept as plain strings.
    """

    rotation_enabled: bool
    version_ids_to_stages: Mapping[str, frozenset[VersionStage | str]] = field(
        default_factory=dict
    )

    def version_with_stage(self, stage: VersionStage) -> str | None:
        """Return the version id currently holding ``stage``, if any."""
        for version_id, stages in self.version_ids_to_stages.items():
            if stage in stages:
                return version_id
        return None
