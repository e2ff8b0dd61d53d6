"""Immutable snapshot of one cached secret stage.

A snapshot pairs a secret value with two moments: when it was last confirmed
against the store (``fetched_at``, drives the cool-down) and when the store
created that version (``created_at``, drives the grace period). The empty
snapshot (no value, no timestamps) means "not cached"; both of its ages are
unbounded so any cool-down is always elapsed and no grace window is open.

Snapshots are replaced wholesale, never mutated.

Usage:
    from secretguard.domain.value_objects import SecretSnapshot

    snap = SecretSnapshot(value="k3y", fetched_at=datetime.now(UTC))
    if snap.age(datetime.now(UTC)) > cool_down:
        ...
"""

from dataclasses import dataclass
from datetime import datetime, timedelta


@dataclass(frozen=True, slots=True)
class SecretSnapshot:
    """Cached secret value, its fetch time and its version creation time.

    Attributes:
        value: Secret string; empty when the stage is not cached or absent.
        fetched_at: When the value was fetched (UTC); None when never fetched.
        created_at: When the store created this version (UTC); None when the
            store did not report it.
    """

    value: str = ""
    fetched_at: datetime | None = None
    created_at: datetime | None = None

    @property
    def is_empty(self) -> bool:
        """True for the "not cached" snapshot."""
        return self.value == "" and self.fetched_at is None

    def age(self, now: datetime) -> timedelta:
        """Time elapsed since the snapshot was fetched.

        Args:
            now: Reference time (UTC).

        Returns:
            Elapsed time; ``timedelta.max`` for a snapshot never fetched.
        """
        if self.fetched_at is None:
            return timedelta.max
        return now - self.fetched_at

    def version_age(self, now: datetime) -> timedelta:
        """Time elapsed since the store created this version.

        Returns ``timedelta.max`` when the creation time is unknown.
        """
        if self.created_at is None:
            return timedelta.max
        return now - self.created_at

    def matches(self, value: str) -> bool:
        """True if a non-empty snapshot holds exactly ``value``."""
        return self.value != "" and self.value == value

    def __repr__(self) -> str:
        # Mask the value.
        masked = "***" if self.value else ""
        return (
            f"SecretSnapshot(value={masked!r}, fetched_at={self.fetched_at!r}, "
            f"created_at={self.created_at!r})"
        )
