"""Unit tests for SecretSnapshot and the secret store records.

Tests cover:
- Empty snapshot semantics (not cached, unbounded age)
- Fetch age, version age and value matching
- Secret values masked in repr
- SecretDescription stage lookup
"""

from datetime import UTC, datetime, timedelta

import pytest

from secretguard.domain.enums import VersionStage
from secretguard.domain.value_objects import (
    SecretDescription,
    SecretSnapshot,
    SecretValue,
)


@pytest.mark.unit
class TestSecretSnapshot:
    """Test SecretSnapshot value object."""

    def test_default_snapshot_is_empty(self):
        """Test SecretSnapshot() is the "not cached" snapshot."""
        snap = SecretSnapshot()

        assert snap.is_empty
        assert snap.value == ""
        assert snap.fetched_at is None

    def test_snapshot_with_value_is_not_empty(self):
        snap = SecretSnapshot(value="k3y", fetched_at=datetime.now(UTC))

        assert not snap.is_empty

    def test_fetched_blank_value_is_not_empty(self):
        """Test a confirmed-absent stage (fetched, no value) is not "not cached"."""
        snap = SecretSnapshot(value="", fetched_at=datetime.now(UTC))

        assert not snap.is_empty

    def test_age_of_empty_snapshot_is_unbounded(self):
        """Test a never-fetched snapshot is older than any cool-down."""
        age = SecretSnapshot().age(datetime.now(UTC))

        assert age == timedelta.max
        assert age > timedelta(days=365)

    def test_age_is_elapsed_time_since_fetch(self):
        fetched = datetime(2024, 1, 1, 12, 0, 0, tzinfo=UTC)
        snap = SecretSnapshot(value="k3y", fetched_at=fetched)

        assert snap.age(fetched + timedelta(seconds=20)) == timedelta(seconds=20)

    def test_version_age_is_elapsed_time_since_creation(self):
        """Test version age follows the store creation date, not the fetch."""
        created = datetime(2024, 1, 1, tzinfo=UTC)
        fetched = datetime(2024, 6, 1, tzinfo=UTC)
        snap = SecretSnapshot(value="k3y", fetched_at=fetched, created_at=created)

        assert snap.age(fetched) == timedelta(0)
        assert snap.version_age(fetched) == fetched - created

    def test_version_age_unknown_creation_is_unbounded(self):
        snap = SecretSnapshot(value="k3y", fetched_at=datetime.now(UTC))

        assert snap.version_age(datetime.now(UTC)) == timedelta.max

    def test_matches_exact_value_only(self):
        snap = SecretSnapshot(value="k3y", fetched_at=datetime.now(UTC))

        assert snap.matches("k3y")
        assert not snap.matches("K3Y")
        assert not snap.matches("k3y ")

    def test_empty_snapshot_never_matches(self):
        """Test an empty value never authorizes anything, even ""."""
        assert not SecretSnapshot().matches("")
        assert not SecretSnapshot(value="", fetched_at=datetime.now(UTC)).matches("")

    def test_snapshot_is_immutable(self):
        snap = SecretSnapshot(value="k3y")

        with pytest.raises(AttributeError):
            snap.value = "other"  # type: ignore[misc]

    def test_repr_masks_value(self):
        """Test repr never leaks the secret."""
        snap = SecretSnapshot(value="super-secret", fetched_at=None)

        assert "super-secret" not in repr(snap)
        assert "***" in repr(snap)


@pytest.mark.unit
class TestSecretRecords:
    """Test SecretValue and SecretDescription."""

    def test_secret_value_repr_masks_value(self):
        value = SecretValue(value="super-secret", version_id="v1")

        assert "super-secret" not in repr(value)
        assert "v1" in repr(value)

    def test_version_with_stage_returns_holder(self):
        description = SecretDescription(
            rotation_enabled=True,
            version_ids_to_stages={
                "v1": frozenset({VersionStage.PREVIOUS}),
                "v2": frozenset({VersionStage.CURRENT}),
                "v3": frozenset({VersionStage.PENDING, "CUSTOM"}),
            },
        )

        assert description.version_with_stage(VersionStage.CURRENT) == "v2"
        assert description.version_with_stage(VersionStage.PENDING) == "v3"

    def test_version_with_stage_returns_none_when_absent(self):
        description = SecretDescription(rotation_enabled=False)

        assert description.version_with_stage(VersionStage.CURRENT) is None

    def test_stage_values_match_store_labels(self):
        """Test stage enum values are the Secrets Manager labels."""
        assert VersionStage.CURRENT == "AWSCURRENT"
        assert VersionStage.PREVIOUS == "AWSPREVIOUS"
        assert VersionStage.PENDING == "AWSPENDING"
