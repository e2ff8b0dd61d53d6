"""Domain value objects.

Usage:
    from secretguard.domain.value_objects import SecretSnapshot, SecretValue
"""

from secretguard.domain.value_objects.secret_records import (
    SecretDescription,
    SecretValue,
)
from secretguard.domain.value_objects.secret_snapshot import SecretSnapshot

__all__ = ["SecretDescription", "SecretSnapshot", "SecretValue"]
