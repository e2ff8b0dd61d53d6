"""Result types for railway-oriented programming.

Operations that can fail return a Result instead of raising. Store adapters,
the authorizer and the rotator all speak this type, so a caller always sees
failure as data it has to handle.

Usage:
    result = store.get_secret_value(secret_id, VersionStage.CURRENT)
    match result:
        case Success(value=secret):
            print(secret.version_id)
        case Failure(error=error):
            print(f"Error: {error}")
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Represents a successful operation result.

    Attributes:
        value: The successful result value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Represents a failed operation result.

    Attributes:
        error: The error that occurred.
    """

    error: E


type Result[T, E] = Success[T] | Failure[E]
