"""Domain-level error codes (machine-readable).

Error codes follow ENTITY_ACTION_REASON naming convention.
Used with Result types for railway-oriented programming.

Categories:
- Authorization errors (INVALID_INPUT, UNAUTHORIZED, AUTHORIZATION_FAILED)
- Secrets store errors (SECRET_*)
- Rotation errors (ROTATION_*)
- Distribution errors (DISTRIBUTION_*)
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable).

    Error codes follow ENTITY_ACTION_REASON naming convention.
    """

    # Authorization errors
    INVALID_INPUT = "invalid_input"
    UNAUTHORIZED = "unauthorized"
    AUTHORIZATION_FAILED = "authorization_failed"

    # Secrets store errors
    SECRET_NOT_FOUND = "secret_not_found"
    SECRET_ACCESS_DENIED = "secret_access_denied"
    SECRET_STORE_UNAVAILABLE = "secret_store_unavailable"

    # Rotation errors
    ROTATION_DISABLED = "rotation_disabled"
    ROTATION_INVALID_STEP = "rotation_invalid_step"
    ROTATION_TEST_FAILED = "rotation_test_failed"

    # Distribution errors
    DISTRIBUTION_NO_MUTATORS = "distribution_no_mutators"
    DISTRIBUTION_UPDATE_FAILED = "distribution_update_failed"
