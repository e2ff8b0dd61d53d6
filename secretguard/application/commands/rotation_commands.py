"""Secret rotation commands (CQRS write operations).

Pattern:
- Commands are data containers (no logic)
- Handlers execute business logic and return Result types
"""

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class RotateSecret:
    """Run one step of the secret rotation protocol.

    Built from a Secrets Manager rotation event. ``step`` is kept as the raw
    string so an unknown step is reported as ROTATION_INVALID_STEP rather
    than failing construction.

    Attributes:
        secret_id: Secret ARN (event ``SecretId``).
        token: Version id of the rotation attempt (``ClientRequestToken``).
        step: Step name (``Step``): createSecret, setSecret, testSecret, finishSecret.

    Example:
        >>> command = RotateSecret(
        ...     secret_id="arn:aws:secretsmanager:eu-west-1:123456789012:secret:api-key",
        ...     token="0d3ea5c4-6f7b-4f8a-9f1b-3c3e1e0e6a11",
        ...     step="createSecret",
        ... )
        >>> result = handler.handle(command)
    """

    secret_id: str
    token: str
    step: str
