"""Secrets Manager rotation Lambda.

Secrets Manager invokes the function once per rotation step with:

    {
        "SecretId": "arn:aws:secretsmanager:...",
        "ClientRequestToken": "<version id>",
        "Step": "createSecret" | "setSecret" | "testSecret" | "finishSecret"
    }

A successful return completes the step. Raising makes Secrets Manager
retry the same step with the same token, which every step tolerates.
"""

from typing import Any

from secretguard.application.commands.rotation_commands import RotateSecret
from secretguard.core.container import get_logger, get_rotate_secret_handler
from secretguard.core.errors import DomainError
from secretguard.core.result import Failure

EVENT_FIELDS = ("SecretId", "ClientRequestToken", "Step")


class RotationFailedError(Exception):
    """A rotation step did not complete.

    Attributes:
        error: The domain error returned by the step, if any.
    """

    def __init__(self, message: str, error: DomainError | None = None) -> None:
        super().__init__(message)
        self.error = error


def parse_event(event: dict[str, Any]) -> RotateSecret:
    """Build the RotateSecret command from a rotation event.

    Raises:
        RotationFailedError: If a required field is missing or empty.
    """
    missing = [name for name in EVENT_FIELDS if not event.get(name)]
    if missing:
        raise RotationFailedError(
            f"Rotation event missing fields: {', '.join(missing)}"
        )
    return RotateSecret(
        secret_id=event["SecretId"],
        token=event["ClientRequestToken"],
        step=event["Step"],
    )


def handler(event: dict[str, Any], context: Any) -> None:
    """Run one rotation step.

    Args:
        event: Secrets Manager rotation event.
        context: Lambda context (unused).

    Raises:
        RotationFailedError: If the step failed; Secrets Manager retries it.
    """
    try:
        command = parse_event(event)
    except RotationFailedError as e:
        get_logger().error("Invalid rotation event", error=e)
        raise

    result = get_rotate_secret_handler().handle(command)
    if isinstance(result, Failure):
        raise RotationFailedError(str(result.error), error=result.error)
