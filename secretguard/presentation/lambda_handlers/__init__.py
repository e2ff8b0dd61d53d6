"""AWS Lambda entry points."""

from secretguard.presentation.lambda_handlers.rotation import (
    RotationFailedError,
    handler,
)

__all__ = ["RotationFailedError", "handler"]
