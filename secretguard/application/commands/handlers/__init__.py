"""Command handlers."""

from secretguard.application.commands.handlers.rotate_secret_handler import (
    RotateSecretHandler,
)

__all__ = ["RotateSecretHandler"]
