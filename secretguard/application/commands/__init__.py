"""Application commands (CQRS write side)."""

from secretguard.application.commands.rotation_commands import RotateSecret

__all__ = ["RotateSecret"]
