"""Logging infrastructure package."""

from secretguard.infrastructure.logging.console_adapter import ConsoleAdapter

__all__ = ["ConsoleAdapter"]
