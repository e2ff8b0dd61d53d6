"""LoggerProtocol definition for structured logging.

Standardizes structured logging across the package while remaining
backend-agnostic. Implementations MUST emit structured records (message +
key-value context).

Log Levels:
    - DEBUG: Per-request authorization decisions
    - INFO: Rotation steps, cache clears
    - WARNING: Degraded behavior (rotation callback skipped)
    - ERROR: Operation failed, process continues
    - CRITICAL: Process cannot serve requests

Security:
    - NEVER log secret values or presented API keys

Usage:
    logger: LoggerProtocol = get_logger()
    logger.info("Rotation step completed", secret_id=secret_id, step=step)

    step_logger = logger.bind(secret_id=secret_id, token=token)
    step_logger.info("Pending version created")
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters."""

    def debug(self, message: str, /, **context: Any) -> None:
        """Log a debug-level message."""
        ...

    def info(self, message: str, /, **context: Any) -> None:
        """Log an info-level message."""
        ...

    def warning(self, message: str, /, **context: Any) -> None:
        """Log a warning-level message."""
        ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error-level message with optional exception details.

        Args:
            message: Human-readable message (avoid f-strings; use context).
            error: Optional exception instance; implementation may include
                error_type and error_message fields.
            **context: Structured key-value context fields.
        """
        ...

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log a critical-level message for unrecoverable failures."""
        ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Return new logger with permanently bound context.

        The original logger instance remains unchanged.
        """
        ...

    def with_context(self, **context: Any) -> LoggerProtocol:
        """Alias for bind()."""
        ...
