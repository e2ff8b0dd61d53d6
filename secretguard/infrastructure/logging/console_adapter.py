"""Console logging adapter.

Outputs structured logs to stdout using structlog. On Lambda, stdout lands
in CloudWatch Logs, so no separate shipping adapter is needed.
- Production/testing: JSON renderer for machine parsing
- Development: human-readable console renderer with colors

Does NOT inherit from LoggerProtocol (PEP 544
structural subtyping).
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog


class ConsoleAdapter:
    """Structured stdout logger for rotation and authorization events.

    Args:
        use_json (bool): JSON output when True, human-readable when False.
        level (str): Minimum level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
    """

    def __init__(self, *, use_json: bool = True, level: str = "INFO") -> None:
        """Configure structlog for stdout.

        Unknown level names fall back to INFO.

        Args:
            use_json (bool): Render JSON lines instead of colored console output.
            level (str): Minimum level name to emit.
        """
        processors: list[structlog.types.Processor] = [
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
        ]

        if use_json:
            processors.append(structlog.processors.JSONRenderer())
        else:
            processors.append(structlog.dev.ConsoleRenderer(colors=True))

        structlog.configure(
            processors=processors,
            wrapper_class=structlog.make_filtering_bound_logger(
                logging.getLevelNamesMapping().get(level.upper(), logging.INFO)
            ),
            context_class=dict,
            logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
            cache_logger_on_first_use=True,
        )

        self._logger = structlog.get_logger()

    def debug(self, message: str, /, **context: Any) -> None:
        """Log a debug message, such as a cache hit for a secret.

        Args:
            message (str): Event text.
            **context: Structured key-value context (never secret values).
        """
        self._logger.debug(message, **context)

    def info(self, message: str, /, **context: Any) -> None:
        """Log an info message, such as a completed rotation step.

        Args:
            message (str): Event text.
            **context: Structured key-value context.
        """
        self._logger.info(message, **context)

    def warning(self, message: str, /, **context: Any) -> None:
        """Log a warning, such as a store failure during authorization.

        Args:
            message (str): Event text.
            **context: Structured key-value context.
        """
        self._logger.warning(message, **context)

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error message with optional exception details.

        Args:
            message (str): Event text.
            error (Exception | None): Optional exception; its type and text are
                added as ``error_type`` and ``error_message``.
            **context: Structured key-value context.
        """
        if error is not None:
            context["error_type"] = type(error).__name__
            context["error_message"] = str(error)
        self._logger.error(message, **context)

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log a critical message with optional exception details.

        Args:
            message (str): Event text.
            error (Exception | None): Optional exception, rendered as for error().
            **context: Structured key-value context.
        """
        if error is not None:
            context["error_type"] = type(error).__name__
            context["error_message"] = str(error)
        self._logger.critical(message, **context)

    def bind(self, **context: Any) -> ConsoleAdapter:
        """Return new adapter with bound context.

        Args:
            **context: Context added to every later event, e.g. ``secret_id``.

        Returns:
            ConsoleAdapter: New adapter sharing the structlog configuration.
        """
        bound_adapter = ConsoleAdapter.__new__(ConsoleAdapter)
        bound_adapter._logger = self._logger.bind(**context)
        return bound_adapter

    def with_context(self, **context: Any) -> ConsoleAdapter:
        """Return new adapter with bound context (same as bind()).

        Args:
            **context: Context added to every later event.

        Returns:
            ConsoleAdapter: New adapter with the context bound.
        """
        return self.bind(**context)
