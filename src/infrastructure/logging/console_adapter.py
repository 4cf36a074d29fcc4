"""Console logging adapter.

Writes structured logs to stderr using structlog, so they never mix with
command output on stdout.
- Development: human-readable console renderer with colors
- Testing/CI/production: JSON renderer for machine parsing

Does NOT inherit from LoggerProtocol (PEP 544 structural subtyping).
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog


def configure_logging(*, use_json: bool = False, log_level: str = "INFO") -> None:
    """Configure structlog for the whole process.

    Store adapters and the auth client log through structlog.get_logger()
    directly, so they pick up the same configuration.

    Args:
        use_json: JSON lines when True, colored console output when False.
        log_level: Minimum level name (DEBUG, INFO, WARNING, ...).
    """
    processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]

    if use_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()))

    level = logging.getLevelNamesMapping().get(log_level.upper(), logging.INFO)

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


class ConsoleAdapter:
    """Console logger for every environment of the client.

    Args:
        use_json: JSON output when True, human-readable when False.
        log_level: Minimum level name.
        name: Logger name added to every entry.
    """

    def __init__(
        self,
        *,
        use_json: bool = False,
        log_level: str = "INFO",
        name: str = "halftrip",
    ) -> None:
        configure_logging(use_json=use_json, log_level=log_level)
        self._logger = structlog.get_logger(logger=name)

    @classmethod
    def _from_logger(cls, logger: Any) -> ConsoleAdapter:
        adapter = cls.__new__(cls)
        adapter._logger = logger
        return adapter

    @staticmethod
    def _with_error(error: Exception | None, context: dict[str, Any]) -> dict[str, Any]:
        if error is not None:
            context["error_type"] = type(error).__name__
            context["error_message"] = str(error)
        return context

    def debug(self, message: str, /, **context: Any) -> None:
        self._logger.debug(message, **context)

    def info(self, message: str, /, **context: Any) -> None:
        self._logger.info(message, **context)

    def warning(self, message: str, /, **context: Any) -> None:
        self._logger.warning(message, **context)

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error, adding error_type and error_message when given one.

        Args:
            message: Event name.
            error: Optional exception instance.
            **context: Structured key-value context.
        """
        self._logger.error(message, **self._with_error(error, context))

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        self._logger.critical(message, **self._with_error(error, context))

    def bind(self, **context: Any) -> ConsoleAdapter:
        """Return a new adapter carrying context on every entry.

        The original adapter is unchanged.
        """
        return self._from_logger(self._logger.bind(**context))

    def with_context(self, **context: Any) -> ConsoleAdapter:
        """Alias for bind()."""
        return self.bind(**context)
