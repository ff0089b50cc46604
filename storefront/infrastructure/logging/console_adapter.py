"""Structured stdout logging for storefront handlers.

Every event is a snake_case name plus keyword context, rendered by
structlog. Local runs get colored key=value lines; every other
environment gets one JSON object per line so the log shipper can index
``event``, ``level`` and handler context such as ``account_id``.

Verification tokens never reach the output in full: ``mask_tokens``
cuts them down to the same preview the verification flow logs itself.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

from storefront.core.constants import TOKEN_LOG_PREVIEW_LENGTH

_TOKEN_KEYS = frozenset({"token", "verification_token"})


def mask_tokens(
    logger: Any, method_name: str, event_dict: structlog.types.EventDict
) -> structlog.types.EventDict:
    """Shorten token fields to TOKEN_LOG_PREVIEW_LENGTH characters."""
    for key in _TOKEN_KEYS & event_dict.keys():
        value = event_dict[key]
        if isinstance(value, str) and len(value) > TOKEN_LOG_PREVIEW_LENGTH:
            event_dict[key] = value[:TOKEN_LOG_PREVIEW_LENGTH] + "..."
    return event_dict


def _with_error(error: Exception | None, context: dict[str, Any]) -> dict[str, Any]:
    # Flattened so JSON consumers can filter on error_type directly.
    if error is not None:
        context["error_type"] = type(error).__name__
        context["error_message"] = str(error)
    return context


class ConsoleAdapter:
    """LoggerProtocol implementation writing to stdout.

    Constructing an adapter configures structlog process-wide; the
    container builds exactly one per process.

    Args:
        use_json: One JSON object per line instead of colored text.
        level: Lowest level emitted. Unknown names fall back to INFO.
    """

    def __init__(self, *, use_json: bool = False, level: str = "INFO") -> None:
        renderer: structlog.types.Processor = (
            structlog.processors.JSONRenderer()
            if use_json
            else structlog.dev.ConsoleRenderer(colors=True)
        )
        threshold = logging.getLevelNamesMapping().get(level.upper(), logging.INFO)

        structlog.configure(
            processors=[
                structlog.stdlib.add_log_level,
                structlog.processors.TimeStamper(fmt="iso", utc=True),
                mask_tokens,
                renderer,
            ],
            wrapper_class=structlog.make_filtering_bound_logger(threshold),
            context_class=dict,
            logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
            cache_logger_on_first_use=True,
        )
        self._logger = structlog.get_logger()

    def debug(self, message: str, /, **context: Any) -> None:
        self._logger.debug(message, **context)

    def info(self, message: str, /, **context: Any) -> None:
        self._logger.info(message, **context)

    def warning(self, message: str, /, **context: Any) -> None:
        self._logger.warning(message, **context)

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log a failed store, object-storage or dispatch call.

        ``error`` adds ``error_type`` and ``error_message`` fields.
        """
        self._logger.error(message, **_with_error(error, context))

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        self._logger.critical(message, **_with_error(error, context))

    def bind(self, **context: Any) -> ConsoleAdapter:
        """Adapter whose events all carry ``context``; self is unchanged."""
        scoped = ConsoleAdapter.__new__(ConsoleAdapter)
        scoped._logger = self._logger.bind(**context)
        return scoped
