"""LoggerProtocol definition for structured logging.

Backend-agnostic structured logging port. Messages are snake_case event
names; everything else goes in key-value context.

Security:
    - NEVER log passwords or full verification tokens
    - Tokens are logged as an 8-character preview at most

Usage:
    from storefront.core.container import get_logger

    logger = get_logger()
    logger.info("account_created", account_id=str(account.id))

    scoped = logger.bind(handler="verify_email")
    scoped.warning("verification_rejected", reason="token_expired")
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters.

    Supports the 5 standard levels and context binding.
    """

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
            message: Event name.
            error: Optional exception instance; implementations add
                error_type and error_message fields.
            **context: Structured key-value context fields.
        """
        ...

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log a critical-level message.

        Reserved for failures needing immediate attention, such as a
        data-integrity fault.
        """
        ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Return new logger with permanently bound context.

        The original logger is unchanged.
        """
        ...
