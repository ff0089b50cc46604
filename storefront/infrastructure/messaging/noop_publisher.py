"""No-op notification publisher.

Selected by the container when no SNS topic is configured (local
development). Accepts every message and logs that it was dropped.
"""

from uuid_extensions import uuid7

from storefront.core.errors import DomainError
from storefront.core.result import Result, Success
from storefront.domain.protocols import LoggerProtocol


class NoOpPublisher:
    """Publisher that delivers nothing."""

    def __init__(self, logger: LoggerProtocol) -> None:
        self._logger = logger

    async def publish(self, topic: str, payload: str) -> Result[str, DomainError]:
        message_id = f"noop-{uuid7()}"
        self._logger.debug(
            "notification_dropped", topic=topic, message_id=message_id
        )
        return Success(value=message_id)
