"""NotificationPublisherProtocol: external pub/sub endpoint.

Implementations:
    - SNSNotificationPublisher: AWS SNS via boto3 (production)
    - NoOpNotificationPublisher: logs and discards (no topic configured)
"""

from typing import Protocol

from storefront.core.errors import DomainError
from storefront.core.result import Result


class NotificationPublisherProtocol(Protocol):
    """Publish serialized messages to a topic."""

    async def publish(self, topic: str, payload: str) -> Result[str, DomainError]:
        """Publish one message.

        Args:
            topic: Destination topic identifier (e.g. an SNS topic ARN).
            payload: Serialized message body.

        Returns:
            Success(message_id) when the endpoint accepted the message.
            Failure(DomainError) when it did not.
        """
        ...
