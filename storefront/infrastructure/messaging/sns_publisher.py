"""AWS SNS adapter for verification notifications.

Implements NotificationPublisherProtocol with a boto3 SNS client. boto3 is
synchronous, so each call runs in the default executor to keep the event
loop free.

File: sns_publisher.py -> class SNSPublisher (PEP 8 naming)
"""

import asyncio
from functools import partial
from typing import Any

from botocore.exceptions import BotoCoreError, ClientError

from storefront.core.enums import ErrorCode
from storefront.core.result import Failure, Result, Success
from storefront.infrastructure.enums import InfrastructureErrorCode
from storefront.infrastructure.errors import ExternalServiceError


class SNSPublisher:
    """Publishes messages to an SNS topic.

    Example:
        >>> publisher = SNSPublisher(boto3.client("sns", region_name="us-east-1"))
        >>> result = await publisher.publish(topic_arn, '{"email": "..."}')
        >>> # Success("message-id")
    """

    def __init__(self, client: Any) -> None:
        """Initialize with a boto3 SNS client.

        Args:
            client: boto3 SNS client (injected so tests can use moto).
        """
        self.client = client

    async def publish(
        self, topic: str, payload: str
    ) -> Result[str, ExternalServiceError]:
        """Publish one message.

        Args:
            topic: SNS topic ARN.
            payload: Message body.

        Returns:
            Success(message_id) on acceptance.
            Failure(ExternalServiceError) if SNS rejected the call.
        """
        loop = asyncio.get_running_loop()
        try:
            response = await loop.run_in_executor(
                None, partial(self.client.publish, TopicArn=topic, Message=payload)
            )
        except self.client.exceptions.NotFoundException:
            return Failure(
                error=ExternalServiceError(
                    code=ErrorCode.DISPATCH_FAILURE,
                    message=f"SNS topic not found: {topic}",
                    infrastructure_code=InfrastructureErrorCode.NOTIFICATION_TOPIC_NOT_FOUND,
                    service_name="sns",
                )
            )
        except (ClientError, BotoCoreError) as e:
            return Failure(
                error=ExternalServiceError(
                    code=ErrorCode.DISPATCH_FAILURE,
                    message="SNS publish failed",
                    infrastructure_code=InfrastructureErrorCode.NOTIFICATION_PUBLISH_FAILED,
                    service_name="sns",
                    details={"error": str(e)},
                )
            )

        return Success(value=response["MessageId"])
