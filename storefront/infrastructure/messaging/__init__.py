"""Notification publishers."""

from storefront.infrastructure.messaging.noop_publisher import NoOpPublisher
from storefront.infrastructure.messaging.sns_publisher import SNSPublisher

__all__ = ["NoOpPublisher", "SNSPublisher"]
