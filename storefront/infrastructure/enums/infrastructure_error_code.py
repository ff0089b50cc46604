"""Infrastructure-specific error codes.

These are internal codes for tracking infrastructure failures.
They are mapped to domain ErrorCode when flowing to domain layer.

Categories:
- Notification endpoint errors (NOTIFICATION_*)
- Object storage errors (OBJECT_STORAGE_*)
"""

from enum import Enum


class InfrastructureErrorCode(Enum):
    """Infrastructure-specific error codes."""

    # Notification endpoint (SNS)
    NOTIFICATION_PUBLISH_FAILED = "notification_publish_failed"
    NOTIFICATION_TOPIC_NOT_FOUND = "notification_topic_not_found"

    # Object storage (S3)
    OBJECT_STORAGE_PUT_FAILED = "object_storage_put_failed"
    OBJECT_STORAGE_DELETE_FAILED = "object_storage_delete_failed"
    OBJECT_STORAGE_HEAD_FAILED = "object_storage_head_failed"
    OBJECT_STORAGE_BUCKET_NOT_FOUND = "object_storage_bucket_not_found"
