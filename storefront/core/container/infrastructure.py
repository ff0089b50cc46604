"""Infrastructure dependency factories.

Application-scoped singletons for core infrastructure services:
- Database (PostgreSQL)
- Logging (structlog console)
- Metrics (in-memory counters)
- Password hashing (bcrypt)
- Verification tokens and clock
- Notification publisher (SNS or no-op)
- Object storage (S3 or no-op)

Adapter selection happens here (composition root); the application layer
only sees protocols.
"""

from functools import lru_cache
from typing import TYPE_CHECKING, AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession

from storefront.core.config import get_settings
from storefront.infrastructure.persistence.database import Database

if TYPE_CHECKING:
    from storefront.domain.protocols import (
        ClockProtocol,
        LoggerProtocol,
        NotificationPublisherProtocol,
        ObjectStorageProtocol,
        PasswordHashingProtocol,
        TokenGeneratorProtocol,
    )
    from storefront.infrastructure.metrics import InMemoryMetrics


# ============================================================================
# Application-Scoped Dependencies (Singletons)
# ============================================================================


@lru_cache()
def get_database() -> Database:
    """Get database manager singleton (app-scoped).

    Use get_db_session() for per-request sessions.

    Returns:
        Database manager instance.
    """
    settings = get_settings()
    return Database(
        database_url=settings.database_url,
        echo=settings.db_echo,
    )


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from storefront.infrastructure.logging import ConsoleAdapter

    settings = get_settings()
    return ConsoleAdapter(
        use_json=not settings.is_development, level=settings.log_level
    )


@lru_cache()
def get_metrics() -> "InMemoryMetrics":
    """Get the metrics sink singleton (app-scoped)."""
    from storefront.infrastructure.metrics import InMemoryMetrics

    return InMemoryMetrics()


@lru_cache()
def get_password_service() -> "PasswordHashingProtocol":
    """Get password hashing service singleton (app-scoped).

    Returns BcryptPasswordService with the configured cost factor.
    """
    from storefront.infrastructure.security import BcryptPasswordService

    return BcryptPasswordService(cost_factor=get_settings().bcrypt_rounds)


@lru_cache()
def get_token_generator() -> "TokenGeneratorProtocol":
    from storefront.infrastructure.security import VerificationTokenGenerator

    return VerificationTokenGenerator()


@lru_cache()
def get_clock() -> "ClockProtocol":
    from storefront.infrastructure.security import SystemClock

    return SystemClock()


@lru_cache()
def get_notification_publisher() -> "NotificationPublisherProtocol":
    """Get notification publisher singleton (app-scoped).

    Returns SNSPublisher when SNS_TOPIC_ARN is set, NoOpPublisher otherwise.
    """
    settings = get_settings()
    if not settings.notifications_enabled:
        from storefront.infrastructure.messaging import NoOpPublisher

        return NoOpPublisher(logger=get_logger())

    import boto3

    from storefront.infrastructure.messaging import SNSPublisher

    client = boto3.client(
        "sns",
        region_name=settings.aws_region,
        endpoint_url=settings.aws_endpoint_url,
    )
    return SNSPublisher(client)


@lru_cache()
def get_object_storage() -> "ObjectStorageProtocol":
    """Get object storage singleton (app-scoped).

    Returns S3ObjectStorage when S3_BUCKET_NAME is set, NoOpObjectStorage
    otherwise.
    """
    settings = get_settings()
    if not settings.object_storage_enabled:
        from storefront.infrastructure.storage import NoOpObjectStorage

        return NoOpObjectStorage(logger=get_logger())

    import boto3

    from storefront.infrastructure.storage import S3ObjectStorage

    client = boto3.client(
        "s3",
        region_name=settings.aws_region,
        endpoint_url=settings.aws_endpoint_url,
    )
    return S3ObjectStorage(
        client=client,
        bucket=settings.s3_bucket_name,
        logger=get_logger(),
        metrics=get_metrics(),
    )


# ============================================================================
# Request-Scoped Dependencies (Per-Request)
# ============================================================================


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Get database session (request-scoped).

    Commits whatever is still pending on success, rolls back on exception,
    always closes.

    Usage:
        async for session in get_db_session():
            handler = get_create_account_handler(session)
            result = await handler.handle(command)
    """
    db = get_database()
    async with db.get_session() as session:
        yield session
