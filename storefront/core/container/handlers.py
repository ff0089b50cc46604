"""Handler factories.

Each factory builds a handler for one request-scoped session, wiring
repositories, the unit of work and app-scoped infrastructure.

Usage:
    async for session in get_db_session():
        handler = get_create_account_handler(session)
        result = await handler.handle(CreateAccount(...))
"""

from sqlalchemy.ext.asyncio import AsyncSession

from storefront.application.commands import SweepExpiredVerifications
from storefront.application.commands.handlers import (
    AuthenticateAccountHandler,
    CreateAccountHandler,
    CreateProductHandler,
    DeleteAccountHandler,
    DeleteProductHandler,
    DeleteProductImageHandler,
    ResendVerificationHandler,
    SweepExpiredVerificationsHandler,
    UpdateAccountHandler,
    UpdateProductHandler,
    UploadProductImageHandler,
    VerifyEmailHandler,
)
from storefront.application.queries.handlers import (
    GetAccountHandler,
    GetProductHandler,
    GetProductImageHandler,
    ListMyProductsHandler,
    ListProductImagesHandler,
    ListProductsHandler,
)
from storefront.application.services import (
    NotificationDispatcher,
    OwnershipGuard,
    VerificationLifecycleManager,
)
from storefront.core.config import get_settings
from storefront.core.container.infrastructure import (
    get_clock,
    get_database,
    get_logger,
    get_metrics,
    get_notification_publisher,
    get_object_storage,
    get_password_service,
    get_token_generator,
)
from storefront.core.container.repositories import (
    get_account_repository,
    get_product_image_repository,
    get_product_repository,
    get_unit_of_work,
    get_verification_record_repository,
)
from storefront.core.result import Result
from storefront.domain.errors import StorageError
from storefront.infrastructure.jobs import ExpiredVerificationSweeper

# ============================================================================
# Services (Request-Scoped)
# ============================================================================


def get_verification_lifecycle(session: AsyncSession) -> VerificationLifecycleManager:
    return VerificationLifecycleManager(
        verification_repo=get_verification_record_repository(session),
        account_repo=get_account_repository(session),
        unit_of_work=get_unit_of_work(session),
        clock=get_clock(),
        token_generator=get_token_generator(),
        ttl=get_settings().verification_ttl,
        logger=get_logger(),
        metrics=get_metrics(),
    )


def get_notification_dispatcher() -> NotificationDispatcher:
    return NotificationDispatcher(
        publisher=get_notification_publisher(),
        topic=get_settings().sns_topic_arn or "noop",
        logger=get_logger(),
        metrics=get_metrics(),
    )


def get_ownership_guard(session: AsyncSession) -> OwnershipGuard:
    return OwnershipGuard(
        get_account_repository(session),
        get_product_repository(session),
        get_product_image_repository(session),
    )


# ============================================================================
# Account Handlers
# ============================================================================


def get_create_account_handler(session: AsyncSession) -> CreateAccountHandler:
    return CreateAccountHandler(
        account_repo=get_account_repository(session),
        unit_of_work=get_unit_of_work(session),
        password_service=get_password_service(),
        lifecycle=get_verification_lifecycle(session),
        dispatcher=get_notification_dispatcher(),
        clock=get_clock(),
        logger=get_logger(),
    )


def get_authenticate_account_handler(
    session: AsyncSession,
) -> AuthenticateAccountHandler:
    return AuthenticateAccountHandler(
        account_repo=get_account_repository(session),
        password_service=get_password_service(),
        logger=get_logger(),
    )


def get_update_account_handler(session: AsyncSession) -> UpdateAccountHandler:
    return UpdateAccountHandler(
        guard=get_ownership_guard(session),
        account_repo=get_account_repository(session),
        unit_of_work=get_unit_of_work(session),
        password_service=get_password_service(),
        clock=get_clock(),
        logger=get_logger(),
    )


def get_delete_account_handler(session: AsyncSession) -> DeleteAccountHandler:
    return DeleteAccountHandler(
        account_repo=get_account_repository(session),
        product_repo=get_product_repository(session),
        image_repo=get_product_image_repository(session),
        verification_repo=get_verification_record_repository(session),
        unit_of_work=get_unit_of_work(session),
        object_storage=get_object_storage(),
        logger=get_logger(),
    )


def get_verify_email_handler(session: AsyncSession) -> VerifyEmailHandler:
    return VerifyEmailHandler(get_verification_lifecycle(session))


def get_resend_verification_handler(session: AsyncSession) -> ResendVerificationHandler:
    return ResendVerificationHandler(
        account_repo=get_account_repository(session),
        lifecycle=get_verification_lifecycle(session),
        dispatcher=get_notification_dispatcher(),
        logger=get_logger(),
    )


def get_sweep_expired_verifications_handler(
    session: AsyncSession,
) -> SweepExpiredVerificationsHandler:
    return SweepExpiredVerificationsHandler(
        get_verification_lifecycle(session), get_clock()
    )


def get_get_account_handler(session: AsyncSession) -> GetAccountHandler:
    return GetAccountHandler(get_ownership_guard(session))


# ============================================================================
# Product Handlers
# ============================================================================


def get_create_product_handler(session: AsyncSession) -> CreateProductHandler:
    return CreateProductHandler(
        account_repo=get_account_repository(session),
        product_repo=get_product_repository(session),
        unit_of_work=get_unit_of_work(session),
        clock=get_clock(),
        logger=get_logger(),
    )


def get_update_product_handler(session: AsyncSession) -> UpdateProductHandler:
    return UpdateProductHandler(
        guard=get_ownership_guard(session),
        product_repo=get_product_repository(session),
        unit_of_work=get_unit_of_work(session),
        clock=get_clock(),
        logger=get_logger(),
    )


def get_delete_product_handler(session: AsyncSession) -> DeleteProductHandler:
    return DeleteProductHandler(
        guard=get_ownership_guard(session),
        product_repo=get_product_repository(session),
        image_repo=get_product_image_repository(session),
        unit_of_work=get_unit_of_work(session),
        object_storage=get_object_storage(),
        logger=get_logger(),
    )


def get_upload_product_image_handler(
    session: AsyncSession,
) -> UploadProductImageHandler:
    return UploadProductImageHandler(
        guard=get_ownership_guard(session),
        image_repo=get_product_image_repository(session),
        unit_of_work=get_unit_of_work(session),
        object_storage=get_object_storage(),
        clock=get_clock(),
        logger=get_logger(),
    )


def get_delete_product_image_handler(
    session: AsyncSession,
) -> DeleteProductImageHandler:
    return DeleteProductImageHandler(
        guard=get_ownership_guard(session),
        image_repo=get_product_image_repository(session),
        unit_of_work=get_unit_of_work(session),
        object_storage=get_object_storage(),
        logger=get_logger(),
    )


def get_get_product_handler(session: AsyncSession) -> GetProductHandler:
    return GetProductHandler(get_product_repository(session))


def get_list_products_handler(session: AsyncSession) -> ListProductsHandler:
    return ListProductsHandler(get_product_repository(session))


def get_list_my_products_handler(session: AsyncSession) -> ListMyProductsHandler:
    return ListMyProductsHandler(
        get_account_repository(session), get_product_repository(session)
    )


def get_list_product_images_handler(session: AsyncSession) -> ListProductImagesHandler:
    return ListProductImagesHandler(
        get_product_repository(session), get_product_image_repository(session)
    )


def get_get_product_image_handler(session: AsyncSession) -> GetProductImageHandler:
    return GetProductImageHandler(get_product_image_repository(session))


# ============================================================================
# Background Jobs
# ============================================================================


async def run_verification_sweep() -> Result[int, StorageError]:
    """Run one sweep in a fresh session."""
    async with get_database().get_session() as session:
        handler = get_sweep_expired_verifications_handler(session)
        return await handler.handle(SweepExpiredVerifications())


def get_verification_sweeper() -> ExpiredVerificationSweeper:
    return ExpiredVerificationSweeper(
        sweep=run_verification_sweep,
        interval_seconds=get_settings().sweep_interval_seconds,
        logger=get_logger(),
    )
