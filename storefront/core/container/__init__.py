"""Container module - Centralized dependency injection.

Re-exports all factory functions from submodules:

    from storefront.core.container import get_logger, get_create_account_handler

Organization:
- infrastructure: App-scoped services (database, logging, metrics, AWS)
- repositories: Request-scoped repository and unit-of-work factories
- handlers: Request-scoped handler factories and the sweep job
"""

# Infrastructure services
from storefront.core.container.infrastructure import (
    get_clock,
    get_database,
    get_db_session,
    get_logger,
    get_metrics,
    get_notification_publisher,
    get_object_storage,
    get_password_service,
    get_token_generator,
)

# Repositories
from storefront.core.container.repositories import (
    get_account_repository,
    get_product_image_repository,
    get_product_repository,
    get_unit_of_work,
    get_verification_record_repository,
)

# Handlers and jobs
from storefront.core.container.handlers import (
    get_authenticate_account_handler,
    get_create_account_handler,
    get_create_product_handler,
    get_delete_account_handler,
    get_delete_product_handler,
    get_delete_product_image_handler,
    get_get_account_handler,
    get_get_product_handler,
    get_get_product_image_handler,
    get_list_my_products_handler,
    get_list_product_images_handler,
    get_list_products_handler,
    get_notification_dispatcher,
    get_ownership_guard,
    get_resend_verification_handler,
    get_sweep_expired_verifications_handler,
    get_update_account_handler,
    get_update_product_handler,
    get_upload_product_image_handler,
    get_verification_lifecycle,
    get_verification_sweeper,
    get_verify_email_handler,
    run_verification_sweep,
)

__all__ = [
    # Infrastructure
    "get_clock",
    "get_database",
    "get_db_session",
    "get_logger",
    "get_metrics",
    "get_notification_publisher",
    "get_object_storage",
    "get_password_service",
    "get_token_generator",
    # Repositories
    "get_account_repository",
    "get_product_image_repository",
    "get_product_repository",
    "get_unit_of_work",
    "get_verification_record_repository",
    # Services
    "get_notification_dispatcher",
    "get_ownership_guard",
    "get_verification_lifecycle",
    # Handlers
    "get_authenticate_account_handler",
    "get_create_account_handler",
    "get_create_product_handler",
    "get_delete_account_handler",
    "get_delete_product_handler",
    "get_delete_product_image_handler",
    "get_get_account_handler",
    "get_get_product_handler",
    "get_get_product_image_handler",
    "get_list_my_products_handler",
    "get_list_product_images_handler",
    "get_list_products_handler",
    "get_resend_verification_handler",
    "get_sweep_expired_verifications_handler",
    "get_update_account_handler",
    "get_update_product_handler",
    "get_upload_product_image_handler",
    "get_verify_email_handler",
    # Jobs
    "get_verification_sweeper",
    "run_verification_sweep",
]
