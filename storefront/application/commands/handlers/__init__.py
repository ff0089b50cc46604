"""Command handlers."""

from storefront.application.commands.handlers.authenticate_account_handler import (
    AuthenticateAccountHandler,
)
from storefront.application.commands.handlers.create_account_handler import (
    CreateAccountHandler,
)
from storefront.application.commands.handlers.create_product_handler import (
    CreateProductHandler,
)
from storefront.application.commands.handlers.delete_account_handler import (
    DeleteAccountHandler,
)
from storefront.application.commands.handlers.delete_product_handler import (
    DeleteProductHandler,
)
from storefront.application.commands.handlers.delete_product_image_handler import (
    DeleteProductImageHandler,
)
from storefront.application.commands.handlers.resend_verification_handler import (
    ResendOutcome,
    ResendVerificationHandler,
)
from storefront.application.commands.handlers.sweep_expired_verifications_handler import (
    SweepExpiredVerificationsHandler,
)
from storefront.application.commands.handlers.update_account_handler import (
    UpdateAccountHandler,
)
from storefront.application.commands.handlers.update_product_handler import (
    UpdateProductHandler,
)
from storefront.application.commands.handlers.upload_product_image_handler import (
    UploadProductImageHandler,
    build_storage_key,
)
from storefront.application.commands.handlers.verify_email_handler import (
    VerifyEmailHandler,
)

__all__ = [
    "AuthenticateAccountHandler",
    "CreateAccountHandler",
    "CreateProductHandler",
    "DeleteAccountHandler",
    "DeleteProductHandler",
    "DeleteProductImageHandler",
    "ResendOutcome",
    "ResendVerificationHandler",
    "SweepExpiredVerificationsHandler",
    "UpdateAccountHandler",
    "UpdateProductHandler",
    "UploadProductImageHandler",
    "VerifyEmailHandler",
    "build_storage_key",
]
