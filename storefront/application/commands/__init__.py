"""Commands - Write operations that change state.

Commands are immutable dataclasses with imperative names. Each has a handler
in ``handlers/`` that executes it and returns a Result.
"""

from storefront.application.commands.account_commands import (
    AuthenticateAccount,
    CreateAccount,
    DeleteAccount,
    ResendVerification,
    SweepExpiredVerifications,
    UpdateAccount,
    VerifyEmail,
)
from storefront.application.commands.product_commands import (
    CreateProduct,
    DeleteProduct,
    DeleteProductImage,
    UpdateProduct,
    UploadProductImage,
)

__all__ = [
    # Accounts
    "AuthenticateAccount",
    "CreateAccount",
    "DeleteAccount",
    "ResendVerification",
    "SweepExpiredVerifications",
    "UpdateAccount",
    "VerifyEmail",
    # Products
    "CreateProduct",
    "DeleteProduct",
    "DeleteProductImage",
    "UpdateProduct",
    "UploadProductImage",
]
