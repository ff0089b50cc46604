"""Result DTOs returned by command and query handlers."""

from storefront.application.dtos.account_dtos import (
    AccountResult,
    AccountSignup,
    AuthenticatedPrincipal,
    VerificationResult,
)
from storefront.application.dtos.product_dtos import (
    ProductImageResult,
    ProductResult,
)

__all__ = [
    "AccountResult",
    "AccountSignup",
    "AuthenticatedPrincipal",
    "ProductImageResult",
    "ProductResult",
    "VerificationResult",
]
