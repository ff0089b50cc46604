"""Domain entities for business logic.

Pure business logic entities with no framework dependencies.
"""

from storefront.domain.entities.account import Account
from storefront.domain.entities.product import Product
from storefront.domain.entities.product_image import ProductImage
from storefront.domain.entities.verification_record import VerificationRecord

__all__ = [
    "Account",
    "Product",
    "ProductImage",
    "VerificationRecord",
]
