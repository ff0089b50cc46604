"""Database models.

Importing this package registers every table on BaseModel.metadata.
"""

from storefront.infrastructure.persistence.base import BaseModel
from storefront.infrastructure.persistence.models.account import AccountModel
from storefront.infrastructure.persistence.models.email_verification import (
    EmailVerificationModel,
)
from storefront.infrastructure.persistence.models.product import ProductModel
from storefront.infrastructure.persistence.models.product_image import (
    ProductImageModel,
)

__all__ = [
    "AccountModel",
    "BaseModel",
    "EmailVerificationModel",
    "ProductImageModel",
    "ProductModel",
]
