"""SQLAlchemy repository implementations."""

from storefront.infrastructure.persistence.repositories.account_repository import (
    AccountRepository,
)
from storefront.infrastructure.persistence.repositories.product_image_repository import (
    ProductImageRepository,
)
from storefront.infrastructure.persistence.repositories.product_repository import (
    ProductRepository,
)
from storefront.infrastructure.persistence.repositories.unit_of_work import (
    SqlAlchemyUnitOfWork,
)
from storefront.infrastructure.persistence.repositories.verification_record_repository import (
    VerificationRecordRepository,
)

__all__ = [
    "AccountRepository",
    "ProductImageRepository",
    "ProductRepository",
    "SqlAlchemyUnitOfWork",
    "VerificationRecordRepository",
]
