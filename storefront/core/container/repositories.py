"""Repository dependency factories.

Request-scoped repository instances. Every repository of one request
shares the same session, and the unit of work commits them together.
"""

from typing import TYPE_CHECKING

from sqlalchemy.ext.asyncio import AsyncSession

if TYPE_CHECKING:
    from storefront.infrastructure.persistence.repositories import (
        AccountRepository,
        ProductImageRepository,
        ProductRepository,
        SqlAlchemyUnitOfWork,
        VerificationRecordRepository,
    )


def get_account_repository(session: AsyncSession) -> "AccountRepository":
    from storefront.infrastructure.persistence.repositories import AccountRepository

    return AccountRepository(session=session)


def get_product_repository(session: AsyncSession) -> "ProductRepository":
    from storefront.infrastructure.persistence.repositories import ProductRepository

    return ProductRepository(session=session)


def get_product_image_repository(session: AsyncSession) -> "ProductImageRepository":
    from storefront.infrastructure.persistence.repositories import (
        ProductImageRepository,
    )

    return ProductImageRepository(session=session)


def get_verification_record_repository(
    session: AsyncSession,
) -> "VerificationRecordRepository":
    from storefront.infrastructure.persistence.repositories import (
        VerificationRecordRepository,
    )

    return VerificationRecordRepository(session=session)


def get_unit_of_work(session: AsyncSession) -> "SqlAlchemyUnitOfWork":
    from storefront.infrastructure.persistence.repositories import (
        SqlAlchemyUnitOfWork,
    )

    return SqlAlchemyUnitOfWork(session=session)
