"""ProductImageRepository - SQLAlchemy implementation of ProductImageRepository protocol."""

from typing import Any, cast
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.domain.entities import ProductImage
from storefront.infrastructure.persistence.models import ProductImageModel


class ProductImageRepository:
    """SQLAlchemy implementation of ProductImageRepository protocol.

    Image metadata is immutable, so save only inserts.

    Attributes:
        session: SQLAlchemy async session for database operations.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, image_id: UUID) -> ProductImage | None:
        model = await self.session.get(ProductImageModel, image_id)
        return self._to_domain(model) if model else None

    async def exists_by_storage_key(self, storage_key: str) -> bool:
        stmt = select(ProductImageModel.id).where(
            ProductImageModel.storage_key == storage_key
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def list_by_product(self, product_id: UUID) -> list[ProductImage]:
        stmt = (
            select(ProductImageModel)
            .where(ProductImageModel.product_id == product_id)
            .order_by(ProductImageModel.created_at, ProductImageModel.id)
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(m) for m in result.scalars().all()]

    async def save(self, image: ProductImage) -> None:
        """Insert image metadata.

        Raises:
            IntegrityError: If the storage key already exists.
        """
        if await self.session.get(ProductImageModel, image.id) is None:
            self.session.add(self._to_model(image))
        await self.session.flush()

    async def delete(self, image_id: UUID) -> None:
        stmt = delete(ProductImageModel).where(ProductImageModel.id == image_id)
        await self.session.execute(stmt)
        await self.session.flush()

    async def delete_by_product(self, product_id: UUID) -> int:
        """Delete all images of a product.

        Args:
            product_id: Parent product id.

        Returns:
            Number of images deleted.
        """
        stmt = delete(ProductImageModel).where(
            ProductImageModel.product_id == product_id
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return cast(Any, result).rowcount or 0

    def _to_domain(self, model: ProductImageModel) -> ProductImage:
        return ProductImage(
            id=model.id,
            product_id=model.product_id,
            storage_key=model.storage_key,
            file_name=model.file_name,
            content_type=model.content_type,
            created_at=model.created_at,
        )

    def _to_model(self, image: ProductImage) -> ProductImageModel:
        return ProductImageModel(
            id=image.id,
            product_id=image.product_id,
            storage_key=image.storage_key,
            file_name=image.file_name,
            content_type=image.content_type,
            created_at=image.created_at,
        )
