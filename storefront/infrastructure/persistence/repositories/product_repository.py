"""ProductRepository - SQLAlchemy implementation of ProductRepository protocol."""

from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.domain.entities import Product
from storefront.infrastructure.persistence.models import ProductModel


class ProductRepository:
    """SQLAlchemy implementation of ProductRepository protocol.

    Attributes:
        session: SQLAlchemy async session for database operations.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, product_id: UUID) -> Product | None:
        model = await self.session.get(ProductModel, product_id)
        return self._to_domain(model) if model else None

    async def exists_by_sku(self, sku: str) -> bool:
        stmt = select(ProductModel.id).where(ProductModel.sku == sku)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def list_all(self) -> list[Product]:
        """List every product, oldest first.

        Returns:
            List of products (empty if none).
        """
        stmt = select(ProductModel).order_by(ProductModel.created_at, ProductModel.id)
        result = await self.session.execute(stmt)
        return [self._to_domain(m) for m in result.scalars().all()]

    async def list_by_owner(self, owner_id: UUID) -> list[Product]:
        """List products owned by an account, oldest first.

        Args:
            owner_id: Owning account id.

        Returns:
            List of products (empty if none).
        """
        stmt = (
            select(ProductModel)
            .where(ProductModel.owner_id == owner_id)
            .order_by(ProductModel.created_at, ProductModel.id)
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(m) for m in result.scalars().all()]

    async def save(self, product: Product) -> None:
        """Save a product (create or update).

        The owner is never reassigned, so owner_id is not copied on update.

        Raises:
            IntegrityError: If the SKU already exists.
        """
        existing = await self.session.get(ProductModel, product.id)
        if existing is None:
            self.session.add(self._to_model(product))
        else:
            existing.sku = product.sku
            existing.name = product.name
            existing.description = product.description
            existing.manufacturer = product.manufacturer
            existing.quantity = product.quantity
            existing.updated_at = product.updated_at
        await self.session.flush()

    async def delete(self, product_id: UUID) -> None:
        stmt = delete(ProductModel).where(ProductModel.id == product_id)
        await self.session.execute(stmt)
        await self.session.flush()

    def _to_domain(self, model: ProductModel) -> Product:
        return Product(
            id=model.id,
            sku=model.sku,
            owner_id=model.owner_id,
            name=model.name,
            description=model.description,
            manufacturer=model.manufacturer,
            quantity=model.quantity,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_model(self, product: Product) -> ProductModel:
        return ProductModel(
            id=product.id,
            sku=product.sku,
            owner_id=product.owner_id,
            name=product.name,
            description=product.description,
            manufacturer=product.manufacturer,
            quantity=product.quantity,
            created_at=product.created_at,
            updated_at=product.updated_at,
        )
