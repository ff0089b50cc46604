"""ProductRepository protocol for product persistence.

Port (interface) for hexagonal architecture.
"""

from typing import Protocol
from uuid import UUID

from storefront.domain.entities.product import Product


class ProductRepository(Protocol):
    """Product repository protocol (port)."""

    async def find_by_id(self, product_id: UUID) -> Product | None:
        """Find product by ID.

        Args:
            product_id: Product identifier.

        Returns:
            Product if found, None otherwise.
        """
        ...

    async def exists_by_sku(self, sku: str) -> bool:
        """Check whether a product already uses this SKU."""
        ...

    async def list_all(self) -> list[Product]:
        """List every product, newest first."""
        ...

    async def list_by_owner(self, owner_id: UUID) -> list[Product]:
        """List products owned by an account, newest first."""
        ...

    async def save(self, product: Product) -> None:
        """Insert a new product or update an existing one."""
        ...

    async def delete(self, product_id: UUID) -> None:
        """Delete a product by ID."""
        ...
