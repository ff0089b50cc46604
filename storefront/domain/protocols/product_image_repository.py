"""ProductImageRepository protocol for image metadata persistence.

Port (interface) for hexagonal architecture.
"""

from typing import Protocol
from uuid import UUID

from storefront.domain.entities.product_image import ProductImage


class ProductImageRepository(Protocol):
    """Product image repository protocol (port)."""

    async def find_by_id(self, image_id: UUID) -> ProductImage | None:
        """Find image by ID.

        Args:
            image_id: Image identifier.

        Returns:
            ProductImage if found, None otherwise.
        """
        ...

    async def exists_by_storage_key(self, storage_key: str) -> bool:
        """Check whether an image already uses this storage key."""
        ...

    async def list_by_product(self, product_id: UUID) -> list[ProductImage]:
        """List images of a product, oldest first."""
        ...

    async def save(self, image: ProductImage) -> None:
        """Insert image metadata."""
        ...

    async def delete(self, image_id: UUID) -> None:
        """Delete image metadata by ID."""
        ...

    async def delete_by_product(self, product_id: UUID) -> int:
        """Delete all image metadata for a product.

        Returns:
            Number of rows deleted.
        """
        ...
