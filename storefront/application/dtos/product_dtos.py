"""Product DTOs (Data Transfer Objects)."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from storefront.domain.entities import Product, ProductImage


@dataclass(frozen=True, kw_only=True)
class ProductResult:
    """Product view.

    Attributes:
        id: Product identifier.
        sku: Stock keeping unit.
        owner_id: Owning account.
        name: Display name.
        description: Description.
        manufacturer: Manufacturer.
        quantity: Units in stock.
        created_at: Creation timestamp.
        updated_at: Last modification timestamp.
    """

    id: UUID
    sku: str
    owner_id: UUID
    name: str
    description: str
    manufacturer: str
    quantity: int
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, product: Product) -> "ProductResult":
        return cls(
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


@dataclass(frozen=True, kw_only=True)
class ProductImageResult:
    """Product image view.

    Attributes:
        id: Image identifier.
        product_id: Parent product.
        storage_key: Object storage key.
        file_name: Original file name.
        content_type: MIME type.
        created_at: Upload timestamp.
    """

    id: UUID
    product_id: UUID
    storage_key: str
    file_name: str
    content_type: str
    created_at: datetime

    @classmethod
    def from_entity(cls, image: ProductImage) -> "ProductImageResult":
        return cls(
            id=image.id,
            product_id=image.product_id,
            storage_key=image.storage_key,
            file_name=image.file_name,
            content_type=image.content_type,
            created_at=image.created_at,
        )
