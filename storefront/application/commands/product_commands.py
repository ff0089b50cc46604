"""Product and product image commands (CQRS write operations)."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class CreateProduct:
    """Create a product owned by the principal.

    Attributes:
        principal_email: Authenticated identity (becomes the owner).
        sku: Globally unique SKU.
        name: Display name.
        description: Free-text description.
        manufacturer: Manufacturer name.
        quantity: Units in stock (not negative).
    """

    principal_email: str
    sku: str
    name: str
    description: str
    manufacturer: str
    quantity: int


@dataclass(frozen=True, kw_only=True)
class UpdateProduct:
    """Partially update a product owned by the principal.

    None or blank fields are left unchanged. The owner can never change.
    """

    product_id: UUID
    principal_email: str
    sku: str | None = None
    name: str | None = None
    description: str | None = None
    manufacturer: str | None = None
    quantity: int | None = None


@dataclass(frozen=True, kw_only=True)
class DeleteProduct:
    """Delete a product, its images and their stored objects."""

    product_id: UUID
    principal_email: str


@dataclass(frozen=True, kw_only=True)
class UploadProductImage:
    """Attach an image to a product owned by the principal.

    The bytes are forwarded to object storage untouched; only the returned
    key is persisted.

    Attributes:
        product_id: Parent product.
        principal_email: Authenticated identity.
        file_name: Original file name.
        content: Raw file bytes.
        content_type: MIME type (must be an image type).
    """

    product_id: UUID
    principal_email: str
    file_name: str
    content: bytes
    content_type: str


@dataclass(frozen=True, kw_only=True)
class DeleteProductImage:
    """Delete one image of a product owned by the principal."""

    product_id: UUID
    image_id: UUID
    principal_email: str
