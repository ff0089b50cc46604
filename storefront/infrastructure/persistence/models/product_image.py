"""Product image metadata model.

Only the storage key is persisted; image bytes live in object storage.
"""

from uuid import UUID

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from storefront.infrastructure.persistence.base import BaseModel


class ProductImageModel(BaseModel):
    """Image metadata (immutable once written).

    Fields:
        id, created_at: From BaseModel
        product_id: Parent product (cascade delete)
        storage_key: Object storage key (unique)
        file_name: Original upload name
        content_type: MIME type

    Foreign Keys:
        - product_id: References products(id) ON DELETE CASCADE
    """

    __tablename__ = "product_images"

    product_id: Mapped[UUID] = mapped_column(
        ForeignKey("products.id", ondelete="CASCADE"),
        index=True,
        nullable=False,
    )
    storage_key: Mapped[str] = mapped_column(
        String(512),
        unique=True,
        nullable=False,
        comment="Object storage key",
    )
    file_name: Mapped[str] = mapped_column(String(255), nullable=False)
    content_type: Mapped[str] = mapped_column(String(100), nullable=False)
