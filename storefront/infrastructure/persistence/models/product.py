"""Product database model."""

from uuid import UUID

from sqlalchemy import CheckConstraint, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from storefront.infrastructure.persistence.base import BaseMutableModel


class ProductModel(BaseMutableModel):
    """Product owned by one account.

    Fields:
        id, created_at, updated_at: From BaseMutableModel
        sku: Globally unique stock keeping unit
        owner_id: Owning account (cascade delete)
        name, description, manufacturer: Catalog text
        quantity: Units in stock (never negative)

    Foreign Keys:
        - owner_id: References accounts(id) ON DELETE CASCADE
    """

    __tablename__ = "products"

    sku: Mapped[str] = mapped_column(
        String(100),
        unique=True,
        index=True,
        nullable=False,
        comment="Stock keeping unit (globally unique)",
    )
    owner_id: Mapped[UUID] = mapped_column(
        ForeignKey("accounts.id", ondelete="CASCADE"),
        index=True,
        nullable=False,
        comment="Owning account",
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    manufacturer: Mapped[str] = mapped_column(String(255), nullable=False)
    quantity: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    __table_args__ = (
        CheckConstraint("quantity >= 0", name="ck_products_quantity_non_negative"),
    )

    def __repr__(self) -> str:
        return f"<ProductModel(id={self.id}, sku={self.sku})>"
