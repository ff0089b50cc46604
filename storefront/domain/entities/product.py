"""Product domain entity."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from storefront.domain.validators import clean_optional


@dataclass
class Product:
    """Product owned by exactly one account.

    Business Rules:
        - sku is unique across all products
        - owner_id is set at creation and never reassigned
        - quantity is never negative

    Attributes:
        id: Unique product identifier.
        sku: Stock keeping unit (globally unique).
        owner_id: Owning account id.
        name: Display name.
        description: Free-text description.
        manufacturer: Manufacturer name.
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

    def __post_init__(self) -> None:
        if self.quantity < 0:
            raise ValueError("quantity cannot be negative")

    def apply_update(
        self,
        *,
        now: datetime,
        sku: str | None = None,
        name: str | None = None,
        description: str | None = None,
        manufacturer: str | None = None,
        quantity: int | None = None,
    ) -> bool:
        """Apply a partial update; unset or blank fields are left untouched.

        Returns:
            bool: True if any field changed.
        """
        changed = False

        for field_name, raw in (
            ("sku", sku),
            ("name", name),
            ("description", description),
            ("manufacturer", manufacturer),
        ):
            value = clean_optional(raw)
            if value is not None and value != getattr(self, field_name):
                setattr(self, field_name, value)
                changed = True

        if quantity is not None and quantity != self.quantity:
            if quantity < 0:
                raise ValueError("quantity cannot be negative")
            self.quantity = quantity
            changed = True

        if changed:
            self.updated_at = now
        return changed
