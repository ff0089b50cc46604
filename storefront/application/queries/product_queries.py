"""Product and image queries (CQRS read operations).

Product and image reads are unauthenticated, except ListMyProducts which is
pre-filtered by the authenticated identity.
"""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class GetProduct:
    """Get a single product by ID (public)."""

    product_id: UUID


@dataclass(frozen=True, kw_only=True)
class ListProducts:
    """List every product (public)."""


@dataclass(frozen=True, kw_only=True)
class ListMyProducts:
    """List products owned by the principal.

    Attributes:
        principal_email: Authenticated identity.
    """

    principal_email: str


@dataclass(frozen=True, kw_only=True)
class ListProductImages:
    """List images of a product (public)."""

    product_id: UUID


@dataclass(frozen=True, kw_only=True)
class GetProductImage:
    """Get one image, scoped to its product (public).

    An image id under a different product is not found.
    """

    product_id: UUID
    image_id: UUID
