"""Queries - Read operations that never change state."""

from storefront.application.queries.account_queries import GetAccount
from storefront.application.queries.product_queries import (
    GetProduct,
    GetProductImage,
    ListMyProducts,
    ListProductImages,
    ListProducts,
)

__all__ = [
    "GetAccount",
    "GetProduct",
    "GetProductImage",
    "ListMyProducts",
    "ListProductImages",
    "ListProducts",
]
