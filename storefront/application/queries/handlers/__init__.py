"""Query handlers."""

from storefront.application.queries.handlers.get_account_handler import (
    GetAccountHandler,
)
from storefront.application.queries.handlers.get_product_handler import (
    GetProductHandler,
)
from storefront.application.queries.handlers.list_product_images_handler import (
    GetProductImageHandler,
    ListProductImagesHandler,
)
from storefront.application.queries.handlers.list_products_handler import (
    ListMyProductsHandler,
    ListProductsHandler,
)

__all__ = [
    "GetAccountHandler",
    "GetProductHandler",
    "GetProductImageHandler",
    "ListMyProductsHandler",
    "ListProductImagesHandler",
    "ListProductsHandler",
]
