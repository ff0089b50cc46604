"""ListProductImages and GetProductImage query handlers (public reads).

Images are always read through their parent product: an image id that
exists under a different product is reported as not found.
"""

from storefront.application.dtos import ProductImageResult
from storefront.application.queries.product_queries import (
    GetProductImage,
    ListProductImages,
)
from storefront.core.enums import ErrorCode
from storefront.core.errors import NotFoundError
from storefront.core.result import Failure, Result, Success
from storefront.domain.errors import StorageError
from storefront.domain.protocols import ProductImageRepository, ProductRepository


class ListProductImagesHandler:
    """Handler for ListProductImages query."""

    def __init__(
        self, product_repo: ProductRepository, image_repo: ProductImageRepository
    ) -> None:
        self._product_repo = product_repo
        self._image_repo = image_repo

    async def handle(
        self, query: ListProductImages
    ) -> Result[list[ProductImageResult], NotFoundError | StorageError]:
        """Handle ListProductImages query.

        Returns:
            Success(list[ProductImageResult]) or Failure(NotFoundError) when
            the product does not exist. Failure(StorageError) if a store
            failed.
        """
        try:
            product = await self._product_repo.find_by_id(query.product_id)
            images = (
                await self._image_repo.list_by_product(product.id)
                if product is not None
                else []
            )
        except Exception as e:
            return Failure(
                error=StorageError.from_exception("list_product_images", e)
            )
        if product is None:
            return Failure(
                error=NotFoundError(
                    code=ErrorCode.PRODUCT_NOT_FOUND,
                    message="Product not found",
                    resource_type="Product",
                    resource_id=str(query.product_id),
                )
            )
        return Success(value=[ProductImageResult.from_entity(i) for i in images])


class GetProductImageHandler:
    """Handler for GetProductImage query."""

    def __init__(self, image_repo: ProductImageRepository) -> None:
        self._image_repo = image_repo

    async def handle(
        self, query: GetProductImage
    ) -> Result[ProductImageResult, NotFoundError | StorageError]:
        try:
            image = await self._image_repo.find_by_id(query.image_id)
        except Exception as e:
            return Failure(error=StorageError.from_exception("get_product_image", e))
        if image is None or not image.belongs_to(query.product_id):
            return Failure(
                error=NotFoundError(
                    code=ErrorCode.IMAGE_NOT_FOUND,
                    message="Image not found",
                    resource_type="ProductImage",
                    resource_id=str(query.image_id),
                )
            )
        return Success(value=ProductImageResult.from_entity(image))
