"""GetProduct query handler (public read)."""

from storefront.application.dtos import ProductResult
from storefront.application.queries.product_queries import GetProduct
from storefront.core.enums import ErrorCode
from storefront.core.errors import NotFoundError
from storefront.core.result import Failure, Result, Success
from storefront.domain.errors import StorageError
from storefront.domain.protocols import ProductRepository


class GetProductHandler:
    """Handler for GetProduct query.

    Dependencies (injected via constructor):
        - ProductRepository: For product retrieval
    """

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    async def handle(
        self, query: GetProduct
    ) -> Result[ProductResult, NotFoundError | StorageError]:
        """Handle GetProduct query.

        Returns:
            Success(ProductResult) if found, Failure(NotFoundError) otherwise.
            Failure(StorageError) if the product store failed.
        """
        try:
            product = await self._product_repo.find_by_id(query.product_id)
        except Exception as e:
            return Failure(error=StorageError.from_exception("get_product", e))
        if product is None:
            return Failure(
                error=NotFoundError(
                    code=ErrorCode.PRODUCT_NOT_FOUND,
                    message="Product not found",
                    resource_type="Product",
                    resource_id=str(query.product_id),
                )
            )
        return Success(value=ProductResult.from_entity(product))
