"""ListProducts and ListMyProducts query handlers.

ListProducts is public. ListMyProducts is pre-filtered by the principal's
account, so it needs no ownership check; a principal without an account
simply owns nothing.
"""

from storefront.application.dtos import ProductResult
from storefront.application.queries.product_queries import (
    ListMyProducts,
    ListProducts,
)
from storefront.core.errors import DomainError
from storefront.core.result import Failure, Result, Success
from storefront.domain.errors import StorageError
from storefront.domain.protocols import AccountRepository, ProductRepository


class ListProductsHandler:
    """Handler for ListProducts query."""

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    async def handle(
        self, query: ListProducts
    ) -> Result[list[ProductResult], DomainError]:
        try:
            products = await self._product_repo.list_all()
        except Exception as e:
            return Failure(error=StorageError.from_exception("list_products", e))
        return Success(value=[ProductResult.from_entity(p) for p in products])


class ListMyProductsHandler:
    """Handler for ListMyProducts query.

    Dependencies (injected via constructor):
        - AccountRepository: resolve the principal's account id
        - ProductRepository: owner-filtered listing
    """

    def __init__(
        self, account_repo: AccountRepository, product_repo: ProductRepository
    ) -> None:
        self._account_repo = account_repo
        self._product_repo = product_repo

    async def handle(
        self, query: ListMyProducts
    ) -> Result[list[ProductResult], DomainError]:
        """Handle ListMyProducts query.

        Returns:
            Success(list[ProductResult]), empty when the principal owns nothing.
            Failure(StorageError) if a store failed.
        """
        try:
            account = await self._account_repo.find_by_email(query.principal_email)
            if account is None:
                return Success(value=[])
            products = await self._product_repo.list_by_owner(account.id)
        except Exception as e:
            return Failure(error=StorageError.from_exception("list_my_products", e))
        return Success(value=[ProductResult.from_entity(p) for p in products])
