"""Unit tests for product command and query handlers.

Tests cover:
- CreateProductHandler: ownership from principal, SKU uniqueness, validation
- UpdateProductHandler: partial update, SKU change conflict, owner only
- DeleteProductHandler: cascade to images and stored objects
- Product queries: public reads, owner-filtered listing, store outages
"""

from datetime import timedelta
from unittest.mock import AsyncMock

import pytest
from uuid_extensions import uuid7

from storefront.application.commands import (
    CreateProduct,
    DeleteProduct,
    UpdateProduct,
)
from storefront.application.commands.handlers import (
    CreateProductHandler,
    DeleteProductHandler,
    UpdateProductHandler,
)
from storefront.application.queries import GetProduct, ListMyProducts, ListProducts
from storefront.application.queries.handlers import (
    GetProductHandler,
    ListMyProductsHandler,
    ListProductsHandler,
)
from storefront.core.enums import ErrorCode
from storefront.core.errors import ConflictError
from storefront.core.result import Failure, Success
from storefront.domain.errors import DataIntegrityError, StorageError
from tests.utils.utils import FIXED_NOW, build_account, build_image, build_product

OWNER = "owner@example.com"
INTRUDER = "intruder@example.com"


@pytest.fixture
async def owner(account_repo):
    account = build_account(email=OWNER)
    await account_repo.save(account)
    return account


@pytest.fixture
async def product(owner, product_repo):
    product = build_product(owner.id, sku="SKU-1", quantity=5)
    await product_repo.save(product)
    return product


@pytest.mark.unit
class TestCreateProductHandler:
    @pytest.fixture
    def handler(self, account_repo, product_repo, uow, clock, logger):
        return CreateProductHandler(
            account_repo=account_repo,
            product_repo=product_repo,
            unit_of_work=uow,
            clock=clock,
            logger=logger,
        )

    def _command(self, **overrides) -> CreateProduct:
        values = {
            "principal_email": OWNER,
            "sku": "SKU-NEW",
            "name": "Widget",
            "description": "  Useful  ",
            "manufacturer": "Acme",
            "quantity": 3,
        } | overrides
        return CreateProduct(**values)

    @pytest.mark.asyncio
    async def test_create_assigns_principal_as_owner(
        self, handler, owner, product_repo, uow
    ):
        # Act
        result = await handler.handle(self._command())

        # Assert
        assert isinstance(result, Success)
        assert result.value.owner_id == owner.id
        assert result.value.sku == "SKU-NEW"
        assert result.value.description == "Useful"
        assert result.value.created_at == FIXED_NOW
        assert await product_repo.exists_by_sku("SKU-NEW")
        assert uow.commits == 1

    @pytest.mark.asyncio
    async def test_duplicate_sku(self, handler, product):
        result = await handler.handle(self._command(sku=product.sku))

        assert isinstance(result.error, ConflictError)
        assert result.error.code == ErrorCode.SKU_ALREADY_EXISTS

    @pytest.mark.asyncio
    async def test_negative_quantity(self, handler, owner):
        result = await handler.handle(self._command(quantity=-1))

        assert result.error.code == ErrorCode.VALIDATION_FAILED

    @pytest.mark.asyncio
    async def test_blank_name(self, handler, owner):
        result = await handler.handle(self._command(name=" "))

        assert result.error.code == ErrorCode.VALIDATION_FAILED

    @pytest.mark.asyncio
    async def test_principal_without_account(self, handler):
        result = await handler.handle(self._command())

        assert result.error.code == ErrorCode.ACCOUNT_NOT_FOUND

    @pytest.mark.asyncio
    async def test_storage_failure(self, handler, owner, uow):
        uow.commit_error = ConnectionError()

        result = await handler.handle(self._command())

        assert isinstance(result.error, StorageError)
        assert result.error.operation == "create_product"
        assert uow.rollbacks == 1


@pytest.mark.unit
class TestUpdateProductHandler:
    @pytest.fixture
    def handler(self, guard, product_repo, uow, clock, logger):
        return UpdateProductHandler(
            guard=guard,
            product_repo=product_repo,
            unit_of_work=uow,
            clock=clock,
            logger=logger,
        )

    @pytest.mark.asyncio
    async def test_partial_update(self, handler, product, product_repo, clock):
        # Arrange
        clock.advance(minutes=1)

        # Act
        result = await handler.handle(
            UpdateProduct(product_id=product.id, principal_email=OWNER, quantity=0)
        )

        # Assert
        assert isinstance(result, Success)
        assert result.value.quantity == 0
        assert result.value.name == product.name
        assert result.value.owner_id == product.owner_id
        assert result.value.updated_at == FIXED_NOW + timedelta(minutes=1)
        assert (await product_repo.find_by_id(product.id)).quantity == 0

    @pytest.mark.asyncio
    async def test_sku_change_to_taken_sku(self, handler, owner, product, product_repo):
        await product_repo.save(build_product(owner.id, sku="SKU-2"))

        result = await handler.handle(
            UpdateProduct(product_id=product.id, principal_email=OWNER, sku="SKU-2")
        )

        assert result.error.code == ErrorCode.SKU_ALREADY_EXISTS

    @pytest.mark.asyncio
    async def test_resubmitting_own_sku_is_not_a_conflict(self, handler, product):
        result = await handler.handle(
            UpdateProduct(
                product_id=product.id, principal_email=OWNER, sku="SKU-1", name="New"
            )
        )

        assert result.value.name == "New"

    @pytest.mark.asyncio
    async def test_non_owner_forbidden(self, handler, product, product_repo):
        result = await handler.handle(
            UpdateProduct(product_id=product.id, principal_email=INTRUDER, name="X")
        )

        assert result.error.code == ErrorCode.FORBIDDEN
        assert (await product_repo.find_by_id(product.id)).name == product.name

    @pytest.mark.asyncio
    async def test_negative_quantity(self, handler, product):
        result = await handler.handle(
            UpdateProduct(product_id=product.id, principal_email=OWNER, quantity=-2)
        )

        assert result.error.code == ErrorCode.VALIDATION_FAILED
        assert result.error.field == "quantity"

    @pytest.mark.asyncio
    async def test_nothing_to_update(self, handler, product):
        result = await handler.handle(
            UpdateProduct(product_id=product.id, principal_email=OWNER)
        )

        assert result.error.code == ErrorCode.NO_FIELDS_TO_UPDATE

    @pytest.mark.asyncio
    async def test_missing_owner_escalates(self, handler, product_repo, uow):
        orphan = build_product(uuid7())
        await product_repo.save(orphan)

        with pytest.raises(DataIntegrityError):
            await handler.handle(
                UpdateProduct(product_id=orphan.id, principal_email=OWNER, name="X")
            )
        assert uow.rollbacks == 1


@pytest.mark.unit
class TestDeleteProductHandler:
    @pytest.fixture
    def handler(self, guard, product_repo, image_repo, uow, object_storage, logger):
        return DeleteProductHandler(
            guard=guard,
            product_repo=product_repo,
            image_repo=image_repo,
            unit_of_work=uow,
            object_storage=object_storage,
            logger=logger,
        )

    @pytest.mark.asyncio
    async def test_delete_removes_images_and_objects(
        self, handler, product, product_repo, image_repo, object_storage
    ):
        # Arrange
        images = [build_image(product, file_name=f"{n}.png") for n in range(2)]
        for image in images:
            await image_repo.save(image)
            await object_storage.put(image.storage_key, b"x", "image/png")

        # Act
        result = await handler.handle(
            DeleteProduct(product_id=product.id, principal_email=OWNER)
        )

        # Assert
        assert result == Success(value=None)
        assert await product_repo.find_by_id(product.id) is None
        assert image_repo.images == {}
        assert object_storage.objects == {}

    @pytest.mark.asyncio
    async def test_non_owner_cannot_delete(self, handler, product, product_repo):
        result = await handler.handle(
            DeleteProduct(product_id=product.id, principal_email=INTRUDER)
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.FORBIDDEN
        assert await product_repo.find_by_id(product.id) is not None

    @pytest.mark.asyncio
    async def test_unknown_product(self, handler):
        result = await handler.handle(
            DeleteProduct(product_id=uuid7(), principal_email=OWNER)
        )

        assert result.error.code == ErrorCode.PRODUCT_NOT_FOUND

    @pytest.mark.asyncio
    async def test_store_failure(self, handler, product, product_repo, uow):
        product_repo.delete = AsyncMock(side_effect=ConnectionError())

        result = await handler.handle(
            DeleteProduct(product_id=product.id, principal_email=OWNER)
        )

        assert isinstance(result.error, StorageError)
        assert result.error.operation == "delete_product"
        assert uow.rollbacks == 1


@pytest.mark.unit
class TestProductQueries:
    @pytest.mark.asyncio
    async def test_get_product_is_public(self, product_repo, product):
        result = await GetProductHandler(product_repo).handle(
            GetProduct(product_id=product.id)
        )

        assert result.value.sku == "SKU-1"

    @pytest.mark.asyncio
    async def test_get_missing_product(self, product_repo):
        result = await GetProductHandler(product_repo).handle(
            GetProduct(product_id=uuid7())
        )

        assert result.error.code == ErrorCode.PRODUCT_NOT_FOUND

    @pytest.mark.asyncio
    async def test_list_products_ordered_by_creation(
        self, owner, product_repo
    ):
        # Arrange
        later = build_product(owner.id, now=FIXED_NOW + timedelta(seconds=1))
        earlier = build_product(owner.id)
        await product_repo.save(later)
        await product_repo.save(earlier)

        # Act
        result = await ListProductsHandler(product_repo).handle(ListProducts())

        # Assert
        assert [p.id for p in result.value] == [earlier.id, later.id]

    @pytest.mark.asyncio
    async def test_list_my_products_filters_by_owner(
        self, account_repo, product_repo, product
    ):
        # Arrange
        other = build_account(email=INTRUDER)
        await account_repo.save(other)
        await product_repo.save(build_product(other.id))

        # Act
        result = await ListMyProductsHandler(account_repo, product_repo).handle(
            ListMyProducts(principal_email=OWNER)
        )

        # Assert
        assert [p.id for p in result.value] == [product.id]

    @pytest.mark.asyncio
    async def test_list_my_products_without_account(self, account_repo, product_repo):
        result = await ListMyProductsHandler(account_repo, product_repo).handle(
            ListMyProducts(principal_email="nobody@example.com")
        )

        assert result == Success(value=[])

    @pytest.mark.asyncio
    async def test_get_product_read_failure(self, product_repo):
        product_repo.find_by_id = AsyncMock(side_effect=ConnectionError())

        result = await GetProductHandler(product_repo).handle(
            GetProduct(product_id=uuid7())
        )

        assert isinstance(result.error, StorageError)
        assert result.error.operation == "get_product"

    @pytest.mark.asyncio
    async def test_list_products_read_failure(self, product_repo):
        product_repo.list_all = AsyncMock(side_effect=ConnectionError())

        result = await ListProductsHandler(product_repo).handle(ListProducts())

        assert result.error.code == ErrorCode.STORAGE_FAILURE
        assert result.error.operation == "list_products"

    @pytest.mark.asyncio
    async def test_list_my_products_read_failure(self, account_repo, product_repo):
        account_repo.find_by_email = AsyncMock(side_effect=TimeoutError())

        result = await ListMyProductsHandler(account_repo, product_repo).handle(
            ListMyProducts(principal_email=OWNER)
        )

        assert isinstance(result, Failure)
        assert result.error.operation == "list_my_products"
