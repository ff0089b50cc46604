"""Unit tests for authorize() and OwnershipGuard.

Tests cover:
- Pure authorize(): exact canonical email comparison
- Account, product and image authorization
- Not found vs forbidden outcomes
- Image under a different product reported as not found
- Dangling product owner escalates as DataIntegrityError
"""

import pytest
from uuid_extensions import uuid7

from storefront.application.services import authorize
from storefront.core.enums import ErrorCode
from storefront.core.errors import AuthorizationError, NotFoundError
from storefront.core.result import Failure, Success
from storefront.domain.errors import DataIntegrityError
from tests.utils.utils import build_account, build_image, build_product


@pytest.mark.unit
class TestAuthorize:
    def test_owner_allowed(self):
        assert authorize("u@example.com", "u@example.com") == Success(value=None)

    def test_non_owner_forbidden(self):
        result = authorize("a@example.com", "b@example.com", resource_type="Product")

        assert isinstance(result, Failure)
        assert isinstance(result.error, AuthorizationError)
        assert result.error.code == ErrorCode.FORBIDDEN
        assert result.error.principal_email == "a@example.com"
        assert result.error.resource_type == "Product"

    def test_comparison_is_exact(self):
        assert isinstance(authorize("U@example.com", "u@example.com"), Failure)


@pytest.mark.unit
class TestOwnershipGuard:
    """Test OwnershipGuard against in-memory repositories."""

    @pytest.fixture
    async def owned(self, account_repo, product_repo, image_repo):
        owner = build_account(email="owner@example.com")
        product = build_product(owner.id)
        image = build_image(product)
        await account_repo.save(owner)
        await product_repo.save(product)
        await image_repo.save(image)
        return owner, product, image

    @pytest.mark.asyncio
    async def test_account_owner_allowed(self, guard, owned):
        owner, _, _ = owned

        result = await guard.authorize_account("owner@example.com", owner.id)

        assert isinstance(result, Success)
        assert result.value.id == owner.id

    @pytest.mark.asyncio
    async def test_account_other_principal_forbidden(self, guard, owned):
        owner, _, _ = owned

        result = await guard.authorize_account("intruder@example.com", owner.id)

        assert result.error.code == ErrorCode.FORBIDDEN

    @pytest.mark.asyncio
    async def test_missing_account(self, guard):
        result = await guard.authorize_account("owner@example.com", uuid7())

        assert isinstance(result.error, NotFoundError)
        assert result.error.code == ErrorCode.ACCOUNT_NOT_FOUND

    @pytest.mark.asyncio
    async def test_product_owner_allowed(self, guard, owned):
        _, product, _ = owned

        result = await guard.authorize_product("owner@example.com", product.id)

        assert result.value.id == product.id

    @pytest.mark.asyncio
    async def test_product_other_principal_forbidden(self, guard, owned):
        _, product, _ = owned

        result = await guard.authorize_product("intruder@example.com", product.id)

        assert isinstance(result.error, AuthorizationError)

    @pytest.mark.asyncio
    async def test_missing_product(self, guard):
        result = await guard.authorize_product("owner@example.com", uuid7())

        assert result.error.code == ErrorCode.PRODUCT_NOT_FOUND

    @pytest.mark.asyncio
    async def test_product_with_missing_owner_raises(self, guard, product_repo):
        orphan = build_product(uuid7())
        await product_repo.save(orphan)

        with pytest.raises(DataIntegrityError):
            await guard.authorize_product("owner@example.com", orphan.id)

    @pytest.mark.asyncio
    async def test_image_owner_allowed(self, guard, owned):
        _, product, image = owned

        result = await guard.authorize_image("owner@example.com", product.id, image.id)

        assert isinstance(result, Success)
        assert result.value[1].id == image.id

    @pytest.mark.asyncio
    async def test_image_under_other_product_not_found(
        self, guard, owned, product_repo
    ):
        # Arrange
        owner, _, image = owned
        other = build_product(owner.id)
        await product_repo.save(other)

        # Act
        result = await guard.authorize_image("owner@example.com", other.id, image.id)

        # Assert
        assert result.error.code == ErrorCode.IMAGE_NOT_FOUND

    @pytest.mark.asyncio
    async def test_image_other_principal_forbidden(self, guard, owned):
        _, product, image = owned

        result = await guard.authorize_image(
            "intruder@example.com", product.id, image.id
        )

        assert result.error.code == ErrorCode.FORBIDDEN
