"""Ownership authorization.

A principal may act on a resource iff its canonical email equals the email
of the account that ultimately owns the resource.

Ownership Chain:
    ProductImage -> Product -> Account

Authorization is always evaluated against the owning account's email, never
against an intermediate id.

Usage:
    guard = OwnershipGuard(account_repo, product_repo, image_repo)

    result = await guard.authorize_product(principal_email, product_id)
    match result:
        case Success(value=product):
            ...
        case Failure(error=error):
            ...  # NotFoundError or AuthorizationError
"""

from uuid import UUID

from storefront.core.enums import ErrorCode
from storefront.core.errors import AuthorizationError, NotFoundError
from storefront.core.result import Failure, Result, Success
from storefront.domain.entities import Account, Product, ProductImage
from storefront.domain.errors import DataIntegrityError
from storefront.domain.protocols import (
    AccountRepository,
    ProductImageRepository,
    ProductRepository,
)


def authorize(
    principal_email: str,
    resource_owner_email: str,
    *,
    resource_type: str | None = None,
) -> Result[None, AuthorizationError]:
    """Allow iff the principal is the resource owner.

    Pure function: exact string comparison of canonical emails.

    Args:
        principal_email: Authenticated identity.
        resource_owner_email: Email of the owning account.
        resource_type: Optional label carried in the error.

    Returns:
        Success(None) when allowed, Failure(AuthorizationError) otherwise.
    """
    if principal_email == resource_owner_email:
        return Success(value=None)
    return Failure(
        error=AuthorizationError(
            code=ErrorCode.FORBIDDEN,
            message="Only the owner may perform this operation",
            principal_email=principal_email,
            resource_type=resource_type,
        )
    )


class OwnershipGuard:
    """Loads a resource, resolves its owning account, and authorizes.

    Returns the loaded entities on success to avoid a second fetch.

    Dependencies (injected via constructor):
        - AccountRepository: owner lookup
        - ProductRepository: product lookup
        - ProductImageRepository: image lookup
    """

    def __init__(
        self,
        account_repo: AccountRepository,
        product_repo: ProductRepository,
        image_repo: ProductImageRepository,
    ) -> None:
        self._account_repo = account_repo
        self._product_repo = product_repo
        self._image_repo = image_repo

    async def authorize_account(
        self, principal_email: str, account_id: UUID
    ) -> Result[Account, NotFoundError | AuthorizationError]:
        """Authorize an operation on an account by id.

        Args:
            principal_email: Authenticated identity.
            account_id: Target account.

        Returns:
            Success(Account): Account exists and is the principal's own.
            Failure(NotFoundError | AuthorizationError).
        """
        account = await self._account_repo.find_by_id(account_id)
        if account is None:
            return Failure(
                error=NotFoundError(
                    code=ErrorCode.ACCOUNT_NOT_FOUND,
                    message="Account not found",
                    resource_type="Account",
                    resource_id=str(account_id),
                )
            )

        match authorize(principal_email, account.email, resource_type="Account"):
            case Failure(error=error):
                return Failure(error=error)
            case _:
                return Success(value=account)

    async def authorize_product(
        self, principal_email: str, product_id: UUID
    ) -> Result[Product, NotFoundError | AuthorizationError]:
        """Authorize an operation on a product.

        Args:
            principal_email: Authenticated identity.
            product_id: Target product.

        Returns:
            Success(Product): Product exists and the principal owns it.
            Failure(NotFoundError | AuthorizationError).

        Raises:
            DataIntegrityError: The product's owner account does not exist.
        """
        product = await self._product_repo.find_by_id(product_id)
        if product is None:
            return Failure(error=_product_not_found(product_id))

        owner_email = await self._owner_email(product)
        match authorize(principal_email, owner_email, resource_type="Product"):
            case Failure(error=error):
                return Failure(error=error)
            case _:
                return Success(value=product)

    async def authorize_image(
        self, principal_email: str, product_id: UUID, image_id: UUID
    ) -> Result[tuple[Product, ProductImage], NotFoundError | AuthorizationError]:
        """Authorize an operation on a product image.

        The image must belong to the given product; an image under another
        product is reported as not found.

        Args:
            principal_email: Authenticated identity.
            product_id: Parent product from the request.
            image_id: Target image.

        Returns:
            Success((Product, ProductImage)) when the principal owns the
            parent product.
            Failure(NotFoundError | AuthorizationError).
        """
        product = await self._product_repo.find_by_id(product_id)
        if product is None:
            return Failure(error=_product_not_found(product_id))

        image = await self._image_repo.find_by_id(image_id)
        if image is None or not image.belongs_to(product.id):
            return Failure(error=_image_not_found(image_id))

        owner_email = await self._owner_email(product)
        match authorize(principal_email, owner_email, resource_type="ProductImage"):
            case Failure(error=error):
                return Failure(error=error)
            case _:
                return Success(value=(product, image))

    async def _owner_email(self, product: Product) -> str:
        owner = await self._account_repo.find_by_id(product.owner_id)
        if owner is None:
            raise DataIntegrityError(
                f"Product {product.id} references missing owner",
                entity="Account",
                reference=str(product.owner_id),
            )
        return owner.email


def _product_not_found(product_id: UUID) -> NotFoundError:
    return NotFoundError(
        code=ErrorCode.PRODUCT_NOT_FOUND,
        message="Product not found",
        resource_type="Product",
        resource_id=str(product_id),
    )


def _image_not_found(image_id: UUID) -> NotFoundError:
    return NotFoundError(
        code=ErrorCode.IMAGE_NOT_FOUND,
        message="Image not found",
        resource_type="ProductImage",
        resource_id=str(image_id),
    )
