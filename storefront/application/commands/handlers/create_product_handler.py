"""CreateProduct command handler.

Flow:
1. Resolve the principal's account (becomes the owner)
2. Validate required fields and quantity
3. Check SKU uniqueness
4. Create Product entity, save and commit
5. Return Success(ProductResult)
"""

from uuid_extensions import uuid7

from storefront.application.commands.product_commands import CreateProduct
from storefront.application.dtos import ProductResult
from storefront.core.enums import ErrorCode
from storefront.core.errors import (
    ConflictError,
    DomainError,
    NotFoundError,
    ValidationError,
)
from storefront.core.result import Failure, Result, Success
from storefront.domain.entities import Product
from storefront.domain.errors import StorageError
from storefront.domain.protocols import (
    AccountRepository,
    ClockProtocol,
    LoggerProtocol,
    ProductRepository,
    UnitOfWorkProtocol,
)
from storefront.domain.validators import require_text, validate_quantity


class CreateProductHandler:
    """Handler for CreateProduct command.

    Dependencies (injected via constructor):
        - AccountRepository: owner lookup by principal email
        - ProductRepository: SKU check and persistence
        - UnitOfWorkProtocol: commit boundary
        - ClockProtocol: creation timestamps
        - LoggerProtocol: structured logging
    """

    def __init__(
        self,
        *,
        account_repo: AccountRepository,
        product_repo: ProductRepository,
        unit_of_work: UnitOfWorkProtocol,
        clock: ClockProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._account_repo = account_repo
        self._product_repo = product_repo
        self._uow = unit_of_work
        self._clock = clock
        self._logger = logger

    async def handle(self, cmd: CreateProduct) -> Result[ProductResult, DomainError]:
        """Handle product creation.

        Args:
            cmd: CreateProduct command.

        Returns:
            Success(ProductResult) with the stored product.
            Failure(NotFoundError): The principal has no account.
            Failure(ValidationError): Blank field or negative quantity.
            Failure(ConflictError): SKU already exists.
            Failure(StorageError): Store failed.
        """
        try:
            sku = require_text(cmd.sku, "sku")
            name = require_text(cmd.name, "name")
            manufacturer = require_text(cmd.manufacturer, "manufacturer")
            quantity = validate_quantity(cmd.quantity)
        except ValueError as e:
            return Failure(
                error=ValidationError(code=ErrorCode.VALIDATION_FAILED, message=str(e))
            )

        try:
            owner = await self._account_repo.find_by_email(cmd.principal_email)
            if owner is None:
                return Failure(
                    error=NotFoundError(
                        code=ErrorCode.ACCOUNT_NOT_FOUND,
                        message="Account not found",
                        resource_type="Account",
                        resource_id=cmd.principal_email,
                    )
                )

            if await self._product_repo.exists_by_sku(sku):
                return Failure(
                    error=ConflictError(
                        code=ErrorCode.SKU_ALREADY_EXISTS,
                        message=f"Product with SKU {sku} already exists",
                        resource_type="Product",
                        conflicting_field="sku",
                    )
                )

            now = self._clock.now()
            product = Product(
                id=uuid7(),
                sku=sku,
                owner_id=owner.id,
                name=name,
                description=cmd.description.strip(),
                manufacturer=manufacturer,
                quantity=quantity,
                created_at=now,
                updated_at=now,
            )
            await self._product_repo.save(product)
            await self._uow.commit()
        except Exception as e:
            await self._uow.rollback()
            self._logger.error("product_create_failed", error=e, sku=sku)
            return Failure(error=StorageError.from_exception("create_product", e))

        self._logger.info(
            "product_created", product_id=str(product.id), owner_id=str(owner.id)
        )
        return Success(value=ProductResult.from_entity(product))
