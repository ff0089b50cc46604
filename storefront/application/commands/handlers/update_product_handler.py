"""UpdateProduct command handler.

Flow:
1. Authorize: product exists and the principal owns it
2. Validate quantity, check a changed SKU for uniqueness
3. Apply supplied non-blank fields
4. Fail with NO_FIELDS_TO_UPDATE when nothing changed
5. Save and commit
"""

from storefront.application.commands.product_commands import UpdateProduct
from storefront.application.dtos import ProductResult
from storefront.application.services import OwnershipGuard
from storefront.core.enums import ErrorCode
from storefront.core.errors import ConflictError, DomainError, ValidationError
from storefront.core.result import Failure, Result, Success
from storefront.domain.errors import DataIntegrityError, StorageError
from storefront.domain.protocols import (
    ClockProtocol,
    LoggerProtocol,
    ProductRepository,
    UnitOfWorkProtocol,
)


class UpdateProductHandler:
    """Handler for UpdateProduct command. The owner is never reassigned."""

    def __init__(
        self,
        *,
        guard: OwnershipGuard,
        product_repo: ProductRepository,
        unit_of_work: UnitOfWorkProtocol,
        clock: ClockProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._guard = guard
        self._product_repo = product_repo
        self._uow = unit_of_work
        self._clock = clock
        self._logger = logger

    async def handle(self, cmd: UpdateProduct) -> Result[ProductResult, DomainError]:
        """Handle partial product update.

        Returns:
            Success(ProductResult) with the updated product.
            Failure(NotFoundError | AuthorizationError): Guard rejected.
            Failure(ValidationError): Negative quantity or nothing to update.
            Failure(ConflictError): New SKU already taken.
            Failure(StorageError): Store failed; nothing changed.
        """
        if cmd.quantity is not None and cmd.quantity < 0:
            return Failure(
                error=ValidationError(
                    code=ErrorCode.VALIDATION_FAILED,
                    message="quantity cannot be negative",
                    field="quantity",
                )
            )

        try:
            match await self._guard.authorize_product(
                cmd.principal_email, cmd.product_id
            ):
                case Failure(error=error):
                    return Failure(error=error)
                case Success(value=product):
                    pass

            new_sku = cmd.sku.strip() if cmd.sku else None
            if new_sku and new_sku != product.sku:
                if await self._product_repo.exists_by_sku(new_sku):
                    return Failure(
                        error=ConflictError(
                            code=ErrorCode.SKU_ALREADY_EXISTS,
                            message=f"Product with SKU {new_sku} already exists",
                            resource_type="Product",
                            conflicting_field="sku",
                        )
                    )

            changed = product.apply_update(
                now=self._clock.now(),
                sku=new_sku,
                name=cmd.name,
                description=cmd.description,
                manufacturer=cmd.manufacturer,
                quantity=cmd.quantity,
            )
            if not changed:
                return Failure(
                    error=ValidationError(
                        code=ErrorCode.NO_FIELDS_TO_UPDATE,
                        message="No fields to update",
                    )
                )

            await self._product_repo.save(product)
            await self._uow.commit()
        except DataIntegrityError:
            await self._uow.rollback()
            raise
        except Exception as e:
            await self._uow.rollback()
            self._logger.error(
                "product_update_failed", error=e, product_id=str(cmd.product_id)
            )
            return Failure(error=StorageError.from_exception("update_product", e))

        self._logger.info("product_updated", product_id=str(product.id))
        return Success(value=ProductResult.from_entity(product))
