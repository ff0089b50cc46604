"""DeleteProduct command handler.

Flow:
1. Authorize: product exists and the principal owns it
2. Delete the product's images and the product, then commit
3. Delete the images' stored objects (best effort, after the commit)
"""

from storefront.application.commands.product_commands import DeleteProduct
from storefront.application.services import OwnershipGuard, delete_objects
from storefront.core.errors import DomainError
from storefront.core.result import Failure, Result, Success
from storefront.domain.errors import DataIntegrityError, StorageError
from storefront.domain.protocols import (
    LoggerProtocol,
    ObjectStorageProtocol,
    ProductImageRepository,
    ProductRepository,
    UnitOfWorkProtocol,
)


class DeleteProductHandler:
    """Handler for DeleteProduct command."""

    def __init__(
        self,
        *,
        guard: OwnershipGuard,
        product_repo: ProductRepository,
        image_repo: ProductImageRepository,
        unit_of_work: UnitOfWorkProtocol,
        object_storage: ObjectStorageProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._guard = guard
        self._product_repo = product_repo
        self._image_repo = image_repo
        self._uow = unit_of_work
        self._object_storage = object_storage
        self._logger = logger

    async def handle(self, cmd: DeleteProduct) -> Result[None, DomainError]:
        """Handle product deletion.

        Returns:
            Success(None) once the product and its images are deleted.
            Failure(NotFoundError | AuthorizationError): Guard rejected.
            Failure(StorageError): Store failed; nothing was deleted.
        """
        try:
            match await self._guard.authorize_product(
                cmd.principal_email, cmd.product_id
            ):
                case Failure(error=error):
                    return Failure(error=error)
                case Success(value=product):
                    pass

            images = await self._image_repo.list_by_product(product.id)
            await self._image_repo.delete_by_product(product.id)
            await self._product_repo.delete(product.id)
            await self._uow.commit()
        except DataIntegrityError:
            await self._uow.rollback()
            raise
        except Exception as e:
            await self._uow.rollback()
            self._logger.error(
                "product_delete_failed", error=e, product_id=str(cmd.product_id)
            )
            return Failure(error=StorageError.from_exception("delete_product", e))

        failed = await delete_objects(
            self._object_storage,
            (image.storage_key for image in images),
            self._logger,
        )
        self._logger.info(
            "product_deleted",
            product_id=str(product.id),
            images=len(images),
            orphaned_objects=failed,
        )
        return Success(value=None)
