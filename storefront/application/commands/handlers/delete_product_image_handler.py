"""DeleteProductImage command handler.

Flow:
1. Authorize: image exists under the product and the principal owns it
2. Delete image metadata and commit
3. Delete the stored object (best effort, after the commit)
"""

from storefront.application.commands.product_commands import DeleteProductImage
from storefront.application.services import OwnershipGuard, delete_objects
from storefront.core.errors import DomainError
from storefront.core.result import Failure, Result, Success
from storefront.domain.errors import DataIntegrityError, StorageError
from storefront.domain.protocols import (
    LoggerProtocol,
    ObjectStorageProtocol,
    ProductImageRepository,
    UnitOfWorkProtocol,
)


class DeleteProductImageHandler:
    """Handler for DeleteProductImage command."""

    def __init__(
        self,
        *,
        guard: OwnershipGuard,
        image_repo: ProductImageRepository,
        unit_of_work: UnitOfWorkProtocol,
        object_storage: ObjectStorageProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._guard = guard
        self._image_repo = image_repo
        self._uow = unit_of_work
        self._object_storage = object_storage
        self._logger = logger

    async def handle(self, cmd: DeleteProductImage) -> Result[None, DomainError]:
        """Handle image deletion.

        Returns:
            Success(None) once the metadata is deleted.
            Failure(NotFoundError | AuthorizationError): Guard rejected.
            Failure(StorageError): Store failed; nothing was deleted.
        """
        try:
            match await self._guard.authorize_image(
                cmd.principal_email, cmd.product_id, cmd.image_id
            ):
                case Failure(error=error):
                    return Failure(error=error)
                case Success(value=(_, image)):
                    pass

            await self._image_repo.delete(image.id)
            await self._uow.commit()
        except DataIntegrityError:
            await self._uow.rollback()
            raise
        except Exception as e:
            await self._uow.rollback()
            self._logger.error(
                "image_delete_failed", error=e, image_id=str(cmd.image_id)
            )
            return Failure(error=StorageError.from_exception("delete_image", e))

        await delete_objects(self._object_storage, [image.storage_key], self._logger)
        self._logger.info(
            "image_deleted", image_id=str(image.id), storage_key=image.storage_key
        )
        return Success(value=None)
