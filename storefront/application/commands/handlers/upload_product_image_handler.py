"""UploadProductImage command handler.

Flow:
1. Validate content (non-empty), content type (image) and file name
2. Authorize: product exists and the principal owns it
3. Build the storage key "{owner_id}/{product_id}/{timestamp_ms}-{file_name}"
4. Reject a key that is already recorded
5. Put the object
6. Save image metadata and commit
7. Return Success(ProductImageResult)

If step 6 fails the object from step 5 is deleted again, so a failed upload
leaves neither a row nor an object behind.
"""

from uuid_extensions import uuid7

from storefront.application.commands.product_commands import UploadProductImage
from storefront.application.dtos import ProductImageResult
from storefront.application.services import OwnershipGuard, delete_objects
from storefront.core.enums import ErrorCode
from storefront.core.errors import ConflictError, DomainError, ValidationError
from storefront.core.result import Failure, Result, Success
from storefront.domain.entities import Product, ProductImage
from storefront.domain.errors import DataIntegrityError, StorageError
from storefront.domain.protocols import (
    ClockProtocol,
    LoggerProtocol,
    ObjectStorageProtocol,
    ProductImageRepository,
    UnitOfWorkProtocol,
)
from storefront.domain.validators import (
    validate_file_name,
    validate_image_content_type,
)


def build_storage_key(product: Product, timestamp_ms: int, file_name: str) -> str:
    """Compose the object key for a product image.

    Example:
        >>> build_storage_key(product, 1700000000000, "front.png")
        '0190.../0190.../1700000000000-front.png'
    """
    return f"{product.owner_id}/{product.id}/{timestamp_ms}-{file_name}"


class UploadProductImageHandler:
    """Handler for UploadProductImage command.

    Dependencies (injected via constructor):
        - OwnershipGuard: load and authorize the parent product
        - ProductImageRepository: key check and metadata persistence
        - UnitOfWorkProtocol: commit boundary
        - ObjectStorageProtocol: object bytes
        - ClockProtocol: key timestamp and created_at
        - LoggerProtocol: structured logging
    """

    def __init__(
        self,
        *,
        guard: OwnershipGuard,
        image_repo: ProductImageRepository,
        unit_of_work: UnitOfWorkProtocol,
        object_storage: ObjectStorageProtocol,
        clock: ClockProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._guard = guard
        self._image_repo = image_repo
        self._uow = unit_of_work
        self._object_storage = object_storage
        self._clock = clock
        self._logger = logger

    async def handle(
        self, cmd: UploadProductImage
    ) -> Result[ProductImageResult, DomainError]:
        """Handle image upload.

        Args:
            cmd: UploadProductImage command.

        Returns:
            Success(ProductImageResult) with the stored metadata.
            Failure(ValidationError): Empty content, bad type or file name.
            Failure(NotFoundError | AuthorizationError): Guard rejected.
            Failure(ConflictError): Storage key already recorded.
            Failure(StorageError): Object storage or record store failed.
        """
        if not cmd.content:
            return Failure(
                error=ValidationError(
                    code=ErrorCode.VALIDATION_FAILED,
                    message="Image content is empty",
                    field="content",
                )
            )
        try:
            content_type = validate_image_content_type(cmd.content_type)
            file_name = validate_file_name(cmd.file_name)
        except ValueError as e:
            return Failure(
                error=ValidationError(code=ErrorCode.VALIDATION_FAILED, message=str(e))
            )

        try:
            match await self._guard.authorize_product(
                cmd.principal_email, cmd.product_id
            ):
                case Failure(error=error):
                    return Failure(error=error)
                case Success(value=product):
                    pass

            now = self._clock.now()
            storage_key = build_storage_key(
                product, int(now.timestamp() * 1000), file_name
            )
            if await self._image_repo.exists_by_storage_key(storage_key):
                return Failure(
                    error=ConflictError(
                        code=ErrorCode.STORAGE_KEY_ALREADY_EXISTS,
                        message="An image with this key already exists",
                        resource_type="ProductImage",
                        conflicting_field="storage_key",
                    )
                )
        except DataIntegrityError:
            raise
        except Exception as e:
            self._logger.error(
                "image_upload_failed", error=e, product_id=str(cmd.product_id)
            )
            return Failure(error=StorageError.from_exception("upload_image", e))

        log = self._logger.bind(product_id=str(product.id), storage_key=storage_key)

        try:
            put_result = await self._object_storage.put(
                storage_key, cmd.content, content_type
            )
        except Exception as e:
            log.error("image_object_put_failed", error=e)
            return Failure(
                error=StorageError.from_exception(
                    "put_object", e, code=ErrorCode.OBJECT_STORAGE_FAILURE
                )
            )
        if isinstance(put_result, Failure):
            log.warning("image_object_put_failed", reason=put_result.error.message)
            return Failure(
                error=StorageError(
                    code=ErrorCode.OBJECT_STORAGE_FAILURE,
                    message="Image could not be stored",
                    operation="put_object",
                    details=put_result.error.details,
                )
            )

        image = ProductImage(
            id=uuid7(),
            product_id=product.id,
            storage_key=storage_key,
            file_name=file_name,
            content_type=content_type,
            created_at=now,
        )
        try:
            await self._image_repo.save(image)
            await self._uow.commit()
        except Exception as e:
            await self._uow.rollback()
            log.error("image_metadata_save_failed", error=e)
            await delete_objects(self._object_storage, [storage_key], log)
            return Failure(error=StorageError.from_exception("upload_image", e))

        log.info("image_uploaded", image_id=str(image.id), size=len(cmd.content))
        return Success(value=ProductImageResult.from_entity(image))
