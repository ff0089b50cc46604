"""DeleteAccount command handler (self-service).

Keyed on the authenticated identity only, so a principal can never delete
someone else's account.

Flow:
1. Find the principal's account by email
2. Collect owned products and the storage keys of their images
3. Delete images, products, verification records and the account
4. Commit
5. Delete stored objects (best effort, after the commit)
6. Return Success(None)
"""

from storefront.application.commands.account_commands import DeleteAccount
from storefront.application.services import delete_objects
from storefront.core.enums import ErrorCode
from storefront.core.errors import DomainError, NotFoundError
from storefront.core.result import Failure, Result, Success
from storefront.domain.errors import StorageError
from storefront.domain.protocols import (
    AccountRepository,
    LoggerProtocol,
    ObjectStorageProtocol,
    ProductImageRepository,
    ProductRepository,
    UnitOfWorkProtocol,
    VerificationRecordRepository,
)


class DeleteAccountHandler:
    """Handler for DeleteAccount command.

    Cascades to owned products, their images and stored objects, and the
    account's verification records.
    """

    def __init__(
        self,
        *,
        account_repo: AccountRepository,
        product_repo: ProductRepository,
        image_repo: ProductImageRepository,
        verification_repo: VerificationRecordRepository,
        unit_of_work: UnitOfWorkProtocol,
        object_storage: ObjectStorageProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._account_repo = account_repo
        self._product_repo = product_repo
        self._image_repo = image_repo
        self._verification_repo = verification_repo
        self._uow = unit_of_work
        self._object_storage = object_storage
        self._logger = logger

    async def handle(self, cmd: DeleteAccount) -> Result[None, DomainError]:
        """Handle account self-deletion.

        Args:
            cmd: DeleteAccount command.

        Returns:
            Success(None) once the account and its data are deleted.
            Failure(NotFoundError): The principal has no account.
            Failure(StorageError): Store failed; nothing was deleted.
        """
        try:
            account = await self._account_repo.find_by_email(cmd.principal_email)
            if account is None:
                return Failure(
                    error=NotFoundError(
                        code=ErrorCode.ACCOUNT_NOT_FOUND,
                        message="Account not found",
                        resource_type="Account",
                        resource_id=cmd.principal_email,
                    )
                )

            storage_keys: list[str] = []
            products = await self._product_repo.list_by_owner(account.id)
            for product in products:
                images = await self._image_repo.list_by_product(product.id)
                storage_keys.extend(image.storage_key for image in images)
                await self._image_repo.delete_by_product(product.id)
                await self._product_repo.delete(product.id)

            records = await self._verification_repo.delete_by_email(account.email)
            await self._account_repo.delete(account.id)
            await self._uow.commit()
        except Exception as e:
            await self._uow.rollback()
            self._logger.error(
                "account_delete_failed", error=e, email=cmd.principal_email
            )
            return Failure(error=StorageError.from_exception("delete_account", e))

        failed = await delete_objects(self._object_storage, storage_keys, self._logger)
        self._logger.info(
            "account_deleted",
            account_id=str(account.id),
            products=len(products),
            images=len(storage_keys),
            verification_records=records,
            orphaned_objects=failed,
        )
        return Success(value=None)
