"""UpdateAccount command handler.

Flow:
1. Authorize: the account must exist and belong to the principal
2. Validate a supplied password, then hash it
3. Apply supplied non-blank fields
4. Fail with NO_FIELDS_TO_UPDATE when nothing changed
5. Save and commit
6. Return Success(AccountResult)

Email is immutable and not part of the command.
"""

from storefront.application.commands.account_commands import UpdateAccount
from storefront.application.dtos import AccountResult
from storefront.application.services import OwnershipGuard
from storefront.core.enums import ErrorCode
from storefront.core.errors import DomainError, ValidationError
from storefront.core.result import Failure, Result, Success
from storefront.domain.errors import StorageError
from storefront.domain.protocols import (
    AccountRepository,
    ClockProtocol,
    LoggerProtocol,
    PasswordHashingProtocol,
    UnitOfWorkProtocol,
)
from storefront.domain.validators import validate_password


class UpdateAccountHandler:
    """Handler for UpdateAccount command.

    Dependencies (injected via constructor):
        - OwnershipGuard: load and authorize the target account
        - AccountRepository: persistence
        - UnitOfWorkProtocol: commit boundary
        - PasswordHashingProtocol: hashing a new password
        - ClockProtocol: updated_at
        - LoggerProtocol: structured logging
    """

    def __init__(
        self,
        *,
        guard: OwnershipGuard,
        account_repo: AccountRepository,
        unit_of_work: UnitOfWorkProtocol,
        password_service: PasswordHashingProtocol,
        clock: ClockProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._guard = guard
        self._account_repo = account_repo
        self._uow = unit_of_work
        self._password_service = password_service
        self._clock = clock
        self._logger = logger

    async def handle(self, cmd: UpdateAccount) -> Result[AccountResult, DomainError]:
        """Handle partial account update.

        Args:
            cmd: UpdateAccount command.

        Returns:
            Success(AccountResult) with the updated account.
            Failure(NotFoundError | AuthorizationError): Guard rejected.
            Failure(ValidationError): Short password or nothing to update.
            Failure(StorageError): Store failed; nothing changed.
        """
        try:
            match await self._guard.authorize_account(
                cmd.principal_email, cmd.account_id
            ):
                case Failure(error=error):
                    return Failure(error=error)
                case Success(value=account):
                    pass
        except Exception as e:
            self._logger.error(
                "account_update_failed", error=e, account_id=str(cmd.account_id)
            )
            return Failure(error=StorageError.from_exception("update_account", e))

        password_hash: str | None = None
        if cmd.password:
            try:
                validate_password(cmd.password)
            except ValueError as e:
                return Failure(
                    error=ValidationError(
                        code=ErrorCode.VALIDATION_FAILED,
                        message=str(e),
                        field="password",
                    )
                )
            password_hash = self._password_service.hash_password(cmd.password)

        changed = account.apply_profile_update(
            now=self._clock.now(),
            first_name=cmd.first_name,
            last_name=cmd.last_name,
            password_hash=password_hash,
        )
        if not changed:
            return Failure(
                error=ValidationError(
                    code=ErrorCode.NO_FIELDS_TO_UPDATE,
                    message="No fields to update",
                )
            )

        try:
            await self._account_repo.save(account)
            await self._uow.commit()
        except Exception as e:
            await self._uow.rollback()
            self._logger.error(
                "account_update_failed", error=e, account_id=str(account.id)
            )
            return Failure(error=StorageError.from_exception("update_account", e))

        self._logger.info("account_updated", account_id=str(account.id))
        return Success(value=AccountResult.from_entity(account))
