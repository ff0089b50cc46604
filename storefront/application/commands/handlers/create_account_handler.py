"""CreateAccount command handler (signup).

Flow:
1. Validate and normalize email, names and password
2. Check email uniqueness
3. Hash password, create Account entity, save and commit
4. Issue a verification token (suppressed if a live one exists)
5. Dispatch the token to the notification topic
6. Return Success(AccountSignup)

Failure isolation:
- Steps 1-3 fail the signup (ValidationError, ConflictError, StorageError)
- Steps 4-5 never fail the signup: the account is already committed.
  A failed issue or dispatch is logged and reported in the AccountSignup
  flags, and the user can request a resend.

Architecture:
- Application layer ONLY imports from domain layer (entities, protocols)
- NO infrastructure imports (repositories are injected via protocols)
"""

from uuid_extensions import uuid7

from storefront.application.commands.account_commands import CreateAccount
from storefront.application.dtos import AccountResult, AccountSignup
from storefront.application.services import (
    IssuedToken,
    NotificationDispatcher,
    Suppressed,
    VerificationLifecycleManager,
)
from storefront.core.enums import ErrorCode
from storefront.core.errors import ConflictError, DomainError, ValidationError
from storefront.core.result import Failure, Result, Success
from storefront.domain.entities import Account
from storefront.domain.errors import StorageError
from storefront.domain.protocols import (
    AccountRepository,
    ClockProtocol,
    LoggerProtocol,
    PasswordHashingProtocol,
    UnitOfWorkProtocol,
)
from storefront.domain.validators import (
    normalize_email,
    require_text,
    validate_password,
)


class CreateAccountHandler:
    """Handler for CreateAccount command.

    Dependencies (injected via constructor):
        - AccountRepository: account persistence
        - UnitOfWorkProtocol: commit boundary
        - PasswordHashingProtocol: password hashing
        - VerificationLifecycleManager: token issuance
        - NotificationDispatcher: token delivery
        - ClockProtocol: creation timestamps
        - LoggerProtocol: structured logging
    """

    def __init__(
        self,
        *,
        account_repo: AccountRepository,
        unit_of_work: UnitOfWorkProtocol,
        password_service: PasswordHashingProtocol,
        lifecycle: VerificationLifecycleManager,
        dispatcher: NotificationDispatcher,
        clock: ClockProtocol,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize signup handler with dependencies.

        Args:
            account_repo: Account repository.
            unit_of_work: Transaction boundary.
            password_service: Password hashing service.
            lifecycle: Verification lifecycle manager.
            dispatcher: Verification notification dispatcher.
            clock: Time source.
            logger: Structured logger.
        """
        self._account_repo = account_repo
        self._uow = unit_of_work
        self._password_service = password_service
        self._lifecycle = lifecycle
        self._dispatcher = dispatcher
        self._clock = clock
        self._logger = logger

    async def handle(self, cmd: CreateAccount) -> Result[AccountSignup, DomainError]:
        """Handle signup.

        Args:
            cmd: CreateAccount command.

        Returns:
            Success(AccountSignup): Account committed; verification flags tell
                whether a token was issued, suppressed and delivered.
            Failure(ValidationError): Malformed email, name or password.
            Failure(ConflictError): Email already registered.
            Failure(StorageError): Account could not be stored.
        """
        try:
            email = normalize_email(cmd.email)
        except ValueError as e:
            return Failure(
                error=ValidationError(
                    code=ErrorCode.INVALID_EMAIL, message=str(e), field="email"
                )
            )

        try:
            first_name = require_text(cmd.first_name, "first_name")
            last_name = require_text(cmd.last_name, "last_name")
            password = validate_password(cmd.password)
        except ValueError as e:
            return Failure(
                error=ValidationError(code=ErrorCode.VALIDATION_FAILED, message=str(e))
            )

        try:
            if await self._account_repo.exists_by_email(email):
                return Failure(
                    error=ConflictError(
                        code=ErrorCode.EMAIL_ALREADY_EXISTS,
                        message="Email already registered",
                        resource_type="Account",
                        conflicting_field="email",
                    )
                )

            now = self._clock.now()
            account = Account(
                id=uuid7(),
                email=email,
                password_hash=self._password_service.hash_password(password),
                first_name=first_name,
                last_name=last_name,
                created_at=now,
                updated_at=now,
            )
            await self._account_repo.save(account)
            await self._uow.commit()
        except Exception as e:
            await self._uow.rollback()
            self._logger.error("account_create_failed", error=e, email=email)
            return Failure(error=StorageError.from_exception("create_account", e))

        self._logger.info("account_created", account_id=str(account.id), email=email)

        issued = suppressed = dispatched = False
        match await self._lifecycle.issue(email, first_name):
            case Success(value=IssuedToken() as token):
                issued = True
                result = await self._dispatcher.dispatch(
                    token.email, token.token, token.first_name
                )
                dispatched = isinstance(result, Success)
            case Success(value=Suppressed()):
                suppressed = True
            case Failure(error=error):
                self._logger.warning(
                    "account_verification_not_issued",
                    account_id=str(account.id),
                    reason=error.message,
                )

        return Success(
            value=AccountSignup(
                account=AccountResult.from_entity(account),
                verification_issued=issued,
                verification_suppressed=suppressed,
                verification_dispatched=dispatched,
            )
        )
