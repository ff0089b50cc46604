"""ResendVerification command handler.

Flow:
1. Normalize email and load the account
2. Reject already-verified accounts
3. Issue a token (suppressed while a live one exists)
4. Dispatch it; unlike signup, a dispatch failure is surfaced
5. Return Success(ResendOutcome)
"""

from dataclasses import dataclass

from storefront.application.commands.account_commands import ResendVerification
from storefront.application.services import (
    IssuedToken,
    NotificationDispatcher,
    Suppressed,
    VerificationLifecycleManager,
)
from storefront.core.enums import ErrorCode
from storefront.core.errors import DomainError, NotFoundError, ValidationError
from storefront.core.result import Failure, Result, Success
from storefront.domain.errors import StorageError, VerificationError
from storefront.domain.protocols import AccountRepository, LoggerProtocol
from storefront.domain.validators import normalize_email


@dataclass(frozen=True, kw_only=True)
class ResendOutcome:
    """Result of a resend.

    Attributes:
        email: Account email.
        suppressed: True when a live token already existed and nothing was sent.
        message_id: Notification message id when a token was sent.
    """

    email: str
    suppressed: bool
    message_id: str | None = None


class ResendVerificationHandler:
    """Handler for ResendVerification command."""

    def __init__(
        self,
        *,
        account_repo: AccountRepository,
        lifecycle: VerificationLifecycleManager,
        dispatcher: NotificationDispatcher,
        logger: LoggerProtocol,
    ) -> None:
        self._account_repo = account_repo
        self._lifecycle = lifecycle
        self._dispatcher = dispatcher
        self._logger = logger

    async def handle(
        self, cmd: ResendVerification
    ) -> Result[ResendOutcome, DomainError]:
        """Handle resend.

        Args:
            cmd: ResendVerification command.

        Returns:
            Success(ResendOutcome): Token sent, or suppressed.
            Failure(ValidationError): Malformed email.
            Failure(NotFoundError): No account for the email.
            Failure(VerificationError): Account already verified.
            Failure(StorageError | DispatchError): Collaborator failed.
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
            account = await self._account_repo.find_by_email(email)
        except Exception as e:
            self._logger.error("verification_resend_failed", error=e, email=email)
            return Failure(error=StorageError.from_exception("resend", e))

        if account is None:
            return Failure(
                error=NotFoundError(
                    code=ErrorCode.ACCOUNT_NOT_FOUND,
                    message="Account not found",
                    resource_type="Account",
                    resource_id=email,
                )
            )
        if account.verified:
            return Failure(
                error=VerificationError(
                    code=ErrorCode.ALREADY_VERIFIED,
                    message="Email already verified",
                    email=email,
                )
            )

        match await self._lifecycle.issue(email, account.first_name):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=Suppressed()):
                return Success(value=ResendOutcome(email=email, suppressed=True))
            case Success(value=IssuedToken() as token):
                dispatched = await self._dispatcher.dispatch(
                    token.email, token.token, token.first_name
                )

        match dispatched:
            case Success(value=message_id):
                return Success(
                    value=ResendOutcome(
                        email=email, suppressed=False, message_id=message_id
                    )
                )
            case Failure(error=error):
                return Failure(error=error)
