"""VerifyEmail command handler.

Thin adapter over VerificationLifecycleManager.verify: validates the email
shape and converts the redeemed record into a VerificationResult.

DataIntegrityError raised by the lifecycle manager propagates unchanged.
"""

from storefront.application.commands.account_commands import VerifyEmail
from storefront.application.dtos import VerificationResult
from storefront.application.services import VerificationLifecycleManager
from storefront.core.enums import ErrorCode
from storefront.core.errors import DomainError, ValidationError
from storefront.core.result import Failure, Result, Success
from storefront.domain.validators import normalize_email


class VerifyEmailHandler:
    """Handler for VerifyEmail command."""

    def __init__(self, lifecycle: VerificationLifecycleManager) -> None:
        """Initialize verify handler.

        Args:
            lifecycle: Verification lifecycle manager.
        """
        self._lifecycle = lifecycle

    async def handle(self, cmd: VerifyEmail) -> Result[VerificationResult, DomainError]:
        """Handle email verification.

        Args:
            cmd: VerifyEmail command.

        Returns:
            Success(VerificationResult) when the token was redeemed.
            Failure(ValidationError): Malformed email.
            Failure(VerificationError): INVALID_TOKEN, ALREADY_VERIFIED or
                TOKEN_EXPIRED.
            Failure(StorageError): Store failed.
        """
        try:
            email = normalize_email(cmd.email)
        except ValueError as e:
            return Failure(
                error=ValidationError(
                    code=ErrorCode.INVALID_EMAIL, message=str(e), field="email"
                )
            )

        match await self._lifecycle.verify(email, cmd.token.strip()):
            case Success(value=record):
                return Success(value=VerificationResult(email=record.subject_email))
            case Failure(error=error):
                return Failure(error=error)
