"""AuthenticateAccount command handler.

Single responsibility: resolve a principal from credentials. Issuing
sessions or tokens is the edge layer's concern.

Flow:
1. Normalize email
2. Find account by email
3. Verify password
4. Return Success(AuthenticatedPrincipal)

An invalid email, an unknown email and a wrong password all yield the same
INVALID_CREDENTIALS error to prevent account enumeration.
"""

from storefront.application.commands.account_commands import AuthenticateAccount
from storefront.application.dtos import AuthenticatedPrincipal
from storefront.core.enums import ErrorCode
from storefront.core.errors import AuthenticationError
from storefront.core.result import Failure, Result, Success
from storefront.domain.errors import StorageError
from storefront.domain.protocols import (
    AccountRepository,
    LoggerProtocol,
    PasswordHashingProtocol,
)
from storefront.domain.validators import normalize_email


class AuthenticateAccountHandler:
    """Handler for AuthenticateAccount command."""

    def __init__(
        self,
        *,
        account_repo: AccountRepository,
        password_service: PasswordHashingProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._account_repo = account_repo
        self._password_service = password_service
        self._logger = logger

    async def handle(
        self, cmd: AuthenticateAccount
    ) -> Result[AuthenticatedPrincipal, AuthenticationError | StorageError]:
        """Handle authentication.

        Args:
            cmd: AuthenticateAccount command.

        Returns:
            Success(AuthenticatedPrincipal) on valid credentials.
            Failure(AuthenticationError): Bad email or password.
            Failure(StorageError): Account store failed.
        """
        try:
            email = normalize_email(cmd.email)
        except ValueError:
            return self._invalid_credentials(cmd.email)

        try:
            account = await self._account_repo.find_by_email(email)
        except Exception as e:
            self._logger.error("account_lookup_failed", error=e, email=email)
            return Failure(error=StorageError.from_exception("authenticate", e))
        if account is None:
            return self._invalid_credentials(email)

        if not self._password_service.verify_password(
            cmd.password, account.password_hash
        ):
            return self._invalid_credentials(email)

        self._logger.info("account_authenticated", account_id=str(account.id))
        return Success(
            value=AuthenticatedPrincipal(
                account_id=account.id,
                email=account.email,
                verified=account.verified,
            )
        )

    def _invalid_credentials(self, email: str) -> Failure[AuthenticationError]:
        self._logger.warning("account_authentication_failed", email=email)
        return Failure(
            error=AuthenticationError(
                code=ErrorCode.INVALID_CREDENTIALS,
                message="Invalid email or password",
            )
        )
