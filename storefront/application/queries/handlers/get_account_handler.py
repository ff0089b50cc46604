"""GetAccount query handler.

Owner-only read: the guard rejects any principal other than the account's
own email.
"""

from storefront.application.dtos import AccountResult
from storefront.application.queries.account_queries import GetAccount
from storefront.application.services import OwnershipGuard
from storefront.core.errors import AuthorizationError, NotFoundError
from storefront.core.result import Failure, Result, Success
from storefront.domain.errors import StorageError


class GetAccountHandler:
    """Handler for GetAccount query."""

    def __init__(self, guard: OwnershipGuard) -> None:
        self._guard = guard

    async def handle(
        self, query: GetAccount
    ) -> Result[AccountResult, NotFoundError | AuthorizationError | StorageError]:
        """Handle GetAccount query.

        Args:
            query: GetAccount query with account_id and principal_email.

        Returns:
            Success(AccountResult): Account found and owned by the principal.
            Failure(NotFoundError | AuthorizationError): Guard rejected.
            Failure(StorageError): Account store failed.
        """
        try:
            outcome = await self._guard.authorize_account(
                query.principal_email, query.account_id
            )
        except Exception as e:
            return Failure(error=StorageError.from_exception("get_account", e))

        match outcome:
            case Success(value=account):
                return Success(value=AccountResult.from_entity(account))
            case Failure(error=error):
                return Failure(error=error)
