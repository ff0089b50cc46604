"""Account queries (CQRS read operations)."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class GetAccount:
    """Get the principal's own account by ID.

    Attributes:
        account_id: Account to retrieve.
        principal_email: Authenticated identity (must own the account).
    """

    account_id: UUID
    principal_email: str
