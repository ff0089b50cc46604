"""AccountRepository protocol for account persistence.

Port (interface) for hexagonal architecture.
"""

from typing import Protocol
from uuid import UUID

from storefront.domain.entities.account import Account


class AccountRepository(Protocol):
    """Account repository protocol (port).

    Methods:
        find_by_id: Retrieve account by ID
        find_by_email: Retrieve account by canonical email
        exists_by_email: Uniqueness check
        save: Insert or update an account
        delete: Delete an account
    """

    async def find_by_id(self, account_id: UUID) -> Account | None:
        """Find account by ID.

        Args:
            account_id: Account identifier.

        Returns:
            Account if found, None otherwise.
        """
        ...

    async def find_by_email(self, email: str) -> Account | None:
        """Find account by email (case-insensitive).

        Args:
            email: Account email.

        Returns:
            Account if found, None otherwise.
        """
        ...

    async def exists_by_email(self, email: str) -> bool:
        """Check whether an account already uses this email."""
        ...

    async def save(self, account: Account) -> None:
        """Insert a new account or update an existing one."""
        ...

    async def delete(self, account_id: UUID) -> None:
        """Delete an account by ID."""
        ...
