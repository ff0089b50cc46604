"""AccountRepository - SQLAlchemy implementation of AccountRepository protocol.

Adapter for hexagonal architecture.
Maps between domain Account entities and database AccountModel.
"""

from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.domain.entities import Account
from storefront.infrastructure.persistence.models import AccountModel


class AccountRepository:
    """SQLAlchemy implementation of AccountRepository protocol.

    This class does NOT inherit from the protocol (structural typing).
    Emails are stored canonical, so lookups are exact matches.

    Attributes:
        session: SQLAlchemy async session for database operations.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    async def find_by_id(self, account_id: UUID) -> Account | None:
        """Find account by ID.

        Args:
            account_id: Account's unique identifier.

        Returns:
            Domain Account entity if found, None otherwise.
        """
        model = await self.session.get(AccountModel, account_id)
        return self._to_domain(model) if model else None

    async def find_by_email(self, email: str) -> Account | None:
        """Find account by canonical email.

        Args:
            email: Canonical email address.

        Returns:
            Domain Account entity if found, None otherwise.
        """
        stmt = select(AccountModel).where(AccountModel.email == email)
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_domain(model) if model else None

    async def exists_by_email(self, email: str) -> bool:
        stmt = select(AccountModel.id).where(AccountModel.email == email)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def save(self, account: Account) -> None:
        """Save an account (create or update).

        Args:
            account: Domain Account entity to persist.

        Raises:
            IntegrityError: If the email already exists.
        """
        existing = await self.session.get(AccountModel, account.id)
        if existing is None:
            self.session.add(self._to_model(account))
        else:
            existing.password_hash = account.password_hash
            existing.first_name = account.first_name
            existing.last_name = account.last_name
            existing.verified = account.verified
            existing.updated_at = account.updated_at
        await self.session.flush()

    async def delete(self, account_id: UUID) -> None:
        """Delete an account (hard delete).

        Args:
            account_id: Account's unique identifier.
        """
        stmt = delete(AccountModel).where(AccountModel.id == account_id)
        await self.session.execute(stmt)
        await self.session.flush()

    def _to_domain(self, model: AccountModel) -> Account:
        return Account(
            id=model.id,
            email=model.email,
            password_hash=model.password_hash,
            first_name=model.first_name,
            last_name=model.last_name,
            created_at=model.created_at,
            updated_at=model.updated_at,
            verified=model.verified,
        )

    def _to_model(self, account: Account) -> AccountModel:
        return AccountModel(
            id=account.id,
            email=account.email,
            password_hash=account.password_hash,
            first_name=account.first_name,
            last_name=account.last_name,
            created_at=account.created_at,
            updated_at=account.updated_at,
            verified=account.verified,
        )
