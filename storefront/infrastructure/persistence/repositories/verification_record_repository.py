"""VerificationRecordRepository - SQLAlchemy implementation.

Adapter for hexagonal architecture. Flushes but never commits; the
handler's unit of work owns the transaction.
"""

from datetime import datetime
from typing import Any, cast
from uuid import UUID

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.domain.entities import VerificationRecord
from storefront.infrastructure.persistence.models import EmailVerificationModel


class VerificationRecordRepository:
    """SQLAlchemy implementation of VerificationRecordRepository protocol.

    Attributes:
        session: SQLAlchemy async session for database operations.

    Example:
        >>> async with database.get_session() as session:
        ...     repo = VerificationRecordRepository(session)
        ...     record = await repo.find_by_email_and_token(email, token)
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    async def get(self, record_id: UUID) -> VerificationRecord | None:
        model = await self.session.get(EmailVerificationModel, record_id)
        return self._to_domain(model) if model else None

    async def find_by_email_and_token(
        self, email: str, token: str
    ) -> VerificationRecord | None:
        """Find the record matching both email and token exactly.

        Args:
            email: Subject email.
            token: Verification token.

        Returns:
            VerificationRecord if found, None otherwise.
        """
        stmt = select(EmailVerificationModel).where(
            EmailVerificationModel.subject_email == email,
            EmailVerificationModel.token == token,
        )
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_domain(model) if model else None

    async def find_latest_by_email(self, email: str) -> VerificationRecord | None:
        stmt = (
            select(EmailVerificationModel)
            .where(EmailVerificationModel.subject_email == email)
            .order_by(EmailVerificationModel.created_at.desc())
            .limit(1)
        )
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_domain(model) if model else None

    async def exists_unexpired_unverified(self, email: str, now: datetime) -> bool:
        """Check for a live record (unverified and ``expires_at >= now``).

        Args:
            email: Subject email.
            now: Reference time.

        Returns:
            True if at least one live record exists.
        """
        stmt = (
            select(EmailVerificationModel.id)
            .where(
                EmailVerificationModel.subject_email == email,
                EmailVerificationModel.verified.is_(False),
                EmailVerificationModel.expires_at >= now,
            )
            .limit(1)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def save(self, record: VerificationRecord) -> None:
        """Save a record (create or update).

        Only the verified flag of an existing record is ever updated.

        Args:
            record: Record to persist.
        """
        existing = await self.session.get(EmailVerificationModel, record.id)
        if existing is None:
            self.session.add(self._to_model(record))
        else:
            existing.verified = record.verified
        await self.session.flush()

    async def mark_verified_if_unverified(self, record_id: UUID) -> bool:
        """Conditionally set ``verified`` (UPDATE ... WHERE verified IS false).

        Args:
            record_id: Record identifier.

        Returns:
            True if exactly one row changed.
        """
        stmt = (
            update(EmailVerificationModel)
            .where(
                EmailVerificationModel.id == record_id,
                EmailVerificationModel.verified.is_(False),
            )
            .values(verified=True)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return cast(Any, result).rowcount == 1

    async def delete_expired_before(self, cutoff: datetime) -> int:
        """Delete every record with ``expires_at < cutoff``.

        Args:
            cutoff: Reference time.

        Returns:
            Number of records deleted.
        """
        stmt = delete(EmailVerificationModel).where(
            EmailVerificationModel.expires_at < cutoff
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return cast(Any, result).rowcount or 0

    async def delete(self, record_id: UUID) -> None:
        stmt = delete(EmailVerificationModel).where(
            EmailVerificationModel.id == record_id
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def delete_by_email(self, email: str) -> int:
        stmt = delete(EmailVerificationModel).where(
            EmailVerificationModel.subject_email == email
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return cast(Any, result).rowcount or 0

    # =========================================================================
    # Entity <-> Model Mapping (Private Methods)
    # =========================================================================

    def _to_domain(self, model: EmailVerificationModel) -> VerificationRecord:
        return VerificationRecord(
            id=model.id,
            subject_email=model.subject_email,
            token=model.token,
            created_at=model.created_at,
            expires_at=model.expires_at,
            verified=model.verified,
        )

    def _to_model(self, record: VerificationRecord) -> EmailVerificationModel:
        return EmailVerificationModel(
            id=record.id,
            subject_email=record.subject_email,
            token=record.token,
            created_at=record.created_at,
            expires_at=record.expires_at,
            verified=record.verified,
        )
