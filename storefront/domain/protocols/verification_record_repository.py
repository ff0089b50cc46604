"""VerificationRecordRepository protocol for verification record persistence.

Port (interface) for hexagonal architecture.
Infrastructure layer implements this protocol.

Repositories flush but never commit. The unit of work owning the session
decides when changes become durable, so the verified transition and the
account update can commit together.
"""

from datetime import datetime
from typing import Protocol
from uuid import UUID

from storefront.domain.entities.verification_record import VerificationRecord


class VerificationRecordRepository(Protocol):
    """Verification record store (port).

    Methods:
        get: Retrieve record by ID
        find_by_email_and_token: Exact (email, token) lookup
        find_latest_by_email: Most recently created record for an email
        exists_unexpired_unverified: Suppression check
        save: Insert or update a record
        mark_verified_if_unverified: Conditional verified transition
        delete_expired_before: Sweep
        delete: Delete a single record
        delete_by_email: Delete every record for an email
    """

    async def get(self, record_id: UUID) -> VerificationRecord | None:
        """Find record by ID.

        Args:
            record_id: Record identifier.

        Returns:
            VerificationRecord if found, None otherwise.
        """
        ...

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
        ...

    async def find_latest_by_email(self, email: str) -> VerificationRecord | None:
        """Find the most recently created record for an email.

        Args:
            email: Subject email.

        Returns:
            Newest VerificationRecord, or None if the email has none.
        """
        ...

    async def exists_unexpired_unverified(self, email: str, now: datetime) -> bool:
        """Check for a live record (unverified and ``expires_at >= now``).

        Args:
            email: Subject email.
            now: Reference time.

        Returns:
            True if at least one live record exists.
        """
        ...

    async def save(self, record: VerificationRecord) -> None:
        """Insert a new record or update an existing one.

        Args:
            record: Record to persist.
        """
        ...

    async def mark_verified_if_unverified(self, record_id: UUID) -> bool:
        """Flip ``verified`` to true only if it is still false.

        The check and the write are a single statement, so of several
        concurrent redemptions of one token exactly one sees True.

        Args:
            record_id: Record identifier.

        Returns:
            True if this call performed the transition, False if the record
            was already verified or no longer exists.
        """
        ...

    async def delete_expired_before(self, cutoff: datetime) -> int:
        """Delete every record with ``expires_at < cutoff``, verified or not.

        Args:
            cutoff: Reference time.

        Returns:
            Number of records deleted.
        """
        ...

    async def delete(self, record_id: UUID) -> None:
        """Delete a record by ID (no-op when absent).

        Args:
            record_id: Record identifier.
        """
        ...

    async def delete_by_email(self, email: str) -> int:
        """Delete every record for an email (account deletion).

        Args:
            email: Subject email.

        Returns:
            Number of records deleted.
        """
        ...
