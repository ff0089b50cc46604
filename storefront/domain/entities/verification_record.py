"""VerificationRecord domain entity.

One issued email-confirmation attempt: a token, its expiry and a verified
flag.

State machine:
    Unverified(unexpired) -> Verified            (terminal)
    Unverified(unexpired) -> Unverified(expired) (terminal)
    any                   -> deleted             (via sweep)

An expired record can never become verified, and a verified record is never
mutated again.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta
from uuid import UUID

from uuid_extensions import uuid7


@dataclass
class VerificationRecord:
    """Email verification record.

    Business Rules:
        - token is unique across all records
        - expires_at is strictly after created_at
        - verified flips from False to True at most once
        - expiry is checked with ``now > expires_at``; the exact expiry
          instant still counts as live

    Attributes:
        id: Unique record identifier.
        subject_email: Email of the account under verification. Not unique:
            an email may have several historical records.
        token: Unguessable random token.
        created_at: Issue time (immutable).
        expires_at: created_at + TTL.
        verified: Whether the token has been redeemed.

    Example:
        >>> record = VerificationRecord.issue(
        ...     subject_email="u@x.com",
        ...     token="ab12...",
        ...     now=datetime.now(UTC),
        ...     ttl=timedelta(minutes=1),
        ... )
        >>> record.is_live(now)
        True
    """

    id: UUID
    subject_email: str
    token: str
    created_at: datetime
    expires_at: datetime
    verified: bool = False

    def __post_init__(self) -> None:
        if self.expires_at <= self.created_at:
            raise ValueError("expires_at must be after created_at")
        if not self.token:
            raise ValueError("token cannot be empty")

    @classmethod
    def issue(
        cls,
        *,
        subject_email: str,
        token: str,
        now: datetime,
        ttl: timedelta,
    ) -> "VerificationRecord":
        """Create a new unverified record expiring ``ttl`` after ``now``.

        Args:
            subject_email: Account email under verification.
            token: Freshly generated token.
            now: Issue time.
            ttl: Token lifetime (must be positive).

        Returns:
            VerificationRecord: New record with verified=False.
        """
        return cls(
            id=uuid7(),
            subject_email=subject_email,
            token=token,
            created_at=now,
            expires_at=now + ttl,
            verified=False,
        )

    def is_expired(self, now: datetime) -> bool:
        """Check whether the token lifetime has passed."""
        return now > self.expires_at

    def is_live(self, now: datetime) -> bool:
        """Check whether the record still suppresses a new issue.

        A live record is unverified and unexpired.
        """
        return not self.verified and not self.is_expired(now)

    def mark_verified(self) -> None:
        """Flip the record to verified.

        Raises:
            ValueError: If the record is already verified. Callers check
                ``verified`` first and report AlreadyVerified.
        """
        if self.verified:
            raise ValueError("verification record is already verified")
        self.verified = True
