"""Email verification record database model.

Security:
    - token: Random 32-byte hex string (unguessable, 2^256 possibilities)
    - expires_at: created_at + configured TTL
    - verified: One-time use (set once on redemption)
"""

from datetime import datetime

from sqlalchemy import Boolean, Index, String
from sqlalchemy.orm import Mapped, mapped_column

from storefront.core.constants import TOKEN_HEX_LENGTH
from storefront.infrastructure.persistence.base import BaseModel, UTCDateTime


class EmailVerificationModel(BaseModel):
    """Email verification record.

    Keyed by subject email rather than account id. Records are removed by
    the sweep once expired, or together with their account.

    Token Lifecycle:
        1. Created on signup or resend (unless a live record exists)
        2. Sent to the subject email via the notification topic
        3. Redeemed once (verified set to True)
        4. Deleted by the sweep after expires_at

    Fields:
        id: UUID primary key (from BaseModel)
        created_at: Issue time (from BaseModel)
        subject_email: Email the token was sent to (indexed)
        token: Random hex string (64 characters, unique)
        expires_at: Expiry (indexed for the sweep)
        verified: Redemption status

    Indexes:
        - idx_email_verifications_live: (subject_email, verified, expires_at)
          for the suppression check
    """

    __tablename__ = "email_verifications"

    subject_email: Mapped[str] = mapped_column(
        String(255),
        index=True,
        nullable=False,
        comment="Email the token was issued for",
    )
    token: Mapped[str] = mapped_column(
        String(TOKEN_HEX_LENGTH),
        unique=True,
        nullable=False,
        comment="Random verification token (64-char hex string)",
    )
    expires_at: Mapped[datetime] = mapped_column(
        UTCDateTime,
        index=True,
        nullable=False,
        comment="Timestamp when token expires",
    )
    verified: Mapped[bool] = mapped_column(
        Boolean,
        default=False,
        nullable=False,
        comment="Whether the token was redeemed",
    )

    __table_args__ = (
        Index(
            "idx_email_verifications_live",
            "subject_email",
            "verified",
            "expires_at",
        ),
    )

    def __repr__(self) -> str:
        return (
            f"<EmailVerificationModel("
            f"id={self.id}, "
            f"subject_email={self.subject_email}, "
            f"expires_at={self.expires_at}, "
            f"verified={self.verified}"
            f")>"
        )
