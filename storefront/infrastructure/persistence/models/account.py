"""Account database model.

Security:
    - password_hash: NEVER stores plaintext passwords (bcrypt hashed)
"""

from sqlalchemy import Boolean, String
from sqlalchemy.orm import Mapped, mapped_column

from storefront.infrastructure.persistence.base import BaseMutableModel


class AccountModel(BaseMutableModel):
    """Account model (resource owner).

    Fields:
        id, created_at, updated_at: From BaseMutableModel
        email: Canonical email (unique, indexed)
        password_hash: Bcrypt hash
        first_name: Given name
        last_name: Family name
        verified: Email verification status
    """

    __tablename__ = "accounts"

    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        index=True,
        nullable=False,
        comment="Canonical email address",
    )
    password_hash: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Bcrypt password hash",
    )
    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    verified: Mapped[bool] = mapped_column(
        Boolean,
        default=False,
        nullable=False,
        comment="Email verification status",
    )

    def __repr__(self) -> str:
        return (
            f"<AccountModel(id={self.id}, email={self.email}, "
            f"verified={self.verified})>"
        )
