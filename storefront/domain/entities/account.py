"""Account domain entity (resource owner).

Pure business logic, no framework dependencies.
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from storefront.domain.validators import clean_optional


@dataclass
class Account:
    """Account domain entity.

    Business Rules:
        - email is unique and never changes
        - only first_name, last_name and password may be updated
        - verified mirrors the latest successful email verification

    Attributes:
        id: Unique account identifier.
        email: Canonical (normalized) email used for authentication.
        password_hash: Opaque hash from the password hashing collaborator.
        first_name: Given name.
        last_name: Family name.
        created_at: Creation timestamp.
        updated_at: Last modification timestamp.
        verified: Email verification status.
    """

    id: UUID
    email: str
    password_hash: str
    first_name: str
    last_name: str
    created_at: datetime
    updated_at: datetime
    verified: bool = False

    def mark_verified(self, now: datetime) -> None:
        """Set the verified flag (idempotent)."""
        self.verified = True
        self.updated_at = now

    def apply_profile_update(
        self,
        *,
        now: datetime,
        first_name: str | None = None,
        last_name: str | None = None,
        password_hash: str | None = None,
    ) -> bool:
        """Apply a partial update.

        Unset or blank fields are left untouched. Names equal to the current
        value do not count as a change. A supplied password hash always
        counts, since the plaintext cannot be compared to the stored hash.

        Args:
            now: Update time, stored in updated_at when something changed.
            first_name: New first name, if supplied.
            last_name: New last name, if supplied.
            password_hash: Hash of the new password, if supplied.

        Returns:
            bool: True if any field changed.
        """
        changed = False

        new_first = clean_optional(first_name)
        if new_first is not None and new_first != self.first_name:
            self.first_name = new_first
            changed = True

        new_last = clean_optional(last_name)
        if new_last is not None and new_last != self.last_name:
            self.last_name = new_last
            changed = True

        if password_hash:
            self.password_hash = password_hash
            changed = True

        if changed:
            self.updated_at = now
        return changed
