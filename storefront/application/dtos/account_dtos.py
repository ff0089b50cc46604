"""Account DTOs (Data Transfer Objects).

Result dataclasses carried from account handlers back to the edge layer.
They never include the password hash.

DTOs:
    - AccountResult: Public view of an account
    - AccountSignup: Result of CreateAccount (account + verification outcome)
    - AuthenticatedPrincipal: Result of AuthenticateAccount
    - VerificationResult: Result of VerifyEmail
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from storefront.domain.entities import Account


@dataclass(frozen=True, kw_only=True)
class AccountResult:
    """Account view without credentials.

    Attributes:
        id: Account identifier.
        email: Canonical email.
        first_name: Given name.
        last_name: Family name.
        verified: Email verification status.
        created_at: Creation timestamp.
        updated_at: Last modification timestamp.
    """

    id: UUID
    email: str
    first_name: str
    last_name: str
    verified: bool
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, account: Account) -> "AccountResult":
        return cls(
            id=account.id,
            email=account.email,
            first_name=account.first_name,
            last_name=account.last_name,
            verified=account.verified,
            created_at=account.created_at,
            updated_at=account.updated_at,
        )


@dataclass(frozen=True, kw_only=True)
class AccountSignup:
    """Outcome of a signup.

    Attributes:
        account: Created account.
        verification_issued: A new token was stored.
        verification_suppressed: A live token already existed.
        verification_dispatched: The token reached the notification endpoint.
    """

    account: AccountResult
    verification_issued: bool
    verification_suppressed: bool
    verification_dispatched: bool


@dataclass(frozen=True, kw_only=True)
class AuthenticatedPrincipal:
    """Identity resolved from credentials.

    Attributes:
        account_id: Account identifier.
        email: Canonical email used by the ownership guard.
        verified: Email verification status.
    """

    account_id: UUID
    email: str
    verified: bool


@dataclass(frozen=True, kw_only=True)
class VerificationResult:
    """Outcome of a successful verification.

    Attributes:
        email: Verified email.
        message: Confirmation message.
    """

    email: str
    message: str = "Email verified successfully"
