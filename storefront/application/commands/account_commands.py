"""Account commands (CQRS write operations).

All commands are immutable (frozen=True) and keyword-only (kw_only=True).

Pattern:
- Commands are data containers (no logic)
- Handlers execute business logic and return Result types
- principal_email is the identity resolved by the edge layer's
  authentication, never taken from the request body
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class CreateAccount:
    """Sign up a new account.

    Creates the account, issues a verification token and attempts to send
    it. A failed send does not fail the signup.

    Attributes:
        email: Account email (validated and normalized by the handler).
        password: Plaintext password (hashed by the handler).
        first_name: Given name.
        last_name: Family name.

    Example:
        >>> command = CreateAccount(
        ...     email="u@x.com",
        ...     password="SecurePass123!",
        ...     first_name="Una",
        ...     last_name="Xu",
        ... )
        >>> result = await handler.handle(command)
    """

    email: str
    password: str
    first_name: str
    last_name: str


@dataclass(frozen=True, kw_only=True)
class AuthenticateAccount:
    """Resolve a principal from email and password.

    Attributes:
        email: Account email.
        password: Plaintext password.
    """

    email: str
    password: str


@dataclass(frozen=True, kw_only=True)
class UpdateAccount:
    """Partially update the principal's own account.

    None or blank fields are left unchanged.

    Attributes:
        account_id: Target account.
        principal_email: Authenticated identity.
        first_name: New first name.
        last_name: New last name.
        password: New plaintext password.
    """

    account_id: UUID
    principal_email: str
    first_name: str | None = None
    last_name: str | None = None
    password: str | None = None


@dataclass(frozen=True, kw_only=True)
class DeleteAccount:
    """Delete the principal's own account.

    Keyed on the authenticated identity only; there is deliberately no
    account id field.

    Attributes:
        principal_email: Authenticated identity.
    """

    principal_email: str


@dataclass(frozen=True, kw_only=True)
class VerifyEmail:
    """Redeem a verification token.

    Attributes:
        email: Email the token was sent to.
        token: Token from the verification message.
    """

    email: str
    token: str


@dataclass(frozen=True, kw_only=True)
class ResendVerification:
    """Send a fresh verification token for an unverified account.

    Attributes:
        email: Account email.
    """

    email: str


@dataclass(frozen=True, kw_only=True)
class SweepExpiredVerifications:
    """Delete verification records that expired before ``now``.

    Attributes:
        now: Cutoff; None means the handler's clock.
    """

    now: datetime | None = None