"""Verification lifecycle errors.

Returned (never raised) by the verification lifecycle manager. The code
tells which rule rejected the attempt:

- ErrorCode.INVALID_TOKEN: no record matches the (email, token) pair
- ErrorCode.ALREADY_VERIFIED: the token was already redeemed
- ErrorCode.TOKEN_EXPIRED: the token outlived its TTL before redemption
"""

from dataclasses import dataclass

from storefront.core.errors import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class VerificationError(DomainError):
    """Verification attempt rejected.

    Attributes:
        email: Email the attempt was made for.
    """

    email: str | None = None
