"""Notification dispatch failure.

Never fatal to the operation that triggered the dispatch. Account creation
logs and counts it; an explicit resend surfaces it.
"""

from dataclasses import dataclass

from storefront.core.errors import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class DispatchError(DomainError):
    """Verification event could not be published.

    Attributes:
        email: Recipient of the undelivered notification.
    """

    email: str
