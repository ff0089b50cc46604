"""Application services shared by command and query handlers."""

from storefront.application.services.notification_dispatcher import (
    NotificationDispatcher,
)
from storefront.application.services.object_cleanup import delete_objects
from storefront.application.services.ownership_guard import OwnershipGuard, authorize
from storefront.application.services.verification_lifecycle import (
    IssuedToken,
    Suppressed,
    VerificationLifecycleManager,
)

__all__ = [
    "IssuedToken",
    "NotificationDispatcher",
    "OwnershipGuard",
    "Suppressed",
    "VerificationLifecycleManager",
    "authorize",
    "delete_objects",
]
