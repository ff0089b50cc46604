"""Domain errors package.

Usage:
    from storefront.domain.errors import VerificationError, StorageError
"""

from storefront.domain.errors.data_integrity_error import DataIntegrityError
from storefront.domain.errors.dispatch_error import DispatchError
from storefront.domain.errors.storage_error import StorageError
from storefront.domain.errors.verification_error import VerificationError

__all__ = [
    "DataIntegrityError",
    "DispatchError",
    "StorageError",
    "VerificationError",
]
