"""Storage collaborator failure.

StorageError reports that the durable record store or the object storage
collaborator could not complete an operation. Callers treat it as retryable
and must not assume the operation took effect.
"""

from dataclasses import dataclass

from storefront.core.enums import ErrorCode
from storefront.core.errors import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class StorageError(DomainError):
    """Record store or object storage unavailable.

    Attributes:
        operation: Name of the failed operation (e.g. "issue", "put").
    """

    operation: str

    @classmethod
    def from_exception(
        cls,
        operation: str,
        error: Exception,
        *,
        code: ErrorCode = ErrorCode.STORAGE_FAILURE,
    ) -> "StorageError":
        """Wrap an unexpected collaborator exception.

        Args:
            operation: Name of the failed operation.
            error: The exception raised by the collaborator.
            code: STORAGE_FAILURE (record store) or OBJECT_STORAGE_FAILURE.

        Returns:
            StorageError carrying the exception type in details.
        """
        return cls(
            code=code,
            message=f"Storage unavailable during {operation}",
            operation=operation,
            details={"error_type": type(error).__name__},
        )
