"""ObjectStorageProtocol: blob storage keyed by an opaque content key.

The core only needs put, exists and delete. Bytes are forwarded untouched.

Implementations:
    - S3ObjectStorage: AWS S3 via boto3
    - NoOpObjectStorage: accepts everything, stores nothing (no bucket configured)
"""

from typing import Protocol

from storefront.core.errors import DomainError
from storefront.core.result import Result


class ObjectStorageProtocol(Protocol):
    """Blob storage port."""

    async def put(
        self, key: str, content: bytes, content_type: str
    ) -> Result[None, DomainError]:
        """Store an object under ``key``.

        Args:
            key: Content key.
            content: Raw bytes.
            content_type: MIME type.

        Returns:
            Success(None) or Failure(DomainError).
        """
        ...

    async def delete(self, key: str) -> Result[None, DomainError]:
        """Delete the object under ``key`` (absent keys succeed)."""
        ...

    async def exists(self, key: str) -> Result[bool, DomainError]:
        """Check whether an object exists under ``key``."""
        ...
