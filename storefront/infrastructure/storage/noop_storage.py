"""No-op object storage.

Selected by the container when no S3 bucket is configured. Accepts every
upload, keeps only the set of keys in memory so exists() stays consistent
within the process.
"""

from storefront.core.errors import DomainError
from storefront.core.result import Result, Success
from storefront.domain.protocols import LoggerProtocol


class NoOpObjectStorage:
    """Object storage that keeps no bytes."""

    def __init__(self, logger: LoggerProtocol) -> None:
        self._logger = logger
        self._keys: set[str] = set()

    async def put(
        self, key: str, content: bytes, content_type: str
    ) -> Result[None, DomainError]:
        self._keys.add(key)
        self._logger.debug("object_dropped", storage_key=key, size=len(content))
        return Success(value=None)

    async def delete(self, key: str) -> Result[None, DomainError]:
        self._keys.discard(key)
        return Success(value=None)

    async def exists(self, key: str) -> Result[bool, DomainError]:
        return Success(value=key in self._keys)
