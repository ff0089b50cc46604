"""Object storage adapters."""

from storefront.infrastructure.storage.noop_storage import NoOpObjectStorage
from storefront.infrastructure.storage.s3_storage import S3ObjectStorage

__all__ = ["NoOpObjectStorage", "S3ObjectStorage"]
