"""AWS S3 adapter for product image objects.

Implements ObjectStorageProtocol with a boto3 S3 client. Calls run in the
default executor because boto3 is synchronous.

Metrics:
    s3.upload.success / s3.upload.error
    s3.delete.success / s3.delete.error
"""

import asyncio
from functools import partial
from typing import Any

from botocore.exceptions import BotoCoreError, ClientError

from storefront.core.enums import ErrorCode
from storefront.core.result import Failure, Result, Success
from storefront.domain.protocols import LoggerProtocol, MetricsProtocol
from storefront.infrastructure.enums import InfrastructureErrorCode
from storefront.infrastructure.errors import ExternalServiceError

_NOT_FOUND_CODES = frozenset({"404", "NoSuchKey", "NotFound"})


class S3ObjectStorage:
    """Stores objects in one S3 bucket.

    Example:
        >>> storage = S3ObjectStorage(
        ...     client=boto3.client("s3"), bucket="images", logger=logger, metrics=metrics
        ... )
        >>> await storage.put("owner/product/1700000000000-a.png", data, "image/png")
    """

    def __init__(
        self,
        *,
        client: Any,
        bucket: str,
        logger: LoggerProtocol,
        metrics: MetricsProtocol,
    ) -> None:
        """Initialize S3 storage.

        Args:
            client: boto3 S3 client (injected so tests can use moto).
            bucket: Bucket name.
            logger: Structured logger.
            metrics: Counter sink.
        """
        self.client = client
        self.bucket = bucket
        self._logger = logger
        self._metrics = metrics

    async def put(
        self, key: str, content: bytes, content_type: str
    ) -> Result[None, ExternalServiceError]:
        """Upload an object.

        Returns:
            Success(None), or Failure(ExternalServiceError) if S3 rejected it.
        """
        try:
            await self._run(
                self.client.put_object,
                Bucket=self.bucket,
                Key=key,
                Body=content,
                ContentType=content_type,
            )
        except (ClientError, BotoCoreError) as e:
            self._metrics.increment("s3.upload.error")
            self._logger.error("s3_upload_failed", error=e, storage_key=key)
            return Failure(
                error=self._error(
                    "S3 upload failed",
                    InfrastructureErrorCode.OBJECT_STORAGE_PUT_FAILED,
                    e,
                )
            )

        self._metrics.increment("s3.upload.success")
        self._logger.info("s3_upload_succeeded", storage_key=key, size=len(content))
        return Success(value=None)

    async def delete(self, key: str) -> Result[None, ExternalServiceError]:
        """Delete an object. S3 reports success for absent keys too."""
        try:
            await self._run(self.client.delete_object, Bucket=self.bucket, Key=key)
        except (ClientError, BotoCoreError) as e:
            self._metrics.increment("s3.delete.error")
            self._logger.error("s3_delete_failed", error=e, storage_key=key)
            return Failure(
                error=self._error(
                    "S3 delete failed",
                    InfrastructureErrorCode.OBJECT_STORAGE_DELETE_FAILED,
                    e,
                )
            )

        self._metrics.increment("s3.delete.success")
        self._logger.info("s3_delete_succeeded", storage_key=key)
        return Success(value=None)

    async def exists(self, key: str) -> Result[bool, ExternalServiceError]:
        """Check for an object with head_object.

        Returns:
            Success(True/False), or Failure for errors other than not found.
        """
        try:
            await self._run(self.client.head_object, Bucket=self.bucket, Key=key)
        except ClientError as e:
            if e.response.get("Error", {}).get("Code") in _NOT_FOUND_CODES:
                return Success(value=False)
            return Failure(
                error=self._error(
                    "S3 head failed",
                    InfrastructureErrorCode.OBJECT_STORAGE_HEAD_FAILED,
                    e,
                )
            )
        except BotoCoreError as e:
            return Failure(
                error=self._error(
                    "S3 head failed",
                    InfrastructureErrorCode.OBJECT_STORAGE_HEAD_FAILED,
                    e,
                )
            )
        return Success(value=True)

    async def _run(self, func: Any, /, **kwargs: Any) -> Any:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, partial(func, **kwargs))

    def _error(
        self,
        message: str,
        infrastructure_code: InfrastructureErrorCode,
        e: Exception,
    ) -> ExternalServiceError:
        return ExternalServiceError(
            code=ErrorCode.OBJECT_STORAGE_FAILURE,
            message=message,
            infrastructure_code=infrastructure_code,
            service_name="s3",
            details={"error": str(e), "bucket": self.bucket},
        )
