"""Best-effort removal of stored objects after their metadata is gone.

Objects are deleted only after the database commit that removed their
metadata, so a failure here leaves an orphaned object, never a dangling
image row. Failures are logged and skipped.
"""

from collections.abc import Iterable

from storefront.core.result import Failure
from storefront.domain.protocols import LoggerProtocol, ObjectStorageProtocol


async def delete_objects(
    storage: ObjectStorageProtocol,
    keys: Iterable[str],
    logger: LoggerProtocol,
) -> int:
    """Delete each key, continuing past failures.

    Args:
        storage: Object storage adapter.
        keys: Storage keys to delete.
        logger: Structured logger.

    Returns:
        Number of keys that could not be deleted.
    """
    failed = 0
    for key in keys:
        try:
            result = await storage.delete(key)
        except Exception as e:
            logger.error("object_delete_failed", error=e, storage_key=key)
            failed += 1
            continue
        if isinstance(result, Failure):
            logger.warning(
                "object_delete_failed", storage_key=key, reason=result.error.message
            )
            failed += 1
    return failed
