"""Periodic sweep of expired verification records.

Runs the sweep every ``interval_seconds`` as an asyncio task. Each run
gets a fresh database session through the injected ``sweep`` callable, so
the job holds no connection between runs.

Architecture:
- Follows fail-open pattern: a failed run is logged and the loop continues
- Returns Result types from run_once for direct use and tests
"""

import asyncio
from collections.abc import Awaitable, Callable
from typing import TypeAlias

from storefront.core.result import Failure, Result, Success
from storefront.domain.errors import StorageError
from storefront.domain.protocols import LoggerProtocol

SweepCallable: TypeAlias = Callable[[], Awaitable[Result[int, StorageError]]]


class ExpiredVerificationSweeper:
    """Background task deleting expired verification records.

    Example:
        >>> sweeper = ExpiredVerificationSweeper(
        ...     sweep=run_sweep, interval_seconds=60, logger=logger
        ... )
        >>> sweeper.start()
        >>> ...
        >>> await sweeper.stop()
    """

    def __init__(
        self,
        *,
        sweep: SweepCallable,
        interval_seconds: float,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize sweeper.

        Args:
            sweep: Runs one sweep in its own session and returns the count.
            interval_seconds: Delay between runs (must be positive).
            logger: Structured logger.

        Raises:
            ValueError: If interval_seconds is not positive.
        """
        if interval_seconds <= 0:
            raise ValueError("interval_seconds must be positive")
        self._sweep = sweep
        self._interval = interval_seconds
        self._logger = logger
        self._task: asyncio.Task[None] | None = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    async def run_once(self) -> Result[int, StorageError]:
        """Run a single sweep and log the outcome."""
        try:
            result = await self._sweep()
        except Exception as e:
            self._logger.error("verification_sweep_crashed", error=e)
            return Failure(error=StorageError.from_exception("sweep_expired", e))

        match result:
            case Success(value=deleted):
                self._logger.info("verification_sweep_run", deleted=deleted)
            case Failure(error=error):
                self._logger.warning(
                    "verification_sweep_run_failed", reason=error.message
                )
        return result

    def start(self) -> None:
        """Start the loop on the running event loop (idempotent)."""
        if self.running:
            return
        self._task = asyncio.create_task(self._loop(), name="verification-sweeper")
        self._logger.info("verification_sweeper_started", interval=self._interval)

    async def stop(self) -> None:
        """Cancel the loop and wait for it to finish."""
        if self._task is None:
            return
        self._task.cancel()
        try:
            await self._task
        except asyncio.CancelledError:
            pass
        self._task = None
        self._logger.info("verification_sweeper_stopped")

    async def _loop(self) -> None:
        while True:
            await self.run_once()
            await asyncio.sleep(self._interval)
