"""SweepExpiredVerifications command handler.

Deletes every verification record that expired before the cutoff. Called
periodically by ExpiredVerificationSweeper, or directly by operators.
"""

from storefront.application.commands.account_commands import (
    SweepExpiredVerifications,
)
from storefront.application.services import VerificationLifecycleManager
from storefront.core.result import Result
from storefront.domain.errors import StorageError
from storefront.domain.protocols import ClockProtocol


class SweepExpiredVerificationsHandler:
    """Handler for SweepExpiredVerifications command."""

    def __init__(
        self, lifecycle: VerificationLifecycleManager, clock: ClockProtocol
    ) -> None:
        self._lifecycle = lifecycle
        self._clock = clock

    async def handle(self, cmd: SweepExpiredVerifications) -> Result[int, StorageError]:
        """Run one sweep.

        Returns:
            Success(count) of deleted records, or Failure(StorageError).
        """
        cutoff = cmd.now if cmd.now is not None else self._clock.now()
        return await self._lifecycle.sweep_expired(cutoff)
