"""UnitOfWorkProtocol: transaction boundary over a request session.

Repositories sharing one session only flush. Commit makes every pending
change durable at once; rollback discards all of them.
"""

from typing import Protocol


class UnitOfWorkProtocol(Protocol):
    """Commit/rollback boundary shared by the repositories of one request."""

    async def commit(self) -> None:
        """Make all pending changes durable together."""
        ...

    async def rollback(self) -> None:
        """Discard all pending changes."""
        ...
