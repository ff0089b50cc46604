"""SqlAlchemyUnitOfWork - commit boundary over a request-scoped session.

Every repository of a request shares the same AsyncSession and only
flushes. Handlers call commit() once their changes form a consistent
state, so several repositories' writes become durable together.
"""

from sqlalchemy.ext.asyncio import AsyncSession


class SqlAlchemyUnitOfWork:
    """Implements UnitOfWorkProtocol over an AsyncSession."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def commit(self) -> None:
        await self.session.commit()

    async def rollback(self) -> None:
        await self.session.rollback()
