"""Integration fixtures: a real SQLite database per test."""

import pytest

from storefront.infrastructure.persistence.database import Database


@pytest.fixture
async def test_database(tmp_path):
    """Provide a fresh database with all tables created.

    Returns the Database object (not a session) so tests can open several
    independent sessions, e.g. to check what another session can see after
    a commit or rollback.

    Usage:
        async def test_something(test_database):
            async with test_database.async_session() as session:
                ...
    """
    db = Database(database_url=f"sqlite+aiosqlite:///{tmp_path / 'storefront.db'}")
    await db.create_all()
    yield db
    await db.drop_all()
    await db.close()


@pytest.fixture
async def session(test_database):
    async with test_database.async_session() as session:
        yield session
