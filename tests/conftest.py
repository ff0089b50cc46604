"""Pytest configuration and shared fixtures.

Unit fixtures wire the application services to in-memory fakes from
tests/utils/fakes.py. Integration fixtures (tests/integration/conftest.py)
use a real SQLite database instead.
"""

from datetime import timedelta
from unittest.mock import Mock

import pytest

from storefront.application.services import (
    NotificationDispatcher,
    OwnershipGuard,
    VerificationLifecycleManager,
)
from storefront.infrastructure.metrics import InMemoryMetrics
from tests.utils.fakes import (
    FakePasswordService,
    FixedClock,
    InMemoryAccountRepository,
    InMemoryObjectStorage,
    InMemoryProductImageRepository,
    InMemoryProductRepository,
    InMemoryVerificationRecordRepository,
    RecordingPublisher,
    RecordingTokenGenerator,
    RecordingUnitOfWork,
)
from tests.utils.utils import FIXED_NOW, TEST_TOPIC


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests (in-memory collaborators)")
    config.addinivalue_line(
        "markers", "integration: Integration tests (real SQLite database)"
    )


def pytest_collection_modifyitems(config, items):
    """Automatically mark async tests with asyncio marker."""
    for item in items:
        if "async" in item.keywords:
            item.add_marker(pytest.mark.asyncio)


@pytest.fixture
def clock():
    return FixedClock(FIXED_NOW)


@pytest.fixture
def token_generator():
    return RecordingTokenGenerator()


@pytest.fixture
def password_service():
    return FakePasswordService()


@pytest.fixture
def uow():
    return RecordingUnitOfWork()


@pytest.fixture
def logger():
    """Mock logger; bind() returns the same mock so bound calls are visible."""
    mock = Mock()
    mock.bind.return_value = mock
    return mock


@pytest.fixture
def metrics():
    return InMemoryMetrics()


@pytest.fixture
def account_repo():
    return InMemoryAccountRepository()


@pytest.fixture
def product_repo():
    return InMemoryProductRepository()


@pytest.fixture
def image_repo():
    return InMemoryProductImageRepository()


@pytest.fixture
def verification_repo():
    return InMemoryVerificationRecordRepository()


@pytest.fixture
def publisher():
    return RecordingPublisher()


@pytest.fixture
def object_storage():
    return InMemoryObjectStorage()


@pytest.fixture
def lifecycle(verification_repo, account_repo, uow, clock, token_generator, logger, metrics):
    return VerificationLifecycleManager(
        verification_repo=verification_repo,
        account_repo=account_repo,
        unit_of_work=uow,
        clock=clock,
        token_generator=token_generator,
        ttl=timedelta(minutes=1),
        logger=logger,
        metrics=metrics,
    )


@pytest.fixture
def dispatcher(publisher, logger, metrics):
    return NotificationDispatcher(
        publisher=publisher, topic=TEST_TOPIC, logger=logger, metrics=metrics
    )


@pytest.fixture
def guard(account_repo, product_repo, image_repo):
    return OwnershipGuard(account_repo, product_repo, image_repo)
