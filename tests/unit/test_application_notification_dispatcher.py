"""Unit tests for NotificationDispatcher."""

import json

import pytest

from storefront.application.services import NotificationDispatcher
from storefront.application.services.notification_dispatcher import build_payload
from storefront.core.enums import ErrorCode
from storefront.core.result import Failure, Success
from storefront.domain.errors import DispatchError
from tests.utils.fakes import RecordingPublisher
from tests.utils.utils import TEST_TOPIC


@pytest.mark.unit
class TestBuildPayload:
    def test_payload_keys(self):
        payload = json.loads(build_payload("u@example.com", "abc", "Una"))

        assert payload == {"email": "u@example.com", "token": "abc", "firstName": "Una"}


@pytest.mark.unit
class TestDispatch:
    """Test NotificationDispatcher.dispatch()."""

    @pytest.mark.asyncio
    async def test_dispatch_publishes_to_topic(self, dispatcher, publisher, metrics):
        # Act
        result = await dispatcher.dispatch("u@example.com", "abc", "Una")

        # Assert
        assert result == Success(value="msg-1")
        topic, payload = publisher.messages[0]
        assert topic == TEST_TOPIC
        assert json.loads(payload)["token"] == "abc"
        assert metrics.get_stats("sns.verification.send.success")["count"] == 1
        assert metrics.get_stats("sns.verification.send.time")["count"] == 1

    @pytest.mark.asyncio
    async def test_publisher_failure_becomes_dispatch_error(self, logger, metrics):
        # Arrange
        dispatcher = NotificationDispatcher(
            publisher=RecordingPublisher(fail=True),
            topic=TEST_TOPIC,
            logger=logger,
            metrics=metrics,
        )

        # Act
        result = await dispatcher.dispatch("u@example.com", "abc", "Una")

        # Assert
        assert isinstance(result, Failure)
        assert isinstance(result.error, DispatchError)
        assert result.error.code == ErrorCode.DISPATCH_FAILURE
        assert result.error.email == "u@example.com"
        assert metrics.get_stats("sns.verification.send.failure")["count"] == 1
        logger.error.assert_called_once()

    @pytest.mark.asyncio
    async def test_publisher_exception_is_contained(self, logger, metrics):
        dispatcher = NotificationDispatcher(
            publisher=RecordingPublisher(raise_error=RuntimeError("socket closed")),
            topic=TEST_TOPIC,
            logger=logger,
            metrics=metrics,
        )

        result = await dispatcher.dispatch("u@example.com", "abc", "Una")

        assert isinstance(result.error, DispatchError)
        assert result.error.details == {"error_type": "RuntimeError"}
        assert metrics.get_stats("sns.verification.send.failure")["count"] == 1
