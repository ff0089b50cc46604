"""Verification notification dispatch.

Best-effort publication of a verification event to the configured topic.

Rules:
    - Only called after the verification record is committed.
    - Never touches the record store: a failed publish leaves the record in
      place, so the token stays redeemable if it reaches the user another
      way, and a resend becomes possible once the record expires.
    - Every failure (Failure result or a raised exception from the
      publisher) comes back as Failure(DispatchError), logged and counted.
      Whether that fails the caller is the caller's decision.

Payload:
    {"email": "...", "token": "...", "firstName": "..."}
"""

import json
import time

from storefront.core.constants import (
    PAYLOAD_EMAIL_KEY,
    PAYLOAD_FIRST_NAME_KEY,
    PAYLOAD_TOKEN_KEY,
)
from storefront.core.enums import ErrorCode
from storefront.core.result import Failure, Result, Success
from storefront.domain.errors import DispatchError
from storefront.domain.protocols import (
    LoggerProtocol,
    MetricsProtocol,
    NotificationPublisherProtocol,
)


def build_payload(email: str, token: str, first_name: str) -> str:
    """Serialize the verification event.

    Args:
        email: Recipient email.
        token: Verification token.
        first_name: Recipient first name.

    Returns:
        JSON document with email, token and firstName keys.
    """
    return json.dumps(
        {
            PAYLOAD_EMAIL_KEY: email,
            PAYLOAD_TOKEN_KEY: token,
            PAYLOAD_FIRST_NAME_KEY: first_name,
        }
    )


class NotificationDispatcher:
    """Publishes verification events with failure isolation.

    Example:
        >>> dispatcher = NotificationDispatcher(
        ...     publisher=publisher, topic=topic_arn, logger=logger, metrics=metrics
        ... )
        >>> result = await dispatcher.dispatch("u@x.com", token, "Una")
        >>> if isinstance(result, Failure):
        ...     ...  # logged and counted already
    """

    def __init__(
        self,
        *,
        publisher: NotificationPublisherProtocol,
        topic: str,
        logger: LoggerProtocol,
        metrics: MetricsProtocol,
    ) -> None:
        """Initialize dispatcher.

        Args:
            publisher: Notification endpoint adapter.
            topic: Destination topic.
            logger: Structured logger.
            metrics: Counter sink.
        """
        self._publisher = publisher
        self._topic = topic
        self._logger = logger
        self._metrics = metrics

    async def dispatch(
        self, email: str, token: str, first_name: str
    ) -> Result[str, DispatchError]:
        """Publish one verification event.

        Args:
            email: Recipient email.
            token: Committed verification token.
            first_name: Recipient first name.

        Returns:
            Success(message_id) when delivered to the endpoint.
            Failure(DispatchError) otherwise.
        """
        payload = build_payload(email, token, first_name)
        started = time.perf_counter()

        try:
            result = await self._publisher.publish(self._topic, payload)
        except Exception as e:
            self._record(started, delivered=False)
            self._logger.error("verification_dispatch_failed", error=e, email=email)
            return Failure(
                error=DispatchError(
                    code=ErrorCode.DISPATCH_FAILURE,
                    message="Failed to send verification email",
                    email=email,
                    details={"error_type": type(e).__name__},
                )
            )

        match result:
            case Success(value=message_id):
                self._record(started, delivered=True)
                self._logger.info(
                    "verification_dispatched", email=email, message_id=message_id
                )
                return Success(value=message_id)
            case Failure(error=error):
                self._record(started, delivered=False)
                self._logger.error(
                    "verification_dispatch_failed",
                    email=email,
                    reason=str(error),
                )
                return Failure(
                    error=DispatchError(
                        code=ErrorCode.DISPATCH_FAILURE,
                        message="Failed to send verification email",
                        email=email,
                        details={"cause": str(error)},
                    )
                )

    def _record(self, started: float, *, delivered: bool) -> None:
        elapsed_ms = (time.perf_counter() - started) * 1000
        self._metrics.record_timing("sns.verification.send.time", elapsed_ms)
        if delivered:
            self._metrics.increment("sns.verification.send.success")
        else:
            self._metrics.increment("sns.verification.send.failure")
