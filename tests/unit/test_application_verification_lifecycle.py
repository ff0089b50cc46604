"""Unit tests for VerificationLifecycleManager.

Tests cover:
- issue(): new record committed, suppression while a live record exists,
  re-issue after expiry or verification, storage failure
- verify(): check order (exists, not verified, not expired), expiry
  boundary, atomic record + account update, missing account escalation
- sweep_expired(): deletes strictly-expired records, idempotent
"""

from datetime import timedelta
from unittest.mock import AsyncMock

import pytest

from storefront.application.services import (
    IssuedToken,
    Suppressed,
    VerificationLifecycleManager,
)
from storefront.core.enums import ErrorCode
from storefront.core.result import Failure, Success
from storefront.domain.errors import (
    DataIntegrityError,
    StorageError,
    VerificationError,
)
from tests.utils.utils import FIXED_NOW, build_account, build_record


@pytest.mark.unit
class TestLifecycleConstruction:
    def test_non_positive_ttl_rejected(
        self, verification_repo, account_repo, uow, clock, token_generator, logger, metrics
    ):
        with pytest.raises(ValueError, match="ttl must be positive"):
            VerificationLifecycleManager(
                verification_repo=verification_repo,
                account_repo=account_repo,
                unit_of_work=uow,
                clock=clock,
                token_generator=token_generator,
                ttl=timedelta(0),
                logger=logger,
                metrics=metrics,
            )


@pytest.mark.unit
class TestIssue:
    """Test token issuance and suppression."""

    @pytest.mark.asyncio
    async def test_issue_stores_and_commits_new_record(
        self, lifecycle, verification_repo, uow, token_generator
    ):
        # Act
        result = await lifecycle.issue("u@example.com", "Una")

        # Assert
        assert isinstance(result, Success)
        issued = result.value
        assert isinstance(issued, IssuedToken)
        assert issued.token == token_generator.issued[0]
        assert issued.first_name == "Una"
        assert issued.expires_at == FIXED_NOW + timedelta(minutes=1)
        stored = await verification_repo.get(issued.record_id)
        assert stored is not None
        assert stored.verified is False
        assert uow.commits == 1

    @pytest.mark.asyncio
    async def test_issue_suppressed_while_live_record_exists(
        self, lifecycle, verification_repo, metrics, token_generator
    ):
        # Arrange
        await verification_repo.save(build_record("u@example.com"))

        # Act
        result = await lifecycle.issue("u@example.com", "Una")

        # Assert
        assert result == Success(value=Suppressed(email="u@example.com"))
        assert len(verification_repo.records) == 1
        assert token_generator.issued == []
        assert metrics.get_stats("sns.verification.suppressed")["count"] == 1

    @pytest.mark.asyncio
    async def test_record_expiring_exactly_now_still_suppresses(
        self, lifecycle, verification_repo, clock
    ):
        # Arrange
        record = build_record("u@example.com")
        await verification_repo.save(record)
        clock.current = record.expires_at

        # Act
        result = await lifecycle.issue("u@example.com", "Una")

        # Assert
        assert isinstance(result.value, Suppressed)

    @pytest.mark.asyncio
    async def test_issue_allowed_after_previous_record_expired(
        self, lifecycle, verification_repo, clock
    ):
        # Arrange
        await verification_repo.save(build_record("u@example.com"))
        clock.advance(minutes=1, seconds=1)

        # Act
        result = await lifecycle.issue("u@example.com", "Una")

        # Assert
        assert isinstance(result.value, IssuedToken)
        assert len(verification_repo.records) == 2

    @pytest.mark.asyncio
    async def test_issue_allowed_when_previous_record_verified(
        self, lifecycle, verification_repo
    ):
        await verification_repo.save(build_record("u@example.com", verified=True))

        result = await lifecycle.issue("u@example.com", "Una")

        assert isinstance(result.value, IssuedToken)

    @pytest.mark.asyncio
    async def test_other_emails_do_not_suppress(self, lifecycle, verification_repo):
        await verification_repo.save(build_record("other@example.com"))

        result = await lifecycle.issue("u@example.com", "Una")

        assert isinstance(result.value, IssuedToken)

    @pytest.mark.asyncio
    async def test_issue_storage_failure_returns_failure_and_rolls_back(
        self, lifecycle, verification_repo, uow
    ):
        # Arrange
        verification_repo.exists_unexpired_unverified = AsyncMock(
            side_effect=ConnectionError("db down")
        )

        # Act
        result = await lifecycle.issue("u@example.com", "Una")

        # Assert
        assert isinstance(result, Failure)
        assert isinstance(result.error, StorageError)
        assert result.error.code == ErrorCode.STORAGE_FAILURE
        assert result.error.operation == "issue"
        assert uow.rollbacks == 1
        assert verification_repo.records == {}


@pytest.mark.unit
class TestVerify:
    """Test token redemption."""

    @pytest.fixture
    async def issued(self, lifecycle, account_repo):
        account = build_account(email="u@example.com")
        await account_repo.save(account)
        result = await lifecycle.issue("u@example.com", "Una")
        return account, result.value

    @pytest.mark.asyncio
    async def test_verify_marks_record_and_account(
        self, lifecycle, issued, verification_repo, account_repo, uow, clock
    ):
        # Arrange
        account, token = issued
        clock.advance(seconds=30)

        # Act
        result = await lifecycle.verify("u@example.com", token.token)

        # Assert
        assert isinstance(result, Success)
        assert result.value.verified is True
        assert (await verification_repo.get(token.record_id)).verified is True
        stored_account = await account_repo.find_by_id(account.id)
        assert stored_account.verified is True
        assert stored_account.updated_at == clock.now()
        assert uow.commits == 2  # issue + verify

    @pytest.mark.asyncio
    async def test_unknown_token_is_invalid(self, lifecycle, issued):
        result = await lifecycle.verify("u@example.com", "f" * 64)

        assert isinstance(result, Failure)
        assert isinstance(result.error, VerificationError)
        assert result.error.code == ErrorCode.INVALID_TOKEN

    @pytest.mark.asyncio
    async def test_token_for_other_email_is_invalid(self, lifecycle, issued):
        _, token = issued

        result = await lifecycle.verify("other@example.com", token.token)

        assert result.error.code == ErrorCode.INVALID_TOKEN

    @pytest.mark.asyncio
    async def test_second_redemption_reports_already_verified(
        self, lifecycle, issued
    ):
        _, token = issued
        await lifecycle.verify("u@example.com", token.token)

        result = await lifecycle.verify("u@example.com", token.token)

        assert result.error.code == ErrorCode.ALREADY_VERIFIED

    @pytest.mark.asyncio
    async def test_verify_at_exact_expiry_succeeds(self, lifecycle, issued, clock):
        _, token = issued
        clock.current = token.expires_at

        result = await lifecycle.verify("u@example.com", token.token)

        assert isinstance(result, Success)

    @pytest.mark.asyncio
    async def test_verify_after_expiry_fails(
        self, lifecycle, issued, clock, account_repo, verification_repo
    ):
        # Arrange
        account, token = issued
        clock.current = token.expires_at + timedelta(microseconds=1)

        # Act
        result = await lifecycle.verify("u@example.com", token.token)

        # Assert
        assert result.error.code == ErrorCode.TOKEN_EXPIRED
        assert (await verification_repo.get(token.record_id)).verified is False
        assert (await account_repo.find_by_id(account.id)).verified is False

    @pytest.mark.asyncio
    async def test_verified_then_expired_reports_already_verified(
        self, lifecycle, issued, clock
    ):
        _, token = issued
        await lifecycle.verify("u@example.com", token.token)
        clock.advance(hours=1)

        result = await lifecycle.verify("u@example.com", token.token)

        assert result.error.code == ErrorCode.ALREADY_VERIFIED

    @pytest.mark.asyncio
    async def test_losing_the_verified_transition_reports_already_verified(
        self, lifecycle, issued, verification_repo, account_repo, uow, metrics
    ):
        # Arrange
        account, token = issued
        verification_repo.mark_verified_if_unverified = AsyncMock(
            return_value=False
        )
        commits_before = uow.commits

        # Act
        result = await lifecycle.verify("u@example.com", token.token)

        # Assert
        assert result.error.code == ErrorCode.ALREADY_VERIFIED
        assert uow.commits == commits_before
        assert uow.rollbacks == 1
        assert (await account_repo.find_by_id(account.id)).verified is False
        assert metrics.get_stats("verification.verify.success")["count"] == 0

    @pytest.mark.asyncio
    async def test_missing_account_raises_data_integrity_error(
        self, lifecycle, verification_repo, uow
    ):
        # Arrange
        record = build_record("ghost@example.com")
        await verification_repo.save(record)

        # Act / Assert
        with pytest.raises(DataIntegrityError) as exc_info:
            await lifecycle.verify("ghost@example.com", record.token)

        assert exc_info.value.entity == "Account"
        assert uow.rollbacks == 1
        assert (await verification_repo.get(record.id)).verified is False

    @pytest.mark.asyncio
    async def test_commit_failure_returns_storage_error(
        self, lifecycle, issued, uow, metrics
    ):
        # Arrange
        _, token = issued
        uow.commit_error = ConnectionError("db down")

        # Act
        result = await lifecycle.verify("u@example.com", token.token)

        # Assert
        assert isinstance(result.error, StorageError)
        assert result.error.operation == "verify"
        assert uow.rollbacks == 1
        assert metrics.get_stats("verification.verify.success")["count"] == 0

    @pytest.mark.asyncio
    async def test_lookup_failure_returns_storage_error(
        self, lifecycle, verification_repo
    ):
        verification_repo.find_by_email_and_token = AsyncMock(
            side_effect=TimeoutError()
        )

        result = await lifecycle.verify("u@example.com", "a" * 64)

        assert isinstance(result.error, StorageError)


@pytest.mark.unit
class TestSweepExpired:
    """Test the expired record sweep."""

    @pytest.mark.asyncio
    async def test_sweep_deletes_only_records_expired_before_cutoff(
        self, lifecycle, verification_repo, metrics
    ):
        # Arrange
        expired = build_record("a@example.com", now=FIXED_NOW - timedelta(minutes=5))
        expired_verified = build_record(
            "b@example.com", now=FIXED_NOW - timedelta(minutes=5), verified=True
        )
        boundary = build_record("c@example.com", now=FIXED_NOW - timedelta(minutes=1))
        live = build_record("d@example.com")
        for record in (expired, expired_verified, boundary, live):
            await verification_repo.save(record)

        # Act
        result = await lifecycle.sweep_expired(FIXED_NOW)

        # Assert
        assert result == Success(value=2)
        assert set(verification_repo.records) == {boundary.id, live.id}
        assert metrics.get_stats("verification.sweep.deleted")["count"] == 2

    @pytest.mark.asyncio
    async def test_sweep_is_idempotent(self, lifecycle, verification_repo):
        await verification_repo.save(
            build_record("a@example.com", now=FIXED_NOW - timedelta(minutes=5))
        )

        first = await lifecycle.sweep_expired(FIXED_NOW)
        second = await lifecycle.sweep_expired(FIXED_NOW)

        assert first == Success(value=1)
        assert second == Success(value=0)

    @pytest.mark.asyncio
    async def test_sweep_failure(self, lifecycle, verification_repo, uow):
        verification_repo.delete_expired_before = AsyncMock(
            side_effect=ConnectionError()
        )

        result = await lifecycle.sweep_expired(FIXED_NOW)

        assert isinstance(result.error, StorageError)
        assert result.error.operation == "sweep_expired"
        assert uow.rollbacks == 1
