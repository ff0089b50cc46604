"""Email verification lifecycle.

Owns token issuance, duplicate-send suppression, expiry and single-use
enforcement, and the transition to "verified".

Rules:
    - issue() is suppressed while a live (unverified, unexpired) record
      exists for the email. The check is read-then-write; two concurrent
      signups can both pass it, which is tolerated because verify() is keyed
      on the exact token.
    - verify() checks, in order: record exists, record not verified, record
      not expired. A verified record that has since expired reports
      ALREADY_VERIFIED.
    - The record and its account are marked verified in one unit of work.
    - A record whose account is gone is a data-integrity fault and raises.

Architecture:
    - Application service (uses repository ports, no infrastructure imports)
    - Returns Result types; only DataIntegrityError is raised
"""

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import TypeAlias
from uuid import UUID

from storefront.core.constants import TOKEN_LOG_PREVIEW_LENGTH
from storefront.core.enums import ErrorCode
from storefront.core.result import Failure, Result, Success
from storefront.domain.entities import VerificationRecord
from storefront.domain.errors import (
    DataIntegrityError,
    StorageError,
    VerificationError,
)
from storefront.domain.protocols import (
    AccountRepository,
    ClockProtocol,
    LoggerProtocol,
    MetricsProtocol,
    TokenGeneratorProtocol,
    UnitOfWorkProtocol,
    VerificationRecordRepository,
)


@dataclass(frozen=True, kw_only=True)
class IssuedToken:
    """A new verification record was stored and committed.

    Attributes:
        record_id: Stored record id.
        email: Subject email.
        first_name: Recipient first name, carried for the notification.
        token: Token to hand to the notification dispatcher.
        expires_at: Expiry of the record.
    """

    record_id: UUID
    email: str
    first_name: str
    token: str
    expires_at: datetime


@dataclass(frozen=True, kw_only=True)
class Suppressed:
    """No token issued because a live record already exists.

    Attributes:
        email: Subject email.
    """

    email: str


IssueOutcome: TypeAlias = IssuedToken | Suppressed


def _preview(token: str) -> str:
    return token[:TOKEN_LOG_PREVIEW_LENGTH]


class VerificationLifecycleManager:
    """Verification token issuance, redemption and sweep.

    Dependencies (injected via constructor):
        - VerificationRecordRepository: record store
        - AccountRepository: account whose verified flag mirrors the record
        - UnitOfWorkProtocol: commit boundary shared with both repositories
        - ClockProtocol / TokenGeneratorProtocol: time and token sources
        - LoggerProtocol / MetricsProtocol: observability

    Example:
        >>> result = await lifecycle.issue("u@x.com", "Una")
        >>> match result:
        ...     case Success(value=IssuedToken(token=token)):
        ...         await dispatcher.dispatch("u@x.com", token, "Una")
        ...     case Success(value=Suppressed()):
        ...         pass
    """

    def __init__(
        self,
        *,
        verification_repo: VerificationRecordRepository,
        account_repo: AccountRepository,
        unit_of_work: UnitOfWorkProtocol,
        clock: ClockProtocol,
        token_generator: TokenGeneratorProtocol,
        ttl: timedelta,
        logger: LoggerProtocol,
        metrics: MetricsProtocol,
    ) -> None:
        """Initialize lifecycle manager with dependencies.

        Args:
            verification_repo: Verification record store.
            account_repo: Account store.
            unit_of_work: Transaction boundary over both stores.
            clock: Time source.
            token_generator: Token source.
            ttl: Token lifetime (must be positive).
            logger: Structured logger.
            metrics: Counter sink.

        Raises:
            ValueError: If ttl is not positive.
        """
        if ttl <= timedelta(0):
            raise ValueError("ttl must be positive")
        self._verification_repo = verification_repo
        self._account_repo = account_repo
        self._uow = unit_of_work
        self._clock = clock
        self._token_generator = token_generator
        self._ttl = ttl
        self._logger = logger
        self._metrics = metrics

    async def issue(
        self, account_email: str, first_name: str
    ) -> Result[IssueOutcome, StorageError]:
        """Issue a verification token unless a live one already exists.

        The new record is committed before this returns, so a dispatch
        attempted afterwards never races an uncommitted record.

        Args:
            account_email: Canonical email of the account.
            first_name: Recipient first name (passed through to the outcome).

        Returns:
            Success(IssuedToken): New record stored.
            Success(Suppressed): Live record exists, nothing stored.
            Failure(StorageError): Record store failed; no token was issued.
        """
        now = self._clock.now()

        try:
            if await self._verification_repo.exists_unexpired_unverified(
                account_email, now
            ):
                self._logger.warning(
                    "verification_issue_suppressed", email=account_email
                )
                self._metrics.increment("sns.verification.suppressed")
                return Success(value=Suppressed(email=account_email))

            record = VerificationRecord.issue(
                subject_email=account_email,
                token=self._token_generator.generate_token(),
                now=now,
                ttl=self._ttl,
            )
            await self._verification_repo.save(record)
            await self._uow.commit()
        except Exception as e:
            await self._uow.rollback()
            self._logger.error(
                "verification_issue_failed", error=e, email=account_email
            )
            return Failure(error=StorageError.from_exception("issue", e))

        self._logger.info(
            "verification_issued",
            email=account_email,
            record_id=str(record.id),
            expires_at=record.expires_at.isoformat(),
        )
        return Success(
            value=IssuedToken(
                record_id=record.id,
                email=account_email,
                first_name=first_name,
                token=record.token,
                expires_at=record.expires_at,
            )
        )

    async def verify(
        self, email: str, token: str
    ) -> Result[VerificationRecord, VerificationError | StorageError]:
        """Redeem a token.

        Args:
            email: Email the token was issued for.
            token: Token to redeem.

        Returns:
            Success(VerificationRecord): Record and account now verified.
            Failure(VerificationError): INVALID_TOKEN, ALREADY_VERIFIED or
                TOKEN_EXPIRED.
            Failure(StorageError): Record store failed; nothing changed.

        Raises:
            DataIntegrityError: The record resolved but its account does not
                exist. The unit of work is rolled back first.
        """
        now = self._clock.now()
        log = self._logger.bind(email=email, token_preview=_preview(token))

        try:
            record = await self._verification_repo.find_by_email_and_token(
                email, token
            )
        except Exception as e:
            return await self._storage_failure(log, e, "verify")

        if record is None:
            return self._rejected(log, ErrorCode.INVALID_TOKEN, email)
        if record.verified:
            return self._rejected(log, ErrorCode.ALREADY_VERIFIED, email)
        if record.is_expired(now):
            return self._rejected(log, ErrorCode.TOKEN_EXPIRED, email)

        try:
            account = await self._account_repo.find_by_email(email)
        except Exception as e:
            return await self._storage_failure(log, e, "verify")

        if account is None:
            await self._uow.rollback()
            log.critical("verification_account_missing", record_id=str(record.id))
            raise DataIntegrityError(
                f"Verification record {record.id} references missing account",
                entity="Account",
                reference=email,
            )

        try:
            claimed = await self._verification_repo.mark_verified_if_unverified(
                record.id
            )
            if claimed:
                record.mark_verified()
                account.mark_verified(now)
                await self._account_repo.save(account)
                await self._uow.commit()
            else:
                await self._uow.rollback()
        except Exception as e:
            return await self._storage_failure(log, e, "verify")

        if not claimed:
            # Lost the race to a concurrent redemption of the same token.
            return self._rejected(log, ErrorCode.ALREADY_VERIFIED, email)

        self._metrics.increment("verification.verify.success")
        log.info("verification_succeeded", account_id=str(account.id))
        return Success(value=record)

    async def sweep_expired(self, now: datetime) -> Result[int, StorageError]:
        """Delete every record with ``expires_at < now``, verified or not.

        Idempotent: a second sweep at the same instant deletes nothing.

        Args:
            now: Cutoff time.

        Returns:
            Success(count) with the number of deleted records.
            Failure(StorageError) if the store failed.
        """
        try:
            deleted = await self._verification_repo.delete_expired_before(now)
            await self._uow.commit()
        except Exception as e:
            return await self._storage_failure(self._logger, e, "sweep_expired")

        self._metrics.increment("verification.sweep.deleted", deleted)
        self._logger.info(
            "verification_sweep_completed", deleted=deleted, cutoff=now.isoformat()
        )
        return Success(value=deleted)

    def _rejected(
        self, log: LoggerProtocol, code: ErrorCode, email: str
    ) -> Failure[VerificationError]:
        messages = {
            ErrorCode.INVALID_TOKEN: "Invalid verification token",
            ErrorCode.ALREADY_VERIFIED: "Email already verified",
            ErrorCode.TOKEN_EXPIRED: "Verification token has expired",
        }
        self._metrics.increment("verification.verify.failure")
        log.warning("verification_rejected", reason=code.value)
        return Failure(
            error=VerificationError(code=code, message=messages[code], email=email)
        )

    async def _storage_failure(
        self, log: LoggerProtocol, e: Exception, operation: str
    ) -> Failure[StorageError]:
        await self._uow.rollback()
        log.error("verification_storage_failed", error=e, operation=operation)
        return Failure(error=StorageError.from_exception(operation, e))
