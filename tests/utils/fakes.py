"""In-memory collaborators for unit tests.

Each fake implements one port from storefront.domain.protocols. Repositories
store copies so a test only observes what a handler explicitly saved.
"""

import secrets
from dataclasses import replace
from datetime import datetime, timedelta
from uuid import UUID

from storefront.core.enums import ErrorCode
from storefront.core.errors import DomainError
from storefront.core.result import Failure, Result, Success
from storefront.domain.entities import (
    Account,
    Product,
    ProductImage,
    VerificationRecord,
)


class FixedClock:
    """Clock that only moves when told to."""

    def __init__(self, now: datetime) -> None:
        self.current = now

    def now(self) -> datetime:
        return self.current

    def advance(self, **kwargs: float) -> None:
        self.current += timedelta(**kwargs)


class RecordingTokenGenerator:
    def __init__(self) -> None:
        self.issued: list[str] = []

    def generate_token(self) -> str:
        token = secrets.token_hex(32)
        self.issued.append(token)
        return token


class FakePasswordService:
    """Reversible stand-in for bcrypt (hashing is slow by design)."""

    def hash_password(self, password: str) -> str:
        return f"hashed:{password}"

    def verify_password(self, password: str, password_hash: str) -> bool:
        return password_hash == f"hashed:{password}"


class RecordingUnitOfWork:
    def __init__(self, commit_error: Exception | None = None) -> None:
        self.commits = 0
        self.rollbacks = 0
        self.commit_error = commit_error

    async def commit(self) -> None:
        if self.commit_error is not None:
            raise self.commit_error
        self.commits += 1

    async def rollback(self) -> None:
        self.rollbacks += 1


class InMemoryAccountRepository:
    def __init__(self, *accounts: Account) -> None:
        self.accounts: dict[UUID, Account] = {a.id: replace(a) for a in accounts}

    async def find_by_id(self, account_id: UUID) -> Account | None:
        account = self.accounts.get(account_id)
        return replace(account) if account else None

    async def find_by_email(self, email: str) -> Account | None:
        for account in self.accounts.values():
            if account.email == email:
                return replace(account)
        return None

    async def exists_by_email(self, email: str) -> bool:
        return any(a.email == email for a in self.accounts.values())

    async def save(self, account: Account) -> None:
        self.accounts[account.id] = replace(account)

    async def delete(self, account_id: UUID) -> None:
        self.accounts.pop(account_id, None)


class InMemoryProductRepository:
    def __init__(self, *products: Product) -> None:
        self.products: dict[UUID, Product] = {p.id: replace(p) for p in products}

    async def find_by_id(self, product_id: UUID) -> Product | None:
        product = self.products.get(product_id)
        return replace(product) if product else None

    async def exists_by_sku(self, sku: str) -> bool:
        return any(p.sku == sku for p in self.products.values())

    async def list_all(self) -> list[Product]:
        ordered = sorted(self.products.values(), key=lambda p: (p.created_at, p.id))
        return [replace(p) for p in ordered]

    async def list_by_owner(self, owner_id: UUID) -> list[Product]:
        return [p for p in await self.list_all() if p.owner_id == owner_id]

    async def save(self, product: Product) -> None:
        self.products[product.id] = replace(product)

    async def delete(self, product_id: UUID) -> None:
        self.products.pop(product_id, None)


class InMemoryProductImageRepository:
    def __init__(self, *images: ProductImage) -> None:
        self.images: dict[UUID, ProductImage] = {i.id: replace(i) for i in images}

    async def find_by_id(self, image_id: UUID) -> ProductImage | None:
        image = self.images.get(image_id)
        return replace(image) if image else None

    async def exists_by_storage_key(self, storage_key: str) -> bool:
        return any(i.storage_key == storage_key for i in self.images.values())

    async def list_by_product(self, product_id: UUID) -> list[ProductImage]:
        return [replace(i) for i in self.images.values() if i.product_id == product_id]

    async def save(self, image: ProductImage) -> None:
        self.images[image.id] = replace(image)

    async def delete(self, image_id: UUID) -> None:
        self.images.pop(image_id, None)

    async def delete_by_product(self, product_id: UUID) -> int:
        doomed = [i.id for i in self.images.values() if i.product_id == product_id]
        for image_id in doomed:
            del self.images[image_id]
        return len(doomed)


class InMemoryVerificationRecordRepository:
    def __init__(self, *records: VerificationRecord) -> None:
        self.records: dict[UUID, VerificationRecord] = {
            r.id: replace(r) for r in records
        }

    async def get(self, record_id: UUID) -> VerificationRecord | None:
        record = self.records.get(record_id)
        return replace(record) if record else None

    async def find_by_email_and_token(
        self, email: str, token: str
    ) -> VerificationRecord | None:
        for record in self.records.values():
            if record.subject_email == email and record.token == token:
                return replace(record)
        return None

    async def find_latest_by_email(self, email: str) -> VerificationRecord | None:
        matching = [r for r in self.records.values() if r.subject_email == email]
        if not matching:
            return None
        return replace(max(matching, key=lambda r: (r.created_at, r.id)))

    async def exists_unexpired_unverified(self, email: str, now: datetime) -> bool:
        return any(
            r.subject_email == email and not r.verified and r.expires_at >= now
            for r in self.records.values()
        )

    async def save(self, record: VerificationRecord) -> None:
        self.records[record.id] = replace(record)

    async def mark_verified_if_unverified(self, record_id: UUID) -> bool:
        record = self.records.get(record_id)
        if record is None or record.verified:
            return False
        self.records[record_id] = replace(record, verified=True)
        return True

    async def delete_expired_before(self, cutoff: datetime) -> int:
        doomed = [r.id for r in self.records.values() if r.expires_at < cutoff]
        for record_id in doomed:
            del self.records[record_id]
        return len(doomed)

    async def delete(self, record_id: UUID) -> None:
        self.records.pop(record_id, None)

    async def delete_by_email(self, email: str) -> int:
        doomed = [r.id for r in self.records.values() if r.subject_email == email]
        for record_id in doomed:
            del self.records[record_id]
        return len(doomed)


class RecordingPublisher:
    """Notification publisher that keeps every message it accepts."""

    def __init__(
        self, *, fail: bool = False, raise_error: Exception | None = None
    ) -> None:
        self.messages: list[tuple[str, str]] = []
        self.fail = fail
        self.raise_error = raise_error

    async def publish(self, topic: str, payload: str) -> Result[str, DomainError]:
        if self.raise_error is not None:
            raise self.raise_error
        if self.fail:
            return Failure(
                error=DomainError(
                    code=ErrorCode.DISPATCH_FAILURE, message="endpoint unavailable"
                )
            )
        self.messages.append((topic, payload))
        return Success(value=f"msg-{len(self.messages)}")


class InMemoryObjectStorage:
    """Object storage keeping bytes in a dict."""

    def __init__(
        self,
        *,
        fail_put: bool = False,
        fail_delete: set[str] | None = None,
    ) -> None:
        self.objects: dict[str, tuple[bytes, str]] = {}
        self.deleted: list[str] = []
        self.fail_put = fail_put
        self.fail_delete = fail_delete or set()

    async def put(
        self, key: str, content: bytes, content_type: str
    ) -> Result[None, DomainError]:
        if self.fail_put:
            return Failure(
                error=DomainError(
                    code=ErrorCode.OBJECT_STORAGE_FAILURE,
                    message="bucket unavailable",
                    details={"error": "bucket unavailable"},
                )
            )
        self.objects[key] = (content, content_type)
        return Success(value=None)

    async def delete(self, key: str) -> Result[None, DomainError]:
        if key in self.fail_delete:
            return Failure(
                error=DomainError(
                    code=ErrorCode.OBJECT_STORAGE_FAILURE, message="delete refused"
                )
            )
        self.objects.pop(key, None)
        self.deleted.append(key)
        return Success(value=None)

    async def exists(self, key: str) -> Result[bool, DomainError]:
        return Success(value=key in self.objects)
