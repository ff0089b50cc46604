"""Utility functions for testing.

Provides helpers for generating random test data and building domain
entities with sensible defaults.
"""

import random
import string
from datetime import UTC, datetime, timedelta
from uuid import UUID

from uuid_extensions import uuid7

from storefront.domain.entities import (
    Account,
    Product,
    ProductImage,
    VerificationRecord,
)

FIXED_NOW = datetime(2026, 1, 15, 12, 0, 0, tzinfo=UTC)
TEST_TOPIC = "arn:aws:sns:us-east-1:123456789012:verification"


def random_lower_string(length: int = 32) -> str:
    """Generate a random lowercase string.

    Args:
        length: Length of the string to generate

    Returns:
        Random lowercase string
    """
    return "".join(random.choices(string.ascii_lowercase, k=length))


def random_email() -> str:
    """Generate a random email address for testing.

    Returns:
        Random email in format: random@example.com
    """
    return f"{random_lower_string(10)}@example.com"


def random_sku() -> str:
    return f"SKU-{random_lower_string(8).upper()}"


def build_account(
    *,
    email: str | None = None,
    password_hash: str = "hashed:SecurePass123!",
    first_name: str = "Una",
    last_name: str = "Xu",
    verified: bool = False,
    now: datetime = FIXED_NOW,
) -> Account:
    """Create a test Account with default values."""
    return Account(
        id=uuid7(),
        email=email or random_email(),
        password_hash=password_hash,
        first_name=first_name,
        last_name=last_name,
        created_at=now,
        updated_at=now,
        verified=verified,
    )


def build_product(
    owner_id: UUID,
    *,
    sku: str | None = None,
    name: str = "Widget",
    description: str = "A widget",
    manufacturer: str = "Acme",
    quantity: int = 5,
    now: datetime = FIXED_NOW,
) -> Product:
    """Create a test Product owned by ``owner_id``."""
    return Product(
        id=uuid7(),
        sku=sku or random_sku(),
        owner_id=owner_id,
        name=name,
        description=description,
        manufacturer=manufacturer,
        quantity=quantity,
        created_at=now,
        updated_at=now,
    )


def build_image(
    product: Product,
    *,
    file_name: str = "front.png",
    content_type: str = "image/png",
    now: datetime = FIXED_NOW,
) -> ProductImage:
    """Create a test ProductImage under ``product``."""
    timestamp_ms = int(now.timestamp() * 1000)
    return ProductImage(
        id=uuid7(),
        product_id=product.id,
        storage_key=f"{product.owner_id}/{product.id}/{timestamp_ms}-{file_name}",
        file_name=file_name,
        content_type=content_type,
        created_at=now,
    )


def build_record(
    email: str,
    *,
    token: str | None = None,
    now: datetime = FIXED_NOW,
    ttl: timedelta = timedelta(minutes=1),
    verified: bool = False,
) -> VerificationRecord:
    """Create a test VerificationRecord issued at ``now``."""
    record = VerificationRecord.issue(
        subject_email=email,
        token=token or random_lower_string(64),
        now=now,
        ttl=ttl,
    )
    record.verified = verified
    return record
