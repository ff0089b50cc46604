"""Validation functions shared by the account and product handlers.

Validators are pure functions that raise ValueError on validation failure
and return the cleaned value otherwise.
"""

from storefront.core.constants import (
    ALLOWED_IMAGE_CONTENT_TYPES,
    MAX_FILE_NAME_LENGTH,
    MIN_PASSWORD_LENGTH,
)
from storefront.domain.value_objects import Email


def normalize_email(v: str) -> str:
    """Validate and normalize an email address.

    Args:
        v: Raw email.

    Returns:
        Canonical email as produced by the Email value object.

    Raises:
        ValueError: If email format is invalid.

    Example:
        >>> normalize_email("  una@Example.COM ")
        'una@example.com'
    """
    return Email(v).value


def validate_password(v: str) -> str:
    """Validate password length.

    Args:
        v: Plaintext password.

    Returns:
        Password unchanged (validation only).

    Raises:
        ValueError: If the password is shorter than MIN_PASSWORD_LENGTH.
    """
    if len(v) < MIN_PASSWORD_LENGTH:
        raise ValueError(
            f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
        )
    return v


def require_text(v: str, field: str) -> str:
    """Strip a required text field.

    Raises:
        ValueError: If the value is blank.
    """
    stripped = v.strip()
    if not stripped:
        raise ValueError(f"{field} is required")
    return stripped


def clean_optional(v: str | None) -> str | None:
    """Strip an optional update field; blank counts as not supplied."""
    if v is None:
        return None
    return v.strip() or None


def validate_quantity(v: int) -> int:
    if v < 0:
        raise ValueError("quantity cannot be negative")
    return v


def validate_file_name(v: str) -> str:
    """Validate an upload file name for use inside a storage key.

    Path separators are rejected so the name cannot change the key layout.

    Raises:
        ValueError: If blank, too long, or containing a path separator.
    """
    name = require_text(v, "file_name")
    if len(name) > MAX_FILE_NAME_LENGTH:
        raise ValueError(
            f"file_name must be at most {MAX_FILE_NAME_LENGTH} characters"
        )
    if "/" in name or "\\" in name:
        raise ValueError("file_name must not contain path separators")
    return name


def validate_image_content_type(v: str) -> str:
    """Accept only the image types product pages can render.

    Raises:
        ValueError: If the content type is not an allowed image type.
    """
    content_type = v.strip().lower()
    if content_type not in ALLOWED_IMAGE_CONTENT_TYPES:
        raise ValueError(f"Unsupported content type: {v}")
    return content_type
