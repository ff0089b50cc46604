"""Constants for internal implementation details.

These are fixed implementation choices, NOT environment-specific
configuration. For deployment settings use `storefront/core/config.py`.

Categories:
- Tokens: Size of verification tokens and how much of them may be logged
- Uploads: Accepted image content types
- Notification payload keys

Example:
    >>> from storefront.core.constants import TOKEN_BYTES
    >>> token = secrets.token_hex(TOKEN_BYTES)
"""

# =============================================================================
# Tokens
# =============================================================================

TOKEN_BYTES: int = 32
"""Number of bytes for verification token generation (32 bytes = 256 bits)."""

TOKEN_HEX_LENGTH: int = 64
"""Length of hex-encoded token string (TOKEN_BYTES * 2)."""

TOKEN_LOG_PREVIEW_LENGTH: int = 8
"""Number of leading token characters that may appear in logs."""


# =============================================================================
# Uploads
# =============================================================================

ALLOWED_IMAGE_CONTENT_TYPES: frozenset[str] = frozenset(
    {"image/jpeg", "image/png", "image/gif", "image/webp"}
)
"""Content types accepted for product image uploads."""

MAX_FILE_NAME_LENGTH: int = 255
"""Longest file name kept in a storage key."""


# =============================================================================
# Notification payload
# =============================================================================

PAYLOAD_EMAIL_KEY: str = "email"
PAYLOAD_TOKEN_KEY: str = "token"
PAYLOAD_FIRST_NAME_KEY: str = "firstName"


# =============================================================================
# Accounts
# =============================================================================

MIN_PASSWORD_LENGTH: int = 8
"""Shortest plaintext password accepted at signup or update."""
