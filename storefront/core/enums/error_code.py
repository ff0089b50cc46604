"""Domain-level error codes (machine-readable).

Codes are grouped by the error kind they belong to. The edge layer maps each
kind to its own external representation.

Categories:
- Verification (INVALID_TOKEN, ALREADY_VERIFIED, TOKEN_EXPIRED)
- Authorization (FORBIDDEN)
- Authentication (INVALID_CREDENTIALS)
- Resource (*_NOT_FOUND)
- Conflict (*_ALREADY_EXISTS)
- Validation (VALIDATION_FAILED, INVALID_EMAIL, NO_FIELDS_TO_UPDATE)
- Collaborator failures (STORAGE_FAILURE, OBJECT_STORAGE_FAILURE, DISPATCH_FAILURE)
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable)."""

    # Verification errors
    INVALID_TOKEN = "invalid_token"
    ALREADY_VERIFIED = "already_verified"
    TOKEN_EXPIRED = "token_expired"

    # Authorization errors
    FORBIDDEN = "forbidden"

    # Authentication errors
    INVALID_CREDENTIALS = "invalid_credentials"

    # Resource errors
    ACCOUNT_NOT_FOUND = "account_not_found"
    PRODUCT_NOT_FOUND = "product_not_found"
    IMAGE_NOT_FOUND = "image_not_found"

    # Conflict errors
    EMAIL_ALREADY_EXISTS = "email_already_exists"
    SKU_ALREADY_EXISTS = "sku_already_exists"
    STORAGE_KEY_ALREADY_EXISTS = "storage_key_already_exists"

    # Validation errors
    VALIDATION_FAILED = "validation_failed"
    INVALID_EMAIL = "invalid_email"
    NO_FIELDS_TO_UPDATE = "no_fields_to_update"

    # Collaborator failures
    STORAGE_FAILURE = "storage_failure"
    OBJECT_STORAGE_FAILURE = "object_storage_failure"
    DISPATCH_FAILURE = "dispatch_failure"
