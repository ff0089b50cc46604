"""Validators package exports."""

from storefront.domain.validators.functions import (
    clean_optional,
    normalize_email,
    require_text,
    validate_file_name,
    validate_image_content_type,
    validate_password,
    validate_quantity,
)

__all__ = [
    "clean_optional",
    "normalize_email",
    "require_text",
    "validate_file_name",
    "validate_image_content_type",
    "validate_password",
    "validate_quantity",
]
