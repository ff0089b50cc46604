"""Email value object with validation.

Immutable value object that validates and normalizes email addresses.
"""

from dataclasses import dataclass

from email_validator import EmailNotValidError, validate_email


@dataclass(frozen=True)
class Email:
    """Email value object with format validation.

    Uses the email-validator library for RFC-compliant validation (no
    deliverability check). The normalized form is the canonical identity
    compared by the ownership guard.

    Attributes:
        value: The normalized email address.

    Raises:
        ValueError: If email format is invalid.

    Example:
        >>> str(Email("alice@x.com"))
        'alice@x.com'
        >>> Email("invalid")
        Traceback (most recent call last):
        ...
        ValueError: Invalid email: ...
    """

    value: str

    def __post_init__(self) -> None:
        try:
            validated = validate_email(self.value.strip(), check_deliverability=False)
            object.__setattr__(self, "value", validated.normalized)
        except EmailNotValidError as e:
            raise ValueError(f"Invalid email: {e}") from e

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"Email('{self.value}')"
