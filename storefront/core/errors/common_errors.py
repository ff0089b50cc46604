"""Common error classes shared by every resource.

Error Types:
- ValidationError: Malformed input or nothing to update
- NotFoundError: Resource not found
- ConflictError: Uniqueness violation (email, sku, storage key)
- AuthenticationError: Credentials did not resolve to a principal
- AuthorizationError: Principal does not own the resource

Usage:
    return Failure(error=ValidationError(
        code=ErrorCode.INVALID_EMAIL,
        message="Invalid email format",
        field="email",
    ))
"""

from dataclasses import dataclass

from storefront.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    """Input validation failure.

    Attributes:
        field: Field name that failed validation.
    """

    field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class NotFoundError(DomainError):
    """Resource not found.

    Attributes:
        resource_type: Type of resource (Account, Product, ProductImage).
        resource_id: Identifier that was looked up.
    """

    resource_type: str
    resource_id: str


@dataclass(frozen=True, slots=True, kw_only=True)
class ConflictError(DomainError):
    """Uniqueness conflict.

    Attributes:
        resource_type: Type of resource in conflict.
        conflicting_field: Field holding the duplicate value.
    """

    resource_type: str
    conflicting_field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthenticationError(DomainError):
    """Authentication failure (unknown email or wrong password)."""

    pass


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthorizationError(DomainError):
    """Authorization failure (principal is not the owner).

    Attributes:
        principal_email: Identity that attempted the operation.
        resource_type: Type of resource that was guarded.
    """

    principal_email: str | None = None
    resource_type: str | None = None
