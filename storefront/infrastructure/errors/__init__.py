"""Infrastructure errors."""

from storefront.infrastructure.errors.infrastructure_error import (
    ExternalServiceError,
    InfrastructureError,
)

__all__ = ["ExternalServiceError", "InfrastructureError"]
