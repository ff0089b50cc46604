"""Infrastructure layer error types.

Infrastructure errors represent failures in external systems (notification
endpoint, object storage).

Architecture:
- Adapters catch client exceptions and map them to these errors
- Infrastructure errors inherit from DomainError (not Exception)
- InfrastructureErrorCode is for internal tracking; code carries the
  domain ErrorCode seen by the application layer
"""

from dataclasses import dataclass

from storefront.core.errors import DomainError
from storefront.infrastructure.enums import InfrastructureErrorCode


@dataclass(frozen=True, slots=True, kw_only=True)
class InfrastructureError(DomainError):
    """Base infrastructure error.

    Attributes:
        code: Domain ErrorCode (maps from InfrastructureErrorCode).
        message: Human-readable message.
        infrastructure_code: Original infrastructure error code.
        details: Additional context.
    """

    infrastructure_code: InfrastructureErrorCode | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class ExternalServiceError(InfrastructureError):
    """External service integration errors (SNS, S3).

    Attributes:
        service_name: Name of the external service.
    """

    service_name: str
