"""Domain protocols (ports) package.

Protocol definitions the application layer depends on. Infrastructure
adapters implement them structurally, without inheritance.

Usage:
    from storefront.domain.protocols import VerificationRecordRepository
    from storefront.domain.protocols import NotificationPublisherProtocol
"""

# Service protocols
from storefront.domain.protocols.clock_protocol import ClockProtocol
from storefront.domain.protocols.logger_protocol import LoggerProtocol
from storefront.domain.protocols.metrics_protocol import MetricsProtocol
from storefront.domain.protocols.notification_publisher_protocol import (
    NotificationPublisherProtocol,
)
from storefront.domain.protocols.object_storage_protocol import ObjectStorageProtocol
from storefront.domain.protocols.password_hashing_protocol import (
    PasswordHashingProtocol,
)
from storefront.domain.protocols.token_generator_protocol import (
    TokenGeneratorProtocol,
)
from storefront.domain.protocols.unit_of_work_protocol import UnitOfWorkProtocol

# Repository protocols
from storefront.domain.protocols.account_repository import AccountRepository
from storefront.domain.protocols.product_image_repository import (
    ProductImageRepository,
)
from storefront.domain.protocols.product_repository import ProductRepository
from storefront.domain.protocols.verification_record_repository import (
    VerificationRecordRepository,
)

__all__ = [
    # Services
    "ClockProtocol",
    "LoggerProtocol",
    "MetricsProtocol",
    "NotificationPublisherProtocol",
    "ObjectStorageProtocol",
    "PasswordHashingProtocol",
    "TokenGeneratorProtocol",
    "UnitOfWorkProtocol",
    # Repositories
    "AccountRepository",
    "ProductImageRepository",
    "ProductRepository",
    "VerificationRecordRepository",
]
