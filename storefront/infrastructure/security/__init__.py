"""Security adapters: password hashing, token generation, clock."""

from storefront.infrastructure.security.bcrypt_password_service import (
    BcryptPasswordService,
)
from storefront.infrastructure.security.system_clock import SystemClock
from storefront.infrastructure.security.verification_token_generator import (
    VerificationTokenGenerator,
)

__all__ = ["BcryptPasswordService", "SystemClock", "VerificationTokenGenerator"]
