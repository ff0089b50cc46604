"""Background jobs."""

from storefront.infrastructure.jobs.expired_verification_sweeper import (
    ExpiredVerificationSweeper,
)

__all__ = ["ExpiredVerificationSweeper"]
