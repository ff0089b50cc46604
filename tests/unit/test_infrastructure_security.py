"""Unit tests for password hashing, token generation and the system clock."""

import re
from datetime import UTC

import pytest

from storefront.infrastructure.security import (
    BcryptPasswordService,
    SystemClock,
    VerificationTokenGenerator,
)


@pytest.mark.unit
class TestBcryptPasswordService:
    """Uses cost factor 10 to keep the suite fast."""

    @pytest.fixture
    def service(self):
        return BcryptPasswordService(cost_factor=10)

    def test_hash_and_verify(self, service):
        password_hash = service.hash_password("SecurePass123!")

        assert password_hash.startswith("$2b$10$")
        assert service.verify_password("SecurePass123!", password_hash)
        assert not service.verify_password("WrongPass123!", password_hash)

    def test_hashes_are_salted(self, service):
        assert service.hash_password("same") != service.hash_password("same")

    def test_malformed_hash_returns_false(self, service):
        assert service.verify_password("SecurePass123!", "not-a-hash") is False

    @pytest.mark.parametrize("cost", [9, 21])
    def test_cost_factor_bounds(self, cost):
        with pytest.raises(ValueError):
            BcryptPasswordService(cost_factor=cost)


@pytest.mark.unit
class TestVerificationTokenGenerator:
    def test_token_is_64_hex_chars(self):
        token = VerificationTokenGenerator().generate_token()

        assert re.fullmatch(r"[0-9a-f]{64}", token)

    def test_tokens_are_unique(self):
        generator = VerificationTokenGenerator()

        assert len({generator.generate_token() for _ in range(100)}) == 100


@pytest.mark.unit
class TestSystemClock:
    def test_now_is_aware_utc(self):
        assert SystemClock().now().tzinfo == UTC
