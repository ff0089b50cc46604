"""Bcrypt password hashing service (adapter).

Implements PasswordHashingProtocol using bcrypt.

Architecture:
    - Implements PasswordHashingProtocol (no inheritance required)
    - Injected via dependency container (cost factor from settings)

Security:
    - Adaptive algorithm (cost can increase over time)
    - Random salt per hash
    - Constant-time verification

Performance:
    - Cost factor 12 = 2^12 iterations (~250ms per hash or verify)
"""

import bcrypt


class BcryptPasswordService:
    """Bcrypt password hashing service.

    Usage:
        from storefront.core.container import get_password_service

        password_service = get_password_service()
        password_hash = password_service.hash_password("SecurePass123!")
        is_valid = password_service.verify_password("SecurePass123!", password_hash)
    """

    def __init__(self, cost_factor: int = 12) -> None:
        """Initialize bcrypt password service.

        Args:
            cost_factor: Bcrypt cost factor (10-20). Each +1 doubles the
                computation time.

        Raises:
            ValueError: If cost_factor is outside 10-20.
        """
        if cost_factor < 10:
            msg = "Cost factor must be at least 10 for security"
            raise ValueError(msg)
        if cost_factor > 20:
            msg = "Cost factor above 20 is impractically slow"
            raise ValueError(msg)

        self._cost_factor = cost_factor

    def hash_password(self, password: str) -> str:
        """Hash a plaintext password using bcrypt.

        Args:
            password: Plaintext password to hash.

        Returns:
            Hash string in bcrypt format ($2b$<cost>$...), 60 characters.
        """
        salt = bcrypt.gensalt(rounds=self._cost_factor)
        return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")

    def verify_password(self, password: str, password_hash: str) -> bool:
        """Verify a plaintext password against a bcrypt hash.

        Args:
            password: Plaintext password to verify.
            password_hash: Stored hash.

        Returns:
            True if password matches hash. False otherwise, including for a
            malformed hash (never raises).
        """
        try:
            return bcrypt.checkpw(
                password.encode("utf-8"), password_hash.encode("utf-8")
            )
        except (ValueError, AttributeError):
            return False
