"""Verification token generator.

Tokens are 32 random bytes from the secrets module, hex encoded
(64 characters, 256 bits of entropy).
"""

import secrets

from storefront.core.constants import TOKEN_BYTES


class VerificationTokenGenerator:
    """Implements TokenGeneratorProtocol."""

    def generate_token(self) -> str:
        """Generate an unguessable verification token.

        Returns:
            64-character lowercase hex string.
        """
        return secrets.token_hex(TOKEN_BYTES)
