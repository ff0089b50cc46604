"""Token generator protocol.

Produces unforgeable random tokens for email verification.
"""

from typing import Protocol


class TokenGeneratorProtocol(Protocol):
    """Unguessable token source."""

    def generate_token(self) -> str:
        """Return a new random token.

        Returns:
            Token string drawn from a CSPRNG.
        """
        ...
