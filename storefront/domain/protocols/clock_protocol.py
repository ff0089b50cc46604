"""Clock protocol.

Time source for the verification lifecycle. Injected so expiry rules can be
tested against a fixed instant.
"""

from datetime import datetime
from typing import Protocol


class ClockProtocol(Protocol):
    """Current time provider."""

    def now(self) -> datetime:
        """Return the current timezone-aware UTC time."""
        ...
