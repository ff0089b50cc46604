"""Runtime environments.

Environments:
- DEVELOPMENT: Local development, human-readable logs
- TESTING: Automated test runs
- CI: Continuous integration
- PRODUCTION: Deployed service with AWS collaborators
"""

from enum import Enum


class Environment(str, Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"
