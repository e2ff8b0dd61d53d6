"""Runtime environment types.

Used by Settings to pick environment-specific behavior (log rendering).

Environments:
- DEVELOPMENT: Local runs against a stubbed or personal AWS account
- TESTING: Automated test execution
- PRODUCTION: Deployed Lambda functions
"""

from enum import Enum


class Environment(str, Enum):
    """Runtime environment types."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    PRODUCTION = "production"
