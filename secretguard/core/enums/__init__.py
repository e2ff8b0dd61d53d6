"""Core enums package.

Usage:
    from secretguard.core.enums import ErrorCode, Environment
"""

from secretguard.core.enums.environment import Environment
from secretguard.core.enums.error_code import ErrorCode

__all__ = ["ErrorCode", "Environment"]
