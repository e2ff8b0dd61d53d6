"""Core errors package.

Usage:
    from secretguard.core.errors import DomainError
"""

from secretguard.core.errors.domain_error import DomainError

__all__ = ["DomainError"]
