"""Cache infrastructure package.

Architecture:
- SecretCache: three-slot secret snapshot cache + rejection blacklist
- PeriodicTask: cancellable janitor thread clearing the cache
- Use secretguard.core.container.get_secret_cache() for dependency injection
"""

from secretguard.infrastructure.cache.periodic_task import PeriodicTask
from secretguard.infrastructure.cache.secret_cache import SecretCache

__all__ = ["PeriodicTask", "SecretCache"]
