"""Distribution updater protocol (port).

A distribution updater reads a CDN distribution configuration, applies an
ordered sequence of mutators and writes the result back in one call. The
rotation setSecret step uses it to push the new API key to the origin
custom header the CDN forwards.
"""

from collections.abc import Callable, Sequence
from typing import Any, Protocol

from secretguard.core.result import Result
from secretguard.domain.errors import DistributionError

type DistributionConfig = dict[str, Any]
type ConfigMutator = Callable[[DistributionConfig], DistributionConfig]


class DistributionUpdaterProtocol(Protocol):
    """Protocol for applying config mutations to a CDN distribution."""

    def update(
        self,
        distribution_id: str,
        mutators: Sequence[ConfigMutator | None],
    ) -> Result[None, DistributionError]:
        """Fetch the distribution config, apply mutators in order, save it.

        Args:
            distribution_id: Distribution identifier.
            mutators: Config mutators; None entries are skipped.

        Returns:
            Success(None) when saved.
            Failure(DistributionError) with DISTRIBUTION_NO_MUTATORS for an
            empty sequence, DISTRIBUTION_UPDATE_FAILED on backend errors.
        """
        ...
