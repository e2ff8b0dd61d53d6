"""Authorizer and rotator protocols.

Handlers depend on these ports rather than on the concrete services so
they can be unit-tested with mocks.
"""

from collections.abc import Callable
from typing import Protocol

from secretguard.core.errors import DomainError
from secretguard.core.result import Result
from secretguard.domain.errors import AuthorizationError

# setSecret callback: (current, pending) -> Result
type ApplySecretFn = Callable[[str, str], Result[None, DomainError]]
# testSecret callback: (pending) -> Result
type TestSecretFn = Callable[[str], Result[None, DomainError]]


class SecretAuthorizerProtocol(Protocol):
    """Decides whether a presented value matches a tolerated secret version."""

    def authorize(
        self, secret_id: str, value: str
    ) -> tuple[Result[None, AuthorizationError], bool]:
        """Authorize ``value`` against ``secret_id``.

        Returns:
            (result, used_remote_call)
        """
        ...


class SecretRotatorProtocol(Protocol):
    """Four-step secret rotation; every step is idempotent."""

    def rotation_enabled(self, secret_id: str) -> Result[None, DomainError]: ...

    def create_secret(self, secret_id: str, token: str) -> Result[None, DomainError]: ...

    def set_secret(
        self, secret_id: str, token: str, apply_fn: ApplySecretFn | None
    ) -> Result[None, DomainError]: ...

    def test_secret(
        self, secret_id: str, token: str, test_fn: TestSecretFn | None
    ) -> Result[None, DomainError]: ...

    def finish_secret(self, secret_id: str, token: str) -> Result[None, DomainError]: ...
