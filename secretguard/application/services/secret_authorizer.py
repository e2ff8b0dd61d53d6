"""API key authorization against a rotating secret.

A presented key is valid when it equals the secret's CURRENT value, or,
shortly after the CURRENT version was created in the store, its PREVIOUS or
PENDING value. The latter tolerance keeps requests signed moments before or
after a rotation working without accepting an old key indefinitely: the
window follows the version creation date, so refreshing CURRENT never
reopens it.

Store calls are bounded in two ways:
    - Cool-down: a cached stage is refreshed at most once per cool-down period.
    - Blacklist: a key confirmed invalid is rejected from memory until the
      cache janitor clears it.

Flow:
1. Empty key -> INVALID_INPUT
2. Blacklisted key -> UNAUTHORIZED
3. Key equals cached CURRENT -> authorized (no store call)
4. CURRENT cool-down elapsed -> refresh CURRENT, compare again
5. CURRENT version created within the grace period -> compare PREVIOUS then
   PENDING, each refreshed only when its own cool-down elapsed
6. No match -> blacklist key, UNAUTHORIZED
Snapshots are written back to the cache whatever the outcome.

A store failure other than "not found" yields AUTHORIZATION_FAILED and the
key is NOT blacklisted: nothing was learned about it.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

from secretguard.core.enums import ErrorCode
from secretguard.core.result import Failure, Result, Success
from secretguard.domain.enums import VersionStage
from secretguard.domain.errors import AuthorizationError, SecretsError
from secretguard.domain.protocols import LoggerProtocol, SecretStoreProtocol
from secretguard.domain.value_objects import SecretSnapshot
from secretguard.infrastructure.cache import SecretCache


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthorizerConfig:
    """Authorizer timing rules.

    Attributes:
        grace_period: Window after the CURRENT version was created during
            which PREVIOUS and PENDING values are also accepted.
        cool_down_period: Minimum time between store refreshes of one stage.
    """

    grace_period: timedelta = timedelta(seconds=15)
    cool_down_period: timedelta = timedelta(seconds=15)


class SecretAuthorizer:
    """Authorizes presented values against cached and stored secret versions.

    Args:
        store: Secret store port.
        cache: Cache shared with this authorizer only.
        config: Timing rules; defaults to 15s grace and 15s cool-down.
        logger: Optional structured logger.
    """

    def __init__(
        self,
        store: SecretStoreProtocol,
        cache: SecretCache,
        config: AuthorizerConfig | None = None,
        logger: LoggerProtocol | None = None,
    ) -> None:
        self._store = store
        self._cache = cache
        self._config = config or AuthorizerConfig()
        self._logger = logger

    @property
    def config(self) -> AuthorizerConfig:
        return self._config

    def authorize(
        self, secret_id: str, value: str
    ) -> tuple[Result[None, AuthorizationError], bool]:
        """Authorize ``value`` against the secret ``secret_id``.

        Args:
            secret_id: Secret ARN or name.
            value: Presented API key.

        Returns:
            (result, used_remote_call). ``result`` is Success(None) when the
            key is accepted, otherwise Failure(AuthorizationError) with code
            INVALID_INPUT, UNAUTHORIZED or AUTHORIZATION_FAILED.
            ``used_remote_call`` is True if the store was called.
        """
        if not value:
            return self._fail(ErrorCode.INVALID_INPUT, "Empty secret value"), False

        if self._cache.is_blacklisted(value):
            self._debug("Rejected blacklisted value", secret_id)
            return self._fail(ErrorCode.UNAUTHORIZED, "Unauthorized"), False

        current, previous, pending, _ = self._cache.get()
        used_remote_call = False
        cool_down = self._config.cool_down_period

        try:
            if current.matches(value):
                self._debug("Authorized against cached current", secret_id)
                return Success(value=None), False

            if current.age(self._now()) > cool_down:
                used_remote_call = True
                fetched = self._fetch(secret_id, VersionStage.CURRENT)
                if isinstance(fetched, Failure):
                    return fetched, used_remote_call
                current = fetched.value
                if current.matches(value):
                    self._debug("Authorized against refreshed current", secret_id)
                    return Success(value=None), used_remote_call

            if current.version_age(self._now()) < self._config.grace_period:
                if previous.age(self._now()) > cool_down:
                    used_remote_call = True
                    fetched = self._fetch(secret_id, VersionStage.PREVIOUS)
                    if isinstance(fetched, Failure):
                        return fetched, used_remote_call
                    previous = fetched.value
                if previous.matches(value):
                    self._debug("Authorized against previous in grace period", secret_id)
                    return Success(value=None), used_remote_call

                if pending.age(self._now()) > cool_down:
                    used_remote_call = True
                    fetched = self._fetch(secret_id, VersionStage.PENDING)
                    if isinstance(fetched, Failure):
                        return fetched, used_remote_call
                    pending = fetched.value
                if pending.matches(value):
                    self._debug("Authorized against pending in grace period", secret_id)
                    return Success(value=None), used_remote_call

            self._cache.blacklist(value)
            self._debug("Rejected and blacklisted value", secret_id)
            return self._fail(ErrorCode.UNAUTHORIZED, "Unauthorized"), used_remote_call
        finally:
            self._cache.set(current, previous, pending)

    def _fetch(
        self, secret_id: str, stage: VersionStage
    ) -> Result[SecretSnapshot, AuthorizationError]:
        """Fetch one stage; "not found" becomes the empty snapshot."""
        result = self._store.get_secret_value(secret_id, stage)
        match result:
            case Success(value=secret):
                created_at = secret.created_at
                if created_at is not None and created_at.tzinfo is None:
                    created_at = created_at.replace(tzinfo=UTC)
                return Success(
                    value=SecretSnapshot(
                        value=secret.value,
                        fetched_at=self._now(),
                        created_at=created_at,
                    )
                )
            case Failure(error=error) if error.is_not_found:
                return Success(value=SecretSnapshot())
            case Failure(error=error):
                return self._store_failure(secret_id, stage, error)

    def _store_failure(
        self, secret_id: str, stage: VersionStage, error: SecretsError
    ) -> Failure[AuthorizationError]:
        if self._logger is not None:
            self._logger.warning(
                "Secret fetch failed during authorization",
                secret_id=secret_id,
                stage=stage.value,
                error_code=error.code.value,
            )
        return Failure(
            error=AuthorizationError(
                code=ErrorCode.AUTHORIZATION_FAILED,
                message=f"Could not fetch {stage.value} secret version",
                cause=error,
            )
        )

    @staticmethod
    def _fail(code: ErrorCode, message: str) -> Failure[AuthorizationError]:
        return Failure(error=AuthorizationError(code=code, message=message))

    @staticmethod
    def _now() -> datetime:
        return datetime.now(UTC)

    def _debug(self, message: str, secret_id: str) -> None:
        if self._logger is not None:
            self._logger.debug(message, secret_id=secret_id)
