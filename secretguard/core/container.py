"""Composition root - centralized dependency injection.

Process-scoped singletons (one per Lambda execution environment) built with
``lru_cache`` factories. Core services never reach for these factories
themselves; they receive every collaborator through their constructor. The
rotation Lambda calls the container today; an HTTP transport or Lambda
extension entry point is expected to call the authorization factories and
``start_secret_cache_janitor()``, neither of which ships in this package.

Wiring:
    Settings -> ConsoleAdapter (logger)
    Settings -> AWSSecretStore -> SecretAuthorizer <- SecretCache
                              \\-> SecretRotator
    Settings -> CloudFrontDistributionUpdater -> RotateSecretHandler

Usage:
    from secretguard.core.container import get_rotate_secret_handler

    handler = get_rotate_secret_handler()
    result = handler.handle(command)

Tests call ``reset_container()`` after changing the environment.
"""

from functools import lru_cache

from secretguard.application.commands.handlers import RotateSecretHandler
from secretguard.application.queries.handlers import AuthorizeApiKeyHandler
from secretguard.application.services import (
    AuthorizerConfig,
    SecretAuthorizer,
    SecretRotator,
)
from secretguard.core.config import Settings, get_settings
from secretguard.domain.protocols import (
    DistributionUpdaterProtocol,
    LoggerProtocol,
    SecretStoreProtocol,
)
from secretguard.infrastructure.cache import SecretCache
from secretguard.infrastructure.metrics import AuthorizationMetrics


@lru_cache()
def get_logger() -> LoggerProtocol:
    """Get structured logger singleton."""
    from secretguard.infrastructure.logging import ConsoleAdapter

    settings = get_settings()
    return ConsoleAdapter(use_json=settings.use_json_logs, level=settings.log_level)


@lru_cache()
def get_secret_store() -> SecretStoreProtocol:
    """Get Secrets Manager adapter singleton.

    Honors ``SECRETS_MANAGER_ENDPOINT`` for VPC endpoints or local proxies.
    """
    from secretguard.infrastructure.secrets import AWSSecretStore

    settings = get_settings()
    return AWSSecretStore(
        region=settings.aws_region,
        endpoint_url=settings.secrets_manager_endpoint,
    )


@lru_cache()
def get_distribution_updater() -> DistributionUpdaterProtocol:
    """Get CloudFront distribution updater singleton."""
    from secretguard.infrastructure.cdn import CloudFrontDistributionUpdater

    return CloudFrontDistributionUpdater(region=get_settings().aws_region)


@lru_cache()
def get_authorization_metrics() -> AuthorizationMetrics:
    return AuthorizationMetrics()


@lru_cache()
def get_secret_cache() -> SecretCache:
    """Get the secret cache singleton (janitor not started).

    A transport or extension entry point is expected to start the janitor
    with ``start_secret_cache_janitor()``; nothing in this package does.
    """
    return SecretCache(
        clear_interval=get_settings().cache_clear_interval_seconds,
        logger=get_logger(),
    )


def start_secret_cache_janitor() -> bool:
    """Start the cache janitor; each clear flushes the metrics window to logs.

    Called by the process entry point that serves authorization requests
    (HTTP transport or extension bootstrap), once per execution environment.
    """
    logger = get_logger()
    metrics = get_authorization_metrics()

    def on_cleanup() -> None:
        logger.info("Secret cache cleared", **metrics.snapshot(reset=True))

    return get_secret_cache().start(on_cleanup=on_cleanup)


def authorizer_config_from(settings: Settings) -> AuthorizerConfig:
    return AuthorizerConfig(
        grace_period=settings.grace_period,
        cool_down_period=settings.cool_down_period,
    )


@lru_cache()
def get_authorizer() -> SecretAuthorizer:
    """Get the authorizer singleton, sharing the process secret cache."""
    return SecretAuthorizer(
        store=get_secret_store(),
        cache=get_secret_cache(),
        config=authorizer_config_from(get_settings()),
        logger=get_logger(),
    )


@lru_cache()
def get_rotator() -> SecretRotator:
    return SecretRotator(store=get_secret_store(), logger=get_logger())


@lru_cache()
def get_authorize_api_key_handler() -> AuthorizeApiKeyHandler:
    """Get the authorization query handler.

    The seam an authorization transport calls per request.

    Raises:
        ValueError: If SECRET_ID is not configured.
    """
    settings = get_settings()
    if not settings.secret_id:
        raise ValueError("SECRET_ID must be set to authorize API keys")
    return AuthorizeApiKeyHandler(
        secret_id=settings.secret_id,
        authorizer=get_authorizer(),
        metrics=get_authorization_metrics(),
        logger=get_logger(),
    )


@lru_cache()
def get_rotate_secret_handler() -> RotateSecretHandler:
    """Get the rotation command handler."""
    settings = get_settings()
    return RotateSecretHandler(
        rotator=get_rotator(),
        logger=get_logger(),
        distribution_updater=get_distribution_updater(),
        distribution_id=settings.distribution_id,
        custom_header_name=settings.custom_header_name,
    )


def reset_container() -> None:
    """Drop every cached singleton (stops a running janitor first)."""
    if get_secret_cache.cache_info().currsize:
        get_secret_cache().stop()
    for factory in (
        get_settings,
        get_logger,
        get_secret_store,
        get_distribution_updater,
        get_authorization_metrics,
        get_secret_cache,
        get_authorizer,
        get_rotator,
        get_authorize_api_key_handler,
        get_rotate_secret_handler,
    ):
        factory.cache_clear()
