"""Unit tests for the composition root.

Tests cover:
- Singleton factories return the same instance
- Settings flow into the built services
- The authorizer shares the process secret cache
- Janitor cleanup flushes authorization metrics to the log
- Missing SECRET_ID rejected for the authorization handler
- Building the cache leaves the janitor to the serving entry point
"""

import os
from datetime import timedelta
from unittest.mock import patch

import pytest
from moto import mock_aws

from secretguard.core import container
from secretguard.core.container import (
    get_authorization_metrics,
    get_authorize_api_key_handler,
    get_authorizer,
    get_rotate_secret_handler,
    get_rotator,
    get_secret_cache,
    get_secret_store,
    reset_container,
    start_secret_cache_janitor,
)

BASE_ENV = {
    "AWS_ACCESS_KEY_ID": "testing",
    "AWS_SECRET_ACCESS_KEY": "testing",
    "AWS_DEFAULT_REGION": "us-east-1",
    "ENVIRONMENT": "testing",
    "SECRET_ID": "api-key",
}


@pytest.mark.unit
class TestContainerSingletons:
    """Test factory caching and wiring."""

    @mock_aws
    def test_factories_return_singletons(self):
        with patch.dict(os.environ, BASE_ENV, clear=True):
            reset_container()

            assert get_secret_store() is get_secret_store()
            assert get_secret_cache() is get_secret_cache()
            assert get_authorizer() is get_authorizer()
            assert get_rotator() is get_rotator()

    @mock_aws
    def test_settings_flow_into_services(self):
        env_values = BASE_ENV | {
            "AWS_REGION": "eu-west-1",
            "GRACE_PERIOD_SECONDS": "5",
            "COOL_DOWN_PERIOD_SECONDS": "3",
            "CACHE_CLEAR_INTERVAL_SECONDS": "90",
        }
        with patch.dict(os.environ, env_values, clear=True):
            reset_container()

            assert get_secret_store().client.meta.region_name == "eu-west-1"
            assert get_secret_cache().clear_interval == 90
            assert get_authorizer().config.grace_period == timedelta(seconds=5)
            assert get_authorizer().config.cool_down_period == timedelta(seconds=3)

    @mock_aws
    def test_authorizer_uses_process_cache(self):
        with patch.dict(os.environ, BASE_ENV, clear=True):
            reset_container()

            assert get_authorizer()._cache is get_secret_cache()

    @mock_aws
    def test_authorize_handler_requires_secret_id(self):
        env_values = {k: v for k, v in BASE_ENV.items() if k != "SECRET_ID"}
        with patch.dict(os.environ, env_values, clear=True):
            reset_container()

            with pytest.raises(ValueError, match="SECRET_ID"):
                get_authorize_api_key_handler()

    @mock_aws
    def test_rotate_handler_built(self):
        with patch.dict(os.environ, BASE_ENV, clear=True):
            reset_container()

            assert get_rotate_secret_handler() is get_rotate_secret_handler()


@pytest.mark.unit
class TestSecretCacheJanitorWiring:
    """Test janitor start and metrics flush."""

    def test_cleanup_logs_and_resets_metrics(self):
        with patch.dict(os.environ, BASE_ENV, clear=True):
            reset_container()
            with patch.object(container, "get_logger") as get_logger:
                metrics = get_authorization_metrics()
                metrics.record_outcome("authorized")

                assert start_secret_cache_janitor() is True
                get_secret_cache().stop()

        cleared = [
            c for c in get_logger.return_value.info.call_args_list
            if c.args == ("Secret cache cleared",)
        ]
        assert len(cleared) == 1
        kwargs = cleared[0].kwargs
        assert kwargs["authorized_count"] == 1
        assert metrics.snapshot()["total_requests"] == 0

    def test_reset_container_stops_janitor(self):
        with patch.dict(os.environ, BASE_ENV, clear=True):
            reset_container()
            with patch.object(container, "get_logger"):
                start_secret_cache_janitor()
                cache = get_secret_cache()

                reset_container()

        assert cache._janitor.cancelled
        assert get_secret_cache() is not cache

    @mock_aws
    def test_janitor_only_started_on_request(self):
        """Test building the authorization path never starts the janitor."""
        with patch.dict(os.environ, BASE_ENV, clear=True):
            reset_container()
            with patch.object(container, "get_logger"):
                handler = get_authorize_api_key_handler()
                cache = get_secret_cache()

                assert handler._authorizer is get_authorizer()
                assert cache._janitor is None

                assert start_secret_cache_janitor() is True
                assert cache._janitor.running
                assert start_secret_cache_janitor() is False

                reset_container()
