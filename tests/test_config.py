"""Tests for settings and logging configuration."""

import logging

import pytest
from pydantic import ValidationError

from lifecycle_actions.config import LifecycleActionsSettings, LoggingConfig
from lifecycle_actions.config.logging_config import get_format_string, get_log_level_from_verbosity
from lifecycle_actions.core.value_objects import NotificationSeverity
from lifecycle_actions.factory import create_action_request_controller, create_notification_dispatcher
from lifecycle_actions.infrastructure import HttpxTransport


class TestSettings:
    """Test LifecycleActionsSettings."""

    def test_defaults(self, monkeypatch):
        for name in ("API_BASE_PATH", "SERVER_URL", "NOTIFICATION_AUTO_CLOSE_MS"):
            monkeypatch.delenv(f"LIFECYCLE_ACTIONS_{name}", raising=False)

        settings = LifecycleActionsSettings(_env_file=None)

        assert settings.api_base_path == "/rhn/manager/api/contentmanagement"
        assert settings.server_url == ""
        assert settings.notification_auto_close_ms == 6000

    def test_environment(self, monkeypatch):
        """Test settings are read from prefixed environment variables."""
        monkeypatch.setenv("LIFECYCLE_ACTIONS_API_BASE_PATH", "api/v2/")
        monkeypatch.setenv("LIFECYCLE_ACTIONS_SERVER_URL", "https://suma.example.com/")
        monkeypatch.setenv("LIFECYCLE_ACTIONS_REQUEST_TIMEOUT_SECONDS", "5")

        settings = LifecycleActionsSettings(_env_file=None)

        assert settings.api_base_path == "/api/v2"
        assert settings.server_url == "https://suma.example.com"
        assert settings.request_timeout_seconds == 5.0

    def test_invalid_timeout(self):
        with pytest.raises(ValidationError):
            LifecycleActionsSettings(request_timeout_seconds=0, _env_file=None)


class TestLoggingConfig:
    """Test the logging configuration builder."""

    @pytest.mark.parametrize(
        "verbosity, level",
        [("quiet", "ERROR"), ("NORMAL", "WARNING"), ("verbose", "INFO"), ("debug", "DEBUG"), ("loud", "WARNING")],
    )
    def test_verbosity(self, verbosity, level):
        assert get_log_level_from_verbosity(verbosity) == level

    def test_unknown_format_is_simple(self):
        assert get_format_string("fancy") == get_format_string("simple")

    def test_explicit_level_wins(self, monkeypatch):
        monkeypatch.setenv("LOG_VERBOSITY", "QUIET")
        monkeypatch.setenv("LOG_LEVEL", "debug")

        config = LoggingConfig.build_config()

        assert config["root"]["level"] == "DEBUG"
        assert config["loggers"]["httpx"]["level"] == "ERROR"

    def test_configure(self, monkeypatch):
        monkeypatch.setenv("LOG_VERBOSITY", "VERBOSE")
        monkeypatch.delenv("LOG_LEVEL", raising=False)

        LoggingConfig.configure()

        assert logging.getLogger().level == logging.INFO
        assert logging.getLogger("httpcore").level == logging.ERROR


class TestFactories:
    """Test the factory functions."""

    def test_controller_factory(self):
        settings = LifecycleActionsSettings(
            api_base_path="/api", server_url="https://suma.example.com", _env_file=None
        )

        controller = create_action_request_controller("projects", "filters", settings=settings)

        assert controller.descriptor.resource == "projects"
        assert controller.descriptor.nested_resource == "filters"
        assert isinstance(controller._transport, HttpxTransport)
        assert controller.is_loading is False

    def test_dispatcher_factory(self, sink):
        dispatcher = create_notification_dispatcher(sink)

        dispatcher.show_info("ready")

        sink.notify.assert_called_once_with(NotificationSeverity.INFO, "ready", None)
