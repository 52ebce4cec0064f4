import logging

import pytest

from municipal_dashboard.bootstrap_env import _flatten_secrets, _sanitize_key, bridge_secrets
from municipal_dashboard.config import TABS, Settings, get_settings
from municipal_dashboard.logging_config import get_logger, setup_logging


class TestSettings:
    def test_defaults(self):
        settings = get_settings({})

        assert settings == Settings()
        assert settings.use_sample_data is True
        assert settings.use_stats_endpoint is False
        assert settings.api_timeout is None
        assert settings.api_url == "http://localhost:3000/dashboard/api/wp"

    def test_from_environment(self):
        settings = get_settings({
            "WP_BASE_URL": "https://aukrug.de/wp-json/dashboard/v1/",
            "WP_API_TIMEOUT": "7.5",
            "DASHBOARD_SAMPLE_DATA": "off",
            "DASHBOARD_USE_STATS_ENDPOINT": "YES",
            "DASHBOARD_BASE_PATH": "/verwaltung/",
            "LOG_LEVEL": "debug",
        })

        assert settings.api_url == "https://aukrug.de/wp-json/dashboard/v1"
        assert settings.api_timeout == 7.5
        assert settings.use_sample_data is False
        assert settings.use_stats_endpoint is True
        assert settings.base_path == "/verwaltung"
        assert settings.log_level == "DEBUG"

    def test_relative_base_uses_origin(self):
        settings = get_settings({"WP_BASE_URL": "/api/wp", "WP_API_ORIGIN": "https://admin.aukrug.de/"})
        assert settings.api_url == "https://admin.aukrug.de/api/wp"

    def test_blank_flag_keeps_default(self):
        assert get_settings({"DASHBOARD_SAMPLE_DATA": "  "}).use_sample_data is True

    def test_invalid_timeout(self):
        with pytest.raises(ValueError, match="WP_API_TIMEOUT"):
            get_settings({"WP_API_TIMEOUT": "soon"})

    def test_tabs(self):
        assert [tab.key for tab in TABS] == ["overview", "reports", "notices", "events", "community"]


class TestSecretsBridge:
    def test_sanitize_key(self):
        assert _sanitize_key("wp.base-url") == "WP_BASE_URL"

    def test_flatten_nested_secrets(self):
        flattened = _flatten_secrets("wp", {"api": {"origin": "https://aukrug.de"}, "timeout": 5})
        assert flattened == {"WP_API_ORIGIN": "https://aukrug.de", "WP_TIMEOUT": "5"}

    def test_existing_variables_win(self):
        environ = {"WP_BASE_URL": "/from/env"}
        bridge_secrets({"wp_base_url": "/from/secrets", "dashboard": {"sample_data": False}}, environ)

        assert environ == {"WP_BASE_URL": "/from/env", "DASHBOARD_SAMPLE_DATA": "False"}


class TestLogging:
    def test_setup_logging_configures_package_logger(self):
        setup_logging("WARNING")

        logger = logging.getLogger("municipal_dashboard")
        assert logger.level == logging.WARNING
        assert logger.propagate is False
        assert logging.getLogger("httpx").level == logging.WARNING

    def test_get_logger(self):
        assert get_logger().name == "municipal_dashboard"
        assert get_logger("municipal_dashboard.api.client").name == "municipal_dashboard.api.client"
