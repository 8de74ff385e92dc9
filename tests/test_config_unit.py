"""Unit tests for configuration management."""

import os
from unittest.mock import patch

import pytest

from ghfeed.config import Config, FetchConfig, OutputConfig


class TestConfigUnit:
    """Unit tests for Config class."""

    def test_defaults_without_environment(self):
        """Certificate checks stay on unless explicitly turned off."""
        with patch.dict(os.environ, {}, clear=True):
            config = Config()

        assert config.get_fetch_config() == FetchConfig()
        assert config.get_fetch_config().verify_tls is True
        assert config.get_output_config() == OutputConfig()
        assert config.log_level == "WARNING"

    @pytest.mark.parametrize("value", ["1", "true", "YES", " on "])
    def test_insecure_flag_values(self, value):
        with patch.dict(os.environ, {"GHFEED_INSECURE": value}, clear=True):
            assert Config().get_fetch_config().verify_tls is False

    @pytest.mark.parametrize("value", ["0", "false", "no", ""])
    def test_insecure_flag_off_values(self, value):
        with patch.dict(os.environ, {"GHFEED_INSECURE": value}, clear=True):
            assert Config().get_fetch_config().verify_tls is True

    def test_environment_values(self):
        env = {
            "GHFEED_TIMEOUT": "12.5",
            "GHFEED_OUTPUT_DIR": "/tmp/feeds",
            "GHFEED_PLAIN_TEXT": "true",
            "LOG_LEVEL": "DEBUG",
        }
        with patch.dict(os.environ, env, clear=True):
            config = Config()

        assert config.get_fetch_config().timeout == 12.5
        assert config.get_output_config() == OutputConfig(output_dir="/tmp/feeds", plain_text=True)
        assert config.log_level == "DEBUG"

    @pytest.mark.parametrize("value", ["soon", "0", "-3"])
    def test_invalid_timeout(self, value):
        with patch.dict(os.environ, {"GHFEED_TIMEOUT": value}, clear=True):
            with pytest.raises(ValueError):
                Config()

    def test_log_level_is_normalized(self):
        with patch.dict(os.environ, {"LOG_LEVEL": " info "}, clear=True):
            assert Config().log_level == "INFO"

    @pytest.mark.parametrize("value", ["verbose", "TRACE", "5"])
    def test_invalid_log_level(self, value):
        with patch.dict(os.environ, {"LOG_LEVEL": value}, clear=True):
            with pytest.raises(ValueError, match="Invalid log level"):
                Config()

    def test_empty_log_level_uses_default(self):
        with patch.dict(os.environ, {"LOG_LEVEL": ""}, clear=True):
            assert Config().log_level == "WARNING"
