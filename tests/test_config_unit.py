"""Unit tests for configuration management."""

import os
from unittest.mock import patch

import pytest

from feed2text.config import Config, FetchConfig, ServerConfig


class TestConfigUnit:
    """Unit tests for Config class."""

    def test_defaults_when_no_env_vars(self):
        with patch.dict(os.environ, {}, clear=True):
            config = Config()

        assert config.get_server_config() == ServerConfig(host="0.0.0.0", port=8080)
        assert config.get_fetch_config().timeout == 10
        assert config.log_level == "INFO"

    def test_env_overrides(self):
        env = {
            "FEED2TEXT_HOST": "127.0.0.1",
            "FEED2TEXT_PORT": "9000",
            "FEED2TEXT_FETCH_TIMEOUT": "2.5",
            "FEED2TEXT_USER_AGENT": "tester/1.0",
            "LOG_LEVEL": "DEBUG",
        }
        with patch.dict(os.environ, env, clear=True):
            config = Config()

        assert config.get_server_config() == ServerConfig(host="127.0.0.1", port=9000)
        assert config.get_fetch_config() == FetchConfig(timeout=2.5, user_agent="tester/1.0")
        assert config.log_level == "DEBUG"

    @pytest.mark.parametrize(
        "name, value",
        [
            ("FEED2TEXT_PORT", "http"),
            ("FEED2TEXT_PORT", "0"),
            ("FEED2TEXT_FETCH_TIMEOUT", "soon"),
            ("FEED2TEXT_FETCH_TIMEOUT", "-1"),
        ],
    )
    def test_invalid_numbers(self, name, value):
        with patch.dict(os.environ, {name: value}, clear=True):
            with pytest.raises(ValueError, match=name):
                Config()
