"""Configuration management for the feed2text service."""

import os
from dataclasses import dataclass

from .fetch import DEFAULT_TIMEOUT, DEFAULT_USER_AGENT


@dataclass
class ServerConfig:
    """Listen address of the HTTP server."""

    host: str = "0.0.0.0"
    port: int = 8080


@dataclass
class FetchConfig:
    """Settings for outbound requests."""

    timeout: float = DEFAULT_TIMEOUT
    user_agent: str = DEFAULT_USER_AGENT


class Config:
    """Main configuration manager."""

    def __init__(self):
        """Initialize configuration from environment variables.

        Raises:
            ValueError: If a numeric variable cannot be parsed
        """
        self.host = os.getenv("FEED2TEXT_HOST", "0.0.0.0")
        self.port = self._read_number("FEED2TEXT_PORT", "8080", int)
        self.fetch_timeout = self._read_number(
            "FEED2TEXT_FETCH_TIMEOUT", str(DEFAULT_TIMEOUT), float
        )
        self.user_agent = os.getenv("FEED2TEXT_USER_AGENT", DEFAULT_USER_AGENT)
        self.log_level = os.getenv("LOG_LEVEL", "INFO")

    @staticmethod
    def _read_number(name: str, default: str, cast):
        raw = os.getenv(name, default)
        try:
            value = cast(raw)
        except ValueError as e:
            raise ValueError(f"Invalid value for {name}: {raw!r}") from e
        if value <= 0:
            raise ValueError(f"{name} must be positive, got {raw!r}")
        return value

    def get_server_config(self) -> ServerConfig:
        """Get server configuration."""
        return ServerConfig(host=self.host, port=self.port)

    def get_fetch_config(self) -> FetchConfig:
        """Get outbound fetch configuration."""
        return FetchConfig(timeout=self.fetch_timeout, user_agent=self.user_agent)
