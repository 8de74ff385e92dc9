"""Configuration management for ghfeed."""

import os
from dataclasses import dataclass

TRUE_VALUES = {"1", "true", "yes", "on"}
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


@dataclass
class FetchConfig:
    """Configuration for downloading feeds."""

    verify_tls: bool = True
    timeout: float | None = None  # None keeps the transport default
    user_agent: str = "ghfeed/1.0 (GitHub feed reader)"


@dataclass
class OutputConfig:
    """Configuration for rendering and writing entries."""

    output_dir: str = ""
    plain_text: bool = False


def _env_flag(name: str) -> bool:
    return os.getenv(name, "").strip().lower() in TRUE_VALUES


class Config:
    """Main configuration manager."""

    DEFAULT_LOG_LEVEL = "WARNING"

    def __init__(self):
        """Initialize configuration from environment variables."""
        self.insecure = _env_flag("GHFEED_INSECURE")
        self.timeout = self._parse_timeout(os.getenv("GHFEED_TIMEOUT", ""))
        self.output_dir = os.getenv("GHFEED_OUTPUT_DIR", "")
        self.plain_text = _env_flag("GHFEED_PLAIN_TEXT")
        self.log_level = self._parse_log_level(
            os.getenv("LOG_LEVEL") or self.DEFAULT_LOG_LEVEL
        )

    @staticmethod
    def _parse_log_level(value: str) -> str:
        level = value.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(
                f"Invalid log level: {value!r} (expected one of {', '.join(LOG_LEVELS)})"
            )
        return level

    @staticmethod
    def _parse_timeout(value: str) -> float | None:
        """Parse a timeout in seconds; an empty value means no timeout."""
        value = value.strip()
        if not value:
            return None
        try:
            timeout = float(value)
        except ValueError:
            raise ValueError(f"Invalid timeout value: {value!r}")
        if timeout <= 0:
            raise ValueError(f"Timeout must be positive: {value!r}")
        return timeout

    def get_fetch_config(self) -> FetchConfig:
        """Get fetch configuration."""
        return FetchConfig(verify_tls=not self.insecure, timeout=self.timeout)

    def get_output_config(self) -> OutputConfig:
        """Get output configuration."""
        return OutputConfig(output_dir=self.output_dir, plain_text=self.plain_text)
