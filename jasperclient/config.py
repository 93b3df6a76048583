"""
Configuration constants and settings management for the JasperReports Server client.
"""

import os
from pathlib import Path
from typing import Any, Dict, List, Optional

from dotenv import load_dotenv

from .exceptions import ConfigurationError
from .logging_config import get_logger
from .server_profile import ServerProfile
from .utils.security import mask_sensitive_dict

logger = get_logger(__name__)

# Timeouts in seconds
DEFAULT_CONNECT_TIMEOUT = 15.0
DEFAULT_READ_TIMEOUT = 120.0

# Retries for idempotent requests failing on network errors
DEFAULT_MAX_RETRIES = 2
MAX_RETRIES_LIMIT = 10

DEFAULT_LOG_LEVEL = "INFO"
VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

DEFAULT_CACHE_TTL_SECONDS = 300

# Environment variable names for each configuration key
ENV_VARS = {
    "server_url": "JASPER_SERVER_URL",
    "username": "JASPER_USERNAME",
    "password": "JASPER_PASSWORD",
    "organization": "JASPER_ORGANIZATION",
    "connect_timeout": "JASPER_CONNECT_TIMEOUT",
    "read_timeout": "JASPER_READ_TIMEOUT",
    "max_retries": "JASPER_MAX_RETRIES",
    "log_level": "JASPER_LOG_LEVEL",
    "cache_ttl_seconds": "JASPER_CACHE_TTL_SECONDS",
}


class ConfigurationManager:
    """Configuration management class with validation and environment variable support."""

    def __init__(self, env_file: Optional[str] = None, load_env_files: bool = True):
        """
        Initialize configuration with default values and environment variable overrides.

        Args:
            env_file: Explicit .env file to load before reading the environment
            load_env_files: Whether to look for .env files at all
        """
        self._config: Dict[str, Any] = {}
        if load_env_files:
            self._load_env_files(env_file)
        self._load_defaults()
        self._load_from_environment()

    def _load_env_files(self, env_file: Optional[str]) -> None:
        """Load .env files; values already present in the environment win."""
        candidates = [Path(env_file)] if env_file else [Path.cwd() / ".env", Path.home() / ".jasperclient" / "config.env"]
        for candidate in candidates:
            if candidate.exists():
                logger.debug(f"Loading environment from: {candidate}")
                load_dotenv(candidate, override=False)

    def _load_defaults(self) -> None:
        """Load default configuration values."""
        self._config = {
            "server_url": None,
            "username": None,
            "password": None,
            "organization": None,
            "connect_timeout": DEFAULT_CONNECT_TIMEOUT,
            "read_timeout": DEFAULT_READ_TIMEOUT,
            "max_retries": DEFAULT_MAX_RETRIES,
            "log_level": DEFAULT_LOG_LEVEL,
            "cache_ttl_seconds": DEFAULT_CACHE_TTL_SECONDS,
        }

    def _load_from_environment(self) -> None:
        """Load configuration from environment variables."""
        raw = os.environ.get(ENV_VARS["server_url"])
        if raw:
            try:
                self.set_server_url(raw)
            except ValueError as e:
                raise ConfigurationError(f"Invalid {ENV_VARS['server_url']} value: {raw}. {e}")

        for key in ("username", "password", "organization"):
            value = os.environ.get(ENV_VARS[key])
            if value:
                self._config[key] = value

        for key in ("connect_timeout", "read_timeout"):
            raw = os.environ.get(ENV_VARS[key])
            if raw is not None:
                try:
                    self.set_timeout(key, float(raw))
                except ValueError:
                    raise ConfigurationError(f"Invalid {ENV_VARS[key]} value: {raw}. Must be a positive number of seconds")

        raw = os.environ.get(ENV_VARS["max_retries"])
        if raw is not None:
            try:
                self.set_max_retries(int(raw))
            except ValueError:
                raise ConfigurationError(f"Invalid {ENV_VARS['max_retries']} value: {raw}. Must be an integer between 0 and {MAX_RETRIES_LIMIT}")

        raw = os.environ.get(ENV_VARS["log_level"])
        if raw is not None:
            try:
                self.set_log_level(raw)
            except ValueError as e:
                raise ConfigurationError(f"Invalid {ENV_VARS['log_level']} value: {raw}. {e}")

        raw = os.environ.get(ENV_VARS["cache_ttl_seconds"])
        if raw is not None:
            try:
                self.set_cache_ttl_seconds(int(raw))
            except ValueError:
                raise ConfigurationError(f"Invalid {ENV_VARS['cache_ttl_seconds']} value: {raw}. Must be a non-negative integer")

    def get(self, key: str) -> Any:
        """Get a configuration value by key."""
        if key not in self._config:
            raise ConfigurationError(f"Unknown configuration key: {key}")
        return self._config[key]

    def set_server_url(self, server_url: str) -> None:
        if not isinstance(server_url, str) or not server_url.strip():
            raise ValueError("server_url must be a non-empty string")
        server_url = server_url.strip()
        if not server_url.startswith(("http://", "https://")):
            raise ValueError("server_url must start with http:// or https://")
        self._config["server_url"] = server_url.rstrip("/")

    def set_credentials(self, username: str, password: str, organization: Optional[str] = None) -> None:
        if not isinstance(username, str) or not username.strip():
            raise ValueError("username must be a non-empty string")
        if not isinstance(password, str):
            raise ValueError("password must be a string")
        self._config["username"] = username.strip()
        self._config["password"] = password
        self._config["organization"] = organization or None

    def get_connect_timeout(self) -> float:
        return self._config["connect_timeout"]

    def get_read_timeout(self) -> float:
        return self._config["read_timeout"]

    def set_timeout(self, key: str, seconds: float) -> None:
        """Set ``connect_timeout`` or ``read_timeout`` in seconds."""
        if key not in ("connect_timeout", "read_timeout"):
            raise ValueError(f"Unknown timeout key: {key}")
        if isinstance(seconds, bool) or not isinstance(seconds, (int, float)):
            raise ValueError(f"{key} must be a number")
        if seconds <= 0:
            raise ValueError(f"{key} must be > 0 seconds")
        self._config[key] = float(seconds)

    def get_max_retries(self) -> int:
        return self._config["max_retries"]

    def set_max_retries(self, max_retries: int) -> None:
        if isinstance(max_retries, bool) or not isinstance(max_retries, int):
            raise ValueError("max_retries must be an integer")
        if not 0 <= max_retries <= MAX_RETRIES_LIMIT:
            raise ValueError(f"max_retries must be between 0 and {MAX_RETRIES_LIMIT}")
        self._config["max_retries"] = max_retries

    def get_log_level(self) -> str:
        return self._config["log_level"]

    def set_log_level(self, level: str) -> None:
        if not isinstance(level, str) or level.strip().upper() not in VALID_LOG_LEVELS:
            raise ValueError(f"Invalid log level: {level}. Expected one of {', '.join(VALID_LOG_LEVELS)}")
        self._config["log_level"] = level.strip().upper()

    def get_cache_ttl_seconds(self) -> int:
        return self._config["cache_ttl_seconds"]

    def set_cache_ttl_seconds(self, ttl: int) -> None:
        if isinstance(ttl, bool) or not isinstance(ttl, int):
            raise ValueError("cache_ttl_seconds must be an integer")
        if ttl < 0:
            raise ValueError("cache_ttl_seconds must be >= 0")
        self._config["cache_ttl_seconds"] = ttl

    def get_all_config(self) -> Dict[str, Any]:
        """Get all configuration values as a dictionary."""
        return self._config.copy()

    def get_masked_config(self) -> Dict[str, Any]:
        """All configuration values, safe for logging."""
        return mask_sensitive_dict(self._config)

    def update_config(self, config_dict: Dict[str, Any]) -> None:
        """Update configuration with a dictionary of values."""
        for key, value in config_dict.items():
            if key == "server_url":
                self.set_server_url(value)
            elif key in ("connect_timeout", "read_timeout"):
                self.set_timeout(key, value)
            elif key == "max_retries":
                self.set_max_retries(value)
            elif key == "log_level":
                self.set_log_level(value)
            elif key == "cache_ttl_seconds":
                self.set_cache_ttl_seconds(value)
            elif key in ("username", "password", "organization"):
                self._config[key] = value
            else:
                raise ValueError(f"Unknown configuration key: {key}")

    def missing_connection_settings(self) -> List[str]:
        """Environment variable names of connection settings that are still unset."""
        return [ENV_VARS[key] for key in ("server_url", "username", "password") if self._config.get(key) is None]

    def validate_config(self) -> bool:
        """Validate all configuration values."""
        if self.missing_connection_settings():
            return False
        if self._config["connect_timeout"] <= 0 or self._config["read_timeout"] <= 0:
            return False
        return 0 <= self._config["max_retries"] <= MAX_RETRIES_LIMIT

    def build_server_profile(self, alias: Optional[str] = None) -> ServerProfile:
        """
        Create a server profile from the connection settings.

        Raises:
            ConfigurationError: If the server URL or credentials are missing
        """
        missing = self.missing_connection_settings()
        if missing:
            raise ConfigurationError(
                f"Missing connection settings: {', '.join(missing)}",
                error_code="missing_settings",
                details={"missing": missing},
            )
        return ServerProfile(
            server_url=self._config["server_url"],
            username=self._config["username"],
            password=self._config["password"],
            organization=self._config["organization"],
            alias=alias,
        )
