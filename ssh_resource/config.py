"""Resource settings from environment variables.

The pipeline passes everything request-specific on stdin; these settings
only tune how the resource itself behaves inside its container.
"""

import logging
import os
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)

DEFAULT_CONNECT_TIMEOUT = 10.0


@dataclass
class Config:
    """Resource configuration.

    Handles parsing, validation, and defaults for all env vars.
    """

    # Connection
    connect_timeout: float = field(default=DEFAULT_CONNECT_TIMEOUT)
    known_hosts: str | None = field(default=None)

    # Logging
    log_level: str = field(default="WARNING")
    log_colors: bool = field(default=True)

    @classmethod
    def from_env(cls) -> "Config":
        """Load settings from environment variables.

        Returns:
            Config instance with values from environment
        """
        return cls(
            connect_timeout=cls._get_timeout("SSH_RESOURCE_CONNECT_TIMEOUT"),
            known_hosts=cls._get_known_hosts(),
            log_level=os.getenv("SSH_RESOURCE_LOG_LEVEL", "WARNING").upper(),
            log_colors=cls._get_bool("SSH_RESOURCE_LOG_COLORS", True),
        )

    @staticmethod
    def _get_float(key: str, default: float) -> float:
        """Get float from environment.

        Args:
            key: Environment variable key
            default: Default value if not set

        Returns:
            Float value from environment or default
        """
        value = os.getenv(key)
        if value is None or not value.strip():
            return default

        try:
            return float(value)
        except ValueError:
            logger.warning("Invalid number for %s: %s, using default %s", key, value, default)
            return default

    @classmethod
    def _get_timeout(cls, key: str) -> float:
        """Get a positive timeout in seconds."""
        timeout = cls._get_float(key, DEFAULT_CONNECT_TIMEOUT)
        if timeout <= 0:
            logger.warning(
                "%s must be > 0, got %s. Using default: %s",
                key,
                timeout,
                DEFAULT_CONNECT_TIMEOUT,
            )
            return DEFAULT_CONNECT_TIMEOUT
        return timeout

    @staticmethod
    def _get_bool(key: str, default: bool) -> bool:
        """Get boolean from environment.

        Args:
            key: Environment variable key
            default: Default value if not set

        Returns:
            Boolean value from environment or default
        """
        value = os.getenv(key)
        if value is None:
            return default
        return value.lower() in ("1", "true", "yes", "on")

    @staticmethod
    def _get_known_hosts() -> str | None:
        """Get known_hosts path, or None to skip host key verification."""
        value = os.getenv("SSH_RESOURCE_KNOWN_HOSTS", "").strip()
        if not value:
            return None
        return os.path.expanduser(value)
