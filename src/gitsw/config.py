"""Runtime settings for gitsw."""

import logging
import os
from dataclasses import dataclass

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 5.0
DEFAULT_LOG_LEVEL = "WARNING"

TIMEOUT_ENV = "GITSW_TIMEOUT"
LOG_LEVEL_ENV = "GITSW_LOG_LEVEL"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class Settings:
    """
    Settings resolved from the environment and command-line flags.

    Attributes:
        timeout: Deadline in seconds for the branch listing phase
        log_level: Logging level name
    """

    timeout: float = DEFAULT_TIMEOUT
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> "Settings":
        """Build settings from ``GITSW_*`` environment variables."""
        if environ is None:
            environ = dict(os.environ)

        settings = cls()

        raw_timeout = environ.get(TIMEOUT_ENV)
        if raw_timeout:
            try:
                timeout = float(raw_timeout)
            except ValueError:
                timeout = -1.0
            if timeout > 0:
                settings.timeout = timeout
            else:
                logger.warning(
                    "Ignoring %s=%r: expected a positive number", TIMEOUT_ENV, raw_timeout
                )

        raw_level = environ.get(LOG_LEVEL_ENV)
        if raw_level:
            if raw_level.upper() in LOG_LEVELS:
                settings.log_level = raw_level.upper()
            else:
                logger.warning("Ignoring %s=%r: unknown level", LOG_LEVEL_ENV, raw_level)

        return settings
