"""
Runtime configuration for sanity.

Settings are read from the environment once and cached:

- ``SANITY_SEED``: integer seed for the shared random source (unset means OS entropy)
- ``SANITY_LOG_LEVEL``: level used by :func:`configure_logging` (default ``WARNING``)
"""

from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass
from functools import cache
from typing import Optional

from sanity.errors import InvalidArgumentError

SEED_ENV_VAR = "SANITY_SEED"
LOG_LEVEL_ENV_VAR = "SANITY_LOG_LEVEL"

_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass(frozen=True, slots=True)
class Settings:
    """
    Process-wide settings.

    Attributes:
        seed: Seed for the shared random source, or None for OS entropy
        log_level: Name of the logging level, e.g. "DEBUG"
    """

    seed: Optional[int] = None
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls, environ: Optional[dict[str, str]] = None) -> Settings:
        """Build settings from environment variables."""
        env = os.environ if environ is None else environ

        raw_seed = env.get(SEED_ENV_VAR, "").strip()
        seed: Optional[int] = None
        if raw_seed:
            try:
                seed = int(raw_seed)
            except ValueError as e:
                raise InvalidArgumentError(
                    f"{SEED_ENV_VAR} must be an integer, got {raw_seed!r}", "config"
                ) from e

        log_level = env.get(LOG_LEVEL_ENV_VAR, "WARNING").strip().upper() or "WARNING"
        if not isinstance(logging.getLevelName(log_level), int):
            raise InvalidArgumentError(
                f"{LOG_LEVEL_ENV_VAR} is not a logging level: {log_level!r}", "config"
            )

        return cls(seed=seed, log_level=log_level)


@cache
def get_settings() -> Settings:
    """Return the settings loaded from the current environment."""
    return Settings.from_env()


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """
    Attach a stream handler to the ``sanity`` logger.

    Args:
        level: Level name; defaults to the configured ``log_level``

    Returns:
        The configured package logger

    Raises:
        InvalidArgumentError: If level is not a logging level name
    """
    level = (level or get_settings().log_level).upper()
    numeric_level = logging.getLevelName(level)
    if not isinstance(numeric_level, int):
        raise InvalidArgumentError(f"Not a logging level: {level!r}", "configure_logging")

    logger = logging.getLogger("sanity")

    # Only configure if not already configured
    if not any(isinstance(h, logging.StreamHandler) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(fmt=_LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        logger.addHandler(handler)

    logger.setLevel(numeric_level)
    return logger
