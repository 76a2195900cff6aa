"""
Configuration: Process-Wide Settings

Holds the switch for the debug-only precondition assertions. Checks are off
by default so every merge runs in a single O(n+m) pass.
"""

from __future__ import annotations

import logging
import os
from contextlib import contextmanager
from dataclasses import dataclass, replace
from typing import Iterator, Optional

from mathext.core.constants import ENV_DEBUG_CHECKS, ENV_LOG_LEVEL, LOG_LEVELS
from mathext.core.errors import ConfigError

logger = logging.getLogger(__name__)

_TRUTHY = frozenset({"1", "true", "yes", "on"})


@dataclass(frozen=True, slots=True)
class MathExtConfig:
    """
    Library configuration.

    Parameters:
        debug_checks: Verify ordering preconditions before each merge
        log_level: Level applied to the "mathext" logger
    """
    debug_checks: bool = False
    log_level: str = "WARNING"

    def validate(self) -> Optional[str]:
        if self.log_level.upper() not in LOG_LEVELS:
            return f"log_level must be one of {', '.join(LOG_LEVELS)}, got {self.log_level!r}"
        return None

    @classmethod
    def from_env(cls) -> "MathExtConfig":
        return cls(
            debug_checks=os.getenv(ENV_DEBUG_CHECKS, "").strip().lower() in _TRUTHY,
            log_level=os.getenv(ENV_LOG_LEVEL, "WARNING").strip().upper(),
        )


def _apply_log_level(level: str) -> None:
    logging.getLogger("mathext").setLevel(level.upper())


def load_config() -> MathExtConfig:
    """
    Build the configuration from the environment and apply its log level.

    An invalid MATHEXT_LOG_LEVEL falls back to WARNING with a warning
    instead of failing the import.
    """
    config = MathExtConfig.from_env()
    reason = config.validate()
    if reason is not None:
        logger.warning(f"Ignoring {ENV_LOG_LEVEL}: {reason}")
        config = replace(config, log_level="WARNING")
    _apply_log_level(config.log_level)
    return config


_config: MathExtConfig = load_config()


def get_config() -> MathExtConfig:
    """Return the active configuration."""
    return _config


def set_config(config: MathExtConfig) -> MathExtConfig:
    """
    Replace the active configuration.

    The "mathext" logger level is only touched when log_level changes.

    Returns:
        The previously active configuration

    Raises:
        ConfigError: If the configuration does not validate
    """
    global _config
    reason = config.validate()
    if reason is not None:
        raise ConfigError.invalid("log_level", config.log_level, reason)

    previous = _config
    _config = config
    if config.log_level.upper() != previous.log_level.upper():
        _apply_log_level(config.log_level)
    logger.info(
        f"Config updated: debug_checks={config.debug_checks}, log_level={config.log_level}"
    )
    return previous


@contextmanager
def debug_checks(enabled: bool = True) -> Iterator[MathExtConfig]:
    """
    Temporarily toggle precondition assertions.

    Only the debug_checks flag is swapped; log_level is left alone.
    """
    global _config
    previous = _config.debug_checks
    _config = replace(_config, debug_checks=enabled)
    try:
        yield _config
    finally:
        _config = replace(_config, debug_checks=previous)
