"""Package configuration: Settings, init(), and environment detection."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from variantkit._logging import LOGGER_NAME, configure_logging

__all__ = [
    'Settings',
    'get_config',
    'init',
    'reset',
]


@dataclass(frozen=True)
class Settings:
    """Configuration for variantkit.

    Attributes:
        assertions: Run argument preconditions and emit deprecation notices.
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = leave logging alone.
    """

    assertions: bool = True
    log_level: str | None = None


# Global settings (set by init() or lazily by get_config())
_config: Settings | None = None


def _detect_assertions() -> bool:
    """Detect whether assertions are enabled from the environment.

    ``VARIANTKIT_ASSERTIONS=none`` disables them; any other recognised value
    (or no value at all) leaves them on.
    """
    env_value = os.environ.get('VARIANTKIT_ASSERTIONS', '').lower()
    if env_value == 'none':
        return False
    if env_value and env_value not in ('all', 'on', 'true', '1'):
        logging.getLogger(LOGGER_NAME).warning(
            "Unknown VARIANTKIT_ASSERTIONS value '%s', keeping assertions on", env_value
        )
    return True


def _detect_log_level() -> str | None:
    return os.environ.get('VARIANTKIT_LOG_LEVEL') or None


def init(
    assertions: bool | None = None,
    log_level: str | None = None,
) -> Settings:
    """Initialize variantkit with the given configuration.

    Args:
        assertions: Enable precondition checks. Auto-detected if None.
        log_level: Logging level ("DEBUG", "INFO", etc.). Auto-detected if None.

    Returns:
        The Settings that were set.

    Example:
        ```python
        from variantkit import init

        # Auto-detect everything
        init()

        # Trust callers, skip argument checks
        init(assertions=False, log_level="DEBUG")
        ```
    """
    global _config  # noqa: PLW0603

    _config = Settings(
        assertions=_detect_assertions() if assertions is None else assertions,
        log_level=_detect_log_level() if log_level is None else log_level,
    )

    if _config.log_level is not None:
        configure_logging(_config.log_level)

    return _config


def get_config() -> Settings:
    """Get the current configuration, initializing from the environment if needed."""
    if _config is None:
        return init()
    return _config


def reset() -> None:
    """Forget the current configuration so the next get_config() re-detects it."""
    global _config  # noqa: PLW0603
    _config = None
