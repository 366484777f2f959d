"""Library configuration: VouchConfig and initialization."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from vouch._logging import configure_logging

__all__ = [
    'VouchConfig',
    'get_config',
    'init',
    'reset',
]

_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')
_FALSY = ('0', 'false', 'no', 'off')


@dataclass(frozen=True)
class VouchConfig:
    """Configuration for vouch.

    Attributes:
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = silent.
        json_output: Render logs as JSON (True) or for the console (False).
    """

    log_level: str | None = None
    json_output: bool = True


# Global configuration (set by init())
_config: VouchConfig | None = None


def _detect_log_level() -> str | None:
    """Read the log level from VOUCH_LOG_LEVEL, if set."""
    env_level = os.environ.get('VOUCH_LOG_LEVEL', '').strip()
    return env_level or None


def _detect_json_output() -> bool:
    """Read the output format from VOUCH_LOG_JSON (default JSON)."""
    env_json = os.environ.get('VOUCH_LOG_JSON', '').strip().lower()
    if not env_json:
        return True
    return env_json not in _FALSY


def init(
    log_level: str | None = None,
    json_output: bool | None = None,
) -> VouchConfig:
    """Initialize vouch with the specified configuration.

    Assertions work without calling this; it only switches on logging of
    assertion failures.

    Args:
        log_level: Logging level ("DEBUG", "INFO", etc.). Falls back to
            VOUCH_LOG_LEVEL. None = silent.
        json_output: JSON or console log output. Falls back to VOUCH_LOG_JSON.

    Returns:
        The VouchConfig that was set.

    Raises:
        ValueError: If the log level is not a known level name.

    Example:
        ```python
        import vouch

        vouch.init(log_level='DEBUG', json_output=False)
        ```
    """
    global _config  # noqa: PLW0603

    resolved_level = log_level if log_level is not None else _detect_log_level()
    if resolved_level is not None:
        resolved_level = resolved_level.upper()
        if resolved_level not in _LEVELS:
            msg = f'Unknown log level {resolved_level!r}; expected one of {", ".join(_LEVELS)}'
            raise ValueError(msg)

    resolved_json = json_output if json_output is not None else _detect_json_output()

    _config = VouchConfig(log_level=resolved_level, json_output=resolved_json)

    if resolved_level is not None:
        configure_logging(resolved_level, json_output=resolved_json)
        logging.getLogger(__name__).debug('vouch logging configured at %s', resolved_level)

    return _config


def get_config() -> VouchConfig:
    """Get the current configuration.

    Returns:
        The VouchConfig set by init(), or the defaults if init() was never called.
    """
    if _config is None:
        return VouchConfig()
    return _config


def reset() -> None:
    """Forget any configuration set by init()."""
    global _config  # noqa: PLW0603
    _config = None
