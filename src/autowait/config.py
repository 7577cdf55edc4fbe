"""
Runtime settings for waits, read from the environment
"""

import math
import os
from dataclasses import dataclass

from .exceptions import ConfigurationError

DEFAULT_TIMEOUT = 10.0
DEFAULT_POLL_INTERVAL = 0.5

TIMEOUT_ENV = 'AUTOWAIT_TIMEOUT'
POLL_INTERVAL_ENV = 'AUTOWAIT_POLL_INTERVAL'
DEBUG_ENV = 'AUTOWAIT_DEBUG'


@dataclass(frozen=True)
class WaitSettings:
    """Process-wide defaults for implicit and explicit waits (seconds)"""
    timeout: float = DEFAULT_TIMEOUT
    poll_interval: float = DEFAULT_POLL_INTERVAL
    debug: bool = False

    def __post_init__(self):
        if not positive_seconds(self.timeout):
            raise ConfigurationError(f"timeout must be a positive finite number, got {self.timeout}")
        if not positive_seconds(self.poll_interval):
            raise ConfigurationError(f"poll_interval must be a positive finite number, got {self.poll_interval}")

    @classmethod
    def from_env(cls) -> 'WaitSettings':
        """Build settings from AUTOWAIT_* environment variables, falling back to defaults"""
        return cls(
            timeout=_float_env(TIMEOUT_ENV, DEFAULT_TIMEOUT),
            poll_interval=_float_env(POLL_INTERVAL_ENV, DEFAULT_POLL_INTERVAL),
            debug=os.getenv(DEBUG_ENV, '').strip().lower() in ('1', 'true', 'yes', 'on'),
        )


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be a number of seconds, got {raw!r}") from None


def positive_seconds(value) -> bool:
    """A usable duration: a finite number above zero (rules out nan and inf)"""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value) and value > 0
