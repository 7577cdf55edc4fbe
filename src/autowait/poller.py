"""
Condition poller - retry a predicate until it is truthy or a deadline passes

The loop runs on the calling thread: evaluate, sleep, evaluate again. There is
no background thread and no cancellation other than the deadline itself.
"""

import logging
import time
from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, Tuple, Type, TypeVar

from .config import DEFAULT_POLL_INTERVAL, positive_seconds
from .exceptions import ConfigurationError, DeadlineExceeded, NotFound, StaleReference

logger = logging.getLogger(__name__)

T = TypeVar('T')

# Transient absence: treated as "not ready yet" while polling
DEFAULT_IGNORED_EXCEPTIONS: Tuple[Type[BaseException], ...] = (NotFound, StaleReference)


@dataclass(frozen=True)
class PollerConfig:
    """Deadline and polling parameters shared by every wait at one timeout value"""
    timeout: float
    poll_interval: float = DEFAULT_POLL_INTERVAL
    ignored_exceptions: Tuple[Type[BaseException], ...] = DEFAULT_IGNORED_EXCEPTIONS

    def __post_init__(self):
        if not positive_seconds(self.timeout):
            raise ConfigurationError(f"Wait timeout must be a positive finite number, got {self.timeout}")
        if not positive_seconds(self.poll_interval):
            raise ConfigurationError(f"Poll interval must be a positive finite number, got {self.poll_interval}")

    def deadline(self, started: float) -> float:
        return started + self.timeout


@dataclass(frozen=True)
class PollOutcome(Generic[T]):
    """A successful poll: the truthy value plus how long it took"""
    value: T
    attempts: int
    elapsed: float


class Poller:
    """
    Evaluates predicates repeatedly under one PollerConfig.

    A Poller holds no per-call state, so one instance can serve any number of
    sequential (or concurrent) waits at the same timeout.
    """

    def __init__(self, config: PollerConfig,
                 clock: Callable[[], float] = time.monotonic,
                 sleep: Callable[[float], Any] = time.sleep):
        self.config = config
        self._clock = clock
        self._sleep = sleep

    @property
    def timeout(self) -> float:
        return self.config.timeout

    def until(self, predicate: Callable[[], T], message: str = '') -> T:
        """
        Block until ``predicate()`` returns something truthy and return it.

        Exceptions listed in ``ignored_exceptions`` count as "not ready"; anything
        else propagates on the spot. Raises DeadlineExceeded once the deadline passes.
        """
        return self.poll(predicate, message).value

    def poll(self, predicate: Callable[[], T], message: str = '') -> PollOutcome[T]:
        """Like ``until`` but returns the full PollOutcome"""
        started = self._clock()
        deadline = self.config.deadline(started)
        attempts = 0
        last_error: Optional[BaseException] = None

        while True:
            attempts += 1
            try:
                value = predicate()
            except self.config.ignored_exceptions as e:
                last_error = e
            else:
                if value:
                    elapsed = self._clock() - started
                    if attempts > 1:
                        logger.debug("Condition met after %d attempts in %.3fs%s",
                                     attempts, elapsed, f" ({message})" if message else '')
                    return PollOutcome(value=value, attempts=attempts, elapsed=elapsed)

            now = self._clock()
            if now >= deadline:
                elapsed = now - started
                logger.debug("Timed out after %d attempts in %.3fs (timeout %gs)%s",
                             attempts, elapsed, self.config.timeout, f": {message}" if message else '')
                raise DeadlineExceeded(self.config.timeout, elapsed, message, last_error) from last_error

            # Never oversleep the deadline; the final attempt lands right on it
            self._sleep(min(self.config.poll_interval, deadline - now))

    def __repr__(self) -> str:
        return f"Poller(timeout={self.config.timeout:g}, poll_interval={self.config.poll_interval:g})"


def wait_until(predicate: Callable[[], T], timeout: float,
               poll_interval: float = DEFAULT_POLL_INTERVAL, message: str = '') -> T:
    """One-off poll without a WaitSession"""
    return Poller(PollerConfig(timeout=timeout, poll_interval=poll_interval)).until(predicate, message)
