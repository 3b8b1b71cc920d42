"""
Readiness-gated startup.

The API must not accept connections until its database answers. On a
container host the database often comes up after the API, so the process
keeps probing at a fixed interval instead of crashing:

    PROBING --healthy probe + bind--> LISTENING   (terminal)
    PROBING --unhealthy / error-----> RETRY_WAIT
    RETRY_WAIT --delay elapsed------> PROBING

Retries are driven by an injected timer exposing call_later(delay, callback)
(the running asyncio loop in production), so tests can step the machine
without sleeping.
"""
import asyncio
import logging
from enum import Enum
from typing import Any, Awaitable, Callable, Optional

from apps.tasks.dtos import HealthStatus

logger = logging.getLogger(__name__)

DEFAULT_RETRY_DELAY = 5.0


class StartupState(str, Enum):
    PROBING = 'PROBING'
    RETRY_WAIT = 'RETRY_WAIT'
    LISTENING = 'LISTENING'


class StartupOrchestrator:
    """
    Probe the store, then bind the listener exactly once.

    Args:
        probe: coroutine function returning a HealthStatus
        bind: callable returning the bound listener; raises OSError on failure
        timer: object with call_later(delay, callback)
        on_listening: called with (listener, health) after a successful bind
        retry_delay: seconds between attempts; fixed, no backoff
    """

    def __init__(
        self,
        probe: Callable[[], Awaitable[HealthStatus]],
        bind: Callable[[], Any],
        timer,
        on_listening: Optional[Callable[[Any, HealthStatus], None]] = None,
        retry_delay: float = DEFAULT_RETRY_DELAY,
    ):
        self._probe = probe
        self._bind = bind
        self._timer = timer
        self._on_listening = on_listening
        self.retry_delay = retry_delay

        self.state = StartupState.PROBING
        self.attempts = 0
        self.retries = 0
        self.last_health: Optional[HealthStatus] = None
        self.listener = None
        self._pending = None

    async def attempt_start(self) -> StartupState:
        """
        Run one probe/bind attempt.

        Never raises: failures are logged and a retry is scheduled.
        A no-op once LISTENING.
        """
        if self.state is StartupState.LISTENING:
            return self.state

        self.state = StartupState.PROBING
        self.attempts += 1

        try:
            health = await self._probe()
        except Exception as e:
            logger.error(f"Database probe raised: {e}")
            return self._schedule_retry()

        self.last_health = health
        if not health.is_healthy:
            logger.error(f"Database connection failed: {health.error}")
            return self._schedule_retry()

        try:
            self.listener = self._bind()
        except OSError as e:
            logger.error(f"Failed to start server: {e}")
            return self._schedule_retry()

        self.state = StartupState.LISTENING
        logger.info(f"Database ready after {self.attempts} attempt(s)")
        if self._on_listening:
            self._on_listening(self.listener, health)
        return self.state

    def _schedule_retry(self) -> StartupState:
        self.state = StartupState.RETRY_WAIT
        self.retries += 1
        logger.info(f"Waiting for database... (retry in {self.retry_delay:g}s)")
        self._timer.call_later(self.retry_delay, self._fire_retry)
        return self.state

    def _fire_retry(self) -> "asyncio.Future":
        # Keep a reference so the loop does not drop the task
        self._pending = asyncio.ensure_future(self.attempt_start())
        return self._pending
