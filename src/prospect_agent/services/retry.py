"""Sequential retry with exponential backoff.

:class:`RetryEngine` runs an awaitable operation up to
``RetryConfig.max_attempts`` times.  Only one attempt is ever in flight.
Whether a failure is retried is decided by a predicate supplied per call;
the engine itself only counts attempts and computes delays.

Policy
------
* Attempt 1 fires immediately.
* After a retryable failure of zero-based attempt *i* the engine waits
  ``initial_backoff * 2**i`` seconds, except after the final attempt.
* A non-retryable failure propagates at once.
* When attempts run out the last error propagates.
"""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Awaitable, Callable
from typing import TypeVar

from prospect_agent.domain.values import RetryState
from prospect_agent.infrastructure.config import RetryConfig
from prospect_agent.infrastructure.llm import ModelError

logger = logging.getLogger(__name__)

T = TypeVar("T")

SleepFn = Callable[[float], Awaitable[None]]


class RetryEngine:
    """Runs an operation with the configured retry/backoff policy.

    Parameters
    ----------
    config:
        Attempt limit, base delay, and optional timeouts.
    sleep:
        Awaitable sleep used for backoff.  Defaults to ``asyncio.sleep``.
    clock:
        Monotonic clock used for the overall deadline.
    """

    def __init__(
        self,
        config: RetryConfig | None = None,
        sleep: SleepFn | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._config = config or RetryConfig()
        self._config.validate()
        self._sleep = sleep or asyncio.sleep
        self._clock = clock

    @property
    def config(self) -> RetryConfig:
        return self._config

    async def run(
        self,
        operation: Callable[[], Awaitable[T]],
        should_retry: Callable[[BaseException], bool],
        state: RetryState | None = None,
    ) -> T:
        """Await *operation* until it succeeds or may no longer be retried.

        Parameters
        ----------
        operation:
            Zero-argument callable returning a fresh awaitable per attempt.
        should_retry:
            Predicate deciding whether a failure is transient.
        state:
            Optional state object to record into; the caller can inspect
            attempt count and delays afterwards.

        Raises
        ------
        Exception
            The last error raised by *operation*.
        """
        state = state if state is not None else RetryState()
        cfg = self._config
        started = self._clock()

        while True:
            state.attempt += 1
            try:
                return await self._attempt(operation)
            except Exception as exc:
                state.last_error = exc
                retryable = should_retry(exc)
                if not retryable:
                    logger.debug(
                        "Attempt %d/%d failed with a non-retryable error: %s",
                        state.attempt,
                        cfg.max_attempts,
                        exc,
                    )
                    raise
                if state.attempt >= cfg.max_attempts:
                    logger.warning(
                        "Attempt %d/%d failed, no attempts left: %s",
                        state.attempt,
                        cfg.max_attempts,
                        exc,
                    )
                    raise

                delay = cfg.backoff_for(state.attempt - 1)
                if cfg.deadline is not None:
                    elapsed = self._clock() - started
                    if elapsed + delay >= cfg.deadline:
                        logger.warning(
                            "Attempt %d/%d failed and a %.1fs backoff would pass "
                            "the %.1fs deadline: %s",
                            state.attempt,
                            cfg.max_attempts,
                            delay,
                            cfg.deadline,
                            exc,
                        )
                        raise

                logger.warning(
                    "Attempt %d/%d failed, retrying in %.1fs: %s",
                    state.attempt,
                    cfg.max_attempts,
                    delay,
                    exc,
                )
                state.record_backoff(delay)
                await self._sleep(delay)

    async def _attempt(self, operation: Callable[[], Awaitable[T]]) -> T:
        timeout = self._config.attempt_timeout
        if timeout is None:
            return await operation()
        try:
            return await asyncio.wait_for(operation(), timeout=timeout)
        except asyncio.TimeoutError as exc:
            raise ModelError(f"Model call timed out after {timeout:.1f}s") from exc

    def __repr__(self) -> str:
        return f"RetryEngine(config={self._config!r})"
