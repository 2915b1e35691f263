"""Call-rate wrappers: trailing-edge debounce and leading-edge throttle.

Each wrapper owns its own state (a pending timer for debounce, a cooldown
deadline for throttle) guarded by a lock, so one wrapper can be shared by
several threads without firing more than once per window. Nothing is shared
between wrapper instances.

Notes:
- ``debounce`` runs the action on a timer thread; the caller never sees its
  return value or exceptions (they are logged).
- ``throttle`` runs the action synchronously in the caller's thread, so its
  exceptions propagate normally.
"""

from __future__ import annotations

import functools
import logging
import threading
import time
from typing import Any, Callable, Protocol

logger = logging.getLogger(__name__)


class TimerHandle(Protocol):
    """Minimal interface of a one-shot timer (satisfied by threading.Timer)."""

    def start(self) -> None: ...

    def cancel(self) -> None: ...


TimerFactory = Callable[[float, Callable[[], None]], TimerHandle]


def thread_timer(interval_seconds: float, callback: Callable[[], None]) -> TimerHandle:
    """Build a daemon ``threading.Timer`` so pending calls never block exit."""
    timer = threading.Timer(interval_seconds, callback)
    timer.daemon = True
    return timer


def _action_name(action: Callable[..., Any]) -> str:
    return getattr(action, "__qualname__", None) or repr(action)


class Debouncer:
    """Delay an action until ``delay_ms`` passes without another call.

    Every call cancels the pending timer (if any) and schedules a new one with
    the latest arguments. A zero delay still defers to the timer thread.
    """

    def __init__(
        self,
        action: Callable[..., Any],
        delay_ms: float,
        *,
        timer_factory: TimerFactory = thread_timer,
    ) -> None:
        """Initialize the debouncer.

        Args:
            action: Callable to run once activity settles.
            delay_ms: Quiet period in milliseconds.
            timer_factory: Builds a timer from (seconds, callback).

        Raises:
            ValueError: If delay_ms is negative.
        """
        if delay_ms < 0:
            raise ValueError("delay_ms must be >= 0")

        self._action = action
        self._delay_seconds = delay_ms / 1000
        self._timer_factory = timer_factory
        self._lock = threading.Lock()
        self._timer: TimerHandle | None = None
        self._generation = 0

    @property
    def pending(self) -> bool:
        """Whether an invocation is currently scheduled."""
        with self._lock:
            return self._timer is not None

    def __call__(self, *args: Any, **kwargs: Any) -> None:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()

            self._generation += 1
            generation = self._generation
            timer = self._timer_factory(
                self._delay_seconds,
                functools.partial(self._fire, generation, args, kwargs),
            )
            self._timer = timer
            timer.start()

    def _fire(self, generation: int, args: tuple[Any, ...], kwargs: dict[str, Any]) -> None:
        with self._lock:
            # A newer call may have replaced this timer after it already expired
            if generation != self._generation:
                return
            self._timer = None

        try:
            self._action(*args, **kwargs)
        except Exception:
            logger.exception(
                "debounce.action_failed",
                extra={"action": _action_name(self._action)},
            )


class Throttler:
    """Run an action at most once per ``limit_ms``, on the leading call.

    Calls arriving while the cooldown is open are dropped: they are neither
    queued nor replayed once the cooldown ends.
    """

    def __init__(
        self,
        action: Callable[..., Any],
        limit_ms: float,
        *,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize the throttler.

        Args:
            action: Callable to run on the leading call of each window.
            limit_ms: Cooldown length in milliseconds.
            clock: Monotonic time source returning seconds.

        Raises:
            ValueError: If limit_ms is negative.
        """
        if limit_ms < 0:
            raise ValueError("limit_ms must be >= 0")

        self._action = action
        self._limit_seconds = limit_ms / 1000
        self._clock = clock
        self._lock = threading.Lock()
        self._cooldown_until: float | None = None

    @property
    def cooling_down(self) -> bool:
        """Whether a call made now would be dropped."""
        with self._lock:
            return self._in_cooldown(self._clock())

    def _in_cooldown(self, now: float) -> bool:
        return self._cooldown_until is not None and now < self._cooldown_until

    def __call__(self, *args: Any, **kwargs: Any) -> None:
        with self._lock:
            now = self._clock()
            if self._in_cooldown(now):
                logger.debug(
                    "throttle.dropped",
                    extra={"action": _action_name(self._action)},
                )
                return
            # Window opens on the leading call even if the action raises
            self._cooldown_until = now + self._limit_seconds

        self._action(*args, **kwargs)


def debounce(
    action: Callable[..., Any],
    delay_ms: float,
    *,
    timer_factory: TimerFactory = thread_timer,
) -> Callable[..., None]:
    """Wrap ``action`` so it fires once, ``delay_ms`` after the last call.

    Args:
        action: Callable to debounce.
        delay_ms: Quiet period in milliseconds.
        timer_factory: Timer builder, mostly useful for tests.

    Returns:
        A fire-and-forget wrapper; the last call's arguments win.
    """
    wrapped = Debouncer(action, delay_ms, timer_factory=timer_factory)
    functools.update_wrapper(wrapped, action, updated=())
    return wrapped


def throttle(
    action: Callable[..., Any],
    limit_ms: float,
    *,
    clock: Callable[[], float] = time.monotonic,
) -> Callable[..., None]:
    """Wrap ``action`` so it fires at most once per ``limit_ms``.

    Args:
        action: Callable to throttle.
        limit_ms: Cooldown length in milliseconds.
        clock: Time source in seconds, mostly useful for tests.

    Returns:
        A wrapper that runs the leading call of each window synchronously.
    """
    wrapped = Throttler(action, limit_ms, clock=clock)
    functools.update_wrapper(wrapped, action, updated=())
    return wrapped
