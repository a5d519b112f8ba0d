"""Last-value-wins delayed calls on the running asyncio loop."""

import asyncio
from typing import Any, Callable, Generic, Optional, TypeVar

import structlog

logger = structlog.get_logger()

T = TypeVar("T")


class Debouncer(Generic[T]):
    """Coalesce bursts of values into one delayed callback.

    Each schedule() cancels the previously scheduled call, so after a burst
    of N values only the N-th reaches the callback, `delay` seconds after it
    was scheduled.

    Example:
        >>> debouncer = Debouncer(0.5, engine_commit)
        >>> debouncer.schedule(draft)   # on every keystroke
        >>> debouncer.flush()           # on blur: fire now if pending
    """

    def __init__(self, delay: float, callback: Callable[[T], Any]):
        """Initialize Debouncer.

        Args:
            delay: Idle period in seconds before the callback fires
            callback: Called with the last scheduled value
        """
        self.delay = delay
        self.callback = callback
        self._handle: Optional[asyncio.TimerHandle] = None
        self._value: Optional[T] = None

    @property
    def pending(self) -> bool:
        """Whether a call is scheduled and has not fired yet."""
        return self._handle is not None

    def schedule(self, value: T) -> None:
        """(Re)schedule the callback with `value`, cancelling any pending call.

        Must be called from within a running event loop.
        """
        self.cancel()
        self._value = value
        self._handle = asyncio.get_running_loop().call_later(self.delay, self._fire)
        logger.debug("debounce_scheduled", delay=self.delay)

    def flush(self) -> bool:
        """Fire a pending call immediately.

        Returns:
            True if a pending call was fired
        """
        if self._handle is None:
            return False
        self._handle.cancel()
        self._fire()
        return True

    def cancel(self) -> None:
        """Drop a pending call without firing it."""
        if self._handle is not None:
            self._handle.cancel()
        self._handle = None
        self._value = None

    def _fire(self) -> None:
        value = self._value
        self._handle = None
        self._value = None
        self.callback(value)
