"""Collapse bursts of input values into one logical edit."""

from typing import Callable, Generic, TypeVar

T = TypeVar("T")

DEFAULT_DELAY_MS = 140


class Debouncer(Generic[T]):
    """
    Clock-driven debouncer.

    The caller supplies timestamps, so replayed keystrokes and tests run
    without real timers. The value current when the delay expires is the one
    delivered, no matter how many came before it.
    """

    def __init__(
        self, callback: Callable[[T], None], delay_ms: float = DEFAULT_DELAY_MS
    ) -> None:
        if delay_ms < 0:
            raise ValueError("delay_ms must be >= 0")
        self.callback = callback
        self.delay_ms = delay_ms
        self._value: T | None = None
        self._last_push: float | None = None
        self.fired = 0

    @property
    def pending(self) -> bool:
        return self._last_push is not None

    def push(self, value: T, now_ms: float) -> None:
        self._value = value
        self._last_push = now_ms

    def poll(self, now_ms: float) -> bool:
        if self._last_push is None or now_ms - self._last_push < self.delay_ms:
            return False
        self._fire()
        return True

    def flush(self) -> bool:
        if self._last_push is None:
            return False
        self._fire()
        return True

    def _fire(self) -> None:
        value = self._value
        self._value = None
        self._last_push = None
        self.fired += 1
        self.callback(value)
