"""Application search – trailing-edge Debouncer.

One owned :class:`asyncio.TimerHandle` per instance. Every ``schedule`` call
cancels the outstanding handle before arming a new one, so only the last value
of a burst is ever emitted.
"""
from __future__ import annotations

import asyncio
from typing import Callable, Generic, TypeVar

from activity_search.application.search.errors import DebouncerClosedError, DebouncerError

T = TypeVar("T")

__all__ = ["Debouncer"]


class Debouncer(Generic[T]):
    """Collapse a burst of values into a single trailing emission.

    The timer runs on *loop* when given, otherwise on the loop running at
    ``schedule`` time. A delay of ``0`` settles synchronously and needs no loop.

    Example::

        debouncer = Debouncer[str]()
        debouncer.schedule("ab", 300, on_settle)
        debouncer.schedule("abc", 300, on_settle)   # "ab" is never emitted
    """

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        self._loop = loop
        self._handle: asyncio.TimerHandle | None = None
        self._value: T | None = None
        self._on_settle: Callable[[T], None] | None = None
        self._closed = False

    @property
    def pending(self) -> bool:
        return self._handle is not None

    @property
    def closed(self) -> bool:
        return self._closed

    def schedule(self, value: T, delay_ms: float, on_settle: Callable[[T], None]) -> None:
        """Restart the timer; *on_settle(value)* fires after *delay_ms* of quiet."""
        if self._closed:
            raise DebouncerClosedError()
        self.cancel()
        if delay_ms <= 0:
            on_settle(value)
            return
        try:
            loop = self._loop or asyncio.get_running_loop()
        except RuntimeError as exc:
            raise DebouncerError(
                "Debouncing with a non-zero delay requires a running event loop",
                cause=exc,
            ) from exc
        self._value = value
        self._on_settle = on_settle
        self._handle = loop.call_later(delay_ms / 1000.0, self._fire)

    def flush(self) -> bool:
        """Emit the pending value now. Returns ``False`` when nothing was pending."""
        if self._handle is None:
            return False
        self._handle.cancel()
        self._fire()
        return True

    def cancel(self) -> bool:
        """Drop the pending value without emitting it."""
        if self._handle is None:
            return False
        self._handle.cancel()
        self._clear()
        return True

    def close(self) -> None:
        """Teardown: cancel any pending emission and refuse further scheduling."""
        self.cancel()
        self._closed = True

    def _fire(self) -> None:
        value, on_settle = self._value, self._on_settle
        self._clear()
        if on_settle is not None:
            on_settle(value)  # type: ignore[arg-type]

    def _clear(self) -> None:
        self._handle = None
        self._value = None
        self._on_settle = None
