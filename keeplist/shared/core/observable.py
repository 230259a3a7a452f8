"""Synchronous observer primitives.

The event bus dispatches asynchronously on the running loop. State that widgets
read back immediately (store snapshots, the filter mode) needs listeners that
have all been called by the time a mutation returns, so it uses these instead.
"""

from __future__ import annotations

import logging
from typing import Callable, Generic, List, TypeVar

T = TypeVar("T")
Listener = Callable[[T], None]

logger = logging.getLogger(__name__)


class Subscription(Generic[T]):
    """Handle returned by ``subscribe``; cancelling it removes the listener."""

    def __init__(self, listeners: "Listeners[T]", listener: Listener[T]) -> None:
        self._listeners = listeners
        self.listener = listener

    @property
    def active(self) -> bool:
        return self.listener in self._listeners

    def cancel(self) -> None:
        self._listeners.remove(self.listener)


class Listeners(Generic[T]):
    """Ordered callback list with per-listener error isolation."""

    def __init__(self, owner: str = "") -> None:
        self._owner = owner
        self._callbacks: List[Listener[T]] = []

    def __len__(self) -> int:
        return len(self._callbacks)

    def __contains__(self, listener: object) -> bool:
        return listener in self._callbacks

    def add(self, listener: Listener[T]) -> Subscription[T]:
        if listener not in self._callbacks:
            self._callbacks.append(listener)
        return Subscription(self, listener)

    def remove(self, listener: Listener[T]) -> None:
        if listener in self._callbacks:
            self._callbacks.remove(listener)

    def clear(self) -> None:
        self._callbacks.clear()

    def notify(self, value: T) -> None:
        """Call every listener with ``value`` in registration order."""
        # Copy so listeners may unsubscribe themselves while being notified
        for listener in list(self._callbacks):
            try:
                listener(value)
            except Exception as exc:
                name = getattr(listener, "__name__", repr(listener))
                logger.exception(f"Listener '{name}' failed for {self._owner or 'observable'}", exc_info=exc)


class ObservableValue(Generic[T]):
    """A single value that notifies listeners when it changes.

    Setting the current value again is not a change.
    """

    def __init__(self, initial: T, name: str = "") -> None:
        self._value = initial
        self._listeners: Listeners[T] = Listeners(name)

    @property
    def value(self) -> T:
        return self._value

    @value.setter
    def value(self, new_value: T) -> None:
        if new_value == self._value:
            return
        self._value = new_value
        self._listeners.notify(new_value)

    def subscribe(self, listener: Listener[T]) -> Subscription[T]:
        return self._listeners.add(listener)

    def unsubscribe(self, listener: Listener[T]) -> None:
        self._listeners.remove(listener)
