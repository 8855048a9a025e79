# dating_client/state.py

"""
Observable state containers for the client session.

A ``Signal`` holds one value. Views read it with ``get()`` and register
callbacks with ``subscribe()``; every ``set()`` that changes the value
notifies subscribers synchronously, in subscription order.

    logged_in = Signal(False)
    unsubscribe = logged_in.subscribe(lambda value: nav.render(value))
    logged_in.set(True)   # nav.render(True)
    unsubscribe()
"""

from __future__ import annotations

from threading import RLock
from typing import Callable, Generic, List, TypeVar

T = TypeVar("T")

Subscriber = Callable[[T], None]


class Signal(Generic[T]):
    """
    A single observable value.
    """

    def __init__(self, initial: T) -> None:
        self._value = initial
        self._subscribers: List[Subscriber[T]] = []
        self._lock = RLock()

    def get(self) -> T:
        return self._value

    def set(self, value: T) -> None:
        """
        Replace the value and notify subscribers if it changed.
        """
        with self._lock:
            if value == self._value:
                return
            self._value = value
            subscribers = list(self._subscribers)

        for callback in subscribers:
            callback(value)

    def update(self, fn: Callable[[T], T]) -> None:
        with self._lock:
            value = fn(self._value)
        self.set(value)

    def subscribe(self, callback: Subscriber[T]) -> Callable[[], None]:
        """
        Register ``callback`` and return a function that removes it again.

        The callback is not invoked with the current value.
        """
        with self._lock:
            self._subscribers.append(callback)

        def unsubscribe() -> None:
            with self._lock:
                if callback in self._subscribers:
                    self._subscribers.remove(callback)

        return unsubscribe

    def __repr__(self) -> str:
        return f"Signal({self._value!r})"


__all__ = ["Signal", "Subscriber"]
