"""
Observable Value

This module provides a single-slot observable value used to push state from a
state holder to its views.

Key Features:
- One held value, last write wins
- Subscribers are notified synchronously on every set
- Subscribing redelivers the current value when it is not None, so a view that
  re-attaches picks up a pending value
- A set issued from inside a callback supersedes the dispatch in progress:
  remaining subscribers only see the newest value
"""

import logging
from collections.abc import Callable
from typing import Any, Generic, Optional, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Subscription:
    """Handle returned by ObservableValue.subscribe()."""

    def __init__(self, owner: "ObservableValue", callback: Callable[[Any], None]):
        self._owner = owner
        self.callback = callback
        self.active = True

    def dispose(self) -> None:
        """Detach the callback. Calling it twice is harmless."""
        self._owner.unsubscribe(self)

    def __repr__(self) -> str:
        name = getattr(self.callback, "__name__", repr(self.callback))
        return f"<Subscription {self._owner.name}:{name} active={self.active}>"


class ObservableValue(Generic[T]):
    """
    {
        "name": "ObservableValue",
        "version": "1.0.0",
        "description": "Single value holder with observer notifications.",
        "dependencies": [],
        "interface": {
            "inputs": ["value: Optional[T]", "callback: Callable[[Optional[T]], None]"],
            "outputs": "Synchronous change notifications to subscribers"
        }
    }
    Holds one optional value and notifies subscribers whenever it is set.
    Not thread-safe: every call must come from the thread that owns the
    observers (the GUI thread for views).
    """

    def __init__(self, initial: Optional[T] = None, name: str = "value"):
        self.name = name
        self._value: Optional[T] = initial
        self._subscriptions: list[Subscription] = []
        self._version = 0

    @property
    def value(self) -> Optional[T]:
        return self._value

    @property
    def subscriber_count(self) -> int:
        return len(self._subscriptions)

    def set(self, value: Optional[T]) -> None:
        """
        Store a new value and notify every current subscriber with it.
        Args:
            value: New value; None means empty
        """
        old_value = self._value
        self._value = value
        self._version += 1
        logger.debug(f"{self.name} set: {old_value!r} -> {value!r}")
        self._notify_subscribers(value)

    def subscribe(self, callback: Callable[[Optional[T]], None]) -> Subscription:
        """
        Register a callback for value changes.
        Args:
            callback: Called with the new value on every set
        Returns:
            Subscription handle used to detach the callback
        """
        subscription = Subscription(self, callback)
        self._subscriptions.append(subscription)
        logger.debug(f"Added observer for '{self.name}': {subscription!r}")
        if self._value is not None:
            self._safe_notify(subscription, self._value)
        return subscription

    def unsubscribe(self, subscription: Subscription) -> None:
        if subscription in self._subscriptions:
            self._subscriptions.remove(subscription)
            logger.debug(f"Removed observer for '{self.name}': {subscription!r}")
        subscription.active = False

    def clear_subscribers(self) -> None:
        for subscription in list(self._subscriptions):
            self.unsubscribe(subscription)

    def _safe_notify(self, subscription: Subscription, value: Optional[T]) -> None:
        """Notify a single subscriber, logging instead of propagating its errors."""
        try:
            subscription.callback(value)
        except Exception as e:
            logger.error(f"Error notifying observer {subscription!r}: {e}")

    def _notify_subscribers(self, value: Optional[T]) -> None:
        version = self._version
        for subscription in list(self._subscriptions):
            if version != self._version:
                # A newer value was set by a callback and already dispatched
                return
            if subscription.active:
                self._safe_notify(subscription, value)
