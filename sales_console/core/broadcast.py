from typing import Callable, List
import logging

logger = logging.getLogger(__name__)

Subscriber = Callable[[str], None]


class ChannelSubscription:
    """Handle for one channel subscriber. Use as a context manager to scope it."""

    def __init__(self, channel: "BroadcastChannel", callback: Subscriber):
        self._channel = channel
        self.callback = callback
        self.closed = False

    def unsubscribe(self):
        if self.closed:
            return
        self.closed = True
        self._channel._remove(self)

    def __enter__(self) -> "ChannelSubscription":
        return self

    def __exit__(self, exc_type, exc, tb):
        self.unsubscribe()


class BroadcastChannel:
    """
    Publish/subscribe cell holding the current favorite salesperson.

    New subscribers are called straight away with the latest published value,
    then with every later publish. Delivery is synchronous and in subscription
    order: publish() returns only after every active subscriber has run.

    One instance is created per application and passed to every component
    that reads or publishes the favorite.
    """

    def __init__(self, initial: str = ""):
        self._value = initial
        self._subscriptions: List[ChannelSubscription] = []

    @property
    def value(self) -> str:
        return self._value

    @property
    def subscriber_count(self) -> int:
        return len(self._subscriptions)

    def publish(self, value: str):
        self._value = value
        logger.debug(f"Favorite published: {value!r} -> {len(self._subscriptions)} subscriber(s)")
        # Snapshot: subscribers may unsubscribe (or subscribe) while being notified
        for subscription in list(self._subscriptions):
            if not subscription.closed:
                subscription.callback(value)

    def subscribe(self, callback: Subscriber) -> ChannelSubscription:
        subscription = ChannelSubscription(self, callback)
        self._subscriptions.append(subscription)
        try:
            callback(self._value)
        except Exception:
            # No handle reaches the caller, so the subscriber must not stay registered
            subscription.unsubscribe()
            raise
        return subscription

    def _remove(self, subscription: ChannelSubscription):
        try:
            self._subscriptions.remove(subscription)
        except ValueError:
            pass
