"""
Notification Channel

Publish/subscribe fan-out of registrant events. Delivery is synchronous and
best-effort: whoever is subscribed at publish time receives the event, nobody
else ever does.
"""

import logging
import threading

logger = logging.getLogger(__name__)

NEW_USER = 'newUser'
UPDATE_USER = 'updateUser'
DELETE_USER = 'deleteUser'


class NotificationChannel:
    """In-process publish/subscribe channel."""

    def __init__(self):
        self._subscribers = []
        self._lock = threading.Lock()

    def subscribe(self, callback):
        """Register `callback(event, payload)` for every future publish."""
        with self._lock:
            self._subscribers.append(callback)
        return callback

    def unsubscribe(self, callback):
        with self._lock:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

    @property
    def subscriber_count(self):
        return len(self._subscribers)

    def publish(self, event, payload):
        """Deliver an event to every current subscriber.

        A failing subscriber is logged and skipped; it never fails the caller.

        Returns:
            number of subscribers the event was delivered to
        """
        with self._lock:
            subscribers = list(self._subscribers)

        delivered = 0
        for callback in subscribers:
            try:
                callback(event, payload)
                delivered += 1
            except Exception:
                logger.exception('Subscriber %r failed on %s', callback, event)

        logger.debug('Published %s to %d subscriber(s)', event, delivered)
        return delivered
