"""
In-process event dispatcher.

Modules publish named domain events here and other subsystems subscribe
without the publisher knowing about them (e.g. cart merging listens for
customer.after.login). Dispatch is fire-and-forget from the publisher's
point of view: routes hand it to a background task so listeners run after
the response is sent.
"""

import logging
from collections import defaultdict
from typing import Any, Callable

logger = logging.getLogger(__name__)

Listener = Callable[[Any], None]

CUSTOMER_AFTER_LOGIN = "customer.after.login"


class EventDispatcher:
    """Registry of listeners keyed by event name."""

    def __init__(self) -> None:
        self._listeners: dict[str, list[Listener]] = defaultdict(list)

    def listen(self, event: str, listener: Listener) -> None:
        """Register a listener for an event."""
        self._listeners[event].append(listener)

    def listeners(self, event: str) -> list[Listener]:
        return list(self._listeners.get(event, []))

    def has_listeners(self, event: str) -> bool:
        return bool(self._listeners.get(event))

    def dispatch(self, event: str, payload: Any = None) -> None:
        """
        Invoke every listener for an event in registration order.

        A failing listener is logged and does not prevent the remaining
        listeners from running; the publisher never sees the failure.
        """
        for listener in self.listeners(event):
            try:
                listener(payload)
            except Exception:
                logger.exception("Listener %r failed for event %s", listener, event)
