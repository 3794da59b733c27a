"""Tests for shared/events.py."""

import logging

from shared.events import CUSTOMER_AFTER_LOGIN, EventDispatcher


class TestEventDispatcher:
    def test_dispatch_calls_listeners_in_order(self):
        dispatcher = EventDispatcher()
        calls = []
        dispatcher.listen("thing.happened", lambda p: calls.append(("first", p)))
        dispatcher.listen("thing.happened", lambda p: calls.append(("second", p)))

        dispatcher.dispatch("thing.happened", 42)

        assert calls == [("first", 42), ("second", 42)]

    def test_dispatch_without_listeners(self):
        EventDispatcher().dispatch(CUSTOMER_AFTER_LOGIN, object())

    def test_events_are_isolated(self):
        dispatcher = EventDispatcher()
        calls = []
        dispatcher.listen("a", calls.append)

        dispatcher.dispatch("b", 1)

        assert calls == []

    def test_failing_listener_is_logged_and_skipped(self, caplog):
        dispatcher = EventDispatcher()
        calls = []

        def broken(_payload):
            raise RuntimeError("boom")

        dispatcher.listen(CUSTOMER_AFTER_LOGIN, broken)
        dispatcher.listen(CUSTOMER_AFTER_LOGIN, calls.append)

        with caplog.at_level(logging.ERROR, logger="shared.events"):
            dispatcher.dispatch(CUSTOMER_AFTER_LOGIN, "payload")

        assert calls == ["payload"]
        assert "failed for event customer.after.login" in caplog.text

    def test_has_listeners(self):
        dispatcher = EventDispatcher()
        assert not dispatcher.has_listeners("a")

        dispatcher.listen("a", print)
        assert dispatcher.has_listeners("a")
        assert not dispatcher.has_listeners("b")
        assert dispatcher.listeners("a") == [print]

    def test_listeners_returns_copy(self):
        dispatcher = EventDispatcher()
        dispatcher.listen("a", print)
        dispatcher.listeners("a").clear()
        assert dispatcher.has_listeners("a")
