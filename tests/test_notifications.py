"""Tests for content change notifications."""

import json

import pytest

from fondation_cms.notifications import (
    CONTENT_UPDATED_EVENT,
    STORAGE_EVENT,
    ContentNotifier,
    StorageEvent,
)


class TestContentNotifier:
    def test_page_change_sends_both_signals(self, notifier, events):
        """One page write produces one content_updated and one storage event."""
        notifier.publish_page_change("news", {"id": "news", "sections": []})

        assert events.content_updated == 1
        assert events.storage_keys == ["page_news"]
        assert json.loads(events.storage_events[0].new_value) == {"id": "news", "sections": []}

    def test_no_debouncing(self, notifier, events):
        for _ in range(3):
            notifier.publish_page_change("home", {"id": "home"})

        assert events.content_updated == 3
        assert len(events.storage_events) == 3

    def test_unsubscribe_stops_delivery(self, notifier):
        received = []

        def handler(sender, **kwargs):
            received.append(kwargs)

        notifier.subscribe(CONTENT_UPDATED_EVENT, handler)
        notifier.publish_content_updated()
        notifier.unsubscribe(CONTENT_UPDATED_EVENT, handler)
        notifier.publish_content_updated()

        assert received == [{}]

    def test_failing_listener_does_not_block_others(self, notifier, events, caplog):
        def broken(sender, **kwargs):
            raise RuntimeError("boom")

        notifier.subscribe(STORAGE_EVENT, broken)
        notifier.publish_storage_change("page_home", "{}")

        assert events.storage_events == [StorageEvent("page_home", "{}")]
        assert "boom" in caplog.text

    def test_notifiers_are_isolated(self, events):
        other = ContentNotifier()
        other.publish_page_change("home", {})
        assert events.content_updated == 0

    def test_unknown_event_type(self, notifier):
        with pytest.raises(ValueError):
            notifier.subscribe("click", lambda sender: None)
