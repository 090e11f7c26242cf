# fondation_cms/notifications.py
"""
Change notification for page content.

Each write of a page fans out two signals, mirroring what a browser page
would observe:

- ``content_updated``: no payload, listeners re-read what they care about
- ``storage``: carries the affected key and the new JSON value, the same
  shape a cross-tab storage change has

Signals belong to a notifier instance, so two applications (or two tests)
never hear each other.
"""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional

from blinker import NamedSignal

logger = logging.getLogger(__name__)

CONTENT_UPDATED_EVENT = "content_updated"
STORAGE_EVENT = "storage"


@dataclass(frozen=True)
class StorageEvent:
    key: str
    new_value: Optional[str]


class ContentNotifier:
    def __init__(self):
        self.content_updated = NamedSignal(CONTENT_UPDATED_EVENT)
        self.storage = NamedSignal(STORAGE_EVENT)

    def _signal(self, event_type: str) -> NamedSignal:
        if event_type == CONTENT_UPDATED_EVENT:
            return self.content_updated
        if event_type == STORAGE_EVENT:
            return self.storage
        raise ValueError(f"Unknown event type: {event_type}")

    def subscribe(self, event_type: str, handler: Callable[..., Any], weak: bool = True) -> None:
        """
        Register `handler` for `event_type`.

        content_updated handlers are called as ``handler(sender)``;
        storage handlers as ``handler(sender, event=StorageEvent)``.
        """
        self._signal(event_type).connect(handler, weak=weak)

    def unsubscribe(self, event_type: str, handler: Callable[..., Any]) -> None:
        self._signal(event_type).disconnect(handler)

    def _send(self, signal: NamedSignal, **kwargs) -> None:
        # A failing listener must not undo or block a completed write.
        for receiver in list(signal.receivers_for(self)):
            try:
                receiver(self, **kwargs)
            except Exception:
                logger.exception("Listener for '%s' failed", signal.name)

    def publish_content_updated(self) -> None:
        self._send(self.content_updated)

    def publish_storage_change(self, key: str, new_value: Optional[str]) -> None:
        self._send(self.storage, event=StorageEvent(key=key, new_value=new_value))

    def publish_page_change(self, page_id: str, content: Any) -> None:
        self.publish_content_updated()
        self.publish_storage_change(
            f"page_{page_id}",
            json.dumps(content, ensure_ascii=False),
        )
