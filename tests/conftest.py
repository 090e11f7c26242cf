"""Shared fixtures: in-memory content store, notifier capture and a testing app."""

import pytest

from fondation_cms import create_app
from fondation_cms.notifications import CONTENT_UPDATED_EVENT, STORAGE_EVENT, ContentNotifier
from fondation_cms.repository.content import ContentRepository
from fondation_cms.storage import MemoryBackend, Storage


class EventRecorder:
    """Collects every notification a notifier sends."""

    def __init__(self, notifier):
        self.content_updated = 0
        self.storage_events = []
        notifier.subscribe(CONTENT_UPDATED_EVENT, self.on_content_updated, weak=False)
        notifier.subscribe(STORAGE_EVENT, self.on_storage, weak=False)

    def on_content_updated(self, sender, **kwargs):
        self.content_updated += 1

    def on_storage(self, sender, event=None, **kwargs):
        self.storage_events.append(event)

    @property
    def storage_keys(self):
        return [event.key for event in self.storage_events]


@pytest.fixture
def backend():
    return MemoryBackend()


@pytest.fixture
def storage(backend):
    return Storage(backend)


@pytest.fixture
def notifier():
    return ContentNotifier()


@pytest.fixture
def repository(storage, notifier):
    return ContentRepository(storage, notifier)


@pytest.fixture
def events(notifier):
    return EventRecorder(notifier)


@pytest.fixture
def app():
    return create_app("testing")


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def app_repository(app):
    return app.extensions["cms"].repository


def make_page(page_id="contact", sections=None, title=None):
    return {
        "id": page_id,
        "title": title or {"fr": "Titre", "ar": "عنوان"},
        "sections": sections if sections is not None else [
            {"id": "s1", "title": {"fr": "Un", "ar": "واحد"}, "content": {"fr": "a", "ar": "ب"}},
        ],
    }
