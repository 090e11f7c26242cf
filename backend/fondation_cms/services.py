# fondation_cms/services.py
from dataclasses import dataclass

from flask import current_app

from .notifications import ContentNotifier
from .repository.content import ContentRepository
from .storage import Storage, build_backend
from .views import PageViewRegistry

EXTENSION_KEY = "cms"


@dataclass
class ContentServices:
    storage: Storage
    notifier: ContentNotifier
    repository: ContentRepository
    views: PageViewRegistry


def build_services(config) -> ContentServices:
    """Wire storage, notifier, repository and views from app config."""
    storage = Storage(build_backend(config.get("STORAGE_BACKEND")))
    notifier = ContentNotifier()
    repository = ContentRepository(
        storage,
        notifier,
        recent_edits_limit=config.get("RECENT_EDITS_LIMIT", 10),
    )
    return ContentServices(
        storage=storage,
        notifier=notifier,
        repository=repository,
        views=PageViewRegistry(repository, notifier),
    )


def get_services() -> ContentServices:
    return current_app.extensions[EXTENSION_KEY]


def get_repository() -> ContentRepository:
    return get_services().repository
