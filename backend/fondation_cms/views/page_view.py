# fondation_cms/views/page_view.py
import logging
from typing import Any, Dict, Optional

from fondation_cms.domain.records import LANGUAGES, PageContent
from fondation_cms.notifications import CONTENT_UPDATED_EVENT, STORAGE_EVENT, ContentNotifier, StorageEvent
from fondation_cms.repository.content import ContentRepository, editor_key, page_key
from fondation_cms.seeding.defaults import DEFAULT_PAGE_TITLES, default_page, default_section_text

logger = logging.getLogger(__name__)


class PageView:
    """
    Live view over one public page.

    Reads the live copy, falls back to the default content table when the
    page was never stored, and re-reads whenever a change notification
    concerns it.
    """

    def __init__(
        self,
        page_id: str,
        repository: ContentRepository,
        notifier: Optional[ContentNotifier] = None,
    ):
        self.page_id = page_id
        self.repository = repository
        self.notifier = notifier or repository.notifier
        self.content: Optional[PageContent] = None
        self.revision = 0
        self._watched_keys = {page_key(page_id), editor_key(page_id)}

        self.load()

        self.notifier.subscribe(CONTENT_UPDATED_EVENT, self._on_content_updated)
        self.notifier.subscribe(STORAGE_EVENT, self._on_storage)
        self._subscribed = True

    def load(self) -> Optional[PageContent]:
        self.content = self.repository.get_page_content(self.page_id) or default_page(self.page_id)
        return self.content

    def reload(self) -> None:
        self.load()
        self.revision += 1
        logger.debug("Page view '%s' reloaded (revision %d)", self.page_id, self.revision)

    def _on_content_updated(self, sender, **kwargs):
        self.reload()

    def _on_storage(self, sender, event: StorageEvent = None, **kwargs):
        if event is not None and event.key in self._watched_keys:
            self.reload()

    def close(self) -> None:
        if not self._subscribed:
            return
        self.notifier.unsubscribe(CONTENT_UPDATED_EVENT, self._on_content_updated)
        self.notifier.unsubscribe(STORAGE_EVENT, self._on_storage)
        self._subscribed = False

    # ------------------------
    # Rendering
    # ------------------------

    def _text(self, value, language, section_id=None, field=None) -> str:
        if isinstance(value, dict) and value.get(language):
            return value[language]
        if section_id is not None:
            return default_section_text(self.page_id, section_id, field, language) or ""
        fallback = DEFAULT_PAGE_TITLES.get(self.page_id, {})
        return fallback.get(language, self.page_id)

    def render(self, language: str = "fr") -> Dict[str, Any]:
        """
        Localized rendering of the page.

        Missing translations fall back to the default literal for the same
        section and field.
        """
        if language not in LANGUAGES:
            raise ValueError(f"Unsupported language: {language}")

        content = self.content or {"id": self.page_id, "sections": []}
        sections = []
        for section in content.get("sections") or []:
            section_id = section.get("id")
            rendered = {
                "id": section_id,
                "title": self._text(section.get("title"), language, section_id, "title"),
                "content": self._text(section.get("content"), language, section_id, "content"),
            }
            if section.get("image"):
                rendered["image"] = section["image"]
            sections.append(rendered)

        return {
            "id": self.page_id,
            "lang": language,
            "dir": "rtl" if language == "ar" else "ltr",
            "title": self._text(content.get("title"), language),
            "sections": sections,
            "revision": self.revision,
        }


class PageViewRegistry:
    """One open view per page id, sharing a repository and notifier."""

    def __init__(self, repository: ContentRepository, notifier: Optional[ContentNotifier] = None):
        self.repository = repository
        self.notifier = notifier or repository.notifier
        self._views: Dict[str, PageView] = {}

    def get(self, page_id: str) -> PageView:
        view = self._views.get(page_id)
        if view is None:
            view = PageView(page_id, self.repository, self.notifier)
            self._views[page_id] = view
        return view

    def __contains__(self, page_id):
        return page_id in self._views

    def close(self, page_id: str) -> None:
        view = self._views.pop(page_id, None)
        if view is not None:
            view.close()

    def close_all(self) -> None:
        for page_id in list(self._views):
            self.close(page_id)
