# fondation_cms/repository/content.py
from __future__ import annotations

import copy
import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from fondation_cms.domain.records import (
    GlobalContent,
    MediaItem,
    NewsItem,
    PageContent,
    RecentEdit,
    Resource,
    WebsiteStructure,
)
from fondation_cms.notifications import ContentNotifier
from fondation_cms.storage import Storage

logger = logging.getLogger(__name__)

PAGE_PREFIX = "page_"
EDITOR_PREFIX = "editor_"

NEWS_KEY = "news"
RESOURCES_KEY = "resources"
GLOBAL_CONTENT_KEY = "global_content"
MEDIA_LIBRARY_KEY = "media_library"
WEBSITE_STRUCTURE_KEY = "websiteStructure"
RECENT_EDITS_KEY = "recentEdits"
DB_INITIALIZED_KEY = "dbInitialized"

DEFAULT_SECTION_TITLE = {"fr": "Section", "ar": "قسم"}
RECENT_EDITS_LIMIT = 10


def page_key(page_id: str) -> str:
    return f"{PAGE_PREFIX}{page_id}"


def editor_key(key_or_page_id: str) -> str:
    return f"{EDITOR_PREFIX}{key_or_page_id}"


def _replace_by_id(items: List[Dict[str, Any]], item: Dict[str, Any]) -> bool:
    for index, existing in enumerate(items):
        if existing.get("id") == item.get("id"):
            items[index] = item
            return True
    return False


class ContentRepository:
    """
    Typed accessors for every record kept in the content store.

    Pages live twice: the live copy read by public views (``page_<id>``)
    and the editor copy used as the admin workspace (``editor_<id>``).
    """

    def __init__(
        self,
        storage: Storage,
        notifier: Optional[ContentNotifier] = None,
        recent_edits_limit: int = RECENT_EDITS_LIMIT,
    ):
        self.storage = storage
        self.notifier = notifier or ContentNotifier()
        self.recent_edits_limit = recent_edits_limit

    # ------------------------
    # Pages
    # ------------------------

    def get_page_content(self, page_id: str) -> Optional[PageContent]:
        return self.storage.get_item(page_key(page_id)) or None

    def get_editor_page_content(self, page_id: str) -> Optional[PageContent]:
        return self.storage.get_item(editor_key(page_id)) or None

    def set_page_content(self, content: PageContent) -> bool:
        """
        Save a page to both the editor and live copies and notify views.

        Sections without a title get the generic bilingual one.
        """
        if not content or not content.get("id"):
            logger.error("Invalid page content: missing id")
            return False

        try:
            content = copy.deepcopy(content)
            sections = content.get("sections") or []
            for section in sections:
                if not section.get("title"):
                    section["title"] = dict(DEFAULT_SECTION_TITLE)
            content["sections"] = sections

            if not self.write_page_copies(content):
                return False

            self.notifier.publish_page_change(content["id"], content)
            logger.info("Content updated for page %s", content["id"])
            return True
        except Exception:
            logger.exception("Error saving page content")
            return False

    def write_page_copies(self, content: PageContent) -> bool:
        """Write both copies as-is: no title backfill, no notification."""
        page_id = content["id"]
        saved_editor = self.storage.set_item(editor_key(page_id), content)
        saved_live = self.storage.set_item(page_key(page_id), content)
        return saved_editor and saved_live

    def save_page_draft(self, content: PageContent) -> bool:
        """Stage a page in the editor copy only; the live copy is untouched."""
        if not content or not content.get("id"):
            logger.error("Invalid draft content: missing id")
            return False
        return self.storage.set_item(editor_key(content["id"]), content)

    def get_all_page_ids(self) -> List[str]:
        return [
            key[len(PAGE_PREFIX):]
            for key in self.storage.keys()
            if key.startswith(PAGE_PREFIX)
        ]

    def get_all_pages(self) -> List[PageContent]:
        pages = (self.get_page_content(page_id) for page_id in self.get_all_page_ids())
        return [page for page in pages if page is not None]

    # ------------------------
    # News
    # ------------------------

    def get_news(self) -> List[NewsItem]:
        return self.storage.get_item(NEWS_KEY) or []

    def set_news(self, news: List[NewsItem]) -> bool:
        return self.storage.set_item(NEWS_KEY, news)

    def get_news_item(self, item_id: int) -> Optional[NewsItem]:
        return next((item for item in self.get_news() if item.get("id") == item_id), None)

    def update_news_item(self, item: NewsItem) -> bool:
        news = self.get_news()
        if not _replace_by_id(news, item):
            return False
        return self.set_news(news)

    def delete_news_item(self, item_id: int) -> bool:
        return self.set_news([item for item in self.get_news() if item.get("id") != item_id])

    # ------------------------
    # Resources
    # ------------------------

    def get_resources(self) -> List[Resource]:
        return self.storage.get_item(RESOURCES_KEY) or []

    def set_resources(self, resources: List[Resource]) -> bool:
        return self.storage.set_item(RESOURCES_KEY, resources)

    def get_resource(self, item_id: int) -> Optional[Resource]:
        return next((item for item in self.get_resources() if item.get("id") == item_id), None)

    def update_resource(self, item: Resource) -> bool:
        resources = self.get_resources()
        if not _replace_by_id(resources, item):
            return False
        return self.set_resources(resources)

    def delete_resource(self, item_id: int) -> bool:
        return self.set_resources(
            [item for item in self.get_resources() if item.get("id") != item_id]
        )

    # ------------------------
    # Global content
    # ------------------------

    def get_global_content(self) -> List[GlobalContent]:
        return self.storage.get_item(GLOBAL_CONTENT_KEY) or []

    def set_global_content(self, content: List[GlobalContent]) -> bool:
        return self.storage.set_item(GLOBAL_CONTENT_KEY, content)

    def get_global_content_item(self, category: str, key: str) -> Optional[GlobalContent]:
        return next(
            (
                item for item in self.get_global_content()
                if item.get("category") == category and item.get("key") == key
            ),
            None,
        )

    def update_global_content_item(self, item: GlobalContent) -> bool:
        """Replace the entry with the same id, or append it."""
        content = self.get_global_content()
        if not _replace_by_id(content, item):
            content.append(item)
        return self.set_global_content(content)

    def delete_global_content_item(self, item_id: str) -> bool:
        return self.set_global_content(
            [item for item in self.get_global_content() if item.get("id") != item_id]
        )

    def get_category_content(self, category: str) -> List[GlobalContent]:
        return [item for item in self.get_global_content() if item.get("category") == category]

    # ------------------------
    # Media library
    # ------------------------

    def get_media_library(self) -> List[MediaItem]:
        return self.storage.get_item(MEDIA_LIBRARY_KEY) or []

    def set_media_library(self, media: List[MediaItem]) -> bool:
        return self.storage.set_item(MEDIA_LIBRARY_KEY, media)

    def get_media_item(self, item_id: str) -> Optional[MediaItem]:
        return next((item for item in self.get_media_library() if item.get("id") == item_id), None)

    def update_media_item(self, item: MediaItem) -> bool:
        media = self.get_media_library()
        if not _replace_by_id(media, item):
            media.append(item)
        return self.set_media_library(media)

    def delete_media_item(self, item_id: str) -> bool:
        return self.set_media_library(
            [item for item in self.get_media_library() if item.get("id") != item_id]
        )

    # ------------------------
    # Website structure
    # ------------------------

    def get_website_structure(self) -> Optional[WebsiteStructure]:
        return self.storage.get_item(WEBSITE_STRUCTURE_KEY)

    def set_website_structure(self, structure: WebsiteStructure) -> bool:
        return self.storage.set_item(WEBSITE_STRUCTURE_KEY, structure)

    # ------------------------
    # Editor workspace
    # ------------------------

    def sync_content_to_editor(self) -> bool:
        """Copy every live record into its editor counterpart."""
        try:
            for page_id in self.get_all_page_ids():
                page = self.get_page_content(page_id)
                if page:
                    self.storage.set_item(editor_key(page_id), page)

            self.storage.set_item(editor_key(NEWS_KEY), self.get_news())
            self.storage.set_item(editor_key(RESOURCES_KEY), self.get_resources())
            self.storage.set_item(editor_key(GLOBAL_CONTENT_KEY), self.get_global_content())

            structure = self.get_website_structure()
            if structure:
                self.storage.set_item(editor_key(WEBSITE_STRUCTURE_KEY), structure)

            self.storage.set_item(editor_key(MEDIA_LIBRARY_KEY), self.get_media_library())
            return True
        except Exception:
            logger.exception("Error syncing content to editor")
            return False

    def apply_editor_changes(self, page_id: str) -> bool:
        """Promote the editor copy of a page over its live copy."""
        try:
            content = self.get_editor_page_content(page_id)
            if not content:
                return False

            if not self.storage.set_item(page_key(page_id), content):
                return False

            self.notifier.publish_page_change(page_id, content)
            return True
        except Exception:
            logger.exception("Error applying editor changes for %s", page_id)
            return False

    # ------------------------
    # Recent edits
    # ------------------------

    def get_recent_edits(self) -> List[RecentEdit]:
        edits = self.storage.get_item(RECENT_EDITS_KEY)
        return edits if isinstance(edits, list) else []

    def record_recent_edit(
        self,
        page_title: str,
        user: str = "admin",
        now: Optional[datetime] = None,
    ) -> bool:
        """
        Log an edit at the head of the recent-edits list.

        Older entries for the same page are dropped and the list is capped
        at `recent_edits_limit`.
        """
        now = now or datetime.now(timezone.utc)
        entry: RecentEdit = {
            "id": int(now.timestamp() * 1000),
            "page": page_title,
            "date": now.date().isoformat(),
            "user": user,
        }
        others = [edit for edit in self.get_recent_edits() if edit.get("page") != page_title]
        edits = [entry, *others][: self.recent_edits_limit]
        return self.storage.set_item(RECENT_EDITS_KEY, edits)

    # ------------------------
    # Initialization flag
    # ------------------------

    def is_initialized(self) -> bool:
        return bool(self.storage.get_item(DB_INITIALIZED_KEY))

    def mark_initialized(self) -> bool:
        # Stored as the JSON literal `true`, i.e. the string "true".
        return self.storage.set_item(DB_INITIALIZED_KEY, True)
