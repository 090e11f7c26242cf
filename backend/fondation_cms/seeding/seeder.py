# fondation_cms/seeding/seeder.py
import copy
import logging
from datetime import date
from typing import Optional

from fondation_cms.domain.records import PageContent
from fondation_cms.repository.content import (
    GLOBAL_CONTENT_KEY,
    MEDIA_LIBRARY_KEY,
    NEWS_KEY,
    RESOURCES_KEY,
    WEBSITE_STRUCTURE_KEY,
    ContentRepository,
    editor_key,
)

from . import defaults

logger = logging.getLogger(__name__)


def create_default_page_content(page_id: str) -> Optional[PageContent]:
    """
    Default content for a known page slug.

    Returns None for slugs the site does not know about.
    """
    return defaults.default_page(page_id)


def _append_missing_sections(page: PageContent, template: PageContent) -> int:
    existing_ids = {section.get("id") for section in page["sections"]}
    missing = [
        copy.deepcopy(section)
        for section in template["sections"]
        if section["id"] not in existing_ids
    ]
    page["sections"].extend(missing)
    return len(missing)


def update_home_page_with_all_sections(repository: ContentRepository) -> bool:
    """
    Append any required home section the stored page is missing.

    Sections already present are never touched. Returns True when the
    page is complete afterwards, whether or not anything was written.
    """
    try:
        template = create_default_page_content("home")
        current = repository.get_page_content("home")

        if not current:
            logger.info("Home page missing, creating it from the default template")
            return repository.set_page_content(template)

        current = copy.deepcopy(current)
        current["sections"] = list(current.get("sections") or [])

        added = _append_missing_sections(current, template)
        if not added:
            return True

        logger.info("Adding %d missing sections to the home page", added)
        return repository.set_page_content(current)
    except Exception:
        logger.exception("Error updating home page sections")
        return False


def update_about_page_with_all_sections(repository: ContentRepository) -> bool:
    """Append any required about section the stored page is missing."""
    try:
        current = repository.get_page_content("about")
        if not current:
            current = {
                "id": "about",
                "title": dict(defaults.DEFAULT_PAGE_TITLES["about"]),
                "sections": [],
            }

        current = copy.deepcopy(current)
        current["sections"] = list(current.get("sections") or [])

        template = {"id": "about", "sections": defaults.ABOUT_REQUIRED_SECTIONS}
        added = _append_missing_sections(current, template)
        if added:
            logger.info("Adding %d missing sections to the about page", added)

        return repository.write_page_copies(current)
    except Exception:
        logger.exception("Error updating about page sections")
        return False


def _seed_collection(repository: ContentRepository, key: str, value) -> bool:
    saved_live = repository.storage.set_item(key, value)
    saved_editor = repository.storage.set_item(editor_key(key), value)
    return saved_live and saved_editor


def initialize_database(repository: ContentRepository, today: Optional[date] = None) -> bool:
    """
    Seed the store with the full default site the first time it runs.

    Guarded by the ``dbInitialized`` flag. Returns True only when seeding
    actually happened.
    """
    if not repository.storage.available:
        return False

    if repository.is_initialized():
        return False

    try:
        upload_date = (today or date.today()).isoformat()

        # Pages first: editor_news and editor_resources are shared with the
        # list copies, which must win.
        for page_id in defaults.KNOWN_PAGE_IDS:
            page = create_default_page_content(page_id)
            if page and not repository.set_page_content(page):
                logger.error("Could not seed page '%s'", page_id)
                return False

        seeds = [
            (WEBSITE_STRUCTURE_KEY, defaults.WEBSITE_STRUCTURE),
            (GLOBAL_CONTENT_KEY, defaults.GLOBAL_CONTENT),
            (MEDIA_LIBRARY_KEY, defaults.media_library(upload_date)),
            (NEWS_KEY, defaults.NEWS_ITEMS),
            (RESOURCES_KEY, defaults.RESOURCES),
        ]
        for key, value in seeds:
            if not _seed_collection(repository, key, value):
                logger.error("Could not seed '%s'", key)
                return False

        repository.mark_initialized()
        logger.info("Content store initialized with default content")
        return True
    except Exception:
        logger.exception("Error initializing content store")
        return False


def bootstrap_content(repository: ContentRepository) -> None:
    """First-run seeding, then the home migration for already seeded stores."""
    initialize_database(repository)
    update_home_page_with_all_sections(repository)
