# fondation_cms/application/cms/exact_content.py
import logging

from fondation_cms.domain.records import PageContent
from fondation_cms.repository.content import ContentRepository
from fondation_cms.seeding import (
    create_default_page_content,
    update_about_page_with_all_sections,
    update_home_page_with_all_sections,
)

logger = logging.getLogger(__name__)

MIGRATIONS = {
    "home": update_home_page_with_all_sections,
    "about": update_about_page_with_all_sections,
}


def _with_sections(content) -> PageContent:
    if not isinstance(content.get("sections"), list):
        content["sections"] = []
    return content


def get_exact_page_content(repository: ContentRepository, page_id: str) -> PageContent:
    """
    Resolve the content the admin editor should start from.

    Resolution order:
    - editor copy
    - live copy, after the home/about migration, cached as the editor copy
    - seeder default, cached as the editor copy
    - an empty shell for unknown slugs, written to both copies

    Never returns None and the result always carries a `sections` list.
    """
    draft = repository.get_editor_page_content(page_id)
    if isinstance(draft, dict):
        return _with_sections(draft)

    # A non-object editor copy belongs to the news or resources list.
    cache = repository.save_page_draft if draft is None else (lambda content: False)
    migrate = MIGRATIONS.get(page_id)

    live = repository.get_page_content(page_id)
    if isinstance(live, dict):
        if migrate:
            migrate(repository)
            live = repository.get_page_content(page_id) or live
        live = _with_sections(live)
        cache(live)
        return live

    if migrate:
        migrate(repository)
        migrated = repository.get_page_content(page_id)
        if isinstance(migrated, dict):
            migrated = _with_sections(migrated)
            cache(migrated)
            return migrated

    default = create_default_page_content(page_id)
    if default:
        cache(default)
        return default

    logger.info("No content known for page '%s', creating an empty one", page_id)
    shell: PageContent = {
        "id": page_id,
        "title": {"fr": page_id.capitalize(), "ar": page_id},
        "sections": [],
    }
    repository.write_page_copies(shell)
    return shell
