# fondation_cms/application/cms/save_page.py
from typing import Any, Dict, Tuple

from fondation_cms.domain.invariants.exceptions import ContentValidationError
from fondation_cms.domain.invariants.page_content import assert_page_identity
from fondation_cms.editor import PageContentEditor
from fondation_cms.repository.content import ContentRepository


def save_page(
    *,
    repository: ContentRepository,
    page_id: str,
    data: Dict[str, Any],
    actor: str,
    language: str = "fr",
    success_message_seconds: int = 3,
) -> Tuple[bool, str]:
    """
    Save an edited page through the editor.

    Responsibilities:
    - identity check (body id must match the URL)
    - editor validation, raised as ContentValidationError
    - persistence through set_page_content (both copies + notification)
    - recent-edit logging for `actor`

    Returns (saved, success message).
    """
    data = {**data, "id": data.get("id") or page_id}
    assert_page_identity(data, page_id)

    editor = PageContentEditor(
        page_id,
        data,
        on_save=repository.set_page_content,
        language=language,
        recent_edits=repository,
        success_message_seconds=success_message_seconds,
    )

    if not editor.validate():
        raise ContentValidationError(editor.errors)

    saved = editor.save(user=actor)
    return saved, editor.success_message


def save_page_draft(
    *,
    repository: ContentRepository,
    page_id: str,
    data: Dict[str, Any],
) -> bool:
    """Stage a page in the editor copy without touching the live copy."""
    data = {**data, "id": data.get("id") or page_id}
    assert_page_identity(data, page_id)
    data.setdefault("sections", [])
    return repository.save_page_draft(data)
