# fondation_cms/application/cms/page_sections.py
"""
Section-level edits on a page draft.

Each operation opens an editor over the exact editor content, applies
one change and stages the result with `save_page_draft`. The live copy
only changes when the draft is applied.
"""
from typing import Optional

from werkzeug.exceptions import InternalServerError, NotFound

from fondation_cms.domain.invariants.exceptions import InvariantViolation
from fondation_cms.domain.records import PageSection
from fondation_cms.editor import PageContentEditor
from fondation_cms.repository.content import ContentRepository

from .exact_content import get_exact_page_content


def _open_editor(repository, page_id, language):
    content = get_exact_page_content(repository, page_id)
    return PageContentEditor(
        page_id,
        content,
        on_save=repository.set_page_content,
        language=language,
        recent_edits=repository,
    )


def _section_index(editor, section_id) -> int:
    for index, section in enumerate(editor.sections):
        if section.get("id") == section_id:
            return index
    raise NotFound(f"Section '{section_id}' not found on page '{editor.page_id}'")


def _stage(repository, editor):
    if not repository.save_page_draft(editor.content):
        raise InternalServerError(f"Could not stage draft for page '{editor.page_id}'")


def add_section(
    *,
    repository: ContentRepository,
    page_id: str,
    language: str = "fr",
) -> PageSection:
    editor = _open_editor(repository, page_id, language)
    section = editor.add_section()
    _stage(repository, editor)
    return section


def delete_section(
    *,
    repository: ContentRepository,
    page_id: str,
    section_id: str,
    confirmed: bool,
    language: str = "fr",
) -> Optional[str]:
    """
    Delete a section once the caller confirmed it.

    Returns None when deleted, or the confirmation prompt that still
    needs an answer.
    """
    editor = _open_editor(repository, page_id, language)
    index = _section_index(editor, section_id)

    if not editor.delete_section(index, confirm=lambda prompt: confirmed):
        return editor.delete_prompt()

    _stage(repository, editor)
    return None


def move_section(
    *,
    repository: ContentRepository,
    page_id: str,
    section_id: str,
    direction: str,
    language: str = "fr",
) -> PageContentEditor:
    editor = _open_editor(repository, page_id, language)
    index = _section_index(editor, section_id)

    if direction not in ("up", "down"):
        raise InvariantViolation(f"Unknown move direction: {direction}")

    if not editor.can_move(index, direction):
        raise InvariantViolation(
            f"Section '{section_id}' cannot move {direction} from position {index}"
        )

    editor.move_section(index, direction)
    _stage(repository, editor)
    return editor


def set_section_image(
    *,
    repository: ContentRepository,
    page_id: str,
    section_id: str,
    file,
    language: str = "fr",
) -> str:
    editor = _open_editor(repository, page_id, language)
    index = _section_index(editor, section_id)

    try:
        data_uri = editor.load_section_image(index, file)
    except ValueError as exc:
        raise InvariantViolation(str(exc)) from exc

    _stage(repository, editor)
    return data_uri
