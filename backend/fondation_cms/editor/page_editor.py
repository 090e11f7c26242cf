# fondation_cms/editor/page_editor.py
import copy
import logging
from datetime import datetime, timedelta, timezone
from typing import Callable, Dict, Optional

from fondation_cms.domain.invariants.page_content import collect_page_errors
from fondation_cms.domain.records import LANGUAGES, PageContent, PageSection
from fondation_cms.repository.content import ContentRepository
from fondation_cms.utils.media import read_as_data_uri
from fondation_cms.utils.order import can_move, swap_adjacent

logger = logging.getLogger(__name__)

NEW_SECTION_TITLE = {"fr": "Nouvelle section", "ar": "قسم جديد"}

DELETE_PROMPT = {
    "fr": "Êtes-vous sûr de vouloir supprimer cette section ?",
    "ar": "هل أنت متأكد أنك تريد حذف هذا القسم؟",
}

SUCCESS_MESSAGE = {
    "fr": "Contenu enregistré avec succès",
    "ar": "تم حفظ المحتوى بنجاح",
}

SUCCESS_MESSAGE_SECONDS = 3


def _utc_now():
    return datetime.now(timezone.utc)


def _check_language(lang):
    if lang not in LANGUAGES:
        raise ValueError(f"Unsupported language: {lang}")


class PageContentEditor:
    """
    Edit session over one page.

    The editor only mutates its own copy of the content. Persistence is
    delegated to `on_save`, which receives a copy of the content and
    returns whether it was stored.
    """

    def __init__(
        self,
        page_id: str,
        initial_content: Optional[PageContent],
        on_save: Callable[[PageContent], bool],
        language: str = "fr",
        recent_edits: Optional[ContentRepository] = None,
        clock: Optional[Callable[[], datetime]] = None,
        success_message_seconds: int = SUCCESS_MESSAGE_SECONDS,
    ):
        _check_language(language)

        self.page_id = page_id
        self.on_save = on_save
        self.language = language
        self.recent_edits = recent_edits
        self.clock = clock or _utc_now
        self.success_message_seconds = success_message_seconds

        if initial_content:
            self.content: PageContent = copy.deepcopy(initial_content)
            self.content.setdefault("title", {"fr": "", "ar": ""})
            self.content["sections"] = list(self.content.get("sections") or [])
        else:
            self.content = {"id": page_id, "title": {"fr": "", "ar": ""}, "sections": []}

        self.errors: Dict[str, str] = {}
        self.is_saving = False
        self._success_message = ""
        self._success_until: Optional[datetime] = None

    # ------------------------
    # Field edits
    # ------------------------

    @property
    def sections(self):
        return self.content["sections"]

    def _clear_error(self, key):
        self.errors.pop(key, None)

    def _section(self, index) -> PageSection:
        if not 0 <= index < len(self.sections):
            raise IndexError(f"No section at index {index}")
        return self.sections[index]

    def set_title(self, lang: str, value: str) -> None:
        _check_language(lang)
        self.content["title"] = {**self.content.get("title", {}), lang: value}
        self._clear_error(f"title_{lang}")

    def set_section_title(self, index: int, lang: str, value: str) -> None:
        _check_language(lang)
        section = self._section(index)
        section["title"] = {**(section.get("title") or {"fr": "", "ar": ""}), lang: value}
        self._clear_error(f"section_{index}_title_{lang}")

    def set_section_content(self, index: int, lang: str, value: str) -> None:
        _check_language(lang)
        section = self._section(index)
        section["content"] = {**(section.get("content") or {}), lang: value}
        self._clear_error(f"section_{index}_content_{lang}")

    def set_section_image(self, index: int, image: Optional[str]) -> None:
        section = self._section(index)
        if image:
            section["image"] = image
        else:
            section.pop("image", None)

    def load_section_image(self, index: int, file) -> str:
        """Read an uploaded image into the section as a data URI."""
        self._section(index)
        data_uri = read_as_data_uri(file)
        self.set_section_image(index, data_uri)
        return data_uri

    # ------------------------
    # Section list
    # ------------------------

    def add_section(self) -> PageSection:
        millis = int(self.clock().timestamp() * 1000)
        taken = {section.get("id") for section in self.sections}
        while f"section_{millis}" in taken:
            millis += 1

        section: PageSection = {
            "id": f"section_{millis}",
            "title": dict(NEW_SECTION_TITLE),
            "content": {"fr": "", "ar": ""},
        }
        self.sections.append(section)
        return section

    def delete_prompt(self) -> str:
        return DELETE_PROMPT[self.language]

    def delete_section(self, index: int, confirm: Callable[[str], bool]) -> bool:
        self._section(index)
        if not confirm(self.delete_prompt()):
            return False

        del self.sections[index]
        return True

    def can_move(self, index: int, direction: str) -> bool:
        return can_move(self.sections, index, direction)

    def move_section(self, index: int, direction: str) -> bool:
        return swap_adjacent(self.sections, index, direction)

    # ------------------------
    # Validation and save
    # ------------------------

    def validate(self) -> bool:
        self.errors = collect_page_errors(self.content, self.language)
        return not self.errors

    @property
    def success_message(self) -> str:
        if self._success_until is None or self.clock() >= self._success_until:
            return ""
        return self._success_message

    def save(self, user: str = "admin") -> bool:
        if not self.content or not self.validate():
            return False

        self.is_saving = True
        try:
            saved = bool(self.on_save(copy.deepcopy(self.content)))
        except Exception:
            logger.exception("Error saving content for page %s", self.page_id)
            return False
        finally:
            self.is_saving = False

        if not saved:
            logger.error("Failed to save content for page %s", self.page_id)
            return False

        now = self.clock()
        self._success_message = SUCCESS_MESSAGE[self.language]
        self._success_until = now + timedelta(seconds=self.success_message_seconds)

        if self.recent_edits is not None:
            title = self.content["title"].get(self.language) or self.page_id
            self.recent_edits.record_recent_edit(title, user=user, now=now)

        logger.info("Content updated for page %s", self.page_id)
        return True
