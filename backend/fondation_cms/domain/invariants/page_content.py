from typing import Dict

from fondation_cms.domain.records import LANGUAGES

from .exceptions import ContentValidationError, InvariantViolation

MESSAGES = {
    "title_fr": {
        "fr": "Le titre en français est requis",
        "ar": "العنوان بالفرنسية مطلوب",
    },
    "title_ar": {
        "fr": "Le titre en arabe est requis",
        "ar": "العنوان بالعربية مطلوب",
    },
    "content_fr": {
        "fr": "Le contenu en français est requis",
        "ar": "المحتوى بالفرنسية مطلوب",
    },
    "content_ar": {
        "fr": "Le contenu en arabe est requis",
        "ar": "المحتوى بالعربية مطلوب",
    },
}


def _message(name, language):
    return MESSAGES[name].get(language, MESSAGES[name]["fr"])


def _blank(text, lang):
    if not isinstance(text, dict):
        return True
    value = text.get(lang)
    return not isinstance(value, str) or not value.strip()


def collect_page_errors(content, language="fr") -> Dict[str, str]:
    """
    Field errors for an edited page, keyed the way the editor form keys
    its inputs. Section titles are optional.
    """
    errors: Dict[str, str] = {}

    for lang in LANGUAGES:
        if _blank(content.get("title"), lang):
            errors[f"title_{lang}"] = _message(f"title_{lang}", language)

    for index, section in enumerate(content.get("sections") or []):
        for lang in LANGUAGES:
            if _blank(section.get("content"), lang):
                errors[f"section_{index}_content_{lang}"] = _message(f"content_{lang}", language)

    return errors


def assert_page_identity(content, page_id=None):
    if not isinstance(content, dict):
        raise InvariantViolation("Page content must be an object.")

    if not content.get("id"):
        raise InvariantViolation("Page content must have an id.")

    if page_id is not None and content["id"] != page_id:
        raise InvariantViolation(
            f"Page id mismatch: '{content['id']}' does not match '{page_id}'"
        )

    sections = content.get("sections", [])
    if not isinstance(sections, list):
        raise InvariantViolation("Page sections must be a list.")

    for index, section in enumerate(sections):
        if not isinstance(section, dict):
            raise InvariantViolation(f"Section {index} must be an object.")


def assert_page_content(content, language="fr"):
    assert_page_identity(content)

    errors = collect_page_errors(content, language)
    if errors:
        raise ContentValidationError(errors)
