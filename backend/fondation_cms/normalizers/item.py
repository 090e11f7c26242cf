from fondation_cms.domain.records import LANGUAGES


def _is_translated(value):
    return isinstance(value, dict) and any(lang in value for lang in LANGUAGES)


def localize_item(item, language=None):
    """
    Flatten the translated fields of a record to one language.

    Without a language the record is returned as stored. Nested
    id/label maps (publication category and type) keep their `id`.
    """
    if language is None:
        return item

    localized = {}
    for field, value in item.items():
        if _is_translated(value):
            text = value.get(language, "")
            localized[field] = {"id": value["id"], "label": text} if "id" in value else text
        else:
            localized[field] = value
    return localized
