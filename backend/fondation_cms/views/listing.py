from typing import Any, Dict, Iterable, List, Optional, Sequence

ALL_CATEGORIES = "all"


def _localized(value, language):
    if isinstance(value, dict):
        return value.get(language) or ""
    return value if isinstance(value, str) else ""


def filter_items(
    items: Iterable[Dict[str, Any]],
    language: str,
    query: str = "",
    category: Optional[str] = None,
    category_field: str = "category",
    text_fields: Sequence[str] = ("title", "excerpt"),
) -> List[Dict[str, Any]]:
    """
    Search filter used by the news and resources listings.

    `query` matches case-insensitively anywhere in `text_fields` for the
    chosen language. `category` (compared case-insensitively against
    `category_field`) narrows further unless it is empty or ``"all"``.
    """
    needle = (query or "").strip().lower()
    wanted = (category or "").strip().lower()
    if wanted == ALL_CATEGORIES:
        wanted = ""

    results = []
    for item in items:
        if needle and not any(
            needle in _localized(item.get(field), language).lower()
            for field in text_fields
        ):
            continue

        if wanted and _localized(item.get(category_field), language).lower() != wanted:
            continue

        results.append(item)

    return results
