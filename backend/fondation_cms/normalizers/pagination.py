# fondation_cms/normalizers/pagination.py
from typing import Any, Callable, Dict, List, Optional


def normalize_pagination(
    items: List[Any],
    normalize_fn: Callable[[Any], Dict[str, Any]],
    *,
    page: Optional[int] = None,
    per_page: Optional[int] = None,
) -> Dict[str, Any]:
    """
    Normalize a listing response.

    Without `page`/`per_page` the whole list is returned. With them, the
    list is sliced offset-style and a `pagination` block is added.
    """
    total = len(items)

    if page is None or per_page is None:
        return {
            "items": [normalize_fn(item) for item in items],
            "total": total,
        }

    start = (page - 1) * per_page
    window = items[start:start + per_page]

    return {
        "items": [normalize_fn(item) for item in window],
        "total": total,
        "pagination": {
            "page": page,
            "per_page": per_page,
            "total": total,
            "total_pages": (total + per_page - 1) // per_page,
        },
    }
