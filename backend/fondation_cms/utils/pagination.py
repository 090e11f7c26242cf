# fondation_cms/utils/pagination.py
from __future__ import annotations

from typing import Optional, Tuple

from werkzeug.exceptions import BadRequest

MAX_PER_PAGE = 100


def parse_page_args(args) -> Tuple[Optional[int], Optional[int]]:
    """
    Read `page` / `per_page` from query args.

    Both absent means "no pagination". Raises BadRequest for values that
    are not positive integers, or when only one of the two is given.
    """
    raw_page = args.get("page")
    raw_per_page = args.get("per_page")

    if raw_page is None and raw_per_page is None:
        return None, None

    if raw_page is None or raw_per_page is None:
        raise BadRequest("page and per_page must be provided together")

    try:
        page, per_page = int(raw_page), int(raw_per_page)
    except ValueError as exc:
        raise BadRequest("page and per_page must be integers") from exc

    if page < 1 or not 1 <= per_page <= MAX_PER_PAGE:
        raise BadRequest(f"page must be >= 1 and per_page between 1 and {MAX_PER_PAGE}")

    return page, per_page
