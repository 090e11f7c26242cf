from .listing import filter_items
from .page_view import PageView, PageViewRegistry

__all__ = ["PageView", "PageViewRegistry", "filter_items"]
