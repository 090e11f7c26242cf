from .content import ContentRepository, editor_key, page_key

__all__ = ["ContentRepository", "editor_key", "page_key"]
