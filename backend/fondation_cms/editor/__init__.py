from .page_editor import PageContentEditor

__all__ = ["PageContentEditor"]
