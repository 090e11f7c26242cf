from .exact_content import get_exact_page_content
from .page_sections import add_section, delete_section, move_section, set_section_image
from .save_page import save_page, save_page_draft

__all__ = [
    "get_exact_page_content",
    "add_section",
    "delete_section",
    "move_section",
    "set_section_image",
    "save_page",
    "save_page_draft",
]
