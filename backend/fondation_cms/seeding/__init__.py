from .seeder import (
    bootstrap_content,
    create_default_page_content,
    initialize_database,
    update_about_page_with_all_sections,
    update_home_page_with_all_sections,
)

__all__ = [
    "bootstrap_content",
    "create_default_page_content",
    "initialize_database",
    "update_about_page_with_all_sections",
    "update_home_page_with_all_sections",
]
