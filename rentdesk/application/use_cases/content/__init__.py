"""Use cases for static content."""

from .manage_content import default_title, get_content, list_content_types, update_content

__all__ = ["default_title", "get_content", "list_content_types", "update_content"]
