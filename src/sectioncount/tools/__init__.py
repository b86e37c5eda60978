"""Tool implementations shared by the MCP server."""

from .count_sections import count_sections
from .get_section import get_section

__all__ = ["count_sections", "get_section"]
