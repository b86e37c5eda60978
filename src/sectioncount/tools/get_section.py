"""Tool to get a single section's content."""

from typing import Optional

from ..parser import ParseError, parse
from ..report import count_chars
from ..security import UnsafePathError
from .source import load_text


def get_section(
    title: str,
    text: Optional[str] = None,
    path: Optional[str] = None,
) -> dict:
    """
    Get the content of one section by title.

    Args:
        title: Section title, matched exactly
        text: Document text
        path: Path of a document file (used when text is not given)

    Returns:
        Dict with section content and count, or an error
    """
    try:
        document = parse(load_text(text, path))
    except (ValueError, UnsafePathError, OSError, ParseError) as e:
        return {"error": str(e)}

    if title not in document:
        return {
            "error": f"Section not found: {title}",
            "titles": list(document),
        }

    content = document[title]
    return {
        "title": title,
        "count": count_chars(content),
        "content": content,
    }
