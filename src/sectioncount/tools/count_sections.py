"""Tool to parse a document and count the characters of every section."""

import logging
from typing import Optional

from ..parser import ParseError, parse
from ..security import UnsafePathError
from .source import load_text

logger = logging.getLogger(__name__)


def count_sections(
    text: Optional[str] = None,
    path: Optional[str] = None,
) -> dict:
    """
    Parse a document and report each section's character count.

    Args:
        text: Document text
        path: Path of a document file (used when text is not given)

    Returns:
        Dict with sections in title order, or an error
    """
    try:
        source = load_text(text, path)
        document = parse(source)
    except (ValueError, UnsafePathError, OSError, ParseError) as e:
        logger.warning("count_sections failed: %s", e)
        return {"error": str(e)}

    sections = [
        {
            "title": section.title,
            "count": section.char_count,
            "content": section.display_content,
        }
        for section in document.sections()
    ]

    return {
        "section_count": len(sections),
        "total_count": sum(s["count"] for s in sections),
        "sections": sections,
    }
