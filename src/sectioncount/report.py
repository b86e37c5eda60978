"""Character count report for parsed documents."""

from collections.abc import Iterator

from .parser.document import Document, Section, count_chars, strip_newlines

__all__ = ["count_chars", "strip_newlines", "format_line", "report_lines", "report_dict"]


def format_line(section: Section) -> str:
    return f"{section.title}: {section.char_count} {section.display_content}"


def report_lines(document: Document) -> Iterator[str]:
    """Yield one report line per section, in title order."""
    for section in document.sections():
        yield format_line(section)


def report_dict(document: Document) -> dict[str, dict]:
    """JSON-ready view of the report, keyed by title."""
    return {
        section.title: {
            "count": section.char_count,
            "content": section.display_content,
        }
        for section in document.sections()
    }
