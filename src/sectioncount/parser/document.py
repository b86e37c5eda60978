"""Document model: a title -> content mapping ordered by title."""

import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass

logger = logging.getLogger(__name__)


def strip_newlines(content: str) -> str:
    """Remove literal newline characters. Escaped ``\\n`` sequences are kept."""
    return content.replace('\n', '')


def count_chars(content: str) -> int:
    """Count Unicode scalar values after stripping newlines."""
    return len(strip_newlines(content))


@dataclass(frozen=True)
class Section:
    """A section read back from a document."""
    title: str
    content: str

    @property
    def display_content(self) -> str:
        """Content with literal newline characters removed."""
        return strip_newlines(self.content)

    @property
    def char_count(self) -> int:
        """Number of Unicode scalar values in ``display_content``."""
        return count_chars(self.content)


class Document(Mapping):
    """
    Read-only mapping of section titles to content.

    Iteration is always in lexicographic (code point) order of the title,
    whatever order the sections were inserted in.
    """

    def __init__(self, items=None):
        self._entries: dict[str, str] = {}
        if items:
            source = items.items() if isinstance(items, Mapping) else items
            for title, content in source:
                self.insert(title, content)

    def insert(self, title: str, content: str) -> None:
        """Store a section. An existing title is replaced, never merged."""
        if title in self._entries:
            logger.debug("Section %r redeclared; replacing previous content", title)
        self._entries[title] = content

    def __getitem__(self, title: str) -> str:
        return self._entries[title]

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._entries))

    def __len__(self) -> int:
        return len(self._entries)

    def sections(self) -> Iterator[Section]:
        """Yield sections in title order."""
        for title in self:
            yield Section(title=title, content=self._entries[title])

    def to_dict(self) -> dict[str, str]:
        return {title: self._entries[title] for title in self}

    def __repr__(self) -> str:
        return f"Document({self.to_dict()!r})"
