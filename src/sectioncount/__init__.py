"""Parse bracketed section documents and count their characters."""

from .parser import Document, LexError, ParseError, Section, parse

__version__ = "0.1.0"

__all__ = ["parse", "Document", "Section", "LexError", "ParseError", "__version__"]
