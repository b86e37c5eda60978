"""Section document parsing."""

from .assembler import Assembler, ParseError
from .document import Document, Section
from .lexer import LexError, Token, TokenKind, tokenize


def parse(text: str) -> Document:
    """
    Parse a section document into a Document.

    Tokenizing and assembling run in sequence over the whole input; the
    first error from either stage aborts the call. Lexer failures are
    re-raised as ParseError with the same message.
    """
    try:
        tokens = tokenize(text)
    except LexError as e:
        raise ParseError(e.msg) from e
    return Assembler(tokens).assemble()


__all__ = [
    "parse",
    "Assembler",
    "Document",
    "Section",
    "LexError",
    "ParseError",
    "Token",
    "TokenKind",
    "tokenize",
]
