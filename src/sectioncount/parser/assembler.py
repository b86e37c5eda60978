"""Assemble a token stream into a Document."""

import logging
from typing import Optional

from .document import Document
from .lexer import Token, TokenKind

logger = logging.getLogger(__name__)


class ParseError(Exception):
    """Raised when a document cannot be built from its input."""

    def __init__(self, msg: str):
        super().__init__(msg)
        self.msg = msg


class Assembler:
    """
    Recursive descent over ``["title"] "content" "content" ...`` sections.

    Holds an explicit cursor into the token list. ``peek`` looks at the
    current token, ``advance`` returns it and moves on; both raise when
    the cursor has run past the last token.
    """

    def __init__(self, tokens: list[Token]):
        self.tokens = tokens
        self.index = 0

    def assemble(self) -> Document:
        token = self.peek()
        if token.kind is not TokenKind.LEFT_BRACKET:
            raise ParseError(f"error: a token must start [ {token!r}")
        return self._assemble_sections()

    def _assemble_sections(self) -> Document:
        document = Document()

        while True:
            title = self._read_header()
            content, at_end = self._read_content()
            logger.debug("Section %r: %d chars", title, len(content))
            document.insert(title, content)
            if at_end:
                return document

    def _read_header(self) -> str:
        """Consume ``[ String ]`` and return the title."""
        token1 = self.advance()
        token2 = self.advance()
        token3 = self.advance()

        if token1.kind is not TokenKind.LEFT_BRACKET:
            raise ParseError(f"error: a token must start [ {token1!r}")
        if token2.kind is not TokenKind.STRING:
            raise ParseError(f"error: String is required next to [ {token2!r}")
        if token3.kind is not TokenKind.RIGHT_BRACKET:
            raise ParseError(f"error: ] is required next to header {token3!r}")
        return token2.text

    def _read_content(self) -> tuple[str, bool]:
        """
        Concatenate the string run after a header.

        Returns the content and whether the end of input was reached. The
        run stops just before the next ``[``, which stays unconsumed.
        """
        parts: list[str] = []

        while True:
            token = self.advance()
            if token.kind is not TokenKind.STRING:
                raise ParseError(f"error: String is required next to header {token!r}")

            lookahead = self.peek()
            parts.append(token.text)

            if lookahead.kind is TokenKind.STRING:
                continue
            if lookahead.kind is TokenKind.LEFT_BRACKET:
                return ''.join(parts), False
            if lookahead.kind is TokenKind.EOF:
                return ''.join(parts), True

            raise ParseError(f"error: String is required next to header {lookahead!r}")

    def _get(self, index: int) -> Optional[Token]:
        if index < len(self.tokens):
            return self.tokens[index]
        return None

    def peek(self) -> Token:
        token = self._get(self.index)
        if token is None:
            raise ParseError("error: a token isn't peekable")
        return token

    def advance(self) -> Token:
        token = self._get(self.index)
        if token is None:
            raise ParseError("error: a token isn't peekable")
        self.index += 1
        return token
