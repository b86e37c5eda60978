"""Tokenizer for bracketed section documents."""

import logging
import string
from dataclasses import dataclass
from enum import Enum
from typing import Optional

logger = logging.getLogger(__name__)

# RFC 8259 section 7 escapes that are kept verbatim (backslash included)
PASSTHROUGH_ESCAPES = set('"\\/bfnrt')

HEX_DIGITS = set(string.hexdigits)

# str.isspace() also accepts the ASCII separators FS/GS/RS/US, which are not
# Unicode White_Space
NON_WHITESPACE_SEPARATORS = set("\x1c\x1d\x1e\x1f")


def is_whitespace(c: str) -> bool:
    return c.isspace() and c not in NON_WHITESPACE_SEPARATORS


class LexError(Exception):
    """Raised when the character stream cannot be tokenized."""

    def __init__(self, msg: str):
        super().__init__(msg)
        self.msg = msg


class TokenKind(Enum):
    STRING = "string"
    LEFT_BRACKET = "["
    RIGHT_BRACKET = "]"
    NEWLINE = "newline"
    EOF = "eof"


@dataclass(frozen=True)
class Token:
    """A classified unit of input. Only STRING tokens carry text."""
    kind: TokenKind
    text: Optional[str] = None

    @classmethod
    def string(cls, text: str) -> "Token":
        return cls(TokenKind.STRING, text)

    def __repr__(self) -> str:
        if self.kind is TokenKind.STRING:
            return f"String({self.text!r})"
        return self.kind.name


LEFT_BRACKET = Token(TokenKind.LEFT_BRACKET)
RIGHT_BRACKET = Token(TokenKind.RIGHT_BRACKET)
NEWLINE = Token(TokenKind.NEWLINE)
EOF = Token(TokenKind.EOF)


class Lexer:
    """
    Single pass scanner with one character of lookahead.

    Whitespace is dropped, brackets become single tokens and quoted literals
    are decoded. Only ``\\uXXXX`` escapes are interpreted; the other JSON
    escapes are copied through as backslash plus letter.
    """

    def __init__(self, text: str):
        self.text = text
        self.pos = 0

    def tokenize(self) -> list[Token]:
        """Scan the whole input. The result always ends with exactly one EOF."""
        tokens: list[Token] = []
        while True:
            token = self._next_token()
            if token is None:
                break
            if token.kind is TokenKind.NEWLINE:
                continue
            tokens.append(token)

        tokens.append(EOF)
        logger.debug("Tokenized %d chars into %d tokens", len(self.text), len(tokens))
        return tokens

    def _peek_char(self) -> Optional[str]:
        if self.pos < len(self.text):
            return self.text[self.pos]
        return None

    def _next_char(self) -> Optional[str]:
        c = self._peek_char()
        if c is not None:
            self.pos += 1
        return c

    def _next_token(self) -> Optional[Token]:
        c = self._peek_char()
        if c is None:
            return None

        if is_whitespace(c) or c == '\n':
            self.pos += 1
            return NEWLINE
        if c == '[':
            self.pos += 1
            return LEFT_BRACKET
        if c == ']':
            self.pos += 1
            return RIGHT_BRACKET
        if c == '"':
            self.pos += 1
            return self._scan_string()

        raise LexError(f"error: an unexpected char {c}")

    def _scan_string(self) -> Optional[Token]:
        """
        Read a literal up to its closing quote.

        Consecutive ``\\u`` escapes are buffered as UTF-16 code units so a
        surrogate pair split over two escapes decodes to one character.
        Returns None when the input ends before the closing quote.
        """
        start = self.pos - 1
        utf16: list[int] = []
        parts: list[str] = []

        while True:
            c1 = self._next_char()
            if c1 is None:
                break

            if c1 == '\\':
                c2 = self._next_char()
                if c2 is None:
                    raise LexError("error: a next char is expected")

                if c2 in PASSTHROUGH_ESCAPES:
                    _flush_utf16(parts, utf16)
                    parts.append('\\')
                    parts.append(c2)
                elif c2 == 'u':
                    utf16.append(self._read_code_unit())
                else:
                    raise LexError(f"error: an unexpected escaped char {c2}")
            elif c1 == '"':
                _flush_utf16(parts, utf16)
                return Token.string(''.join(parts))
            else:
                _flush_utf16(parts, utf16)
                parts.append(c1)

        logger.warning(
            "Unterminated string literal at offset %d; ignoring the rest of the input",
            start,
        )
        return None

    def _read_code_unit(self) -> int:
        """Consume the four characters after ``\\u``, keeping only hex digits."""
        digits = []
        for _ in range(4):
            c = self._next_char()
            if c is not None and c in HEX_DIGITS:
                digits.append(c)

        if not digits:
            raise LexError("error: a unicode character is expected")
        return int(''.join(digits), 16)


def _flush_utf16(parts: list[str], utf16: list[int]) -> None:
    """Decode buffered UTF-16 code units into ``parts`` and clear the buffer."""
    if not utf16:
        return

    raw = b''.join(unit.to_bytes(2, 'little') for unit in utf16)
    try:
        parts.append(raw.decode('utf-16-le'))
    except UnicodeDecodeError as e:
        units = ' '.join(f"{unit:04X}" for unit in utf16)
        raise LexError(f"error: invalid utf-16: {units} ({e.reason})") from e
    utf16.clear()


def tokenize(text: str) -> list[Token]:
    """Tokenize ``text``. Raises LexError on malformed input."""
    return Lexer(text).tokenize()
