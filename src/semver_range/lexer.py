"""Lexer for version requirement strings.

Tokens are produced one at a time from a cursor over the input. The lexer
never raises: characters it cannot classify come back as `UNEXPECTED`
tokens and the parser decides how to report them.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator

from .constants import Constants


class TokenKind(Enum):
    """Lexical classes recognized in a version requirement."""

    NUMBER = "number"
    DOT = "'.'"
    DASH = "'-'"
    PLUS = "'+'"
    COMMA = "','"
    EQ = "'='"
    GT = "'>'"
    GT_EQ = "'>='"
    LT = "'<'"
    LT_EQ = "'<='"
    TILDE = "'~'"
    CARET = "'^'"
    WILDCARD = "wildcard"
    ALPHANUMERIC = "identifier"
    WHITESPACE = "whitespace"
    UNEXPECTED = "unexpected character"
    END = "end of input"


_SINGLE_CHAR = {
    ".": TokenKind.DOT,
    "-": TokenKind.DASH,
    "+": TokenKind.PLUS,
    ",": TokenKind.COMMA,
    "=": TokenKind.EQ,
    "~": TokenKind.TILDE,
    "^": TokenKind.CARET,
    "*": TokenKind.WILDCARD,
}

# '>' and '<' take an optional '=' suffix.
_WITH_EQ = {
    ">": (TokenKind.GT, TokenKind.GT_EQ),
    "<": (TokenKind.LT, TokenKind.LT_EQ),
}


@dataclass(frozen=True)
class Token:
    """A classified slice of the input, `text == input[start:end]`.

    `start`/`end` index the string; `offset` is the UTF-8 byte offset of
    `start`, used in diagnostics.
    """

    kind: TokenKind
    text: str
    start: int
    end: int
    offset: int

    def describe(self) -> str:
        """Human-readable description for diagnostics."""
        if self.kind in (TokenKind.NUMBER, TokenKind.ALPHANUMERIC):
            return f"{self.kind.value} {self.text!r}"
        if self.kind is TokenKind.WILDCARD:
            return f"wildcard {self.text!r}"
        if self.kind is TokenKind.UNEXPECTED:
            return f"unexpected character {self.text!r}"
        return self.kind.value


def _is_alnum(ch: str) -> bool:
    return ch.isascii() and ch.isalnum()


class Lexer:
    """Pull-based tokenizer with position tracking."""

    def __init__(self, text: str):
        self.text = text
        self.pos = 0
        self.byte_pos = 0

    def __iter__(self) -> Iterator[Token]:
        while True:
            token = self.next_token()
            yield token
            if token.kind is TokenKind.END:
                return

    def next_token(self) -> Token:
        """Classify the next run of characters; `END` once input is exhausted."""
        text = self.text
        start = self.pos
        if start >= len(text):
            return Token(TokenKind.END, "", len(text), len(text), self.byte_pos)

        ch = text[start]
        if ch.isspace():
            end = self._take_while(str.isspace)
            return self._emit(TokenKind.WHITESPACE, start, end)

        if ch in _WITH_EQ:
            plain, with_eq = _WITH_EQ[ch]
            if text.startswith("=", start + 1):
                return self._emit(with_eq, start, start + 2)
            return self._emit(plain, start, start + 1)

        kind = _SINGLE_CHAR.get(ch)
        if kind is not None:
            return self._emit(kind, start, start + 1)

        if _is_alnum(ch):
            end = self._take_while(_is_alnum)
            return self._emit(self._classify_run(text[start:end]), start, end)

        return self._emit(TokenKind.UNEXPECTED, start, start + 1)

    def _take_while(self, predicate) -> int:
        end = self.pos
        while end < len(self.text) and predicate(self.text[end]):
            end += 1
        return end

    def _emit(self, kind: TokenKind, start: int, end: int) -> Token:
        chunk = self.text[start:end]
        token = Token(kind, chunk, start, end, self.byte_pos)
        self.pos = end
        self.byte_pos += len(chunk.encode("utf-8"))
        return token

    @staticmethod
    def _classify_run(run: str) -> TokenKind:
        if run.isdigit():
            # Numbers never carry leading zeros.
            if len(run) > 1 and run[0] == "0":
                return TokenKind.ALPHANUMERIC
            return TokenKind.NUMBER
        if run in Constants.WILDCARDS:
            return TokenKind.WILDCARD
        return TokenKind.ALPHANUMERIC
