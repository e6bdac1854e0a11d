"""Recursive-descent parser for version requirements.

Grammar (one token of lookahead)::

    range       := predicate (separator predicate)*
    separator   := ','? whitespace* | whitespace+
    predicate   := operator? wildcard
                 | operator? major ('.' minor-part)? pre-release? build?
    minor-part  := wildcard | minor ('.' patch-part)?
    patch-part  := wildcard | patch
    pre-release := '-' identifier ('.' identifier)*
    build       := '+' identifier ('.' identifier)*
"""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from .constants import Constants, Field
from .errors import (
    EmptyPredicateError,
    NumericOverflowError,
    ParseError,
    TrailingInputError,
    UnexpectedEndError,
    UnexpectedTokenError,
)
from .lexer import Lexer, Token, TokenKind
from .models import Identifier, Op, Predicate, VersionReq, WildcardVersion

logger = logging.getLogger(__name__)

_OPERATORS = {
    TokenKind.EQ: Op.EXACT,
    TokenKind.GT: Op.GREATER_THAN,
    TokenKind.GT_EQ: Op.GREATER_OR_EQUAL,
    TokenKind.LT: Op.LESS_THAN,
    TokenKind.LT_EQ: Op.LESS_OR_EQUAL,
    TokenKind.TILDE: Op.TILDE,
    TokenKind.CARET: Op.COMPATIBLE,
}


class Parser:
    """Builds predicates from a token stream over a single input string."""

    def __init__(self, text: str):
        if not isinstance(text, str):
            raise TypeError(f"expected str, got {type(text).__name__}")
        self.text = text
        self._lexer = Lexer(text)
        self._lookahead = self._lexer.next_token()

    # Token access

    def peek(self) -> Token:
        """Return the lookahead token without consuming it."""
        return self._lookahead

    def pop(self) -> Token:
        """Consume and return the lookahead token; END is never consumed."""
        token = self._lookahead
        if token.kind is not TokenKind.END:
            self._lookahead = self._lexer.next_token()
        return token

    def is_eof(self) -> bool:
        """Return whether all input has been consumed."""
        return self._lookahead.kind is TokenKind.END

    def tail(self) -> str:
        """Unconsumed input starting at the lookahead token."""
        return self.text[self._lookahead.start:]

    def skip_whitespace(self) -> bool:
        """Consume a whitespace run; return whether one was present."""
        if self._lookahead.kind is TokenKind.WHITESPACE:
            self.pop()
            return True
        return False

    def _unexpected(self, token: Token, expected: str) -> ParseError:
        if token.kind is TokenKind.END:
            return UnexpectedEndError(expected, token.offset, self.text)
        return UnexpectedTokenError(expected, token.describe(), token.offset, self.text)

    # Grammar

    def range(self) -> VersionReq:
        """Parse separated predicates until no separator follows."""
        predicates: List[Predicate] = []
        first = self.predicate()
        if first is not None:
            predicates.append(first)
            while self._separator():
                offset = self._lookahead.offset
                following = self.predicate()
                if following is None:
                    raise EmptyPredicateError(offset, self.text)
                predicates.append(following)
        self.skip_whitespace()
        return VersionReq(tuple(predicates))

    def predicate(self) -> Optional[Predicate]:
        """Parse one predicate; None when it denotes "match anything"."""
        self.skip_whitespace()
        if self.is_eof():
            return None

        op = self._op()
        major = self._component(Field.MAJOR)
        if major is None:
            return None

        minor, minor_wildcard = self._dot_component(Field.MINOR)
        patch, patch_wildcard = self._dot_component(Field.PATCH)
        pre = self._pre_release()

        # The later wildcard wins, so `1.*.*` is classified as a patch wildcard.
        if minor_wildcard:
            op = Op.for_wildcard(WildcardVersion.MINOR)
        if patch_wildcard:
            op = Op.for_wildcard(WildcardVersion.PATCH)

        self._build_metadata()
        return Predicate(op=op, major=major, minor=minor, patch=patch, pre=pre)

    def _separator(self) -> bool:
        had_whitespace = self.skip_whitespace()
        if self._lookahead.kind is TokenKind.COMMA:
            self.pop()
            self.skip_whitespace()
            return True
        return had_whitespace and not self.is_eof()

    def _op(self) -> Op:
        op = _OPERATORS.get(self._lookahead.kind)
        if op is None:
            return Op.from_str(Constants.DEFAULT_COMPARATOR)
        self.pop()
        self.skip_whitespace()
        return op

    def _component(self, field: Field) -> Optional[int]:
        """Parse a numeric field; None for a wildcard."""
        token = self.pop()
        if token.kind is TokenKind.WILDCARD:
            return None
        if token.kind is TokenKind.NUMBER:
            return self._to_number(token, field)
        raise self._unexpected(token, f"{field.value} version number or wildcard")

    def _dot_component(self, field: Field) -> Tuple[Optional[int], bool]:
        """Parse `'.' component`; returns (value, was_wildcard)."""
        if self._lookahead.kind is not TokenKind.DOT:
            return None, False
        self.pop()
        wildcard = self._lookahead.kind is TokenKind.WILDCARD
        return self._component(field), wildcard

    def _to_number(self, token: Token, field: Field) -> int:
        value = int(token.text)
        if value > Constants.MAX_NUMERIC:
            raise NumericOverflowError(field.value, token.text, token.offset, self.text)
        return value

    def _pre_release(self) -> Tuple[Identifier, ...]:
        if self._lookahead.kind is not TokenKind.DASH:
            return ()
        self.pop()
        return tuple(self._identifiers("pre-release identifier", Field.PRE_RELEASE))

    def _build_metadata(self) -> None:
        if self._lookahead.kind is not TokenKind.PLUS:
            return
        self.pop()
        # Validated but not kept.
        self._identifiers("build metadata identifier", Field.BUILD)

    def _identifiers(self, expected: str, field: Field) -> List[Identifier]:
        parts = [self._identifier(expected, field)]
        while self._lookahead.kind is TokenKind.DOT:
            self.pop()
            parts.append(self._identifier(expected, field))
        return parts

    def _identifier(self, expected: str, field: Field) -> Identifier:
        token = self.pop()
        if token.kind is TokenKind.NUMBER:
            return Identifier.numeric(self._to_number(token, field))
        # `x` and `X` lex as wildcards but are ordinary identifiers here.
        if token.kind is TokenKind.ALPHANUMERIC or (
            token.kind is TokenKind.WILDCARD and token.text.isalpha()
        ):
            return Identifier.alphanumeric(token.text)
        raise self._unexpected(token, expected)

    def expect_end(self) -> None:
        """Raise TrailingInputError unless only whitespace remains."""
        self.skip_whitespace()
        if not self.is_eof():
            raise TrailingInputError(self.tail(), self._lookahead.offset, self.text)


def parse_predicate(text: str) -> Optional[Predicate]:
    """Parse exactly one predicate.

    Returns None when the input means "match anything" (blank, `*`, `x`, `X`).

    Raises:
        ParseError: if the input is not a single valid predicate.
    """
    logger.debug("Parsing version predicate %r", text)
    parser = Parser(text)
    try:
        predicate = parser.predicate()
        parser.expect_end()
    except ParseError as exc:
        logger.debug("Invalid version predicate %r: %s", text, exc)
        raise
    return predicate


def parse(text: str) -> VersionReq:
    """Parse a comma/whitespace separated list of predicates.

    Blank and all-wildcard inputs yield an empty `VersionReq`.

    Raises:
        ParseError: if the input is not a valid version requirement.
    """
    logger.debug("Parsing version requirement %r", text)
    parser = Parser(text)
    try:
        req = parser.range()
        parser.expect_end()
    except ParseError as exc:
        logger.debug("Invalid version requirement %r: %s", text, exc)
        raise
    logger.debug("Parsed %d predicate(s) from %r", len(req.predicates), text)
    return req
