"""Errors raised while parsing version requirements.

Every failure derives from `ParseError`, so callers that only care whether
the input was valid can catch the base class, while diagnostics can tell the
variants apart.
"""

from __future__ import annotations

from typing import Optional


class ParseError(ValueError):
    """Raised when an input string is not a valid version requirement."""

    def __init__(self, message: str, offset: int, text: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.offset = offset
        self.text = text

    def __str__(self) -> str:
        return f"error at byte {self.offset}: {self.message}"


class UnexpectedEndError(ParseError):
    """Raised when input ends while more was required."""

    def __init__(self, expected: str, offset: int, text: Optional[str] = None):
        self.expected = expected
        super().__init__(f"expected {expected}, found end of input", offset, text)


class UnexpectedTokenError(ParseError):
    """Raised when a token or stray character does not fit the grammar."""

    def __init__(self, expected: str, found: str, offset: int, text: Optional[str] = None):
        self.expected = expected
        self.found = found
        super().__init__(f"expected {expected}, found {found}", offset, text)


class TrailingInputError(ParseError):
    """Raised when input remains after an otherwise complete parse."""

    def __init__(self, tail: str, offset: int, text: Optional[str] = None):
        self.tail = tail
        super().__init__(f"expected end of input, found {tail!r}", offset, text)


class NumericOverflowError(ParseError):
    """Raised when a numeric field does not fit in an unsigned 64-bit integer."""

    def __init__(self, field: str, digits: str, offset: int, text: Optional[str] = None):
        self.field = field
        self.digits = digits
        super().__init__(
            f"expected {field} number below 2^64, found {digits}", offset, text
        )


class EmptyPredicateError(ParseError):
    """Raised when a separator is not followed by a predicate."""

    def __init__(self, offset: int, text: Optional[str] = None):
        super().__init__("expected predicate after separator, found none", offset, text)
