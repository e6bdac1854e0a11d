"""Parser for semantic-version range requirements such as ">=1.2.3, <2.0"."""

from .errors import (
    EmptyPredicateError,
    NumericOverflowError,
    ParseError,
    TrailingInputError,
    UnexpectedEndError,
    UnexpectedTokenError,
)
from .models import Identifier, Op, Predicate, VersionReq, WildcardVersion
from .parser import parse, parse_predicate

__all__ = [
    "parse",
    "parse_predicate",
    "Identifier",
    "Op",
    "Predicate",
    "VersionReq",
    "WildcardVersion",
    "ParseError",
    "UnexpectedEndError",
    "UnexpectedTokenError",
    "TrailingInputError",
    "NumericOverflowError",
    "EmptyPredicateError",
]
