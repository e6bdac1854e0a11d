"""Constants used by the range lexer and parser."""

from enum import Enum


class Field(Enum):
    """Numeric fields of a predicate, named in overflow diagnostics.

    Args:
        Enum (string): Field label as shown in error messages.
    """

    MAJOR = "major"
    MINOR = "minor"
    PATCH = "patch"
    PRE_RELEASE = "pre-release"
    BUILD = "build metadata"


class Constants:  # pylint: disable=too-few-public-methods
    """General constants used in the project.
    Data holder for grammar constants; not intended to provide behavior.
    """

    # Numeric components are unsigned 64-bit.
    MAX_NUMERIC = 2**64 - 1
    WILDCARDS = ("*", "x", "X")
    COMPARATORS = ("=", ">", ">=", "<", "<=", "~", "^")
    DEFAULT_COMPARATOR = "^"
    PREDICATE_SEPARATOR = ", "
