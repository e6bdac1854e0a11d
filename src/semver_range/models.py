"""Data models for parsed version requirements."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from functools import total_ordering
from typing import Iterator, Optional, Tuple, Union

from .constants import Constants


@total_ordering
class _OrderedEnum(Enum):
    """Enum ordered by member declaration order."""

    def __lt__(self, other):
        if other.__class__ is not self.__class__:
            return NotImplemented
        members = list(self.__class__)
        return members.index(self) < members.index(other)


class WildcardVersion(_OrderedEnum):
    """Which numeric component a wildcard left unspecified."""
    MINOR = "minor"
    PATCH = "patch"


class Op(_OrderedEnum):
    """Comparison operator of a predicate.

    The two wildcard members stand for `Wildcard(Minor)` (`1.*`) and
    `Wildcard(Patch)` (`1.2.*`).
    """
    EXACT = "="
    GREATER_THAN = ">"
    GREATER_OR_EQUAL = ">="
    LESS_THAN = "<"
    LESS_OR_EQUAL = "<="
    TILDE = "~"
    COMPATIBLE = "^"
    WILDCARD_MINOR = "wildcard-minor"
    WILDCARD_PATCH = "wildcard-patch"

    @classmethod
    def from_str(cls, symbol: str) -> Op:
        """Return the operator spelled by `symbol` (one of `= > >= < <= ~ ^`)."""
        if symbol not in Constants.COMPARATORS:
            raise ValueError("Could not parse Op")
        return cls(symbol)

    @classmethod
    def for_wildcard(cls, wildcard: WildcardVersion) -> Op:
        """Return the wildcard operator for the elided `wildcard` position."""
        if wildcard is WildcardVersion.MINOR:
            return cls.WILDCARD_MINOR
        return cls.WILDCARD_PATCH

    @property
    def wildcard(self) -> Optional[WildcardVersion]:
        """Position elided by a wildcard operator; None for comparators."""
        if self is Op.WILDCARD_MINOR:
            return WildcardVersion.MINOR
        if self is Op.WILDCARD_PATCH:
            return WildcardVersion.PATCH
        return None

    @property
    def symbol(self) -> str:
        """Comparator spelling; empty for wildcard operators."""
        return "" if self.wildcard else self.value


@total_ordering
@dataclass(frozen=True)
class Identifier:
    """A single dot-separated pre-release or build segment."""

    value: Union[int, str]

    @classmethod
    def numeric(cls, number: int) -> Identifier:
        """Build a numeric identifier such as `1` in `rc.1`."""
        return cls(number)

    @classmethod
    def alphanumeric(cls, text: str) -> Identifier:
        """Build an alphanumeric identifier such as `rc`; case is kept."""
        return cls(text)

    @property
    def is_numeric(self) -> bool:
        """Return whether this identifier is numeric."""
        return isinstance(self.value, int)

    def _sort_key(self) -> Tuple[int, int, str]:
        # Numeric identifiers have lower precedence than alphanumeric ones.
        if self.is_numeric:
            return (0, self.value, "")
        return (1, 0, self.value)

    def __lt__(self, other):
        if not isinstance(other, Identifier):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def __str__(self) -> str:
        return str(self.value)


def _optional_key(number: Optional[int]) -> Tuple[bool, int]:
    return (number is not None, number or 0)


@total_ordering
@dataclass(frozen=True)
class Predicate:
    """One atomic constraint such as `>=1.2.3-beta`.

    `minor` and `patch` are None when the input omitted them or a wildcard
    elided them. Build metadata is never stored.
    """

    op: Op
    major: int
    minor: Optional[int] = None
    patch: Optional[int] = None
    pre: Tuple[Identifier, ...] = ()

    def _sort_key(self):
        return (
            self.op,
            self.major,
            _optional_key(self.minor),
            _optional_key(self.patch),
            self.pre,
        )

    def __lt__(self, other):
        if not isinstance(other, Predicate):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def __str__(self) -> str:
        wildcard = self.op.wildcard
        parts = [str(self.major)]
        if wildcard is WildcardVersion.MINOR:
            parts.append("*")
            if self.patch is not None:
                parts.append(str(self.patch))
        elif wildcard is WildcardVersion.PATCH:
            parts.append("*" if self.minor is None else str(self.minor))
            parts.append("*")
        elif self.minor is not None:
            parts.append(str(self.minor))
            if self.patch is not None:
                parts.append(str(self.patch))

        rendered = self.op.symbol + ".".join(parts)
        if self.pre:
            rendered += "-" + ".".join(str(part) for part in self.pre)
        return rendered


@total_ordering
@dataclass(frozen=True)
class VersionReq:
    """Ordered collection of predicates; empty means "match anything"."""

    predicates: Tuple[Predicate, ...] = field(default_factory=tuple)

    def __iter__(self) -> Iterator[Predicate]:
        return iter(self.predicates)

    def __lt__(self, other):
        if not isinstance(other, VersionReq):
            return NotImplemented
        return self.predicates < other.predicates

    def __str__(self) -> str:
        return Constants.PREDICATE_SEPARATOR.join(str(p) for p in self.predicates)
