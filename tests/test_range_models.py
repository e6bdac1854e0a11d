"""Tests for requirement data models."""

import pytest

from src.semver_range.models import Identifier, Op, Predicate, VersionReq, WildcardVersion


class TestOp:
    """Tests for operator parsing and ordering."""

    @pytest.mark.parametrize(
        "symbol,op",
        [
            ("=", Op.EXACT),
            (">", Op.GREATER_THAN),
            (">=", Op.GREATER_OR_EQUAL),
            ("<", Op.LESS_THAN),
            ("<=", Op.LESS_OR_EQUAL),
            ("~", Op.TILDE),
            ("^", Op.COMPATIBLE),
        ],
    )
    def test_from_str(self, symbol, op):
        """Test every comparator spelling."""
        assert Op.from_str(symbol) is op
        assert op.symbol == symbol

    @pytest.mark.parametrize("symbol", ["", "==", "*", "wildcard-minor", "=>"])
    def test_from_str_rejects(self, symbol):
        """Test that unknown spellings raise ValueError."""
        with pytest.raises(ValueError, match="Could not parse Op"):
            Op.from_str(symbol)

    def test_ordering_follows_declaration(self):
        """Test derived operator ordering."""
        assert Op.EXACT < Op.GREATER_THAN
        assert Op.EXACT <= Op.LESS_THAN
        assert Op.LESS_THAN <= Op.LESS_THAN
        assert Op.COMPATIBLE > Op.GREATER_OR_EQUAL
        assert Op.COMPATIBLE >= Op.TILDE
        assert Op.TILDE >= Op.TILDE
        assert Op.COMPATIBLE < Op.WILDCARD_MINOR < Op.WILDCARD_PATCH

    def test_wildcard_conversion(self):
        """Test mapping between wildcard operators and positions."""
        assert Op.for_wildcard(WildcardVersion.MINOR) is Op.WILDCARD_MINOR
        assert Op.for_wildcard(WildcardVersion.PATCH) is Op.WILDCARD_PATCH
        assert Op.WILDCARD_MINOR.wildcard is WildcardVersion.MINOR
        assert Op.WILDCARD_PATCH.symbol == ""
        assert Op.TILDE.wildcard is None


class TestWildcardVersion:
    """Tests for wildcard position ordering."""

    def test_ordering(self):
        """Test that MINOR sorts before PATCH."""
        assert WildcardVersion.MINOR < WildcardVersion.PATCH
        assert WildcardVersion.MINOR <= WildcardVersion.PATCH
        assert WildcardVersion.PATCH <= WildcardVersion.PATCH
        assert WildcardVersion.PATCH > WildcardVersion.MINOR
        assert WildcardVersion.PATCH >= WildcardVersion.MINOR
        assert WildcardVersion.MINOR >= WildcardVersion.MINOR

    def test_not_comparable_with_op(self):
        """Test that different enums do not compare."""
        with pytest.raises(TypeError):
            WildcardVersion.MINOR < Op.EXACT  # pylint: disable=expression-not-assigned


class TestIdentifier:
    """Tests for pre-release identifiers."""

    def test_kinds(self):
        """Test numeric and alphanumeric construction."""
        assert Identifier.numeric(3).is_numeric
        assert not Identifier.alphanumeric("rc").is_numeric
        assert Identifier.numeric(1) != Identifier.alphanumeric("1")
        assert str(Identifier.numeric(7)) == "7"

    def test_precedence(self):
        """Test semver identifier precedence."""
        assert Identifier.numeric(2) < Identifier.numeric(10)
        assert Identifier.numeric(999) < Identifier.alphanumeric("a")
        assert Identifier.alphanumeric("alpha") < Identifier.alphanumeric("beta")
        assert Identifier.alphanumeric("Beta") < Identifier.alphanumeric("alpha")


class TestPredicateAndReq:
    """Tests for predicate values and requirement collections."""

    def test_defaults(self):
        """Test optional fields default to absent."""
        pred = Predicate(Op.TILDE, 1)
        assert pred.minor is None
        assert pred.patch is None
        assert pred.pre == ()

    def test_absent_sorts_before_present(self):
        """Test ordering with missing minor/patch."""
        assert Predicate(Op.EXACT, 1) < Predicate(Op.EXACT, 1, 0)
        assert Predicate(Op.EXACT, 1, 0) < Predicate(Op.EXACT, 1, 0, 0)
        assert Predicate(Op.EXACT, 2) > Predicate(Op.EXACT, 1, 9, 9)
        assert Predicate(Op.EXACT, 5) < Predicate(Op.GREATER_THAN, 0)

    def test_sorting(self):
        """Test that predicates sort deterministically."""
        preds = [
            Predicate(Op.WILDCARD_MINOR, 1),
            Predicate(Op.EXACT, 1, 0, 0, (Identifier.alphanumeric("rc"),)),
            Predicate(Op.EXACT, 1, 0, 0),
        ]
        assert sorted(preds) == [preds[2], preds[1], preds[0]]

    def test_immutable(self):
        """Test that predicates cannot be mutated."""
        pred = Predicate(Op.EXACT, 1)
        with pytest.raises(AttributeError):
            pred.major = 2

    def test_req_iteration_and_str(self):
        """Test iterating and rendering a requirement."""
        req = VersionReq((Predicate(Op.GREATER_OR_EQUAL, 1, 2), Predicate(Op.LESS_THAN, 2)))
        assert list(req) == list(req.predicates)
        assert str(req) == ">=1.2, <2"
        assert str(VersionReq()) == ""

    def test_req_ordering(self):
        """Test lexicographic requirement ordering."""
        assert VersionReq() < VersionReq((Predicate(Op.EXACT, 0),))
