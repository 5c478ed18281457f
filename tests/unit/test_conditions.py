"""Unit tests for the shared condition evaluators."""

from requisite import conditions
from requisite.conditions import Comparison, Verdict, compare, describe_bound
from requisite.shapes import Shape


class TestVerdict:
    """Test Verdict construction."""

    def test_holds(self):
        """Test passing verdicts."""
        verdict = Verdict.holds(Shape.STRING)
        assert verdict.passed
        assert not verdict.refuted

    def test_fails(self):
        """Test failing verdicts format their detail."""
        verdict = Verdict.fails(Shape.VALUE, " is {}", 3)
        assert verdict.detail == " is 3"
        assert verdict.refuted

    def test_missing_and_unsupported(self):
        """Test absent and unsupported verdicts are not refuted."""
        missing = Verdict.missing(Shape.MAP)
        assert missing.absent and not missing.refuted
        unsupported = Verdict.unsupported(Shape.VALUE, " is odd")
        assert not unsupported.absent and not unsupported.refuted


class TestCompare:
    """Test comparison helpers."""

    def test_compare(self):
        """Test each comparison."""
        assert compare(Comparison.EQUAL, 2, 2)
        assert compare(Comparison.GREATER_THAN, 3, 2)
        assert compare(Comparison.LESS_OR_EQUAL, 2, 2)
        assert compare(Comparison.BETWEEN, 2, 2, 2)
        assert not compare(Comparison.BETWEEN, 2, 3, 1)

    def test_describe_bound(self):
        """Test bound descriptions."""
        assert describe_bound(Comparison.EQUAL, 5, None, "length", True) == "required length is: 5"
        assert describe_bound(Comparison.GREATER_THAN, 5, None, "value", True) == "minimum is: 6"
        assert describe_bound(Comparison.GREATER_THAN, 5, None, "value", False) == "must be greater than: 5"
        assert describe_bound(Comparison.LESS_THAN, 5, None, "value", True) == "maximum is: 4"
        assert describe_bound(Comparison.BETWEEN, 1, 2, "size", True) == "must be between: 1 and 2"


class TestEvaluators:
    """Test evaluator edge cases."""

    def test_present(self):
        """Test presence verdicts carry the value's shape."""
        assert conditions.present([1]).shape == Shape.COLLECTION
        assert conditions.present(None).absent

    def test_unhashable_needle(self):
        """Test an unhashable needle in a set is unsupported."""
        verdict = conditions.contains([1], {1})
        assert not verdict.passed
        assert not verdict.checkable

    def test_type_check_with_bad_type(self):
        """Test isinstance errors are reported as unsupported."""
        verdict = conditions.instance_of("str", "x")
        assert not verdict.checkable
