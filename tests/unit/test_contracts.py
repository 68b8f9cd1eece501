"""
Unit tests for contract decorators.
"""
import pytest

from inverse.shared.contracts import ensure, non_empty_string, require
from inverse.shared.exceptions import PostconditionError, PreconditionError


@require(lambda value: value >= 0, "value must be non-negative")
@ensure(lambda result, value: result >= value)
def double(value):
    return value * 2


@ensure(lambda result, value: result > 0, "result must be positive")
def identity(value):
    return value


class TestContracts:

    def test_conditions_hold(self):
        assert double(3) == 6

    def test_precondition_violation(self):
        with pytest.raises(PreconditionError, match="value must be non-negative"):
            double(-1)

    def test_precondition_evaluation_error(self):
        with pytest.raises(PreconditionError, match="Precondition evaluation error in double"):
            double("a")

    def test_postcondition_violation(self):
        with pytest.raises(PostconditionError, match="result must be positive"):
            identity(0)

    @pytest.mark.parametrize("value,expected", [("root", True), ("", False), ("  ", False), (None, False)])
    def test_non_empty_string(self, value, expected):
        assert non_empty_string(value) is expected
