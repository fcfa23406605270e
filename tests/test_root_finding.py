"""
Unit tests for the bracketing root finders.
"""

import math
import pytest

from pipeflow.exceptions import BracketError, ConvergenceError, ResidualDomainError
from pipeflow.root_finding import bisection, brent, check_bracket


def quadratic(x):
    return x**2 - 2


@pytest.mark.parametrize("solver", [bisection, brent])
class TestSolvers:

    def test_finds_square_root_of_two(self, solver):
        result = solver(quadratic, 0.0, 2.0, tolerance=1e-10)
        assert result.converged
        assert result.root == pytest.approx(math.sqrt(2), abs=2e-10)
        assert result.iterations > 0

    def test_same_sign_bracket(self, solver):
        with pytest.raises(BracketError):
            solver(quadratic, 2.0, 3.0)

    def test_reversed_bracket(self, solver):
        with pytest.raises(BracketError):
            solver(quadratic, 2.0, 0.0)

    def test_degenerate_bracket(self, solver):
        with pytest.raises(BracketError):
            solver(quadratic, 1.0, 1.0)

    def test_infinite_endpoint(self, solver):
        with pytest.raises(BracketError):
            solver(quadratic, 0.0, math.inf)

    def test_endpoint_outside_domain(self, solver):
        with pytest.raises(BracketError):
            solver(lambda x: math.log(x) if x > 0 else math.nan, 0.0, 2.0)

    def test_exact_zero_at_endpoint(self, solver):
        result = solver(lambda x: x - 1.0, 0.0, 1.0)
        assert result.root == 1.0
        assert result.iterations == 0

    def test_non_positive_tolerance(self, solver):
        with pytest.raises(ValueError):
            solver(quadratic, 0.0, 2.0, tolerance=0.0)

    def test_iteration_budget_exhausted(self, solver):
        with pytest.raises(ConvergenceError) as excinfo:
            solver(quadratic, 0.0, 2.0, tolerance=1e-14, max_iter=1)
        assert isinstance(excinfo.value, RuntimeError)
        assert excinfo.value.iterations == 1
        assert 0.0 <= excinfo.value.estimate <= 2.0

    def test_verbose_summary(self, solver, capsys):
        solver(quadratic, 0.0, 2.0, verbose=1)
        assert solver.__name__ in capsys.readouterr().out

    def test_silent_by_default(self, solver, capsys):
        solver(quadratic, 0.0, 2.0)
        assert capsys.readouterr().out == ''


class TestBisection:

    def test_bracket_halves_every_iteration(self):
        history = []
        bisection(quadratic, 0.0, 2.0, tolerance=1e-6, history=history)

        widths = [hi - lo for lo, hi in history]
        assert len(widths) > 10
        for previous, current in zip(widths, widths[1:]):
            assert current == pytest.approx(previous / 2, rel=1e-12)

    def test_bracket_keeps_sign_change(self):
        history = []
        bisection(quadratic, 0.0, 2.0, tolerance=1e-6, history=history)

        for lo, hi in history:
            assert quadratic(lo) < 0 < quadratic(hi)

    def test_root_within_tolerance_of_last_bracket(self):
        history = []
        result = bisection(quadratic, 0.0, 2.0, tolerance=1e-6, history=history)

        lo, hi = history[-1]
        assert lo < result.root < hi
        assert (hi - lo) / 2 <= 1e-6

    def test_non_finite_value_inside_bracket(self):
        # The first midpoint is 0.5
        func = lambda x: math.nan if x == 0.5 else x - 0.3
        with pytest.raises(ResidualDomainError):
            bisection(func, 0.0, 1.0)

    def test_default_budget_is_enough(self):
        result = bisection(quadratic, 0.0, 2.0, tolerance=1e-12)
        assert result.iterations <= math.ceil(math.log2(2.0 / 1e-12)) + 1


class TestCheckBracket:

    def test_returns_endpoint_values(self):
        assert check_bracket(quadratic, 0.0, 2.0) == (-2.0, 2.0)

    def test_domain_error_becomes_bracket_error(self):
        def func(x):
            if x <= 0:
                raise ResidualDomainError("x must be positive")
            return x - 1

        with pytest.raises(BracketError) as excinfo:
            check_bracket(func, 0.0, 2.0)
        assert isinstance(excinfo.value.__cause__, ResidualDomainError)
