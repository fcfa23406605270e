from collections.abc import Callable
from dataclasses import dataclass
import numpy as np
from scipy.optimize import brentq
from .exceptions import BracketError, ConvergenceError, ResidualDomainError
from .settings import DEFAULT_TOLERANCE, BRENT_MAX_ITER, BISECTION_ITER_MARGIN


@dataclass(frozen=True)
class RootResult:
    """Outcome of a successful root search.

    Attributes:
        root (float): The root estimate.
        iterations (int): Number of iterations used.
        function_calls (int): Number of function evaluations.
        converged (bool): Always True; failures raise instead.
        method (str): Name of the root finder.
    """
    root: float
    iterations: int
    function_calls: int
    converged: bool
    method: str


def evaluate(func: Callable[[float], float], x: float) -> float:
    """Evaluates func at x, rejecting non-finite values."""
    value = float(func(x))
    if not np.isfinite(value):
        raise ResidualDomainError(f"Function value is not finite at x = {x} (got {value}).")
    return value

def check_bracket(func: Callable[[float], float], lo: float, hi: float) -> tuple[float, float]:
    """
    Checks that [lo, hi] brackets a root of func.

    Parameters
    ----------
    func : callable
        Continuous scalar function.
    lo, hi : float
        Bracket endpoints.

    Returns
    -------
    tuple of float
        func(lo) and func(hi).

    Raises
    ------
    BracketError
        If lo >= hi, an endpoint is not finite or lies outside the domain of
        func, or func has the same strict sign at both endpoints.

    """
    if not (np.isfinite(lo) and np.isfinite(hi)):
        raise BracketError(f"Bracket endpoints must be finite, got ({lo}, {hi}).")
    if lo >= hi:
        raise BracketError(f"Lower bound must be less than upper bound, got ({lo}, {hi}).")

    try:
        f_lo = evaluate(func, lo)
        f_hi = evaluate(func, hi)
    except ResidualDomainError as e:
        raise BracketError(f"Bracket ({lo}, {hi}) leaves the domain of the function: {e}") from e

    if f_lo != 0 and f_hi != 0 and np.sign(f_lo) == np.sign(f_hi):
        raise BracketError(
            f"Function must change sign over the bracket, got f({lo}) = {f_lo}, f({hi}) = {f_hi}."
        )

    return f_lo, f_hi

def _check_settings(tolerance: float, max_iter: int | None) -> None:
    if not tolerance > 0:
        raise ValueError("Tolerance must be positive.")
    if max_iter is not None and max_iter < 1:
        raise ValueError("Maximum number of iterations must be at least 1.")

def _endpoint_root(lo, hi, f_lo, f_hi, method) -> RootResult | None:
    if f_lo == 0:
        return RootResult(root=float(lo), iterations=0, function_calls=2, converged=True, method=method)
    if f_hi == 0:
        return RootResult(root=float(hi), iterations=0, function_calls=2, converged=True, method=method)
    return None

def bisection(func: Callable[[float], float],
              lo: float,
              hi: float,
              tolerance: float = DEFAULT_TOLERANCE,
              max_iter: int = None,
              verbose: int = 0,
              history: list = None) -> RootResult:
    """
    Finds a root of func in [lo, hi] by interval halving.

    The search stops at the first midpoint whose bracket half-width is within
    the tolerance, so the returned root lies within `tolerance` of a true root.
    An exact zero at a midpoint also stops the search.

    Parameters
    ----------
    func : callable
        Continuous scalar function with a sign change over [lo, hi].
    lo, hi : float
        Bracket endpoints.
    tolerance : float
        Absolute tolerance on the root.
    max_iter : int, optional
        Iteration budget. Defaults to ceil(log2((hi - lo) / tolerance))
        plus a safety margin.
    verbose : int
        0 is silent, 1 prints a summary, 2 prints every iteration.
    history : list, optional
        If given, every bracket (lo, hi) visited is appended to it.

    Returns
    -------
    RootResult

    Raises
    ------
    BracketError
        If the bracket precondition does not hold.
    ConvergenceError
        If the iteration budget is exhausted.

    """
    _check_settings(tolerance, max_iter)
    f_lo, f_hi = check_bracket(func, lo, hi)

    result = _endpoint_root(lo, hi, f_lo, f_hi, 'bisection')
    if result is not None:
        return result

    if max_iter is None:
        max_iter = max(int(np.ceil(np.log2((hi - lo) / tolerance))), 1) + BISECTION_ITER_MARGIN

    if history is not None:
        history.append((lo, hi))

    function_calls = 2
    for iteration in range(1, max_iter + 1):
        mid = 0.5 * (lo + hi)
        f_mid = evaluate(func, mid)
        function_calls += 1

        if verbose >= 2:
            print(f">> Iteration #{iteration}: x = {mid}, f(x) = {f_mid}, width = {hi - lo}")

        if f_mid == 0 or 0.5 * (hi - lo) <= tolerance:
            if verbose >= 1:
                print(f'> bisection: root = {mid} after {iteration} iterations.')
            return RootResult(root=mid, iterations=iteration, function_calls=function_calls,
                              converged=True, method='bisection')

        if np.sign(f_mid) == np.sign(f_lo):
            lo, f_lo = mid, f_mid
        else:
            hi, f_hi = mid, f_mid

        if history is not None:
            history.append((lo, hi))

    raise ConvergenceError(method='bisection', iterations=max_iter, estimate=0.5 * (lo + hi))

def brent(func: Callable[[float], float],
          lo: float,
          hi: float,
          tolerance: float = DEFAULT_TOLERANCE,
          max_iter: int = None,
          verbose: int = 0) -> RootResult:
    """
    Finds a root of func in [lo, hi] using Brent's method.

    Inverse quadratic interpolation and secant steps are taken when they stay
    inside the bracket, with bisection as the fallback. Arguments, return
    value and errors are the same as for `bisection`; `max_iter` defaults to
    BRENT_MAX_ITER.
    """
    _check_settings(tolerance, max_iter)
    f_lo, f_hi = check_bracket(func, lo, hi)

    result = _endpoint_root(lo, hi, f_lo, f_hi, 'brent')
    if result is not None:
        return result

    if max_iter is None:
        max_iter = BRENT_MAX_ITER

    n_evaluations = 0

    def f(x):
        nonlocal n_evaluations
        n_evaluations += 1
        value = evaluate(func, x)
        if verbose >= 2:
            print(f">> Evaluation #{n_evaluations}: x = {x}, f(x) = {value}")
        return value

    root, info = brentq(f, lo, hi, xtol=tolerance, maxiter=max_iter, full_output=True, disp=False)

    if not info.converged:
        raise ConvergenceError(method='brent', iterations=info.iterations, estimate=float(root))

    if verbose >= 1:
        print(f'> brent: root = {root} after {info.iterations} iterations.')

    return RootResult(root=float(root), iterations=info.iterations, function_calls=info.function_calls + 2,
                      converged=True, method='brent')

SOLVERS = {
    'bisection': bisection,
    'brent': brent,
}
