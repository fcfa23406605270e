from collections.abc import Callable
import numpy as np
from .exceptions import InvalidParameterError, ResidualDomainError
from .root_finding import RootResult, SOLVERS
from .settings import (
    COLEBROOK_ROUGHNESS_DIVISOR,
    COLEBROOK_REYNOLDS_COEFFICIENT,
    DEFAULT_BRACKET,
    DEFAULT_TOLERANCE,
)

def colebrook_residual(epsilon: float, hydraulic_diameter: float, reynolds_number: float) -> Callable[[float], float]:
    """
    Builds the Colebrook-White residual

        r(f) = 1/sqrt(f) + 2 log10(ε/(3.7 D_H) + 2.51/(Re sqrt(f)))

    whose root is the Darcy friction factor.

    Parameters
    ----------
    epsilon : float
        Roughness height, in the same length units as the hydraulic diameter.
    hydraulic_diameter : float
        Hydraulic diameter.
    reynolds_number : float
        Reynolds number.

    Returns
    -------
    callable
        r(f), defined for f > 0. Raises ResidualDomainError elsewhere.

    """
    if not reynolds_number > 0:
        raise InvalidParameterError(f"Reynolds number must be positive, got {reynolds_number}.")
    if not hydraulic_diameter > 0:
        raise InvalidParameterError(f"Hydraulic diameter must be positive, got {hydraulic_diameter}.")
    if not epsilon >= 0:
        raise InvalidParameterError(f"Roughness must be non-negative, got {epsilon}.")

    roughness_term = epsilon / (COLEBROOK_ROUGHNESS_DIVISOR * hydraulic_diameter)
    viscous_coefficient = COLEBROOK_REYNOLDS_COEFFICIENT / reynolds_number

    def residual(f: float) -> float:
        if not f > 0:
            raise ResidualDomainError(f"Friction factor must be positive, got {f}.")

        sqrt_f = np.sqrt(f)
        log_arg = roughness_term + viscous_coefficient / sqrt_f
        if not (log_arg > 0 and np.isfinite(log_arg)):
            raise ResidualDomainError(f"Logarithm argument is {log_arg} at f = {f}.")

        return float(1.0 / sqrt_f + 2.0 * np.log10(log_arg))

    return residual

def solve_colebrook_white(method: str,
                          epsilon: float,
                          hydraulic_diameter: float,
                          reynolds_number: float,
                          bracket: tuple = DEFAULT_BRACKET,
                          tolerance: float = DEFAULT_TOLERANCE,
                          max_iter: int = None,
                          verbose: int = 0) -> RootResult:
    """Solves Colebrook-White for the Darcy friction factor.

    Args:
        method (str): 'bisection' or 'brent'.
        epsilon (float): Roughness height.
        hydraulic_diameter (float): Hydraulic diameter, same units as epsilon.
        reynolds_number (float): Reynolds number.
        bracket (tuple, optional): Interval (lo, hi) containing the root. Defaults to (1e-4, 1).
        tolerance (float, optional): Absolute tolerance on f. Defaults to 1e-8.
        max_iter (int, optional): Iteration budget. Defaults to the solver's own.
        verbose (int, optional): Verbosity level. Defaults to 0.

    Returns:
        RootResult: The friction factor with iteration diagnostics.
    """
    key = method.lower()
    if key not in SOLVERS:
        raise ValueError(f"Invalid root-finding method '{method}'.")

    residual = colebrook_residual(epsilon, hydraulic_diameter, reynolds_number)
    lo, hi = bracket

    return SOLVERS[key](residual, lo, hi, tolerance=tolerance, max_iter=max_iter, verbose=verbose)

def colebrook_white(method: str,
                    epsilon: float,
                    hydraulic_diameter: float,
                    reynolds_number: float,
                    bracket: tuple = DEFAULT_BRACKET,
                    tolerance: float = DEFAULT_TOLERANCE,
                    max_iter: int = None,
                    verbose: int = 0) -> float:
    """Computes the Darcy friction factor with the chosen root finder."""
    return solve_colebrook_white(method, epsilon, hydraulic_diameter, reynolds_number,
                                 bracket=bracket, tolerance=tolerance, max_iter=max_iter,
                                 verbose=verbose).root

def colebrook_white_bisection(epsilon, hydraulic_diameter, reynolds_number,
                              bracket=DEFAULT_BRACKET, tolerance=DEFAULT_TOLERANCE) -> float:
    return colebrook_white('bisection', epsilon, hydraulic_diameter, reynolds_number,
                           bracket=bracket, tolerance=tolerance)

def colebrook_white_brent(epsilon, hydraulic_diameter, reynolds_number,
                          bracket=DEFAULT_BRACKET, tolerance=DEFAULT_TOLERANCE) -> float:
    return colebrook_white('brent', epsilon, hydraulic_diameter, reynolds_number,
                           bracket=bracket, tolerance=tolerance)
