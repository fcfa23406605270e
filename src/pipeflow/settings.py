############                Colebrook-White Constants           ############

COLEBROOK_ROUGHNESS_DIVISOR = 3.7
COLEBROOK_REYNOLDS_COEFFICIENT = 2.51

############                Solver Defaults                     ############

DEFAULT_BRACKET = (1e-4, 1.0)
DEFAULT_TOLERANCE = 1e-8

BRENT_MAX_ITER = 100
BISECTION_ITER_MARGIN = 10   # extra halvings on top of log2(width / tolerance)
