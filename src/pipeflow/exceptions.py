class PipeFlowError(Exception):
    """Base class for errors raised by pipeflow."""


class InvalidParameterError(PipeFlowError, ValueError):
    """A physical parameter leaves the equation undefined."""


class BracketError(PipeFlowError, ValueError):
    """The bracket does not satisfy the root-finding precondition."""


class ResidualDomainError(PipeFlowError, ArithmeticError):
    """The residual is undefined at the trial value."""


class ConvergenceError(PipeFlowError, RuntimeError):
    """The iteration budget was exhausted before the tolerance was met.

    Attributes
    ----------
    method : str
        Name of the root finder.
    iterations : int
        Iterations performed.
    estimate : float
        Last estimate of the root. Not returned as a result.
    """
    def __init__(self, method: str, iterations: int, estimate: float):
        self.method = method
        self.iterations = iterations
        self.estimate = estimate
        super().__init__(f'{method}: convergence within {iterations} iterations couldn\'t be achieved '
                         f'(last estimate = {estimate}).')
