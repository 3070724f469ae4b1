class MinimizationError(Exception):
    """Base class of every error reported by the minimization routines."""


class InvalidBracket(MinimizationError, ValueError):
    """
    Raised when the points handed to a routine do not form a bracketing
    triplet ``a < x < c`` with ``f(x) <= f(a)`` and ``f(x) <= f(c)``, or when
    a search parameter is out of range.
    """


class BracketNotFound(MinimizationError):
    """
    The iteration budget ran out before a bracket tight enough (or, for the
    downhill search, any bracket) was found. Attached to the returned result,
    which still holds the best triplet known.
    """


class ConvergenceFailure(MinimizationError):
    """
    The local minimum search ran out of iterations before any convergence
    test fired. Attached to the returned result, which still holds the best
    estimate known.
    """
