import logging

from numpy import float64

from ._constants import MAX_ITERATIONS
from ._constants import constants
from ._errors import BracketNotFound
from ._result import BracketResult
from ._search import SearchState
from ._search import check_bracket
from ._search import check_maxiter
from ._search import counted
from ._search import iterate
from ._search import sort_triplet


def refine_bracket(f, a, b, c, fa=None, fb=None, fc=None, args=(),
                   maxiter=MAX_ITERATIONS, dtype=float64, callback=None):
    """Shrink a bracketing triplet around a local minimum of ``f``.

    Brent's hybrid of golden section search and inverse parabolic
    interpolation is run until the middle point sits within
    ``TOL * |x| + TINY`` of the bracket midpoint relative to its half width.

    :param callable f: objective, called as ``f(x, *args)``.
    :param float a: one end of the bracket.
    :param float b: interior point with ``f(b)`` no larger than at both ends.
    :param float c: other end of the bracket; ``a > c`` is accepted.
    :param fa: ``f(a)`` if already known. Same for ``fb`` and ``fc``.
    :param tuple args: extra arguments passed to ``f``.
    :param int maxiter: iteration budget.
    :param dtype: numpy floating type of every computed quantity.
    :param callable callback: called as ``callback(a, x, c, fx)`` after each
                              iteration.
    :return: a :class:`BracketResult` in increasing order. Its ``error`` is a
             :class:`BracketNotFound` instance when the budget ran out before
             the triplet got tight enough.
    :raises InvalidBracket: when ``(a, b, c)`` does not bracket a minimum.
    """
    logger = logging.getLogger(__name__)
    consts = constants(dtype)
    real = consts.real
    check_maxiter(maxiter)

    func = counted(f, args)

    def value(x, fx):
        return real(func(x) if fx is None else fx)

    a, b, c = real(a), real(b), real(c)
    fa, fb, fc = value(a, fa), value(b, fb), value(c, fc)
    (a, b, c, fa, fb, fc) = sort_triplet(a, b, c, fa, fb, fc)
    check_bracket(a, b, c, fa, fb, fc)

    logger.debug("Bracket refinement has started on (%e, %e, %e).", a, b, c)

    state = SearchState(a, b, c, fa, fb, fc, consts)

    def tolerances(state):
        tol1 = consts.tol * abs(state.x) + consts.tiny
        return (tol1, 2 * tol1)

    def converged(state, tol1, tol2):
        return state.bracket_converged(tol2)

    (nit, ok) = iterate(state, func, tolerances, converged, maxiter,
                        callback=callback)

    error = None
    if not ok:
        logger.warning("Bracket refinement failed to find a bracket after"
                       " %d iterations.", nit)
        error = BracketNotFound("Bracket refinement failed to find a bracket"
                                " after %d iterations." % nit)
    else:
        logger.debug("Bracket refinement has converged in %d iterations"
                     " (%d function calls).", nit, func.nfev)

    return BracketResult(state.a, state.x, state.b, state.fa, state.fx,
                         state.fb, nit, func.nfev, error)
