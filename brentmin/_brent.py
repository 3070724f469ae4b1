import logging

from numpy import float64

from ._constants import MAX_ITERATIONS
from ._constants import TOL
from ._constants import constants
from ._errors import ConvergenceFailure
from ._errors import InvalidBracket
from ._result import MinimumResult
from ._search import SearchState
from ._search import check_bracket
from ._search import check_maxiter
from ._search import counted
from ._search import iterate
from ._search import sort_triplet


def _newton_correction(func, dfunc, state, u, fu, tol1):
    # A single Newton-Raphson step from the trial point, kept only when it
    # stays inside the bracket, close to u, and lowers the objective.
    real = state.consts.real
    du = real(dfunc(u))
    if du == 0.0:
        return (u, fu)

    un = u - fu / du
    if state.a < un < state.b and abs(un - u) < tol1:
        fun = real(func(un))
        if fun < fu:
            return (un, fun)

    return (u, fu)


def local_minimum(f, a, x, c, tol=TOL, df=None, fa=None, fx=None, fc=None,
                  args=(), maxiter=MAX_ITERATIONS, dtype=float64,
                  callback=None):
    """Locate a local minimum of ``f`` inside the bracket ``(a, x, c)``.

    The search stops as soon as one of the following holds:

    - ``x`` is within ``2 * tol1`` of the bracket midpoint, discounting half
      the bracket width, where ``tol1 = tol * |x0| + TOL``;
    - the bracket is narrower than ``tol1 / 10``;
    - the last step improved the best value by less than ``tol``;
    - the trial point lies within ``tol`` of the incumbent.

    When the derivative ``df`` is given, each trial point ``u`` is refined by
    a Newton-Raphson step ``u - f(u) / df(u)`` if that step is short, stays in
    the bracket and lowers ``f``.

    :param callable f: objective, called as ``f(x, *args)``.
    :param float a: one end of the bracket.
    :param float x: interior point with ``f(x)`` no larger than at both ends.
    :param float c: other end of the bracket; ``a > c`` is accepted.
    :param float tol: relative tolerance.
    :param callable df: derivative of ``f``, called as ``df(x, *args)``.
    :param fa: ``f(a)`` if already known. Same for ``fx`` and ``fc``.
    :param tuple args: extra arguments passed to ``f`` and ``df``.
    :param int maxiter: iteration budget.
    :param dtype: numpy floating type of every computed quantity.
    :param callable callback: called as ``callback(a, x, c, fx)`` after each
                              iteration.
    :return: a :class:`MinimumResult`. Its ``error`` is a
             :class:`ConvergenceFailure` instance when the budget ran out
             first; ``x`` and ``fx`` then hold the best estimate found.
    :raises InvalidBracket: when ``(a, x, c)`` does not bracket a minimum or
                            ``tol`` is not positive.
    """
    logger = logging.getLogger(__name__)
    consts = constants(dtype)
    real = consts.real
    check_maxiter(maxiter)

    if not tol > 0:
        raise InvalidBracket("The tolerance must be positive: %s." % tol)
    tol = real(tol)

    func = counted(f, args)

    def value(x, fx):
        return real(func(x) if fx is None else fx)

    a, x, c = real(a), real(x), real(c)
    fa, fx, fc = value(a, fa), value(x, fx), value(c, fc)
    (a, x, c, fa, fx, fc) = sort_triplet(a, x, c, fa, fx, fc)
    check_bracket(a, x, c, fa, fx, fc)

    logger.debug("Local minimum search has started on (%e, %e, %e).",
                 a, x, c)

    state = SearchState(a, x, c, fa, fx, fc, consts)

    tol1 = tol * abs(x) + consts.tol
    tol2 = 2 * tol1
    tol3 = tol1 / 10

    def tolerances(state):
        return (tol1, tol2)

    def converged(state, tol1, tol2):
        if state.bracket_converged(tol2):
            return True
        if state.width() < tol3:
            return True
        return state.improved and abs(state.fprev - state.fx) < tol

    if df is None:
        dfunc = None
    else:
        def dfunc(x):
            return df(x, *args)

    def post_step(state, u, fu, tol1):
        if dfunc is not None:
            (u, fu) = _newton_correction(func, dfunc, state, u, fu, tol1)
        if abs(state.x - u) < tol:
            return None
        return (u, fu)

    (nit, ok) = iterate(state, func, tolerances, converged, maxiter,
                        post_step=post_step, callback=callback)

    error = None
    if not ok:
        logger.warning("Local minimum search failed to converge after %d"
                       " iterations.", nit)
        error = ConvergenceFailure("Local minimum search failed to converge"
                                   " after %d iterations." % nit)
    else:
        logger.debug("Local minimum search has converged in %d iterations"
                     " (%d function calls).", nit, func.nfev)

    return MinimumResult(state.x, state.fx, nit, func.nfev, error)
