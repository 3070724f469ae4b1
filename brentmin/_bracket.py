import logging
from math import sqrt

from numpy import finfo
from numpy import inf
from numpy import isfinite
from numpy import sign

from ._errors import BracketNotFound
from ._errors import InvalidBracket
from ._result import BracketResult
from ._search import _parabolic_step
from ._search import check_maxiter
from ._search import counted

_sqrt_epsilon = sqrt(finfo(float).eps)


def find_bracket(f, x0=None, x1=None, a=-inf, b=+inf, gfactor=2, glimit=2**8,
                 rtol=_sqrt_epsilon, atol=_sqrt_epsilon, maxiter=500,
                 args=()):
    """Find a triplet bracketing a local minimum of ``f`` by going downhill.

    Starting from ``x0`` and ``x1`` (either or both may be omitted), the
    search keeps stepping in the descending direction, extrapolating a
    parabola through the last three points when that gives a sensible step
    and growing the step by ``gfactor`` otherwise. Steps never go beyond the
    hard bounds ``a`` and ``b``.

    :param callable f: objective, called as ``f(x, *args)``.
    :param float x0: first starting point.
    :param float x1: second starting point.
    :param float a: lower bound of the search.
    :param float b: upper bound of the search.
    :param float gfactor: step growing factor.
    :param float glimit: maximum step growth relative to the previous step.
    :param float rtol: relative tolerance.
    :param float atol: absolute tolerance.
    :param int maxiter: maximum number of steps.
    :param tuple args: extra arguments passed to ``f``.
    :return: a :class:`BracketResult` in increasing order. Its ``error`` is a
             :class:`BracketNotFound` instance when no point lower than both
             its neighbours was found, which happens when the minimum lies on
             a bound or the budget ran out.
    """
    if not (a < b):
        raise InvalidBracket("The lower bound %s must be smaller than the"
                             " upper bound %s." % (a, b))

    func = counted(f, args)

    x = sorted([xi for xi in [x0, x1] if xi is not None])

    if len(x) == 0:
        x0 = min(max(0, a), b)
    else:
        x0 = x[0]

    if len(x) == 2:
        x1 = x[1]
    elif x0 - a > b - x0:
        x1 = x0 - (abs(x0) * rtol + atol)
    else:
        x1 = x0 + (abs(x0) * rtol + atol)

    if not (a <= x0 <= b and a <= x1 <= b):
        raise InvalidBracket("The starting points %s and %s must lie in"
                             " [%s, %s]." % (x0, x1, a, b))

    if x0 == x1:
        raise InvalidBracket("The starting points must differ: %s." % x0)

    if not (gfactor > 1 and glimit >= gfactor):
        raise InvalidBracket("The growing factor %s must exceed 1 and must"
                             " not exceed the growth limit %s."
                             % (gfactor, glimit))

    if not (rtol >= 0 and atol >= 0):
        raise InvalidBracket("The tolerances must not be negative: rtol=%s,"
                             " atol=%s." % (rtol, atol))

    check_maxiter(maxiter)

    f0 = func(x0)
    f1 = func(x1)
    (x, fx, nit) = _downhill(func, x0, x1, f0, f1, a, b, gfactor, glimit,
                             rtol, atol, maxiter)

    error = None
    if not (fx[0] > fx[1] < fx[2]):
        logger = logging.getLogger(__name__)
        logger.warning("Downhill search failed to find a bracket after %d"
                       " steps.", nit)
        error = BracketNotFound("Downhill search failed to find a bracket"
                                " after %d steps." % nit)

    return BracketResult(x[0], x[1], x[2], fx[0], fx[1], fx[2], nit,
                         func.nfev, error)


def _walk(f, x0, x1, f0, f1, bound, gfactor, glimit, rtol, atol, maxiter):
    # Keeps stepping from x1 away from x0 until the last three points
    # bracket a minimum or the walk stops at ``bound``.
    s = sign(x1 - x0)

    if isfinite(bound):
        stop = s * bound - (rtol*abs(bound) + atol)
    else:
        stop = inf

    def clip(u):
        return bound if s * u >= stop else u

    xs = [x0, x1, clip(x1 + (x1 - x0) * gfactor)]
    fs = [f0, f1, f(xs[2])]

    nfails = 0
    nit = 0
    while not (fs[0] > fs[1] < fs[2]) and xs[2] != bound and nit < maxiter:
        nit += 1
        step = xs[2] - xs[1]

        d = None
        if nfails < 2:
            (p, q) = _parabolic_step(xs[2], xs[1], xs[0], fs[2], fs[1], fs[0])
            d = p / q if q > 0.0 else 0.0
            if (abs(d) >= rtol*abs(xs[2]) + atol and d * s > 0
                    and abs(d) <= glimit * abs(step)):
                nfails = 0
            else:
                d = None
                nfails += 1

        if d is None:
            d = s * gfactor * abs(step)

        u = clip(xs[2] + d)
        xs = xs[1:] + [u]
        fs = fs[1:] + [f(u)]

    order = sorted(range(3), key=xs.__getitem__)
    return ([xs[i] for i in order], [fs[i] for i in order], nit)


def _downhill(f, x0, x1, f0, f1, a, b, gfactor, glimit, rtol, atol, maxiter):
    if f1 > f0:
        x0, x1 = x1, x0
        f0, f1 = f1, f0

    # An uphill start within tolerance of its bound is moved onto it.
    if x0 < x1:
        (back, ahead) = (a, b)
        near = isfinite(a) and x0 <= a + rtol*abs(a) + atol
    else:
        (back, ahead) = (b, a)
        near = isfinite(b) and x0 >= b - rtol*abs(b) - atol

    if near:
        x0 = back
        f0 = f(x0)

    return _walk(f, x0, x1, f0, f1, ahead, gfactor, glimit, rtol, atol,
                 maxiter)
