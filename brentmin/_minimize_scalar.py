import logging
from math import sqrt

from numpy import argmin
from numpy import finfo
from numpy import float64
from numpy import inf

from ._bracket import find_bracket
from ._brent import local_minimum
from ._constants import MAX_ITERATIONS
from ._constants import TOL
from ._result import MinimumResult
from ._search import counted

_sqrt_epsilon = sqrt(finfo(float).eps)


def find_minimum(f, x0=None, x1=None, a=-inf, b=+inf, df=None, tol=TOL,
                 gfactor=2, glimit=2**8, rtol=_sqrt_epsilon,
                 atol=_sqrt_epsilon, maxiter=500, args=(), dtype=float64):
    """Minimize ``f`` from one or two starting points, within ``[a, b]``.

    A bracket is first searched for downhill from the starting points (see
    :func:`find_bracket`) and then handed to :func:`local_minimum`. If no
    bracket is found, the lowest point visited is returned along with the
    bracket search diagnostic.

    :return: a :class:`MinimumResult` whose ``nfev`` counts every evaluation
             of ``f``, bracket search included.
    """
    logger = logging.getLogger(__name__)

    func = counted(f, args)
    dfunc = None if df is None else counted(df, args)

    r = find_bracket(func, x0=x0, x1=x1, a=a, b=b, gfactor=gfactor,
                     glimit=glimit, rtol=rtol, atol=atol, maxiter=maxiter)

    if not r.success:
        i = argmin(r.values)
        logger.debug("No bracket found; returning the lowest point visited.")
        return MinimumResult(r.bracket[i], r.values[i], r.nit, func.nfev,
                             r.error)

    (x0, x1, x2) = r.bracket
    (f0, f1, f2) = r.values

    m = local_minimum(func, x0, x1, x2, tol=tol, df=dfunc, fa=f0, fx=f1,
                      fc=f2, maxiter=MAX_ITERATIONS, dtype=dtype)

    return MinimumResult(m.x, m.fx, r.nit + m.nit, func.nfev, m.error)
