"""Iteration skeleton shared by the bracket refiner and the local minimizer.

Both routines keep the same bookkeeping (Brent's method): the current best
abscissa ``x``, the second best ``w``, the third best ``v``, the bracket
bounds ``a < x < b``, the last step ``d`` and the step before it ``e``. They
only differ in how they decide to stop and in what they do with a freshly
evaluated trial point.
"""
from numpy import isfinite

from ._errors import InvalidBracket


def counted(f, args=()):
    """Wrap ``f`` so that calls are made as ``f(x, *args)`` and counted."""

    def func(x):
        func.nfev += 1
        return f(x, *args)
    func.nfev = 0

    return func


def _parabolic_step(x, w, v, fx, fw, fv):
    # x: best
    # w: second best
    # v: third best

    r = (x - w) * (fx - fv)
    q = (x - v) * (fx - fw)
    p = (x - v) * q - (x - w) * r
    q = 2.0 * (q - r)
    if q > 0.0:
        p = -p
    q = abs(q)
    return (p, q)


class SearchState(object):

    def __init__(self, a, x, b, fa, fx, fb, consts):
        self.consts = consts
        self.a, self.b = a, b
        self.fa, self.fb = fa, fb
        self.x = self.w = self.v = x
        self.fx = self.fw = self.fv = fx
        self.fprev = fx
        self.improved = False
        zero = consts.real(0.0)
        self.d = zero
        self.e = zero

    def midpoint(self):
        return self.consts.real(0.5) * (self.a + self.b)

    def width(self):
        return self.b - self.a

    def bracket_converged(self, tol2):
        xm = self.midpoint()
        half = self.consts.real(0.5)
        return abs(self.x - xm) <= tol2 - half * (self.b - self.a)

    def _golden_step(self, xm):
        if self.x < xm:
            self.e = self.b - self.x
        else:
            self.e = self.a - self.x
        self.d = self.consts.golden_section * self.e

    def trial_point(self, tol1, tol2):
        """Choose the next abscissa to evaluate.

        Inverse parabolic interpolation through ``(v, w, x)`` is used when
        the step before last was long enough to trust it and the resulting
        step falls inside the bracket and is less than half of that step.
        Otherwise a golden section step is taken into the larger of
        ``[a, x]`` and ``[x, b]``. The returned point is never closer than
        ``tol1`` to ``x``.
        """
        real = self.consts.real
        a, b, x = self.a, self.b, self.x
        xm = self.midpoint()

        if abs(self.e) > tol1:
            (p, q) = _parabolic_step(x, self.w, self.v,
                                     self.fx, self.fw, self.fv)
            etemp = self.e
            self.e = self.d
            if (abs(p) < abs(real(0.5) * q * etemp) and p > q * (a - x) and
                    p < q * (b - x)):
                self.d = p / q
                u = x + self.d
                # do not evaluate too close to the bounds
                if u - a < tol2 or b - u < tol2:
                    self.d = tol1 if x < xm else -tol1
            else:
                self._golden_step(xm)
        else:
            self._golden_step(xm)

        if abs(self.d) >= tol1:
            return x + self.d
        return x + (tol1 if self.d > 0.0 else -tol1)

    def update(self, u, fu):
        """Fold the evaluated trial point ``(u, fu)`` into the bracket."""
        self.improved = fu <= self.fx
        if self.improved:
            if u >= self.x:
                self.a, self.fa = self.x, self.fx
            else:
                self.b, self.fb = self.x, self.fx
            self.v, self.fv = self.w, self.fw
            self.w, self.fw = self.x, self.fx
            self.fprev = self.fx
            self.x, self.fx = u, fu
            return

        if u >= self.x:
            self.b, self.fb = u, fu
        else:
            self.a, self.fa = u, fu

        if fu <= self.fw or self.w == self.x:
            self.v, self.fv = self.w, self.fw
            self.w, self.fw = u, fu
        elif fu <= self.fv or self.v == self.x or self.v == self.w:
            self.v, self.fv = u, fu


def iterate(state, func, tolerances, converged, maxiter, post_step=None,
            callback=None):
    """Run the shared Brent loop.

    :param state: a :class:`SearchState`.
    :param func: counted objective taking a single abscissa.
    :param tolerances: ``tolerances(state) -> (tol1, tol2)``.
    :param converged: ``converged(state, tol1, tol2) -> bool``, checked at
                      the top of every iteration.
    :param post_step: optional ``post_step(state, u, fu, tol1)`` returning
                      either a possibly corrected ``(u, fu)`` pair or
                      ``None`` to stop on the incumbent.
    :param callback: optional ``callback(a, x, b, fx)`` called after every
                     bookkeeping update.
    :return: the pair ``(nit, converged)``.
    """
    real = state.consts.real
    for nit in range(maxiter):
        (tol1, tol2) = tolerances(state)
        if converged(state, tol1, tol2):
            return (nit, True)

        u = state.trial_point(tol1, tol2)
        fu = real(func(u))

        if post_step is not None:
            r = post_step(state, u, fu, tol1)
            if r is None:
                return (nit + 1, True)
            (u, fu) = r

        state.update(u, fu)

        if callback is not None:
            callback(state.a, state.x, state.b, state.fx)

    return (maxiter, False)


def sort_triplet(a, x, c, fa, fx, fc):
    if a > c:
        return (c, x, a, fc, fx, fa)
    return (a, x, c, fa, fx, fc)


def check_bracket(a, x, c, fa, fx, fc):
    """Raise :class:`InvalidBracket` unless ``a < x < c`` brackets a minimum.

    The triplet must already be in increasing order.
    """
    if not all(isfinite([a, x, c])):
        raise InvalidBracket("There are non-finite numbers in the provided"
                             " triplet: (%s, %s, %s)." % (a, x, c))

    if not (a < x < c):
        raise InvalidBracket("The middle point %s does not lie strictly"
                             " between %s and %s." % (x, a, c))

    if not all(isfinite([fa, fx, fc])):
        raise InvalidBracket("The function is not finite on the provided"
                             " triplet: (%s, %s, %s)." % (fa, fx, fc))

    if fx > fa or fx > fc:
        raise InvalidBracket("The triplet does not bracket a minimum:"
                             " f(%s)=%s is larger than f(%s)=%s or"
                             " f(%s)=%s." % (x, fx, a, fa, c, fc))


def check_maxiter(maxiter):
    if maxiter < 1:
        raise InvalidBracket("The iteration budget must be positive: %d."
                             % maxiter)
