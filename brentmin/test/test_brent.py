import logging
from math import cos
from math import pi
from math import sin

import pytest
from numpy import float32
from numpy import isfinite
from numpy.testing import assert_almost_equal

from brentmin import ConvergenceFailure
from brentmin import InvalidBracket
from brentmin import MAX_ITERATIONS
from brentmin import constants
from brentmin import local_minimum
from brentmin._brent import _newton_correction
from brentmin._search import SearchState


def _parabola(m):

    def f(x):
        return (x - m)**2

    def df(x):
        return 2 * (x - m)

    return (f, df)


@pytest.mark.parametrize('m', [-3.5, 0.0, 2.0, 10.0])
def test_local_minimum_quadratic(m):
    (f, _) = _parabola(m)
    r = local_minimum(f, m - 5, m - 1, m + 5, tol=1e-6)
    assert r.success
    assert abs(r.x - m) < 1e-4
    assert abs(r.fx) < 1e-6
    assert r.nit < 30


def test_local_minimum_symmetry():
    (f, _) = _parabola(2.0)
    r = local_minimum(f, 0.0, 1.0, 5.0)
    assert r.success
    assert_almost_equal(r.x, 2.0, decimal=4)
    assert_almost_equal(r.fx, 0.0, decimal=6)


def test_local_minimum_reversed_order():
    (f, _) = _parabola(2.0)
    r = local_minimum(f, 5.0, 1.0, 0.0)
    assert r.success
    assert_almost_equal(r.x, 2.0, decimal=4)


@pytest.mark.parametrize('m', [-3.5, 2.0, 10.0])
def test_local_minimum_derivative(m):
    (f, df) = _parabola(m)

    calls = []

    def dfc(x):
        calls.append(x)
        return df(x)

    r0 = local_minimum(f, m - 5, m - 1, m + 5, tol=1e-6)
    r1 = local_minimum(f, m - 5, m - 1, m + 5, tol=1e-6, df=dfc)

    assert r1.success
    assert len(calls) > 0
    assert r1.nit <= r0.nit
    assert r1.fx <= r0.fx
    assert abs(r1.x - m) < 1e-4


def test_local_minimum_monotone():
    (f, df) = _parabola(3.0)
    history = []

    def callback(a, x, b, fx):
        history.append((a, x, b, fx))

    r = local_minimum(f, -2.0, 2.0, 8.0, df=df, callback=callback)
    assert r.success
    assert len(history) > 0

    previous = f(2.0)
    for (a, x, b, fx) in history:
        assert a < x < b
        assert fx <= f(a)
        assert fx <= f(b)
        assert fx <= previous
        previous = fx


def test_local_minimum_idempotent():
    (f, _) = _parabola(1.25)
    r0 = local_minimum(f, -5.0, 0.0, 5.0)
    r1 = local_minimum(f, r0.x - 0.1, r0.x, r0.x + 0.1)
    assert r1.success
    assert abs(r1.x - r0.x) < 1e-4


def test_local_minimum_sin():
    r = local_minimum(sin, 3.0, 4.5, 6.0, df=cos)
    assert r.success
    assert_almost_equal(r.x, 3 * pi / 2, decimal=3)
    assert_almost_equal(r.fx, -1.0, decimal=6)


def test_local_minimum_args():

    def f(x, m, s):
        return s * (x - m)**2

    def df(x, m, s):
        return 2 * s * (x - m)

    r = local_minimum(f, 0.0, 1.0, 5.0, df=df, args=(2.5, 3.0))
    assert r.success
    assert_almost_equal(r.x, 2.5, decimal=4)


def test_local_minimum_budget_exhausted(caplog):
    (f, _) = _parabola(3.0)

    with caplog.at_level(logging.WARNING):
        r = local_minimum(f, -2.0, 2.0, 8.0, maxiter=3)

    assert not r.success
    assert isinstance(r.error, ConvergenceFailure)
    assert r.nit == 3
    assert r.nfev == 6
    assert isfinite(r.x)
    assert isfinite(r.fx)
    assert -2.0 < r.x < 8.0
    assert r.fx <= f(2.0)
    assert "failed to converge" in caplog.text

    with pytest.raises(ConvergenceFailure):
        r.check()


def test_local_minimum_default_budget_exhausted(caplog):

    def f(x):
        # Decreasing towards 0, where it jumps back up: no minimum is
        # attained.
        return -x if x < 0.0 else 1.0

    with caplog.at_level(logging.WARNING):
        r = local_minimum(f, -1e20, -1e-3, 0.0)

    assert not r.success
    assert isinstance(r.error, ConvergenceFailure)
    assert r.nit == MAX_ITERATIONS
    assert r.nfev == MAX_ITERATIONS + 3
    assert r.x == -1e-3
    assert_almost_equal(r.fx, 1e-3)
    assert "after %d iterations" % MAX_ITERATIONS in caplog.text


def test_local_minimum_single_precision():
    (f, df) = _parabola(2.0)
    r = local_minimum(f, 0.0, 1.0, 5.0, df=df, dtype=float32)
    assert r.success
    assert isinstance(r.x, float32)
    assert abs(r.x - 2.0) < 1e-3


def test_local_minimum_scipy_agreement():
    minimize_scalar = pytest.importorskip('scipy.optimize').minimize_scalar

    def f(x):
        return x**4 - 3 * x**3 + 2

    r = local_minimum(f, 1.0, 2.0, 3.0)
    s = minimize_scalar(f, bracket=(1.0, 2.0, 3.0), method='brent')
    assert r.success
    assert_almost_equal(r.x, s.x, decimal=3)
    assert_almost_equal(r.fx, s.fun, decimal=5)


def test_local_minimum_invalid():
    (f, _) = _parabola(2.0)

    with pytest.raises(InvalidBracket):
        local_minimum(f, 0.0, 4.5, 5.0)

    with pytest.raises(InvalidBracket):
        local_minimum(f, 0.0, 1.0, 5.0, tol=0.0)

    with pytest.raises(InvalidBracket):
        local_minimum(f, 0.0, 1.0, 5.0, maxiter=0)

    with pytest.raises(InvalidBracket):
        local_minimum(f, 0.0, 1.0, 5.0, fa=float('nan'))


def test_newton_correction():
    consts = constants()
    (f, df) = _parabola(2.0)
    state = SearchState(0.0, 1.0, 4.0, f(0.0), f(1.0), f(4.0), consts)

    (u, fu) = _newton_correction(f, df, state, 2.1, f(2.1), 0.1)
    assert_almost_equal(u, 2.05)
    assert_almost_equal(fu, f(2.05))

    (u, fu) = _newton_correction(f, df, state, 2.1, f(2.1), 0.01)
    assert u == 2.1

    (u, fu) = _newton_correction(f, lambda x: 0.0, state, 2.1, f(2.1), 0.1)
    assert u == 2.1

    (u, fu) = _newton_correction(f, df, state, 3.99, f(3.99), 10.0)
    assert_almost_equal(u, 2.995)
