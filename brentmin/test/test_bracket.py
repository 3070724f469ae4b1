import pytest
from numpy.testing import assert_almost_equal

from brentmin import BracketNotFound
from brentmin import InvalidBracket
from brentmin import find_bracket


def _quadratic(x):
    return (x - 3.0)**2


def _assert_bracket(r, f):
    (a, x, c) = r.bracket
    (fa, fx, fc) = r.values
    assert a < x < c
    assert fa > fx < fc
    assert_almost_equal(fa, f(a))
    assert_almost_equal(fx, f(x))
    assert_almost_equal(fc, f(c))


def test_find_bracket_unbounded():
    r = find_bracket(_quadratic)
    assert r.success
    _assert_bracket(r, _quadratic)
    assert r.a < 3.0 < r.c
    assert r.nfev >= r.nit + 3


def test_find_bracket_single_start():
    r = find_bracket(_quadratic, x0=10.0)
    assert r.success
    _assert_bracket(r, _quadratic)
    assert r.a < 3.0 < r.c


def test_find_bracket_two_starts():
    r = find_bracket(_quadratic, x0=10.0, x1=9.0)
    assert r.success
    _assert_bracket(r, _quadratic)
    assert r.a < 3.0 < r.c


def test_find_bracket_bounded():
    r = find_bracket(_quadratic, a=-1.0, b=5.0)
    assert r.success
    _assert_bracket(r, _quadratic)
    assert -1.0 <= r.a
    assert r.c <= 5.0


def test_find_bracket_args():

    def f(x, m):
        return (x - m)**2

    r = find_bracket(f, x0=0.0, args=(-7.0,))
    assert r.success
    assert r.a < -7.0 < r.c


def test_find_bracket_minimum_on_bound():
    r = find_bracket(_quadratic, a=-1.0, b=2.0)
    assert not r.success
    assert isinstance(r.error, BracketNotFound)
    assert r.c == 2.0
    assert_almost_equal(r.fc, 1.0)

    with pytest.raises(BracketNotFound):
        r.check()


def test_find_bracket_invalid():
    with pytest.raises(InvalidBracket):
        find_bracket(_quadratic, a=1.0, b=1.0)

    with pytest.raises(InvalidBracket):
        find_bracket(_quadratic, x0=10.0, a=0.0, b=5.0)


@pytest.mark.parametrize('kwargs', [
    dict(x0=1.0, x1=1.0),
    dict(x0=0.0, rtol=0.0, atol=0.0),
    dict(gfactor=1.0),
    dict(gfactor=4.0, glimit=2.0),
    dict(maxiter=0),
    dict(rtol=-1e-3),
    dict(atol=-1e-3),
])
def test_find_bracket_invalid_parameters(kwargs):
    with pytest.raises(InvalidBracket):
        find_bracket(_quadratic, **kwargs)
