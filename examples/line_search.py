import logging

from numpy import array
from numpy import dot

from brentmin import find_bracket
from brentmin import local_minimum
from brentmin import refine_bracket

logging.basicConfig(level=logging.DEBUG)

# Exact line search of a convex quadratic along a descent direction.
A = array([[3.0, 0.5], [0.5, 1.0]])
b = array([1.0, -2.0])
x0 = array([4.0, 4.0])
direction = -(dot(A, x0) - b)


def phi(t, x, p):
    y = x + t * p
    return 0.5 * dot(y, dot(A, y)) - dot(b, y)


def dphi(t, x, p):
    y = x + t * p
    return dot(dot(A, y) - b, p)


r = find_bracket(phi, x0=0.0, a=0.0, args=(x0, direction))
print(r)

r = refine_bracket(phi, r.a, r.x, r.c, fa=r.fa, fb=r.fx, fc=r.fc,
                   args=(x0, direction))
print(r)

m = local_minimum(phi, r.a, r.x, r.c, df=dphi, fa=r.fa, fx=r.fx, fc=r.fc,
                  args=(x0, direction))
print(m)
print("Next iterate: %s" % (x0 + m.x * direction))
