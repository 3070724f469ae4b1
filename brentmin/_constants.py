from collections import namedtuple
from math import sqrt

from numpy import dtype as _dtype
from numpy import float64

GOLDEN_RATIO = (1.0 + sqrt(5.0)) / 2.0
GOLDEN_SECTION = 1.0 / GOLDEN_RATIO
TINY = 1.0e-20
TOL = 1e-6
MAX_ITERATIONS = 100

Constants = namedtuple('Constants', ['real', 'golden_ratio', 'golden_section',
                                     'tiny', 'tol'])


def constants(dtype=float64):
    """Search constants expressed in the precision of ``dtype``.

    :param dtype: a numpy floating type, e.g. :class:`numpy.float32`.
    :return: a :class:`Constants` tuple whose first item is the scalar type
             used to cast every value handled by the search.
    """
    dt = _dtype(dtype)
    if dt.kind != 'f':
        raise TypeError("Only floating point precisions are supported: %s."
                        % str(dt))
    real = dt.type
    return Constants(real, real(GOLDEN_RATIO), real(GOLDEN_SECTION),
                     real(TINY), real(TOL))
