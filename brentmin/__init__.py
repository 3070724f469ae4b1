from importlib.metadata import version as _version

from ._bracket import find_bracket
from ._brent import local_minimum
from ._constants import GOLDEN_RATIO
from ._constants import GOLDEN_SECTION
from ._constants import MAX_ITERATIONS
from ._constants import TINY
from ._constants import TOL
from ._constants import constants
from ._errors import BracketNotFound
from ._errors import ConvergenceFailure
from ._errors import InvalidBracket
from ._errors import MinimizationError
from ._minimize_scalar import find_minimum
from ._refine import refine_bracket
from ._result import BracketResult
from ._result import MinimumResult

__version__ = _version('brentmin')


def test():
    import os
    p = __import__('brentmin').__path__[0]
    src_path = os.path.abspath(p)
    old_path = os.getcwd()
    os.chdir(src_path)

    try:
        return_code = __import__('pytest').main([])
    finally:
        os.chdir(old_path)

    return return_code

__all__ = ['test', 'refine_bracket', 'local_minimum', 'find_bracket',
           'find_minimum', 'constants', 'BracketResult', 'MinimumResult',
           'MinimizationError', 'InvalidBracket', 'BracketNotFound',
           'ConvergenceFailure', 'GOLDEN_RATIO', 'GOLDEN_SECTION', 'TINY',
           'TOL', 'MAX_ITERATIONS']
