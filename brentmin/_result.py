from tabulate import tabulate


class _Result(object):

    def __init__(self, nit, nfev, error):
        self.nit = nit
        self.nfev = nfev
        self.error = error

    @property
    def success(self):
        return self.error is None

    def check(self):
        """Raise the attached diagnostic, if any, and return ``self``."""
        if self.error is not None:
            raise self.error
        return self

    def _status(self):
        if self.error is None:
            return "success"
        return "%s: %s" % (type(self.error).__name__, str(self.error))


class BracketResult(_Result):
    """Bracketing triplet ``a < x < c`` and its function values."""

    def __init__(self, a, x, c, fa, fx, fc, nit, nfev, error=None):
        super(BracketResult, self).__init__(nit, nfev, error)
        self.a = a
        self.x = x
        self.c = c
        self.fa = fa
        self.fx = fx
        self.fc = fc

    @property
    def bracket(self):
        return (self.a, self.x, self.c)

    @property
    def values(self):
        return (self.fa, self.fx, self.fc)

    def __repr__(self):
        return ("BracketResult(bracket=%r, values=%r, nit=%d, nfev=%d,"
                " error=%r)" % (self.bracket, self.values, self.nit,
                                self.nfev, self.error))

    def __str__(self):
        table = [('a', self.a, self.fa), ('x', self.x, self.fx),
                 ('c', self.c, self.fc)]
        s = tabulate(table, headers=('Point', 'Abscissa', 'Value'),
                     floatfmt='.8g')
        return s + "\nIterations: %d, evaluations: %d, status: %s" % (
            self.nit, self.nfev, self._status())


class MinimumResult(_Result):
    """Estimated location ``x`` of a local minimum and ``fx = f(x)``."""

    def __init__(self, x, fx, nit, nfev, error=None):
        super(MinimumResult, self).__init__(nit, nfev, error)
        self.x = x
        self.fx = fx

    def __repr__(self):
        return "MinimumResult(x=%r, fx=%r, nit=%d, nfev=%d, error=%r)" % (
            self.x, self.fx, self.nit, self.nfev, self.error)

    def __str__(self):
        table = [('x', self.x), ('f(x)', self.fx), ('Iterations', self.nit),
                 ('Evaluations', self.nfev), ('Status', self._status())]
        return tabulate(table, floatfmt='.8g')
