"""
Newton-Raphson method with an exact or finite difference derivative.
"""
import logging
from collections.abc import Callable

import numpy as np

from zerofun.solve._numeric import (check_count, check_step, check_tol,
                                    fval, quiet_errstate)
from zerofun.solve.base import RootSolver

_log = logging.getLogger(__name__)


# ======================================================================

class Newton(RootSolver):
    r"""
    Newton-Raphson method :math:`x_{n+1} = x_n - f(x_n) / f'(x_n)`
    starting from `x0`.

    Iteration stops when :math:`|f(x_{n+1})| < tola` or
    :math:`|x_{n+1} - x_n| < tol`.  If `max_it` is reached the last
    point is returned.  There is no guard against a zero derivative; in
    that case the result will be `Inf` or `NaN`.

    Examples
    --------
    >>> Newton(lambda x: x, lambda x: 1.0, x0=0.5, tol=1e-8, tola=1e-10,
    ...        max_it=10).solve()
    0.0
    """

    def __init__(self, f: Callable[[float], float],
                 df: Callable[[float], float], x0: float, tol: float,
                 tola: float, max_it: int, *,
                 logger: logging.Logger = None):
        """
        Parameters
        ----------
        f : Callable[[float], float]
            Function to find the zero of.
        df : Callable[[float], float]
            Derivative of `f`.
        x0 : float
            Starting point.
        tol : float
            Tolerance on the step size (>= 0).
        tola : float
            Tolerance on the residual ``|f(x)|`` (>= 0).
        max_it : int
            Iteration limit.
        logger : logging.Logger, optional
            Receives iteration details at DEBUG level.
        """
        super().__init__(f, tol)
        self._df = df
        self._x0 = x0
        self._tola = check_tol('tola', tola)
        self._max_it = check_count('max_it', max_it)
        self._log = logger or _log

    # -- Public Methods ------------------------------------------------

    @property
    def df(self) -> Callable[[float], float]:
        """Derivative function."""
        return self._df

    @property
    def max_it(self) -> int:
        """Iteration limit."""
        return self._max_it

    def solve(self) -> float:
        self.its = 0
        x = np.float64(self._x0)
        with quiet_errstate():
            for it in range(1, self._max_it + 1):
                self.its = it
                x_new = x - fval(self._f, x) / fval(self._df, x)
                f_new = fval(self._f, x_new)
                self._log.debug("%s iteration %d: x = %s, f(x) = %s",
                                type(self).__name__, it, x_new, f_new)

                if abs(f_new) < self._tola or abs(x_new - x) < self._tol:
                    return float(x_new)
                x = x_new

        return float(x)

    @property
    def tola(self) -> float:
        """Absolute tolerance on the residual."""
        return self._tola

    @property
    def x0(self) -> float:
        """Starting point."""
        return self._x0


# ----------------------------------------------------------------------

class QuasiNewton(Newton):
    r"""
    Newton's method using the centred finite difference

    .. math:: f'(x) \approx \frac{f(x + h) - f(x - h)}{2h}

    in place of the exact derivative.  The step `h` is fixed; the
    derivative error is :math:`O(h^2)` from truncation plus
    :math:`O(\epsilon / h)` from cancellation.
    """

    def __init__(self, f: Callable[[float], float], x0: float, h: float,
                 tol: float, tola: float, max_it: int, *,
                 logger: logging.Logger = None):
        """
        Parameters
        ----------
        f, x0, tol, tola, max_it, logger :
            See `Newton`.
        h : float
            Finite difference step (> 0).
        """
        self._h = check_step('h', h)
        super().__init__(f, central_difference(f, self._h), x0, tol, tola,
                         max_it, logger=logger)

    @property
    def h(self) -> float:
        """Finite difference step."""
        return self._h


# ======================================================================

def central_difference(f: Callable[[float], float],
                       h: float) -> Callable[[float], float]:
    """
    Return a function giving the centred finite difference approximation
    to the derivative of `f` with step `h` (> 0).
    """
    h = check_step('h', h)

    def df(x: float) -> float:
        with quiet_errstate():
            return (fval(f, x + h) - fval(f, x - h)) / (2.0 * h)

    return df
