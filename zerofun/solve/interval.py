"""
Bisection, false position (regula falsi) and secant methods.
"""
import logging
from collections.abc import Callable

import numpy as np

from zerofun.solve._numeric import (check_count, check_tol, fval,
                                    quiet_errstate, same_sign)
from zerofun.solve.base import (DEFAULT_H_INTERVAL, DEFAULT_MAX_ITER,
                                IntervalSolver)

_log = logging.getLogger(__name__)


# ======================================================================

class Bisection(IntervalSolver):
    r"""
    Bisection method.  The interval is halved at each iteration, keeping
    the half where `f` changes sign.  This always converges for a
    continuous function, with the interval width after `k` iterations
    being exactly :math:`(b - a) / 2^k`.

    Examples
    --------
    >>> f = lambda x: (2 * x - 1) * (x - 3)
    >>> Bisection(f, 0.0, 1.0, tol=1e-6).solve()  # Root at the centre.
    0.5
    """

    def __init__(self, f: Callable[[float], float], a: float, b: float,
                 tol: float, h_interval: float = DEFAULT_H_INTERVAL,
                 max_iter: int = DEFAULT_MAX_ITER, *, max_it: int = 1000,
                 logger: logging.Logger = None):
        """
        Parameters
        ----------
        f, a, b, tol, h_interval, max_iter, logger :
            See `IntervalSolver`.  Iteration stops when the half-width
            ``|b - a| / 2 < tol``.
        max_it : int, default = 1000
            Iteration limit.  Only reached when `tol` is smaller than
            can be resolved in floating point.
        """
        super().__init__(f, a, b, tol, h_interval, max_iter, logger=logger)
        self._max_it = check_count('max_it', max_it)
        self._log = logger or _log

    @property
    def max_it(self) -> int:
        """Iteration limit."""
        return self._max_it

    def solve(self) -> float:
        if self._no_bracket():
            return np.nan

        a, b = self._a, self._b
        with quiet_errstate():
            f_a = fval(self._f, a)
            x_m = 0.5 * (a + b)
            for it in range(1, self._max_it + 1):
                self.its = it
                x_m = 0.5 * (a + b)
                f_m = fval(self._f, x_m)
                self._log.debug("Bisection iteration %d: x = [%s, %s, %s], "
                                "f(x_m) = %s", it, a, x_m, b, f_m)

                if f_m == 0 or 0.5 * abs(b - a) < self._tol:
                    return float(x_m)

                # Midpoint no longer distinct from the ends.
                if x_m == a or x_m == b:
                    return float(x_m)

                # Keep the half where the sign changes.
                if same_sign(f_a, f_m):
                    a, f_a = x_m, f_m
                else:
                    b = x_m

        return float(x_m)


# ----------------------------------------------------------------------

class RegulaFalsi(IntervalSolver):
    """
    False position (regula falsi) method.  The next point is where the
    straight line joining ``(a, f(a))`` and ``(b, f(b))`` crosses zero,
    and it replaces the interval end with the same sign of `f`.

    Notes
    -----
    For strongly convex or concave functions one end of the interval can
    remain fixed for many iterations so the width never drops below
    `tol`.  In this case convergence is decided by the residual
    ``|f(x)| < tola``.
    """

    def __init__(self, f: Callable[[float], float], a: float, b: float,
                 tol: float, tola: float,
                 h_interval: float = DEFAULT_H_INTERVAL,
                 max_iter: int = DEFAULT_MAX_ITER, *, max_it: int = 1000,
                 logger: logging.Logger = None):
        """
        Parameters
        ----------
        f, a, b, tol, h_interval, max_iter, logger :
            See `IntervalSolver`.  `tol` applies to the interval width
            ``|b - a|``.
        tola : float
            Absolute tolerance on the residual ``|f(x)|``.
        max_it : int, default = 1000
            Iteration limit.
        """
        super().__init__(f, a, b, tol, h_interval, max_iter, logger=logger)
        self._tola = check_tol('tola', tola)
        self._max_it = check_count('max_it', max_it)
        self._log = logger or _log

    @property
    def max_it(self) -> int:
        """Iteration limit."""
        return self._max_it

    @property
    def tola(self) -> float:
        """Absolute tolerance on the residual."""
        return self._tola

    def solve(self) -> float:
        if self._no_bracket():
            return np.nan

        a, b = self._a, self._b
        with quiet_errstate():
            f_a, f_b = fval(self._f, a), fval(self._f, b)
            if f_b == 0:  # Includes a degenerate bracket a == b.
                return float(b)
            x = a
            for it in range(1, self._max_it + 1):
                self.its = it
                x = a - f_a * (b - a) / (f_b - f_a)
                f_x = fval(self._f, x)
                self._log.debug("RegulaFalsi iteration %d: x = [%s, %s, %s], "
                                "f(x) = %s", it, a, x, b, f_x)

                if (f_x == 0 or abs(f_x) < self._tola or
                        abs(b - a) < self._tol):
                    return float(x)

                if same_sign(f_a, f_x):
                    a, f_a = x, f_x
                else:
                    b, f_b = x, f_x

        return float(x)


# ----------------------------------------------------------------------

class Secant(IntervalSolver):
    """
    Secant method started from the two interval ends.  After the first
    step the iteration no longer keeps a bracket, so it may diverge; it
    converges super-linearly near a simple root.

    If ``f(b) == f(a)`` at some step the result is `Inf` or `NaN`, which
    is returned as-is.
    """

    def __init__(self, f: Callable[[float], float], a: float, b: float,
                 tol: float, tola: float, max_it: int,
                 h_interval: float = DEFAULT_H_INTERVAL,
                 max_iter: int = DEFAULT_MAX_ITER, *,
                 logger: logging.Logger = None):
        """
        Parameters
        ----------
        f, a, b, tol, h_interval, max_iter, logger :
            See `IntervalSolver`.  `tol` applies to the step
            ``|b - a|``.
        tola : float
            Absolute tolerance on the residual ``|f(b)|``.
        max_it : int
            Iteration limit.  When reached the latest point is returned.
        """
        super().__init__(f, a, b, tol, h_interval, max_iter, logger=logger)
        self._tola = check_tol('tola', tola)
        self._max_it = check_count('max_it', max_it)
        self._log = logger or _log

    @property
    def max_it(self) -> int:
        """Iteration limit."""
        return self._max_it

    @property
    def tola(self) -> float:
        """Absolute tolerance on the residual."""
        return self._tola

    def solve(self) -> float:
        if self._no_bracket():
            return np.nan

        a, b = self._a, self._b
        with quiet_errstate():
            f_a, f_b = fval(self._f, a), fval(self._f, b)
            if f_b == 0:  # Includes a degenerate bracket a == b.
                return float(b)
            for it in range(1, self._max_it + 1):
                self.its = it
                x = b - f_b * (b - a) / (f_b - f_a)
                a, f_a = b, f_b
                b, f_b = x, fval(self._f, x)
                self._log.debug("Secant iteration %d: x = %s, f(x) = %s",
                                it, b, f_b)

                if abs(f_b) < self._tola or abs(b - a) < self._tol:
                    break

        return float(b)
