"""
Brent's method for a zero of a scalar function in a bracketing interval.
"""
import logging
from collections.abc import Callable

import numpy as np

from zerofun.solve._numeric import (check_count, fval, quiet_errstate,
                                    same_sign)
from zerofun.solve.base import (DEFAULT_H_INTERVAL, DEFAULT_MAX_ITER,
                                IntervalSolver)

_log = logging.getLogger(__name__)

_EPS = np.finfo(float).eps

# Step types recorded in `Brent.step_counts`.
BISECTION = 'bisection'
SECANT = 'secant'
INVERSE_QUADRATIC = 'inverse_quadratic'


# ======================================================================

class Brent(IntervalSolver):
    r"""
    Brent's method.  This combines the guaranteed convergence of
    bisection with the fast local convergence of secant and inverse
    quadratic interpolation steps.

    The method keeps three points: `b` the best estimate so far, `c` the
    contrapoint so that ``f(b) * f(c) <= 0`` with :math:`|f(b)| \le
    |f(c)|`, and `a` the previous value of `b`.  An interpolated step is
    only taken when it stays inside the bracket and is less than half
    the step taken two iterations earlier, otherwise the bracket is
    bisected.

    Iteration stops when the half-width of the bracket is no more than
    :math:`2 \epsilon |b| + tol/2` (i.e. the bracket width is less than
    `tol` plus a few units of roundoff in `b`), when ``f(b) == 0``, or
    when `max_it` iterations have been taken.  In the last case the
    current `b` is returned.

    References
    ----------
    .. [1] Brent, R. P., *Algorithms for Minimization Without
       Derivatives*, Prentice-Hall, 1973, Chapter 4.
    .. [2] Press, W. H.; Flannery, B. P.; Teukolsky, S. A.; and
       Vetterling, W. T. *Numerical Recipes: The Art of Scientific
       Computing*, 3rd ed. Cambridge University Press, 2007. Section
       9.3: "Van Wijngaarden-Dekker-Brent Method".
    """

    def __init__(self, f: Callable[[float], float], a: float, b: float,
                 tol: float, max_it: int,
                 h_interval: float = DEFAULT_H_INTERVAL,
                 max_iter: int = DEFAULT_MAX_ITER, *,
                 logger: logging.Logger = None):
        """
        Parameters
        ----------
        f, a, b, tol, h_interval, max_iter, logger :
            See `IntervalSolver`.
        max_it : int
            Iteration limit for the main loop (separate from the bracket
            search limit `max_iter`).
        """
        super().__init__(f, a, b, tol, h_interval, max_iter, logger=logger)
        self._max_it = check_count('max_it', max_it)
        self._log = logger or _log
        self.step_counts = _new_counts()

    @property
    def max_it(self) -> int:
        """Iteration limit."""
        return self._max_it

    def solve(self) -> float:
        self.step_counts = _new_counts()
        if self._no_bracket():
            return np.nan

        a, b = self._a, self._b
        with quiet_errstate():
            f_a, f_b = fval(self._f, a), fval(self._f, b)
            c, f_c = b, f_b
            d = e = b - a

            for it in range(1, self._max_it + 1):
                self.its = it

                # Re-establish the contrapoint if b and c no longer
                # bracket the root.
                if same_sign(f_b, f_c):
                    c, f_c = a, f_a
                    d = e = b - a

                # Keep b as the point with the smallest residual.
                if abs(f_c) < abs(f_b):
                    a, b, c = b, c, b
                    f_a, f_b, f_c = f_b, f_c, f_b

                tol1 = 2.0 * _EPS * abs(b) + 0.5 * self._tol
                xm = 0.5 * (c - b)
                if abs(xm) <= tol1 or f_b == 0:
                    return float(b)

                kind = BISECTION
                if abs(e) >= tol1 and abs(f_a) > abs(f_b):
                    p, q, interp = interpolation_step(a, b, c, f_a, f_b,
                                                      f_c, xm)
                    if accept_interpolation(p, q, xm, e, tol1):
                        e, d = d, p / q
                        kind = interp

                if kind == BISECTION:
                    d = e = xm

                self.step_counts[kind] += 1
                self._log.debug("Brent iteration %d: %s step, "
                                "b = %s, c = %s, f(b) = %s", it, kind,
                                b, c, f_b)

                a, f_a = b, f_b
                if abs(d) > tol1:
                    b = b + d
                else:
                    b = b + np.copysign(tol1, xm)
                f_b = fval(self._f, b)

        return float(b)


# ----------------------------------------------------------------------

def accept_interpolation(p: float, q: float, xm: float, e: float,
                         tol1: float) -> bool:
    """
    Safeguard for an interpolated Brent step ``d = p / q`` (with
    ``p >= 0``).  The step is accepted only if it falls inside the
    bracket (``2p < 3 xm q - |tol1 q|``) and is less than half the
    step `e` taken two iterations earlier (``2p < |e q|``).
    """
    min1 = 3.0 * xm * q - abs(tol1 * q)
    min2 = abs(e * q)
    return bool(2.0 * p < min(min1, min2))


def interpolation_step(a: float, b: float, c: float, f_a: float,
                       f_b: float, f_c: float,
                       xm: float) -> tuple[float, float, str]:
    """
    Compute the interpolated Brent step from `b` as ``d = p / q``.

    When ``a == c`` only two distinct points are available and the
    secant step through `a` and `b` is used, otherwise the inverse
    quadratic through `a`, `b` and `c` is used.

    Parameters
    ----------
    a, b, c : float
        Previous estimate, current estimate and contrapoint.
    f_a, f_b, f_c : float
        Function values at `a`, `b`, `c`.
    xm : float
        Half the bracket, ``(c - b) / 2``.

    Returns
    -------
    p, q, kind : float, float, str
        Step numerator (``p >= 0``), denominator and the step type
        (``'secant'`` or ``'inverse_quadratic'``).
    """
    s = f_b / f_a
    if a == c:
        p = 2.0 * xm * s
        q = 1.0 - s
        kind = SECANT
    else:
        q = f_a / f_c
        r = f_b / f_c
        p = s * (2.0 * xm * q * (q - r) - (b - a) * (r - 1.0))
        q = (q - 1.0) * (r - 1.0) * (s - 1.0)
        kind = INVERSE_QUADRATIC

    if p > 0:
        q = -q
    return abs(p), q, kind


def _new_counts() -> dict[str, int]:
    return {BISECTION: 0, SECANT: 0, INVERSE_QUADRATIC: 0}
