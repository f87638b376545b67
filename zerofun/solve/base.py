"""
Base classes shared by all root solvers.
"""
import logging
from abc import ABC, abstractmethod
from collections.abc import Callable

import numpy as np

from zerofun.solve._numeric import check_count, check_step, check_tol
from zerofun.solve.bracket import repair_bracket

# Bracket search defaults used by all interval methods.
DEFAULT_H_INTERVAL = 0.01
DEFAULT_MAX_ITER = 200


# ======================================================================

class RootSolver(ABC):
    """
    Abstract solver for a zero of the scalar function `f`, i.e. find `x`
    so that :math:`f(x) = 0`.  Each concrete solver is constructed with
    all the data it needs and then `solve()` is called to return the
    root estimate.

    `solve()` always returns a `float`.  This is either the converged
    root, the best estimate available when an iteration limit was
    reached, or `NaN` if no root could be located.  Callers that need to
    distinguish these cases should check the residual ``f(x)``.
    """

    def __init__(self, f: Callable[[float], float], tol: float):
        """
        Parameters
        ----------
        f : Callable[[float], float]
            Function to find the zero of.
        tol : float
            Convergence tolerance (>= 0).  Its exact meaning (bracket
            width, step size) depends on the method.
        """
        self._f = f
        self._tol = check_tol('tol', tol)
        self.its = 0  # Iterations used by the last solve().

    # -- Public Methods ------------------------------------------------

    @property
    def f(self) -> Callable[[float], float]:
        """Function being solved."""
        return self._f

    @abstractmethod
    def solve(self) -> float:
        """Run the method and return the root estimate."""
        raise NotImplementedError

    @property
    def tol(self) -> float:
        """Convergence tolerance."""
        return self._tol


# ----------------------------------------------------------------------

class IntervalSolver(RootSolver, ABC):
    """
    Base for solvers that start from an interval ``[a, b]``.

    If ``f(a)`` and ``f(b)`` do not have opposite signs the interval is
    replaced during construction by a search outwards from its midpoint
    `x1` (see `repair_bracket`).  After construction either ``f(a) *
    f(b) <= 0`` or both `a` and `b` are `NaN`, in which case `solve()`
    returns `NaN`.
    """

    def __init__(self, f: Callable[[float], float], a: float, b: float,
                 tol: float, h_interval: float = DEFAULT_H_INTERVAL,
                 max_iter: int = DEFAULT_MAX_ITER, *,
                 logger: logging.Logger = None):
        """
        Parameters
        ----------
        f : Callable[[float], float]
            Function to find the zero of.
        a, b : float
            Initial interval.
        tol : float
            Convergence tolerance (>= 0).
        h_interval : float, default = 0.01
            First step of the bracket search (> 0).
        max_iter : int, default = 200
            Step limit for the bracket search.
        logger : logging.Logger, optional
            Receives bracket repair diagnostics.
        """
        super().__init__(f, tol)
        self._x1 = 0.5 * (a + b)
        self._h_interval = check_step('h_interval', h_interval)
        self._max_iter = check_count('max_iter', max_iter)
        self._a, self._b, self._valid = repair_bracket(
            f, a, b, self._h_interval, self._max_iter, logger=logger)

    # -- Public Methods ------------------------------------------------

    @property
    def a(self) -> float:
        """Lower (first) end of the working interval."""
        return self._a

    @property
    def b(self) -> float:
        """Upper (second) end of the working interval."""
        return self._b

    @property
    def h_interval(self) -> float:
        """First step size used by the bracket search."""
        return self._h_interval

    @property
    def max_iter(self) -> int:
        """Step limit used by the bracket search."""
        return self._max_iter

    @property
    def valid_bracket(self) -> bool:
        """False if no valid interval could be found (``a, b = NaN``)."""
        return self._valid

    @property
    def x1(self) -> float:
        """Midpoint of the interval given by the user."""
        return self._x1

    # -- Private Methods -----------------------------------------------

    def _no_bracket(self) -> bool:
        # Shared early exit for solve(); resets the iteration count.
        self.its = 0
        return np.isnan(self._a) or np.isnan(self._b)
