import logging
from collections.abc import Callable

import numpy as np

from zerofun.solve.base import (DEFAULT_H_INTERVAL, DEFAULT_MAX_ITER,
                                RootSolver)
from zerofun.solve.brent import Brent
from zerofun.solve.exception import SolverError
from zerofun.solve.interval import Bisection, RegulaFalsi, Secant
from zerofun.solve.newton import Newton, QuasiNewton


# ======================================================================

SOLVERS: dict[str, type[RootSolver]] = {
    'bisect': Bisection,
    'regula_falsi': RegulaFalsi,
    'secant': Secant,
    'brent': Brent,
    'newton': Newton,
    'quasi_newton': QuasiNewton,
}


# ----------------------------------------------------------------------

def find_root(f: Callable[[float], float], method: str = 'brent', *,
              bracket: tuple[float, float] = None, x0: float = None,
              fprime: Callable[[float], float] = None,
              tol: float = 1e-8, tola: float = 1e-10, max_it: int = 100,
              h: float = 1e-6, h_interval: float = DEFAULT_H_INTERVAL,
              max_iter: int = DEFAULT_MAX_ITER, disp: bool = False,
              logger: logging.Logger = None) -> float:
    """
    Find a zero of the scalar function `f` using the named method.  This
    builds the corresponding solver object, calls ``solve()`` once and
    returns the result.

    Parameters
    ----------
    f : Callable[[float], float]
        Function to find the zero of.
    method : str, default = 'brent'
        One of ``'bisect'``, ``'regula_falsi'``, ``'secant'``,
        ``'brent'``, ``'newton'`` or ``'quasi_newton'``.  Case is ignored
        and ``-`` may be used in place of ``_``.
    bracket : (float, float), optional
        Starting interval (required by all interval methods).
    x0 : float, optional
        Starting point (required by ``'newton'`` and
        ``'quasi_newton'``).
    fprime : Callable[[float], float], optional
        Derivative of `f` (required by ``'newton'``).
    tol : float, default = 1e-8
        Interval width / step tolerance.
    tola : float, default = 1e-10
        Residual tolerance (methods that use one).
    max_it : int, default = 100
        Main loop iteration limit.
    h : float, default = 1e-6
        Finite difference step for ``'quasi_newton'``.
    h_interval, max_iter :
        Bracket search settings for interval methods.
    disp : bool, default = False
        If True, a non-finite result raises `SolverError` instead of
        being returned.
    logger : logging.Logger, optional
        Passed to the solver.

    Returns
    -------
    float
        Root estimate, or `NaN` if none was found (``disp=False``).

    Raises
    ------
    ValueError
        Unknown method, missing or illegal inputs.
    SolverError
        If ``disp=True`` and the result is `NaN` or infinite.

    Examples
    --------
    >>> round(find_root(lambda x: x**2 - 2, 'brent', bracket=(0, 2)), 8)
    1.41421356
    """
    name = method.lower().replace('-', '_')
    try:
        cls = SOLVERS[name]
    except KeyError:
        raise ValueError(f"Unknown method '{method}', expected one of: "
                         f"{', '.join(SOLVERS)}.")

    if issubclass(cls, Newton):
        if x0 is None:
            raise ValueError(f"Method '{name}' requires x0.")
        if cls is Newton:
            if fprime is None:
                raise ValueError("Method 'newton' requires fprime.")
            solver = Newton(f, fprime, x0, tol, tola, max_it, logger=logger)
        else:
            solver = QuasiNewton(f, x0, h, tol, tola, max_it, logger=logger)

    else:
        if bracket is None:
            raise ValueError(f"Method '{name}' requires a bracket.")
        a, b = bracket
        interval_kw = dict(h_interval=h_interval, max_iter=max_iter,
                           logger=logger)
        if cls is Bisection:
            solver = Bisection(f, a, b, tol, max_it=max_it, **interval_kw)
        elif cls is RegulaFalsi:
            solver = RegulaFalsi(f, a, b, tol, tola, max_it=max_it,
                                 **interval_kw)
        elif cls is Secant:
            solver = Secant(f, a, b, tol, tola, max_it, **interval_kw)
        else:
            solver = Brent(f, a, b, tol, max_it, **interval_kw)

    x = solver.solve()
    if disp and not np.isfinite(x):
        raise SolverError(f"find_root() failed using '{name}':", flag=1,
                          details="Result is not finite.", method=name,
                          root=x, its=solver.its)
    return x
