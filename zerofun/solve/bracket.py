import logging
from collections import namedtuple
from collections.abc import Callable

import numpy as np

from zerofun.solve._numeric import (brackets, check_count, check_step,
                                    fval, quiet_errstate)

_log = logging.getLogger(__name__)


# ======================================================================

BracketResult = namedtuple('BracketResult', ('a', 'b', 'found'))
BracketResult.__doc__ = """\
Outcome of a bracket search.  ``a`` and ``b`` are the interval ends and
``found`` is True if ``f(a) * f(b) <= 0``."""


# ----------------------------------------------------------------------

def bracket_interval(f: Callable[[float], float], x1: float,
                     h: float = 0.01, max_iter: int = 200, *,
                     grow_factor: float = 0.5,
                     logger: logging.Logger = None) -> BracketResult:
    """
    Starting from the range ``[x1, x1 + h]``, expand the range
    geometrically about the seed point `x1` until `f` changes sign (or
    is zero) at the ends, or until `max_iter` steps have been taken.

    At each step the end with the smaller ``|f|`` is moved outwards by
    ``grow_factor * (b - a)``, so the range heads 'downhill' towards a
    possible zero but can still turn back and grow on the other side of
    the seed.

    Parameters
    ----------
    f : Callable[[float], float]
        Scalar function to bracket.
    x1 : float
        Seed point.
    h : float, default = 0.01
        Width of the starting range.  Must be > 0.
    max_iter : int, default = 200
        Maximum number of expansion steps.
    grow_factor : float, default = 0.5
        Step size as a fraction of the current range width (> 0).
    logger : logging.Logger, optional
        Destination for step-by-step diagnostics (DEBUG level).  The
        module logger is used if not given.

    Returns
    -------
    BracketResult
        ``(a, b, found)`` with ``a <= b``.  When ``found == False`` the
        values of `a` and `b` are the last range tried and should not be
        used.

    Raises
    ------
    ValueError
        Illegal starting conditions.

    Notes
    -----
    - If ``f(x1) == 0`` the degenerate bracket ``(x1, x1, True)`` is
      returned without any further evaluations.
    - A function value of `NaN` never counts as a sign change.
    - The range can still be trapped by a function with no sign change
      on one side and ``|f|`` growing more slowly there than on the
      other.

    Examples
    --------
    >>> bracket_interval(lambda x: x - 5, 10.0, h=1.0)
    BracketResult(a=3.40625, b=11.0, found=True)
    """
    h = check_step('h', h)
    max_iter = check_count('max_iter', max_iter)
    grow_factor = check_step('grow_factor', grow_factor)

    log = logger or _log
    x1 = np.float64(x1)
    y1 = fval(f, x1)
    if y1 == 0:
        return BracketResult(float(x1), float(x1), True)

    x2 = x1 + h
    y2 = fval(f, x2)
    steps = 0

    with quiet_errstate():
        while not brackets(y1, y2) and steps < max_iter:
            Δx = grow_factor * (x2 - x1)
            if np.abs(y1) < np.abs(y2):
                x1 = x1 - Δx  # <- Grow left
                y1 = fval(f, x1)
            else:
                x2 = x2 + Δx  # Grow right ->
                y2 = fval(f, x2)

            steps += 1
            log.debug("bracket_interval() step %d: x = [%s, %s], "
                      "f = [%s, %s]", steps, x1, x2, y1, y2)

        found = brackets(y1, y2)

    return BracketResult(float(x1), float(x2), found)


# ----------------------------------------------------------------------

def repair_bracket(f: Callable[[float], float], a: float, b: float,
                   h: float = 0.01, max_iter: int = 200, *,
                   logger: logging.Logger = None) -> BracketResult:
    """
    Check that ``[a, b]`` brackets a zero of `f`.  If it doesn't, search
    for a new bracket using `bracket_interval` seeded at the midpoint
    ``(a + b) / 2``.

    Parameters
    ----------
    f : Callable[[float], float]
        Scalar function.
    a, b : float
        Interval supplied by the user.
    h, max_iter :
        Passed to `bracket_interval` if a search is required.
    logger : logging.Logger, optional
        Receives an INFO record when the interval is replaced and a
        WARNING record when no replacement could be found.

    Returns
    -------
    BracketResult
        ``(a, b, True)`` for a valid (original or repaired) interval,
        otherwise ``(nan, nan, False)``.
    """
    log = logger or _log
    with quiet_errstate():
        valid = brackets(fval(f, a), fval(f, b))
    if valid:
        return BracketResult(a, b, True)

    log.info("The interval [%s, %s] is not valid, trying to find a "
             "valid one.", a, b)
    result = bracket_interval(f, 0.5 * (a + b), h, max_iter, logger=log)
    if result.found:
        log.info("Using interval [%s, %s].", result.a, result.b)
        return result

    log.warning("Could not find an interval containing a zero after %d "
                "steps; the interval is set to [nan, nan].", max_iter)
    return BracketResult(np.nan, np.nan, False)
