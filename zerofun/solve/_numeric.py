"""
Floating point helpers shared by the solvers.  Function values are held
as `numpy.float64` so that a zero denominator gives `Inf` / `NaN` rather
than raising `ZeroDivisionError`.
"""
import operator
from collections.abc import Callable
from functools import partial

import numpy as np


# ======================================================================

# Used around every iteration loop.  Division by zero, 0/0 and overflow
# are expected outcomes and propagate into the result.
quiet_errstate = partial(np.errstate, divide='ignore', invalid='ignore',
                         over='ignore')


def fval(f: Callable[[float], float], x: float) -> np.float64:
    """Evaluate `f(x)` and return the result as `numpy.float64`."""
    return np.float64(f(x))


def brackets(y1: float, y2: float) -> bool:
    """
    True if `y1` and `y2` have opposite signs or either is zero.  `NaN`
    in either value gives False.
    """
    return bool(y1 * y2 <= 0)


def same_sign(y1: float, y2: float) -> bool:
    """True if ``y1 * y2 > 0``.  False for zero or `NaN`."""
    return bool(y1 * y2 > 0)


def check_tol(name: str, value: float) -> float:
    """Check a tolerance is a non-negative number."""
    value = float(value)
    if not value >= 0:
        raise ValueError(f"{name} must be >= 0, got {value}.")
    return value


def check_step(name: str, value: float) -> float:
    """Check a step size is positive and finite."""
    value = float(value)
    if not (value > 0 and np.isfinite(value)):
        raise ValueError(f"{name} must be > 0 and finite, got {value}.")
    return value


def check_count(name: str, value: int) -> int:
    """Check an iteration limit is an integer >= 0."""
    try:
        value = operator.index(value)
    except TypeError:
        raise ValueError(f"{name} must be an integer, got {value!r}.")
    if value < 0:
        raise ValueError(f"{name} must be >= 0, got {value}.")
    return value
