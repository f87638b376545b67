import numpy as np


# ======================================================================

# Test functions with known roots and derivatives.

def linear(x):
    return x


def d_linear(x):
    return 1.0


def sqrt2_fn(x):
    return x ** 2 - 2


def d_sqrt2_fn(x):
    return 2 * x


SQRT2 = 1.4142135623730951


def cubic(x):
    return x ** 3 - 2 * x - 5


def d_cubic(x):
    return 3 * x ** 2 - 2


CUBIC_ROOT = 2.0945514815423265


def no_root(x):
    return x ** 2 + 1


def step_fn(x):
    # Discontinuous sign change at x = 0.3.
    return -1.0 if x < 0.3 else 1.0


def nan_fn(x):
    return np.nan


def hump_cubic(x):
    # Local minimum f(1) = 1 between x = 0 and the only root.
    return x ** 3 - 3 * x + 3


HUMP_CUBIC_ROOT = -2.1038034
