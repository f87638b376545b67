"""
====================================
Root finding (:mod:`zerofun.solve`)
====================================

.. currentmodule:: zerofun.solve

Solvers for a real zero of a scalar function of one real variable,
starting from either a bracketing interval or an initial guess.

Solvers
-------

.. autosummary::
    :toctree:

    RootSolver
    IntervalSolver
    Bisection
    RegulaFalsi
    Secant
    Brent
    Newton
    QuasiNewton

Functions
---------

.. autosummary::
    :toctree:

    find_root
    bracket_interval
    repair_bracket
    central_difference

Exceptions
----------

.. autosummary::
    :toctree:

    SolverError

"""

from .exception import SolverError
from .bracket import BracketResult, bracket_interval, repair_bracket
from .base import (DEFAULT_H_INTERVAL, DEFAULT_MAX_ITER, IntervalSolver,
                   RootSolver)
from .interval import Bisection, RegulaFalsi, Secant
from .brent import Brent
from .newton import Newton, QuasiNewton, central_difference
from .find_root import SOLVERS, find_root
