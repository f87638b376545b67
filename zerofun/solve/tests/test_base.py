import numpy as np
import pytest

from zerofun.solve import (Bisection, Brent, IntervalSolver, RegulaFalsi,
                           RootSolver, Secant)
from .scalar_tst_functions import linear, no_root, sqrt2_fn


# ======================================================================

def test_root_solver_is_abstract():
    with pytest.raises(TypeError):
        RootSolver(linear, 1e-8)
    with pytest.raises(TypeError):
        IntervalSolver(linear, -1.0, 1.0, 1e-8)


def test_interval_solver_keeps_valid_bracket():
    solver = Bisection(sqrt2_fn, 0.0, 2.0, tol=1e-8)
    assert (solver.a, solver.b) == (0.0, 2.0)
    assert solver.x1 == 1.0
    assert solver.valid_bracket
    assert solver.h_interval == 0.01
    assert solver.max_iter == 200


def test_interval_solver_repairs_bracket():
    solver = Bisection(sqrt2_fn, 2.0, 3.0, tol=1e-8, h_interval=0.05)
    assert solver.x1 == 2.5
    assert solver.valid_bracket
    assert sqrt2_fn(solver.a) * sqrt2_fn(solver.b) <= 0


@pytest.mark.parametrize("make", [
    lambda f: Bisection(f, -1.0, 1.0, 1e-8),
    lambda f: RegulaFalsi(f, -1.0, 1.0, 1e-8, 1e-10),
    lambda f: Secant(f, -1.0, 1.0, 1e-8, 1e-10, 50),
    lambda f: Brent(f, -1.0, 1.0, 1e-8, 50),
])
def test_no_bracket_gives_nan(make):
    solver = make(no_root)
    assert not solver.valid_bracket
    assert np.isnan(solver.a) and np.isnan(solver.b)
    assert np.isnan(solver.solve())
    assert solver.its == 0


def test_tolerances_read_only():
    solver = Brent(sqrt2_fn, 0.0, 2.0, 1e-8, 50)
    with pytest.raises(AttributeError):
        solver.tol = 1.0
    with pytest.raises(AttributeError):
        solver.a = 1.0


@pytest.mark.parametrize("kwargs", [
    dict(tol=-1.0),
    dict(tol=np.nan),
    dict(tol=1e-8, h_interval=0.0),
    dict(tol=1e-8, max_iter=-1),
])
def test_bad_construction(kwargs):
    with pytest.raises(ValueError):
        Bisection(sqrt2_fn, 0.0, 2.0, **kwargs)


@pytest.mark.parametrize("make", [
    lambda f: Bisection(f, 1.0, 3.0, 1e-8),
    lambda f: RegulaFalsi(f, 1.0, 3.0, 1e-8, 1e-10),
    lambda f: Secant(f, 1.0, 3.0, 1e-8, 1e-10, 50),
    lambda f: Brent(f, 1.0, 3.0, 1e-8, 50),
])
def test_zero_at_interval_midpoint(make):
    # The interval is invalid but the search seed x1 = 2 is a zero.
    solver = make(lambda x: (x - 2.0) ** 2)
    assert (solver.a, solver.b) == (2.0, 2.0)
    assert solver.solve() == 2.0
