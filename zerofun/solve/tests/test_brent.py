import math

import numpy as np
import pytest
from scipy.optimize import brentq

from zerofun.solve import Brent
from zerofun.solve.brent import (accept_interpolation, interpolation_step,
                                 BISECTION, INVERSE_QUADRATIC, SECANT)
from .scalar_tst_functions import (CUBIC_ROOT, SQRT2, cubic, linear,
                                   sqrt2_fn, step_fn)


# ======================================================================

class TestBrent:
    def test_linear(self):
        x = Brent(linear, -1.0, 1.0, tol=1e-10, max_it=50).solve()
        assert x == pytest.approx(0.0, abs=1e-10)

    def test_sqrt2(self):
        solver = Brent(sqrt2_fn, 0.0, 2.0, tol=1e-10, max_it=50)
        x = solver.solve()
        assert x == pytest.approx(SQRT2, abs=1e-10)
        assert solver.step_counts[INVERSE_QUADRATIC] > 0

    @pytest.mark.parametrize("f, a, b", [
        (cubic, 2.0, 3.0),
        (math.cos, 0.0, 3.0),
        (lambda x: math.exp(x) - 10.0, 0.0, 5.0),
        (lambda x: x ** 9 - 1e-3, 0.0, 1.5),
        (lambda x: math.atan(x - 0.7), -10.0, 20.0),
    ])
    def test_matches_scipy(self, f, a, b):
        x = Brent(f, a, b, tol=1e-12, max_it=100).solve()
        x_ref = brentq(f, a, b, xtol=1e-14)
        assert x == pytest.approx(x_ref, abs=1e-11)

    def test_discontinuous_uses_bisection(self):
        solver = Brent(step_fn, 0.0, 1.0, tol=1e-9, max_it=100)
        x = solver.solve()
        assert abs(x - 0.3) < 2e-9
        assert solver.step_counts[SECANT] == 0
        assert solver.step_counts[INVERSE_QUADRATIC] == 0
        assert solver.step_counts[BISECTION] == solver.its - 1

    def test_iteration_limit_returns_estimate(self):
        solver = Brent(cubic, 2.0, 3.0, tol=0.0, max_it=3)
        x = solver.solve()
        assert solver.its == 3
        assert 2.0 <= x <= 3.0
        assert abs(cubic(x)) < abs(cubic(2.0))

    def test_root_near_interval_end(self):
        x = Brent(sqrt2_fn, 0.0, SQRT2, tol=1e-12, max_it=50).solve()
        assert x == pytest.approx(SQRT2, abs=1e-12)

    def test_repaired_bracket(self):
        x = Brent(cubic, 5.0, 6.0, tol=1e-12, max_it=100).solve()
        assert x == pytest.approx(CUBIC_ROOT, abs=1e-12)

    def test_repeat_solve(self):
        solver = Brent(cubic, 2.0, 3.0, tol=1e-12, max_it=100)
        x = solver.solve()
        counts = dict(solver.step_counts)
        assert solver.solve() == x
        assert solver.step_counts == counts

    def test_nan_function(self):
        # NaN values never form a bracket.
        solver = Brent(lambda x: np.nan, 0.0, 1.0, tol=1e-8, max_it=10,
                       max_iter=10)
        assert np.isnan(solver.solve())


# ----------------------------------------------------------------------

def test_interpolation_step_secant():
    # Two points on the line f = 2x - 1, with a == c.
    p, q, kind = interpolation_step(0.0, 1.0, 0.0, -1.0, 1.0, -1.0, -0.5)
    assert kind == SECANT
    assert p >= 0
    assert 1.0 + p / q == pytest.approx(0.5)


def test_interpolation_step_inverse_quadratic():
    # Inverse quadratic through points on f = x is exact.
    a, b, c = 1.0, -0.5, 2.0
    p, q, kind = interpolation_step(a, b, c, a, b, c, 0.5 * (c - b))
    assert kind == INVERSE_QUADRATIC
    assert p >= 0
    assert b + p / q == pytest.approx(0.0, abs=1e-15)


@pytest.mark.parametrize("p, q, xm, e, accept", [
    (0.1, 1.0, 0.5, 1.0, True),    # Small step inside bracket.
    (2.0, 1.0, 0.5, 10.0, False),  # Step leaves the bracket.
    (0.4, 1.0, 0.5, 0.5, False),   # Less than half of step e.
])
def test_accept_interpolation(p, q, xm, e, accept):
    assert accept_interpolation(p, q, xm, e, tol1=1e-10) is accept
