#!usr/bin/env python3

# Compare the root finding methods on Kepler's equation
# E - e sin(E) = M for eccentric anomaly E.

import logging

import numpy as np

from zerofun.solve import (Bisection, Brent, Newton, QuasiNewton,
                           RegulaFalsi, Secant)

logging.basicConfig(level=logging.INFO, format="%(name)s: %(message)s")

e, M = 0.9, 0.3


def kepler(E):
    return E - e * np.sin(E) - M


def d_kepler(E):
    return 1.0 - e * np.cos(E)


# The first interval doesn't contain the root and is repaired.
solvers = {
    'Bisection': Bisection(kepler, 2.0, 3.0, tol=1e-12),
    'RegulaFalsi': RegulaFalsi(kepler, 0.0, np.pi, tol=1e-12, tola=1e-14),
    'Secant': Secant(kepler, 0.0, np.pi, tol=1e-12, tola=1e-14, max_it=50),
    'Brent': Brent(kepler, 0.0, np.pi, tol=1e-12, max_it=50),
    'Newton': Newton(kepler, d_kepler, np.pi, tol=1e-12, tola=1e-14,
                     max_it=50),
    'QuasiNewton': QuasiNewton(kepler, np.pi, h=1e-6, tol=1e-12,
                               tola=1e-14, max_it=50),
}

print(f"\nKepler's equation, e = {e}, M = {M}:")
for name, solver in solvers.items():
    E = solver.solve()
    print(f"... {name:12s} E = {E:.15f}, f(E) = {kepler(E):+.3E}, "
          f"iterations = {solver.its}")
