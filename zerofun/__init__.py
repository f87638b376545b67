"""
.. This module acts as the top-level API documentation.

.. module: zerofun

**zerofun** finds a real zero of a scalar function using classical
iterative methods (bisection, regula falsi, secant, Brent, Newton and
quasi-Newton).

.. autosummary::
    :toctree: generated/

    solve

"""

__version__ = "0.1.0"
