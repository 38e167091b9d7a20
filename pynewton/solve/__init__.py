"""
==================================
Solvers (:mod:`pynewton.solve`)
==================================

.. currentmodule:: pynewton.solve

Newton's method for square systems of nonlinear equations, using a
finite-difference Jacobian and either a fresh pivoted elimination or a
re-used LU factorisation at each step.

Classes
-------

.. autosummary::
    :toctree:

    EquationSet
    NewtonSystem
    NewtonResult
    ChordOutcome
    NewtonOptions
    LinearStrategy
    PivotedNewtonStrategy
    ChordNewtonStrategy

Functions
---------

.. autosummary::
    :toctree:

    newton_iterate
    solve_gauss
    lu_doolittle
    lu_solve
    lu_factor_solve
    lu_unpack
    get_newton_options
    set_newton_options
    options_from_text

Exceptions
----------

.. autosummary::
    :toctree:

    SolverError
    SingularMatrixError
    InvalidInputError

"""

from .equations import EquationSet, FD_STEP
from .exception import InvalidInputError, SingularMatrixError, SolverError
from .linear import (PIVOT_TOL, ChordNewtonStrategy, LinearStrategy,
                     PivotedNewtonStrategy, lu_doolittle, lu_factor_solve,
                     lu_solve, lu_unpack, solve_gauss)
from .newton import ChordOutcome, NewtonResult, NewtonSystem, newton_iterate
from .options import (NewtonOptions, get_newton_options, options_from_text,
                      set_newton_options)
