"""
Dense linear solvers used for the Newton step :math:`J \\Delta x = F`.

Two approaches are provided:

    - `solve_gauss`: Gaussian elimination with partial pivoting,
      performed from scratch on every call.
    - `lu_doolittle` / `lu_solve`: a Doolittle factorisation
      :math:`A = LU` (unit diagonal on `L`) computed once and then
      re-used for any number of right-hand sides.  No row pivoting is
      performed, so this path fails on matrices that need row
      exchanges even when they are non-singular.

The strategy classes at the end of this module wrap each approach for
use by the Newton iteration driver.
"""
from __future__ import annotations

from abc import ABC, abstractmethod

import numpy as np
from numpy.typing import ArrayLike

from pynewton.solve.equations import EquationSet
from pynewton.solve.exception import InvalidInputError, SingularMatrixError

# Last updated: October 2026.

PIVOT_TOL = 1e-12
"""Pivots with magnitude below this value are treated as zero."""


# ======================================================================

def solve_gauss(a: ArrayLike, b: ArrayLike) -> np.ndarray:
    """
    Solve :math:`Ax = b` by Gaussian elimination with partial pivoting.

    For each pivot column the remaining row having the largest absolute
    value in that column is swapped into the pivot position before the
    entries below it are eliminated.  The result is then found by back
    substitution.  `a` and `b` are not modified.

    Examples
    --------
    >>> solve_gauss([[0.0, 2.0], [1.0, 1.0]], [4.0, 3.0]).tolist()
    [1.0, 2.0]

    Parameters
    ----------
    a : array-like
        Square `n` x `n` coefficient matrix.
    b : array-like
        Right-hand side of length `n`.

    Returns
    -------
    x : ndarray
        Solution vector.

    Raises
    ------
    InvalidInputError
        If `a` is not square or `b` does not match.
    SingularMatrixError
        If a pivot magnitude is below `PIVOT_TOL`.
    """
    a, b = _check_system(a, b)
    n = len(b)

    # Augmented matrix [A|b].
    ab = np.empty((n, n + 1))
    ab[:, :n], ab[:, n] = a, b

    for i in range(n):
        # Partial pivoting.
        p = i + int(np.argmax(np.abs(ab[i:, i])))
        if p != i:
            ab[[i, p], i:] = ab[[p, i], i:]

        if abs(ab[i, i]) < PIVOT_TOL:
            raise SingularMatrixError(
                f"Zero (or nearly zero) pivot encountered at row {i}.",
                details="Matrix may be singular.", row=i, pivot=ab[i, i])

        factors = ab[i + 1:, i] / ab[i, i]
        ab[i + 1:, i:] -= np.outer(factors, ab[i, i:])

    x = np.zeros(n)
    for i in range(n - 1, -1, -1):
        if abs(ab[i, i]) < PIVOT_TOL:
            raise SingularMatrixError(
                f"Zero (or nearly zero) pivot encountered at "
                f"back-substitution row {i}.", row=i, pivot=ab[i, i])
        x[i] = (ab[i, n] - np.dot(ab[i, i + 1:n], x[i + 1:])) / ab[i, i]

    return x


# ----------------------------------------------------------------------

def lu_doolittle(a: ArrayLike) -> np.ndarray:
    """
    Doolittle factorisation :math:`A = LU` without row pivoting, where
    `L` is unit lower triangular and `U` is upper triangular.  Both
    factors are packed into a single combined matrix `C`:

        - ``C[i, j]`` for ``j < i`` holds ``L[i, j]``.
        - ``C[i, j]`` for ``j >= i`` holds ``U[i, j]``.

    The unit diagonal of `L` is implied and not stored.

    Examples
    --------
    >>> lu_doolittle([[4.0, 3.0], [6.0, 3.0]]).tolist()
    [[4.0, 3.0], [1.5, -1.5]]

    Parameters
    ----------
    a : array-like
        Square `n` x `n` matrix.

    Returns
    -------
    c : ndarray
        Combined `n` x `n` factor matrix.

    Raises
    ------
    InvalidInputError
        If `a` is not square.
    SingularMatrixError
        If any diagonal entry ``U[i, i]`` has magnitude below
        `PIVOT_TOL`.  This also happens for non-singular matrices that
        require row exchanges.
    """
    a = _check_square(a)
    n = a.shape[0]
    c = np.zeros((n, n))

    for i in range(n):
        # Row i of U.
        for j in range(i, n):
            c[i, j] = a[i, j] - np.dot(c[i, :i], c[:i, j])

        if abs(c[i, i]) < PIVOT_TOL:
            raise SingularMatrixError(
                f"Zero (or nearly zero) pivot encountered at U[{i},{i}].",
                details="Matrix may be singular or require pivoting.",
                row=i, pivot=c[i, i])

        # Column i of L.
        for j in range(i + 1, n):
            c[j, i] = (a[j, i] - np.dot(c[j, :i], c[:i, i])) / c[i, i]

    return c


def lu_solve(c: ArrayLike, b: ArrayLike) -> np.ndarray:
    """
    Solve :math:`LUx = b` using the combined factor matrix from
    `lu_doolittle`: forward substitution :math:`Ly = b` followed by back
    substitution :math:`Ux = y`.  `c` is not modified and may be re-used
    for any number of right-hand sides.

    Raises
    ------
    InvalidInputError
        If `c` is not square or `b` does not match.
    SingularMatrixError
        If a diagonal entry of `U` has magnitude below `PIVOT_TOL`.
    """
    c, b = _check_system(c, b)
    n = len(b)

    y = np.zeros(n)
    for i in range(n):
        y[i] = b[i] - np.dot(c[i, :i], y[:i])

    x = np.zeros(n)
    for i in range(n - 1, -1, -1):
        if abs(c[i, i]) < PIVOT_TOL:
            raise SingularMatrixError(
                f"Zero (or nearly zero) pivot encountered at U[{i},{i}] "
                f"during LU solve.", row=i, pivot=c[i, i])
        x[i] = (y[i] - np.dot(c[i, i + 1:], x[i + 1:])) / c[i, i]

    return x


def lu_factor_solve(a: ArrayLike, b: ArrayLike) -> (np.ndarray, np.ndarray):
    """
    Factorise `a` using `lu_doolittle` then solve :math:`Ax = b` with
    the result.

    Returns
    -------
    x : ndarray
        Solution vector.
    c : ndarray
        Combined factor matrix, for re-use with `lu_solve`.
    """
    a, b = _check_system(a, b)
    c = lu_doolittle(a)
    return lu_solve(c, b), c


def lu_unpack(c: ArrayLike) -> (np.ndarray, np.ndarray):
    """
    Split a combined factor matrix into separate `L` (with unit
    diagonal restored) and `U` matrices.
    """
    c = _check_square(c)
    lower = np.tril(c, k=-1) + np.eye(c.shape[0])
    upper = np.triu(c)
    return lower, upper


# ======================================================================

class LinearStrategy(ABC):
    """
    Abstract strategy for producing the Newton step :math:`\\Delta x`
    at the current point, where :math:`J \\Delta x = F(x)`.  Each
    instance owns any working data it needs; `prepare` is called once
    at the start of each run and resets that data.
    """
    name: str = ''

    def prepare(self, eqs: EquationSet, x0: np.ndarray):
        """Setup before the first step of a run (default does nothing)."""
        pass

    @abstractmethod
    def step(self, eqs: EquationSet, x: np.ndarray) -> (np.ndarray,
                                                        np.ndarray):
        """
        Returns
        -------
        dx : ndarray
            Newton step, to be applied as ``x - dx``.
        fx : ndarray
            Residual at `x`.
        """
        raise NotImplementedError


class PivotedNewtonStrategy(LinearStrategy):
    """
    Full Newton: the Jacobian is re-evaluated at every point and the
    step found using `solve_gauss`.
    """
    name = 'Full Newton (Pivoted Gauss Elimination)'

    def step(self, eqs: EquationSet, x: np.ndarray) -> (np.ndarray,
                                                        np.ndarray):
        jac, fx = eqs.jacobian(x)
        return solve_gauss(jac, fx), fx


class ChordNewtonStrategy(LinearStrategy):
    """
    Chord (modified) Newton: the Jacobian is evaluated and factorised
    only once at the starting point.  Each step then costs one residual
    evaluation and two triangular solves, however the stale Jacobian
    normally means more steps are required and the iteration may
    diverge if the Jacobian changes significantly away from `x0`.
    """
    name = 'Chord Newton (Reused LU Factorisation)'

    def __init__(self):
        self.c = None  # Combined LU factors.

    def prepare(self, eqs: EquationSet, x0: np.ndarray):
        self.c = None
        jac, _ = eqs.jacobian(x0)
        self.c = lu_doolittle(jac)

    def step(self, eqs: EquationSet, x: np.ndarray) -> (np.ndarray,
                                                        np.ndarray):
        if self.c is None:
            raise RuntimeError("prepare() must be called before step().")
        fx = eqs.residual(x)
        return lu_solve(self.c, fx), fx


# ----------------------------------------------------------------------

def _check_square(a: ArrayLike) -> np.ndarray:
    a = np.array(a, dtype=float)
    if a.ndim != 2 or a.shape[0] != a.shape[1] or a.shape[0] == 0:
        raise InvalidInputError(f"Matrix must be square, got shape "
                                f"{a.shape}.")
    return a


def _check_system(a: ArrayLike, b: ArrayLike) -> (np.ndarray, np.ndarray):
    a = _check_square(a)
    b = np.array(b, dtype=float)
    if b.shape != (a.shape[0],):
        raise InvalidInputError(f"Vector length must match matrix "
                                f"dimension {a.shape[0]}, got shape "
                                f"{b.shape}.")
    return a, b
