"""
Solve a square system of nonlinear equations :math:`F(x) = 0` using
Newton's method with a finite-difference Jacobian.

Each call to `NewtonSystem.solve` performs two independent runs from the
same starting point:

    - **Full Newton** (primal): The Jacobian is re-evaluated at every
      iterate and the step is found by pivoted Gaussian elimination.
      This result is the one returned.
    - **Chord Newton** (comparison): The Jacobian is evaluated and
      factorised once at the starting point, then the factors are re-used
      for every step.  Any failure of this run is recorded in the result
      and never affects the full Newton result.
"""
from __future__ import annotations

import numbers
import warnings
from collections.abc import Callable, Sequence
from dataclasses import dataclass

import numpy as np
from numpy.typing import ArrayLike

from pynewton.solve.equations import EquationSet
from pynewton.solve.exception import InvalidInputError, SolverError
from pynewton.solve.linear import (ChordNewtonStrategy, LinearStrategy,
                                   PivotedNewtonStrategy)
from pynewton.solve.options import get_newton_options

# Last updated: October 2026.


# ======================================================================

@dataclass(frozen=True, kw_only=True)
class ChordOutcome:
    # noinspection PyUnresolvedReferences
    """
    Outcome of the chord Newton (re-used factorisation) run.

    Parameters
    ----------
    status : str
        One of ``'converged'``, ``'exhausted'`` (iteration limit reached)
        or ``'failed'``.
    its : int or None
        Iterations performed, or `None` if the run failed.
    x : ndarray or None
        Final iterate, or `None` if the run failed.
    error : Exception or None
        The exception that stopped the run if ``status == 'failed'``.
    """
    status: str
    its: int | None = None
    x: np.ndarray | None = None
    error: Exception | None = None

    @property
    def converged(self) -> bool:
        return self.status == 'converged'

    @property
    def failed(self) -> bool:
        return self.status == 'failed'


@dataclass(frozen=True, kw_only=True)
class NewtonResult:
    # noinspection PyUnresolvedReferences
    """
    Result of `NewtonSystem.solve`.

    Parameters
    ----------
    x : ndarray
        Final iterate of the full Newton run.
    its : int
        Number of full Newton iterations performed (``<= maxits``).
    converged : bool
        `True` if the full Newton run met the step tolerance.  If `False`
        then ``its == maxits``.
    chord : ChordOutcome
        Outcome of the chord Newton run.
    """
    x: np.ndarray
    its: int
    converged: bool
    chord: ChordOutcome

    @property
    def solution(self) -> np.ndarray:
        return self.x

    @property
    def primal_iterations(self) -> int:
        return self.its

    @property
    def reuse_iterations(self) -> int:
        """Chord Newton iterations, or ``-1`` if that run failed."""
        return -1 if self.chord.failed else self.chord.its


# ======================================================================

def newton_iterate(eqs: EquationSet, strategy: LinearStrategy,
                   x0: ArrayLike, eps: float, maxits: int,
                   verbose: bool = False) -> (np.ndarray, int, bool):
    """
    Newton iteration :math:`x' = x - \\Delta x` where the step is
    supplied by `strategy`.  Iteration stops after an update when
    :math:`\\|\\Delta x\\|_\\infty < \\epsilon`, or once `maxits`
    iterations have been done.

    Parameters
    ----------
    eqs : EquationSet
        Equations to solve.
    strategy : LinearStrategy
        Method used to compute each step.  ``strategy.prepare()`` is
        called with the starting point before iterating.
    x0 : array-like
        Starting point (not modified).
    eps : float
        Step size tolerance (> 0).
    maxits : int
        Iteration limit (>= 1).
    verbose : bool, default = False
        If `True`, print progress.

    Returns
    -------
    x : ndarray
        Final iterate.
    its : int
        Iterations performed.
    converged : bool
        `True` if the step tolerance was met.

    Raises
    ------
    SolverError
        Raised by `strategy` (e.g. `SingularMatrixError`), or if the step
        becomes non-finite.
    """
    def verbose_print(info):
        if verbose:
            print(info)

    x = np.array(x0, dtype=float)
    verbose_print(f"{strategy.name} - Solving {eqs.n} Equations:")
    strategy.prepare(eqs, x)

    for its in range(1, maxits + 1):
        dx, fx = strategy.step(eqs, x)
        if not np.all(np.isfinite(dx)):
            raise SolverError(f"Non-finite step at iteration {its}.",
                              details="Iteration diverged.")

        x -= dx
        dx_norm = np.max(np.abs(dx))

        if verbose:
            if eqs.n < 10:
                x_str = f", x* = " + f', '.join(f"{x_i:.6G}" for x_i in x)
            else:
                x_str = ''
            print(f"... Iteration {its}: ||F(x)|| = "
                  f"{np.linalg.norm(fx):.5G}, ||Δx||∞ = "
                  f"{dx_norm:.5G}{x_str}")

        if dx_norm < eps:
            verbose_print(f"... Converged.")
            return x, its, True

    verbose_print(f"... Reached iteration limit.")
    return x, maxits, False


# ----------------------------------------------------------------------

class NewtonSystem:
    """
    Newton solver for a fixed system of `n` nonlinear equations in `n`
    unknowns.  The Jacobian is approximated by forward differences (see
    `EquationSet.jacobian`).

    Examples
    --------
    >>> nls = NewtonSystem([lambda x: x[0] ** 2 - 4,
    ...                     lambda x: x[0] * x[1] - 6])
    >>> res = nls.solve([1.0, 1.0])
    >>> np.round(res.x, 6).tolist(), res.converged
    ([2.0, 3.0], True)

    Parameters
    ----------
    equations : EquationSet or Sequence[Callable[[ndarray], float]]
        The equations to solve.

    Notes
    -----
    Instances hold only the equations and the most recent result, so
    separate instances may be used concurrently.  A single instance
    should not be shared between threads.
    """

    def __init__(self, equations: EquationSet | Sequence[Callable]):
        if isinstance(equations, EquationSet):
            self._eqs = equations
        else:
            self._eqs = EquationSet(equations)

        self.last_result = None

    @classmethod
    def from_vector_func(cls, func: Callable[[np.ndarray], ArrayLike],
                         n: int) -> NewtonSystem:
        """
        Construct from one vector-valued function with fixed dimension
        `n`.  See `EquationSet.from_vector_func`.
        """
        return cls(EquationSet.from_vector_func(func, n))

    # -- Public Methods ------------------------------------------------

    @property
    def equations(self) -> EquationSet:
        return self._eqs

    @property
    def n(self) -> int:
        return self._eqs.n

    def solve(self, x0: ArrayLike, eps: float = None, maxits: int = None,
              verbose: bool = None) -> NewtonResult:
        """
        Solve the system from starting point `x0`.  The full Newton run
        is done first, followed by the chord Newton run.

        Parameters
        ----------
        x0 : array-like
            Initial guess, one value per equation in equation order.
        eps : float, optional
            Stop when :math:`\\|\\Delta x\\|_\\infty <` `eps`.  If `None`
            the current default is used (see `set_newton_options`).
        maxits : int, optional
            Iteration limit for each run.  If `None` the current default
            is used.
        verbose : bool, optional
            If `True` print progress.  If `None` the current default is
            used.

        Returns
        -------
        result : NewtonResult
            Full Newton result plus the outcome of the chord run.  Hitting
            `maxits` is not an error, check ``result.converged``.

        Raises
        ------
        ValueError
            If `eps` <= 0 or `maxits` < 1.
        InvalidInputError
            If ``len(x0) != n``.
        SingularMatrixError
            If the full Newton linear solve meets a zero pivot.  No
            result is returned in this case.
        """
        self.last_result = None
        opts = get_newton_options()
        eps = opts.eps if eps is None else eps
        maxits = opts.maxits if maxits is None else maxits
        verbose = opts.verbose if verbose is None else verbose

        if not eps > 0:
            raise ValueError(f"eps must be > 0, got {eps}.")
        if (not isinstance(maxits, numbers.Integral) or
                isinstance(maxits, bool) or maxits < 1):
            raise ValueError(f"maxits must be an integer >= 1, "
                             f"got {maxits}.")
        maxits = int(maxits)

        x0 = np.array(x0, dtype=float)
        if x0.shape != (self.n,):
            raise InvalidInputError(f"Initial guess must have length "
                                    f"{self.n}, got shape {x0.shape}.")

        # Full Newton.  Errors here propagate.
        x, its, converged = newton_iterate(
            self._eqs, PivotedNewtonStrategy(), x0, eps, maxits, verbose)
        if not converged:
            warnings.warn(f"Full Newton failed to converge after {its} "
                          f"iterations.", RuntimeWarning)

        # Chord Newton.  Errors here are recorded only.
        try:
            x_c, its_c, conv_c = newton_iterate(
                self._eqs, ChordNewtonStrategy(), x0, eps, maxits, verbose)
            chord = ChordOutcome(
                status='converged' if conv_c else 'exhausted',
                its=its_c, x=x_c)

        except Exception as e:
            if verbose:
                print(f"... Failed: {e.args[0] if e.args else e}")
            chord = ChordOutcome(status='failed', error=e)

        self.last_result = NewtonResult(x=x, its=its, converged=converged,
                                        chord=chord)
        return self.last_result
