"""
Residual evaluation and forward-difference Jacobian approximation for a
square system of nonlinear equations :math:`F(x) = 0`.
"""
from __future__ import annotations

from collections.abc import Callable, Sequence

import numpy as np
from numpy.typing import ArrayLike

from pynewton.solve.exception import InvalidInputError

# Last updated: October 2026.

FD_STEP = 1e-6
"""Fixed forward-difference step `h` used for every Jacobian column."""


# ======================================================================

class EquationSet:
    r"""
    An ordered, immutable set of `n` scalar equations
    :math:`f_i(x) = 0`, each taking a vector :math:`x` of length `n`.

    Examples
    --------
    >>> eqs = EquationSet([lambda x: x[0] + x[1] - 3,
    ...                    lambda x: x[0] - x[1] - 1])
    >>> eqs.n
    2
    >>> eqs.residual([2.0, 1.0]).tolist()
    [0.0, 0.0]

    Parameters
    ----------
    funcs : Sequence[Callable[[ndarray], float]]
        The equations, in order.  The problem dimension `n` is the
        number of equations.

    Raises
    ------
    ValueError
        If no equations are given or an entry is not callable.
    """

    def __init__(self, funcs: Sequence[Callable[[np.ndarray], float]]):
        funcs = tuple(funcs)
        if len(funcs) == 0:
            raise ValueError("At least one equation is required.")
        for i, f in enumerate(funcs):
            if not callable(f):
                raise ValueError(f"Equation {i} is not callable.")

        self._funcs = funcs

    def __call__(self, x: ArrayLike) -> np.ndarray:
        return self.residual(x)

    def __len__(self) -> int:
        return self.n

    def __repr__(self):
        return f"{type(self).__name__}(n={self.n})"

    # -- Alternate Constructors ----------------------------------------

    @classmethod
    def from_vector_func(cls, func: Callable[[np.ndarray], ArrayLike],
                         n: int) -> EquationSet:
        """
        Build an equation set of fixed dimension `n` from a single
        vector-valued function returning all `n` residuals at once.

        Parameters
        ----------
        func : Callable[[ndarray], array-like]
            Function returning :math:`[f_0(x), ..., f_{n-1}(x)]`.
        n : int
            Problem dimension (`n >= 1`).
        """
        if n < 1:
            raise ValueError(f"Dimension must be >= 1, got {n}.")
        return _VectorEquationSet(func, n)

    # -- Public Methods ------------------------------------------------

    @property
    def funcs(self) -> tuple[Callable, ...]:
        """The equations, in order."""
        return self._funcs

    @property
    def n(self) -> int:
        """Problem dimension (number of equations and unknowns)."""
        return len(self._funcs)

    def residual(self, x: ArrayLike) -> np.ndarray:
        """
        Evaluate each equation at `x`.

        Returns
        -------
        fx : ndarray
            Length `n` array with ``fx[i] = f_i(x)``.

        Raises
        ------
        InvalidInputError
            If ``len(x) != n``.
        """
        x = self._check_x(x)
        return np.array([f(x) for f in self._funcs], dtype=float)

    def jacobian(self, x: ArrayLike) -> (np.ndarray, np.ndarray):
        r"""
        Approximate the Jacobian at `x` by one-sided forward
        differences, using a fixed step :math:`h` = `FD_STEP`:

        .. math:: J_{ij} = \frac{f_i(x + h e_j) - f_i(x)}{h}

        The residual at `x` is computed once and serves both as the
        difference baseline and as a return value, so the caller does
        not need to evaluate it again.  `x` itself is not modified.

        Returns
        -------
        jac : ndarray
            `n` x `n` Jacobian estimate.
        fx : ndarray
            Residual :math:`F(x)`.

        Raises
        ------
        InvalidInputError
            If ``len(x) != n``.
        """
        x_work = self._check_x(x).copy()
        fx = self.residual(x_work)
        jac = np.empty((self.n, self.n))

        for j in range(self.n):
            x_j = x_work[j]
            x_work[j] = x_j + FD_STEP
            jac[:, j] = (self.residual(x_work) - fx) / FD_STEP
            x_work[j] = x_j

        return jac, fx

    # -- Private Methods -----------------------------------------------

    def _check_x(self, x: ArrayLike) -> np.ndarray:
        x = np.array(x, dtype=float)
        if x.ndim != 1 or x.shape[0] != self.n:
            raise InvalidInputError(f"Expected vector of length {self.n}, "
                                    f"got shape {x.shape}.")
        return x


# ----------------------------------------------------------------------

class _VectorEquationSet(EquationSet):
    """
    `EquationSet` backed by one vector-valued function of known
    dimension.
    """

    def __init__(self, func: Callable[[np.ndarray], ArrayLike], n: int):
        if not callable(func):
            raise ValueError("Equation function is not callable.")

        # Provide per-equation views so that `funcs` stays meaningful.
        super().__init__([_Component(func, i) for i in range(n)])
        self._func = func

    def residual(self, x: ArrayLike) -> np.ndarray:
        x = self._check_x(x)
        fx = np.array(self._func(x), dtype=float)
        if fx.shape != (self.n,):
            raise InvalidInputError(f"Function result shape {fx.shape} "
                                    f"does not match problem dimension "
                                    f"({self.n}).")
        return fx


class _Component:
    # Single component of a vector-valued function.
    def __init__(self, func, i: int):
        self.func, self.i = func, i

    def __call__(self, x):
        return float(self.func(x)[self.i])
