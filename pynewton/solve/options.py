from __future__ import annotations

import numbers
from dataclasses import dataclass, fields, replace

# Last updated: October 2026.

# ======================================================================


@dataclass(frozen=True, kw_only=True)
class NewtonOptions:
    """
    Dataclass holding the default settings used by `NewtonSystem.solve`
    when values are not given explicitly.  See `set_newton_options` for
    full details.
    """
    eps: float
    maxits: int
    verbose: bool

    def __post_init__(self):
        """Check certain values"""
        if not self.eps > 0:
            raise ValueError("Require 'eps' > 0.")
        if (not isinstance(self.maxits, numbers.Integral) or
                isinstance(self.maxits, bool) or self.maxits < 1):
            raise ValueError("Require 'maxits' to be an integer >= 1.")


DEFAULT_EPS = 1e-6
DEFAULT_MAXITS = 1000

# Create single instance and set defaults.
_newton_options = NewtonOptions(eps=DEFAULT_EPS, maxits=DEFAULT_MAXITS,
                                verbose=False)


# ----------------------------------------------------------------------

def get_newton_options() -> NewtonOptions:
    """
    Returns
    -------
    newton_options : NewtonOptions
        A copy of the current options.  For a full description of each
        option, see `set_newton_options`.
    """
    return replace(_newton_options)


# noinspection PyIncorrectDocstring
def set_newton_options(**kwargs):
    """
    Set the current Newton solver options.  Options not given are left
    unchanged.  If any value is invalid no options are changed.

    Parameters
    ----------
    eps : float, default = 1e-6
        Convergence threshold.  Iteration stops when the largest
        absolute component of the step :math:`\\Delta x` is below this
        value.  Must be > 0.
    maxits : int, default = 1000
        Maximum number of iterations for each run.  Must be >= 1.
    verbose : bool, default = False
        If `True`, print progress for each iteration.

    Raises
    ------
    KeyError
        If an unknown option is given.
    ValueError
        If an option value is invalid.
    """
    global _newton_options
    known = {f.name for f in fields(NewtonOptions)}
    for k in kwargs:
        if k not in known:
            raise KeyError(f"Unknown Newton option '{k}'.")

    _newton_options = replace(_newton_options, **kwargs)


def options_from_text(eps_text: str | None,
                      maxits_text: str | None) -> (NewtonOptions,
                                                   list[str]):
    """
    Build options from user-entered text, such as form fields or
    command line arguments.  Any value that is missing, cannot be
    parsed or is not positive is replaced by its default
    (``eps = 1e-6``, ``maxits = 1000``).

    Examples
    --------
    >>> opts, replaced = options_from_text('1e-8', 'abc')
    >>> opts.eps, opts.maxits, replaced
    (1e-08, 1000, ['maxits'])

    Returns
    -------
    options : NewtonOptions
        Resulting options.  `verbose` is taken from the current options.
    replaced : list[str]
        Names of the fields where the default was substituted.
    """
    replaced = []

    try:
        eps = float(eps_text.strip().replace(',', ''))
        if not eps > 0 or eps == float('inf'):
            raise ValueError
    except (AttributeError, ValueError):
        eps = DEFAULT_EPS
        replaced.append('eps')

    try:
        maxits = int(maxits_text.strip())
        if maxits < 1:
            raise ValueError
    except (AttributeError, ValueError):
        maxits = DEFAULT_MAXITS
        replaced.append('maxits')

    return NewtonOptions(eps=eps, maxits=maxits,
                         verbose=_newton_options.verbose), replaced
