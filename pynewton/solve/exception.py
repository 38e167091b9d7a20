

# Last updated: October 2026.


# ======================================================================

class SolverError(RuntimeError):
    """
    Base class for failures of the linear solvers (a degenerate pivot)
    and of a Newton run (e.g. a non-finite step once the iterates
    diverge).  The message gives the failure; optional keyword
    attributes record where and why it happened and are listed below
    the message by `str()`.

    Examples
    --------
    >>> print(SolverError("Non-finite step at iteration 4.",
    ...                   details="Iteration diverged."))
    Non-finite step at iteration 4.
    details -> Iteration diverged.
    """

    def __init__(self, *args, flag: int = None, details: str = None,
                 **kwargs):
        """
        Parameters
        ----------
        args :
            Passed to `RuntimeError`, normally just the message.
        flag : int, default = None
            Optional status code for callers that dispatch on a number.
        details : str, default = None
            Likely cause, e.g. ``"Matrix may be singular or require
            pivoting."``.
        kwargs :
            Further attributes to store on the exception, such as the
            `row` and `pivot` of a `SingularMatrixError`.
        """
        super().__init__(*args)
        self.flag, self.details = flag, details
        for k, v in kwargs.items():
            setattr(self, k, v)

    def __str__(self):
        """Message followed by one ``name -> value`` line per set
        attribute."""
        error_str = super().__str__()
        for k, v in self.__dict__.items():
            if v is not None:
                error_str += f"\n{k} -> {v}"
        return error_str



# ----------------------------------------------------------------------

class SingularMatrixError(SolverError):
    """
    Raised by the linear solvers when a pivot magnitude falls below the
    pivot tolerance, either during elimination / factorisation or
    during back substitution.  Attributes `row` and `pivot` give the
    location and value of the offending pivot.
    """

    def __init__(self, *args, row: int = None, pivot: float = None,
                 **kwargs):
        super().__init__(*args, row=row, pivot=pivot, **kwargs)


class InvalidInputError(ValueError):
    """
    Raised when the size of a supplied vector or matrix does not match
    the problem dimension.
    """
    pass
