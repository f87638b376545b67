# ======================================================================

class SolverError(RuntimeError):
    """
    Raised by ``find_root(..., disp=True)`` when the selected method
    returns a non-finite result.  The solver classes never raise it;
    they return `NaN` or their best estimate instead.

    Attributes
    ----------
    flag : int
        Failure code.  ``1``: the result was `NaN` or infinite.
    details : str
        Description of the failure.
    method : str
        Normalised method name, e.g. ``'brent'``.
    root : float
        The non-finite value returned by the solver.
    its : int
        Iterations used by the solver before it stopped.
    """

    def __init__(self, *args, flag: int = None, details: str = None,
                 **kwargs):
        """
        Parameters
        ----------
        args :
            Message passed to `RuntimeError`.
        flag, details :
            See class attributes.
        kwargs :
            Result values to attach, in ``find_root`` these are
            `method`, `root` and `its`.
        """
        super().__init__(*args)
        self.flag, self.details = flag, details
        for k, v in kwargs.items():
            setattr(self, k, v)

    def __str__(self):
        """Report each attached value on its own line."""
        error_str = super().__str__()
        for k, v in self.__dict__.items():
            if v is not None:
                error_str += f"\n{k} -> {v}"
        return error_str
