# arrow_fem/kernel/errors.py
"""Error and warning types raised by the analysis pipeline."""


class InvalidParameter(ValueError):
    """Raised when an input is out of its valid domain. No partial result is produced."""
    pass


class SingularSystem(RuntimeError):
    """Raised when the reduced mass matrix cannot be inverted."""
    pass


class ComputationWarning(RuntimeWarning):
    """
    Non-fatal numerical defect in the eigen solve.

    Imaginary or clearly negative eigenvalues point at an asymmetric or
    badly reduced system. The result is still returned, with the messages
    attached, so the caller can decide what to do with it.
    """
    pass
