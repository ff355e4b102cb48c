"""Exception types raised by regtools."""

import numpy as np

__all__ = ["RegToolsError", "InvalidArgument", "NumericalFailure"]


class RegToolsError(Exception):
    """Base class for all regtools errors."""


class InvalidArgument(RegToolsError, ValueError):
    """A precondition on a generator argument was violated.

    Raised before any array is allocated.
    """


class NumericalFailure(RegToolsError, np.linalg.LinAlgError):
    """The linear algebra backend failed (e.g. SVD did not converge)."""
