"""Element type handling shared by all generators."""

import numbers

import numpy as np

from .errors import InvalidArgument

__all__ = ["resolve_dtype", "machine_eps", "check_size", "check_even"]


def resolve_dtype(dtype=np.float64) -> np.dtype:
    """Normalize a dtype argument to a real floating NumPy dtype.

    Args:
        dtype: Anything ``np.dtype`` accepts, e.g. ``np.float32``,
            ``"float64"`` or ``np.longdouble``.

    Returns:
        The resolved ``np.dtype``.

    Raises:
        InvalidArgument: If the type is not a real floating type.
    """
    try:
        resolved = np.dtype(dtype)
    except TypeError as err:
        raise InvalidArgument(f"Unknown element type: {dtype!r}") from err

    if not np.issubdtype(resolved, np.floating):
        raise InvalidArgument(
            f"Element type must be a real floating type, got {resolved}"
        )
    return resolved


def machine_eps(dtype) -> float:
    """Machine epsilon of a floating dtype, as a scalar of that dtype."""
    return np.finfo(dtype).eps


def check_size(n) -> int:
    """Validate a problem size and return it as a Python int."""
    if isinstance(n, bool) or not isinstance(n, numbers.Integral):
        raise InvalidArgument(f"Problem size must be an integer, got {n!r}")
    if n < 1:
        raise InvalidArgument(f"Problem size must be positive, got {n}")
    return int(n)


def check_even(n) -> int:
    """Validate a problem size that must be even."""
    n = check_size(n)
    if n % 2 != 0:
        raise InvalidArgument(f"The dimension must be even, got n={n}")
    return n
