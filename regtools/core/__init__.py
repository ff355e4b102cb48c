"""Core data structures, element types and errors."""

from .dtypes import check_even, check_size, machine_eps, resolve_dtype
from .errors import InvalidArgument, NumericalFailure, RegToolsError
from .problem import RegProb

__all__ = [
    "RegProb",
    "RegToolsError",
    "InvalidArgument",
    "NumericalFailure",
    "resolve_dtype",
    "machine_eps",
    "check_size",
    "check_even",
]
