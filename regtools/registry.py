"""Lookup of test problems by name."""

import logging
from types import MappingProxyType
from typing import Callable, Dict, List

import numpy as np

from .core import InvalidArgument, RegProb
from .problems import deriv2, foxgood, heat, shaw, wing

__all__ = ["PROBLEMS", "available_problems", "make_problem"]

logger = logging.getLogger(__name__)

_PROBLEMS: Dict[str, Callable[..., RegProb]] = {
    "deriv2": deriv2,
    "shaw": shaw,
    "wing": wing,
    "foxgood": foxgood,
    "heat": heat,
}

PROBLEMS = MappingProxyType(_PROBLEMS)


def available_problems() -> List[str]:
    """Names accepted by :func:`make_problem`, sorted."""
    return sorted(PROBLEMS)


def make_problem(name: str, n: int, dtype=np.float64, **params) -> RegProb:
    """Generate a test problem by name.

    Args:
        name: One of :func:`available_problems`.
        n: Discretization size.
        dtype: Floating element type.
        **params: Problem-specific parameters, e.g. ``kappa`` for ``heat``
            or ``t1``/``t2`` for ``wing``.

    Returns:
        The generated RegProb.

    Raises:
        InvalidArgument: If the name is unknown.

    Example:
        >>> problem = make_problem("heat", 64, kappa=5.0)
        >>> problem.n
        64
    """
    try:
        generator = PROBLEMS[name]
    except KeyError:
        raise InvalidArgument(
            f"Unknown problem: {name!r}. Available: {', '.join(available_problems())}"
        ) from None

    logger.debug("make_problem: %s n=%s params=%s", name, n, params)
    return generator(n, dtype=dtype, **params)
