"""Symmetric test matrices with a prescribed singular value spectrum.

Implements the "oscillating" matrices from P.C. Hansen, "Test matrices for
regularization methods", SIAM J. Sci. Comput. 16 (1995), pp. 506-512.

A random upper bidiagonal matrix B = U S V^T supplies a pseudo-random
orthogonal basis U, and the returned matrix is U diag(sigma) U^T. The
singular vectors of such matrices oscillate with an increasing number of
sign changes, independently of the spectrum that is put on them.
"""

import logging
from enum import IntEnum
from typing import Optional, Union

import numpy as np
from scipy import linalg

from .core import (
    InvalidArgument,
    NumericalFailure,
    check_size,
    machine_eps,
    resolve_dtype,
)

__all__ = ["DecayMode", "decay_spectrum", "oscillate", "oscillate_mode"]

logger = logging.getLogger(__name__)

RngLike = Union[None, int, np.random.Generator]

# LAPACK only handles single and double precision
_LAPACK_DTYPES = (np.dtype(np.float32), np.dtype(np.float64))


class DecayMode(IntEnum):
    """How the singular values decay from 1 down to 1/kappa."""

    GEOMETRIC = 1
    ARITHMETIC = 2


def _resolve_mode(mode) -> DecayMode:
    if isinstance(mode, str):
        try:
            return DecayMode[mode.upper()]
        except KeyError:
            pass
    elif not isinstance(mode, bool):
        try:
            return DecayMode(mode)
        except ValueError:
            pass
    raise InvalidArgument(
        f"Invalid mode value: {mode!r}. Use 'geometric' (1) or 'arithmetic' (2)."
    )


def decay_spectrum(
    n: int,
    mode: Union[DecayMode, int, str] = DecayMode.ARITHMETIC,
    dtype=np.float64,
) -> np.ndarray:
    """Build a singular value spectrum decaying from 1 to 1/kappa.

    The target condition number is kappa = sqrt(1 / eps), with eps the
    machine epsilon of ``dtype``.

    Args:
        n: Number of singular values.
        mode: ``DecayMode.GEOMETRIC`` gives sigma_i = factor**i with a
            constant ratio factor = kappa**(-1/(n-1)).
            ``DecayMode.ARITHMETIC`` gives values linear in the index.
        dtype: Floating element type.

    Returns:
        (n,) array of decreasing singular values, starting at 1.

    Raises:
        InvalidArgument: If ``mode`` is not a known decay mode.

    Example:
        >>> sigma = decay_spectrum(5, "arithmetic")
        >>> sigma.shape, float(sigma[0])
        ((5,), 1.0)
    """
    n = check_size(n)
    mode = _resolve_mode(mode)
    dtype = resolve_dtype(dtype)

    kappa = np.sqrt(1 / machine_eps(dtype))
    if n == 1:
        return np.ones(1, dtype=dtype)

    i = np.arange(n, dtype=dtype)
    if mode == DecayMode.GEOMETRIC:
        factor = kappa ** (-1 / (n - 1))
        return factor**i
    return 1 - i / (n - 1) * (1 - 1 / kappa)


def oscillate(sigma, rng: RngLike = None) -> np.ndarray:
    """Symmetric matrix with singular values ``sigma`` and a random basis.

    Args:
        sigma: (n,) positive singular values. Ordering is not enforced.
        rng: NumPy random generator or seed. If None, uses fresh entropy,
            so repeated calls give different matrices.

    Returns:
        (n, n) symmetric matrix U diag(sigma) U^T, same dtype as ``sigma``
        (float64 for non-floating input).

    Raises:
        InvalidArgument: If ``sigma`` is not a non-empty 1D array.
        NumericalFailure: If the SVD does not converge.

    Example:
        >>> A = oscillate(np.array([1.0, 1e-3, 1e-6]), rng=0)
        >>> np.allclose(A, A.T)
        True
    """
    sigma = np.asarray(sigma)
    if sigma.ndim != 1 or sigma.size == 0:
        raise InvalidArgument(
            f"Spectrum must be a non-empty 1D array, got shape {sigma.shape}"
        )
    if not np.issubdtype(sigma.dtype, np.floating):
        sigma = sigma.astype(np.float64)

    dtype = sigma.dtype
    work_dtype = dtype if dtype in _LAPACK_DTYPES else np.dtype(np.float64)
    eps = work_dtype.type(machine_eps(dtype))
    n = sigma.size
    rng = np.random.default_rng(rng)

    dv = rng.random(n, dtype=work_dtype) + eps
    ev = rng.random(n - 1, dtype=work_dtype) + eps
    B = np.diag(dv) + np.diag(ev, 1)

    try:
        U, _, _ = linalg.svd(B)
    except np.linalg.LinAlgError as err:
        logger.error("SVD of the %d x %d bidiagonal matrix failed: %s", n, n, err)
        raise NumericalFailure(f"SVD did not converge for n={n}") from err

    U = U.astype(dtype, copy=False)
    return (U * sigma) @ U.T


def oscillate_mode(
    n: int,
    mode: Union[DecayMode, int, str] = DecayMode.ARITHMETIC,
    dtype=np.float64,
    rng: Optional[RngLike] = None,
) -> np.ndarray:
    """Oscillating matrix whose spectrum decays by ``mode``.

    Shorthand for ``oscillate(decay_spectrum(n, mode, dtype), rng)``.
    """
    sigma = decay_spectrum(n, mode, dtype)
    logger.debug(
        "oscillate: n=%d mode=%s dtype=%s", n, _resolve_mode(mode).name, sigma.dtype
    )
    return oscillate(sigma, rng)
