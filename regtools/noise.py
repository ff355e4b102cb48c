"""Perturbation of exact right-hand sides."""

import numpy as np

from .core import InvalidArgument

__all__ = ["add_gaussian_noise"]


def add_gaussian_noise(
    b: np.ndarray,
    noise_level: float = 0.01,
    rng: np.random.Generator = None,
) -> np.ndarray:
    """Add Gaussian white noise to exact data.

    Args:
        b: Exact (noise-free) right-hand side, e.g. ``problem.b``.
        noise_level: Norm of the noise relative to ||b||_2.
            E.g., 0.01 means 1% noise level.
        rng: NumPy random generator or seed. If None, uses fresh entropy.

    Returns:
        New array b + e with ||e||_2 / ||b||_2 = noise_level, same dtype
        as ``b`` (float64 for non-floating input).

    Raises:
        InvalidArgument: If noise_level is negative or NaN.

    Example:
        >>> from regtools import shaw
        >>> problem = shaw(64)
        >>> b_noisy = add_gaussian_noise(problem.b, noise_level=0.01, rng=0)
    """
    if not noise_level >= 0:
        raise InvalidArgument(f"noise_level must be non-negative, got {noise_level}")

    b = np.asarray(b)
    if not np.issubdtype(b.dtype, np.floating):
        b = b.astype(np.float64)
    rng = np.random.default_rng(rng)

    b_norm = np.linalg.norm(b)
    if b_norm <= 0:
        return b.copy()

    e = rng.standard_normal(b.shape)
    e *= noise_level * b_norm / np.linalg.norm(e)

    return (b + e).astype(b.dtype, copy=False)
