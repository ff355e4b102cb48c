"""Classic ill-posed test problems for regularization methods.

Based on P.C. Hansen's Regularization Tools (MATLAB),
http://www.imm.dtu.dk/~pcha/Regutools/

Each problem discretizes an integral equation of the first kind
    g(s) = integral K(s,t) f(t) dt
into A @ x = b, with x a sampled reference solution.

All index formulas below are 1-based (i, j = 1, ..., n) and are evaluated
on ``np.arange(1, n + 1)`` so they read exactly as in the references.

References:
    - P.C. Hansen, "Regularization Tools: A Matlab package for analysis
      and solution of discrete ill-posed problems", Numer. Algorithms 6
      (1994), pp. 1-35.
    - C.B. Shaw, "Improvements of the Resolution of an Instrument by
      Numerical Solution of an Integral Equation", J. Math. Anal. Appl.
      37 (1972), pp. 83-112.
    - L. Fox and E.T. Goodwin, "The numerical solution of non-singular
      linear integral equations", Phil. Trans. Roy. Soc. A 245 (1953).
    - A.S. Carasso, "Determining surface temperatures from interior
      observations", SIAM J. Appl. Math. 42 (1982), pp. 558-574.
"""

import logging

import numpy as np
from scipy.linalg import toeplitz

from .core import InvalidArgument, RegProb, check_even, check_size, resolve_dtype

__all__ = ["deriv2", "shaw", "wing", "foxgood", "heat"]

logger = logging.getLogger(__name__)


def _index(n: int, dtype: np.dtype) -> np.ndarray:
    """1-based index vector [1, ..., n] as floats."""
    return np.arange(1, n + 1, dtype=dtype)


def deriv2(n: int, dtype=np.float64) -> RegProb:
    """Computation of the second derivative.

    Discretizes the Green's function of the second derivative on [0, 1]
    with homogeneous boundary conditions:
        K(s,t) = s(t - 1)  for s < t
        K(s,t) = t(s - 1)  for s >= t
    using Galerkin's method with box functions of width h = 1/n.

    Args:
        n: Discretization size.
        dtype: Floating element type.

    Returns:
        RegProb with symmetric A and b exactly equal to A @ x.

    Example:
        >>> A, b, x = deriv2(4)
        >>> np.allclose(A, A.T)
        True
    """
    n = check_size(n)
    dtype = resolve_dtype(dtype)
    logger.debug("deriv2: n=%d dtype=%s", n, dtype)

    h = dtype.type(1) / n
    h2 = h**2
    h32 = h * np.sqrt(h)

    i = _index(n, dtype)
    row = i[:, np.newaxis]
    col = i[np.newaxis, :]

    # Strictly lower triangle, then mirror
    A = np.tril(h2 * (col - 0.5) * ((row - 0.5) * h - 1), -1)
    A = A + A.T
    A[np.diag_indices(n)] = h2 * ((i**2 - i + 0.25) * h - (i - dtype.type(2) / 3))

    b = h32 * (i - 0.5) * ((i**2 + (i - 1) ** 2) * h2 / 2 - 1) / 6
    x = h32 * (i - 0.5)

    return RegProb(A, b, x)


def shaw(n: int, dtype=np.float64) -> RegProb:
    """One-dimensional image restoration model.

    The kernel is
        K(s,t) = (cos(s) + cos(t))^2 * (sin(u)/u)^2,  u = pi*(sin(s) + sin(t))
    on s, t in [-pi/2, pi/2], discretized by the midpoint rule. The
    solution is the sum of two Gaussian bumps.

    Args:
        n: Discretization size. Must be even.
        dtype: Floating element type.

    Returns:
        RegProb with symmetric A and b exactly equal to A @ x.

    Raises:
        InvalidArgument: If n is odd.
    """
    n = check_even(n)
    dtype = resolve_dtype(dtype)
    logger.debug("shaw: n=%d dtype=%s", n, dtype)

    pi = dtype.type(np.pi)
    h = pi / n
    theta = -pi / 2 + (_index(n, dtype) - 0.5) * h
    co = np.cos(theta)
    psi = pi * np.sin(theta)

    # Upper-left triangle, its point reflection in the lower-right block,
    # and the anti-diagonal where psi_i + psi_j vanishes
    A = np.zeros((n, n), dtype=dtype)
    for i in range(n // 2):
        j = np.arange(i, n - i - 1)
        ss = psi[i] + psi[j]
        A[i, j] = ((co[i] + co[j]) * np.sin(ss) / ss) ** 2
        A[n - 1 - j, n - 1 - i] = A[i, j]
        A[i, n - 1 - i] = (2 * co[i]) ** 2

    A = A + np.triu(A, 1).T
    A = A * h

    a1, c1, t1 = 2, 6, 0.8
    a2, c2, t2 = 1, 2, -0.5
    x = a1 * np.exp(-c1 * (theta - t1) ** 2) + a2 * np.exp(-c2 * (theta - t2) ** 2)
    b = A @ x

    return RegProb(A, b, x)


def wing(n: int, t1: float = 1 / 3, t2: float = 2 / 3, dtype=np.float64) -> RegProb:
    """Test problem with a discontinuous solution.

    Kernel K(s,t) = t * exp(-s * t^2) on [0, 1] x [0, 1]. The solution is
    the indicator of (t1, t2), and the right-hand side is
        g(s) = (exp(-s*t1^2) - exp(-s*t2^2)) / (2s).

    The right-hand side is evaluated from g directly, not as A @ x, so the
    discrete system only holds approximately.

    Args:
        n: Discretization size.
        t1: Left end of the solution's support.
        t2: Right end of the solution's support.
        dtype: Floating element type.

    Returns:
        RegProb with non-symmetric A.

    Raises:
        InvalidArgument: If t1 >= t2 or either bound is not a real number.
    """
    n = check_size(n)
    dtype = resolve_dtype(dtype)
    try:
        t1, t2 = dtype.type(t1), dtype.type(t2)
    except (TypeError, ValueError) as err:
        raise InvalidArgument(
            f"t1 and t2 must be real numbers, got t1={t1!r}, t2={t2!r}"
        ) from err
    if not t1 < t2:
        raise InvalidArgument(f"t1 must be smaller than t2, got t1={t1}, t2={t2}")
    logger.debug("wing: n=%d t1=%g t2=%g dtype=%s", n, t1, t2, dtype)

    h = dtype.type(1) / n
    sqh = np.sqrt(h)
    s = (_index(n, dtype) - 0.5) * h

    # Row i holds K(s_i, s_j) * h
    A = h * s[np.newaxis, :] * np.exp(-s[:, np.newaxis] * s[np.newaxis, :] ** 2)

    b = sqh * 0.5 * (np.exp(-s * t1**2) - np.exp(-s * t2**2)) / s

    x = np.zeros(n, dtype=dtype)
    x[(t1 < s) & (s < t2)] = sqh

    return RegProb(A, b, x)


def foxgood(n: int, dtype=np.float64) -> RegProb:
    """Severely ill-posed problem suggested by Fox & Goodwin.

    Kernel K(s,t) = sqrt(s^2 + t^2) on [0, 1] with solution f(t) = t,
    discretized by the midpoint rule. The right-hand side is the exact
    integral g(s) = ((1 + s^2)^1.5 - s^3) / 3, not A @ x.

    Args:
        n: Discretization size.
        dtype: Floating element type.

    Returns:
        RegProb with symmetric, entrywise positive A.
    """
    n = check_size(n)
    dtype = resolve_dtype(dtype)
    logger.debug("foxgood: n=%d dtype=%s", n, dtype)

    h = dtype.type(1) / n
    t = h * (_index(n, dtype) - 0.5)
    t2 = t**2

    A = h * np.sqrt(t2[:, np.newaxis] + t2[np.newaxis, :])
    x = t.copy()
    b = ((1 + t2) ** 1.5 - t**3) / 3

    return RegProb(A, b, x)


def heat(n: int, kappa: float = 1.0, dtype=np.float64) -> RegProb:
    """Inverse heat equation.

    A Volterra integral equation of the first kind on [0, 1] with kernel
        K(s,t) = k(s - t),
        k(t) = t^(-3/2) / (2 * kappa * sqrt(pi)) * exp(-1 / (4 * kappa^2 * t)),
    discretized by the midpoint rule, which gives a lower triangular
    Toeplitz matrix. kappa controls the ill-conditioning: kappa = 1 gives
    an ill-conditioned problem, kappa = 5 a well-conditioned one.

    Args:
        n: Discretization size. Must be even.
        kappa: Positive diffusion parameter.
        dtype: Floating element type.

    Returns:
        RegProb with b exactly equal to A @ x. The second half of x is zero.

    Raises:
        InvalidArgument: If n is odd or kappa is not positive.
    """
    n = check_even(n)
    if not kappa > 0:
        raise InvalidArgument(f"kappa must be positive, got {kappa}")
    dtype = resolve_dtype(dtype)
    kappa = dtype.type(kappa)
    logger.debug("heat: n=%d kappa=%g dtype=%s", n, kappa, dtype)

    h = dtype.type(1) / n
    t = h / 2 + np.arange(n, dtype=dtype) * h
    c = h / (2 * kappa * np.sqrt(dtype.type(np.pi)))
    d = 1 / (4 * kappa**2)

    k = c * t**-1.5 * np.exp(-d / t)
    r = np.zeros(n, dtype=dtype)
    r[0] = k[0]
    A = toeplitz(k, r)

    half = n // 2
    ti = _index(half, dtype) * 20 / n
    x = np.zeros(n, dtype=dtype)
    x[:half] = np.select(
        [ti < 2, ti < 3],
        [0.75 * ti**2 / 4, 0.75 + (ti - 2) * (3 - ti)],
        default=0.75 * np.exp(-(ti - 3) * 2),
    )
    b = A @ x

    return RegProb(A, b, x)
