"""regtools - Test problems for regularization methods.

Generators for discrete ill-posed problems A @ x = b with known solutions,
after P.C. Hansen's Regularization Tools:

- **problems**: closed-form discretizations (deriv2, shaw, wing, foxgood, heat)
- **spectrum**: symmetric matrices with a prescribed singular value decay
- **registry**: generate any problem by name
- **noise**: perturb exact right-hand sides

Example:
    >>> import numpy as np
    >>> from regtools import shaw, add_gaussian_noise
    >>>
    >>> problem = shaw(128)
    >>> A, b, x = problem
    >>> b_noisy = add_gaussian_noise(b, noise_level=0.01, rng=42)
    >>>
    >>> # Truncated SVD solution
    >>> U, s, Vt = np.linalg.svd(A)
    >>> k = 10
    >>> x_tsvd = Vt[:k].T @ ((U[:, :k].T @ b_noisy) / s[:k])

Reference:
    Hansen, P.C. "Regularization Tools: A Matlab package for analysis and
    solution of discrete ill-posed problems." Numerical Algorithms 6
    (1994): 1-35.
"""

__version__ = "0.1.0"

from .core import (
    RegProb,
    RegToolsError,
    InvalidArgument,
    NumericalFailure,
)
from .problems import deriv2, shaw, wing, foxgood, heat
from .spectrum import DecayMode, decay_spectrum, oscillate, oscillate_mode
from .registry import PROBLEMS, available_problems, make_problem
from .noise import add_gaussian_noise

__all__ = [
    # Version
    "__version__",
    # Problem record and errors
    "RegProb",
    "RegToolsError",
    "InvalidArgument",
    "NumericalFailure",
    # Discretized problems
    "deriv2",
    "shaw",
    "wing",
    "foxgood",
    "heat",
    # Prescribed spectra
    "DecayMode",
    "decay_spectrum",
    "oscillate",
    "oscillate_mode",
    # Registry
    "PROBLEMS",
    "available_problems",
    "make_problem",
    # Noise
    "add_gaussian_noise",
]
