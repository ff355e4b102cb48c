"""The test problem record returned by every generator."""

from dataclasses import dataclass

import numpy as np

from .errors import InvalidArgument

__all__ = ["RegProb"]


@dataclass(frozen=True, eq=False)
class RegProb:
    """Immutable test problem for regularization methods.

    Attributes:
        A: (n, n) matrix of interest.
        b: (n,) right-hand side.
        x: (n,) reference solution of ``A @ x = b``.

    Depending on the generator, ``b`` is either exactly ``A @ x`` or an
    independent discretization of the same integral, so only
    ``A @ x ≈ b`` is guaranteed.

    Example:
        >>> from regtools import deriv2
        >>> A, b, x = deriv2(32)
        >>> problem = deriv2(32)
        >>> problem.residual() < 1e-12
        True
    """

    A: np.ndarray
    b: np.ndarray
    x: np.ndarray

    def __post_init__(self) -> None:
        """Validate shapes and dtypes and store read-only views of the arrays."""
        for name in ("A", "b", "x"):
            view = np.asarray(getattr(self, name)).view()
            view.flags.writeable = False
            object.__setattr__(self, name, view)

        if self.A.ndim != 2 or self.A.shape[0] != self.A.shape[1]:
            raise InvalidArgument(f"A must be a square matrix, got shape {self.A.shape}")
        n = self.A.shape[0]
        if self.b.shape != (n,):
            raise InvalidArgument(f"b must have shape ({n},), got {self.b.shape}")
        if self.x.shape != (n,):
            raise InvalidArgument(f"x must have shape ({n},), got {self.x.shape}")
        if not self.A.dtype == self.b.dtype == self.x.dtype:
            raise InvalidArgument(
                f"A, b and x must share one dtype, got {self.A.dtype}, "
                f"{self.b.dtype} and {self.x.dtype}"
            )

    @property
    def n(self) -> int:
        """Problem size."""
        return self.A.shape[0]

    @property
    def dtype(self) -> np.dtype:
        return self.A.dtype

    def residual(self) -> float:
        """Euclidean norm of ``A @ x - b``."""
        return float(np.linalg.norm(self.A @ self.x - self.b))

    def __iter__(self):
        return iter((self.A, self.b, self.x))

    def __str__(self) -> str:
        return (
            "Test problems for Regularization Methods\n"
            f"A:\n{self.A}\n"
            f"b:\n{self.b}\n"
            f"x:\n{self.x}"
        )
