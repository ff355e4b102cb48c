"""Tests for the discretized ill-posed test problems."""

import logging

import numpy as np
import pytest

from regtools import InvalidArgument, deriv2, foxgood, heat, shaw, wing


class TestDeriv2:
    """Tests for the second derivative problem."""

    def test_n4_symmetric_and_consistent(self):
        """deriv2(4) is a symmetric 4x4 system with b = A @ x."""
        problem = deriv2(4)
        A, b, x = problem
        assert A.shape == (4, 4)
        assert b.shape == x.shape == (4,)
        assert np.array_equal(A, A.T)
        assert np.linalg.norm(A @ x - b) < 1e-10

    @pytest.mark.parametrize("n", [1, 2, 7, 32, 100])
    def test_exact_rhs(self, n):
        """b equals A @ x for any size."""
        problem = deriv2(n)
        assert problem.residual() <= 1e-12 * np.linalg.norm(problem.b)

    def test_entries_match_closed_form(self):
        """Spot-check 1-based index formulas at the matrix corners."""
        n = 5
        h = 1 / n
        A, b, x = deriv2(n)
        # i = j = 1
        assert np.isclose(A[0, 0], h**2 * ((1 - 1 + 0.25) * h - (1 - 2 / 3)))
        # i = n, j = 1
        assert np.isclose(A[n - 1, 0], h**2 * 0.5 * ((n - 0.5) * h - 1))
        assert np.isclose(x[0], h**1.5 * 0.5)
        assert np.isclose(x[-1], h**1.5 * (n - 0.5))

    def test_negative_definite(self):
        """The discrete Green's function of u'' is negative definite."""
        A, _, _ = deriv2(16)
        assert np.all(np.linalg.eigvalsh(A) < 0)


class TestShaw:
    """Tests for the Shaw image restoration problem."""

    @pytest.mark.parametrize("n", [2, 8, 64])
    def test_exact_rhs(self, n):
        """b equals A @ x."""
        problem = shaw(n)
        assert problem.residual() <= 1e-12 * np.linalg.norm(problem.b)

    def test_symmetric(self):
        """A is symmetric and centro-symmetric."""
        A, _, _ = shaw(32)
        assert np.allclose(A, A.T)
        assert np.allclose(A, A[::-1, ::-1])

    def test_matches_kernel(self):
        """Off anti-diagonal entries equal h * K(theta_i, theta_j)."""
        n = 16
        h = np.pi / n
        theta = -np.pi / 2 + (np.arange(1, n + 1) - 0.5) * h
        A, _, x = shaw(n)

        i, j = 2, 5
        u = np.pi * (np.sin(theta[i]) + np.sin(theta[j]))
        expected = h * (np.cos(theta[i]) + np.cos(theta[j])) ** 2 * (np.sin(u) / u) ** 2
        assert np.isclose(A[i, j], expected)
        # u = 0 on the anti-diagonal
        assert np.isclose(A[i, n - 1 - i], h * (2 * np.cos(theta[i])) ** 2)

        expected_x = 2 * np.exp(-6 * (theta - 0.8) ** 2) + np.exp(-2 * (theta + 0.5) ** 2)
        assert np.allclose(x, expected_x)

    def test_odd_dimension_raises(self):
        """Odd n is rejected."""
        with pytest.raises(InvalidArgument, match="must be even"):
            shaw(7)


class TestWing:
    """Tests for the problem with a discontinuous solution."""

    def test_shapes_and_finite(self):
        """A, b, x have the right shapes and finite values."""
        A, b, x = wing(50)
        assert A.shape == (50, 50)
        assert b.shape == x.shape == (50,)
        assert np.all(np.isfinite(A))
        assert np.all(np.isfinite(b))
        assert np.all(np.isfinite(x))

    def test_default_interval(self):
        """wing(n) is wing(n, 1/3, 2/3)."""
        default = wing(20)
        explicit = wing(20, 1 / 3, 2 / 3)
        assert np.array_equal(default.A, explicit.A)
        assert np.array_equal(default.b, explicit.b)
        assert np.array_equal(default.x, explicit.x)

    def test_indicator_solution(self):
        """x is sqrt(h) on sample points strictly inside (t1, t2)."""
        n = 6
        _, _, x = wing(n)
        # s = 1/12, 3/12, ..., 11/12; only 5/12 and 7/12 lie in (1/3, 2/3)
        expected = np.zeros(n)
        expected[[2, 3]] = np.sqrt(1 / n)
        assert np.allclose(x, expected)

    def test_not_symmetric(self):
        """The kernel t * exp(-s t^2) is not symmetric."""
        A, _, _ = wing(10)
        assert not np.allclose(A, A.T)

    def test_rhs_is_approximate(self):
        """b approximates A @ x without being equal to it."""
        A, b, x = wing(200)
        rel = np.linalg.norm(A @ x - b) / np.linalg.norm(b)
        assert 0 < rel < 0.1

    @pytest.mark.parametrize("t1, t2", [(0.5, 0.5), (0.7, 0.2)])
    def test_invalid_interval_raises(self, t1, t2):
        """t1 >= t2 is rejected."""
        with pytest.raises(InvalidArgument, match="t1 must be smaller than t2"):
            wing(10, t1, t2)

    @pytest.mark.parametrize("t1, t2", [("a", "b"), (0.1, "high"), (object(), 0.5)])
    def test_non_numeric_interval_raises(self, t1, t2):
        """Bounds that are not real numbers are rejected."""
        with pytest.raises(InvalidArgument, match="must be real numbers"):
            wing(10, t1, t2)


class TestFoxgood:
    """Tests for the Fox & Goodwin problem."""

    def test_n5(self):
        """x holds the midpoints of the h = 0.2 grid; A is symmetric positive."""
        A, b, x = foxgood(5)
        assert np.allclose(x, [0.1, 0.3, 0.5, 0.7, 0.9])
        assert np.allclose(A, A.T)
        assert np.all(A > 0)
        assert np.all(np.isfinite(b))

    def test_rhs_closed_form(self):
        """b is the exact integral, not A @ x."""
        A, b, x = foxgood(10)
        t = (np.arange(1, 11) - 0.5) / 10
        assert np.allclose(b, ((1 + t**2) ** 1.5 - t**3) / 3)
        assert not np.allclose(A @ x, b, rtol=1e-8, atol=0)
        assert np.linalg.norm(A @ x - b) / np.linalg.norm(b) < 5e-2


class TestHeat:
    """Tests for the inverse heat equation."""

    def test_n10_toeplitz(self):
        """heat(10, 1) is lower triangular Toeplitz; x vanishes on its second half."""
        A, b, x = heat(10, 1)
        assert A.shape == (10, 10)
        assert np.array_equal(A[1:, 1:], A[:-1, :-1])
        assert np.all(np.triu(A, 1) == 0)
        assert np.all(x[5:] == 0)
        assert np.linalg.norm(A @ x - b) < 1e-10

    @pytest.mark.parametrize("kappa", [1.0, 2.5, 5.0])
    def test_exact_rhs(self, kappa):
        """b equals A @ x."""
        problem = heat(40, kappa)
        assert problem.residual() <= 1e-12 * np.linalg.norm(problem.b)

    def test_default_kappa(self):
        """heat(n) is heat(n, 1)."""
        assert np.array_equal(heat(20).A, heat(20, 1.0).A)

    def test_solution_profile(self):
        """x rises quadratically, peaks on the plateau and decays."""
        n = 20
        _, _, x = heat(n)
        # ti = 20 i / n = i for n = 20
        assert np.isclose(x[0], 0.75 / 4)
        assert np.isclose(x[1], 0.75 + 0 * 1)
        assert np.isclose(x[2], 0.75)
        assert np.isclose(x[3], 0.75 * np.exp(-2))
        assert np.all(x[n // 2 :] == 0)

    def test_first_column_kernel(self):
        """First column is the sampled heat kernel."""
        n, kappa = 8, 2.0
        A, _, _ = heat(n, kappa)
        h = 1 / n
        t = h / 2 + np.arange(n) * h
        k = h / (2 * kappa * np.sqrt(np.pi)) * t**-1.5 * np.exp(-1 / (4 * kappa**2 * t))
        assert np.allclose(A[:, 0], k)

    def test_odd_dimension_raises(self):
        """Odd n is rejected."""
        with pytest.raises(InvalidArgument, match="must be even"):
            heat(9)

    def test_nonpositive_kappa_raises(self):
        """kappa must be positive."""
        with pytest.raises(InvalidArgument, match="kappa"):
            heat(10, 0.0)


class TestElementType:
    """Tests for the dtype argument shared by all generators."""

    @pytest.mark.parametrize("generator", [deriv2, shaw, wing, foxgood, heat])
    @pytest.mark.parametrize("dtype", [np.float32, np.float64, np.longdouble])
    def test_dtype_propagates(self, generator, dtype):
        """A, b and x all carry the requested element type."""
        A, b, x = generator(8, dtype=dtype)
        assert A.dtype == b.dtype == x.dtype == np.dtype(dtype)

    def test_float32_close_to_float64(self):
        """Single precision agrees with double precision to float32 accuracy."""
        single = shaw(16, dtype=np.float32)
        double = shaw(16)
        assert np.allclose(single.A, double.A, rtol=1e-5, atol=1e-6)

    @pytest.mark.parametrize("dtype", [np.int64, np.complex128, "not-a-type"])
    def test_non_real_float_raises(self, dtype):
        """Integer, complex and unknown types are rejected."""
        with pytest.raises(InvalidArgument):
            deriv2(4, dtype=dtype)

    @pytest.mark.parametrize("n", [0, -2, 2.0, True])
    def test_invalid_size_raises(self, n):
        """Sizes must be positive integers."""
        with pytest.raises(InvalidArgument):
            foxgood(n)

    def test_invalid_argument_is_value_error(self):
        """InvalidArgument can be caught as ValueError."""
        with pytest.raises(ValueError):
            shaw(3)


class TestLogging:
    """Tests for per-call debug logging."""

    @pytest.mark.parametrize("generator, n", [(deriv2, 4), (foxgood, 5), (heat, 6)])
    def test_one_debug_record_per_call(self, caplog, generator, n):
        """Each call logs one DEBUG line naming the problem and size."""
        caplog.set_level(logging.DEBUG, logger="regtools.problems")
        generator(n)

        records = [r for r in caplog.records if r.name == "regtools.problems"]
        assert len(records) == 1
        assert records[0].levelno == logging.DEBUG
        message = records[0].getMessage()
        assert message.startswith(f"{generator.__name__}:")
        assert f"n={n}" in message

    def test_no_record_on_invalid_argument(self, caplog):
        """Rejected calls fail before logging."""
        caplog.set_level(logging.DEBUG, logger="regtools.problems")
        with pytest.raises(InvalidArgument):
            shaw(5)
        assert not [r for r in caplog.records if r.name == "regtools.problems"]
