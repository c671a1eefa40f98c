"""
Tests for determinant().

Cofactor expansion is the reference algorithm; LAPACK's LU determinant
(scipy.linalg.det) is used only as an independent cross-check.
"""

import warnings

import numpy as np
import pytest
from scipy import linalg

from pymatrix import determinant
from pymatrix.core.compute.tolerances import COFACTOR_VS_LU, COFACTOR_WARNING_SIZE
from pymatrix.core.exceptions import EmptyMatrixError, NotSquareError


class TestKnownValues:

    def test_identity_2x2(self):
        assert determinant([[1, 0], [0, 1]]) == 1.0

    def test_worked_example(self, square_2x2):
        assert determinant(square_2x2) == -2.0

    def test_1x1(self):
        assert determinant([[7.5]]) == 7.5

    def test_3x3(self):
        # 6(-2*7 - 5*8) - 1(4*7 - 5*2) + 1(4*8 - (-2)*2) = -324 - 18 + 36
        assert determinant([[6, 1, 1], [4, -2, 5], [2, 8, 7]]) == -306.0

    def test_returns_plain_float(self, square_2x2):
        assert type(determinant(square_2x2)) is float

    def test_zero_row_gives_exact_zero(self):
        assert determinant([[1, 2, 3], [0, 0, 0], [4, 5, 6]]) == 0.0

    def test_zero_first_row(self):
        assert determinant([[0, 0, 0], [1, 2, 3], [4, 5, 7]]) == 0.0

    def test_identity_sizes(self):
        for n in range(1, 7):
            assert determinant(np.eye(n)) == 1.0

    def test_row_swap_flips_sign(self):
        a = [[2, 0, 1], [1, 3, 2], [1, 1, 2]]
        swapped = [a[1], a[0], a[2]]
        assert determinant(a) == 6.0
        assert determinant(swapped) == -6.0

    def test_singular_integer_matrix(self):
        assert determinant([[1, 2, 3], [4, 5, 6], [7, 8, 9]]) == 0.0


class TestAgainstLU:
    """Property: cofactor expansion agrees with LU on random matrices up to 6x6."""

    @pytest.mark.parametrize("n", [1, 2, 3, 4, 5, 6])
    def test_random_square(self, rng, n):
        for _ in range(5):
            a = rng.standard_normal((n, n))
            assert determinant(a) == pytest.approx(
                linalg.det(a), rel=COFACTOR_VS_LU.rtol, abs=COFACTOR_VS_LU.atol
            )

    def test_transpose_invariant(self, rng):
        a = rng.standard_normal((5, 5))
        assert determinant(a) == pytest.approx(
            determinant(a.T), rel=COFACTOR_VS_LU.rtol, abs=COFACTOR_VS_LU.atol
        )


class TestErrors:

    def test_not_square(self):
        with pytest.raises(NotSquareError, match="must be square") as exc_info:
            determinant([[1, 2, 3], [4, 5, 6]])
        assert exc_info.value.shape == (2, 3)

    def test_empty(self):
        with pytest.raises(EmptyMatrixError) as exc_info:
            determinant([])
        assert exc_info.value.operation == "determinant"


class TestLargeMatrixWarning:

    def test_warns_above_threshold(self, monkeypatch):
        monkeypatch.setattr("pymatrix.matrix._determinant.COFACTOR_WARNING_SIZE", 3)
        with pytest.warns(RuntimeWarning, match="4x4 matrix by cofactor"):
            value = determinant(np.eye(4))
        assert value == 1.0

    def test_no_warning_at_threshold(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            determinant(np.eye(min(COFACTOR_WARNING_SIZE, 6)))


class TestNonFinite:

    def test_inf_2x2(self):
        assert determinant([[np.inf, 0.0], [0.0, 1.0]]) == np.inf

    def test_negative_inf_2x2(self):
        assert determinant([[np.inf, 0.0], [0.0, -1.0]]) == -np.inf

    def test_inf_through_cofactor_recursion(self):
        a = np.eye(3)
        a[0, 0] = np.inf
        assert determinant(a) == np.inf

    def test_nan(self):
        assert np.isnan(determinant([[np.nan, 1.0], [1.0, 1.0]]))
