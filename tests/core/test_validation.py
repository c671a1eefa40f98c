"""
Tests for input validation utilities.

Validates every function in core/validation.py:
    - check_rectangular: ragged nested sequences
    - check_array: conversion, dtype coercion, non-numeric rejection
    - check_2d: dimensionality
    - check_has_columns: rows without cells
    - check_positive_int: dimension values
"""

import numpy as np
import pytest

from pymatrix.core.exceptions import DimensionError, ValidationError
from pymatrix.core.validation import (
    check_2d,
    check_array,
    check_has_columns,
    check_positive_int,
    check_rectangular,
)


# ═══════════════════════════════════════════════════════════════════════
# check_rectangular
# ═══════════════════════════════════════════════════════════════════════


class TestCheckRectangular:

    def test_equal_rows_pass(self):
        check_rectangular([[1, 2], [3, 4]], "A")

    def test_ragged_rows_rejected(self):
        with pytest.raises(DimensionError, match="ragged rows"):
            check_rectangular([[1, 2], [3]], "A")

    def test_error_names_first_bad_row(self):
        with pytest.raises(DimensionError, match="row 2 has 1"):
            check_rectangular([[1, 2], [3, 4], [5]], "A")

    def test_flat_sequence_ignored(self):
        check_rectangular([1, 2, 3], "A")

    def test_ndarray_ignored(self):
        check_rectangular(np.zeros((2, 2)), "A")


# ═══════════════════════════════════════════════════════════════════════
# check_array
# ═══════════════════════════════════════════════════════════════════════


class TestCheckArray:
    """check_array converts to float64 and rejects non-numeric data."""

    def test_ints_promoted_to_float64(self):
        result = check_array([[1, 2], [3, 4]], "A")
        assert result.dtype == np.float64
        np.testing.assert_array_equal(result, [[1.0, 2.0], [3.0, 4.0]])

    def test_returns_copy(self):
        source = np.array([[1.0, 2.0]])
        result = check_array(source, "A")
        result[0, 0] = 99.0
        assert source[0, 0] == 1.0

    def test_rejects_strings(self):
        with pytest.raises(ValidationError, match="non-numeric dtype"):
            check_array([["a", "b"]], "A")

    def test_rejects_mixed_types(self):
        with pytest.raises(ValidationError, match="object dtype"):
            check_array([[None, 1.0]], "A")

    def test_ints_beyond_int64_become_float(self):
        result = check_array([[10**20, 1], [1, 1]], "A")
        assert result.dtype == np.float64
        assert result[0, 0] == 1e20

    def test_rejects_int_beyond_float64(self):
        with pytest.raises(ValidationError, match="too large for float64"):
            check_array([[10**400, 1]], "A")

    def test_rejects_big_int_mixed_with_string(self):
        with pytest.raises(ValidationError, match="object dtype"):
            check_array([[10**20, "1"]], "A")

    def test_rejects_booleans(self):
        with pytest.raises(ValidationError, match="non-numeric"):
            check_array([[True, False]], "A")

    def test_rejects_complex(self):
        with pytest.raises(ValidationError, match="complex"):
            check_array([[1 + 2j]], "A")

    def test_nan_accepted(self):
        result = check_array([[np.nan, 1.0]], "A")
        assert np.isnan(result[0, 0])

    def test_name_in_message(self):
        with pytest.raises(ValidationError, match="^B:"):
            check_array([["x"]], "B")


# ═══════════════════════════════════════════════════════════════════════
# check_2d / check_has_columns
# ═══════════════════════════════════════════════════════════════════════


class TestCheck2d:

    def test_2d_passes(self):
        check_2d(np.zeros((2, 3)), "A")

    def test_1d_rejected(self):
        with pytest.raises(DimensionError, match="expected 2D"):
            check_2d(np.zeros(3), "A")

    def test_3d_rejected(self):
        with pytest.raises(DimensionError, match="got 3D"):
            check_2d(np.zeros((2, 2, 2)), "A")


class TestCheckHasColumns:

    def test_rows_without_columns_rejected(self):
        with pytest.raises(DimensionError, match="zero columns"):
            check_has_columns(np.zeros((2, 0)), "A")

    def test_no_rows_passes(self):
        check_has_columns(np.zeros((0, 0)), "A")


# ═══════════════════════════════════════════════════════════════════════
# check_positive_int
# ═══════════════════════════════════════════════════════════════════════


class TestCheckPositiveInt:

    @pytest.mark.parametrize("value, expected", [(3, 3), ("4", 4), (" 2 ", 2), (5.0, 5)])
    def test_accepted(self, value, expected):
        assert check_positive_int(value, "rows") == expected

    @pytest.mark.parametrize("value", [0, -1, 2.5, "abc", "", None, True, float("nan")])
    def test_rejected(self, value):
        with pytest.raises(ValidationError, match="rows"):
            check_positive_int(value, "rows")
