"""
Matrix: immutable dense matrix value type.

Wraps a read-only float64 array and enforces the shape invariants every
operation relies on: a matrix is either empty (zero rows, shape (0, 0))
or a rectangular grid with at least one row and one column. Editing
helpers return new matrices; nothing here mutates in place.

Construction:
    Matrix.from_array([[1, 2], [3, 4]])
    Matrix.empty()
    zeros(rows, cols)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.core.compute.tolerances import DIMENSION_MIN, DIMENSION_MAX
from pymatrix.core.exceptions import ValidationError
from pymatrix.core.validation import (
    check_array, check_2d, check_has_columns, check_positive_int, check_rectangular,
)


@dataclass(frozen=True, eq=False)
class Matrix:
    """
    Immutable rectangular matrix of float64 cells.

    Two matrices are equal when they have the same shape and identical
    cells (IEEE comparison, so NaN cells never compare equal). The
    underlying array is flagged read-only; use to_array() for a writable
    copy.
    """
    _data: NDArray[np.floating[Any]]

    @classmethod
    def from_array(cls, data: ArrayLike | Matrix, *, name: str = "matrix") -> Matrix:
        """
        Build a Matrix from array-like data.

        Parameters
        ----------
        data : array-like or Matrix
            Nested sequences of numbers, a 2D numpy array, or an existing
            Matrix (returned unchanged). An empty sequence gives the empty
            matrix.
        name : str
            Parameter name used in error messages.
        """
        if isinstance(data, Matrix):
            return data
        check_rectangular(data, name)
        array = check_array(data, name)
        if array.ndim == 1 and array.size == 0:
            return cls.empty()
        return cls._build(array, name)

    @classmethod
    def empty(cls) -> Matrix:
        """The matrix with zero rows."""
        return cls._build(np.empty((0, 0), dtype=np.float64), "matrix")

    @classmethod
    def _build(cls, array: NDArray, name: str) -> Matrix:
        """Internal builder with validation. Takes ownership of array."""
        check_2d(array, name)
        check_has_columns(array, name)
        if array.shape[0] == 0:
            array = np.empty((0, 0), dtype=np.float64)
        array = np.ascontiguousarray(array, dtype=np.float64)
        array.setflags(write=False)
        return cls(_data=array)

    # --- Shape ---

    @property
    def shape(self) -> tuple[int, int]:
        """(rows, cols); (0, 0) for the empty matrix."""
        return (int(self._data.shape[0]), int(self._data.shape[1]))

    @property
    def n_rows(self) -> int:
        return int(self._data.shape[0])

    @property
    def n_cols(self) -> int:
        return int(self._data.shape[1])

    @property
    def is_empty(self) -> bool:
        return self._data.shape[0] == 0

    @property
    def is_square(self) -> bool:
        """True for non-empty matrices with rows == cols."""
        return not self.is_empty and self.n_rows == self.n_cols

    # --- Access ---

    @property
    def data(self) -> NDArray[np.floating[Any]]:
        """Read-only view of the cells."""
        return self._data

    def to_array(self) -> NDArray[np.floating[Any]]:
        """Writable copy of the cells."""
        return self._data.copy()

    def to_list(self) -> list[list[float]]:
        """Cells as nested Python lists; [] for the empty matrix."""
        return self._data.tolist()

    def row(self, i: int) -> tuple[float, ...]:
        return tuple(float(v) for v in self._data[i])

    def __getitem__(self, key: tuple[int, int]) -> float:
        i, j = key
        return float(self._data[i, j])

    def __len__(self) -> int:
        return self.n_rows

    def __iter__(self) -> Iterator[tuple[float, ...]]:
        for i in range(self.n_rows):
            yield self.row(i)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._data, other._data))

    def __hash__(self) -> int:
        # + 0.0 folds -0.0 into 0.0 so equal matrices hash equally
        return hash((self.shape, (self._data + 0.0).tobytes()))

    # --- Copy-on-write editing ---

    def with_value(self, i: int, j: int, value: float) -> Matrix:
        """Return a copy with cell (i, j) replaced by value."""
        if not (0 <= i < self.n_rows and 0 <= j < self.n_cols):
            raise ValidationError(
                f"cell ({i}, {j}) is outside a {self.n_rows}x{self.n_cols} matrix"
            )
        try:
            number = float(value)
        except (TypeError, ValueError) as e:
            raise ValidationError(f"cell ({i}, {j}): expected a number, got {value!r}") from e
        array = self.to_array()
        array[i, j] = number
        return Matrix._build(array, "matrix")

    def resize(self, rows: int, cols: int) -> Matrix:
        """
        Return a zero-filled rows x cols matrix holding the overlapping
        top-left block of this one.
        """
        rows = check_positive_int(rows, "rows")
        cols = check_positive_int(cols, "cols")
        array = np.zeros((rows, cols), dtype=np.float64)
        keep_r = min(rows, self.n_rows)
        keep_c = min(cols, self.n_cols)
        array[:keep_r, :keep_c] = self._data[:keep_r, :keep_c]
        return Matrix._build(array, "matrix")

    # --- Rendering ---

    def format(self, decimals: int = 2) -> str:
        """Right-aligned text grid with a fixed number of decimals."""
        if self.is_empty:
            return "[]"
        cells = [[f"{v:.{decimals}f}" for v in row] for row in self._data.tolist()]
        width = max(len(c) for row in cells for c in row)
        return "\n".join("  ".join(c.rjust(width) for c in row) for row in cells)

    def __repr__(self) -> str:
        if self.is_empty:
            return "Matrix(empty)"
        return f"Matrix({self.n_rows}x{self.n_cols}, {self.to_list()})"


def zeros(rows: int, cols: int) -> Matrix:
    """
    Zero-filled rows x cols matrix.

    Non-positive dimensions give the empty matrix rather than an error.
    Non-integer dimensions (floats, strings, bools) raise ValidationError;
    use Dimensions.parse() for user text.
    """
    for name, value in (("rows", rows), ("cols", cols)):
        if not isinstance(value, (int, np.integer)) or isinstance(value, bool):
            raise ValidationError(
                f"{name}: expected int, got {type(value).__name__}"
            )
    if rows <= 0 or cols <= 0:
        return Matrix.empty()
    return Matrix._build(np.zeros((rows, cols), dtype=np.float64), "matrix")


@dataclass(frozen=True)
class Dimensions:
    """
    Shape of an editable matrix.

    Both axes are positive. clamped() applies a caller-chosen range; the
    engine itself places no upper bound on matrix size.
    """
    rows: int
    cols: int

    def __post_init__(self):
        for name in ("rows", "cols"):
            value = getattr(self, name)
            if not isinstance(value, (int, np.integer)) or isinstance(value, bool):
                raise ValidationError(
                    f"{name}: expected int, got {type(value).__name__}; use Dimensions.parse()"
                )
            check_positive_int(value, name)

    @classmethod
    def parse(cls, rows: Any, cols: Any) -> Dimensions:
        """Build from ints or numeric strings, e.g. values typed into a form."""
        try:
            return cls(
                rows=check_positive_int(rows, "rows"),
                cols=check_positive_int(cols, "cols"),
            )
        except ValidationError as e:
            raise ValidationError(
                f"Rows and columns must be positive numbers (got rows={rows!r}, cols={cols!r})"
            ) from e

    def clamped(self, lo: int = DIMENSION_MIN, hi: int = DIMENSION_MAX) -> Dimensions:
        if lo > hi:
            raise ValidationError(f"clamp range is empty: lo={lo} > hi={hi}")
        return Dimensions(
            rows=max(lo, min(hi, self.rows)),
            cols=max(lo, min(hi, self.cols)),
        )

    def zeros(self) -> Matrix:
        return zeros(self.rows, self.cols)

    def resize(self, matrix: Matrix) -> Matrix:
        """Resize matrix to these dimensions, keeping the overlap."""
        return matrix.resize(self.rows, self.cols)
