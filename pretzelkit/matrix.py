"""
Dense matrices for pretzelkit.

- Matrix: a rows x cols array of a numeric dtype, backed by numpy
- SquareMatrix: adds the dimension check and the determinant
- vandermonde(): matrix of point powers for polynomial interpolation

Both support Gauss and Gauss-Jordan elimination with partial pivoting.
Elimination needs division, so it is only defined for floating-point
dtypes; use astype(float) to promote an integer matrix first.
"""

from typing import Iterable, List, Sequence, Tuple

import numpy as np

from .errors import DimensionMismatchError


class Matrix:
    """
    A dense, row-major matrix.

    Row and column swaps and removals edit the matrix itself; all other
    operations return a new matrix.
    """

    def __init__(self, rows: int, cols: int, value=0, dtype=float):
        self._data = np.full((rows, cols), value, dtype=dtype)

    @classmethod
    def _from_array(cls, data: np.ndarray) -> 'Matrix':
        obj = cls.__new__(cls)
        obj._data = data
        return obj

    @classmethod
    def from_rows(cls, rows: Iterable[Sequence], dtype=None) -> 'Matrix':
        """Create a matrix from a list of equally long rows."""
        rows = list(rows)
        if any(np.ndim(r) != 1 for r in rows) or len({len(r) for r in rows}) > 1:
            raise DimensionMismatchError("Rows must all have the same length")
        data = np.array(rows, dtype=dtype)
        if data.size == 0:
            data = data.reshape(0, 0)
        return cls._from_array(data)

    @property
    def rows(self) -> int:
        return self._data.shape[0]

    @property
    def cols(self) -> int:
        return self._data.shape[1]

    @property
    def dtype(self) -> np.dtype:
        return self._data.dtype

    def astype(self, dtype) -> 'Matrix':
        """Return a copy with elements converted to `dtype`."""
        return type(self)._from_array(self._data.astype(dtype))

    def to_array(self) -> np.ndarray:
        return self._data.copy()

    def to_list(self) -> List[List]:
        return self._data.tolist()

    def __getitem__(self, index: Tuple[int, int]):
        return self._data[index].item()

    def __setitem__(self, index: Tuple[int, int], value) -> None:
        self._data[index] = value

    def transpose(self) -> 'Matrix':
        return type(self)._from_array(self._data.T.copy())

    def swap_rows(self, r1: int, r2: int) -> None:
        self._data[[r1, r2]] = self._data[[r2, r1]]

    def swap_cols(self, c1: int, c2: int) -> None:
        self._data[:, [c1, c2]] = self._data[:, [c2, c1]]

    def remove_row(self, r: int) -> None:
        """Delete row r; removing the last row leaves a 0x0 matrix."""
        if not 0 <= r < self.rows:
            raise IndexError(f"Row {r} out of range for {self.rows} rows")
        self._data = np.delete(self._data, r, axis=0)
        if self.rows == 0:
            self._data = self._data.reshape(0, 0)

    def remove_col(self, c: int) -> None:
        """Delete column c; removing the last column leaves a 0x0 matrix."""
        if not 0 <= c < self.cols:
            raise IndexError(f"Column {c} out of range for {self.cols} columns")
        self._data = np.delete(self._data, c, axis=1)
        if self.cols == 0:
            self._data = self._data.reshape(0, 0)

    def __add__(self, other: 'Matrix') -> 'Matrix':
        if self._data.shape != other._data.shape:
            raise DimensionMismatchError(
                f"Trying to add matrices of different sizes: "
                f"{self.rows}x{self.cols} and {other.rows}x{other.cols}")
        return type(self)._from_array(self._data + other._data)

    def __mul__(self, x) -> 'Matrix':
        return type(self)._from_array(self._data * x)

    __rmul__ = __mul__

    def __eq__(self, other) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return (self._data.shape == other._data.shape
                and bool(np.array_equal(self._data, other._data)))

    def gauss(self, unit_diagonal: bool = False) -> Tuple['Matrix', int]:
        """
        Gaussian elimination to row-echelon form.

        The pivot in each column is the largest-magnitude entry among the
        remaining rows; a column with no non-zero candidate is skipped
        without consuming a row. If unit_diagonal is True, each pivot row
        is scaled so the pivot is 1.

        Returns:
            (echelon_matrix, number_of_row_swaps)
        """
        if not np.issubdtype(self._data.dtype, np.floating):
            raise TypeError("Gauss elimination can only be performed on a "
                            "floating-point matrix")

        m = self._data.copy()
        rows, cols = m.shape
        swaps = 0
        i = 0

        for j in range(cols):
            if i >= rows:
                break

            max_i = i + int(np.argmax(np.abs(m[i:, j])))
            if m[max_i, j] == 0:
                continue

            if max_i != i:
                m[[i, max_i]] = m[[max_i, i]]
                swaps += 1

            divisor = m[i, j]
            if unit_diagonal:
                m[i, j:] /= divisor
                m[i, j] = 1.0
                m[i + 1:, :] -= np.outer(m[i + 1:, j], m[i, :])
            else:
                factors = m[i + 1:, j] / divisor
                m[i + 1:, :] -= np.outer(factors, m[i, :])
            m[i + 1:, j] = 0.0

            # Only advance the row if this column had a pivot.
            i += 1

        return type(self)._from_array(m), swaps

    def gauss_jordan(self) -> 'Matrix':
        """
        Reduced row-echelon form, by back-substitution on gauss(True).

        Assumes the leading square block has full rank, as for an augmented
        Vandermonde system with distinct points.
        """
        reduced, _ = self.gauss(unit_diagonal=True)
        m = reduced._data
        rows = m.shape[0]

        # Subtract m[ri, rj] * row(rj) from row(ri), going backwards.
        for ri in range(rows - 2, -1, -1):
            for rj in range(rows - 1, ri, -1):
                m[ri, :] -= m[ri, rj] * m[rj, :]

        return reduced

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.rows}x{self.cols}, {self.to_list()})"


class SquareMatrix(Matrix):
    """A square matrix, with determinant."""

    def __init__(self, dim: int, value=0, dtype=float):
        super().__init__(dim, dim, value, dtype)

    @classmethod
    def _from_array(cls, data: np.ndarray) -> 'SquareMatrix':
        if data.shape[0] != data.shape[1]:
            raise DimensionMismatchError(
                "Trying to construct square matrix from non-square matrix "
                f"({data.shape[0]}x{data.shape[1]})")
        return super()._from_array(data)

    @classmethod
    def from_matrix(cls, m: Matrix) -> 'SquareMatrix':
        return cls._from_array(m.to_array())

    @property
    def dim(self) -> int:
        return self.rows

    def determinant(self) -> float:
        """
        Gauss elimination followed by multiplying up the diagonal.

        Integer matrices are promoted to float first.
        """
        work = self
        if not np.issubdtype(self.dtype, np.floating):
            work = self.astype(float)
        gaussed, swaps = work.gauss(unit_diagonal=False)
        det = float(np.prod(np.diag(gaussed._data)))
        return -det if swaps % 2 else det


def vandermonde(n: int, points: Sequence, dtype=float) -> Matrix:
    """
    Return the len(points) x n matrix with entry (i, j) = points[i] ** j.
    """
    data = np.vander(np.asarray(points, dtype=dtype), N=n, increasing=True)
    return Matrix._from_array(data.reshape(len(points), n))
