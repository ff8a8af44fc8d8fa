"""
Tests for the dense matrix engine.
"""

import unittest
from pretzelkit.errors import DimensionMismatchError
from pretzelkit.matrix import Matrix, SquareMatrix, vandermonde


class TestMatrixBasics(unittest.TestCase):
    """Tests for construction and element access."""

    def test_construct(self):
        """Test a zero-filled matrix of the given shape."""
        m = Matrix(2, 3)
        self.assertEqual(m.rows, 2)
        self.assertEqual(m.cols, 3)
        self.assertEqual(m.to_list(), [[0, 0, 0], [0, 0, 0]])

    def test_construct_with_value(self):
        """Test filling with a value and an integer dtype."""
        m = SquareMatrix(2, value=7, dtype=int)
        self.assertEqual(m.dim, 2)
        self.assertEqual(m[1, 0], 7)

    def test_set_and_get(self):
        """Test element assignment."""
        m = Matrix(2, 2, dtype=int)
        m[0, 1] = 5
        self.assertEqual(m[0, 1], 5)
        self.assertEqual(m[1, 0], 0)

    def test_from_rows(self):
        """Test construction from nested lists."""
        m = Matrix.from_rows([[1, 2, 3], [4, 5, 6]])
        self.assertEqual((m.rows, m.cols), (2, 3))
        self.assertEqual(m[1, 2], 6)

    def test_ragged_rows_rejected(self):
        """Test rows of different lengths raise DimensionMismatchError."""
        with self.assertRaises(DimensionMismatchError):
            Matrix.from_rows([[1, 2], [3]])
        with self.assertRaises(DimensionMismatchError):
            Matrix.from_rows([[1], [2, 3]])

    def test_flat_rows_rejected(self):
        """Test a flat list is not accepted as a list of rows."""
        with self.assertRaises(DimensionMismatchError):
            Matrix.from_rows([1, 2, 3])

    def test_from_no_rows(self):
        """Test no rows give the empty matrix."""
        m = Matrix.from_rows([])
        self.assertEqual((m.rows, m.cols), (0, 0))

    def test_transpose(self):
        """Test transposing a non-square matrix."""
        m = Matrix.from_rows([[1, 2, 3], [4, 5, 6]])
        self.assertEqual(m.transpose().to_list(), [[1, 4], [2, 5], [3, 6]])

    def test_swap(self):
        """Test swapping rows and columns in place."""
        m = Matrix.from_rows([[1, 2], [3, 4]])
        m.swap_rows(0, 1)
        self.assertEqual(m.to_list(), [[3, 4], [1, 2]])
        m.swap_cols(0, 1)
        self.assertEqual(m.to_list(), [[4, 3], [2, 1]])


class TestRemove(unittest.TestCase):
    """Tests for row and column removal."""

    def test_remove_row_and_col(self):
        """Test removing an inner row and the first column."""
        m = Matrix.from_rows([[1, 2, 3], [4, 5, 6], [7, 8, 9]])
        m.remove_row(1)
        self.assertEqual(m.to_list(), [[1, 2, 3], [7, 8, 9]])
        m.remove_col(0)
        self.assertEqual(m.to_list(), [[2, 3], [8, 9]])

    def test_remove_last_row_empties(self):
        """Test removing the only row leaves a 0x0 matrix."""
        m = Matrix.from_rows([[1, 2]])
        m.remove_row(0)
        self.assertEqual((m.rows, m.cols), (0, 0))

    def test_remove_last_col_empties(self):
        """Test removing the only column leaves a 0x0 matrix."""
        m = Matrix.from_rows([[1], [2]])
        m.remove_col(0)
        self.assertEqual((m.rows, m.cols), (0, 0))

    def test_remove_out_of_range(self):
        """Test out-of-range removal raises IndexError."""
        m = Matrix(2, 2)
        with self.assertRaises(IndexError):
            m.remove_row(2)
        with self.assertRaises(IndexError):
            m.remove_col(5)


class TestArithmetic(unittest.TestCase):
    """Tests for addition and scalar multiplication."""

    def test_add(self):
        """Test elementwise addition."""
        a = Matrix.from_rows([[1, 2], [3, 4]])
        b = Matrix.from_rows([[10, 20], [30, 40]])
        self.assertEqual((a + b).to_list(), [[11, 22], [33, 44]])

    def test_add_mismatch(self):
        """Test adding different shapes raises DimensionMismatchError."""
        with self.assertRaises(DimensionMismatchError):
            Matrix(2, 2) + Matrix(2, 3)

    def test_scalar_multiply(self):
        """Test scalar multiplication on both sides keeps the type."""
        a = SquareMatrix.from_matrix(Matrix.from_rows([[1, -2], [0, 3]]))
        self.assertEqual((a * -2).to_list(), [[-2, 4], [0, -6]])
        self.assertEqual((3 * a).to_list(), [[3, -6], [0, 9]])
        self.assertIsInstance(a * 2, SquareMatrix)

    def test_non_square_rejected(self):
        """Test a square matrix cannot be built from a 2x3 matrix."""
        with self.assertRaises(DimensionMismatchError):
            SquareMatrix.from_matrix(Matrix(2, 3))


class TestElimination(unittest.TestCase):
    """Tests for Gauss and Gauss-Jordan elimination."""

    def test_gauss_requires_float(self):
        """Test elimination refuses an integer matrix."""
        with self.assertRaises(TypeError):
            Matrix.from_rows([[1, 2], [3, 4]]).gauss()

    def test_gauss_echelon(self):
        """Test partial pivoting picks the largest entry and counts the swap."""
        m = Matrix.from_rows([[1.0, 2.0], [3.0, 4.0]])
        echelon, swaps = m.gauss()
        self.assertEqual(swaps, 1)
        self.assertAlmostEqual(echelon[0, 0], 3.0)
        self.assertAlmostEqual(echelon[1, 0], 0.0)
        self.assertAlmostEqual(echelon[1, 1], 2.0 - 4.0 / 3.0)

    def test_gauss_does_not_modify(self):
        """Test elimination returns a new matrix."""
        m = Matrix.from_rows([[1.0, 2.0], [3.0, 4.0]])
        m.gauss()
        self.assertEqual(m.to_list(), [[1.0, 2.0], [3.0, 4.0]])

    def test_gauss_jordan_textbook_system(self):
        """Test 2x + y - z = 8, -3x - y + 2z = -11, -2x + y + 2z = -3."""
        m = Matrix.from_rows([
            [2.0, 1.0, -1.0, 8.0],
            [-3.0, -1.0, 2.0, -11.0],
            [-2.0, 1.0, 2.0, -3.0],
        ])
        solution = m.gauss_jordan()
        for i, expected in enumerate([2.0, 3.0, -1.0]):
            self.assertAlmostEqual(solution[i, 3], expected)
            for j in range(3):
                self.assertAlmostEqual(solution[i, j], 1.0 if i == j else 0.0)

    def test_gauss_jordan_solves_system(self):
        """Test x + y + z = 4, 2y + 5z = 1, 2x + 5y - z = 20."""
        m = Matrix.from_rows([
            [1.0, 1.0, 1.0, 4.0],
            [0.0, 2.0, 5.0, 1.0],
            [2.0, 5.0, -1.0, 20.0],
        ])
        solution = m.gauss_jordan()
        for i, expected in enumerate([2.0, 3.0, -1.0]):
            self.assertAlmostEqual(solution[i, 3], expected)
            self.assertAlmostEqual(solution[i, i], 1.0)


class TestDeterminant(unittest.TestCase):
    """Tests for determinants."""

    def test_determinant(self):
        """Test an integer matrix is promoted and its determinant computed."""
        m = SquareMatrix.from_matrix(Matrix.from_rows([[2, -3, 1], [2, 0, -1], [1, 4, 5]]))
        self.assertAlmostEqual(m.determinant(), 49.0)

    def test_determinant_with_swap(self):
        """Test a row swap flips the sign."""
        m = SquareMatrix.from_matrix(Matrix.from_rows([[0.0, 1.0], [1.0, 0.0]]))
        self.assertAlmostEqual(m.determinant(), -1.0)

    def test_singular(self):
        """Test a singular matrix has determinant zero."""
        m = SquareMatrix.from_matrix(Matrix.from_rows([[1.0, 2.0], [2.0, 4.0]]))
        self.assertAlmostEqual(m.determinant(), 0.0)

    def test_empty_determinant(self):
        """Test the empty matrix has determinant one."""
        self.assertEqual(SquareMatrix(0).determinant(), 1.0)


class TestVandermonde(unittest.TestCase):
    """Tests for Vandermonde matrices."""

    def test_integer_points(self):
        """Test powers of integer points."""
        m = vandermonde(3, [2, 3], dtype=int)
        self.assertEqual(m.to_list(), [[1, 2, 4], [1, 3, 9]])

    def test_float_points(self):
        """Test more columns than points."""
        m = vandermonde(4, [0.0, 0.5])
        self.assertEqual((m.rows, m.cols), (2, 4))
        self.assertAlmostEqual(m[0, 0], 1.0)
        self.assertAlmostEqual(m[0, 1], 0.0)
        self.assertAlmostEqual(m[1, 3], 0.125)


if __name__ == '__main__':
    unittest.main()
