import numbers
import sys

from densematrix import config
from densematrix.utils import logger

matrix_logger = logger.get_logger("densematrix.matrix")


class MatrixException(Exception):
    pass


class InvalidMatrixException(MatrixException):
    pass


class DimensionMismatchException(MatrixException):
    pass


class InvalidRowSizeException(MatrixException):
    pass


class InvalidColumnSizeException(MatrixException):
    pass


class NonSquareMatrixException(MatrixException):
    pass


class SingularMatrixException(MatrixException):
    pass


class EmptyMatrixException(MatrixException):
    pass


class Matrix(object):
    """Dense, row-major matrix of real numbers.

    Arithmetic always returns a new Matrix; only element writes and the
    add/remove row/column methods change a matrix in place.
    """

    def __init__(self, values=None):
        rows = [list(row) for row in values or []]
        row_sizes = {len(row) for row in rows}
        if len(row_sizes) > 1:
            raise InvalidMatrixException("Multiple row sizes found: %s" % row_sizes)
        self.rows = rows
        self._num_cols = len(rows[0]) if rows else 0

    @staticmethod
    def zeros(num_rows, num_cols):
        if num_rows < 0 or num_cols < 0:
            raise InvalidMatrixException(
                "Expected non-negative dimensions, given: %sx%s" % (num_rows, num_cols))
        m = Matrix()
        m.rows = [[0.0] * num_cols for _ in range(num_rows)]
        m._num_cols = num_cols
        return m

    @property
    def num_rows(self):
        return len(self.rows)

    @property
    def num_cols(self):
        return self._num_cols

    @property
    def shape(self):
        return (self.num_rows, self.num_cols)

    def is_square(self):
        return self.num_rows == self.num_cols

    def get(self, row, col):
        assert 0 <= row < self.num_rows
        assert 0 <= col < self.num_cols
        return self.rows[row][col]

    def set(self, row, col, value):
        assert 0 <= row < self.num_rows
        assert 0 <= col < self.num_cols
        self.rows[row][col] = value

    def __getitem__(self, index):
        row, col = index
        return self.get(row, col)

    def __setitem__(self, index, value):
        row, col = index
        self.set(row, col, value)

    def iter_col(self, col):
        assert 0 <= col < self.num_cols
        return (self.rows[row][col] for row in range(self.num_rows))

    def iter_row(self, row):
        assert 0 <= row < self.num_rows
        return (self.rows[row][col] for col in range(self.num_cols))

    # Arithmetic. Results are plain matrices, whatever the operands' class.
    def add(self, other):
        self._check_same_shape(other, "add")
        return Matrix([[a + b for a, b in zip(row, other_row)]
                       for row, other_row in zip(self.rows, other.rows)])._with_cols(self.num_cols)

    def subtract(self, other):
        self._check_same_shape(other, "subtract")
        return Matrix([[a - b for a, b in zip(row, other_row)]
                       for row, other_row in zip(self.rows, other.rows)])._with_cols(self.num_cols)

    def dot(self, other):
        assert isinstance(other, Matrix)
        if self.num_cols != other.num_rows:
            raise DimensionMismatchException(
                "Trying to multiply a %sx%s matrix with %sx%s matrix" %
                (self.num_rows, self.num_cols, other.num_rows, other.num_cols))
        result = Matrix.zeros(self.num_rows, other.num_cols)
        for i in range(self.num_rows):
            for j in range(other.num_cols):
                result.rows[i][j] = self.vector_dot_product(
                    self.iter_row(i), other.iter_col(j))
        return result

    def scale(self, x):
        return Matrix([self.mul_values(row, x) for row in self.rows])._with_cols(self.num_cols)

    def divide(self, other):
        return self.dot(other.inverse())

    def transpose(self):
        result = Matrix.zeros(self.num_cols, self.num_rows)
        for i in range(self.num_rows):
            for j in range(self.num_cols):
                result.rows[j][i] = self.rows[i][j]
        return result

    def __add__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other):
        if isinstance(other, Matrix):
            return self.dot(other)
        if isinstance(other, numbers.Real):
            return self.scale(other)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, numbers.Real):
            return self * other
        return NotImplemented

    def __truediv__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.divide(other)

    # Determinant and inverse, by cofactor expansion.
    def minor(self, row, col):
        """Returns a copy without the given row and column."""
        assert 0 <= row < self.num_rows
        assert 0 <= col < self.num_cols
        result = Matrix([
            [value for j, value in enumerate(self.rows[i]) if j != col]
            for i in range(self.num_rows) if i != row])
        return result._with_cols(self.num_cols - 1)

    def cofactor(self, row, col):
        sign = 1 if (row + col) % 2 == 0 else -1
        return self.minor(row, col).determinant() * sign

    def determinant(self):
        """Laplace expansion along the first row.

        Runs in O(n!), every minor is expanded again from scratch.
        """
        if not self.is_square():
            raise NonSquareMatrixException(
                "Determinant needs a square matrix, given: %sx%s" % self.shape)
        n = self.num_rows
        if n == 0:
            return 1.0
        if n == 1:
            return self.rows[0][0]
        if n == 2:
            return self.rows[0][0] * self.rows[1][1] - self.rows[0][1] * self.rows[1][0]

        det = 0.0
        for p in range(n):
            sign = 1 if p % 2 == 0 else -1
            det += self.rows[0][p] * self.minor(0, p).determinant() * sign
        return det

    def inverse(self):
        if not self.is_square():
            raise NonSquareMatrixException(
                "Inverse needs a square matrix, given: %sx%s" % self.shape)
        det = self.determinant()
        matrix_logger.debug("Inverting %sx%s matrix, determinant: %s", self.num_rows, self.num_cols, det)
        # Exact comparison, near-singular input is inverted as is.
        if det == 0:
            raise SingularMatrixException("Matrix is singular (determinant is zero)")

        # Each cofactor lands on the transposed cell, giving the adjugate.
        adjugate = Matrix.zeros(self.num_rows, self.num_cols)
        for i in range(self.num_rows):
            for j in range(self.num_cols):
                adjugate.rows[j][i] = self.cofactor(i, j)
        return adjugate.scale(1 / det)

    # Structural edits, in place.
    def add_row(self, row, at_bottom=True):
        if len(row) != self.num_cols:
            raise InvalidRowSizeException(
                "Expected: %s, given: %s" % (self.num_cols, len(row)))
        if at_bottom:
            self.rows.append(list(row))
        else:
            self.rows.insert(0, list(row))

    def add_column(self, column, at_right=True):
        if len(column) != self.num_rows:
            raise InvalidColumnSizeException(
                "Expected: %s, given: %s" % (self.num_rows, len(column)))
        for row, value in zip(self.rows, column):
            if at_right:
                row.append(value)
            else:
                row.insert(0, value)
        self._num_cols += 1

    def remove_row(self, from_bottom=True):
        if self.num_rows == 0:
            raise EmptyMatrixException("Cannot remove a row from a matrix without rows")
        if from_bottom:
            del self.rows[-1]
        else:
            del self.rows[0]

    def remove_column(self, from_right=True):
        if self.num_cols == 0:
            raise EmptyMatrixException("Cannot remove a column from a matrix without columns")
        for row in self.rows:
            if from_right:
                del row[-1]
            else:
                del row[0]
        self._num_cols -= 1

    # Display.
    def format_rows(self, width=None):
        width = config.DISPLAY_WIDTH if width is None else width
        return ["".join("%*g " % (width, value) for value in row) for row in self.rows]

    def display(self, stream=None, width=None):
        stream = stream or sys.stdout
        for line in self.format_rows(width):
            stream.write(line + "\n")

    def __str__(self):
        return "\n".join(self.format_rows())

    def __repr__(self):
        return "%s(%r)" % (self.__class__.__name__, self.rows)

    def __eq__(self, other):
        if not (isinstance(other, Matrix) and
                self.num_rows == other.num_rows and
                self.num_cols == other.num_cols):
            return False
        for i in range(self.num_rows):
            if self.rows[i] != other.rows[i]:
                return False
        return True

    def almost_equals(self, other, tolerance=1e-9):
        if self.shape != other.shape:
            return False
        return all(abs(a - b) <= tolerance
                   for row, other_row in zip(self.rows, other.rows)
                   for a, b in zip(row, other_row))

    def copy(self):
        return Matrix([row[:] for row in self.rows])._with_cols(self.num_cols)

    def _with_cols(self, num_cols):
        # Row-less results cannot infer their width from the data.
        self._num_cols = num_cols
        return self

    def _check_same_shape(self, other, operation):
        assert isinstance(other, Matrix)
        if self.shape != other.shape:
            raise DimensionMismatchException(
                "Trying to %s a %sx%s matrix and %sx%s matrix" %
                (operation, self.num_rows, self.num_cols, other.num_rows, other.num_cols))

    @staticmethod
    def mul_values(values, x):
        return [v * x for v in values]

    @staticmethod
    def vector_dot_product(a, b):
        return sum((x * y for x, y in zip(a, b)), 0.0)
