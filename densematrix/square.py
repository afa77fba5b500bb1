from densematrix import matrix


class SquareMatrix(matrix.Matrix):
    """A size x size matrix of zeros.

    Only buildable by size, so the square shape holds at construction. Edits
    made afterwards through add_row and friends are not policed.
    """

    def __init__(self, size):
        if size < 0:
            raise matrix.InvalidMatrixException(
                "Expected a non-negative size, given: %s" % size)
        super(SquareMatrix, self).__init__([[0.0] * size for _ in range(size)])
        self._num_cols = size

    @property
    def size(self):
        return self.num_rows

    def fill(self, value):
        for row in self.rows:
            row[:] = [value] * len(row)
        return self


class IdentityMatrix(SquareMatrix):
    def __init__(self, size):
        super(IdentityMatrix, self).__init__(size)
        for i in range(size):
            self.rows[i][i] = 1.0
