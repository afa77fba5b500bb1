from nose.tools import eq_
from nose.tools import ok_
from densematrix.matrix import InvalidMatrixException, Matrix
from densematrix.square import *


def test_create_square_matrix():
    m = SquareMatrix(3)
    eq_((3, 3), m.shape)
    eq_(3, m.size)
    eq_([[0, 0, 0], [0, 0, 0], [0, 0, 0]], m.rows)


def test_create_empty_square_matrix():
    m = SquareMatrix(0)
    eq_((0, 0), m.shape)
    eq_(1.0, m.determinant())


def test_create_invalid_square_matrix():
    try:
        SquareMatrix(-2)
        ok_(False)
    except InvalidMatrixException:
        # Expected
        pass


def test_fill():
    m = SquareMatrix(3)
    result = m.fill(3.0)
    ok_(result is m)
    eq_(Matrix([[3, 3, 3], [3, 3, 3], [3, 3, 3]]), m)


def test_fill_chaining():
    m = SquareMatrix(2).fill(1).fill(5)
    eq_(Matrix([[5, 5], [5, 5]]), m)


def test_element_writes_then_inverse():
    m = SquareMatrix(2)
    m[0, 0] = 4
    m[0, 1] = 7
    m[1, 0] = 2
    m[1, 1] = 6
    inverse = m.inverse()
    ok_(inverse.almost_equals(Matrix([[0.6, -0.7], [-0.2, 0.4]])))
    eq_(Matrix, type(inverse))


def test_arithmetic_returns_plain_matrix():
    square = SquareMatrix(3).fill(3.0)
    other = Matrix([[1, 4, 7], [2, 5, 8], [3, 6, 9]])
    result = square + other
    eq_(Matrix, type(result))
    eq_(Matrix([[4, 7, 10], [5, 8, 11], [6, 9, 12]]), result)
    eq_(Matrix, type(square * 2))
    eq_(Matrix, type(square.transpose()))
    eq_(Matrix, type(square.copy()))


def test_identity_matrix():
    m = IdentityMatrix(3)
    eq_(Matrix([[1, 0, 0], [0, 1, 0], [0, 0, 1]]), m)
    ok_(isinstance(m, SquareMatrix))


def test_identity_determinant():
    for size in range(1, 6):
        eq_(1, IdentityMatrix(size).determinant())


def test_identity_plus_matrix():
    m = Matrix([[1, 4, 7], [2, 5, 8], [3, 6, 9]])
    eq_(Matrix([[2, 4, 7], [2, 6, 8], [3, 6, 10]]), IdentityMatrix(3) + m)


def test_identity_is_neutral():
    m = Matrix([[1, 2, 3], [4, 5, 6]])
    eq_(m, m * IdentityMatrix(3))
    eq_(m, IdentityMatrix(2) * m)


def test_identity_not_maintained():
    m = IdentityMatrix(2)
    m[0, 1] = 5
    m.add_row([7, 8])
    eq_(Matrix([[1, 5], [0, 1], [7, 8]]), m)
    ok_(not m.is_square())
