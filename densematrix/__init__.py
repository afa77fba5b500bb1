from densematrix.matrix import (
    Matrix,
    MatrixException,
    InvalidMatrixException,
    DimensionMismatchException,
    InvalidRowSizeException,
    InvalidColumnSizeException,
    NonSquareMatrixException,
    SingularMatrixException,
    EmptyMatrixException,
)
from densematrix.square import SquareMatrix, IdentityMatrix

__version__ = '0.1.0'

__all__ = [
    "Matrix",
    "SquareMatrix",
    "IdentityMatrix",
    "MatrixException",
    "InvalidMatrixException",
    "DimensionMismatchException",
    "InvalidRowSizeException",
    "InvalidColumnSizeException",
    "NonSquareMatrixException",
    "SingularMatrixException",
    "EmptyMatrixException",
]
