from enum import Enum


class MatrixError(Enum):
    """Kinds of failure a Matrix can carry. The value is the display message."""

    COLUMN_LENGTH_MISMATCH = "matrix: each column length on matrix is different"
    INDEX_OUT_OF_BOUND = "matrix: index out of bound"
    NIL_MATRIX = "matrix: matrix is nil"
    ROW_COL_MISMATCH = "matrix: col and row are different"
    DIMENSION_MISMATCH = "matrix: dimensions are different"
    NOT_SQUARE_MATRIX = "matrix: matrix is not square"
    ZERO_DETERMINANT = "matrix: cannot inverse, determinant is zero"

    def cformat(self, _arg_of=None) -> str:
        return r"\text{%s}" % self.value


class MatrixValueError(ValueError):
    def __init__(self, kind: MatrixError):
        super().__init__(kind.value)
        self.kind = kind
