import math
from typing import Iterator, List, Optional, Sequence, Tuple

from .errors import MatrixError, MatrixValueError
from .fmt import make_latex_matrix, make_text_matrix
from .log import log, debug
from .determinant import (
    laplace_determinant,
    minor_items,
    cofactor_items,
    determinant_from_cofactor,
)


class Matrix:
    """
    Dense real matrix that carries at most one error instead of raising.

    Once an error is set the matrix reports a 0x0 shape, its elements read as
    zero and every operation on it returns it unchanged.
    """

    items: List[List[float]]

    def __init__(
        self, items: Optional[Sequence[Sequence[float]]], cols: Optional[int] = None
    ):
        self.items = []
        self._rows = 0
        self._cols = 0
        self._error = None
        if items is None:
            self._set_error(MatrixError.NIL_MATRIX, "construct")
            return
        rows = [[float(item) for item in row] for row in items]
        if rows:
            row_len = len(rows[0])
            if not all(len(row) == row_len for row in rows) or (
                cols is not None and cols != row_len
            ):
                self._set_error(MatrixError.COLUMN_LENGTH_MISMATCH, "construct")
                return
        else:
            row_len = cols or 0
        self.items = rows
        self._rows = len(rows)
        self._cols = row_len

    @classmethod
    def of(cls, rows: int, cols: int) -> "Matrix":
        if rows < 0 or cols < 0:
            return cls.error_matrix(MatrixError.INDEX_OUT_OF_BOUND, "of")
        return cls([[0.0] * cols for _ in range(rows)], cols=cols)

    @classmethod
    def zero(cls, rows: int, cols: int) -> "Matrix":
        return cls.of(rows, cols)

    @classmethod
    def from_rows(cls, values: Optional[Sequence[Sequence[float]]]) -> "Matrix":
        return cls(values)

    @classmethod
    def identity(cls, size: int) -> "Matrix":
        res = cls.of(size, size)
        for i in range(max(size, 0)):
            for j in range(size):
                res.set(i, j, 1.0 if i == j else 0.0)
        return res

    @classmethod
    def diagonal(cls, items: Sequence[float]) -> "Matrix":
        res = cls.of(len(items), len(items))
        for i, item in enumerate(items):
            res.set(i, i, item)
        return res

    @classmethod
    def new_vector(cls, items: Sequence[float]) -> "Matrix":
        return cls([[i] for i in items], cols=1)

    @classmethod
    def error_matrix(cls, kind: MatrixError, op: str = "construct") -> "Matrix":
        res = cls([])
        res._set_error(kind, op)
        return res

    # ------------------------------------------------------------------
    # error state
    # ------------------------------------------------------------------

    def _set_error(self, kind: MatrixError, op: str) -> "Matrix":
        if self._error is None:
            self._error = kind
            debug(r"%s: %s", op, kind)
        return self

    def has_error(self) -> bool:
        return self._error is not None

    def error(self) -> Optional[MatrixError]:
        return self._error

    def raise_for_error(self) -> "Matrix":
        """Raise MatrixValueError if an error is set, otherwise return self."""
        if self._error is not None:
            raise MatrixValueError(self._error)
        return self

    def _short_circuit(self, other: Optional["Matrix"], op: str) -> Optional["Matrix"]:
        """Return the operand (or a NIL_MATRIX result) that ends a binary op early."""
        if self.has_error():
            return self
        if other is None:
            return Matrix.error_matrix(MatrixError.NIL_MATRIX, op)
        if other.has_error():
            return other
        return None

    def _is_square(self) -> bool:
        return self._rows == self._cols and self._rows > 0

    # ------------------------------------------------------------------
    # attributes
    # ------------------------------------------------------------------

    def __str__(self) -> str:
        if self.has_error():
            return "{[ matrix has error > %s ]}" % self._error.value
        return make_text_matrix(self.items, self._rows, self._cols)

    def __repr__(self) -> str:
        if self.has_error():
            return "Matrix(error=%s)" % self._error.name
        return "Matrix(rows=%d, cols=%d)" % (self._rows, self._cols)

    def cformat(self, _arg_of="") -> str:
        if self.has_error():
            return self._error.cformat()
        return make_latex_matrix(self.items)

    @property
    def rows(self) -> int:
        if self.has_error():
            return 0
        return self._rows

    @property
    def cols(self) -> int:
        if self.has_error():
            return 0
        return self._cols

    def _in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self._rows and 0 <= col < self._cols

    def get(self, row: int, col: int) -> float:
        if self.has_error():
            return 0.0
        if not self._in_bounds(row, col):
            self._set_error(MatrixError.INDEX_OUT_OF_BOUND, "get")
            return 0.0
        return self.items[row][col]

    def get_row(self, row: int) -> List[float]:
        if self.has_error():
            return []
        if not 0 <= row < self._rows:
            self._set_error(MatrixError.INDEX_OUT_OF_BOUND, "get_row")
            return []
        return list(self.items[row])

    def get_col(self, col: int) -> List[float]:
        if self.has_error():
            return []
        if not 0 <= col < self._cols:
            self._set_error(MatrixError.INDEX_OUT_OF_BOUND, "get_col")
            return []
        return [row[col] for row in self.items]

    def set(self, row: int, col: int, value: float) -> "Matrix":
        if self.has_error():
            return self
        if not self._in_bounds(row, col):
            return self._set_error(MatrixError.INDEX_OUT_OF_BOUND, "set")
        self.items[row][col] = float(value)
        return self

    def set_row(self, row: int, values: Sequence[float]) -> "Matrix":
        if self.has_error():
            return self
        if not 0 <= row < self._rows or values is None or len(values) != self._cols:
            return self._set_error(MatrixError.INDEX_OUT_OF_BOUND, "set_row")
        self.items[row] = [float(value) for value in values]
        return self

    def inorder_slot_iter(self) -> Iterator[Tuple[int, int]]:
        for i in range(self.rows):
            for j in range(self.cols):
                yield (i, j)

    # ------------------------------------------------------------------
    # operations
    # ------------------------------------------------------------------

    def _elementwise(self, other: Optional["Matrix"], op: str, fn) -> "Matrix":
        stop = self._short_circuit(other, op)
        if stop is not None:
            return stop
        if self.rows != other.rows or self.cols != other.cols:
            return Matrix.error_matrix(MatrixError.DIMENSION_MISMATCH, op)
        res = Matrix.of(self.rows, self.cols)
        for i, j in self.inorder_slot_iter():
            res.items[i][j] = fn(self.items[i][j], other.items[i][j])
        return res

    def add(self, other: Optional["Matrix"]) -> "Matrix":
        return self._elementwise(other, "add", lambda a, b: a + b)

    def subtract(self, other: Optional["Matrix"]) -> "Matrix":
        return self._elementwise(other, "subtract", lambda a, b: a - b)

    def dot_product(self, other: Optional["Matrix"]) -> "Matrix":
        stop = self._short_circuit(other, "dot_product")
        if stop is not None:
            return stop
        if self.cols != other.rows:
            return Matrix.error_matrix(MatrixError.ROW_COL_MISMATCH, "dot_product")
        res = Matrix.of(self.rows, other.cols)
        for i, j in res.inorder_slot_iter():
            value = 0.0
            for k in range(self.cols):
                value += self.items[i][k] * other.items[k][j]
            res.items[i][j] = value
        return res

    def scale(self, factor: float) -> "Matrix":
        if self.has_error():
            return self
        return Matrix(
            [[factor * item for item in row] for row in self.items], cols=self.cols
        )

    def transpose(self) -> "Matrix":
        if self.has_error():
            return self
        return Matrix(
            [[row[j] for row in self.items] for j in range(self.cols)], cols=self.rows
        )

    def flatten(self) -> "Matrix":
        if self.has_error():
            return self
        return Matrix([[item for row in self.items for item in row]])

    def determinant(self, do_log: bool = False) -> float:
        if self.has_error():
            return 0.0
        if not self._is_square():
            self._set_error(MatrixError.NOT_SQUARE_MATRIX, "determinant")
            return 0.0
        if do_log:
            log(r"Determinant of $%s$:", self)
        return laplace_determinant(self.items, do_log=do_log)

    def determinant_from_cofactor(self, cofactor: Optional["Matrix"]) -> float:
        """
        Determinant from a precomputed cofactor matrix of the same shape.

        Equivalent to one level of Laplace expansion along row 0, so no minor is
        recomputed.
        """
        if self.has_error():
            return 0.0
        if cofactor is None:
            self._set_error(MatrixError.NIL_MATRIX, "determinant_from_cofactor")
            return 0.0
        if cofactor.has_error():
            return 0.0
        if (
            not self._is_square()
            or not cofactor._is_square()
            or cofactor.rows != self.rows
        ):
            self._set_error(MatrixError.NOT_SQUARE_MATRIX, "determinant_from_cofactor")
            return 0.0
        return determinant_from_cofactor(self.items, cofactor.items)

    def minor(self, do_log: bool = False) -> "Matrix":
        if self.has_error():
            return self
        if not self._is_square():
            return Matrix.error_matrix(MatrixError.NOT_SQUARE_MATRIX, "minor")
        if do_log:
            log(r"Matrix of minors of $%s$:", self)
        return Matrix(minor_items(self.items, do_log=do_log))

    def cofactor(self) -> "Matrix":
        if self.has_error():
            return self
        return Matrix(cofactor_items(self.items), cols=self.cols)

    def adjugate(self) -> "Matrix":
        return self.minor().cofactor().transpose()

    def inverse(self, do_log: bool = False) -> "Matrix":
        """
        Inverse through the adjugate: adj(A) / det(A).

        The determinant is taken from the first row of the cofactor matrix. An
        exactly zero determinant yields a ZERO_DETERMINANT matrix; no tolerance
        is applied.
        """
        if self.has_error():
            return self
        if not self._is_square():
            return Matrix.error_matrix(MatrixError.NOT_SQUARE_MATRIX, "inverse")
        minor = self.minor(do_log=do_log)
        cofactor = minor.cofactor()
        if cofactor.has_error():
            return cofactor
        det = self.determinant_from_cofactor(cofactor)
        if self.has_error():
            return self
        if do_log:
            log(r"Cofactor matrix: $$ C = %s $$", cofactor)
            log(r"$$ \det A = \sum_j a_{1,j} C_{1,j} = %s $$", det)
        if det == 0.0:
            if do_log:
                log(r"\[ \boxed{\text{The matrix is singular: no inverse.}} \]")
            return Matrix.error_matrix(MatrixError.ZERO_DETERMINANT, "inverse")
        res = cofactor.transpose().scale(1 / det)
        if do_log:
            log(r"\textbf{Inverse matrix:} \[ %s \]", res)
        return res

    def is_equal(self, other: Optional["Matrix"]) -> bool:
        if self.has_error() or other is None or other.has_error():
            return False
        if self.rows != other.rows or self.cols != other.cols:
            return False
        return all(
            self.items[i][j] == other.items[i][j] for i, j in self.inorder_slot_iter()
        )

    def is_close(
        self, other: Optional["Matrix"], rel_tol: float = 1e-9, abs_tol: float = 1e-9
    ) -> bool:
        if self.has_error() or other is None or other.has_error():
            return False
        if self.rows != other.rows or self.cols != other.cols:
            return False
        return all(
            math.isclose(
                self.items[i][j], other.items[i][j], rel_tol=rel_tol, abs_tol=abs_tol
            )
            for i, j in self.inorder_slot_iter()
        )

    # ------------------------------------------------------------------
    # operators
    # ------------------------------------------------------------------

    def __add__(self, other: "Matrix") -> "Matrix":
        return self.add(other)

    def __sub__(self, other: "Matrix") -> "Matrix":
        return self.subtract(other)

    def __neg__(self) -> "Matrix":
        return self.scale(-1.0)

    def __mul__(self, other) -> "Matrix":
        if other is None or isinstance(other, Matrix):
            return self.dot_product(other)
        return self.scale(other)

    def __rmul__(self, other) -> "Matrix":
        return self.scale(other)

    def __matmul__(self, other: "Matrix") -> "Matrix":
        return self.dot_product(other)


def has_error(matrix: Optional[Matrix]) -> bool:
    """Like Matrix.has_error, but an absent matrix counts as NIL_MATRIX."""
    return matrix is None or matrix.has_error()


def error_of(matrix: Optional[Matrix]) -> Optional[MatrixError]:
    if matrix is None:
        return MatrixError.NIL_MATRIX
    return matrix.error()
