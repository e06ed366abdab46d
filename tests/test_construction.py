"""Construction, accessors and the shape/value invariants of Matrix."""

import pytest

from densematrix import Matrix, MatrixError


class TestOf:
    def test_zero_filled(self):
        m = Matrix.of(5, 4)
        assert m.rows == 5
        assert m.cols == 4
        assert not m.has_error()
        for i in range(5):
            assert m.get_row(i) == [0.0, 0.0, 0.0, 0.0]

    @pytest.mark.parametrize("rows,cols", [(0, 0), (0, 3), (3, 0)])
    def test_empty_shapes_are_legal(self, rows, cols):
        m = Matrix.of(rows, cols)
        assert not m.has_error()
        assert (m.rows, m.cols) == (rows, cols)

    def test_negative_size(self):
        assert Matrix.of(-1, 2).error() == MatrixError.INDEX_OUT_OF_BOUND

    def test_zero_alias(self):
        assert Matrix.zero(2, 3).is_equal(Matrix.of(2, 3))


class TestFromRows:
    def test_valid(self):
        m = Matrix.from_rows([[1, 2, 3, 4, 5], [6, 7, 8, 9, 0]])
        assert not m.has_error()
        assert (m.rows, m.cols) == (2, 5)
        assert m.get_row(0) == [1.0, 2.0, 3.0, 4.0, 5.0]
        assert m.get_row(1) == [6.0, 7.0, 8.0, 9.0, 0.0]

    def test_ragged_rows(self):
        m = Matrix.from_rows([[1, 2, 3], [4, 5]])
        assert m.has_error()
        assert m.error() == MatrixError.COLUMN_LENGTH_MISMATCH
        assert m.rows == 0
        assert m.cols == 0

    def test_empty_outer_sequence(self):
        m = Matrix.from_rows([])
        assert not m.has_error()
        assert (m.rows, m.cols) == (0, 0)

    def test_none(self):
        assert Matrix.from_rows(None).error() == MatrixError.NIL_MATRIX

    def test_owns_its_buffer(self):
        source = [[1.0, 2.0], [3.0, 4.0]]
        m = Matrix.from_rows(source)
        source[0][0] = 99.0
        assert m.get(0, 0) == 1.0

    def test_values_are_floats(self):
        m = Matrix([[1, 2]])
        assert all(isinstance(v, float) for v in m.get_row(0))


class TestIdentity:
    @pytest.mark.parametrize("n", [1, 2, 3, 6])
    def test_diagonal_ones(self, n):
        m = Matrix.identity(n)
        for i, j in m.inorder_slot_iter():
            assert m.get(i, j) == (1.0 if i == j else 0.0)

    def test_size_zero(self):
        m = Matrix.identity(0)
        assert not m.has_error()
        assert (m.rows, m.cols) == (0, 0)

    def test_diagonal_and_vector(self):
        assert Matrix.diagonal([2, 3]).is_equal(Matrix([[2, 0], [0, 3]]))
        v = Matrix.new_vector([1, 2, 3])
        assert (v.rows, v.cols) == (3, 1)
        assert v.get_col(0) == [1.0, 2.0, 3.0]


class TestAccessors:
    def test_set_and_get(self):
        m = Matrix.of(2, 2).set(0, 1, 3.5).set(1, 0, -1)
        assert m.get(0, 1) == 3.5
        assert m.get(1, 0) == -1.0
        assert not m.has_error()

    def test_set_out_of_bound(self):
        m = Matrix.of(2, 2).set(5, 5, 1.0)
        assert m.has_error()
        assert m.error() == MatrixError.INDEX_OUT_OF_BOUND

    @pytest.mark.parametrize("row,col", [(2, 0), (0, 2), (-1, 0), (0, -1)])
    def test_get_out_of_bound(self, row, col):
        m = Matrix.of(2, 2)
        assert m.get(row, col) == 0.0
        assert m.error() == MatrixError.INDEX_OUT_OF_BOUND

    def test_get_row_out_of_bound(self):
        m = Matrix.of(2, 2)
        assert m.get_row(2) == []
        assert m.error() == MatrixError.INDEX_OUT_OF_BOUND

    def test_get_row_is_a_copy(self):
        m = Matrix([[1, 2]])
        row = m.get_row(0)
        row[0] = 42.0
        assert m.get(0, 0) == 1.0

    def test_set_row(self):
        m = Matrix.of(2, 3).set_row(1, [1, 2, 3])
        assert m.get_row(1) == [1.0, 2.0, 3.0]

    @pytest.mark.parametrize("values", [[1, 2], [1, 2, 3, 4]])
    def test_set_row_wrong_length(self, values):
        m = Matrix.of(2, 3).set_row(0, values)
        assert m.error() == MatrixError.INDEX_OUT_OF_BOUND

    def test_set_row_out_of_bound(self):
        assert Matrix.of(2, 3).set_row(2, [1, 2, 3]).has_error()
