from typing import Callable
import random

from .linalg import Matrix


class RandomMatrixBuilder:
    num_rows: int | None = None
    num_cols: int | None = None
    dist: Callable[[], float] | None = None
    max_attempts: int = 1000

    @classmethod
    def new(cls, **kwargs) -> "RandomMatrixBuilder":
        builder = cls()
        for key, value in kwargs.items():
            setattr(builder, key, value)
        return builder

    def with_size(self, num_rows: int, num_cols: int) -> "RandomMatrixBuilder":
        self.num_rows = num_rows
        self.num_cols = num_cols
        return self

    def with_dist(self, dist: Callable[[], float] | None) -> "RandomMatrixBuilder":
        self.dist = dist
        return self

    def is_square(self) -> bool:
        return self.num_rows == self.num_cols

    def _dist(self) -> Callable[[], float]:
        return self.dist or (lambda: random.randint(-5, 5))

    def build_random(self) -> Matrix:
        dist = self._dist()
        return Matrix.from_rows(
            [[dist() for _ in range(self.num_cols)] for _ in range(self.num_rows)]
        )

    def build_full_rank(self) -> Matrix:
        assert self.is_square(), "Regular matrix must be square."
        for _ in range(self.max_attempts):
            val = self.build_random()
            if val.determinant() != 0:
                return val
        raise ValueError(
            "No regular %sx%s matrix found in %s attempts"
            % (self.num_rows, self.num_cols, self.max_attempts)
        )

    def build_singular(self) -> Matrix:
        assert self.is_square(), "Singular matrix must be square."
        assert self.num_rows >= 2, "A 1x1 singular matrix is just [[0]]."
        val = self.build_random()
        return val.set_row(val.rows - 1, val.get_row(0))


def raw_gen_rand_matrix(
    rows: int, cols: int, dist: Callable[[], float] | None = None
) -> Matrix:
    return (
        RandomMatrixBuilder.new().with_size(rows, cols).with_dist(dist).build_random()
    )


def gen_regular_matrix(N: int, dist: Callable[[], float] | None = None) -> Matrix:
    return RandomMatrixBuilder.new().with_size(N, N).with_dist(dist).build_full_rank()


def gen_singular_matrix(N: int, dist: Callable[[], float] | None = None) -> Matrix:
    return RandomMatrixBuilder.new().with_size(N, N).with_dist(dist).build_singular()
