from .linalg import Matrix, has_error, error_of
from .errors import MatrixError, MatrixValueError
from .random_matrix import (
    RandomMatrixBuilder,
    raw_gen_rand_matrix,
    gen_regular_matrix,
    gen_singular_matrix,
)

from .fmt import cformat, make_latex_matrix, make_text_matrix

from .log import log, debug, nest_logger, nest_appending_logger, ignore_log, capture_logs

__all__ = [
    "Matrix",
    "has_error",
    "error_of",
    "MatrixError",
    "MatrixValueError",
    "RandomMatrixBuilder",
    "raw_gen_rand_matrix",
    "gen_regular_matrix",
    "gen_singular_matrix",
    "cformat",
    "make_latex_matrix",
    "make_text_matrix",
    "log",
    "debug",
    "nest_logger",
    "nest_appending_logger",
    "ignore_log",
    "capture_logs",
]
