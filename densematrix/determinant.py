"""
Determinant, minor and cofactor computation by Laplace expansion.

Every routine here works on a raw row-major ``List[List[float]]`` together with
row and column index lists. A sub-matrix is described by the indices that
survive, so the recursion never copies the underlying items.
"""

from __future__ import annotations

from typing import List

from .log import log
from .fmt import cformat, multi_add, make_latex_matrix

# Laplace expansion is O(n!). Set to an int to refuse larger inputs.
MAX_LAPLACE_SIZE: int | None = None


def check_size(n: int) -> None:
    if MAX_LAPLACE_SIZE is not None and n > MAX_LAPLACE_SIZE:
        raise ValueError(
            "Laplace expansion of a %sx%s matrix exceeds MAX_LAPLACE_SIZE=%s"
            % (n, n, MAX_LAPLACE_SIZE)
        )


def _get_element(
    items: List[List[float]], rows: List[int], cols: List[int], i: int, j: int
) -> float:
    """Get element at logical position (i, j) using row/col index mappings."""
    return items[rows[i]][cols[j]]


def _build_submatrix_items(
    items: List[List[float]], rows: List[int], cols: List[int]
) -> List[List[float]]:
    """Build a list of lists representing the submatrix for display."""
    return [[items[r][c] for c in cols] for r in rows]


def _without(indices: List[int], position: int) -> List[int]:
    return [idx for i, idx in enumerate(indices) if i != position]


def laplace_determinant(
    items: List[List[float]],
    rows: List[int] = None,
    cols: List[int] = None,
    do_log: bool = False,
) -> float:
    """
    Compute the determinant of the square view ``items[rows][cols]``.

    Args:
        items: Row-major values of the full matrix.
        rows: Row indices to use (defaults to all rows).
        cols: Column indices to use (defaults to all columns).
        do_log: Whether to log computation steps.

    Returns:
        The determinant. The empty view has determinant 1.0.
    """
    if rows is None:
        rows = list(range(len(items)))
    if cols is None:
        cols = list(range(len(items[0]) if items else 0))
    if len(rows) != len(cols):
        raise ValueError("Determinant requires a square view")

    if len(rows) <= 2:
        return _execute_direct(items, rows, cols, do_log)
    return _execute_row_expansion(items, rows, cols, do_log)


def _execute_direct(
    items: List[List[float]], rows: List[int], cols: List[int], do_log: bool
) -> float:
    """Closed forms for n <= 2."""
    n = len(rows)

    if n == 0:
        if do_log:
            log(r"$\det([]) = 1$")
        return 1.0

    if n == 1:
        # Don't log 1x1 determinants - they're trivial
        return _get_element(items, rows, cols, 0, 0)

    a = _get_element(items, rows, cols, 0, 0)
    b = _get_element(items, rows, cols, 0, 1)
    c = _get_element(items, rows, cols, 1, 0)
    d = _get_element(items, rows, cols, 1, 1)
    det = a * d - b * c
    if do_log:
        log(
            r"$$ \det%s = %s \cdot %s - %s \cdot %s = %s $$",
            make_latex_matrix(_build_submatrix_items(items, rows, cols)),
            cformat(a, arg_of="*"),
            cformat(d, arg_of="*"),
            cformat(b, arg_of="*"),
            cformat(c, arg_of="*"),
            det,
        )
    return det


def _execute_row_expansion(
    items: List[List[float]], rows: List[int], cols: List[int], do_log: bool
) -> float:
    """Laplace expansion along the first row of the view."""
    check_size(len(rows))

    if do_log:
        log(r"Expand the determinant along the first row:")
        log(r"$$ \det%s $$", make_latex_matrix(_build_submatrix_items(items, rows, cols)))

    remaining_rows = rows[1:]
    terms = []
    term_strs = []

    for col_idx in range(len(cols)):
        remaining_cols = _without(cols, col_idx)
        element = _get_element(items, rows, cols, 0, col_idx)
        sign = 1.0 if col_idx % 2 == 0 else -1.0

        minor_det = laplace_determinant(
            items, remaining_rows, remaining_cols, do_log=do_log
        )
        term = sign * minor_det * element
        terms.append(term)

        if do_log:
            log(
                r"$$ (-1)^{1+%s} \cdot a_{1,%s} \cdot M_{1,%s} = %s \cdot %s \cdot %s = %s $$",
                col_idx + 1,
                col_idx + 1,
                col_idx + 1,
                "+" if sign > 0 else "-",
                cformat(element, arg_of="*"),
                cformat(minor_det, arg_of="*"),
                term,
            )
            term_strs.append(cformat(term, arg_of="*"))

    result = multi_add(terms)

    if do_log:
        log(r"$$ \det = %s = %s $$", " + ".join(term_strs), result)

    return result


def cofactor_sign(row: int, col: int) -> float:
    """Checkerboard sign (-1)^(row+col)."""
    return 1.0 if (row + col) % 2 == 0 else -1.0


def minor_items(items: List[List[float]], do_log: bool = False) -> List[List[float]]:
    """
    Matrix of minors of a square, non-empty ``items``.

    Cell (r, c) of the result is the determinant of ``items`` with row r and
    column c removed. A 1x1 input yields ``[[1.0]]``.
    """
    n = len(items)
    check_size(n)
    all_idx = list(range(n))
    result = []
    for r in range(n):
        sub_rows = _without(all_idx, r)
        row = []
        for c in range(n):
            sub_cols = _without(all_idx, c)
            if do_log:
                log(r"Minor $M_{%s,%s}$:", r + 1, c + 1)
            row.append(laplace_determinant(items, sub_rows, sub_cols, do_log=do_log))
        result.append(row)
    if do_log:
        log(r"$$ M = %s $$", make_latex_matrix(result))
    return result


def cofactor_items(items: List[List[float]]) -> List[List[float]]:
    return [
        [value * cofactor_sign(r, c) for c, value in enumerate(row)]
        for r, row in enumerate(items)
    ]


def determinant_from_cofactor(
    items: List[List[float]], cofactors: List[List[float]]
) -> float:
    """Single Laplace step along row 0 using precomputed cofactors."""
    return multi_add([a * c for a, c in zip(items[0], cofactors[0])])
