from typing import List, Any
import sympy

CELL_FORMAT = "%10.5f"


def pcformat(fstr, *vals):
    """
    Format a percent sign string with the given values.
    Example:
    >>> pcformat(r"%s + %s = %s", 1, 2, 3)
    "1 + 2 = 3"
    """
    formatted_vals = tuple(cformat(val) for val in vals)
    return fstr % formatted_vals


def cformat(val, arg_of=None):
    if hasattr(val, "cformat") and callable(val.cformat):
        return val.cformat(arg_of)
    if isinstance(val, str):
        return val
    if isinstance(val, float) and val.is_integer():
        val = int(val)
    if arg_of == "*" and isinstance(val, (int, float)) and val < 0:
        return r"(%s)" % sympy.latex(val)
    try:
        return sympy.latex(val)
    except Exception:  # sympy cannot print every object; str() is good enough here
        pass
    return str(val)


def make_latex_matrix(items: List[List[Any]]) -> str:
    start = r"\begin{pmatrix}"
    end = r"\end{pmatrix}"
    rows = [r" & ".join([cformat(item) for item in row]) for row in items]
    return start + (r"\\[0.1em]" + "\n").join(rows) + end


def make_text_matrix(items: List[List[float]], rows: int, cols: int) -> str:
    lines = ["{ %sx%s: [" % (rows, cols)]
    for row in items:
        lines.append("  " + "".join([(CELL_FORMAT + ", ") % item for item in row]))
    lines.append("]}")
    return "\n".join(lines)


def multi_add(items: List[Any]) -> Any:
    if len(items) == 0:
        raise ValueError("At least one item is required")
    if len(items) == 1:
        return items[0]
    return sum(items)
