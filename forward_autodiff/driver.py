"""
Demonstration driver: build one expression, tabulate it over sample
points and render the three sequences as delimited text.
"""

from typing import Iterable, Sequence

import numpy as np

from .expression_tree import Expression
from .expression_tree.builder import identity, constant, power, sqrt, exp, sin, add, divide
from .sampling import SampleTable
from .logging_system import LogLevel, log_debug, log_info, log_milestone, log_warning


def build_demo_expression() -> Expression:
    """sin(sqrt(exp(x) + x^2) / 2)"""
    root = sin(
        divide(
            sqrt(add(exp(identity()), power(identity(), 2))),
            constant(2.0)
        )
    )
    return Expression(root)


def tabulate(expression: Expression, points: Iterable[float]) -> SampleTable:
    inputs = np.asarray(points, dtype=np.float64).ravel()
    values = expression.evaluate_samples(inputs)
    derivatives = expression.derivative_samples(inputs)
    for x, value, slope in zip(inputs, values, derivatives):
        log_info(f"x={x:g} f={value:g} df={slope:g}", LogLevel.DETAILED)
    log_milestone(f"Tabulated {inputs.size} samples")

    non_finite = int(np.count_nonzero(~np.isfinite(values)) + np.count_nonzero(~np.isfinite(derivatives)))
    if non_finite:
        log_warning(f"{non_finite} non-finite results in tabulation")
    log_debug(f"Expression has {expression.size()} nodes, depth {expression.depth()}")

    return SampleTable(inputs=inputs, values=values, derivatives=derivatives)


def _format_row(row: Sequence[float], precision: int) -> str:
    return ", ".join(f"{float(v):.{precision}g}" for v in row)


def render_table(table: SampleTable, precision: int = 6) -> str:
    """Inputs, values and derivatives on separate lines, blank line between"""
    if precision < 1:
        raise ValueError(f"precision must be at least 1, got {precision}")
    rows = (table.inputs, table.values, table.derivatives)
    return "\n\n".join(_format_row(row, precision) for row in rows) + "\n"
