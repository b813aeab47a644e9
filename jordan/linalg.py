"""Gauss-Jordan elimination over an ordered list of equation rows."""
from __future__ import annotations

import logging
import math
from typing import List, Sequence

from .errors import InvalidDimensions, SingularSystem
from .rows import Row

logger = logging.getLogger(__name__)


def _is_zero(value: float, tolerance: float) -> bool:
    return math.isnan(value) or abs(value) <= tolerance


def forward_eliminate(rows: Sequence[Row], tolerance: float = 0.0) -> None:
    """Normalize each pivot row and clear the coefficients below it.

    Rows are updated in place.  ``SingularSystem`` is raised when a pivot has
    been cancelled to zero by an earlier step, before it would be divided by.
    """

    height = len(rows)
    for i in range(height):
        pivot = rows[i].lhs.values[i]
        if _is_zero(pivot, tolerance):
            raise SingularSystem(f"LHS is singular and unsolvable: pivot {i} vanished during elimination")
        rows[i].divide_by(pivot)

        for j in range(height - 1, i, -1):
            rows[j].subtract_multiple(rows[i], rows[j].lhs.values[i])


def check_diagonal(rows: Sequence[Row], tolerance: float = 0.0) -> None:
    """Raise ``SingularSystem`` unless every diagonal coefficient is nonzero.

    A NaN diagonal is treated as zero, as is any value whose magnitude is at
    or below ``tolerance``.
    """

    for i, row in enumerate(rows):
        if _is_zero(row.lhs.values[i], tolerance):
            raise SingularSystem(f"LHS is singular and unsolvable: zero diagonal at row {i}")


def backward_eliminate(rows: Sequence[Row]) -> None:
    """Clear the coefficients above each pivot, from the last row upwards."""

    for i in range(len(rows) - 1, -1, -1):
        for j in range(i):
            rows[j].subtract_multiple(rows[i], rows[j].lhs.values[i])


def gauss_jordan(rows: Sequence[Row], tolerance: float = 0.0) -> List[List[float]]:
    """Reduce ``rows`` to the identity and return the result side of each row.

    The rows must already be pivot-valid (see :func:`jordan.ordering.order_rows`);
    they are mutated in place.  ``tolerance`` is the magnitude at or below
    which a pivot counts as zero; the default only rejects exact zeros.
    """

    forward_eliminate(rows, tolerance)
    check_diagonal(rows, tolerance)
    backward_eliminate(rows)
    logger.debug("Reduced %d rows to identity", len(rows))
    return [list(row.rhs.values) for row in rows]


def solve_dense(matrix: Sequence[Sequence[float]], rhs: Sequence[float]) -> List[float]:
    """Solve a dense system with a single right-hand side vector.

    ``matrix`` and ``rhs`` are not mutated.  Rows are reordered only as far as
    needed to obtain nonzero pivots; there is no magnitude-based pivoting.
    """

    from .model import Tableau

    if len(rhs) != len(matrix):
        raise InvalidDimensions("Right-hand side dimension mismatch")

    tableau = Tableau.from_matrices(matrix, [[value] for value in rhs])
    return [column[0] for column in tableau.solve()]


def residuals(
    coefficients: Sequence[Sequence[float]],
    results: Sequence[Sequence[float]],
    solution: Sequence[Sequence[float]],
) -> List[List[float]]:
    """Return ``A·X - B`` for coefficients ``A``, results ``B`` and solution ``X``."""

    if len(coefficients) != len(results):
        raise InvalidDimensions("Coefficient and result row counts differ")
    if any(len(row) != len(solution) for row in coefficients):
        raise InvalidDimensions("Solution height must equal the coefficient width")

    output: List[List[float]] = []
    for a_row, b_row in zip(coefficients, results):
        output.append([
            sum(a * x_row[k] for a, x_row in zip(a_row, solution)) - b_row[k]
            for k in range(len(b_row))
        ])
    return output


__all__ = [
    "forward_eliminate",
    "check_diagonal",
    "backward_eliminate",
    "gauss_jordan",
    "solve_dense",
    "residuals",
]
