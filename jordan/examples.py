"""Reference systems."""
from __future__ import annotations

from typing import List, Tuple

from .config import TableauConfiguration

Matrix = List[List[float]]


def two_equation_example() -> Tuple[Matrix, Matrix]:
    """Return ``2x + y = 5``, ``x + 3y = 10`` (solution x=1, y=3)."""

    coefficients = [[2.0, 1.0], [1.0, 3.0]]
    results = [[5.0], [10.0]]
    return coefficients, results


def swapped_pivot_example() -> Tuple[Matrix, Matrix]:
    """Return ``y = 1``, ``x = 2``: the input order has a zero pivot at position 0."""

    coefficients = [[0.0, 1.0], [1.0, 0.0]]
    results = [[1.0], [2.0]]
    return coefficients, results


def three_equation_example() -> Tuple[Matrix, Matrix]:
    """Return a 3x3 system with two right-hand sides.

    The first column solves to (1, -2, 3), the second to (0, 1, -1).  Column 0
    of the first row is zero so the rows must be reordered.
    """

    coefficients = [
        [0.0, 2.0, 1.0],
        [1.0, 1.0, 1.0],
        [2.0, -1.0, 4.0],
    ]
    results = [
        [-1.0, 1.0],
        [2.0, 0.0],
        [16.0, -5.0],
    ]
    return coefficients, results


def reference_configurations() -> List[TableauConfiguration]:
    """Return the reference systems as labelled configurations."""

    return [
        TableauConfiguration(*two_equation_example(), label="Two equations"),
        TableauConfiguration(*swapped_pivot_example(), label="Swapped pivot"),
        TableauConfiguration(*three_equation_example(), label="Three equations"),
    ]


__all__ = [
    "two_equation_example",
    "swapped_pivot_example",
    "three_equation_example",
    "reference_configurations",
]
