"""Core interfaces for the Gauss-Jordan tableau solver."""

from .errors import (
    ErrorKind,
    LinearSystemError,
    InvalidDimensions,
    NoValidPivotOrdering,
    SingularSystem,
    SolveOutcome,
)
from .rows import Row, RowSide
from .permutations import HeapPermutations, permute
from .ordering import order_rows
from .linalg import gauss_jordan, solve_dense, residuals
from .model import Tableau, solve_system
from .config import TableauConfiguration, load_tableau_from_json
from .examples import two_equation_example, swapped_pivot_example, three_equation_example

__all__ = [
    "ErrorKind",
    "LinearSystemError",
    "InvalidDimensions",
    "NoValidPivotOrdering",
    "SingularSystem",
    "SolveOutcome",
    "Row",
    "RowSide",
    "HeapPermutations",
    "permute",
    "order_rows",
    "gauss_jordan",
    "solve_dense",
    "residuals",
    "Tableau",
    "solve_system",
    "TableauConfiguration",
    "load_tableau_from_json",
    "two_equation_example",
    "swapped_pivot_example",
    "three_equation_example",
]
