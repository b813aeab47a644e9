"""Tableau: the augmented matrix of a square linear system."""
from __future__ import annotations

import logging
import sys
from typing import IO, List, Optional, Sequence, Tuple

import pandas as pd

from .errors import InvalidDimensions, LinearSystemError, SolveOutcome
from .linalg import gauss_jordan
from .ordering import order_rows
from .rows import Row

logger = logging.getLogger(__name__)

Pair = Tuple[Sequence[float], Sequence[float]]


class Tableau:
    """Solve a square system ``A·X = B`` by Gauss-Jordan elimination.

    The rows are put into a pivot-valid order as soon as the tableau is built.
    ``solve`` reduces them in place, so the pre-elimination state is not kept.
    """

    def __init__(self, rows: Sequence[Row]):
        self._rows: List[Row] = list(rows)
        self._validate()
        self._rows, self._order = order_rows(self._rows)
        self._solved = False

    @classmethod
    def from_pairs(cls, pairs: Sequence[Pair]) -> Tableau:
        """Build a tableau from ``[(coefficients, results), ...]`` rows."""

        if not isinstance(pairs, (list, tuple)):
            raise InvalidDimensions("Rows must be given as a list of (coefficients, results) pairs")
        rows: List[Row] = []
        for index, pair in enumerate(pairs):
            if not isinstance(pair, (list, tuple)) or len(pair) != 2:
                raise InvalidDimensions(
                    f"Row {index} must be a (coefficients, results) pair"
                )
            lhs, rhs = pair
            rows.append(Row.from_values(lhs, rhs))
        return cls(rows)

    @classmethod
    def from_matrices(
        cls,
        coefficients: Sequence[Sequence[float]],
        results: Sequence[Sequence[float]],
    ) -> Tableau:
        """Build a tableau from a coefficient matrix and a matrix of right-hand sides."""

        if not isinstance(coefficients, (list, tuple)) or not isinstance(results, (list, tuple)):
            raise InvalidDimensions("Coefficients and results must be lists of rows")
        if len(coefficients) != len(results):
            raise InvalidDimensions(
                f"Coefficient rows ({len(coefficients)}) and result rows ({len(results)}) differ"
            )
        return cls.from_pairs(list(zip(coefficients, results)))

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------
    def _validate(self) -> None:
        if self.height <= 1:
            raise InvalidDimensions("Invalid row count")

        for index, row in enumerate(self._rows):
            if row.coefficient_width != self.height:
                raise InvalidDimensions(
                    "Row LHS width must equal amount of rows to make a square matrix "
                    f"(row {index} has {row.coefficient_width}, expected {self.height})"
                )

        widths = {row.result_width for row in self._rows}
        if len(widths) != 1:
            raise InvalidDimensions(f"Rows have differing result widths: {sorted(widths)}")
        if self.result_width < 1:
            raise InvalidDimensions("Rows must have at least one result column")

    # ------------------------------------------------------------------
    # Solving
    # ------------------------------------------------------------------
    def solve(self, tolerance: float = 0.0) -> List[List[float]]:
        """Solve the set of equations and return the result side of each row."""

        logger.debug("Solving %dx%d tableau with %d result column(s)", self.height, self.height, self.result_width)
        solution = gauss_jordan(self._rows, tolerance)
        self._solved = True
        return solution

    def try_solve(self, tolerance: float = 0.0) -> SolveOutcome:
        """Like :meth:`solve` but returns failures as a :class:`SolveOutcome`."""

        try:
            return SolveOutcome.success(self.solve(tolerance))
        except LinearSystemError as exc:
            logger.debug("Solve failed: %s", exc)
            return SolveOutcome.failure(exc)

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------
    @property
    def height(self) -> int:
        return len(self._rows)

    @property
    def coefficient_width(self) -> int:
        return self._rows[0].coefficient_width

    @property
    def result_width(self) -> int:
        return self._rows[0].result_width

    @property
    def row_order(self) -> Tuple[int, ...]:
        """Input index of the row at each position after pivot ordering."""
        return self._order

    @property
    def solved(self) -> bool:
        return self._solved

    @property
    def coefficients(self) -> List[List[float]]:
        """Current coefficient side of every row."""
        return [list(row.lhs.values) for row in self._rows]

    @property
    def results(self) -> List[List[float]]:
        """Current result side of every row."""
        return [list(row.rhs.values) for row in self._rows]

    @property
    def first_results(self) -> List[float]:
        """First result column of every row."""
        return [row.rhs.values[0] for row in self._rows]

    def to_frame(self) -> pd.DataFrame:
        """Return the current rows as a DataFrame indexed by input row number."""

        columns = [f"a{k}" for k in range(self.coefficient_width)]
        columns += [f"b{k}" for k in range(self.result_width)]
        data = [row.lhs.values + row.rhs.values for row in self._rows]
        return pd.DataFrame(data, columns=columns, index=pd.Index(self._order, name="row"))

    def inspect(self, stream: Optional[IO[str]] = None) -> None:
        """Print out the tableau."""

        print(self.to_frame().to_string(), file=stream or sys.stdout)

    def __repr__(self) -> str:
        return f"Tableau(height={self.height}, result_width={self.result_width}, solved={self._solved})"


def solve_system(pairs: Sequence[Pair], tolerance: float = 0.0) -> SolveOutcome:
    """Build and solve a tableau, returning any failure as a value."""

    try:
        tableau = Tableau.from_pairs(pairs)
    except LinearSystemError as exc:
        return SolveOutcome.failure(exc)
    return tableau.try_solve(tolerance)


__all__ = ["Tableau", "solve_system"]
