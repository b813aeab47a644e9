"""Row primitives of the augmented matrix (coefficient side + result side)."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Sequence

from .errors import InvalidDimensions


def _to_float_list(values: Iterable[float]) -> List[float]:
    return [float(value) for value in values]


def _is_row_sequence(values: object) -> bool:
    return isinstance(values, (list, tuple))


@dataclass
class RowSide:
    """One side of an equation row: a fixed-width list of floats."""

    values: List[float]

    def __post_init__(self) -> None:
        self.values = _to_float_list(self.values)

    @property
    def width(self) -> int:
        return len(self.values)

    def check_width(self, other: RowSide) -> None:
        if other.width != self.width:
            raise InvalidDimensions(
                f"Row side width mismatch: {self.width} != {other.width}"
            )

    def subtract_multiple(self, other: RowSide, multiple: float) -> None:
        self.check_width(other)
        self.values = [
            value - other_value * multiple
            for value, other_value in zip(self.values, other.values)
        ]

    def divide_by(self, divisor: float) -> None:
        self.values = [value / divisor for value in self.values]


@dataclass
class Row:
    """A single equation: coefficients (``lhs``) and right-hand sides (``rhs``).

    Every operation is applied to both sides with the same scalar so the pair
    stays one row of the augmented matrix.
    """

    lhs: RowSide
    rhs: RowSide

    @classmethod
    def from_values(cls, lhs: Sequence[float], rhs: Sequence[float]) -> Row:
        if not _is_row_sequence(lhs) or not _is_row_sequence(rhs):
            raise InvalidDimensions("Row coefficients and results must be lists or tuples")
        return cls(RowSide(list(lhs)), RowSide(list(rhs)))

    @property
    def coefficient_width(self) -> int:
        return self.lhs.width

    @property
    def result_width(self) -> int:
        return self.rhs.width

    @property
    def nonzero_indices(self) -> List[int]:
        """Columns where the coefficient side is nonzero."""

        return [index for index, value in enumerate(self.lhs.values) if value != 0]

    def subtract_multiple(self, other: Row, multiple: float) -> None:
        # Check both sides before touching either.
        self.lhs.check_width(other.lhs)
        self.rhs.check_width(other.rhs)
        self.lhs.subtract_multiple(other.lhs, multiple)
        self.rhs.subtract_multiple(other.rhs, multiple)

    def divide_by(self, divisor: float) -> None:
        self.lhs.divide_by(divisor)
        self.rhs.divide_by(divisor)


__all__ = ["RowSide", "Row"]
