"""Serialization helpers for tableau configurations."""
from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, IO, Iterable, List, Optional, Sequence, Tuple, Union

from .errors import InvalidDimensions, SolveOutcome
from .model import Tableau, solve_system
from .rows import _to_float_list

Matrix = List[List[float]]
_JSONSource = Union[str, Path, IO[str]]


def _to_matrix(rows: Iterable[Any]) -> Matrix:
    return [_to_float_list(row) for row in rows]


def _split_rows(entries: Iterable[Any]) -> Tuple[Matrix, Matrix]:
    """Split the combined ``[[lhs, rhs], ...]`` form into two matrices."""

    coefficients: Matrix = []
    results: Matrix = []
    for index, entry in enumerate(entries):
        if not isinstance(entry, (list, tuple)) or len(entry) != 2:
            raise InvalidDimensions(f"Row {index} must be a [coefficients, results] pair")
        lhs, rhs = entry
        coefficients.append(_to_float_list(lhs))
        results.append(_to_float_list(rhs))
    return coefficients, results


@dataclass
class TableauConfiguration:
    """Container for a full linear system definition."""

    coefficients: Matrix
    results: Matrix
    label: str = ""
    description: str = ""
    tolerance: float = 0.0
    metadata: Dict[str, Any] = field(default_factory=dict)

    def pairs(self) -> List[Tuple[List[float], List[float]]]:
        """Return the rows in the ``(coefficients, results)`` form used by :class:`Tableau`."""

        if len(self.coefficients) != len(self.results):
            raise InvalidDimensions(
                f"Coefficient rows ({len(self.coefficients)}) and result rows ({len(self.results)}) differ"
            )
        return [(list(lhs), list(rhs)) for lhs, rhs in zip(self.coefficients, self.results)]

    def build_tableau(self) -> Tableau:
        """Create a :class:`Tableau` for this configuration."""

        return Tableau.from_pairs(self.pairs())

    def solve(self) -> SolveOutcome:
        """Build and solve the system, reporting failures as a value."""

        try:
            pairs = self.pairs()
        except InvalidDimensions as exc:
            return SolveOutcome.failure(exc)
        return solve_system(pairs, self.tolerance)

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable dictionary representing the configuration."""

        payload: Dict[str, Any] = {
            "label": self.label,
            "description": self.description,
            "tolerance": self.tolerance,
            "coefficients": [list(row) for row in self.coefficients],
            "results": [list(row) for row in self.results],
        }
        if self.metadata:
            payload["metadata"] = dict(self.metadata)
        return payload

    def to_json(self, *, indent: Optional[int] = 2) -> str:
        """Serialize the configuration to a JSON string."""

        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TableauConfiguration":
        """Create a configuration from a dictionary.

        Either ``coefficients`` + ``results`` or the combined ``rows`` list of
        ``[coefficients, results]`` pairs may be given; ``rows`` wins when
        both are present.
        """

        if "rows" in data:
            coefficients, results = _split_rows(data.get("rows", []))
        else:
            coefficients = _to_matrix(data.get("coefficients", []))
            results = _to_matrix(data.get("results", []))
        metadata = data.get("metadata")
        return cls(
            coefficients=coefficients,
            results=results,
            label=str(data.get("label", "")),
            description=str(data.get("description", "")),
            tolerance=float(data.get("tolerance", 0.0)),
            metadata=dict(metadata) if isinstance(metadata, dict) else {},
        )

    @classmethod
    def from_pairs(cls, pairs: Sequence[Tuple[Sequence[float], Sequence[float]]], **kwargs: Any) -> "TableauConfiguration":
        coefficients, results = _split_rows([list(pair) for pair in pairs])
        return cls(coefficients=coefficients, results=results, **kwargs)

    @classmethod
    def from_json(cls, source: _JSONSource) -> "TableauConfiguration":
        """Load a configuration from a JSON file path or file-like object."""

        if hasattr(source, "read"):
            data = json.load(source)  # type: ignore[arg-type]
        else:
            path = Path(source)
            with path.open("r", encoding="utf-8") as handle:
                data = json.load(handle)
        if not isinstance(data, dict):
            raise ValueError("Tableau configuration JSON must contain an object at the top level")
        return cls.from_dict(data)

    def save(self, target: Union[str, Path, IO[str]], *, indent: Optional[int] = 2) -> None:
        """Write the configuration to disk or a file-like object."""

        payload = self.to_json(indent=indent)
        if hasattr(target, "write"):
            target.write(payload)  # type: ignore[arg-type]
        else:
            path = Path(target)
            path.write_text(payload, encoding="utf-8")


def load_tableau_from_json(source: _JSONSource) -> Tuple[Tableau, TableauConfiguration]:
    """Load a :class:`Tableau` and its configuration from JSON."""

    config = TableauConfiguration.from_json(source)
    return config.build_tableau(), config


__all__ = [
    "TableauConfiguration",
    "load_tableau_from_json",
]
