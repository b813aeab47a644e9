"""Error kinds raised while building or solving a tableau."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Type


class ErrorKind(str, Enum):
    INVALID_DIMENSIONS = "InvalidDimensions"
    NO_VALID_PIVOT_ORDERING = "NoValidPivotOrdering"
    SINGULAR_SYSTEM = "SingularSystem"


class LinearSystemError(RuntimeError):
    """Raised when the linear system cannot be solved."""

    kind: ErrorKind


class InvalidDimensions(LinearSystemError, ValueError):
    """Row count, coefficient width or result width do not describe a square system."""

    kind = ErrorKind.INVALID_DIMENSIONS


class NoValidPivotOrdering(LinearSystemError):
    """No ordering of the rows puts a nonzero coefficient on every diagonal position."""

    kind = ErrorKind.NO_VALID_PIVOT_ORDERING


class SingularSystem(LinearSystemError):
    """A pivot degenerated to zero during elimination."""

    kind = ErrorKind.SINGULAR_SYSTEM


_ERRORS_BY_KIND: Dict[ErrorKind, Type[LinearSystemError]] = {
    ErrorKind.INVALID_DIMENSIONS: InvalidDimensions,
    ErrorKind.NO_VALID_PIVOT_ORDERING: NoValidPivotOrdering,
    ErrorKind.SINGULAR_SYSTEM: SingularSystem,
}


def error_for_kind(kind: ErrorKind) -> Type[LinearSystemError]:
    """Return the exception class matching ``kind``."""

    return _ERRORS_BY_KIND[ErrorKind(kind)]


@dataclass(frozen=True)
class SolveOutcome:
    """Result of a solve attempt that carries failures as values.

    Exactly one of ``solution`` and ``error`` is set.  ``unwrap`` returns the
    solution or raises the exception matching ``error``.
    """

    solution: Optional[List[List[float]]] = None
    error: Optional[ErrorKind] = None
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, solution: List[List[float]]) -> "SolveOutcome":
        return cls(solution=solution)

    @classmethod
    def failure(cls, exc: LinearSystemError) -> "SolveOutcome":
        return cls(error=exc.kind, message=str(exc))

    def unwrap(self) -> List[List[float]]:
        if self.error is not None:
            raise error_for_kind(self.error)(self.message)
        if self.solution is None:
            raise ValueError("SolveOutcome holds neither a solution nor an error")
        return self.solution

    def to_dict(self) -> Dict[str, object]:
        return {
            "ok": self.ok,
            "solution": self.solution,
            "error": self.error.value if self.error is not None else None,
            "message": self.message,
        }


__all__ = [
    "ErrorKind",
    "LinearSystemError",
    "InvalidDimensions",
    "NoValidPivotOrdering",
    "SingularSystem",
    "SolveOutcome",
    "error_for_kind",
]
