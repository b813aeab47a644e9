"""Row ordering so every diagonal coefficient is structurally nonzero."""
from __future__ import annotations

import logging
from typing import List, Sequence, Tuple

from .errors import NoValidPivotOrdering
from .permutations import HeapPermutations
from .rows import Row

logger = logging.getLogger(__name__)


def is_pivot_valid(rows: Sequence[Row]) -> bool:
    """Return ``True`` when row ``i`` has a nonzero coefficient in column ``i`` for all ``i``."""

    return all(index in row.nonzero_indices for index, row in enumerate(rows))


def order_rows(rows: Sequence[Row]) -> Tuple[List[Row], Tuple[int, ...]]:
    """Return the first pivot-valid permutation of ``rows`` in Heap's order.

    The second item maps each position of the returned list to the index of
    the input row placed there.  Only exact zeros are rejected; the numeric
    size of the pivots plays no part in the choice.
    """

    candidates = HeapPermutations(range(len(rows)))
    for order in candidates:
        permutation = [rows[index] for index in order]
        if is_pivot_valid(permutation):
            logger.debug(
                "Pivot ordering %s accepted after %d candidate(s)", order, candidates.count
            )
            return permutation, tuple(order)

    raise NoValidPivotOrdering(
        f"Unable to order {len(rows)} rows so every pivot is nonzero "
        f"({candidates.count} orderings examined)"
    )


__all__ = ["is_pivot_valid", "order_rows"]
