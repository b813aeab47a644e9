"""Iterative Heap's-algorithm permutation enumeration.

Both forms yield every ordering of the input exactly once, starting with the
input order, and swap a single pair of elements between consecutive orderings.
Each yielded value is a fresh list, never a view of the working array.
"""
from __future__ import annotations

from typing import Generic, Iterable, Iterator, List, TypeVar

T = TypeVar("T")


class HeapPermutations(Generic[T]):
    """Finite, non-restartable iterator over all permutations of ``items``.

    ``items`` is copied on construction; the caller's sequence is never
    reordered.  To walk the permutations a second time build a new instance.
    """

    def __init__(self, items: Iterable[T]):
        self._working: List[T] = list(items)
        self._counters: List[int] = [0] * len(self._working)
        self._index = 1
        self._started = False
        self._exhausted = False
        self.count = 0

    def __iter__(self) -> HeapPermutations[T]:
        return self

    def __next__(self) -> List[T]:
        if self._exhausted:
            raise StopIteration
        if not self._started:
            self._started = True
            return self._emit()

        length = len(self._working)
        counters = self._counters
        while self._index < length:
            i = self._index
            if counters[i] < i:
                k = counters[i] if i % 2 else 0
                self._working[i], self._working[k] = self._working[k], self._working[i]
                counters[i] += 1
                self._index = 1
                return self._emit()
            counters[i] = 0
            self._index += 1

        self._exhausted = True
        raise StopIteration

    def _emit(self) -> List[T]:
        self.count += 1
        return list(self._working)


def permute(items: Iterable[T]) -> Iterator[List[T]]:
    """Generator form of :class:`HeapPermutations`."""

    working = list(items)
    yield list(working)

    length = len(working)
    counters = [0] * length
    i = 1
    while i < length:
        if counters[i] < i:
            k = counters[i] if i % 2 else 0
            working[i], working[k] = working[k], working[i]
            counters[i] += 1
            i = 1
            yield list(working)
        else:
            counters[i] = 0
            i += 1


__all__ = ["HeapPermutations", "permute"]
