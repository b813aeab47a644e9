import itertools

from jordan import HeapPermutations, permute


def test_three_elements_yield_six_distinct_orderings():
    orderings = list(HeapPermutations(["a", "b", "c"]))
    assert len(orderings) == 6
    assert orderings[0] == ["a", "b", "c"]
    assert {tuple(o) for o in orderings} == set(itertools.permutations("abc"))


def test_heap_order_matches_generator_form():
    expected = [
        ["a", "b", "c"],
        ["b", "a", "c"],
        ["c", "a", "b"],
        ["a", "c", "b"],
        ["b", "c", "a"],
        ["c", "b", "a"],
    ]
    assert list(HeapPermutations("abc")) == expected
    assert list(permute("abc")) == expected


def test_consecutive_orderings_differ_by_one_swap():
    orderings = list(HeapPermutations(range(4)))
    assert len(orderings) == 24
    for previous, current in zip(orderings, orderings[1:]):
        assert sum(1 for a, b in zip(previous, current) if a != b) == 2


def test_iterator_is_not_restartable():
    candidates = HeapPermutations([1, 2, 3])
    assert len(list(candidates)) == 6
    assert candidates.count == 6
    assert list(candidates) == []
    assert iter(candidates) is candidates


def test_snapshots_are_independent_and_input_is_untouched():
    items = [1, 2, 3]
    candidates = HeapPermutations(items)
    first = next(candidates)
    first.append(99)
    second = next(candidates)
    assert second == [2, 1, 3]
    assert items == [1, 2, 3]


def test_single_element_and_empty_input():
    assert list(HeapPermutations([7])) == [[7]]
    assert list(permute([])) == [[]]
