import random

import pytest

from dsalgo.sorting import (
    bubble_sort,
    insertion_sort,
    merge_sort,
    quick_sort,
    selection_sort,
    sequential_sort,
)


def _random_lists():
    rng = random.Random(1234)
    return [[rng.randint(-50, 50) for _ in range(rng.randint(0, 40))] for _ in range(20)]


CASES = [
    [8, 7, 2, 3, 1],
    [],
    [42],
    [3, -1, 3, 0, -1, 7, 7, 2],
    list(range(25)),
    list(range(24, -1, -1)),
    ["pear", "apple", "fig", "banana"],
    *_random_lists(),
]


@pytest.mark.parametrize("values", CASES)
def test_every_sort_matches_sorted(values):
    expected = sorted(values)
    assert sequential_sort(values) == expected
    assert selection_sort(values) == expected
    assert bubble_sort(values) == expected
    assert insertion_sort(values) == expected
    assert merge_sort(values) == expected
    assert quick_sort(values) == expected


def test_source_example():
    assert quick_sort([8, 7, 2, 3, 1]) == [1, 2, 3, 7, 8]
    assert merge_sort([8, 7, 2, 3, 1]) == [1, 2, 3, 7, 8]


def test_accepts_any_iterable():
    ascending = list(range(25))
    assert sequential_sort(reversed(ascending)) == ascending
    assert selection_sort(reversed(ascending)) == ascending
    assert bubble_sort(reversed(ascending)) == ascending
    assert insertion_sort(reversed(ascending)) == ascending
    assert merge_sort(reversed(ascending)) == ascending
    assert quick_sort(reversed(ascending)) == ascending


def test_input_is_not_modified():
    values = [5, 4, 3, 2, 1]
    snapshot = list(values)
    assert sequential_sort(values) == [1, 2, 3, 4, 5]
    assert selection_sort(values) == [1, 2, 3, 4, 5]
    assert bubble_sort(values) == [1, 2, 3, 4, 5]
    assert insertion_sort(values) == [1, 2, 3, 4, 5]
    assert merge_sort(values) == [1, 2, 3, 4, 5]
    assert quick_sort(values) == [1, 2, 3, 4, 5]
    assert values == snapshot