import random

import pytest

from algobox.sorting import bubble_sort, counting_sort, insertion_sort, quick_sort


def _sample(seed, size=40, low=0, high=30):
    rng = random.Random(seed)
    return [rng.randint(low, high) for _ in range(size)]


@pytest.mark.parametrize("seed", [1, 2, 3])
def test_matches_sorted(seed):
    values = _sample(seed)
    expected = sorted(values)
    assert bubble_sort(values) == expected
    assert insertion_sort(values) == expected
    assert quick_sort(values) == expected
    assert counting_sort(values) == expected


def test_input_is_left_unchanged():
    values = [4, 0, 3, 3, 1]
    copy = list(values)
    assert bubble_sort(values) == [0, 1, 3, 3, 4]
    assert values == copy
    assert insertion_sort(values) == [0, 1, 3, 3, 4]
    assert values == copy
    assert quick_sort(values) == [0, 1, 3, 3, 4]
    assert values == copy
    assert counting_sort(values) == [0, 1, 3, 3, 4]
    assert values == copy


@pytest.mark.parametrize("values", [[], [7], [2, 2, 2], [0, 1, 2, 3]])
def test_edge_cases(values):
    expected = sorted(values)
    assert bubble_sort(values) == expected
    assert insertion_sort(values) == expected
    assert quick_sort(values) == expected
    assert counting_sort(values) == expected


def test_negative_values():
    values = _sample(9, low=-50, high=50)
    expected = sorted(values)
    assert bubble_sort(values) == expected
    assert insertion_sort(values) == expected
    assert quick_sort(values) == expected


def test_strings():
    words = ["pear", "apple", "fig", "apple"]
    expected = ["apple", "apple", "fig", "pear"]
    assert bubble_sort(words) == expected
    assert insertion_sort(words) == expected
    assert quick_sort(words) == expected


def test_quick_sort_handles_long_presorted_input():
    values = list(range(3000))
    assert quick_sort(values) == values
    assert quick_sort(reversed(values)) == values


def test_counting_sort_rejects_negative():
    with pytest.raises(ValueError):
        counting_sort([3, -1, 2])