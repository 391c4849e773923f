import random

import pytest

from algolab.stl import (
    find_at_least_given,
    find_given_value,
    find_last_even,
    find_median,
    remove_less_than,
    sort_asc,
    sort_desc,
    sort_mod3,
)


def _random_values(size, seed):
    rng = random.Random(seed)
    return [rng.randint(1, size * 4) for _ in range(size)]


@pytest.mark.parametrize("seed", range(5))
def test_sort_asc(seed):
    values = _random_values(15, seed)
    original = list(values)
    sort_asc(values)
    assert all(a <= b for a, b in zip(values, values[1:]))
    assert sorted(original) == sorted(values)


def test_sort_asc_empty():
    values = []
    sort_asc(values)
    assert values == []


@pytest.mark.parametrize("seed", range(5))
def test_sort_desc(seed):
    values = _random_values(15, seed)
    original = list(values)
    sort_desc(values)
    assert all(a >= b for a, b in zip(values, values[1:]))
    assert sorted(original) == sorted(values)


def test_find_given_value_first_occurrence():
    values = [7, 42, 3, 42]
    index = find_given_value(values, 42)
    assert values[index] == 42
    assert 42 not in values[:index]


def test_find_given_value_missing():
    assert find_given_value([1, 2, 3], 42) is None
    assert find_given_value([], 42) is None


def test_find_last_even():
    values = [2, 5, 8, 9, 11]
    index = find_last_even(values)
    assert values[index] == 8
    assert all(v % 2 for v in values[index + 1:])


def test_find_last_even_none():
    assert find_last_even([1, 3, 5]) is None
    assert find_last_even([]) is None


@pytest.mark.parametrize("seed", range(5))
def test_sort_mod3_sections(seed):
    values = _random_values(60, seed)
    original = list(values)
    sort_mod3(values)
    assert sorted(values) == sorted(original)
    groups = [v % 3 for v in values]
    assert groups == sorted(groups)
    for remainder in range(3):
        section = [v for v in values if v % 3 == remainder]
        assert section == sorted(section)


def test_sort_mod3_negative_remainder_goes_last():
    values = [-1, 1, 0]
    sort_mod3(values)
    assert values == [0, 1, -1]


def test_find_at_least_given_uses_key_order():
    mapping = {"val2": 60, "val10": 50, "val0": 10}
    assert find_at_least_given(mapping, 40) == 50


def test_find_at_least_given_none():
    assert find_at_least_given({"val0": 1, "val1": 2}, 42) is None
    assert find_at_least_given({}, 42) is None


def test_find_median_odd():
    assert find_median([5, 1, 3]) == 3


def test_find_median_even_truncates():
    assert find_median([4, 1, 3, 2]) == 2
    assert find_median([-1, -2]) == -1


def test_find_median_empty():
    assert find_median([]) is None


@pytest.mark.parametrize("limit", [0, 20, 42, 1000])
def test_remove_less_than(limit):
    values = _random_values(40, limit)
    original = list(values)
    remove_less_than(values, limit)
    assert all(v >= limit for v in values)
    assert values == [v for v in original if v >= limit]
    assert len(values) == sum(1 for v in original if v >= limit)