import random

import pytest

from ftkit.lists import merge_sort


def numeric(a, b):
    return (a > b) - (a < b)


@pytest.mark.parametrize("size", [0, 1, 2, 3, 7, 50, 257])
def test_matches_sorted(size):
    rng = random.Random(size)
    data = [rng.randint(-100, 100) for _ in range(size)]
    assert merge_sort(data, numeric) == sorted(data)


def test_reverse_comparison():
    data = [3, 1, 4, 1, 5, 9, 2, 6]
    assert merge_sort(data, lambda a, b: numeric(b, a)) == sorted(data, reverse=True)


def test_stable_on_equal_keys():
    data = [(2, "a"), (1, "b"), (2, "c"), (1, "d"), (2, "e")]
    result = merge_sort(data, lambda a, b: numeric(a[0], b[0]))
    assert result == sorted(data, key=lambda pair: pair[0])


def test_input_not_mutated():
    data = [5, 4, 3, 2, 1]
    snapshot = list(data)
    merge_sort(data, numeric)
    assert data == snapshot


def test_accepts_any_iterable():
    assert merge_sort(iter("dcba"), numeric) == list("abcd")