"""Stable merge sort driven by a three-way comparison function."""

from collections import deque


def _merge(left, right, cmp):
    merged = []
    left = deque(left)
    right = deque(right)
    while left and right:
        if cmp(left[0], right[0]) <= 0:
            merged.append(left.popleft())
        else:
            merged.append(right.popleft())
    merged.extend(left)
    merged.extend(right)
    return merged


def merge_sort(items, cmp):
    """Return a new list of ``items`` sorted by ``cmp``; equal items keep their order.

    ``cmp(a, b)`` must return a negative number, zero or a positive number.
    """
    items = list(items)
    if len(items) < 2:
        return items
    middle = (len(items) + 1) // 2
    return _merge(merge_sort(items[:middle], cmp), merge_sort(items[middle:], cmp), cmp)