"""In-place sorting algorithms: counting sort, quicksort and radix sort."""

from __future__ import annotations

from itertools import chain
from typing import Any, MutableSequence


def count_sort(items: MutableSequence[int]) -> None:
    """Sort non-negative integers in place by counting occurrences.

    Raises ValueError if a sequence of two or more items holds a negative number.
    """
    if len(items) < 2:
        return
    if min(items) < 0:
        raise ValueError("Counting sort requires non-negative integers.")

    counts = [0] * (max(items) + 1)
    for value in items:
        counts[value] += 1

    items[:] = [value for value, count in enumerate(counts) for _ in range(count)]


def quick_sort(items: MutableSequence[Any]) -> None:
    """Sort ``items`` in place with quicksort, using the first element as pivot."""
    pending = [(0, len(items))]
    while pending:
        begin, end = pending.pop()
        if end - begin < 2:
            continue

        pivot = items[begin]
        left, right = begin + 1, end - 1
        while True:
            while left != end and items[left] <= pivot:
                left += 1
            while right != begin and items[right] > pivot:
                right -= 1
            if left == end or right == begin or left >= right:
                break
            items[left], items[right] = items[right], items[left]

        items[begin], items[right] = items[right], items[begin]
        pending.append((begin, right))
        pending.append((right + 1, end))


def radix_sort(items: MutableSequence[int]) -> None:
    """Sort non-negative integers in place, least significant decimal digit first.

    Raises ValueError if a sequence of two or more items holds a negative number.
    """
    if len(items) < 2:
        return
    if any(value < 0 for value in items):
        raise ValueError("Radix sort requires non-negative integers.")

    max_value = max(items)
    exp = 1
    while max_value // exp > 0:
        bins: list[list[int]] = [[] for _ in range(10)]
        for value in items:
            bins[(value // exp) % 10].append(value)
        items[:] = list(chain.from_iterable(bins))
        exp *= 10