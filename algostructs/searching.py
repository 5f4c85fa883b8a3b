"""Searching in sorted sequences."""

from __future__ import annotations

from typing import Any, Optional, Sequence


def binary_search(items: Sequence[Any], value: Any) -> Optional[int]:
    """Return the index of ``value`` in the ascending ``items``, or None if absent.

    When ``value`` occurs several times, the index of whichever occurrence
    the halving reaches first is returned.
    """
    low, high = 0, len(items) - 1
    while low <= high:
        mid = low + (high - low) // 2
        current = items[mid]
        if current == value:
            return mid
        if current < value:
            low = mid + 1
        else:
            high = mid - 1
    return None