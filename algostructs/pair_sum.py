"""Finding pairs of elements that add up to a target."""

from __future__ import annotations

from collections import Counter
from typing import Iterable


def find_pairs_with_sum(items: Iterable[int], k: int) -> list[tuple[int, int]]:
    """Return every pair of elements summing to ``k``, smaller value first.

    Each pair of positions is reported once, in the order the second
    element of the pair is reached.  An empty list means no pair exists.
    """
    seen: Counter[int] = Counter()
    pairs: list[tuple[int, int]] = []
    for value in items:
        complement = k - value
        pair = (value, complement) if value < complement else (complement, value)
        pairs.extend([pair] * seen[complement])
        seen[value] += 1
    return pairs