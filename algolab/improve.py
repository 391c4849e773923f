"""Efficient versions of small list and map routines."""

from __future__ import annotations

import random
from typing import Dict, Iterable, List, Optional, Sequence


def ascending_vector(n: int) -> List[int]:
    """The integers 0..n-1 in ascending order."""
    if n < 0:
        raise ValueError(f"size must not be negative: {n}")
    return list(range(n))


def min_value(values: Sequence[int]) -> int:
    """The smallest value, or 0 when there are none."""
    return min(values, default=0)


def cumulative_sums(values: Iterable[int]) -> Dict[int, int]:
    """Map each distinct value to the running total when it was last seen, keys ascending.

    Example: [4, 5, 4, 6] -> {4: 13, 5: 9, 6: 19}.
    """
    sums: Dict[int, int] = {}
    total = 0
    for value in values:
        total += value
        sums[value] = total
    return dict(sorted(sums.items()))


def randomized_three_part_quicksort(values: List[int],
                                    rng: Optional[random.Random] = None) -> None:
    """Sort the list in place with a quicksort that picks random pivots and groups equal keys."""
    rng = rng if rng is not None else random.Random()
    pending = [(0, len(values))]
    while pending:
        low, high = pending.pop()
        if high - low < 2:
            continue
        pivot = values[rng.randrange(low, high)]
        segment = values[low:high]
        less = [v for v in segment if v < pivot]
        equal = [v for v in segment if v == pivot]
        greater = [v for v in segment if pivot < v]
        values[low:high] = less + equal + greater
        pending.append((low, low + len(less)))
        pending.append((high - len(greater), high))