"""Small standard-collection exercises: sorting, searching and filtering."""

from __future__ import annotations

from typing import List, Mapping, Optional


def sort_asc(values: List[int]) -> None:
    """Sort the list in place in ascending order."""
    values.sort()


def sort_desc(values: List[int]) -> None:
    """Sort the list in place in descending order."""
    values.sort(reverse=True)


def find_given_value(values: List[int], given: int) -> Optional[int]:
    """Index of the first occurrence of `given`, or None."""
    try:
        return values.index(given)
    except ValueError:
        return None


def find_last_even(values: List[int]) -> Optional[int]:
    """Index of the last even value, or None when there is none."""
    return next(
        (index for index in range(len(values) - 1, -1, -1) if values[index] % 2 == 0),
        None,
    )


def _remainder_group(n: int) -> int:
    # Remainder with the sign of the dividend; negatives that are not multiples
    # of three fall into the last group.
    remainder = n % 3 if n >= 0 else -((-n) % 3)
    return remainder if remainder in (0, 1) else 2


def sort_mod3(values: List[int]) -> None:
    """Arrange in place: multiples of three, then remainder 1, then the rest; each ascending."""
    values.sort(key=lambda n: (_remainder_group(n), n))


def find_at_least_given(mapping: Mapping[str, int], given: int) -> Optional[int]:
    """In key order, the first value that is at least `given`, or None."""
    return next((mapping[key] for key in sorted(mapping) if mapping[key] >= given), None)


def find_median(values: List[int]) -> Optional[int]:
    """Median of the values (integer mean of the middle pair), or None when empty."""
    if not values:
        return None
    ordered = sorted(values)
    n = len(ordered)
    if n % 2 == 1:
        return ordered[n // 2]
    total = ordered[n // 2] + ordered[n // 2 - 1]
    half = abs(total) // 2
    return half if total >= 0 else -half


def remove_less_than(values: List[int], limit: int) -> None:
    """Remove in place every value below `limit`, keeping the order of the rest."""
    values[:] = [value for value in values if value >= limit]