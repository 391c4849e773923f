"""Find the smallest missing value in a run of consecutive integers."""

from __future__ import annotations

import random
import re
import sys
from typing import List, Optional, Sequence

LIMIT = 50
MAX_RANDOM_START_VALUE = 200
DEFAULT_SIZES = (10, 100, 1000, 10000)


def search_smallest_missing_iteration(values: Sequence[int]) -> Optional[int]:
    """Scan linearly; return the first value absent from the run, or None."""
    if not values:
        return None
    for expected, value in enumerate(values, start=values[0]):
        if value != expected:
            return expected
    return None


def search_smallest_missing(values: Sequence[int], left: int, right: int) -> Optional[int]:
    """Binary search over values[left..right]; return the missing value, or None."""
    if right < left or not values:
        return None
    first = values[0]
    while left != right:
        middle = left + (right - left) // 2
        if values[middle] == middle + first:
            left = middle + 1
        elif values[middle] > middle + first:
            right = middle
        else:
            return None
    if values[left] != left + first:
        return values[left] - 1
    return None


def random_gap_sequence(size: int) -> List[int]:
    """Consecutive integers from a random start; one inner value is removed when size > 4."""
    start = random.randint(0, MAX_RANDOM_START_VALUE)
    values = list(range(start, start + size + 1))
    if size > 4:
        del values[random.randint(1, size - 2)]
    return values


def _sequence(size: int) -> List[int]:
    start = random.randint(0, max(size, 0))
    return list(range(start, start + size))


def _format_values(values: Sequence[int]) -> str:
    text = ", ".join(str(v) for v in values[: LIMIT + 1])
    if len(values) > LIMIT + 1:
        text += ", ..."
    return text


def _run(size: int, iterative: bool, randomized: bool) -> None:
    values = random_gap_sequence(size) if randomized else _sequence(size)
    print(_format_values(values))
    if iterative:
        missing = search_smallest_missing_iteration(values[: max(size, 0)])
    else:
        missing = search_smallest_missing(values, 0, size - 1)
    print(f"{'No value' if missing is None else missing} missing!")


def _leading_int(text: str) -> int:
    match = re.match(r"\s*[+-]?\d+", text)
    return int(match.group()) if match else 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run one search (size given, extra argument selects the binary search) or the default suite."""
    args = list(sys.argv[1:] if argv is None else argv)
    if args:
        _run(_leading_int(args[0]), iterative=len(args) == 1, randomized=True)
        return 0

    print("testing iterative search")
    for size in DEFAULT_SIZES:
        _run(size, iterative=True, randomized=False)
        _run(size, iterative=True, randomized=True)
    print()
    print("testing binary search")
    for size in DEFAULT_SIZES:
        _run(size, iterative=False, randomized=False)
        _run(size, iterative=False, randomized=True)
    return 0


if __name__ == "__main__":
    sys.exit(main())