"""Walk a list in several ways and show what each walk yields."""

from __future__ import annotations

import argparse
import random
import sys
from typing import Callable, Iterable, List, Optional, Sequence, Tuple

DEFAULT_ITEMS = 10
DEFAULT_SUITE_SIZES = (10, 11, 101, 500)


def all_items(items: Iterable[int]) -> List[int]:
    """Every item, front to back."""
    return list(items)


def every_second(items: Sequence[int]) -> List[int]:
    """Every second item, starting with the first."""
    return list(items[::2])


def first_half(items: Sequence[int]) -> List[int]:
    """The first len(items) // 2 items."""
    return list(items[: len(items) // 2])


def reversed_items(items: Sequence[int]) -> List[int]:
    """Every item, back to front."""
    return list(reversed(items))


FUNCTIONS: Tuple[Tuple[str, Callable[[Sequence[int]], List[int]]], ...] = (
    ("all_items", all_items),
    ("every_second", every_second),
    ("first_half", first_half),
    ("reversed_items", reversed_items),
)


def random_unique_list(size: int) -> List[int]:
    """`size` distinct integers drawn from 1..2*size, in ascending order."""
    if size <= 0:
        return []
    chosen = set()
    while len(chosen) < size:
        chosen.add(random.randint(1, size * 2))
    return sorted(chosen)


def _line(values: Iterable[int]) -> str:
    return "".join(f"{value} " for value in values)


def _run(number: int, size: int, data: Sequence[int]) -> None:
    name, function = FUNCTIONS[number - 1]
    print(f"Testing function {name}() with the following data:")
    print()
    items = list(data) if data else random_unique_list(size)
    print(_line(items))
    print()
    print("Your function printed the following values:")
    print()
    print(_line(function(items)))


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="List iteration exercises")
    parser.add_argument(
        "test_function",
        nargs="?",
        type=int,
        help="1|2|3|4 (number of the function to test)",
    )
    parser.add_argument(
        "num_of_items",
        nargs="?",
        type=int,
        help=f"number of items in the test set (optional, default={DEFAULT_ITEMS})",
    )
    parser.add_argument(
        "--data",
        nargs="+",
        type=int,
        action="extend",
        default=[],
        help="data to manually be used for testing",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run one chosen function, or every function over the default sizes."""
    args_list = list(sys.argv[1:] if argv is None else argv)
    try:
        args = _parser().parse_args(args_list)
    except SystemExit as exc:
        return 1 if exc.code else 0

    if args.num_of_items is not None and args.data:
        print("num_of_items excludes --data", file=sys.stderr)
        return 1

    if args.test_function is None:
        for number, (name, _) in enumerate(FUNCTIONS, start=1):
            print("=" * 46)
            print(f"Testing function {name} with N values {{{_line(DEFAULT_SUITE_SIZES)}}} ")
            print("=" * 46)
            print()
            for size in DEFAULT_SUITE_SIZES:
                _run(number, size, [])
        return 0

    if not 1 <= args.test_function <= len(FUNCTIONS):
        print("No such test function")
        return 1

    size = DEFAULT_ITEMS if args.num_of_items is None else args.num_of_items
    _run(args.test_function, size, args.data)
    return 0


if __name__ == "__main__":
    sys.exit(main())