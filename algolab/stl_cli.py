"""Command-line harness that runs the collection exercises on sample data."""

from __future__ import annotations

import argparse
import random
import sys
from typing import Callable, Dict, Iterable, List, Optional, Sequence

from .stl import (
    find_at_least_given,
    find_given_value,
    find_last_even,
    find_median,
    remove_less_than,
    sort_asc,
    sort_desc,
    sort_mod3,
)

NUMBER_OF_FUNCTIONS = 8
DEFAULT_ITEMS = 10
DEFAULT_SEARCH_VALUE = 25

_SORTERS: Dict[int, tuple] = {
    1: ("sort_asc", sort_asc),
    2: ("sort_desc", sort_desc),
    5: ("sort_mod3", sort_mod3),
}


def random_values(size: int) -> List[int]:
    """`size` random integers, each drawn from 1..4*size."""
    return [random.randint(1, size * 4) for _ in range(max(size, 0))]


def values_map(values: Iterable[int]) -> Dict[str, int]:
    """Map each value to the key "val<index>"."""
    return {f"val{index}": value for index, value in enumerate(values)}


def _line(values: Iterable[int]) -> str:
    return "".join(f"{value} " for value in values)


def _map_line(mapping: Dict[str, int]) -> str:
    return "".join(f"{{{key} : {mapping[key]}}} " for key in sorted(mapping))


def _apply(name: str, action: Callable[[List[int]], None], data: List[int],
           lines: List[str]) -> None:
    try:
        action(data)
    except Exception:  # the harness reports any failure of the exercise
        lines.append("Your function failed")
        return
    lines += [f"The vector after {name}():", "", _line(data), ""]


def run_case(func_id: int, size: int, search_value: int,
             values: Optional[Sequence[int]] = None) -> str:
    """Run exercise `func_id` on `values` (random ones when empty) and return the report."""
    data = list(values) if values else random_values(size)
    lines: List[str] = []

    if func_id in _SORTERS:
        name, sorter = _SORTERS[func_id]
        lines += [f"Testing function {name}() with the following data:", "", _line(data), ""]
        _apply(name, sorter, data, lines)
    elif func_id == 3:
        lines += ["Testing function find_given_value() with the following data:", "",
                  _line(data), ""]
        index = find_given_value(data, search_value)
        if index is None:
            lines.append(f"Searched for {search_value} but couldn't find it.")
        elif data[index] == search_value:
            lines.append(f"Searched for {search_value} and found it at index {index}.")
        else:
            lines.append(
                f"Searched for {search_value} but the returned index refers to "
                f"{data[index]} instead."
            )
    elif func_id == 4:
        lines += ["Testing function find_last_even() with the following data:", "",
                  _line(data), ""]
        index = find_last_even(data)
        if index is None:
            lines.append("Searched for last even value but couldn't find any even values.")
        else:
            lines.append(
                f"Searched for last even value and found {data[index]} at index {index}."
            )
    elif func_id == 6:
        mapping = values_map(data)
        lines += ["Testing function find_at_least_given() with the following data:", "",
                  _map_line(mapping), ""]
        found = find_at_least_given(mapping, search_value)
        prefix = f"Searched for value at least {search_value}"
        if found is None:
            lines.append(f"{prefix} but couldn't find it.")
        elif found >= search_value:
            lines.append(f"{prefix} and found {found}")
        else:
            lines.append(f"{prefix} but function returned {found} instead.")
    elif func_id == 7:
        lines += ["Testing function find_median() with the following data:", "",
                  _line(data), ""]
        median = find_median(data)
        if median is not None:
            lines.append(f"Searched for median and your function returned {median}")
        elif data:
            lines.append("Searched for median but your function erroneously returned NOT_FOUND")
        else:
            lines.append(
                "Searched for median but the vector was empty and your function "
                "returned correctly NOT_FOUND."
            )
    elif func_id == 8:
        lines += ["Testing function remove_less_than() with the following data:", "",
                  _line(data), "",
                  f"Tried to remove all elements less than {search_value}"]
        _apply("remove_less_than", lambda v: remove_less_than(v, search_value), data, lines)
    else:
        raise ValueError(f"unknown function: {func_id}")

    return "\n".join(lines)


def _shuffled_with(values: List[int], extra: int) -> List[int]:
    values = values + [extra]
    random.shuffle(values)
    return values


def _suite() -> None:
    def section(name: str) -> None:
        print("=" * 45)
        print(f"Running tests for {name}()")

    def case(label: str, func_id: int, size: int, search: int,
             values: Optional[List[int]] = None) -> None:
        print(label)
        print(run_case(func_id, size, search, values))

    section("sort_asc")
    case("empty vector", 1, 0, -1)
    case("random_vector", 1, 15, -1)
    case("reverse sorted vector", 1, 15, -1, sorted(random_values(15), reverse=True))

    section("sort_desc")
    case("empty vector", 2, 0, -1)
    case("random_vector", 2, 15, -1)
    case("sorted vector", 2, 15, -1, sorted(random_values(15)))

    section("find_given_value")
    case("empty vector", 3, 0, 42)
    case("value not in vector", 3, 15, 42, [v for v in random_values(20) if v != 42])
    case("value in vector", 3, 15, 42, _shuffled_with(random_values(20), 42))

    section("find_last_even")
    case("empty vector", 4, 0, 42)
    case("only odd values in vector", 4, 15, 42, [v for v in random_values(40) if v % 2])
    case("at least one even value in vector", 4, 15, 42,
         _shuffled_with(random_values(20), 42))

    section("sort_mod3")
    case("empty vector", 5, 0, 42)
    case("values with remainder 1", 5, 15, 42, [v for v in random_values(60) if v % 3 == 1])
    case("values with remainder 2", 5, 15, 42, [v for v in random_values(60) if v % 3 == 2])
    case("values divisible by 3", 5, 15, 42, [v for v in random_values(60) if v % 3 == 0])
    case("values with remainder 0 or 1", 5, 15, 42,
         [v for v in random_values(40) if v % 3 != 2])
    case("values with remainder 0 or 2", 5, 15, 42,
         [v for v in random_values(40) if v % 3 != 1])
    case("values with remainder 1 or 2", 5, 15, 42,
         [v for v in random_values(40) if v % 3 != 0])
    case("(random vector)", 5, 15, 42, _shuffled_with(random_values(60), 42))

    section("find_at_least_given")
    case("empty map", 6, 0, 42)
    case("value not in map", 6, 15, 42, [v for v in random_values(20) if v != 42])
    case("value in map", 6, 15, 42, random_values(20) + [42])

    section("find_median")
    case("empty vector", 7, 0, 42)
    case("odd number of elements", 7, 15, 42)
    case("even number of elements", 7, 14, 42)

    section("remove_less_than")
    case("empty vector", 8, 0, 42)
    case("low limit (no elements removed)", 8, 15, 42,
         [random.randint(1, 60) + 42 for _ in range(15)])
    case("high limit (all elements removed)", 8, 15, 42,
         [random.randint(1, 60) % 42 for _ in range(15)])
    case("middle limit (some elements removed)", 8, 40, 42)


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Collection exercises")
    parser.add_argument("test_function", nargs="?", type=int, default=0,
                        help="1..8 (number of the function to test)")
    parser.add_argument("num_of_items", nargs="?", type=int, default=DEFAULT_ITEMS,
                        help=f"number of items in the test vector (default={DEFAULT_ITEMS})")
    parser.add_argument("search_value", nargs="?", type=int, default=DEFAULT_SEARCH_VALUE,
                        help="number to search or limit results "
                             f"(default={DEFAULT_SEARCH_VALUE})")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run one exercise, or the whole default suite when none is chosen."""
    args_list = list(sys.argv[1:] if argv is None else argv)
    try:
        args = _parser().parse_args(args_list)
    except SystemExit as exc:
        return 1 if exc.code else 0

    if args.test_function == 0:
        _suite()
        return 0
    if not 1 <= args.test_function <= NUMBER_OF_FUNCTIONS:
        print("No such test function")
        return 1
    if args.num_of_items < 1:
        print("num_of_items should be a positive integer larger than 0")
        return 1

    print(run_case(args.test_function, args.num_of_items, args.search_value))
    return 0


if __name__ == "__main__":
    sys.exit(main())