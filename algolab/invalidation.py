"""List exercises where elements are erased or inserted while walking a list."""

from __future__ import annotations

import argparse
import random
import sys
from typing import Iterable, List, Optional, Sequence

NUMBER_OF_FUNCTIONS = 3
DEFAULT_SIZE = 10
SUITE_SIZE = 9
FUNCTION_NAMES = ("ascending_vector", "erase_every_second", "duplicate_even_remove_uneven")

_EQUAL = "The tested vector from your function is equal with the solution vector."
_NOT_EQUAL = "The tested vector is not equal with the solution vector."

USAGE = "\n".join(
    [
        "Usage: invalidation <test_function> <test_num> [<num_of_items>]",
        "  test_function: 1|2|3 (number of the function to test)",
        "  test_num: number of the test performed on the function  (1-3)",
        "   num_of_items: number of items in the test vector (optional, default=10)",
        "Example:",
        "  invalidation 3 1    (test duplicate_even_remove_uneven() with test 1, "
        "where v1 should equal with s1)",
    ]
)

SUITE_INTRO = "\n".join(
    [
        "Running the default tests, there should be 3 parts, one for each function",
        "Within those parts, 3 tests should be run for each function respectively:",
        "",
        "ascending_vector:",
        "    test 1 creating a vector",
        "    test 2 creating a (longer) vector",
        "    test 3 vector with random length(constant in local tests)",
        "",
        "erase_every_second:",
        "    test 1 erasing from vector",
        "    test 2 erasing from (longer) vector",
        "    test 3 erasing from random lengthed vector (constant in local tests)",
        "",
        "duplicate_even_remove_uneven:",
        "    test 1 vector size stays the same",
        "    test 2 vector grows",
        "    test 3 vector shrinks",
        "",
        "If all of these tests are not printed out or if your code crashes, "
        "the tests will also fail.",
    ]
)

_UNKNOWN_FUNCTION = "\n".join(
    [
        "       Valid values are:",
        "       1 (=testing ascending_vector function)",
        "       2 (=testing erase_every_second function)",
        "       3 (=testing duplicate_even_remove_uneven function)",
    ]
)


def ascending_vector(n: int) -> List[int]:
    """The integers 0..n-1 in ascending order."""
    if n < 0:
        raise ValueError(f"size must not be negative: {n}")
    return list(range(n))


def erase_every_second(values: List[int]) -> None:
    """Remove in place every item at an odd index: [1, 2, 3, 4] -> [1, 3]."""
    values[:] = values[::2]


def duplicate_even_remove_uneven(values: List[int]) -> None:
    """In place, double every even number and drop every odd one: [1, 2, 3, 4] -> [2, 2, 4, 4]."""
    values[:] = [value for value in values if value % 2 == 0 for _ in range(2)]


def _random_values(size: int) -> List[int]:
    return [random.randint(1, size * 4) for _ in range(max(size, 0))]


def _line(values: Iterable[int]) -> str:
    return "".join(f"{value} " for value in values)


def _verdict(result: Sequence[int], solution: Sequence[int]) -> str:
    return _EQUAL if list(result) == list(solution) else _NOT_EQUAL


def _unknown_test(name: str, test_id: int) -> List[str]:
    return [
        f"ERROR: Unknown test for {name}: {test_id}",
        "       Valid values are: 1, 2, 3.",
        USAGE,
    ]


def _ascending_case(test_id: int, size: int) -> List[str]:
    lines = [f"Case {test_id}: Testing function ascending_vector() with the following data:", ""]
    if test_id in (1, 2):
        solution = [0, 1, 2, 3] if test_id == 1 else [0, 1, 2, 3, 4, 5, 6, 7]
        lines.append(f"Size: {len(solution)}")
        result = ascending_vector(len(solution))
        lines.append(_verdict(result, solution))
        if test_id == 1:
            lines.append("The vector created after ascending_vector() was called in the case:")
        else:
            lines += ["The vector after ascending_vector():", ""]
        lines += [_line(result), ""]
    elif test_id == 3:
        lines.append(f"Size: {size}")
        lines += ["The vector after ascending_vector():", "", _line(ascending_vector(size)), ""]
    else:
        lines += _unknown_test("ascending_vector", test_id)
    return lines


def _erase_case(test_id: int, size: int) -> List[str]:
    lines = [f"Case {test_id}: Testing function erase_every_second() with the following data:", ""]
    if test_id in (1, 2):
        values, solution = ([0, 1], [0]) if test_id == 1 else ([0, 3, 1, 7], [0, 1])
        lines += [_line(values), ""]
        erase_every_second(values)
        lines.append(_verdict(values, solution))
        if test_id == 1:
            lines.append("The vector created after erase_every_second() was called in the case:")
        else:
            lines += ["The vector after erase_every_second():", ""]
        lines += [_line(values), ""]
    elif test_id == 3:
        values = _random_values(size)
        lines += [f"Size: {size}", _line(values), ""]
        erase_every_second(values)
        lines += ["The vector after erase_every_second():", "", _line(values), ""]
    else:
        lines += _unknown_test("erase_every_second", test_id)
    return lines


_DUPLICATE_CASES = {
    1: ([1, 2, 3, 4], [2, 2, 4, 4]),
    2: ([1, 2, 2, 4, 4], [2, 2, 2, 2, 4, 4, 4, 4]),
    3: ([1, 2, 3], [2, 2]),
}


def _duplicate_case(test_id: int) -> List[str]:
    lines = [
        f"Case {test_id}: Testing function duplicate_even_remove_uneven() "
        "with the following data:",
        "",
    ]
    if test_id not in _DUPLICATE_CASES:
        return lines + _unknown_test("duplicate_even_remove_uneven", test_id)
    values, solution = _DUPLICATE_CASES[test_id]
    values = list(values)
    lines += [_line(values), ""]
    duplicate_even_remove_uneven(values)
    lines.append(_verdict(values, solution))
    if test_id == 1:
        lines += ["The vector after duplicate_even_remove_uneven() was called in the case:", ""]
    else:
        lines += ["The vector after duplicate_even_remove_uneven():", ""]
    lines += [_line(values), ""]
    return lines


def run_case(func_id: int, test_id: int, size: int) -> str:
    """Run test `test_id` of exercise `func_id` and return the report."""
    if func_id == 1:
        lines = _ascending_case(test_id, size)
    elif func_id == 2:
        lines = _erase_case(test_id, size)
    elif func_id == 3:
        lines = _duplicate_case(test_id)
    else:
        raise ValueError(f"unknown function: {func_id}")
    return "\n".join(lines)


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Iterator invalidation exercises")
    parser.add_argument("test_function", nargs="?", type=int, default=-1,
                        help="1|2|3 (number of the function to test)")
    parser.add_argument("test_suite", nargs="?", type=int, default=-1,
                        help="test suite for the function")
    parser.add_argument("size", nargs="?", type=int, default=DEFAULT_SIZE,
                        help=f"number of items to test with, default {DEFAULT_SIZE}")
    return parser


def _validation_error(test_function: int, test_suite: int, size: int) -> Optional[str]:
    if not 1 <= test_function <= NUMBER_OF_FUNCTIONS:
        return f"ERROR: Unknown function to test: {test_function}\n{_UNKNOWN_FUNCTION}"
    if test_suite < 1:
        return ("ERROR: command line variable test_suite should be a positive "
                "integer larger than 0")
    if size < 0:
        return "ERROR: the size should be 0 or greater"
    return None


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run one chosen test, or all three tests of every exercise."""
    args_list = list(sys.argv[1:] if argv is None else argv)
    try:
        args = _parser().parse_args(args_list)
    except SystemExit as exc:
        return 1 if exc.code else 0

    if args.test_function != -1 or args.test_suite != -1:
        error = _validation_error(args.test_function, args.test_suite, args.size)
        if error is not None:
            print(error)
            return 1
        print(run_case(args.test_function, args.test_suite, args.size))
        return 0

    print(SUITE_INTRO)
    for func_id, name in enumerate(FUNCTION_NAMES, start=1):
        print()
        print()
        print(f"========== testing function {name}=================")
        print()
        for suite in range(1, 4):
            print(run_case(func_id, suite, SUITE_SIZE))
    return 0


if __name__ == "__main__":
    sys.exit(main())