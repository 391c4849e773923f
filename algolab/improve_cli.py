"""Command-line harness that checks the improved routines against the originals."""

from __future__ import annotations

import argparse
import random
import sys
from typing import Dict, Iterable, List, Optional, Sequence

from .improve import (
    ascending_vector,
    cumulative_sums,
    min_value,
    randomized_three_part_quicksort,
)

DEFAULT_SIZE = 100
SUITE_SMALL_SIZE = 10
SUITE_LAST_SIZES = (100, 101)
_RNG_SEED = 1

TESTS_PER_FUNCTION = {1: 3, 2: 3, 3: 2, 4: 2}
FUNCTION_NAMES = {
    1: "ascending_vector",
    2: "min_value",
    3: "cumulative_sums",
    4: "randomized_three_part_quicksort",
}

USAGE = "\n".join(
    [
        "Usage: improving <test_function> <test_num> [<num_of_items>]",
        "  test_function: 1|2|3|4 (number of the function to test)",
        "  test_num: number of the test performed on the function: 1|2|3. Not all have 3 tests ",
        "   num_of_items: number of items in the test vector (optional, default=100)",
        "Examples:",
        "  improving 1 1    (test ascending_vector() with test case 1)",
        "  improving 2 2    (test min_value() with test case 2)",
        "  improving 3 1    (test cumulative_sums() with test case 1)",
        "  improving 4 1    (test randomized_three_part_quicksort() with test case 1)",
    ]
)


def original_cumulative_sums(values: Sequence[int]) -> Dict[int, int]:
    """Reference running-total map built from the previous value's stored sum, keys ascending."""
    sums: Dict[int, int] = {}
    previous: Optional[int] = None
    for value in values:
        if not sums:
            sums[value] = value
        else:
            sums[value] = sums[previous] + value
        previous = value
    return dict(sorted(sums.items()))


def original_min(values: Sequence[int]) -> int:
    """Reference minimum found by sorting a copy; 0 when empty."""
    if not values:
        return 0
    return sorted(values)[0]


def original_quicksort(values: List[int], rng: random.Random) -> None:
    """Reference sort: shuffle, split around the middle pivot, sort both outer parts."""
    if not values:
        return
    rng.shuffle(values)
    pivot = values[len(values) // 2]
    less = [v for v in values if v < pivot]
    equal = [v for v in values if v == pivot]
    greater = [v for v in values if pivot < v]
    randomized_three_part_quicksort(less, rng)
    randomized_three_part_quicksort(greater, rng)
    values[:] = less + equal + greater


def _random_vector(size: int) -> List[int]:
    return [random.randint(1, 100) for _ in range(max(size, 0))]


def _vector_lines(values: Iterable[int]) -> List[str]:
    return ["[ " + "".join(f"{value} " for value in values) + "]", ""]


def _map_lines(mapping: Dict[int, int]) -> List[str]:
    return ["".join(f"{{{key} : {mapping[key]}}} " for key in sorted(mapping)), ""]


def _unknown_test(name: str, test_id: int, valid: str) -> List[str]:
    return [f"ERROR: Unknown test for {name}: {test_id}", f"       Valid values are: {valid}.", USAGE]


def _header(test_id: int, name: str) -> List[str]:
    return [f"Case {test_id}: Testing function {name}() with the following data:", ""]


def _quicksort_case(test_id: int, size: int) -> List[str]:
    lines = _header(test_id, "randomized_three_part_quicksort")
    rng = random.Random(_RNG_SEED)
    if test_id == 1:
        improved, reference = [3, 2, 4, 5], [2, 3, 5, 4]
        lines += _vector_lines(improved)
    elif test_id == 2:
        base = _random_vector(size)
        improved, reference = list(base), list(base)
        lines += _vector_lines(base)
    else:
        return lines + _unknown_test("randomized_three_part_quicksort", test_id, "1, 2")
    randomized_three_part_quicksort(improved, rng)
    original_quicksort(reference, rng)
    if improved == reference:
        lines.append("The function is still working as expected.")
    else:
        lines.append("FAILURE: The function is no longer working as expected.")
        lines.append("The vector after randomized_three_part_quicksort():")
        lines += _vector_lines(improved)
        lines.append("The vector after the original randomized_three_part_quicksort():")
        lines += _vector_lines(reference)
    return lines


def _cumulative_case(test_id: int, size: int) -> List[str]:
    lines = _header(test_id, "cumulative_sums")
    if test_id == 1:
        values = [1, 2, 3, 4]
    elif test_id == 2:
        values = _random_vector(size)
    else:
        return lines + _unknown_test("cumulative_sums", test_id, "1, 2")
    lines += _vector_lines(values)
    expected = original_cumulative_sums(values)
    result = cumulative_sums(values)
    if result == expected:
        lines.append("The map returned by the function is still correct.")
    else:
        lines.append("FAILURE: The map returned by the function is no longer correct:")
        lines.append("Correct map:")
        lines += _map_lines(expected)
        lines.append("The map returned by cumulative_sums():")
        lines += _map_lines(result)
    return lines


def _min_case(test_id: int, size: int) -> List[str]:
    lines = _header(test_id, "min_value")
    if test_id == 1:
        values, expected = [2, 1, 3, 4], 1
    elif test_id == 2:
        values, expected = [], 0
    elif test_id == 3:
        values = _random_vector(size)
        expected = original_min(values)
    else:
        return lines + _unknown_test("min", test_id, "1, 2, 3")
    lines += _vector_lines(values)
    result = min_value(values)
    if result == expected:
        lines.append("The function found the smallest value.")
    else:
        lines.append("FAILURE: The function did not find the smallest value.")
        lines.append(f"The returned min value:{result}")
    return lines


def _ascending_case(test_id: int, size: int) -> List[str]:
    lines = _header(test_id, "ascending_vector")
    if test_id in (1, 2):
        solution = [0, 1, 2, 3] if test_id == 1 else [0, 1, 2, 3, 4, 5, 6, 7]
        lines.append(f"Size: {len(solution)}")
        result = ascending_vector(len(solution))
        if result == solution:
            lines.append("The tested vector from your function is equal with the solution vector.")
        else:
            lines.append("FAILURE: The tested vector is not equal with the solution vector.")
            lines.append("The vector returned by ascending_vector():")
            if test_id == 2:
                lines.append("")
            lines += _vector_lines(result)
    elif test_id == 3:
        lines.append(f"Size: {size}")
        lines += ["The vector returned by ascending_vector():", ""]
        lines += _vector_lines(ascending_vector(size))
    else:
        lines += _unknown_test("ascending_vector", test_id, "1, 2, 3")
    return lines


def run_case(func_id: int, test_id: int, size: int) -> str:
    """Run test `test_id` of routine `func_id` and return the report."""
    if func_id == 1:
        lines = _ascending_case(test_id, size)
    elif func_id == 2:
        lines = _min_case(test_id, size)
    elif func_id == 3:
        lines = _cumulative_case(test_id, size)
    elif func_id == 4:
        lines = _quicksort_case(test_id, size)
    else:
        lines = [
            f"ERROR: Unknown function to test: {func_id}",
            "       Valid values are:",
            "       1 (=testing ascending_vector function)",
            "       2 (=testing min function)",
            "       3 (=testing cumulative_sums function)",
            "       4 (=testing randomized_three_part_quicksort function)",
            USAGE,
        ]
    return "\n".join(lines)


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Improving functions")
    parser.add_argument("test_function", nargs="?", type=int, default=-1,
                        help="1|2|3|4 (number of the function to test)")
    parser.add_argument("test_suite", nargs="?", type=int, default=-1,
                        help="test suite for the function")
    parser.add_argument("size", nargs="*", type=int,
                        help="number(s) of items to test with, default 100; "
                             "only affects the last tests for functions")
    return parser


def _suite() -> None:
    print("running default tests")
    for func_id, count in TESTS_PER_FUNCTION.items():
        print("=" * 84)
        print(f"Tests for function {FUNCTION_NAMES[func_id]}()")
        print()
        for test_id in range(1, count + 1):
            sizes = SUITE_LAST_SIZES if test_id == count else (SUITE_SMALL_SIZE,)
            for size in sizes:
                print(run_case(func_id, test_id, size))
                print()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run one chosen test over the given sizes, or the default suite."""
    args_list = list(sys.argv[1:] if argv is None else argv)
    try:
        args = _parser().parse_args(args_list)
    except SystemExit as exc:
        return 1 if exc.code else 0

    sizes = args.size or [DEFAULT_SIZE]
    if args.test_function == -1 and args.test_suite == -1:
        _suite()
        return 0
    if not 1 <= args.test_function <= len(TESTS_PER_FUNCTION):
        print("ERROR: Invalid function id")
        print(USAGE)
        return 1
    if any(size < 0 for size in sizes):
        print("ERROR: the size should be 0 or greater")
        print(USAGE)
        return 1

    for size in sizes:
        print(run_case(args.test_function, args.test_suite, size))
    return 0


if __name__ == "__main__":
    sys.exit(main())