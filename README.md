# algolab

A collection of small algorithm and data-structure exercises. Each has a
plain Python API, and most have a command-line driver that runs sample
cases and prints a report.

## Installation

```
pip install .
```

For running the test suite:

```
pip install ".[test]"
pytest
```

## Modules

- `algolab.customtypes`: the frozen `Coord(x, y)` grid coordinate, ordered
  by row (`y`) and then column (`x`) and unpackable as `x, y`; the sentinel
  constants such as `NO_COORD`, `NO_VALUE`, `NO_BITE` and `NO_NAME`; and
  `random_in_range(start, end)`, which returns an integer from the
  inclusive range and raises `ValueError` when `end < start`.
- `algolab.rect`: `Rectangle(top_left, bottom_right)` with `width` and
  `height` properties and the methods `divide(slices)`, `get_coords()`
  (border cells), `get_all_coords()` (every cell), and the static methods
  `betweens(rects)`, `factory(rect)` (shrink by one cell on each side) and
  `hilo_factory(arr, rect, z, max_levels)`, which appends nested contour
  rings as `{height: [Coord, ...]}` entries. `get_rects(count, x1, y1, x2, y2)`
  lays out `count` rectangles on a near-square grid inside an area.
  An invalid rectangle raises `ValueError`.
- `algolab.missing`: the smallest missing value in an ascending run of
  consecutive integers, by linear scan (`search_smallest_missing_iteration`)
  or by binary search (`search_smallest_missing(values, left, right)`). Both
  return `None` when nothing is missing. `random_gap_sequence(size)` builds
  sample data.
- `algolab.iteration`: `all_items`, `every_second`, `first_half` and
  `reversed_items` over a list, plus `random_unique_list(size)`.
- `algolab.stl`: `sort_asc`, `sort_desc`, `sort_mod3` and
  `remove_less_than` change a list in place; `find_given_value` and
  `find_last_even` return an index or `None`; `find_at_least_given` looks
  through a mapping in key order; `find_median` returns `None` for an empty
  list.
- `algolab.stl_cli`: `run_case(func_id, size, search_value, values)`
  returns the report text for one of the `algolab.stl` functions.
- `algolab.tasklist`: `TaskList`, a first-in first-out list of tasks with
  `insert_back`, `remove_front` (raises `IndexError` when empty),
  `is_empty` and `format`.
- `algolab.invalidation`: `ascending_vector`, `erase_every_second` and
  `duplicate_even_remove_uneven`, and `run_case(func_id, test_id, size)`.
- `algolab.improve`: `ascending_vector`, `min_value`, `cumulative_sums` and
  `randomized_three_part_quicksort(values, rng)`.
- `algolab.improve_cli`: reference versions (`original_cumulative_sums`,
  `original_min`, `original_quicksort`) and `run_case(func_id, test_id, size)`,
  which compares them with `algolab.improve`.

## Example

```python
from algolab.stl import sort_mod3, find_median
from algolab.missing import search_smallest_missing_iteration

values = [5, 3, 9, 4, 6]
sort_mod3(values)          # values becomes [3, 6, 9, 4, 5]
find_median([4, 1, 3])     # 3
search_smallest_missing_iteration([3, 4, 6, 7])  # 5
```

## Commands

Each command runs its default set of cases when it is started without
arguments.

| Command | What it exercises |
| --- | --- |
| `algolab-missing [size [any]]` | smallest missing value search; a second argument selects the binary search |
| `algolab-iteration [function [num_of_items]] [--data N ...]` | list iteration functions 1-4 |
| `algolab-stl [function [num_of_items [search_value]]]` | collection functions 1-8 |
| `algolab-tasklist` | a short task-list session |
| `algolab-invalidation [function test_suite [size]]` | list editing functions 1-3 |
| `algolab-improve [function test_suite [size ...]]` | improved functions 1-4 against their reference versions |

For example, to check `sort_mod3` on 20 random values:

```
algolab-stl 5 20
```

## What this package does not do

`algolab.customtypes` and `algolab.rect` are building blocks only. The
package has no store of bites, contours or connections, no route finding
over them, and no map display or interactive command interface.