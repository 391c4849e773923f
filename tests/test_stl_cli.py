import pytest

from algolab.stl_cli import main, random_values, run_case, values_map


def test_random_values_length_and_range():
    size = 25
    values = random_values(size)
    assert len(values) == size
    assert all(1 <= v <= 4 * size for v in values)


def test_random_values_empty():
    assert random_values(0) == []


def test_values_map_keys():
    assert values_map([7, 8]) == {"val0": 7, "val1": 8}


def test_run_case_sort_asc_reports_sorted():
    text = run_case(1, 3, -1, [3, 1, 2])
    assert "The vector after sort_asc():" in text
    assert "1 2 3 " in text.splitlines()


def test_run_case_find_value_found():
    text = run_case(3, 0, 42, [5, 42, 7])
    assert "found it at index 1." in text


def test_run_case_find_value_missing():
    text = run_case(3, 0, 42, [5, 7])
    assert "but couldn't find it." in text


def test_run_case_last_even_none():
    text = run_case(4, 0, 42, [1, 3, 5])
    assert "but couldn't find any even values." in text


def test_run_case_at_least_given():
    text = run_case(6, 0, 42, [10, 50])
    assert "and found 50" in text
    assert "{val0 : 10} {val1 : 50} " in text


def test_run_case_median_empty():
    text = run_case(7, 0, 42, [])
    assert "returned correctly NOT_FOUND." in text


def test_run_case_unknown_function():
    with pytest.raises(ValueError):
        run_case(9, 3, 1, [1, 2, 3])


def test_main_rejects_unknown_function(capsys):
    assert main(["9"]) == 1
    assert "No such test function" in capsys.readouterr().out


def test_main_rejects_nonpositive_size(capsys):
    assert main(["1", "0"]) == 1
    assert "num_of_items should be a positive integer" in capsys.readouterr().out


def test_main_single_case(capsys):
    assert main(["1", "5"]) == 0
    assert "The vector after sort_asc():" in capsys.readouterr().out


def test_main_default_suite(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Running tests for sort_asc()" in out
    assert "Running tests for remove_less_than()" in out