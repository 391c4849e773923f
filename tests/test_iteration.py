import pytest

from algolab.iteration import (
    all_items,
    every_second,
    first_half,
    main,
    random_unique_list,
    reversed_items,
)


def test_all_items_keeps_order():
    data = [4, 9, 2, 7]
    assert all_items(data) == data


def test_all_items_empty():
    assert all_items([]) == []


def test_every_second_odd_length():
    assert every_second([5, 6, 7, 8, 9]) == [5, 7, 9]


@pytest.mark.parametrize("size", [0, 1, 2, 5, 10])
def test_every_second_length(size):
    data = list(range(100, 100 + size))
    result = every_second(data)
    assert len(result) == (size + 1) // 2
    if size:
        assert result[0] == data[0]


def test_first_half_odd_length():
    assert first_half([1, 2, 3, 4, 5]) == [1, 2]


@pytest.mark.parametrize("size", [0, 1, 4, 7])
def test_first_half_is_prefix(size):
    data = list(range(size))
    result = first_half(data)
    assert len(result) == size // 2
    assert data[: len(result)] == result


def test_reversed_round_trip():
    data = [3, 1, 4, 1, 5]
    once = reversed_items(data)
    assert once[0] == data[-1]
    assert reversed_items(once) == data


@pytest.mark.parametrize("size", [1, 10, 101])
def test_random_unique_list_properties(size):
    values = random_unique_list(size)
    assert len(values) == size
    assert len(set(values)) == size
    assert values == sorted(values)
    assert all(1 <= v <= size * 2 for v in values)


def test_random_unique_list_empty():
    assert random_unique_list(0) == []


def test_main_with_data(capsys):
    assert main(["2", "--data", "1", "2", "3"]) == 0
    out = capsys.readouterr().out
    assert "Testing function every_second() with the following data:" in out
    lines = out.splitlines()
    assert lines[-1] == "1 3 "


def test_main_unknown_function(capsys):
    assert main(["9"]) == 1
    assert "No such test function" in capsys.readouterr().out


def test_main_data_excludes_count():
    assert main(["1", "5", "--data", "1"]) == 1


def test_main_random_count(capsys):
    assert main(["4", "6"]) == 0
    lines = capsys.readouterr().out.splitlines()
    printed = [int(v) for v in lines[-1].split()]
    shown = [int(v) for v in lines[2].split()]
    assert printed == shown[::-1]
    assert len(shown) == 6