import pytest

from algolab.customtypes import Coord, rand_engine
from algolab.rect import Rectangle, get_rects


def make(x1, y1, x2, y2):
    return Rectangle(Coord(x1, y1), Coord(x2, y2))


def test_width_and_height():
    rect = make(2, 3, 12, 7)
    assert rect.width == 12 - 2
    assert rect.height == 7 - 3


def test_invalid_rectangle_raises():
    with pytest.raises(ValueError):
        make(5, 0, 4, 3)
    with pytest.raises(ValueError):
        make(0, 5, 3, 4)


def test_str_format():
    assert str(make(1, 2, 3, 4)) == "1,2 (3,4)"


def test_small_rect_is_not_divided():
    rect = make(0, 0, 2, 2)
    assert rect.divide(3) == [rect]


def test_divide_non_positive_slices_raises():
    with pytest.raises(ValueError):
        make(0, 0, 10, 10).divide(0)


@pytest.mark.parametrize("slices", [1, 2, 3, 4])
def test_divide_wide_rect(slices):
    rect = make(0, 0, 40, 10)
    pieces = rect.divide(slices)
    assert len(pieces) == slices
    assert pieces[0].top_left == rect.top_left
    assert pieces[-1].bottom_right == rect.bottom_right
    assert all(p.top_left.y == rect.top_left.y for p in pieces)
    assert all(p.bottom_right.y == rect.bottom_right.y for p in pieces)
    for left, right in zip(pieces, pieces[1:]):
        assert right.top_left.x - left.bottom_right.x == 2


def test_divide_tall_rect():
    rect = make(0, 0, 10, 40)
    pieces = rect.divide(3)
    assert len(pieces) == 3
    assert all(p.top_left.x == 0 and p.bottom_right.x == 10 for p in pieces)
    assert pieces[-1].bottom_right == rect.bottom_right


def test_divide_too_many_slices_raises():
    with pytest.raises(ValueError):
        make(0, 0, 3, 0).divide(4)


def test_get_all_coords():
    rect = make(1, 2, 4, 6)
    coords = rect.get_all_coords()
    assert len(coords) == (rect.width + 1) * (rect.height + 1)
    assert len(set(coords)) == len(coords)
    assert coords[0] == rect.top_left
    assert coords[-1] == rect.bottom_right


def test_get_coords_is_border():
    rect = make(1, 2, 5, 6)
    coords = rect.get_coords()
    assert coords[-1] == rect.bottom_right
    border = {
        c
        for c in rect.get_all_coords()
        if c.x in (1, 5) or c.y in (2, 6)
    }
    assert set(coords) == border


def test_factory_shrinks_by_one():
    rect = make(0, 0, 10, 8)
    inner = Rectangle.factory(rect)
    assert inner.top_left == Coord(1, 1)
    assert inner.bottom_right == Coord(9, 7)


def test_factory_on_thin_rect_raises():
    with pytest.raises(ValueError):
        Rectangle.factory(make(0, 0, 1, 5))


def test_betweens_with_fewer_than_two():
    assert Rectangle.betweens([]) == []
    assert Rectangle.betweens([make(0, 0, 5, 5)]) == []


def test_betweens_horizontal():
    pieces = make(0, 0, 40, 10).divide(3)
    coords = Rectangle.betweens(pieces)
    assert len(coords) == 2 * 11
    gap_columns = {p.bottom_right.x + 1 for p in pieces[:-1]}
    assert {c.x for c in coords} == gap_columns
    assert {c.y for c in coords} == set(range(0, 11))


def test_betweens_vertical():
    pieces = make(0, 0, 10, 40).divide(2)
    coords = Rectangle.betweens(pieces)
    assert {c.y for c in coords} == {pieces[0].bottom_right.y + 1}
    assert {c.x for c in coords} == set(range(0, 11))


def test_hilo_factory_beyond_max_levels():
    arr = []
    assert Rectangle.hilo_factory(arr, make(0, 0, 20, 20), 1, 0) == []


def test_hilo_factory_thin_rect_fills_all():
    rect = make(0, 0, 1, 1)
    result = Rectangle.hilo_factory([], rect, 1, 3)
    assert result == [{1: rect.get_all_coords()}]


def test_hilo_factory_single_level():
    rand_engine.seed(3)
    rect = make(0, 0, 10, 10)
    result = Rectangle.hilo_factory([], rect, 1, 1)
    assert len(result) == 1
    assert list(result[0]) == [1]
    assert set(rect.get_coords()) <= set(result[0][1])


@pytest.mark.parametrize("seed", range(5))
def test_hilo_factory_levels(seed):
    rand_engine.seed(seed)
    rect = make(0, 0, 20, 20)
    arr = []
    result = Rectangle.hilo_factory(arr, rect, 1, 3)
    assert result is arr
    assert all(len(entry) == 1 for entry in result)
    assert all(1 <= key <= 3 for entry in result for key in entry)
    assert list(result[-1]) == [1]
    assert set(rect.get_coords()) <= set(result[-1][1])
    area = set(rect.get_all_coords())
    assert all(set(coords) <= area for entry in result for coords in entry.values())


def test_hilo_factory_negative_levels():
    rand_engine.seed(7)
    result = Rectangle.hilo_factory([], make(0, 0, 20, 20), -1, 4)
    assert result
    assert all(-4 <= key <= -1 for entry in result for key in entry)


@pytest.mark.parametrize("count", [1, 2, 4, 5, 7, 9])
@pytest.mark.parametrize("seed", range(3))
def test_get_rects(count, seed):
    rand_engine.seed(seed)
    rects = get_rects(count, 0, 0, 100, 100)
    assert len(rects) == count
    cells = [set(r.get_all_coords()) for r in rects]
    for r in rects:
        assert 0 < r.top_left.x and r.bottom_right.x < 100
        assert 0 < r.top_left.y and r.bottom_right.y < 100
    total = sum(len(c) for c in cells)
    assert len(set().union(*cells)) == total


def test_get_rects_requires_positive_count():
    with pytest.raises(ValueError):
        get_rects(0, 0, 0, 100, 100)