"""Axis-aligned grid rectangles used to generate hills and valleys."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict, List, Sequence

from .customtypes import Coord, rand_engine, random_in_range

HeightLevels = List[Dict[int, List[Coord]]]

_DIVIDE_THRESHOLD = 3


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


def _step_away(z: int) -> int:
    return z - 1 if z < 0 else z + 1


@dataclass(frozen=True)
class Rectangle:
    """A rectangle of grid cells spanning top_left to bottom_right inclusive."""

    top_left: Coord
    bottom_right: Coord

    def __post_init__(self) -> None:
        if self.top_left.x > self.bottom_right.x or self.top_left.y > self.bottom_right.y:
            raise ValueError("Not a valid rect with these coords")

    @property
    def width(self) -> int:
        return self.bottom_right.x - self.top_left.x

    @property
    def height(self) -> int:
        return self.bottom_right.y - self.top_left.y

    def __str__(self) -> str:
        tl, br = self.top_left, self.bottom_right
        return f"{tl.x},{tl.y} ({br.x},{br.y})"

    def divide(self, slices: int) -> List["Rectangle"]:
        """Split along the longer side into `slices` pieces separated by gaps."""
        if self.width < _DIVIDE_THRESHOLD and self.height < _DIVIDE_THRESHOLD:
            return [self]
        if slices <= 0:
            raise ValueError("Number of slices must be a positive integer")

        tl, br = self.top_left, self.bottom_right
        pieces = []
        if self.width >= self.height:
            step = self.width // slices
            for i in range(slices):
                start = Coord(tl.x + i * step, tl.y)
                end = br if i == slices - 1 else Coord(tl.x + (i + 1) * step - 2, br.y)
                pieces.append(Rectangle(start, end))
        else:
            step = self.height // slices
            for i in range(slices):
                start = Coord(tl.x, tl.y + i * step)
                end = br if i == slices - 1 else Coord(br.x, tl.y + (i + 1) * step - 2)
                pieces.append(Rectangle(start, end))
        return pieces

    def get_coords(self) -> List[Coord]:
        """Border cells: top and bottom rows, left and right columns, then the corner."""
        tl, br = self.top_left, self.bottom_right
        coords = [Coord(x, y) for y in (tl.y, br.y) for x in range(tl.x, br.x + 1)]
        coords += [Coord(x, y) for x in (tl.x, br.x) for y in range(tl.y, br.y + 1)]
        coords.append(br)
        return coords

    def get_all_coords(self) -> List[Coord]:
        """Every cell of the rectangle, column by column."""
        tl, br = self.top_left, self.bottom_right
        return [
            Coord(x, y)
            for x in range(tl.x, br.x + 1)
            for y in range(tl.y, br.y + 1)
        ]

    @staticmethod
    def betweens(rects: Sequence["Rectangle"]) -> List[Coord]:
        """Cells of the one-cell gaps that follow each rectangle but the last."""
        if len(rects) < 2:
            return []
        first = rects[0]
        horizontal = all(r.top_left.y == first.top_left.y for r in rects)
        coords = []
        if horizontal:
            for rect in rects[:-1]:
                x = rect.bottom_right.x + 1
                coords.extend(
                    Coord(x, y)
                    for y in range(first.top_left.y, first.bottom_right.y + 1)
                )
        else:
            for rect in rects[:-1]:
                y = rect.bottom_right.y + 1
                coords.extend(
                    Coord(x, y)
                    for x in range(first.top_left.x, first.bottom_right.x + 1)
                )
        return coords

    @staticmethod
    def factory(rect: "Rectangle") -> "Rectangle":
        """Return the rectangle shrunk by one cell on every side."""
        return Rectangle(
            Coord(rect.top_left.x + 1, rect.top_left.y + 1),
            Coord(rect.bottom_right.x - 1, rect.bottom_right.y - 1),
        )

    @staticmethod
    def hilo_factory(
        arr: HeightLevels, rect: "Rectangle", z: int, max_levels: int
    ) -> HeightLevels:
        """Append nested contour rings of height z (growing away from zero) to arr."""
        if rect.width < 0 or rect.height < 0:
            return arr
        if abs(z) > max_levels:
            return arr

        try:
            if abs(z) == 1 and rect.height > 2 and rect.width > 2:
                peaks = Rectangle.factory(rect).divide(rand_engine.randint(1, 4))
                for peak in peaks:
                    arr = Rectangle.hilo_factory(arr, peak, _step_away(z), max_levels)
                if peaks:
                    arr.append({z: rect.get_coords() + Rectangle.betweens(peaks)})
                    return arr

            cont = abs(z) < max_levels and rect.width > 1 and rect.height > 1
            arr.append({z: rect.get_coords() if cont else rect.get_all_coords()})
            if not cont:
                return arr
            return Rectangle.hilo_factory(
                arr, Rectangle.factory(rect), _step_away(z), max_levels
            )
        except ValueError:
            return arr


def get_rects(count: int, x1: int, y1: int, x2: int, y2: int) -> List[Rectangle]:
    """Lay out `count` rectangles on a near-square grid inside the given area."""
    if count < 1:
        raise ValueError("at least one rectangle is required")

    width, height = x2 - x1, y2 - y1
    root = math.sqrt(count)
    low, high = math.floor(root), math.ceil(root)
    columns = high if random_in_range(0, 1) else low
    rows = low if columns == high else high
    while columns * rows < count:
        if rand_engine.randrange(2):
            columns += 1
        else:
            rows += 1

    cell_w = _trunc_div(width, columns)
    cell_h = _trunc_div(height, rows)
    rects = [
        Rectangle(
            Coord(x1 + cell_w * col + 1, y1 + cell_h * row + 1),
            Coord(x1 + cell_w * (col + 1) - 1, y1 + cell_h * (row + 1) - 1),
        )
        for row in range(rows)
        for col in range(columns)
    ]

    if len(rects) == count:
        return rects
    keep = [True] * count + [False] * (len(rects) - count)
    rand_engine.shuffle(keep)
    return [rect for rect, kept in zip(rects, keep) if kept]