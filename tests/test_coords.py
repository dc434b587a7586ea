import math

import pytest

from zorbworld.coords import (
    Box,
    FRect,
    Point,
    Rect,
    Size,
    Vector,
    screen_box_to_sdl,
    screen_rect_to_sdl,
)


def test_origin():
    assert Point.origin() == Point(0.0, 0.0)
    assert Point() == Point.origin()


def test_point_vector_round_trip():
    p = Point(1.5, -2.0)
    v = Vector(3.0, 7.25)
    assert (p + v) - v == p


def test_point_difference_is_vector():
    p = Point(10.0, 4.0)
    q = Point(-3.0, 8.0)
    diff = p - q
    assert isinstance(diff, Vector)
    assert q + diff == p


def test_vector_length():
    assert Vector(3.0, 4.0).length() == pytest.approx(5.0)


def test_normalize_has_unit_length():
    for v in (Vector(3.0, 4.0), Vector(-2.0, 0.5), Vector(0.0, -9.0)):
        assert v.normalize().length() == pytest.approx(1.0)


def test_normalize_zero_is_nan():
    n = Vector(0.0, 0.0).normalize()
    assert [math.isnan(n.x), math.isnan(n.y)] == [True, True]


def test_vector_scaling_matches_addition():
    v = Vector(1.25, -3.5)
    assert v * 2 == v + v
    assert 2 * v == v + v
    assert (v * 2) / 2 == v
    assert v + (-v) == Vector(0.0, 0.0)


def test_screen_rect_to_sdl():
    rect = Rect(Point(1.0, 2.0), Size(3.0, 4.0))
    assert screen_rect_to_sdl(rect) == FRect(1.0, 2.0, 3.0, 4.0)


def test_screen_box_to_sdl():
    box = Box(Point(1.0, 2.0), Point(4.0, 6.0))
    assert screen_box_to_sdl(box) == FRect(1.0, 2.0, 3.0, 4.0)


def test_sdl_conversion_rounds_to_single_precision():
    frect = screen_rect_to_sdl(Rect(Point(0.1, 0.0), Size(0.0, 0.0)))
    assert frect.x == pytest.approx(0.1, rel=1e-7)
    assert frect.x != 0.1