import math

import pytest

from tilebreaker.shapes import Circle, Point, Rectangle, ShapeType


def test_shape_types():
    assert Point(0, 0).shape_type is ShapeType.POINT
    assert Rectangle(0, 0, 1, 1).shape_type is ShapeType.RECTANGLE
    assert Circle(0, 0, 1).shape_type is ShapeType.CIRCLE


def test_point_distance_worked_example():
    assert Point(0, 0).dist(Point(3, 4)) == 5.0


def test_dist_and_dist2_agree_and_are_symmetric():
    p, q = Point(1.5, -2.0), Point(-7.0, 4.25)
    assert math.isclose(p.dist(q) ** 2, p.dist2(q))
    assert p.dist2(q) == q.dist2(p)
    assert p.dist2(p) == 0


def test_point_point_overlap():
    assert Point(2, 3).overlap(Point(2, 3))
    assert not Point(2, 3).overlap(Point(2, 4))


def test_point_rectangle_inclusive_edges():
    rect = Rectangle(0, 0, 10, 10)
    assert Point(0, 0).overlap(rect)
    assert Point(10, 10).overlap(rect)
    assert rect.overlap(Point(5, 5))
    assert not rect.overlap(Point(11, 5))


def test_point_circle_comparison_as_defined():
    circle = Circle(0, 0, 2)
    assert not Point(0, 0).overlap(circle)
    assert Point(5, 0).overlap(circle)
    assert circle.overlap(Point(5, 0))


def test_rectangles_touching_edges_overlap():
    a = Rectangle(0, 0, 16, 16)
    assert a.overlap(Rectangle(16, 0, 32, 16))
    assert not a.overlap(Rectangle(17, 0, 32, 16))
    assert not a.overlap(Rectangle(0, 17, 16, 32))


def test_rectangle_circle_overlap_is_symmetric():
    rect = Rectangle(0, 0, 10, 10)
    near = Circle(12, 5, 2)
    far = Circle(13, 5, 2)
    assert rect.overlap(near) and near.overlap(rect)
    assert not rect.overlap(far) and not far.overlap(rect)


def test_circle_circle_overlap():
    assert Circle(0, 0, 1).overlap(Circle(2, 0, 1))
    assert not Circle(0, 0, 1).overlap(Circle(2.5, 0, 1))


@pytest.mark.parametrize(
    "shape", [Point(1, 2), Rectangle(0, 0, 4, 6), Circle(3, 3, 1)]
)
def test_move_shifts_center(shape):
    cx, cy = shape.center_x(), shape.center_y()
    shape.move(5, -3)
    assert shape.center_x() == cx + 5
    assert shape.center_y() == cy - 3


def test_rectangle_sides_follow_move():
    rect = Rectangle(1, 2, 3, 4)
    assert (rect.left(), rect.top(), rect.right(), rect.bottom()) == (1, 2, 3, 4)
    rect.move(10, 20)
    assert (rect.left(), rect.top(), rect.right(), rect.bottom()) == (11, 22, 13, 24)


def test_rectangle_center_between_sides():
    rect = Rectangle(0, 0, 16, 16)
    assert rect.left() < rect.center_x() < rect.right()
    assert rect.top() < rect.center_y() < rect.bottom()


def test_unknown_shape_raises():
    with pytest.raises(TypeError):
        Point(0, 0).overlap(object())