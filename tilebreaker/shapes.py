"""Geometric hit-box shapes and their overlap tests."""

from __future__ import annotations

import enum
import math
from abc import ABC, abstractmethod
from dataclasses import dataclass


class ShapeType(enum.Enum):
    """Kinds of shape a hit-box can be."""

    POINT = 0
    RECTANGLE = 1
    CIRCLE = 2


class Shape(ABC):
    """Base class of every hit-box shape."""

    shape_type: ShapeType

    def overlap(self, other: Shape) -> bool:
        """Return True if this shape and ``other`` overlap."""
        return _overlap(self, other)

    @abstractmethod
    def move(self, dx: float, dy: float) -> None:
        """Shift the shape by ``dx`` horizontally and ``dy`` vertically."""

    @abstractmethod
    def center_x(self) -> float:
        """Horizontal coordinate of the shape's centre."""

    @abstractmethod
    def center_y(self) -> float:
        """Vertical coordinate of the shape's centre."""


@dataclass
class Point(Shape):
    """A single point."""

    x: float = 0.0
    y: float = 0.0

    shape_type = ShapeType.POINT

    def move(self, dx: float, dy: float) -> None:
        self.x += dx
        self.y += dy

    def center_x(self) -> float:
        return self.x

    def center_y(self) -> float:
        return self.y

    def dist2(self, other: Point) -> float:
        """Squared distance to ``other``."""
        return (self.x - other.x) ** 2 + (self.y - other.y) ** 2

    def dist(self, other: Point) -> float:
        """Distance to ``other``."""
        return math.sqrt(self.dist2(other))


@dataclass
class Rectangle(Shape):
    """An axis-aligned rectangle from (x1, y1) to (x2, y2)."""

    x1: float
    y1: float
    x2: float
    y2: float

    shape_type = ShapeType.RECTANGLE

    def move(self, dx: float, dy: float) -> None:
        self.x1 += dx
        self.x2 += dx
        self.y1 += dy
        self.y2 += dy

    def center_x(self) -> float:
        return (self.x1 + self.x2) / 2

    def center_y(self) -> float:
        return (self.y1 + self.y2) / 2

    def top(self) -> float:
        return self.y1

    def bottom(self) -> float:
        return self.y2

    def left(self) -> float:
        return self.x1

    def right(self) -> float:
        return self.x2


@dataclass
class Circle(Shape):
    """A circle with centre (x, y) and radius r."""

    x: float
    y: float
    r: float

    shape_type = ShapeType.CIRCLE

    def move(self, dx: float, dy: float) -> None:
        self.x += dx
        self.y += dy

    def center_x(self) -> float:
        return self.x

    def center_y(self) -> float:
        return self.y

    @property
    def center(self) -> Point:
        return Point(self.x, self.y)


def _overlap_pp(p1: Point, p2: Point) -> bool:
    return p1.x == p2.x and p1.y == p2.y


def _overlap_pr(p: Point, r: Rectangle) -> bool:
    return r.x1 <= p.x <= r.x2 and r.y1 <= p.y <= r.y2


def _overlap_pc(p: Point, c: Circle) -> bool:
    # The comparison is kept exactly as the game defines it.
    return c.r * c.r <= p.dist2(c.center)


def _overlap_rr(r1: Rectangle, r2: Rectangle) -> bool:
    return not (r1.x2 < r2.x1 or r2.x2 < r1.x1 or r1.y2 < r2.y1 or r2.y2 < r1.y1)


def _overlap_rc(r: Rectangle, c: Circle) -> bool:
    nearest = Point(max(r.x1, min(c.x, r.x2)), max(r.y1, min(c.y, r.y2)))
    return c.r * c.r >= c.center.dist2(nearest)


def _overlap_cc(c1: Circle, c2: Circle) -> bool:
    d = c1.r + c2.r
    return d * d >= c1.center.dist2(c2.center)


_DISPATCH = {
    (ShapeType.POINT, ShapeType.POINT): _overlap_pp,
    (ShapeType.POINT, ShapeType.RECTANGLE): _overlap_pr,
    (ShapeType.POINT, ShapeType.CIRCLE): _overlap_pc,
    (ShapeType.RECTANGLE, ShapeType.RECTANGLE): _overlap_rr,
    (ShapeType.RECTANGLE, ShapeType.CIRCLE): _overlap_rc,
    (ShapeType.CIRCLE, ShapeType.CIRCLE): _overlap_cc,
}


def _overlap(a: Shape, b: Shape) -> bool:
    kind_a = getattr(a, "shape_type", None)
    kind_b = getattr(b, "shape_type", None)
    check = _DISPATCH.get((kind_a, kind_b))
    if check is not None:
        return check(a, b)
    check = _DISPATCH.get((kind_b, kind_a))
    if check is not None:
        return check(b, a)
    raise TypeError("Unknown ShapeType.")