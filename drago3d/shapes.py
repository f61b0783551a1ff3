"""Collision shapes and pairwise overlap checks between them."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from drago3d.matrix import Matrix4x4
from drago3d.vectors import Vector3

COLLISIONS_VERSION = "0.0.1"

_PLANE_TOLERANCE = 0.000000001


def _overlap_by_default(shape: object, expected: type) -> bool:
    """Report an overlap for a pair without a dedicated test.

    The argument must be a shape of the expected kind.
    """
    if not isinstance(shape, expected):
        raise TypeError(
            f"expected {expected.__name__}, got {type(shape).__name__}"
        )
    return True


class Shape(ABC):
    """A collision shape.

    Each check_* method answers whether this shape overlaps the given shape.
    Pairs that have no dedicated test report an overlap.
    """

    @abstractmethod
    def _checked_by(self, shape: "Shape") -> bool:
        """Ask shape to check itself against this shape."""

    def collides(self, other: "Shape") -> bool:
        """Check this shape against any other shape."""
        if not isinstance(other, Shape):
            raise TypeError(f"cannot test a collision with {type(other).__name__}")
        return other._checked_by(self)

    def check_point(self, point: "ShapePoint") -> bool:
        return _overlap_by_default(point, ShapePoint)

    def check_sphere(self, sphere: "ShapeSphere") -> bool:
        return _overlap_by_default(sphere, ShapeSphere)

    def check_aabb(self, aabb: "ShapeAABB") -> bool:
        return _overlap_by_default(aabb, ShapeAABB)

    def check_obb(self, obb: "ShapeOBB") -> bool:
        return _overlap_by_default(obb, ShapeOBB)

    def check_plane(self, plane: "ShapePlane") -> bool:
        return _overlap_by_default(plane, ShapePlane)

    def check_capsule(self, capsule: "ShapeCapsule") -> bool:
        return _overlap_by_default(capsule, ShapeCapsule)

    def check_triangle(self, triangle: "ShapeTriangle") -> bool:
        return _overlap_by_default(triangle, ShapeTriangle)

    def check_mesh(self, mesh: "ShapeMesh") -> bool:
        return _overlap_by_default(mesh, ShapeMesh)

    def check_model(self, model: "ShapeModel") -> bool:
        return _overlap_by_default(model, ShapeModel)

    def check_line(self, line: "ShapeLine") -> bool:
        return _overlap_by_default(line, ShapeLine)

    def check_ray(self, ray: "ShapeRay") -> bool:
        return _overlap_by_default(ray, ShapeRay)


@dataclass
class ShapePoint(Shape):
    position: Vector3 = field(default_factory=Vector3)

    def _checked_by(self, shape: Shape) -> bool:
        return shape.check_point(self)

    def set(self, position: Vector3) -> None:
        self.position.set(position)

    def check_point(self, point: "ShapePoint") -> bool:
        return self.position.equals(point.position)

    def check_sphere(self, sphere: "ShapeSphere") -> bool:
        return self.position.distance(sphere.position) <= sphere.radius

    def check_plane(self, plane: "ShapePlane") -> bool:
        return math.fabs(self.position.dot(plane.normal) - 0.0) <= _PLANE_TOLERANCE


@dataclass
class ShapeSphere(Shape):
    position: Vector3 = field(default_factory=Vector3)
    radius: float = 0.0

    def _checked_by(self, shape: Shape) -> bool:
        return shape.check_sphere(self)

    def set(self, position: Vector3, radius: float) -> None:
        self.position.set(position)
        self.radius = radius

    def check_point(self, point: ShapePoint) -> bool:
        return point.check_sphere(self)

    def check_sphere(self, sphere: "ShapeSphere") -> bool:
        return self.position.distance(sphere.position) <= self.radius + sphere.radius


@dataclass
class ShapeAABB(Shape):
    position: Vector3 = field(default_factory=Vector3)
    half: Vector3 = field(default_factory=Vector3)

    def _checked_by(self, shape: Shape) -> bool:
        return shape.check_aabb(self)

    def set(self, position: Vector3, half: Vector3) -> None:
        self.position.set(position)
        self.half.set(half)


@dataclass
class ShapeOBB(Shape):
    position: Vector3 = field(default_factory=Vector3)
    size: Vector3 = field(default_factory=Vector3)
    orientation: Matrix4x4 = field(default_factory=Matrix4x4)

    def _checked_by(self, shape: Shape) -> bool:
        return shape.check_obb(self)

    def set(self, position: Vector3, size: Vector3, orientation: Matrix4x4) -> None:
        self.position.set(position)
        self.size.set(size)
        self.orientation.set(orientation)


@dataclass
class ShapePlane(Shape):
    normal: Vector3 = field(default_factory=Vector3)
    distance: float = 0.0

    def _checked_by(self, shape: Shape) -> bool:
        return shape.check_plane(self)

    def set(self, normal: Vector3, distance: float) -> None:
        self.normal.set(normal)
        self.distance = distance


@dataclass
class ShapeLine(Shape):
    start: Vector3 = field(default_factory=Vector3)
    end: Vector3 = field(default_factory=Vector3)

    def _checked_by(self, shape: Shape) -> bool:
        return shape.check_line(self)

    def set(self, start: Vector3, end: Vector3) -> None:
        self.start.set(start)
        self.end.set(end)


@dataclass
class ShapeCapsule(Shape):
    line: ShapeLine = field(default_factory=ShapeLine)
    radius: float = 0.0

    def _checked_by(self, shape: Shape) -> bool:
        return shape.check_capsule(self)

    def set(self, line: ShapeLine, radius: float) -> None:
        self.line.set(line.start, line.end)
        self.radius = radius


@dataclass
class ShapeTriangle(Shape):
    a: Vector3 = field(default_factory=Vector3)
    b: Vector3 = field(default_factory=Vector3)
    c: Vector3 = field(default_factory=Vector3)

    def _checked_by(self, shape: Shape) -> bool:
        return shape.check_triangle(self)

    def set(self, a: Vector3, b: Vector3, c: Vector3) -> None:
        self.a.set(a)
        self.b.set(b)
        self.c.set(c)


@dataclass
class ShapeMesh(Shape):
    def _checked_by(self, shape: Shape) -> bool:
        return shape.check_mesh(self)


@dataclass
class ShapeModel(Shape):
    def _checked_by(self, shape: Shape) -> bool:
        return shape.check_model(self)


@dataclass
class ShapeRay(Shape):
    position: Vector3 = field(default_factory=Vector3)
    direction: Vector3 = field(default_factory=Vector3)

    def _checked_by(self, shape: Shape) -> bool:
        return shape.check_ray(self)

    def set(self, position: Vector3, direction: Vector3) -> None:
        self.position.set(position)
        self.direction.set(direction)