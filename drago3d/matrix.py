"""Row-major 4x4 float matrices for building 3D transforms."""

from __future__ import annotations

import math
from typing import Iterator, Optional, Sequence, Union

from drago3d.vectors import Vector3, Vector4, deg2rad

_IDENTITY = (
    1.0, 0.0, 0.0, 0.0,
    0.0, 1.0, 0.0, 0.0,
    0.0, 0.0, 1.0, 0.0,
    0.0, 0.0, 0.0, 1.0,
)

Component = Union[float, Vector3]


def _components(
    x: Component, y: Optional[float], z: Optional[float]
) -> tuple[float, float, float]:
    """Accept either three numbers or a single Vector3."""
    if y is None and z is None:
        if not isinstance(x, Vector3):
            raise TypeError("expected a Vector3 or three numbers")
        return x.x, x.y, x.z
    if y is None or z is None or isinstance(x, Vector3):
        raise TypeError("expected a Vector3 or three numbers")
    return float(x), float(y), float(z)


def _cell(index: int) -> property:
    def getter(self: "Matrix4x4") -> float:
        return self._values[index]

    def setter(self: "Matrix4x4", value: float) -> None:
        self._values[index] = float(value)

    return property(getter, setter)


class Matrix4x4:
    """A 4x4 matrix stored row by row; the default is the identity."""

    __slots__ = ("_values",)

    def __init__(self, *values: float) -> None:
        if not values:
            self._values = list(_IDENTITY)
        elif len(values) == 16:
            self._values = [float(v) for v in values]
        else:
            raise ValueError(f"a 4x4 matrix needs 16 values, got {len(values)}")

    v11 = _cell(0)
    v12 = _cell(1)
    v13 = _cell(2)
    v14 = _cell(3)
    v21 = _cell(4)
    v22 = _cell(5)
    v23 = _cell(6)
    v24 = _cell(7)
    v31 = _cell(8)
    v32 = _cell(9)
    v33 = _cell(10)
    v34 = _cell(11)
    v41 = _cell(12)
    v42 = _cell(13)
    v43 = _cell(14)
    v44 = _cell(15)

    def __iter__(self) -> Iterator[float]:
        return iter(self._values)

    def __len__(self) -> int:
        return 16

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix4x4):
            return NotImplemented
        return self._values == other._values

    def __repr__(self) -> str:
        rows = ", ".join(repr(self.row(i)) for i in range(4))
        return f"Matrix4x4({rows})"

    def __getitem__(self, i: int) -> tuple[float, ...]:
        return self.row(i)

    def set(self, source: "Matrix4x4") -> None:
        """Copy every value from source."""
        self._values = list(source._values)

    def row(self, i: int) -> tuple[float, ...]:
        """Return row i (0 to 3) as a tuple."""
        if not 0 <= i < 4:
            raise IndexError(f"row index out of range: {i}")
        return tuple(self._values[4 * i:4 * i + 4])

    def __mul__(self, other: object) -> Union["Matrix4x4", Vector4]:
        if isinstance(other, Matrix4x4):
            a, b = self._values, other._values
            return Matrix4x4(
                *(
                    sum(a[4 * i + k] * b[4 * k + j] for k in range(4))
                    for i in range(4)
                    for j in range(4)
                )
            )
        if isinstance(other, Vector4):
            # The vector is treated as a row: v * M.
            vec = tuple(other)
            m = self._values
            return Vector4(
                *(sum(c * m[4 * k + j] for k, c in enumerate(vec)) for j in range(4))
            )
        return NotImplemented

    def __rmul__(self, other: object) -> Vector4:
        if isinstance(other, Vector4):
            # The vector is treated as a column: M * v.
            vec = tuple(other)
            return Vector4(
                *(sum(m * c for m, c in zip(self.row(i), vec)) for i in range(4))
            )
        return NotImplemented

    @staticmethod
    def translation(
        x: Component, y: Optional[float] = None, z: Optional[float] = None
    ) -> "Matrix4x4":
        """Translation matrix; the offset sits in the bottom row."""
        tx, ty, tz = _components(x, y, z)
        return Matrix4x4(
            1, 0, 0, 0,
            0, 1, 0, 0,
            0, 0, 1, 0,
            tx, ty, tz, 1,
        )

    @staticmethod
    def rotation_x(angle: float) -> "Matrix4x4":
        """Rotation about the x axis by angle degrees."""
        rad = deg2rad(angle)
        c, s = math.cos(rad), math.sin(rad)
        return Matrix4x4(
            1, 0, 0, 0,
            0, c, s, 0,
            0, -s, c, 0,
            0, 0, 0, 1,
        )

    @staticmethod
    def rotation_y(angle: float) -> "Matrix4x4":
        """Rotation about the y axis by angle degrees."""
        rad = deg2rad(angle)
        c, s = math.cos(rad), math.sin(rad)
        return Matrix4x4(
            c, 0, -s, 0,
            0, 1, 0, 0,
            s, 0, c, 0,
            0, 0, 0, 1,
        )

    @staticmethod
    def rotation_z(angle: float) -> "Matrix4x4":
        """Rotation about the z axis by angle degrees."""
        rad = deg2rad(angle)
        c, s = math.cos(rad), math.sin(rad)
        return Matrix4x4(
            c, s, 0, 0,
            -s, c, 0, 0,
            0, 0, 1, 0,
            0, 0, 0, 1,
        )

    @staticmethod
    def rotation(
        x: Component, y: Optional[float] = None, z: Optional[float] = None
    ) -> "Matrix4x4":
        """Combined rotation: (Y * X) * Z, angles in degrees."""
        rx, ry, rz = _components(x, y, z)
        return (
            Matrix4x4.rotation_y(ry) * Matrix4x4.rotation_x(rx)
        ) * Matrix4x4.rotation_z(rz)

    @staticmethod
    def yaw_pitch_roll(yaw: float, pitch: float, roll: float) -> "Matrix4x4":
        """Rotation built from yaw, pitch and roll in degrees (z * x * y)."""
        y, p, r = deg2rad(yaw), deg2rad(pitch), deg2rad(roll)
        cy, sy = math.cos(y), math.sin(y)
        cp, sp = math.cos(p), math.sin(p)
        cr, sr = math.cos(r), math.sin(r)
        result = Matrix4x4()
        result.v11 = cr * cy + sr * sp * sy
        result.v12 = sr * cp
        result.v13 = cr * -sy + sr * sp * cy
        result.v21 = -sr * cy + cr * sp * sy
        result.v22 = cr * cp
        result.v23 = sr * sy + cr * sp * cy
        result.v31 = cp * sy
        result.v32 = -sp
        result.v33 = cp * cy
        result.v44 = 1.0
        return result

    @staticmethod
    def scale(
        x: Component, y: Optional[float] = None, z: Optional[float] = None
    ) -> "Matrix4x4":
        """Scale matrix along the three axes."""
        sx, sy, sz = _components(x, y, z)
        return Matrix4x4(
            sx, 0, 0, 0,
            0, sy, 0, 0,
            0, 0, sz, 0,
            0, 0, 0, 1,
        )

    @staticmethod
    def transform(
        x: float,
        y: float,
        z: float,
        xrot: float,
        yrot: float,
        zrot: float,
        xscale: float,
        yscale: float,
        zscale: float,
    ) -> "Matrix4x4":
        """Full transform: (scale * rotation) * translation."""
        return (
            Matrix4x4.scale(xscale, yscale, zscale)
            * Matrix4x4.rotation(xrot, yrot, zrot)
        ) * Matrix4x4.translation(x, y, z)

    @staticmethod
    def transform_vectors(
        position: Vector3, rotation: Vector3, scale: Vector3
    ) -> "Matrix4x4":
        """Full transform built from position, rotation and scale vectors."""
        return (
            Matrix4x4.scale(scale) * Matrix4x4.rotation(rotation)
        ) * Matrix4x4.translation(position)