"""Dense 3D grids of floats with region and sphere operations."""

from __future__ import annotations

import math
from typing import Callable, Iterable, Iterator, Optional

from drago3d.vectors import lerp

GRIDS_VERSION = "1.0.0"

Cell = tuple[int, int, int]


def distance3d(
    x1: float, y1: float, z1: float, x2: float, y2: float, z2: float
) -> float:
    """Euclidean distance between two points."""
    return math.sqrt((x2 - x1) ** 2 + (y2 - y1) ** 2 + (z2 - z1) ** 2)


def _region_cells(
    x1: int, y1: int, z1: int, x2: int, y2: int, z2: int
) -> Iterator[Cell]:
    for i in range(x1, x2 + 1):
        for j in range(y1, y2 + 1):
            for k in range(z1, z2 + 1):
                yield i, j, k


def _sphere_cells(x: int, y: int, z: int, r: float) -> Iterator[Cell]:
    for i, j, k in _region_cells(
        int(x - r), int(y - r), int(z - r), int(x + r), int(y + r), int(z + r)
    ):
        if distance3d(x, y, z, i, j, k) <= r:
            yield i, j, k


def _sqrt(value: float) -> float:
    return math.sqrt(value) if value >= 0 else math.nan


class Grid3D:
    """A flat array of floats addressed by (x, y, z).

    The cell (x, y, z) lives at ``z * height * depth + y * depth + x``.
    """

    def __init__(
        self,
        width: int,
        height: int,
        depth: int,
        values: Optional[Iterable[float]] = None,
    ) -> None:
        if width <= 0 or height <= 0 or depth <= 0:
            raise ValueError("grid dimensions must be positive")
        self.width = width
        self.height = height
        self.depth = depth
        size = width * height * depth
        if values is None:
            self.values = [0.0] * size
        else:
            self.values = [float(v) for v in values]
            if len(self.values) != size:
                raise ValueError(
                    f"expected {size} values, got {len(self.values)}"
                )

    def __len__(self) -> int:
        return len(self.values)

    def __getitem__(self, cell: Cell) -> float:
        return self.values[self.index(*cell)]

    def __setitem__(self, cell: Cell, value: float) -> None:
        self.values[self.index(*cell)] = float(value)

    def index(self, x: int, y: int, z: int) -> int:
        """Flat position of a cell; raises IndexError outside the grid."""
        flat = z * self.height * self.depth + y * self.depth + x
        if not 0 <= flat < len(self.values):
            raise IndexError(f"cell ({x}, {y}, {z}) is outside the grid")
        return flat

    # internal helpers

    def _apply(self, cells: Iterable[Cell], op: Callable[[float], float]) -> None:
        for i, j, k in cells:
            n = self.index(i, j, k)
            self.values[n] = op(self.values[n])

    def _apply_grid(
        self,
        cells: Iterable[Cell],
        other: "Grid3D",
        dx: int,
        dy: int,
        dz: int,
        op: Callable[[float, float], float],
    ) -> None:
        for i, j, k in cells:
            n = self.index(i, j, k)
            source = other.values[other.index(i + dx, j + dy, k + dz)]
            self.values[n] = op(self.values[n], source)

    def _cell_values(self, cells: Iterable[Cell]) -> list[float]:
        return [self.values[self.index(i, j, k)] for i, j, k in cells]

    @staticmethod
    def _mean(values: list[float]) -> float:
        if not values:
            raise ValueError("the selection holds no cells")
        return sum(values) / len(values)

    # set

    def set_region(self, x1, y1, z1, x2, y2, z2, value) -> None:
        """Set every cell of the box to value."""
        self._apply(_region_cells(x1, y1, z1, x2, y2, z2), lambda _: float(value))

    def set_sphere(self, x, y, z, r, value) -> None:
        """Set every cell within r of (x, y, z) to value."""
        self._apply(_sphere_cells(x, y, z, r), lambda _: float(value))

    def set_grid_region(
        self, x1, y1, z1, x2, y2, z2, other, other_x, other_y, other_z
    ) -> None:
        """Copy a box from other, whose corner sits at (other_x, other_y, other_z)."""
        self._apply_grid(
            _region_cells(x1, y1, z1, x2, y2, z2), other,
            other_x - x1, other_y - y1, other_z - z1, lambda _, b: b,
        )

    def set_grid_sphere(self, x, y, z, r, other, other_x, other_y, other_z) -> None:
        """Copy a sphere from other, centred there at (other_x, other_y, other_z)."""
        self._apply_grid(
            _sphere_cells(x, y, z, r), other,
            other_x - x, other_y - y, other_z - z, lambda _, b: b,
        )

    # statistics

    def region_mean(self, x1, y1, z1, x2, y2, z2) -> float:
        values = self._cell_values(_region_cells(x1, y1, z1, x2, y2, z2))
        return self._mean(values)

    def region_min(self, x1, y1, z1, x2, y2, z2) -> float:
        """Lowest value of the box; infinity when the box is empty."""
        values = self._cell_values(_region_cells(x1, y1, z1, x2, y2, z2))
        return min(values, default=math.inf)

    def region_max(self, x1, y1, z1, x2, y2, z2) -> float:
        """Highest value of the box; minus infinity when the box is empty."""
        values = self._cell_values(_region_cells(x1, y1, z1, x2, y2, z2))
        return max(values, default=-math.inf)

    def region_sum(self, x1, y1, z1, x2, y2, z2) -> float:
        return sum(self._cell_values(_region_cells(x1, y1, z1, x2, y2, z2)))

    def region_standard_deviation(self, x1, y1, z1, x2, y2, z2) -> float:
        """Square root of the box mean divided by its cell count."""
        mean = self.region_mean(x1, y1, z1, x2, y2, z2)
        n = (x2 - x1 + 1) * (y2 - y1 + 1) * (z2 - z1 + 1)
        return _sqrt(mean / n)

    def sphere_mean(self, x, y, z, r) -> float:
        return self._mean(self._cell_values(_sphere_cells(x, y, z, r)))

    def sphere_min(self, x, y, z, r) -> float:
        """Lowest value in the sphere; infinity when it holds no cells."""
        return min(self._cell_values(_sphere_cells(x, y, z, r)), default=math.inf)

    def sphere_max(self, x, y, z, r) -> float:
        """Highest value in the sphere; minus infinity when it holds no cells."""
        return max(self._cell_values(_sphere_cells(x, y, z, r)), default=-math.inf)

    def sphere_sum(self, x, y, z, r) -> float:
        return sum(self._cell_values(_sphere_cells(x, y, z, r)))

    def sphere_standard_deviation(self, x, y, z, r) -> float:
        """Square root of the sphere mean divided by its cell count."""
        values = self._cell_values(_sphere_cells(x, y, z, r))
        mean = self._mean(values)
        return _sqrt(mean / len(values))

    # add

    def add_region(self, x1, y1, z1, x2, y2, z2, value) -> None:
        self._apply(_region_cells(x1, y1, z1, x2, y2, z2), lambda a: a + value)

    def add_sphere(self, x, y, z, r, value) -> None:
        self._apply(_sphere_cells(x, y, z, r), lambda a: a + value)

    def add_grid_region(
        self, x1, y1, z1, x2, y2, z2, other, other_x, other_y, other_z
    ) -> None:
        self._apply_grid(
            _region_cells(x1, y1, z1, x2, y2, z2), other,
            other_x - x1, other_y - y1, other_z - z1, lambda a, b: a + b,
        )

    def add_grid_sphere(self, x, y, z, r, other, other_x, other_y, other_z) -> None:
        self._apply_grid(
            _sphere_cells(x, y, z, r), other,
            other_x - x, other_y - y, other_z - z, lambda a, b: a + b,
        )

    # multiply

    def multiply_region(self, x1, y1, z1, x2, y2, z2, value) -> None:
        self._apply(_region_cells(x1, y1, z1, x2, y2, z2), lambda a: a * value)

    def multiply_sphere(self, x, y, z, r, value) -> None:
        self._apply(_sphere_cells(x, y, z, r), lambda a: a * value)

    def multiply_grid_region(
        self, x1, y1, z1, x2, y2, z2, other, other_x, other_y, other_z
    ) -> None:
        self._apply_grid(
            _region_cells(x1, y1, z1, x2, y2, z2), other,
            other_x - x1, other_y - y1, other_z - z1, lambda a, b: a * b,
        )

    def multiply_grid_sphere(
        self, x, y, z, r, other, other_x, other_y, other_z
    ) -> None:
        self._apply_grid(
            _sphere_cells(x, y, z, r), other,
            other_x - x, other_y - y, other_z - z, lambda a, b: a * b,
        )

    # lerp

    def lerp_region(self, x1, y1, z1, x2, y2, z2, value, f) -> None:
        self._apply(
            _region_cells(x1, y1, z1, x2, y2, z2), lambda a: lerp(a, value, f)
        )

    def lerp_sphere(self, x, y, z, r, value, f) -> None:
        self._apply(_sphere_cells(x, y, z, r), lambda a: lerp(a, value, f))

    def lerp_grid_region(
        self, x1, y1, z1, x2, y2, z2, other, other_x, other_y, other_z, f
    ) -> None:
        self._apply_grid(
            _region_cells(x1, y1, z1, x2, y2, z2), other,
            other_x - x1, other_y - y1, other_z - z1, lambda a, b: lerp(a, b, f),
        )

    def lerp_grid_sphere(
        self, x, y, z, r, other, other_x, other_y, other_z, f
    ) -> None:
        self._apply_grid(
            _sphere_cells(x, y, z, r), other,
            other_x - x, other_y - y, other_z - z, lambda a, b: lerp(a, b, f),
        )