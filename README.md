# drago3d

A small library for 3D math and spatial data.

## Modules

### `drago3d.vectors`

`Vector2`, `Vector3` and `Vector4` are dataclasses of floats. They support `+`, `-`,
`*` and `/` element-wise, with another vector of the same size or with a number on
either side, and they iterate over their components.

Each vector has `set`, `equals`, `dot`, `normalize`, `normalize_in_place`, `magnitude`,
`distance`, `abs`, `floor`, `ceil`, `frac`, `min`, `max`, `clamp`, `project`, `lerp` and
`approach`. `Vector3` also has `cross`; `Vector2` has `remap`; `Vector4` has
`transform_in_place` and the colour aliases `r`, `g`, `b` and `a`.

Some of these behave in particular ways worth knowing:

- `dot` computes `x*ox*y + oy` plus the products of the remaining components
  (`z*oz`, `w*ow`), not the usual dot product. `normalize`, `normalize_in_place` and
  `project` are built on it. `magnitude` and `distance` are ordinary Euclidean lengths.
- `equals` compares components within an absolute tolerance of `1e-9`; on `Vector4`
  it compares `x`, `y` and `z` only.
- `lerp` with a vector amount interpolates each component by the matching amount; with
  a number, each component is interpolated by its own current value.
- `normalize_in_place` leaves the vector unchanged when its length is zero.

Module-level helpers: `deg2rad`, `rad2deg`, `approx_equal` (relative tolerance),
`lerp`, `lerp_cubic` and `lerp_smoother`.

### `drago3d.matrix`

`Matrix4x4` is a row-major 4x4 matrix. `Matrix4x4()` is the identity; otherwise pass
16 values. Cells are available as `v11` to `v44`, rows through `row(i)` or `m[i]`, and
`set` copies another matrix.

Builders, all static, with angles in degrees: `translation`, `rotation_x`, `rotation_y`,
`rotation_z`, `rotation` (`(Y * X) * Z`), `yaw_pitch_roll`, `scale`, `transform`
(`(scale * rotation) * translation` from nine numbers) and `transform_vectors` (the same
from three `Vector3`s). `translation`, `rotation` and `scale` take either three numbers
or one `Vector3`.

Matrices multiply with each other. `matrix * Vector4` treats the vector as a row, and
`Vector4 * matrix` treats it as a column.

### `drago3d.shapes`

Collision shapes: `ShapePoint`, `ShapeSphere`, `ShapeAABB`, `ShapeOBB`, `ShapePlane`,
`ShapeCapsule`, `ShapeTriangle`, `ShapeMesh`, `ShapeModel`, `ShapeRay` and `ShapeLine`.
They all derive from `Shape`, which provides `collides(other)` and one `check_*` method
for each kind of shape. Each shape with data has a `set` method.

Dedicated tests exist for point–point (`equals`), point–sphere, sphere–sphere and
point–plane (the point's `dot` with the plane normal is within `1e-9` of zero). Every
other pair reports a collision. Passing a `check_*` method the wrong kind of shape raises
`TypeError`.

### `drago3d.grids`

`Grid3D(width, height, depth, values=None)` is a flat list of floats. The cell
`(x, y, z)` is stored at `z * height * depth + y * depth + x`. Cells are read and written
with `grid[x, y, z]`, and `index` raises `IndexError` for positions outside the list.

Over an inclusive box (`*_region`) or over the cells within a radius of a centre
(`*_sphere`), a grid can:

- `set_*`, `add_*`, `multiply_*` and `lerp_*` with a value;
- `set_grid_*`, `add_grid_*`, `multiply_grid_*` and `lerp_grid_*` with the cells of
  another grid, offset so that the first corner (or the centre) maps to
  `(other_x, other_y, other_z)`;
- compute `region_sum`, `region_mean`, `region_min`, `region_max`,
  `region_standard_deviation` and their `sphere_*` counterparts.

The `*_standard_deviation` methods return the square root of the mean divided by the
cell count. The mean of an empty selection raises `ValueError`; the minimum and maximum
of an empty selection are `inf` and `-inf`. `distance3d` is the Euclidean distance
between two points.

### `drago3d.sysinfo`

`os_info()`, `processor_count()`, `processor_info()`, `processor_architecture()`,
`memory_total()`, `memory_available()` and `memory_load()` (percentage in use).
`architecture_name(machine)` maps a machine type such as `"AMD64"` or `"aarch64"` to
`"x64"`, `"x86"`, `"ARM"`, `"ARM64"` or `"Itanium"`, and any other to
`UNKNOWN_ARCHITECTURE`. Memory figures come from `psutil`.

## What it does not do

Most shape pairs have no real intersection test and always report a collision, so the
shapes are not a working collision detector beyond points and spheres. There is no
physics simulation, no rendering and no command-line tool.

## Installation

```
pip install drago3d
```

## Example

```python
from drago3d.vectors import Vector3, Vector4
from drago3d.matrix import Matrix4x4
from drago3d.shapes import ShapePoint, ShapeSphere
from drago3d.grids import Grid3D

a = Vector3(1.0, 2.0, 3.0)
print(a.magnitude())
print(a.distance(Vector3(1.0, 10.0, 100.0)))

m = Matrix4x4.transform(10, 10, 10, 15, 20, 30, 1, 2, 1)
print(m * Vector4(5, 5, 0, 1))

sphere = ShapeSphere()
sphere.set(Vector3(0, 0, 0), 2.0)
point = ShapePoint()
point.set(Vector3(1, 1, 0))
print(point.collides(sphere))  # True

grid = Grid3D(8, 8, 8)
grid.set_sphere(4, 4, 4, 2, 1.0)
print(grid.sphere_sum(4, 4, 4, 2))
```