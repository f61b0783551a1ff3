import math

import pytest

from drago3d.grids import Grid3D, distance3d


def make_grid(size=5):
    return Grid3D(size, size, size)


def ramp_grid(size=5):
    return Grid3D(size, size, size, [float(v) for v in range(size ** 3)])


def test_distance3d_pythagorean():
    assert distance3d(0, 0, 0, 3, 4, 0) == pytest.approx(5.0)


def test_distance3d_symmetric():
    assert distance3d(1, 2, 3, 4, 6, 8) == pytest.approx(distance3d(4, 6, 8, 1, 2, 3))


def test_index_layout():
    grid = Grid3D(4, 3, 2)
    assert grid.index(0, 0, 0) == 0
    assert grid.index(1, 0, 0) == 1
    assert grid.index(0, 1, 0) == grid.depth
    assert grid.index(0, 0, 1) == grid.height * grid.depth


def test_index_out_of_range():
    grid = make_grid()
    with pytest.raises(IndexError):
        grid.index(0, 0, 5)
    with pytest.raises(IndexError):
        grid.index(-1, 0, 0)


def test_bad_construction():
    with pytest.raises(ValueError):
        Grid3D(0, 1, 1)
    with pytest.raises(ValueError):
        Grid3D(2, 2, 2, [1.0, 2.0])


def test_set_region_and_stats():
    grid = make_grid()
    grid.set_region(1, 1, 1, 2, 2, 2, 3.5)
    assert grid.region_min(1, 1, 1, 2, 2, 2) == 3.5
    assert grid.region_max(1, 1, 1, 2, 2, 2) == 3.5
    assert grid.region_mean(1, 1, 1, 2, 2, 2) == pytest.approx(3.5)
    assert grid.region_sum(1, 1, 1, 2, 2, 2) == pytest.approx(3.5 * 8)
    assert grid[0, 0, 0] == 0.0
    assert grid[3, 3, 3] == 0.0


def test_region_invariants_on_ramp():
    grid = ramp_grid()
    mean = grid.region_mean(0, 1, 0, 3, 4, 2)
    low = grid.region_min(0, 1, 0, 3, 4, 2)
    high = grid.region_max(0, 1, 0, 3, 4, 2)
    total = grid.region_sum(0, 1, 0, 3, 4, 2)
    assert low <= mean <= high
    assert total == pytest.approx(mean * 4 * 4 * 3)


def test_empty_region_min_max_are_infinite():
    grid = make_grid()
    assert grid.region_min(3, 0, 0, 2, 0, 0) == math.inf
    assert grid.region_max(3, 0, 0, 2, 0, 0) == -math.inf


def test_empty_region_mean_raises():
    grid = make_grid()
    with pytest.raises(ValueError):
        grid.region_mean(3, 0, 0, 2, 0, 0)


def test_region_standard_deviation_zero_and_negative():
    grid = make_grid()
    assert grid.region_standard_deviation(0, 0, 0, 1, 1, 1) == 0.0
    grid.set_region(0, 0, 0, 1, 1, 1, -2.0)
    assert math.isnan(grid.region_standard_deviation(0, 0, 0, 1, 1, 1))


def test_sphere_radius_one_counts_face_neighbours():
    grid = make_grid()
    grid.set_sphere(2, 2, 2, 1.0, 1.0)
    assert grid.region_sum(0, 0, 0, 4, 4, 4) == pytest.approx(7.0)
    assert grid.sphere_sum(2, 2, 2, 1.0) == pytest.approx(7.0)
    assert grid[3, 3, 2] == 0.0


def test_sphere_radius_zero_is_centre():
    grid = ramp_grid()
    centre = grid[2, 2, 2]
    assert grid.sphere_sum(2, 2, 2, 0.0) == centre
    assert grid.sphere_mean(2, 2, 2, 0.0) == centre
    assert grid.sphere_min(2, 2, 2, 0.0) == centre
    assert grid.sphere_max(2, 2, 2, 0.0) == centre


def test_sphere_stats_invariants():
    grid = ramp_grid()
    mean = grid.sphere_mean(2, 2, 2, 1.5)
    assert grid.sphere_min(2, 2, 2, 1.5) <= mean <= grid.sphere_max(2, 2, 2, 1.5)


def test_sphere_standard_deviation_zero():
    grid = make_grid()
    assert grid.sphere_standard_deviation(2, 2, 2, 1.0) == 0.0


def test_negative_radius_sphere():
    grid = make_grid()
    assert grid.sphere_sum(2, 2, 2, -1.0) == 0
    with pytest.raises(ValueError):
        grid.sphere_mean(2, 2, 2, -1.0)


def test_sphere_outside_grid_raises():
    grid = make_grid()
    with pytest.raises(IndexError):
        grid.set_sphere(0, 0, 0, 1.0, 1.0)


def test_add_and_multiply_region():
    grid = ramp_grid()
    before = grid.region_sum(1, 1, 1, 3, 3, 3)
    grid.add_region(1, 1, 1, 3, 3, 3, 2.0)
    assert grid.region_sum(1, 1, 1, 3, 3, 3) == pytest.approx(before + 2.0 * 27)
    after_add = grid.region_sum(1, 1, 1, 3, 3, 3)
    grid.multiply_region(1, 1, 1, 3, 3, 3, 3.0)
    assert grid.region_sum(1, 1, 1, 3, 3, 3) == pytest.approx(after_add * 3.0)


def test_add_and_multiply_sphere():
    grid = make_grid()
    grid.add_sphere(2, 2, 2, 1.0, 4.0)
    assert grid.sphere_min(2, 2, 2, 1.0) == 4.0
    grid.multiply_sphere(2, 2, 2, 1.0, 0.5)
    assert grid.sphere_max(2, 2, 2, 1.0) == 2.0
    assert grid[0, 0, 0] == 0.0


def test_set_grid_region_copies_with_offset():
    source = ramp_grid()
    target = make_grid()
    target.set_grid_region(0, 0, 0, 1, 1, 1, source, 2, 3, 1)
    for x in range(2):
        for y in range(2):
            for z in range(2):
                assert target[x, y, z] == source[x + 2, y + 3, z + 1]


def test_set_grid_sphere_copies():
    source = ramp_grid()
    target = make_grid()
    target.set_grid_sphere(2, 2, 2, 1.0, source, 2, 2, 2)
    assert target.sphere_sum(2, 2, 2, 1.0) == pytest.approx(
        source.sphere_sum(2, 2, 2, 1.0)
    )


def test_add_grid_region_doubles():
    source = ramp_grid()
    target = ramp_grid()
    target.add_grid_region(0, 0, 0, 4, 4, 4, source, 0, 0, 0)
    assert target.values == [2 * v for v in source.values]


def test_add_grid_sphere():
    source = ramp_grid()
    target = ramp_grid()
    target.add_grid_sphere(2, 2, 2, 1.0, source, 2, 2, 2)
    assert target.sphere_sum(2, 2, 2, 1.0) == pytest.approx(
        2 * source.sphere_sum(2, 2, 2, 1.0)
    )


def test_multiply_grid_region_and_sphere():
    source = ramp_grid()
    target = Grid3D(5, 5, 5, [1.0] * 125)
    target.multiply_grid_region(0, 0, 0, 1, 1, 1, source, 1, 1, 1)
    assert target[0, 0, 0] == source[1, 1, 1]
    assert target[1, 1, 1] == source[2, 2, 2]
    other = Grid3D(5, 5, 5, [1.0] * 125)
    other.multiply_grid_sphere(2, 2, 2, 1.0, source, 2, 2, 2)
    assert other.sphere_sum(2, 2, 2, 1.0) == pytest.approx(
        source.sphere_sum(2, 2, 2, 1.0)
    )


def test_lerp_region_endpoints():
    grid = ramp_grid()
    original = list(grid.values)
    grid.lerp_region(0, 0, 0, 4, 4, 4, 10.0, 0.0)
    assert grid.values == original
    grid.lerp_region(0, 0, 0, 4, 4, 4, 10.0, 1.0)
    assert grid.region_min(0, 0, 0, 4, 4, 4) == pytest.approx(10.0)
    assert grid.region_max(0, 0, 0, 4, 4, 4) == pytest.approx(10.0)


def test_lerp_region_midpoint():
    grid = make_grid()
    grid.set_region(0, 0, 0, 1, 1, 1, 2.0)
    grid.lerp_region(0, 0, 0, 1, 1, 1, 6.0, 0.5)
    assert grid.region_mean(0, 0, 0, 1, 1, 1) == pytest.approx((2.0 + 6.0) / 2)


def test_lerp_sphere():
    grid = make_grid()
    grid.lerp_sphere(2, 2, 2, 1.0, 8.0, 1.0)
    assert grid.sphere_min(2, 2, 2, 1.0) == pytest.approx(8.0)
    assert grid[0, 0, 0] == 0.0


def test_lerp_grid_region_and_sphere():
    source = ramp_grid()
    target = make_grid()
    target.lerp_grid_region(0, 0, 0, 4, 4, 4, source, 0, 0, 0, 1.0)
    assert target.values == pytest.approx(source.values)
    half = make_grid()
    half.lerp_grid_sphere(2, 2, 2, 1.0, source, 2, 2, 2, 0.5)
    assert half.sphere_sum(2, 2, 2, 1.0) == pytest.approx(
        source.sphere_sum(2, 2, 2, 1.0) / 2
    )