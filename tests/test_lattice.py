"""Tests for lattice generation."""

import numpy as np
import pytest

from pointcloud.lattice import (
    Color,
    LatticeGrid,
    channel_value,
    flat_index,
    generate,
    grid_spacing,
)


@pytest.mark.parametrize("n", [0, 1, 2, 3, 5, 10])
def test_generate_produces_n_cubed_aligned_lists(n):
    """generate(N) yields N³ points and N³ colors."""
    points, colors = generate(n)

    assert len(points) == n ** 3
    assert len(colors) == n ** 3


def test_generate_zero_is_empty():
    """A grid_count of 0 is an empty lattice, not an error."""
    assert generate(0) == ([], [])


def test_generate_flattened_index_order():
    """Point at list position ix*N² + iy*N + iz has grid_index (ix, iy, iz)."""
    n = 4
    points, colors = generate(n)

    for ix in range(n):
        for iy in range(n):
            for iz in range(n):
                i = flat_index(ix, iy, iz, n)
                assert points[i].grid_index == (ix, iy, iz)
                assert colors[i] == Color(
                    channel_value(ix, n), channel_value(iy, n), channel_value(iz, n)
                )


def test_color_example_for_grid_of_ten():
    """Point (3, 7, 2) in a 10-grid is (76, 178, 51), opaque."""
    _, colors = generate(10)

    color = colors[flat_index(3, 7, 2, 10)]
    assert color.as_tuple() == (76, 178, 51, 255)


def test_color_uses_integer_truncation():
    """255/7 = 36.43 truncates to 36, never rounds up."""
    assert channel_value(1, 7) == 36
    assert channel_value(6, 7) == 218
    assert channel_value(0, 7) == 0


def test_grid_spacing_for_two():
    """pad = 0.5/N and size = (N-1)*pad."""
    pad, size = grid_spacing(2)

    assert pad == 0.25
    assert size == 0.25


def test_local_position_scenario():
    """N=2, z_start=0.5: point (0,0,0) sits at (-0.125, -0.125, 0.5)."""
    points, _ = generate(2, z_start=0.5)

    assert points[0].grid_index == (0, 0, 0)
    assert points[0].local_position == (-0.125, -0.125, 0.5)
    assert points[-1].local_position == (0.125, 0.125, 0.75)


def test_lattice_grid_matches_generate():
    """Array form agrees with the object form element by element."""
    n = 5
    z_start = 0.3
    points, colors = generate(n, z_start=z_start)
    grid = LatticeGrid(n)

    np.testing.assert_array_equal(grid.indices, [p.grid_index for p in points])
    np.testing.assert_allclose(
        grid.local_positions(z_start),
        [p.local_position for p in points],
        atol=1e-15,
    )
    np.testing.assert_array_equal(grid.colors, [c.as_tuple() for c in colors])


def test_lattice_grid_color_lookup():
    """color_at finds the precomputed color by flattened index."""
    grid = LatticeGrid(10)

    assert grid.color_at(3, 7, 2) == Color(76, 178, 51, 255)
    assert len(grid) == 1000


def test_lattice_grid_arrays_are_read_only():
    """The lattice never changes once built."""
    grid = LatticeGrid(3)

    with pytest.raises(ValueError):
        grid.offsets[0, 0] = 1.0
    with pytest.raises(ValueError):
        grid.colors[0, 0] = 1


def test_lattice_grid_rejects_negative_count():
    """Negative resolutions are a programming error."""
    with pytest.raises(ValueError):
        LatticeGrid(-1)


def test_lattice_grid_empty():
    """A zero grid has empty, correctly shaped arrays."""
    grid = LatticeGrid(0)

    assert grid.offsets.shape == (0, 3)
    assert grid.colors.shape == (0, 4)
