"""Lattice generation: the fixed 3D grid of sample points and their colors."""

from dataclasses import dataclass
from typing import List, Optional, Tuple

import numpy as np
from numba import njit

from config import cloud as config


@dataclass(frozen=True)
class Color:
    """8-bit RGBA color."""
    r: int
    g: int
    b: int
    a: int = 255

    def as_tuple(self) -> Tuple[int, int, int, int]:
        return (self.r, self.g, self.b, self.a)


@dataclass(frozen=True)
class LatticePoint:
    """
    A single sample of the grid.

    Attributes:
        grid_index: (ix, iy, iz), each in [0, N)
        local_position: (x, y, z) in model space
    """
    grid_index: Tuple[int, int, int]
    local_position: Tuple[float, float, float]


def grid_spacing(grid_count: int) -> Tuple[float, float]:
    """Return (pad, size) for a grid of `grid_count` points per axis."""
    if grid_count <= 0:
        return 0.0, 0.0
    pad = 0.5 / grid_count
    size = (grid_count - 1) * pad
    return pad, size


def flat_index(ix: int, iy: int, iz: int, grid_count: int) -> int:
    """Flattened index of (ix, iy, iz); iz varies fastest."""
    return ix * grid_count * grid_count + iy * grid_count + iz


def channel_value(index: int, grid_count: int) -> int:
    """Color channel for a grid index, truncated like the integer original."""
    return (index * 255) // grid_count


def generate(grid_count: int, z_start: Optional[float] = None) -> Tuple[List[LatticePoint], List[Color]]:
    """
    Build the lattice points and their colors.

    Both lists are in flattened-index order (ix, iy, iz with iz fastest) so
    they can be zipped positionally. A grid_count of 0 yields two empty lists.

    Args:
        grid_count: Points per axis
        z_start: Depth of the near face (defaults to the configured value)
    """
    if z_start is None:
        z_start = config.VIEW["z_start"]
    pad, size = grid_spacing(grid_count)

    points = []
    colors = []
    for ix in range(grid_count):
        for iy in range(grid_count):
            for iz in range(grid_count):
                x = ix * pad - size / 2
                y = iy * pad - size / 2
                z = z_start + iz * pad
                points.append(LatticePoint((ix, iy, iz), (x, y, z)))
                colors.append(Color(
                    channel_value(ix, grid_count),
                    channel_value(iy, grid_count),
                    channel_value(iz, grid_count),
                ))
    return points, colors


# ============================================================================
# ARRAY FORM (used by the transform kernels)
# ============================================================================

@njit(cache=True)
def fill_lattice_numba(
    grid_count: int,
    pad: float,
    size: float,
    indices: np.ndarray,
    offsets: np.ndarray,
    colors: np.ndarray
):
    """Fill index, offset and color arrays in flattened-index order."""
    i = 0
    for ix in range(grid_count):
        for iy in range(grid_count):
            for iz in range(grid_count):
                indices[i, 0] = ix
                indices[i, 1] = iy
                indices[i, 2] = iz

                offsets[i, 0] = ix * pad - size / 2.0
                offsets[i, 1] = iy * pad - size / 2.0
                offsets[i, 2] = iz * pad

                colors[i, 0] = (ix * 255) // grid_count
                colors[i, 1] = (iy * 255) // grid_count
                colors[i, 2] = (iz * 255) // grid_count
                colors[i, 3] = 255
                i += 1


class LatticeGrid:
    """
    Immutable lattice stored as flat arrays.

    `offsets` holds model-space positions with depth measured from the near
    face (iz * pad); the current z_start is added by the transform each frame.
    """

    def __init__(self, grid_count: int):
        if grid_count < 0:
            raise ValueError(f"grid_count must be >= 0, got {grid_count}")

        self.grid_count = grid_count
        self.num_points = grid_count ** 3
        self.pad, self.size = grid_spacing(grid_count)

        self.indices = np.zeros((self.num_points, 3), dtype=np.int32)
        self.offsets = np.zeros((self.num_points, 3), dtype=np.float64)
        self.colors = np.zeros((self.num_points, 4), dtype=np.uint8)

        if self.num_points > 0:
            fill_lattice_numba(
                grid_count, self.pad, self.size,
                self.indices, self.offsets, self.colors
            )

        for arr in (self.indices, self.offsets, self.colors):
            arr.flags.writeable = False

    def local_positions(self, z_start: float) -> np.ndarray:
        """Model-space positions for the given near-face depth."""
        positions = self.offsets.copy()
        positions[:, 2] += z_start
        return positions

    def color_at(self, ix: int, iy: int, iz: int) -> Color:
        r, g, b, a = self.colors[flat_index(ix, iy, iz, self.grid_count)]
        return Color(int(r), int(g), int(b), int(a))

    def __len__(self):
        return self.num_points
