"""Per-frame transform of the lattice: rotation, perspective divide and screen mapping."""

import math
from dataclasses import dataclass
from typing import List, Optional, Tuple

import numpy as np
from numba import njit, prange

from config import cloud as config
from .lattice import Color, LatticeGrid


# ============================================================================
# STATE
# ============================================================================

@dataclass(frozen=True)
class ViewConfig:
    """
    Snapshot of the externally tunable view parameters.

    Attributes:
        z_start: Distance from the viewer to the near face of the grid
        rot_speed_x: Angular speed about the X axis (rad/s)
        rot_speed_y: Angular speed about the Y axis (rad/s)

    Values are not clamped; out-of-range values simply look unusual.
    """
    z_start: float = config.VIEW["z_start"]
    rot_speed_x: float = config.VIEW["rot_speed_x"]
    rot_speed_y: float = config.VIEW["rot_speed_y"]


class ViewConfigChannel:
    """
    One-directional channel for ViewConfig snapshots.

    The control surface publishes, the pipeline reads the latest snapshot
    at the start of each frame.
    """

    def __init__(self, initial: Optional[ViewConfig] = None):
        self._latest = initial if initial is not None else ViewConfig()
        self._version = 0

    def publish(self, view: ViewConfig):
        self._latest = view
        self._version += 1

    @property
    def latest(self) -> ViewConfig:
        return self._latest

    @property
    def version(self) -> int:
        """Number of snapshots published since creation."""
        return self._version


@dataclass
class RotationState:
    """Accumulated rotation angles in radians. Never wrapped."""
    angle_x: float = 0.0
    angle_y: float = 0.0

    def advance(self, view: ViewConfig, dt: float):
        """Integrate the angular speeds over `dt` seconds."""
        self.angle_x += view.rot_speed_x * dt
        self.angle_y += view.rot_speed_y * dt

    def reset(self):
        self.angle_x = 0.0
        self.angle_y = 0.0


@dataclass(frozen=True)
class DrawCommand:
    """A filled circle for the host to draw."""
    x: float
    y: float
    radius: float
    color: Color


# ============================================================================
# NUMBA JIT-COMPILED KERNELS
# ============================================================================

# error_model="numpy" keeps x / 0 as inf/nan instead of raising

@njit(parallel=True, cache=True, error_model="numpy")
def transform_points_numba(
    offsets: np.ndarray,
    z_start: float,
    size: float,
    angle_x: float,
    angle_y: float,
    rotated: np.ndarray,
    projected: np.ndarray,
    num_points: int
):
    """Rotate about X then about Y around the grid center, then divide by depth."""
    cx = 0.0
    cy = 0.0
    cz = z_start + size / 2.0

    for i in prange(num_points):
        x = offsets[i, 0]
        y = offsets[i, 1]
        z = z_start + offsets[i, 2]

        # X axis: rotate (y, z)
        dy = y - cy
        dz = z - cz
        a = math.atan2(dz, dy)
        m = math.sqrt(dy * dy + dz * dz)
        y = math.cos(a + angle_x) * m + cy
        z = math.sin(a + angle_x) * m + cz

        # Y axis: rotate (x, z) using the z from the X rotation
        dx = x - cx
        dz = z - cz
        a = math.atan2(dz, dx)
        m = math.sqrt(dx * dx + dz * dz)
        x = math.cos(a + angle_y) * m + cx
        z = math.sin(a + angle_y) * m + cz

        rotated[i, 0] = x
        rotated[i, 1] = y
        rotated[i, 2] = z

        # Perspective divide; z == 0 is a known singularity
        projected[i, 0] = x / z
        projected[i, 1] = y / z


@njit(parallel=True, cache=True)
def map_to_screen_numba(
    projected: np.ndarray,
    width: float,
    height: float,
    screen: np.ndarray,
    num_points: int
):
    """Map normalized coordinates to a width x height viewport centered on the origin."""
    half_w = width / 2.0
    half_h = height / 2.0
    for i in prange(num_points):
        screen[i, 0] = (projected[i, 0] + 1.0) / 2.0 * width - half_w
        screen[i, 1] = (projected[i, 1] + 1.0) / 2.0 * height - half_h


def project_lattice(
    grid: LatticeGrid,
    angle_x: float,
    angle_y: float,
    z_start: float
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Transform a whole lattice into fresh arrays.

    Returns:
        (rotated, projected): (N³, 3) rotated positions and (N³, 2)
        perspective-divided coordinates, both in flattened-index order
    """
    rotated = np.zeros((grid.num_points, 3), dtype=np.float64)
    projected = np.zeros((grid.num_points, 2), dtype=np.float64)
    if grid.num_points > 0:
        transform_points_numba(
            grid.offsets, float(z_start), float(grid.size),
            float(angle_x), float(angle_y),
            rotated, projected, grid.num_points
        )
    return rotated, projected


# ============================================================================
# PIPELINE
# ============================================================================

class PointCloudPipeline:
    """
    Owns the lattice, the rotation state and the per-frame output buffers.

    A frame is `update(dt)` followed by `transform()` and `map_to_screen()`.
    Output rows are always in flattened-index order.
    """

    def __init__(self, grid_count: Optional[int] = None,
                 channel: Optional[ViewConfigChannel] = None):
        if grid_count is None:
            grid_count = config.GRID["count"]

        self.channel = channel if channel is not None else ViewConfigChannel()
        self.view = self.channel.latest
        self.state = RotationState()
        self.paused = False

        self._allocate(grid_count)
        self._warmup_numba()

        print(f"[Cloud] Generated {self.num_points:,} lattice points (N={grid_count})")

    def _allocate(self, grid_count: int):
        self.grid = LatticeGrid(grid_count)
        n = self.grid.num_points
        self.rotated = np.zeros((n, 3), dtype=np.float64)
        self.projected = np.zeros((n, 2), dtype=np.float64)
        self.screen = np.zeros((n, 2), dtype=np.float32)

    def _warmup_numba(self):
        """Pre-compile Numba functions."""
        grid = LatticeGrid(2)
        rotated, projected = project_lattice(grid, 0.1, 0.2, 0.4)
        screen = np.zeros((grid.num_points, 2), dtype=np.float32)
        map_to_screen_numba(projected, 100.0, 100.0, screen, grid.num_points)

    @property
    def num_points(self) -> int:
        return self.grid.num_points

    @property
    def grid_count(self) -> int:
        return self.grid.grid_count

    @property
    def colors(self) -> np.ndarray:
        """(N³, 4) uint8 RGBA, precomputed once per grid."""
        return self.grid.colors

    def set_grid_count(self, grid_count: int):
        """Regenerate the lattice if the resolution changed. Rotation state is kept."""
        if grid_count < 0:
            raise ValueError(f"grid_count must be >= 0, got {grid_count}")
        if grid_count == self.grid.grid_count:
            return
        self._allocate(grid_count)
        print(f"[Cloud] Regenerated lattice: {self.num_points:,} points (N={grid_count})")

    def update(self, dt: float):
        """Pull the latest view snapshot and advance the angles by `dt` seconds."""
        self.view = self.channel.latest
        if not self.paused:
            self.state.advance(self.view, dt)

    def transform(self) -> np.ndarray:
        """Rotate and project every lattice point. Returns the (N³, 2) projected buffer."""
        if self.num_points > 0:
            transform_points_numba(
                self.grid.offsets,
                float(self.view.z_start),
                float(self.grid.size),
                float(self.state.angle_x),
                float(self.state.angle_y),
                self.rotated,
                self.projected,
                self.num_points
            )
        return self.projected

    def map_to_screen(self, width: float, height: float) -> np.ndarray:
        """Map the projected buffer into the viewport. Returns the (N³, 2) screen buffer."""
        if self.num_points > 0:
            map_to_screen_numba(
                self.projected, float(width), float(height),
                self.screen, self.num_points
            )
        return self.screen

    def step(self, dt: float, width: float, height: float) -> np.ndarray:
        """Run a whole frame and return screen coordinates."""
        self.update(dt)
        self.transform()
        return self.map_to_screen(width, height)

    def finite_mask(self) -> np.ndarray:
        """True where the screen coordinates are finite (drawable)."""
        return np.isfinite(self.screen).all(axis=1)

    def draw_commands(self, radius: Optional[float] = None) -> List[DrawCommand]:
        """Current screen buffer as draw commands, in flattened-index order."""
        if radius is None:
            radius = config.VIEW["circle_radius"]
        commands = []
        for (x, y), (r, g, b, a) in zip(self.screen, self.grid.colors):
            commands.append(DrawCommand(
                float(x), float(y), radius,
                Color(int(r), int(g), int(b), int(a))
            ))
        return commands
