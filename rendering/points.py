"""Point sprite rendering for the projected lattice."""

from typing import Optional, Tuple

import numpy as np
from OpenGL.GL import *
from OpenGL.arrays import vbo


def select_drawable(
    screen: np.ndarray,
    colors: np.ndarray,
    mask: Optional[np.ndarray] = None
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Pick the rows to draw, keeping index order.

    Rows where `mask` is False are dropped. Without a mask, rows with a
    non-finite coordinate are dropped.
    """
    if mask is None:
        mask = np.isfinite(screen).all(axis=1)
    positions = np.ascontiguousarray(screen[mask], dtype=np.float32)
    point_colors = np.ascontiguousarray(colors[mask], dtype=np.uint8)
    return positions, point_colors


class PointRenderer:
    """Draws screen-space points as round sprites, in the order given."""

    def __init__(self):
        self._vbo_positions = None
        self._vbo_colors = None
        self._vbos_initialized = False
        self._vbos_failed = False
        self._drawn_count = 0

    @property
    def drawn_count(self) -> int:
        """Points drawn in the last frame (non-finite points are skipped)."""
        return self._drawn_count

    def _init_vbos(self, positions: np.ndarray, colors: np.ndarray):
        """Initialize VBOs for rendering."""
        try:
            self._vbo_positions = vbo.VBO(positions, usage=GL_DYNAMIC_DRAW)
            self._vbo_colors = vbo.VBO(colors, usage=GL_DYNAMIC_DRAW)
            self._vbos_initialized = True
        except Exception as e:
            print(f"[Render] VBO init failed: {e}")
            self._vbos_initialized = False
            self._vbos_failed = True

    def draw(self, screen: np.ndarray, colors: np.ndarray, radius: float,
             mask: Optional[np.ndarray] = None):
        """
        Draw one circle per row.

        Args:
            screen: (n, 2) coordinates in a viewport centered on the origin
            colors: (n, 4) uint8 RGBA, index-aligned with `screen`
            radius: Circle radius in pixels
            mask: Rows safe to draw, e.g. PointCloudPipeline.finite_mask()
        """
        positions, point_colors = select_drawable(screen, colors, mask)
        self._drawn_count = len(positions)

        if self._drawn_count == 0:
            return

        if not self._vbos_initialized and not self._vbos_failed:
            self._init_vbos(positions, point_colors)

        glEnable(GL_POINT_SMOOTH)
        glEnable(GL_BLEND)
        glBlendFunc(GL_SRC_ALPHA, GL_ONE_MINUS_SRC_ALPHA)
        glPointSize(radius * 2.0)

        if self._vbos_initialized:
            # VBO path
            self._vbo_positions.set_array(positions)
            self._vbo_colors.set_array(point_colors)

            self._vbo_positions.bind()
            glEnableClientState(GL_VERTEX_ARRAY)
            glVertexPointer(2, GL_FLOAT, 0, None)

            self._vbo_colors.bind()
            glEnableClientState(GL_COLOR_ARRAY)
            glColorPointer(4, GL_UNSIGNED_BYTE, 0, None)

            glDrawArrays(GL_POINTS, 0, self._drawn_count)

            self._vbo_positions.unbind()
            self._vbo_colors.unbind()
            glDisableClientState(GL_VERTEX_ARRAY)
            glDisableClientState(GL_COLOR_ARRAY)
        else:
            # Fallback
            glEnableClientState(GL_VERTEX_ARRAY)
            glEnableClientState(GL_COLOR_ARRAY)
            glVertexPointer(2, GL_FLOAT, 0, positions)
            glColorPointer(4, GL_UNSIGNED_BYTE, 0, point_colors)
            glDrawArrays(GL_POINTS, 0, self._drawn_count)
            glDisableClientState(GL_VERTEX_ARRAY)
            glDisableClientState(GL_COLOR_ARRAY)

        glDisable(GL_BLEND)
        glDisable(GL_POINT_SMOOTH)
