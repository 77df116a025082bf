"""Point-cloud lattice: grid generation and the per-frame transform pipeline."""

from .lattice import Color, LatticePoint, LatticeGrid, generate
from .pipeline import (
    DrawCommand,
    PointCloudPipeline,
    RotationState,
    ViewConfig,
    ViewConfigChannel,
    project_lattice,
)
from .controls import ControlSurface

__all__ = [
    "Color",
    "LatticePoint",
    "LatticeGrid",
    "generate",
    "DrawCommand",
    "PointCloudPipeline",
    "RotationState",
    "ViewConfig",
    "ViewConfigChannel",
    "project_lattice",
    "ControlSurface",
]
