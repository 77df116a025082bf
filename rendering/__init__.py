"""Rendering components for the point-cloud lattice."""

from .points import PointRenderer, select_drawable
from .text import TextRenderer

__all__ = ["PointRenderer", "TextRenderer", "select_drawable"]
