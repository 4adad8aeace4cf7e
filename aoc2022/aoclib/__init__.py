"""Geometry helpers shared by the grid-based puzzles."""

from .grid import DenseGrid
from .point import ADJACENT, EAST, NORTH, ORTHOGONAL, SOUTH, WEST, Point

__all__ = ["ADJACENT", "DenseGrid", "EAST", "NORTH", "ORTHOGONAL", "Point", "SOUTH", "WEST"]
