"""Node coordinates of a mesh."""

from __future__ import annotations

from array import array
from typing import Iterable


class Geometry:
    """Flat node coordinates, ``dim`` values per node."""

    def __init__(self, x: Iterable[float] = (), dim: int = 3) -> None:
        if dim < 1:
            raise ValueError("dimension must be positive")
        self._x = array("d", x)
        self._dim = dim

    def __repr__(self) -> str:
        return f"Geometry(x={self._x.tolist()!r}, dim={self._dim})"

    @property
    def x(self) -> memoryview:
        """A writable view of all coordinates."""
        return memoryview(self._x)

    @property
    def dim(self) -> int:
        """Number of coordinates per node."""
        return self._dim

    def x_at(self, pos: int) -> memoryview:
        """A writable view of the coordinates of node ``pos``."""
        start = pos * self._dim
        if pos < 0 or start + self._dim > len(self._x):
            raise IndexError(f"node index {pos} out of range")
        return memoryview(self._x)[start:start + self._dim]