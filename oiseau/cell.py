"""Reference cell shapes and their sub-entity topology."""

from __future__ import annotations

import copy
import enum


class CellKind(enum.IntEnum):
    """Kinds of reference cell."""

    UNDEFINED = 0
    POINT = 1
    INTERVAL = 2
    TRIANGLE = 3
    QUADRILATERAL = 4
    TETRAHEDRON = 5
    HEXAHEDRON = 6


class Cell:
    """A reference cell: its name, dimension, topology and reference geometry.

    ``topology[d][e]`` holds, for entity ``e`` of dimension ``d``, the lists of
    sub-entity indices of each dimension; its first list is the entity's vertices.
    """

    kind: CellKind = CellKind.UNDEFINED
    name: str = ""
    dimension: int = 0
    _TOPOLOGY: list = []
    _COORDINATES: list = []
    _SHAPE: tuple[int, int] = (0, 0)
    _FACET_KIND: CellKind | None = None
    _EDGE_KIND: CellKind | None = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"

    @property
    def facet(self) -> Cell | None:
        """The cell type of this cell's facets, if it has any."""
        return None if self._FACET_KIND is None else get_cell_type(self._FACET_KIND)

    @property
    def edge(self) -> Cell | None:
        """The cell type of this cell's edges, if it has any."""
        return None if self._EDGE_KIND is None else get_cell_type(self._EDGE_KIND)

    @property
    def topology(self) -> list[list[list[list[int]]]]:
        """A copy of the full topology table."""
        return copy.deepcopy(self._TOPOLOGY)

    @property
    def geometry(self) -> tuple[list[float], tuple[int, int]]:
        """Reference vertex coordinates (flat) and their (rows, columns) shape."""
        return list(self._COORDINATES), self._SHAPE

    def get_sub_entities(self, dim0: int, dim1: int) -> list[list[int]]:
        """Sub-entity lists of entity ``dim1`` among the entities of dimension ``dim0``."""
        return [list(entry) for entry in self._TOPOLOGY[dim0][dim1]]

    def get_entity_vertices(self, dim: int) -> list[list[int]]:
        """Vertex lists of every entity of dimension ``dim``."""
        return [list(entity[0]) for entity in self._TOPOLOGY[dim]]

    def num_sub_entities(self, dim: int) -> int:
        """Number of entities of dimension ``dim``; zero above the cell's dimension."""
        if dim <= self.dimension:
            return len(self._TOPOLOGY[dim])
        return 0


class PointCell(Cell):
    kind = CellKind.POINT
    name = "point"
    dimension = 0
    _COORDINATES = [0.0]
    _SHAPE = (1, 1)
    _TOPOLOGY = [
        [
            [[0]],
        ],
    ]


class IntervalCell(Cell):
    kind = CellKind.INTERVAL
    name = "interval"
    dimension = 1
    _COORDINATES = [0.0, 1.0]
    _SHAPE = (2, 1)
    _TOPOLOGY = [
        [
            [[0], [0]],
            [[1], [0]],
        ],
        [
            [[0, 1], [0]],
        ],
    ]


class TriangleCell(Cell):
    kind = CellKind.TRIANGLE
    name = "triangle"
    dimension = 2
    _COORDINATES = [0.0, 0.0, 1.0, 0.0, 0.0, 1.0]
    _SHAPE = (3, 2)
    _TOPOLOGY = [
        [
            [[0], [1, 2], [0]],
            [[1], [0, 2], [0]],
            [[2], [0, 1], [0]],
        ],
        [
            [[1, 2], [0], [0]],
            [[0, 2], [1], [0]],
            [[0, 1], [2], [0]],
        ],
        [
            [[0, 1, 2], [0, 1, 2], [0]],
        ],
    ]
    _FACET_KIND = CellKind.INTERVAL
    _EDGE_KIND = CellKind.POINT


class QuadrilateralCell(Cell):
    kind = CellKind.QUADRILATERAL
    name = "quadrilateral"
    dimension = 2
    _COORDINATES = [0.0, 0.0, 1.0, 0.0, 1.0, 1.0, 0.0, 1.0]
    _SHAPE = (4, 2)
    _TOPOLOGY = [
        [
            [[0], [0, 3], [0]],
            [[1], [0, 1], [0]],
            [[2], [1, 2], [0]],
            [[3], [2, 3], [0]],
        ],
        [
            [[0, 1], [0, 1], [0]],
            [[1, 2], [1, 2], [0]],
            [[2, 3], [2, 3], [0]],
            [[3, 0], [3, 0], [0]],
        ],
        [
            [[0, 1, 2, 3], [0, 1, 2, 3], [0]],
        ],
    ]
    _FACET_KIND = CellKind.INTERVAL
    _EDGE_KIND = CellKind.POINT


class TetrahedronCell(Cell):
    kind = CellKind.TETRAHEDRON
    name = "tetrahedron"
    dimension = 3
    _COORDINATES = [0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 1.0]
    _SHAPE = (4, 3)
    _TOPOLOGY = [
        [
            [[0], [3, 4, 5], [1, 2, 3], [0]],
            [[1], [1, 2, 5], [0, 2, 3], [0]],
            [[2], [0, 2, 4], [0, 1, 3], [0]],
            [[3], [0, 1, 3], [0, 1, 2], [0]],
        ],
        [
            [[2, 3], [0], [0, 1], [0]],
            [[1, 3], [1], [0, 2], [0]],
            [[1, 2], [2], [0, 3], [0]],
            [[0, 3], [3], [1, 2], [0]],
            [[0, 2], [4], [1, 3], [0]],
            [[0, 1], [5], [2, 3], [0]],
        ],
        [
            [[1, 2, 3], [0, 1, 2], [0], [0]],
            [[0, 2, 3], [0, 3, 4], [1], [0]],
            [[0, 1, 3], [1, 3, 5], [2], [0]],
            [[0, 1, 2], [2, 4, 5], [3], [0]],
        ],
        [
            [[0, 1, 2, 3], [0, 1, 2, 3, 4, 5], [0, 1, 2, 3], [0]],
        ],
    ]
    _FACET_KIND = CellKind.TRIANGLE
    _EDGE_KIND = CellKind.INTERVAL


class HexahedronCell(Cell):
    kind = CellKind.HEXAHEDRON
    name = "hexahedron"
    dimension = 3
    _COORDINATES = [
        0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 1.0, 1.0,
        0.0, 0.0, 1.0, 0.0, 0.0, 1.0, 1.0, 0.0,
    ]
    _SHAPE = (8, 3)
    _TOPOLOGY = [
        [
            [[0], [0, 1, 2, 3], [0]],
            [[1], [4, 5, 6, 7], [0]],
            [[2], [0, 1, 5, 4], [0]],
            [[3], [1, 2, 6, 5], [0]],
            [[4], [2, 3, 7, 6], [0]],
            [[5], [3, 0, 4, 7], [0]],
        ],
        [
            [[0, 1], [0, 1], [0]],
            [[1, 2], [1, 2], [0]],
            [[2, 3], [2, 3], [0]],
            [[3, 0], [3, 0], [0]],
            [[4, 5], [4, 5], [0]],
            [[5, 6], [5, 6], [0]],
            [[6, 7], [6, 7], [0]],
            [[7, 4], [7, 4], [0]],
            [[0, 4], [0, 4], [0]],
            [[1, 5], [1, 5], [0]],
            [[2, 6], [2, 6], [0]],
            [[3, 7], [3, 7], [0]],
        ],
        [
            [[0, 1, 2, 3, 4, 5, 6, 7], [0, 1, 2, 3, 4, 5, 6, 7], [0]],
        ],
    ]
    _FACET_KIND = CellKind.QUADRILATERAL
    _EDGE_KIND = CellKind.INTERVAL


_CELL_CLASSES: dict[CellKind, type[Cell]] = {
    CellKind.POINT: PointCell,
    CellKind.INTERVAL: IntervalCell,
    CellKind.TRIANGLE: TriangleCell,
    CellKind.QUADRILATERAL: QuadrilateralCell,
    CellKind.TETRAHEDRON: TetrahedronCell,
    CellKind.HEXAHEDRON: HexahedronCell,
}

_CELL_CACHE: dict[CellKind, Cell] = {}


def get_cell_type(cell_kind: CellKind) -> Cell:
    """Return the shared cell instance for ``cell_kind``."""
    try:
        kind = CellKind(cell_kind)
        cls = _CELL_CLASSES[kind]
    except (ValueError, KeyError):
        raise ValueError("Unknown cell type") from None
    cell = _CELL_CACHE.get(kind)
    if cell is None:
        cell = _CELL_CACHE[kind] = cls()
    return cell