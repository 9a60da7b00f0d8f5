"""Cell connectivity of a mesh."""

from __future__ import annotations

from collections import defaultdict
from typing import Iterable, Sequence

from oiseau.cell import Cell, CellKind


class Topology:
    """Cell-to-node connectivity with cell types and cell-to-cell neighbours."""

    def __init__(
        self,
        conn: Iterable[Sequence[int]] = (),
        cell_types: Iterable[Cell] = (),
    ) -> None:
        self.conn: list[list[int]] = [list(nodes) for nodes in conn]
        self.cell_types: list[Cell] = list(cell_types)
        self.e_to_e: list[list[int]] = []
        self.e_to_f: list[list[int]] = []

    def __repr__(self) -> str:
        return f"Topology(n_cells={self.n_cells})"

    @property
    def n_cells(self) -> int:
        """Number of cells."""
        return len(self.conn)

    def calculate_connectivity(self) -> None:
        """Fill ``e_to_e`` and ``e_to_f`` for the triangle cells.

        Faces are matched by their sorted node lists. A boundary face points
        back to its own cell and face index. Only triangles take part, and
        the result is indexed by their position among the triangles.
        """
        faces: list[list[tuple[int, ...]]] = []
        for nodes, cell in zip(self.conn, self.cell_types, strict=True):
            if cell.kind is not CellKind.TRIANGLE:
                continue
            faces.append(
                [tuple(sorted(nodes[v] for v in face)) for face in cell.get_entity_vertices(1)]
            )

        e_to_e = [[i] * len(cell_faces) for i, cell_faces in enumerate(faces)]
        e_to_f = [list(range(len(cell_faces))) for cell_faces in faces]

        occurrences: defaultdict[tuple[int, ...], list[tuple[int, int]]] = defaultdict(list)
        for i, cell_faces in enumerate(faces):
            for j, key in enumerate(cell_faces):
                occurrences[key].append((i, j))

        for group in occurrences.values():
            matched: set[tuple[int, int]] = set()
            for position, (i, j) in enumerate(group):
                if (i, j) in matched:
                    continue
                for ii, jj in group[position + 1:]:
                    if ii > i and (ii, jj) not in matched:
                        e_to_e[i][j], e_to_e[ii][jj] = ii, i
                        e_to_f[i][j], e_to_f[ii][jj] = jj, j
                        matched.update({(i, j), (ii, jj)})
                        break

        self.e_to_e = e_to_e
        self.e_to_f = e_to_f