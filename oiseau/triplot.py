"""Draw the facets of a mesh with matplotlib."""

from __future__ import annotations

from typing import Any

from oiseau.mesh import Mesh


def triplot(ax: Any, mesh: Mesh) -> list[Any]:
    """Draw every facet of every cell of ``mesh`` as a black line on ``ax``.

    Uses the first two coordinates of each node. When ``ax`` is None the
    current matplotlib axes are used. Returns the lines that were drawn.
    """
    if ax is None:
        import matplotlib.pyplot as plt

        ax = plt.gca()

    geometry = mesh.geometry
    topology = mesh.topology
    lines: list[Any] = []
    for nodes, cell in zip(topology.conn, topology.cell_types, strict=True):
        for face in cell.get_entity_vertices(1):
            points = [geometry.x_at(nodes[v]) for v in face]
            xs = [point[0] for point in points]
            ys = [point[1] for point in points]
            lines.extend(ax.plot(xs, ys, color="k"))
    return lines