import pytest
from matplotlib.figure import Figure

from oiseau.cell import CellKind, get_cell_type
from oiseau.geometry import Geometry
from oiseau.mesh import Mesh
from oiseau.topology import Topology
from oiseau.triplot import triplot


def _axes():
    return Figure().add_subplot()


def _two_triangles():
    coords = [0.0, 0.0, 1.0, 0.0, 0.0, 1.0, 1.0, 1.0]
    triangle = get_cell_type(CellKind.TRIANGLE)
    topology = Topology([[0, 1, 2], [1, 3, 2]], [triangle, triangle])
    return Mesh(topology, Geometry(coords, dim=2))


def test_one_line_per_facet():
    ax = _axes()
    lines = triplot(ax, _two_triangles())
    assert len(lines) == 6
    assert len(ax.get_lines()) == 6


def test_lines_follow_facet_vertices():
    mesh = _two_triangles()
    lines = triplot(_axes(), mesh)
    expected = []
    for nodes, cell in zip(mesh.topology.conn, mesh.topology.cell_types):
        for face in cell.get_entity_vertices(1):
            expected.append(
                (
                    [mesh.geometry.x_at(nodes[v])[0] for v in face],
                    [mesh.geometry.x_at(nodes[v])[1] for v in face],
                )
            )
    drawn = [(list(line.get_xdata()), list(line.get_ydata())) for line in lines]
    assert drawn == expected


def test_first_triangle_facet_is_opposite_vertex_zero():
    lines = triplot(_axes(), _two_triangles())
    assert list(lines[0].get_xdata()) == [1.0, 0.0]
    assert list(lines[0].get_ydata()) == [0.0, 1.0]


def test_lines_are_black():
    lines = triplot(_axes(), _two_triangles())
    assert all(line.get_color() == "k" for line in lines)


def test_quadrilateral_draws_four_edges():
    quad = get_cell_type(CellKind.QUADRILATERAL)
    coords = [0.0, 0.0, 1.0, 0.0, 1.0, 1.0, 0.0, 1.0]
    mesh = Mesh(Topology([[0, 1, 2, 3]], [quad]), Geometry(coords, dim=2))
    lines = triplot(_axes(), mesh)
    assert len(lines) == 4
    assert list(lines[3].get_xdata()) == [coords[6], coords[0]]


def test_empty_mesh_draws_nothing():
    ax = _axes()
    assert triplot(ax, Mesh()) == []
    assert ax.get_lines() == []


def test_mismatched_cell_types_rejected():
    triangle = get_cell_type(CellKind.TRIANGLE)
    mesh = Mesh(Topology([[0, 1, 2], [0, 1, 2]], [triangle]), Geometry([0.0] * 6, dim=2))
    with pytest.raises(ValueError):
        triplot(_axes(), mesh)