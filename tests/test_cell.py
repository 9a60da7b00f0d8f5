import pytest

from oiseau.cell import (
    CellKind,
    HexahedronCell,
    IntervalCell,
    PointCell,
    TetrahedronCell,
    TriangleCell,
    get_cell_type,
)


def test_triangle_cell():
    tricell = TriangleCell()
    assert tricell.name == "triangle"
    assert tricell.facet.name == "interval"
    assert tricell.edge.name == "point"
    assert tricell.dimension == 2


def test_get_cell_type_is_cached():
    first = get_cell_type(CellKind.TRIANGLE)
    second = get_cell_type(CellKind.TRIANGLE)
    assert first is second
    assert first.kind is CellKind.TRIANGLE


def test_get_cell_type_maps_kinds():
    point = get_cell_type(CellKind.POINT)
    hexa = get_cell_type(CellKind.HEXAHEDRON)
    assert isinstance(point, PointCell)
    assert point.name == "point"
    assert point.kind is CellKind.POINT
    assert point.dimension == 0
    assert isinstance(hexa, HexahedronCell)
    assert hexa.name == "hexahedron"
    assert hexa.kind is CellKind.HEXAHEDRON
    assert hexa.dimension == 3


@pytest.mark.parametrize("kind", [CellKind.UNDEFINED, 420])
def test_get_cell_type_unknown(kind):
    with pytest.raises(ValueError):
        get_cell_type(kind)


def test_facet_is_shared_instance():
    assert TriangleCell().facet is get_cell_type(CellKind.INTERVAL)


def test_tetrahedron_facet_and_edge():
    tet = TetrahedronCell()
    assert tet.facet.name == "triangle"
    assert tet.edge.name == "interval"


def test_interval_has_no_facet():
    assert IntervalCell().facet is None
    assert IntervalCell().edge is None


def test_triangle_entity_vertices():
    assert TriangleCell().get_entity_vertices(1) == [[1, 2], [0, 2], [0, 1]]
    assert TriangleCell().get_entity_vertices(2) == [[0, 1, 2]]


def test_get_sub_entities():
    assert TriangleCell().get_sub_entities(1, 0) == [[1, 2], [0], [0]]


def test_num_sub_entities():
    tet = TetrahedronCell()
    assert tet.num_sub_entities(0) == 4
    assert tet.num_sub_entities(1) == 6
    assert tet.num_sub_entities(2) == 4
    assert tet.num_sub_entities(3) == 1
    assert TriangleCell().num_sub_entities(3) == 0


def test_returned_lists_are_copies():
    cell = TriangleCell()
    vertices = cell.get_entity_vertices(1)
    vertices[0].append(99)
    assert cell.get_entity_vertices(1)[0] == [1, 2]
    topo = cell.topology
    topo[0].clear()
    assert cell.num_sub_entities(0) == 3


def test_geometry_shape_matches_triangle():
    coords, shape = TriangleCell().geometry
    assert shape == (3, 2)
    assert len(coords) == shape[0] * shape[1]