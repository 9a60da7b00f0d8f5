# oiseau

Building blocks for unstructured meshes:

- **Reference cells** (`oiseau.cell`): `PointCell`, `IntervalCell`,
  `TriangleCell`, `QuadrilateralCell`, `TetrahedronCell` and `HexahedronCell`,
  each with a `kind` (`CellKind`), `name`, `dimension`, sub-entity `topology`,
  reference `geometry`, and `facet`/`edge` cell types. `get_cell_type(kind)`
  returns one shared instance per `CellKind` and raises `ValueError` for an
  unknown kind. `get_entity_vertices(dim)`, `get_sub_entities(dim0, dim1)` and
  `num_sub_entities(dim)` query the topology table.
- **Geometry** (`oiseau.geometry`): node coordinates stored flat, `dim` values
  per node (3 by default). `Geometry.x` is a writable view of all coordinates;
  `Geometry.x_at(pos)` is a writable view of one node's coordinates and raises
  `IndexError` for a node out of range.
- **Topology** (`oiseau.topology`): cell-to-node connectivity (`conn`) and cell
  types (`cell_types`). `Topology.calculate_connectivity()` fills the
  neighbour tables `e_to_e` (neighbouring cell across each face) and `e_to_f`
  (matching face index in that cell). A boundary face points back to its own
  cell and face.
- **Mesh** (`oiseau.mesh`): a dataclass `Mesh` holding a `topology` and a
  `geometry`.
- **JaggedArray** (`oiseau.jagged_array`): rows of varying length, with
  bounds-checked access (`at`, `set_at`, `num_cols`), row insertion and
  removal, element appending, iteration over rows and a readable `str()`.
- **reverse_map** (`oiseau.helper`): swap the keys and values of a mapping;
  where values repeat, the last key wins.
- **triplot** (`oiseau.triplot`): draw every facet of every cell as a black
  line on a matplotlib axes (the current axes when `ax` is `None`), using the
  first two coordinates of each node, and return the drawn lines.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
import matplotlib.pyplot as plt

from oiseau.cell import CellKind, get_cell_type
from oiseau.geometry import Geometry
from oiseau.mesh import Mesh
from oiseau.topology import Topology
from oiseau.triplot import triplot

triangle = get_cell_type(CellKind.TRIANGLE)
topology = Topology([[0, 1, 2], [1, 3, 2]], [triangle, triangle])
geometry = Geometry([0.0, 0.0, 1.0, 0.0, 0.0, 1.0, 1.0, 1.0], 2)
mesh = Mesh(topology, geometry)

mesh.topology.calculate_connectivity()
print(mesh.topology.e_to_e)  # [[1, 0, 0], [1, 1, 0]]
print(mesh.topology.e_to_f)  # [[2, 1, 2], [0, 1, 0]]

fig, ax = plt.subplots()
triplot(ax, mesh)
fig.savefig("mesh.png")
```

### Jagged arrays

```python
from oiseau.jagged_array import JaggedArray

rows = JaggedArray([[1, 2], [3, 4, 5], [6]])
rows.add_row([7, 8])
rows.insert_row(1, [10])
rows.add_element(0, 9)
print(rows.at(0, 2))   # 9
print(rows.num_rows)   # 5
print(rows)
```

`JaggedArray(3)` makes three empty rows. Out-of-range row or column indices
raise `IndexError`.

## What it does not do

- It reads no mesh files; meshes are built in code from connectivity lists and
  coordinates.
- `calculate_connectivity()` only considers triangle cells; other cells are
  skipped, and the neighbour tables are indexed by a triangle's position among
  the triangles.
- It provides no finite-element operators, quadrature rules or solvers, and no
  command-line program.