"""Reference cells, mesh topology and geometry, jagged arrays and mesh plotting."""

__version__ = "0.1.0"

__all__ = ["cell", "geometry", "topology", "mesh", "jagged_array", "helper", "triplot"]