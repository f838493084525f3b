"""Geospatial queries consumed by the built-in suites."""
from .index import cell_count, cell_from_coordinates

__all__ = ["cell_count", "cell_from_coordinates"]
