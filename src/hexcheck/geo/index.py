"""Thin adapter over the H3 hexagonal grid library."""
from __future__ import annotations

import h3


def cell_count(resolution: int) -> int:
    """Number of H3 cells covering the globe at ``resolution``."""

    return int(h3.get_num_cells(resolution))


def cell_from_coordinates(latitude: float, longitude: float, resolution: int) -> str:
    """H3 cell identifier containing the point at ``resolution``."""

    return str(h3.latlng_to_cell(latitude, longitude, resolution))
