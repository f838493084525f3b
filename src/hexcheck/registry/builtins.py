"""Built-in suites shipped with hexcheck."""
from __future__ import annotations

from typing import Dict

from hexcheck.core import TestCase, TestSuite, assert_equals, cases_from_pairs
from hexcheck.geo import cell_count, cell_from_coordinates


def _num_hexagons() -> None:
    assert_equals(cell_count(5), 2016842)


def _geo_to_h3() -> None:
    null_island = cell_from_coordinates(0, 0, 6)
    assert_equals(null_island, "86754e64fffffff")


def h3_tests() -> tuple[TestCase, ...]:
    return cases_from_pairs(
        [
            ("numHexagons", _num_hexagons),
            ("testGeoToH3", _geo_to_h3),
        ]
    )


BUILTIN_SUITES: Dict[str, TestSuite] = {
    "h3": h3_tests,
}

DEFAULT_SUITE = "h3"
