from __future__ import annotations

from typing import List
from unittest import mock

from hexcheck.core import run_cases
from hexcheck.geo import cell_count, cell_from_coordinates
from hexcheck.registry.builtins import h3_tests


def test_cell_count_at_resolution_five() -> None:
    assert cell_count(5) == 2016842


def test_null_island_cell_at_resolution_six() -> None:
    assert cell_from_coordinates(0, 0, 6) == "86754e64fffffff"


def test_h3_suite_passes_silently() -> None:
    lines: List[str] = []
    summary = run_cases(h3_tests(), echo=lines.append)
    assert lines == []
    assert summary.passed == 2


def test_h3_suite_reports_wrong_count() -> None:
    lines: List[str] = []
    with mock.patch("hexcheck.registry.builtins.cell_count", return_value=42):
        summary = run_cases(h3_tests(), echo=lines.append)
    assert lines == ["numHexagons: 42 != 2016842"]
    assert summary.failed == 1


def test_h3_suite_reports_wrong_cell() -> None:
    lines: List[str] = []
    with mock.patch("hexcheck.registry.builtins.cell_from_coordinates", return_value="8001fffffffffff"):
        run_cases(h3_tests(), echo=lines.append)
    assert lines == ["testGeoToH3: 8001fffffffffff != 86754e64fffffff"]
