import numpy as np

from hexcheck.core import assert_equals, cases_from_pairs
from hexcheck.geo import cell_count, cell_from_coordinates


def _count_formula() -> None:
    resolutions = np.arange(4)
    counts = np.array([cell_count(int(res)) for res in resolutions])
    assert_equals(counts, 2 + 120 * 7**resolutions)


def _same_cell_for_wrapped_longitude() -> None:
    assert_equals(cell_from_coordinates(10, 10, 7), cell_from_coordinates(10, 370, 7))


def suite():
    return cases_from_pairs(
        [
            ("countFormula", _count_formula),
            ("wrappedLongitude", _same_cell_for_wrapped_longitude),
        ]
    )


def failing_suite():
    # Wrong on purpose: resolution 1 has 842 cells.
    return cases_from_pairs([("wrongCount", lambda: assert_equals(cell_count(1), 843))])
