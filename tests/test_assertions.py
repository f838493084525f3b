from __future__ import annotations

from dataclasses import dataclass

import numpy as np
import pytest

from hexcheck.core import AssertionFailure, assert_equals, structurally_equal
from hexcheck.core.assertions import render


@dataclass
class Cell:
    index: str
    resolution: int


@pytest.mark.parametrize(
    "actual, expected",
    [
        (2016842, 2016842),
        ("86754e64fffffff", "86754e64fffffff"),
        (5, 5.0),
        ([1, [2, {"a": (3, 4)}]], [1, [2, {"a": (3, 4)}]]),
        ({"b": 1, "a": 2}, {"a": 2, "b": 1}),
        ({1, 2, 3}, {3, 2, 1}),
        (Cell("86754e64fffffff", 6), Cell("86754e64fffffff", 6)),
        (np.array([[1, 2], [3, 4]]), np.array([[1, 2], [3, 4]])),
        (None, None),
    ],
)
def test_assert_equals_accepts_structurally_equal_values(actual, expected) -> None:
    assert_equals(actual, expected)


@pytest.mark.parametrize(
    "actual, expected",
    [
        (5, 6),
        ("a", "b"),
        ("1", 1),
        ([1, 2], [1, 2, 3]),
        ([1, 2], (1, 2)),
        ({"a": 1}, {"a": 1, "b": 2}),
        ([{"a": [1]}], [{"a": [2]}]),
        (Cell("x", 1), Cell("x", 2)),
        (np.array([1, 2]), np.array([[1, 2]])),
        (np.array([1, 2]), np.array([1, 3])),
    ],
)
def test_assert_equals_rejects_unequal_values(actual, expected) -> None:
    with pytest.raises(AssertionFailure) as exc:
        assert_equals(actual, expected)
    message = str(exc.value)
    assert render(actual) in message
    assert render(expected) in message


def test_assert_equals_message_format() -> None:
    with pytest.raises(AssertionFailure) as exc:
        assert_equals(5, 6)
    assert str(exc.value) == "5 != 6"


def test_assertion_failure_is_an_assertion_error() -> None:
    assert issubclass(AssertionFailure, AssertionError)


def test_dataclass_of_different_type_is_not_equal() -> None:
    @dataclass
    class Other:
        index: str
        resolution: int

    assert not structurally_equal(Cell("x", 1), Other("x", 1))


def test_string_operands_are_rendered_unquoted() -> None:
    with pytest.raises(AssertionFailure) as exc:
        assert_equals("86754e64fffffff", "foo")
    assert str(exc.value) == "86754e64fffffff != foo"


def test_containers_keep_repr_rendering() -> None:
    with pytest.raises(AssertionFailure) as exc:
        assert_equals(["a"], ["b"])
    assert str(exc.value) == "['a'] != ['b']"


def test_string_subclasses_compare_by_value() -> None:
    assert_equals(np.str_("86754e64fffffff"), "86754e64fffffff")
    assert structurally_equal(b"ab", np.bytes_(b"ab"))
    assert not structurally_equal("ab", b"ab")
