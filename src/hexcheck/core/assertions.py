"""Assertion primitives used by case bodies."""
from __future__ import annotations

import dataclasses
from collections.abc import Mapping, Set
from numbers import Number
from typing import Any

import numpy as np


class AssertionFailure(AssertionError):
    """Raised by hexcheck assertions; reported by the runner, never fatal."""


def assert_equals(actual: Any, expected: Any) -> None:
    """Fail with ``"<actual> != <expected>"`` unless both are structurally equal."""

    if not structurally_equal(actual, expected):
        raise AssertionFailure(f"{render(actual)} != {render(expected)}")


def render(value: Any) -> str:
    """Strings print as-is; everything else uses its repr."""

    if isinstance(value, str):
        return str(value)
    return repr(value)


def structurally_equal(left: Any, right: Any) -> bool:
    """Deep equality over nested containers, dataclasses and numpy arrays."""

    if isinstance(left, np.ndarray) or isinstance(right, np.ndarray):
        return _arrays_equal(left, right)
    for family in (str, bytes):
        if isinstance(left, family) or isinstance(right, family):
            return isinstance(left, family) and isinstance(right, family) and bool(left == right)
    if isinstance(left, Number) and isinstance(right, Number):
        return bool(left == right)
    if dataclasses.is_dataclass(left) and not isinstance(left, type):
        if type(left) is not type(right):
            return False
        return all(
            structurally_equal(getattr(left, f.name), getattr(right, f.name))
            for f in dataclasses.fields(left)
        )
    if isinstance(left, Mapping) and isinstance(right, Mapping):
        if left.keys() != right.keys():
            return False
        return all(structurally_equal(left[key], right[key]) for key in left)
    if isinstance(left, Set) and isinstance(right, Set):
        return left == right
    if isinstance(left, (list, tuple)) and isinstance(right, (list, tuple)):
        if isinstance(left, tuple) != isinstance(right, tuple) or len(left) != len(right):
            return False
        return all(structurally_equal(a, b) for a, b in zip(left, right))
    return bool(left == right)


def _arrays_equal(left: Any, right: Any) -> bool:
    try:
        a = np.asarray(left)
        b = np.asarray(right)
    except (TypeError, ValueError):
        return False
    if a.shape != b.shape:
        return False
    return bool(np.array_equal(a, b))
