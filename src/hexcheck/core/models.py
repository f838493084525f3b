"""Core dataclasses shared across hexcheck subsystems."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Sequence


TestBody = Callable[[], None]


@dataclass(frozen=True)
class TestCase:
    """A named, no-argument unit of work with a pass/fail outcome."""

    __test__ = False

    name: str
    body: TestBody

    def __call__(self) -> None:
        self.body()


@dataclass(frozen=True)
class Failure:
    """A reported assertion failure for a single case."""

    test_name: str
    message: str

    def line(self) -> str:
        return f"{self.test_name}: {self.message}"


TestSuite = Callable[[], Sequence[TestCase]]


def cases_from_pairs(pairs: Sequence[tuple[str, TestBody]]) -> tuple[TestCase, ...]:
    """Build cases from ``(name, body)`` pairs, keeping insertion order."""

    return tuple(TestCase(name=name, body=body) for name, body in pairs)
