"""Result data structures produced by the test runner."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from .models import Failure, TestCase
from .outcomes import Failed, Outcome, Passed


@dataclass(frozen=True)
class CaseResult:
    """Outcome of executing a single test case."""

    case: TestCase
    outcome: Outcome
    index: int
    duration_s: float

    @property
    def passed(self) -> bool:
        return isinstance(self.outcome, Passed)

    @property
    def status(self) -> str:
        return "passed" if self.passed else "failed"

    @property
    def message(self) -> Optional[str]:
        if isinstance(self.outcome, Failed):
            return self.outcome.message
        return None

    def failure(self) -> Optional[Failure]:
        if isinstance(self.outcome, Failed):
            return Failure(test_name=self.case.name, message=self.outcome.message)
        return None


@dataclass(frozen=True)
class RunSummary:
    """All case results of one run, in execution order."""

    results: List[CaseResult] = field(default_factory=list)

    @property
    def failures(self) -> List[Failure]:
        return [f for f in (r.failure() for r in self.results) if f is not None]

    @property
    def total(self) -> int:
        return len(self.results)

    @property
    def passed(self) -> int:
        return sum(1 for result in self.results if result.passed)

    @property
    def failed(self) -> int:
        return self.total - self.passed

    @property
    def ok(self) -> bool:
        return self.failed == 0
