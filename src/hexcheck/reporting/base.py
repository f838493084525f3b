"""Reporter interface definitions."""
from __future__ import annotations

from typing import List, Sequence

from hexcheck.core import CaseResult, RunSummary, TestCase


class Reporter:
    """Interface for output renderers."""

    def on_start(self, cases: Sequence[TestCase]) -> None:  # pragma: no cover - interface
        raise NotImplementedError

    def on_case_result(self, result: CaseResult, index: int) -> None:  # pragma: no cover
        raise NotImplementedError

    def on_complete(self, summary: RunSummary) -> None:  # pragma: no cover
        raise NotImplementedError


class ReportManager:
    """Dispatches lifecycle callbacks to multiple reporters."""

    def __init__(self, reporters: Sequence[Reporter]) -> None:
        self._reporters = list(reporters)

    def start(self, cases: Sequence[TestCase]) -> None:
        for reporter in self._reporters:
            reporter.on_start(cases)

    def handle_result(self, result: CaseResult, index: int) -> None:
        for reporter in self._reporters:
            reporter.on_case_result(result, index)

    def complete(self, summary: RunSummary) -> None:
        for reporter in self._reporters:
            reporter.on_complete(summary)

    def reporters(self) -> List[Reporter]:
        return list(self._reporters)
