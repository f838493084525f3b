"""Sequential runner isolating assertion failures per case."""
from __future__ import annotations

import time
from typing import Callable, Iterable, List, Optional

from .models import TestCase
from .outcomes import Failed, Unexpected, classify
from .results import CaseResult, RunSummary


class TestRunner:
    """Executes cases in order; assertion failures are reported, anything else propagates."""

    __test__ = False

    def __init__(
        self,
        *,
        on_result: Optional[Callable[[CaseResult, int], None]] = None,
        fail_fast: bool = False,
    ) -> None:
        self._on_result = on_result
        self._fail_fast = fail_fast

    def run(self, cases: Iterable[TestCase]) -> RunSummary:
        results: List[CaseResult] = []
        iterator = iter(cases)
        try:
            for index, case in enumerate(iterator, start=1):
                result = self._execute_case(case, index)
                results.append(result)
                if self._on_result:
                    self._on_result(result, index)
                if self._fail_fast and isinstance(result.outcome, Failed):
                    break
        finally:
            close = getattr(iterator, "close", None)
            if callable(close):
                close()
        return RunSummary(results=results)

    def _execute_case(self, case: TestCase, index: int) -> CaseResult:
        start = time.perf_counter()
        error: Optional[BaseException] = None
        try:
            case()
        except Exception as exc:
            error = exc
        outcome = classify(error)
        if isinstance(outcome, Unexpected):
            raise outcome.cause
        return CaseResult(
            case=case,
            outcome=outcome,
            index=index,
            duration_s=time.perf_counter() - start,
        )


def run_cases(cases: Iterable[TestCase], *, echo: Callable[[str], None] = print) -> RunSummary:
    """Run ``cases`` writing one ``"<name>: <message>"`` line per failure."""

    def _report(result: CaseResult, _index: int) -> None:
        failure = result.failure()
        if failure is not None:
            echo(failure.line())

    return TestRunner(on_result=_report).run(cases)
