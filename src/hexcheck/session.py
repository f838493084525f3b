"""Run orchestration: resolve suites, execute, report, compute the exit code."""
from __future__ import annotations

from typing import List

from colorama import just_fix_windows_console

from hexcheck.config import RunConfig
from hexcheck.core import CaseResult, RunSummary, TestCase, TestRunner
from hexcheck.registry import collect_cases
from hexcheck.reporting import JsonReporter, ReportManager, Reporter, TerminalReporter


class CaseAborted(Exception):
    """An unexpected error escaped a case body and stopped the run."""

    def __init__(self, case_name: str, cause: BaseException) -> None:
        super().__init__(f"{case_name}: unexpected {type(cause).__name__}: {cause}")
        self.case_name = case_name
        self.cause = cause


def build_reporters(config: RunConfig, *, verbose: bool = False) -> List[Reporter]:
    if config.report.format == "json":
        if not config.report.path:
            raise ValueError("A report path is required when the report format is 'json'")
        return [JsonReporter(config.report.path)]
    return [TerminalReporter(use_color=config.color, verbose=verbose)]


def run_config(config: RunConfig, *, verbose: bool = False) -> int:
    """Execute the configured suites; returns the process exit code."""

    if config.color:
        just_fix_windows_console()
    cases = collect_cases(config.suites)
    manager = ReportManager(build_reporters(config, verbose=verbose))
    finished: List[CaseResult] = []
    reporting = False

    def _on_result(result: CaseResult, index: int) -> None:
        nonlocal reporting
        finished.append(result)
        reporting = True
        manager.handle_result(result, index)
        reporting = False

    manager.start(cases)
    runner = TestRunner(on_result=_on_result, fail_fast=config.fail_fast)
    try:
        summary = runner.run(cases)
    except Exception as exc:
        # Reporter errors are not case errors.
        if reporting:
            raise
        manager.complete(RunSummary(results=list(finished)))
        raise CaseAborted(_current_case(cases, len(finished)), exc) from exc
    manager.complete(summary)
    return config.exit_code(summary.failed)


def _current_case(cases: tuple[TestCase, ...], completed: int) -> str:
    if completed < len(cases):
        return cases[completed].name
    return "<unknown>"
