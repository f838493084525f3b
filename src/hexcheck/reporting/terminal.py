"""Terminal reporter: one stdout line per failed case, progress on stderr."""
from __future__ import annotations

import time
from typing import Sequence

import click
from colorama import Fore, Style

from hexcheck.core import CaseResult, RunSummary, TestCase

from .base import Reporter


class TerminalReporter(Reporter):
    """Human-readable reporter.

    Failure lines (``"<name>: <message>"``) always go to stdout without
    styling so they stay machine-greppable. With ``verbose`` every case gets a
    status line and the run ends with a summary, both on stderr.
    """

    def __init__(self, *, use_color: bool = True, verbose: bool = False) -> None:
        self._use_color = use_color
        self._verbose = verbose
        self._start_time = 0.0
        self._total = 0

    def on_start(self, cases: Sequence[TestCase]) -> None:
        self._start_time = time.perf_counter()
        self._total = len(cases)
        if self._verbose:
            click.echo(f"Starting run: {self._total} case(s)", err=True)

    def on_case_result(self, result: CaseResult, index: int) -> None:
        failure = result.failure()
        if failure is not None:
            click.echo(failure.line())
        if self._verbose:
            label, color = self._format_status(result.status)
            reset = Style.RESET_ALL if color else ""
            ms = result.duration_s * 1000
            click.echo(
                f"[{index}/{self._total}] {color}{label:<5}{reset} {result.case.name} ({ms:.2f} ms)",
                err=True,
            )

    def on_complete(self, summary: RunSummary) -> None:
        if not self._verbose:
            return
        duration = time.perf_counter() - self._start_time
        color = ""
        if self._use_color:
            color = Fore.GREEN if summary.ok else Fore.RED
        reset = Style.RESET_ALL if color else ""
        click.echo(
            f"{color}Summary{reset}: total={summary.total} passed={summary.passed} "
            f"failed={summary.failed} duration={duration:.2f}s",
            err=True,
        )

    def _format_status(self, status: str) -> tuple[str, str]:
        label = {"passed": "PASS", "failed": "FAIL"}.get(status, status.upper())
        if not self._use_color:
            return label, ""
        return label, Fore.GREEN if status == "passed" else Fore.RED
