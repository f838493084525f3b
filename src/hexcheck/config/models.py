"""Data models for run configuration."""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Optional, Sequence

EXIT_POLICIES = ("strict", "legacy")
REPORT_FORMATS = ("terminal", "json")


@dataclass(frozen=True)
class ReportConfig:
    format: str = "terminal"
    path: Optional[str] = None


@dataclass(frozen=True)
class RunConfig:
    """Resolved settings for one invocation."""

    suites: Sequence[str] = ("h3",)
    exit_policy: str = "strict"
    fail_fast: bool = False
    report: ReportConfig = field(default_factory=ReportConfig)
    color: bool = True

    def exit_code(self, failed: int) -> int:
        """0 on success; 1 when a failure was reported, unless the policy is legacy."""

        if self.exit_policy == "legacy":
            return 0
        return 0 if failed == 0 else 1


@dataclass(frozen=True)
class RunOverrides:
    """CLI-provided values taking precedence over the config file."""

    suites: Sequence[str] = field(default_factory=tuple)
    exit_policy: Optional[str] = None
    fail_fast: Optional[bool] = None
    report_format: Optional[str] = None
    report_path: Optional[str] = None
    color: Optional[bool] = None

    def apply(self, config: RunConfig) -> RunConfig:
        report = config.report
        if self.report_format is not None or self.report_path is not None:
            report = ReportConfig(
                format=self.report_format or report.format,
                path=self.report_path if self.report_path is not None else report.path,
            )
        merged = replace(
            config,
            suites=tuple(self.suites) or config.suites,
            exit_policy=self.exit_policy or config.exit_policy,
            fail_fast=config.fail_fast if self.fail_fast is None else self.fail_fast,
            color=config.color if self.color is None else self.color,
            report=report,
        )
        if merged.report.format == "json" and not merged.report.path:
            raise ValueError("A report path is required when the report format is 'json'")
        return merged
