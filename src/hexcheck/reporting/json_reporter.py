"""JSON reporter emitting structured execution results."""
from __future__ import annotations

import datetime as dt
import json
import pathlib
from typing import Any, Dict, Sequence

import click
from jsonschema import validate

from hexcheck.core import CaseResult, RunSummary, TestCase

from .base import Reporter
from .schema import JSON_SCHEMA_V1, SCHEMA_VERSION


class JsonReporter(Reporter):
    """Writes results to a JSON file validated against the schema."""

    def __init__(self, path: str) -> None:
        self._path = pathlib.Path(path)
        self._records: list[Dict[str, Any]] = []
        self._start_time = 0.0

    def on_start(self, cases: Sequence[TestCase]) -> None:
        self._records.clear()
        self._start_time = _now().timestamp()

    def on_case_result(self, result: CaseResult, index: int) -> None:
        self._records.append(_case_to_dict(result))

    def on_complete(self, summary: RunSummary) -> None:
        payload = build_payload(self._records, summary, _now().timestamp() - self._start_time)
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        except OSError as exc:
            raise RuntimeError(f"Failed to write JSON report to {self._path}: {exc}") from exc
        click.echo(f"JSON report written to {self._path}", err=True)


def build_payload(records: Sequence[Dict[str, Any]], summary: RunSummary, duration: float) -> Dict[str, Any]:
    payload = {
        "schema_version": SCHEMA_VERSION,
        "generated_at": _now().isoformat(timespec="seconds").replace("+00:00", "Z"),
        "summary": {
            "total": summary.total,
            "passed": summary.passed,
            "failed": summary.failed,
            "duration_s": duration,
        },
        "cases": list(records),
    }
    validate(instance=payload, schema=JSON_SCHEMA_V1)
    return payload


def _case_to_dict(result: CaseResult) -> Dict[str, Any]:
    record: Dict[str, Any] = {
        "index": result.index,
        "name": result.case.name,
        "status": result.status,
        "duration_ms": result.duration_s * 1000,
    }
    if result.message is not None:
        record["message"] = result.message
    return record


def _now() -> dt.datetime:
    return dt.datetime.now(dt.timezone.utc)
