"""YAML loader and validation for run configuration files."""
from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping

import yaml
from jsonschema import Draft7Validator

from .models import EXIT_POLICIES, REPORT_FORMATS, ReportConfig, RunConfig

CONFIG_SCHEMA = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "type": "object",
    "properties": {
        "suites": {
            "type": "array",
            "items": {"type": "string", "minLength": 1},
            "minItems": 1,
        },
        "exit_policy": {"enum": list(EXIT_POLICIES)},
        "fail_fast": {"type": "boolean"},
        "color": {"type": "boolean"},
        "report": {
            "type": "object",
            "properties": {
                "format": {"enum": list(REPORT_FORMATS)},
                "path": {"type": "string", "minLength": 1},
            },
            "additionalProperties": False,
        },
    },
    "additionalProperties": False,
}

_validator = Draft7Validator(CONFIG_SCHEMA)


def load_config(path: str | Path) -> RunConfig:
    """Load and validate a run configuration file."""

    config_path = Path(path).expanduser().resolve()
    try:
        raw = yaml.safe_load(config_path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"Invalid YAML in {config_path}: {exc}") from exc
    if not isinstance(raw, Mapping):
        raise ValueError("Config file must contain a mapping at the top level")
    return parse_config(raw, base_dir=config_path.parent)


def parse_config(raw: Mapping[str, Any], *, base_dir: Path | None = None) -> RunConfig:
    errors = sorted(_validator.iter_errors(dict(raw)), key=lambda e: [str(p) for p in e.path])
    if errors:
        messages = "; ".join(f"{'/'.join(map(str, err.path)) or 'root'}: {err.message}" for err in errors)
        raise ValueError(f"Config schema validation failed: {messages}")
    defaults = RunConfig()
    report_raw = raw.get("report") or {}
    report_path = report_raw.get("path")
    if report_path and base_dir is not None and not Path(report_path).is_absolute():
        report_path = str(base_dir / report_path)
    return RunConfig(
        suites=tuple(raw.get("suites", defaults.suites)),
        exit_policy=str(raw.get("exit_policy", defaults.exit_policy)),
        fail_fast=bool(raw.get("fail_fast", defaults.fail_fast)),
        report=ReportConfig(format=str(report_raw.get("format", "terminal")), path=report_path),
        color=bool(raw.get("color", defaults.color)),
    )
