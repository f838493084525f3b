from __future__ import annotations

import json
import textwrap
from pathlib import Path

import pytest
from click.testing import CliRunner

from hexcheck import __version__
from hexcheck.cli.main import cli, main
from hexcheck.core import assert_equals, cases_from_pairs
from hexcheck.registry import registry


def _failing_suite():
    return cases_from_pairs([("ok", lambda: None), ("bad", lambda: assert_equals(5, 6))])


def _broken_suite():
    def body() -> None:
        raise RuntimeError("internal")

    return cases_from_pairs([("broken", body)])


@pytest.fixture(autouse=True)
def _suites():
    registry.update_or_register("cli-failing", _failing_suite)
    registry.update_or_register("cli-broken", _broken_suite)
    yield
    registry._suites.pop("cli-failing", None)
    registry._suites.pop("cli-broken", None)


def test_cli_help_short_flag() -> None:
    result = CliRunner().invoke(cli, ["-h"])
    assert result.exit_code == 0
    assert "Usage:" in result.output
    assert "run" in result.output


def test_cli_version() -> None:
    result = CliRunner().invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert result.output.strip() == f"hexcheck {__version__}"


def test_cli_runs_builtin_suite_by_default() -> None:
    result = CliRunner().invoke(cli, ["run", "--no-color"])
    assert result.exit_code == 0, result.output
    assert result.output == ""


def test_cli_reports_failures_and_exits_one() -> None:
    result = CliRunner().invoke(cli, ["run", "--no-color", "cli-failing"])
    assert result.exit_code == 1
    assert result.output == "bad: 5 != 6\n"


def test_cli_legacy_exit() -> None:
    result = CliRunner().invoke(cli, ["run", "--no-color", "--legacy-exit", "cli-failing"])
    assert result.exit_code == 0
    assert result.output == "bad: 5 != 6\n"


def test_cli_unexpected_error_is_fatal() -> None:
    result = CliRunner().invoke(cli, ["run", "--no-color", "cli-broken"])
    assert result.exit_code == 1
    assert "broken: unexpected RuntimeError: internal" in result.output


def test_cli_unknown_suite() -> None:
    result = CliRunner().invoke(cli, ["run", "nope"])
    assert result.exit_code == 1
    assert "Suite 'nope' is not registered" in result.output


def test_cli_json_report_from_config(tmp_path: Path) -> None:
    config = tmp_path / "hexcheck.yaml"
    config.write_text(
        textwrap.dedent(
            """
            suites: [cli-failing]
            exit_policy: legacy
            color: false
            report:
              format: json
              path: report.json
            """
        ),
        encoding="utf-8",
    )
    result = CliRunner().invoke(cli, ["run", "--config", str(config)])
    assert result.exit_code == 0, result.output
    payload = json.loads((tmp_path / "report.json").read_text(encoding="utf-8"))
    assert payload["summary"] == {
        "total": 2,
        "passed": 1,
        "failed": 1,
        "duration_s": payload["summary"]["duration_s"],
    }
    assert [case["status"] for case in payload["cases"]] == ["passed", "failed"]


def test_cli_list() -> None:
    runner = CliRunner()
    suites = runner.invoke(cli, ["list"])
    assert suites.exit_code == 0
    assert "h3" in suites.output.splitlines()
    cases = runner.invoke(cli, ["list", "h3"])
    assert cases.output.splitlines() == ["numHexagons", "testGeoToH3"]


def test_main_returns_exit_codes() -> None:
    assert main(["run", "--no-color"]) == 0
    assert main(["run", "--no-color", "cli-failing"]) == 1
    assert main(["run", "nope"]) == 1
