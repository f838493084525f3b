"""CLI entry point for hexcheck."""
from __future__ import annotations

import sys
from typing import Optional, Tuple

import click

from hexcheck import __version__, bootstrap
from hexcheck.config import EXIT_POLICIES, REPORT_FORMATS, RunConfig, RunOverrides, load_config
from hexcheck.registry import collect_cases, registry
from hexcheck.session import run_config


CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


class CliState:
    """Holds global CLI state."""

    def __init__(self, verbose: bool) -> None:
        self.verbose = verbose


def _print_version(_: click.Context, __: click.Parameter, value: bool) -> None:
    if not value or click.get_current_context().resilient_parsing:
        return
    click.echo(f"hexcheck {__version__}")
    raise click.exceptions.Exit()


@click.group(context_settings=CONTEXT_SETTINGS)
@click.option("--verbose", is_flag=True, help="Print per-case status and a summary to stderr.")
@click.option(
    "--version",
    is_flag=True,
    callback=_print_version,
    expose_value=False,
    is_eager=True,
    help="Show the hexcheck version and exit.",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """Run named test suites and report failures."""

    bootstrap()
    ctx.obj = CliState(verbose=verbose)


@cli.command()
@click.argument("suites", nargs=-1)
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    help="YAML run configuration file.",
)
@click.option(
    "--exit-policy",
    type=click.Choice(list(EXIT_POLICIES)),
    help="'strict' exits 1 when any case failed; 'legacy' always exits 0.",
)
@click.option("--legacy-exit", is_flag=True, help="Shorthand for --exit-policy legacy.")
@click.option("--fail-fast/--no-fail-fast", default=None, help="Stop after the first failed case.")
@click.option(
    "--report",
    "report_format",
    type=click.Choice(list(REPORT_FORMATS)),
    help="Report format (terminal by default).",
)
@click.option("--report-path", type=str, help="When --report json, write to this path.")
@click.option("--no-color", is_flag=True, help="Disable ANSI colors in terminal output.")
@click.pass_obj
def run(
    state: CliState,
    suites: Tuple[str, ...],
    config_path: Optional[str],
    exit_policy: Optional[str],
    legacy_exit: bool,
    fail_fast: Optional[bool],
    report_format: Optional[str],
    report_path: Optional[str],
    no_color: bool,
) -> None:
    """Execute SUITES (registered names or module:attr paths; default h3)."""

    overrides = RunOverrides(
        suites=suites,
        exit_policy="legacy" if legacy_exit else exit_policy,
        fail_fast=fail_fast,
        report_format=report_format,
        report_path=report_path,
        color=False if no_color else None,
    )
    try:
        config = overrides.apply(load_config(config_path) if config_path else RunConfig())
        exit_code = run_config(config, verbose=state.verbose)
    except Exception as exc:
        raise click.ClickException(str(exc)) from exc
    raise click.exceptions.Exit(exit_code)


@cli.command(name="list")
@click.argument("suites", nargs=-1)
def list_cases(suites: Tuple[str, ...]) -> None:
    """List registered suites, or the cases of SUITES without running them."""

    if not suites:
        for name in registry.names():
            click.echo(name)
        return
    try:
        cases = collect_cases(suites)
    except Exception as exc:
        raise click.ClickException(str(exc)) from exc
    for case in cases:
        click.echo(case.name)


def main(argv: Optional[list[str]] = None) -> int:
    """Program entry point for console_scripts shim."""

    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=argv, prog_name="hexcheck", standalone_mode=True)
    except SystemExit as exc:
        return int(exc.code or 0)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
