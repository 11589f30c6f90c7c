from __future__ import annotations

import sys

import typer
from typer.main import get_command

from suitetree.core.runner import TestRunner
from suitetree.demo import build_demo_runner
from suitetree.models.config import HarnessConfig, load_env
from suitetree.models.run_params import RunParams
from suitetree.models.stats import SuiteStats
from suitetree.ui.tree import TreeRenderer
from suitetree.utils.loading import load_runner
from suitetree.utils.logging import configure_logging

cli = typer.Typer(add_completion=False, no_args_is_help=True)


@cli.callback()
def root() -> None:
	"""
	Root callback for the suitetree CLI.

	Sets up the Typer application with no-args-is-help behavior.
	"""
	return None


def _load_config(params: RunParams | None = None) -> HarnessConfig:
	load_env()
	config = HarnessConfig()
	if params is not None:
		config.apply_overrides(params)
	configure_logging(config.log_level)
	return config


def _report(runner: TestRunner, config: HarnessConfig) -> SuiteStats:
	"""Run a tree with the configured renderer and return the totals.

	The runner keeps its own ``run_child_suites`` unless the config set it
	explicitly (environment or ``--top-level-only``).
	"""
	if "run_child_suites" in config.model_fields_set:
		runner.run_child_suites = config.run_child_suites
	renderer = TreeRenderer(config.column_width, config.make_console())
	return runner.run(renderer)


def run_impl(
    target: str,
    column_width: int | None = None,
    top_level_only: bool = False,
    color: bool | None = None,
    strict: bool = False,
) -> SuiteStats:
	"""
	Load a runner from ``module:attribute``, run it and print the report.

	Parameters:
		target: Import path of a TestRunner or a factory returning one.
		column_width: Override for the statistics column.
		top_level_only: Execute only cases owned by top-level suites.
		color: Force (True) or disable (False) ANSI colors.
		strict: Exit with code 1 when unexpected outcomes were recorded.

	Returns:
		Grand total of recorded outcomes.
	"""
	try:
		params = RunParams(
		    target=target,
		    column_width=column_width,
		    run_child_suites=False if top_level_only else None,
		    color=color,
		    strict=strict,
		)
	except ValueError as exc:
		raise typer.BadParameter(str(exc), param_hint="TARGET") from exc
	config = _load_config(params)
	try:
		runner = load_runner(params.module_name, params.attribute)
	except ValueError as exc:
		raise typer.BadParameter(str(exc), param_hint="TARGET") from exc

	stats = _report(runner, config)
	if params.strict and not stats.passed:
		raise typer.Exit(code=1)
	return stats


@cli.command()
def run(
    target: str = typer.Argument(..., help="module:attribute of a TestRunner"),
    column_width: int = typer.Option(None, "--column-width",
                                     help="Override statistics column"),
    top_level_only: bool = typer.Option(
        False,
        "--top-level-only",
        help="Only execute cases owned by top-level suites",
    ),
    color: bool = typer.Option(
        None,
        "--color/--no-color",
        help="Force or disable ANSI colors",
    ),
    strict: bool = typer.Option(
        False,
        "--strict",
        help="Exit with code 1 on unexpected outcomes",
    ),
) -> None:
	"""
	Run a test tree and print the colored report.
	"""
	run_impl(target, column_width, top_level_only, color, strict)


@cli.command()
def legend() -> None:
	"""Print the outcome legend."""
	config = _load_config()
	TreeRenderer(config.column_width, config.make_console()).print_legend()


@cli.command()
def demo() -> None:
	"""Run the built-in example tree."""
	_report(build_demo_runner(), _load_config())


def entrypoint(argv=None, *, standalone_mode: bool = True):
	"""
	Typer entrypoint that defaults to `run` when appropriate.

	Allows calling 'suitetree pkg.module:runner' without explicitly
	specifying the 'run' subcommand.

	Parameters:
		argv: Command-line arguments. Defaults to sys.argv[1:].
		standalone_mode: If True, Click handles exit codes.

	Returns:
		Result of the Click application main invocation.
	"""
	args = sys.argv[1:] if argv is None else list(argv)

	_click_app = get_command(cli)
	commands = getattr(_click_app, "commands", {}).keys()
	if args and not args[0].startswith("-") and args[0] not in commands:
		args = ["run"] + args
	return _click_app.main(
	    args=args,
	    prog_name="suitetree",
	    standalone_mode=standalone_mode,
	)


if __name__ == "__main__":
	entrypoint()
