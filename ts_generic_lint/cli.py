import json
import logging
import sys

import click

from ts_generic_lint import version
from ts_generic_lint.config import load_config
from ts_generic_lint.environment_variables import (
    TS_GENERIC_LINT_LOGGING_LEVEL,
    TS_GENERIC_LINT_MAX_WORKERS,
)
from ts_generic_lint.exceptions import TsGenericLintException
from ts_generic_lint.linter import all_violations, lint_paths
from ts_generic_lint.utils.logging_utils import (
    disable_logging,
    enable_logging,
    eprint,
    set_log_level,
)

_logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_VIOLATIONS = 1
EXIT_ERROR = 2


@click.group()
@click.version_option(version=version.VERSION)
def cli():
    pass


@cli.command()
@click.argument("paths", nargs=-1, required=True, type=click.Path(exists=True))
@click.option(
    "--fix",
    is_flag=True,
    default=False,
    help="Rewrite files in place, inserting the missing type argument where it is safe to do so. "
    "References with a wrong type argument are reported but never rewritten.",
)
@click.option(
    "--config",
    "config_path",
    metavar="FILE",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="pyproject.toml to read the [tool.ts-generic-lint] table from. "
    "[default: ./pyproject.toml if present]",
)
@click.option(
    "--output-format",
    type=click.Choice(["text", "json"]),
    default="text",
    show_default=True,
    help="How to print violations.",
)
@click.option(
    "--max-workers",
    type=click.IntRange(min=1),
    default=None,
    help=f"Number of worker processes. Overrides {TS_GENERIC_LINT_MAX_WORKERS}.",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    default=False,
    help="Log debug messages, including from worker processes. "
    f"Sets {TS_GENERIC_LINT_LOGGING_LEVEL} to DEBUG.",
)
@click.option(
    "--quiet",
    "-q",
    is_flag=True,
    default=False,
    help="Silence logs and error messages on stderr. "
    "Violations and the exit status are unaffected.",
)
def check(paths, fix, config_path, output_format, max_workers, verbose, quiet):
    """
    Check TypeScript files (or directories containing them) for generic type references
    without the required type argument.
    """
    if quiet:
        disable_logging()
    else:
        enable_logging()
    if verbose:
        TS_GENERIC_LINT_LOGGING_LEVEL.set("DEBUG")
        set_log_level()

    try:
        config = load_config(config_path)
    except TsGenericLintException as e:
        eprint(f"Invalid configuration: {e.message}")
        sys.exit(EXIT_ERROR)

    reports = lint_paths(list(paths), config, fix=fix, max_workers=max_workers)
    violations = all_violations(reports)
    errors = [r for r in reports if r.error is not None]

    if output_format == "json":
        click.echo(json.dumps([v.to_json() for v in violations], indent=2))
    else:
        for violation in violations:
            click.echo(str(violation))

    for report in errors:
        eprint(f"{report.path}: {report.error.message}")

    if fix and (fixed := sum(r.fixed for r in reports)):
        _logger.info("Fixed %d violation(s)", fixed)

    if errors:
        _logger.warning("%d file(s) could not be linted", len(errors), extra={"color": "yellow"})
        sys.exit(EXIT_ERROR)
    sys.exit(EXIT_VIOLATIONS if violations else EXIT_OK)


@cli.command()
@click.option(
    "--config",
    "config_path",
    metavar="FILE",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="pyproject.toml to read the [tool.ts-generic-lint] table from.",
)
def rules(config_path):
    """
    List the messages reported by the linter, rendered for the configured types.
    """
    rule = load_config(config_path).rule
    names = {"target": rule.target_type_name, "argument": rule.required_argument_name}
    for msg in rule.messages:
        click.echo(f"{msg.id} {msg.name}: {msg.render(**names)}")
        click.echo(f"    {msg.reason.format(**names)}")


if __name__ == "__main__":
    cli()
