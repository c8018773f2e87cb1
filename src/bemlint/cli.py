"""Entry point: the ``bemlint`` command group."""

from __future__ import annotations

import click

from bemlint import __version__
from bemlint.commands import register_commands
from bemlint.commands._base import BemGroup
from bemlint.commands._context import AppContext
from bemlint.config.settings import BemlintSettings


@click.group(
    cls=BemGroup,
    invoke_without_command=True,
    examples="""\
  bemlint validate c-card__title
  bemlint lint assets/
  bemlint -c ci/bemlint.toml --json lint""",
)
@click.version_option(__version__, prog_name="bemlint")
@click.option("--json", "json_output", is_flag=True, help="Print results as JSON.")
@click.option("-q", "--quiet", is_flag=True, help="One line per problem, nothing else.")
@click.option("-v", "--verbose", is_flag=True, help="Show rule details, timing and debug logs.")
@click.option("--log-json", is_flag=True, help="Write logs to stderr as JSON lines.")
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Config file to use instead of the discovered one.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """bemlint: check CSS class names against a namespaced BEM guide.

    Settings come from bemlint.toml (or [tool.bemlint] in pyproject.toml),
    found by walking up from the current directory.
    """
    ctx.obj = AppContext(
        BemlintSettings.from_cli(
            config_path=config_path,
            json_output=json_output,
            quiet=quiet,
            verbose=verbose,
            log_json=log_json,
        )
    )
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
