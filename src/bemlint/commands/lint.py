"""Command: extract class names from project files and validate them."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from bemlint.commands._base import BemCommand

if TYPE_CHECKING:
    from bemlint.commands._context import AppContext


@click.command(
    cls=BemCommand,
    examples="""\
  bemlint lint
  bemlint lint src/styles templates/base.html
  bemlint lint --errors-only assets/
  bemlint --json lint --variant bootstrap-hybrid assets/scss""",
)
@click.argument("paths", nargs=-1, type=click.Path(path_type=Path))
@click.option("--variant", default=None, help="Naming variant (overrides [lint] variant).")
@click.option(
    "--strict/--no-strict",
    default=None,
    help="Treat advisory violations as errors.",
)
@click.option(
    "--min-severity",
    type=click.Choice(["warning", "error"]),
    default=None,
    help="Hide issues below this severity.",
)
@click.option("--errors-only", is_flag=True, help="Shortcut for --min-severity error.")
@click.pass_obj
def lint(
    app: AppContext,
    paths: tuple[Path, ...],
    variant: str | None,
    strict: bool | None,
    min_severity: str | None,
    errors_only: bool,
) -> None:
    """Lint class names used in stylesheets and markup under PATHS.

    Defaults to the project root (the directory holding bemlint.toml).
    """
    targets = list(paths) or [app.settings.project_root]
    threshold = "error" if errors_only else min_severity
    app.emit(
        app.service.lint_paths(targets, variant=variant, strict=strict, min_severity=threshold)
    )
