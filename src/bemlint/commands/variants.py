"""Command: list the built-in naming variants."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from bemlint.commands._base import BemCommand

if TYPE_CHECKING:
    from bemlint.commands._context import AppContext


@click.command(
    cls=BemCommand,
    examples="""\
  bemlint variants
  bemlint --json variants""",
)
@click.pass_obj
def variants(app: AppContext) -> None:
    """Show each naming variant's delimiters and namespace prefixes."""
    app.emit(app.service.describe_variants())
