"""Subcommands of the ``bemlint`` group.

Command modules are imported inside :func:`register_commands` so the
root group can be built without importing the service layer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    from bemlint.commands.lint import lint
    from bemlint.commands.validate import validate
    from bemlint.commands.variants import variants

    for command in (validate, lint, variants):
        cli.add_command(command)
