"""Command: validate class names given on the command line or stdin."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from bemlint.commands._base import BemCommand

if TYPE_CHECKING:
    from bemlint.commands._context import AppContext


@click.command(
    cls=BemCommand,
    examples="""\
  bemlint validate c-card__title--large
  bemlint validate --variant dash-modifier is-hidden js-main-nav
  bemlint validate --strict navbar__item--new
  echo "o-media u-hidden" | bemlint validate -""",
)
@click.argument("names", nargs=-1)
@click.option("--variant", default=None, help="Naming variant (overrides [lint] variant).")
@click.option(
    "--strict/--no-strict",
    default=None,
    help="Treat advisory violations as errors.",
)
@click.pass_obj
def validate(
    app: AppContext,
    names: tuple[str, ...],
    variant: str | None,
    strict: bool | None,
) -> None:
    """Validate class NAMES against the naming grammar.

    A '-' among NAMES is replaced by the whitespace-separated names read
    from stdin, in place.
    """
    if "-" in names:
        names = _expand_stdin(names)
    app.emit(app.service.validate_names(names, variant=variant, strict=strict))


def _expand_stdin(names: tuple[str, ...]) -> tuple[str, ...]:
    """Splice stdin's names in at the first '-'; stdin is read only once."""
    piped = click.get_text_stream("stdin").read().split()
    expanded: list[str] = []
    for name in names:
        if name == "-":
            expanded.extend(piped)
            piped = []
        else:
            expanded.append(name)
    return tuple(expanded)
