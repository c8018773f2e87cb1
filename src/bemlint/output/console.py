"""Rich console and theme used by the renderers.

Renderers draw into an in-memory console and hand back a string, so the
CLI decides where the text goes. With ``color=True`` the console emits
ANSI styles regardless of where it writes; ``click.echo`` strips them
again when stdout is not a terminal.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

from bemlint.domain.types import Namespace

_NAMESPACE_COLORS = {
    Namespace.LAYOUT: "blue",
    Namespace.UTILITY: "magenta",
    Namespace.TYPOGRAPHY: "cyan",
    Namespace.STATE: "yellow",
    Namespace.JS_HOOK: "red",
    Namespace.OBJECT: "green",
    Namespace.COMPONENT: "bold green",
}

BEM_THEME = Theme(
    {
        "bem.ok": "bold green",
        "bem.error": "bold red",
        "bem.warning": "bold yellow",
        "bem.op": "bold cyan",
        "bem.key": "dim",
        "bem.path": "bold underline",
        "bem.name": "bold",
        **{f"bem.ns.{ns}": color for ns, color in _NAMESPACE_COLORS.items()},
    }
)

DEFAULT_WIDTH = 120


def create_console(*, color: bool = False, width: int | None = None) -> Console:
    """An in-memory console; read it back with :func:`get_output`."""
    return Console(
        file=StringIO(),
        theme=BEM_THEME,
        force_terminal=color,
        no_color=not color,
        highlight=False,
        width=width or DEFAULT_WIDTH,
    )


def get_output(console: Console) -> str:
    buffer = console.file
    if not isinstance(buffer, StringIO):
        raise TypeError("console was not created by create_console()")
    return buffer.getvalue()


def style_for_namespace(namespace: str) -> str:
    """Theme style for *namespace*; unprefixed classes get none."""
    style = f"bem.ns.{namespace}"
    return style if style in BEM_THEME.styles else ""


def style_for_severity(severity: str) -> str:
    return {"error": "bem.error", "warning": "bem.warning"}.get(severity, "")
