"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.markup import escape
from rich.table import Table
from rich.text import Text

from bemlint.output.console import (
    create_console,
    get_output,
    style_for_namespace,
    style_for_severity,
)

if TYPE_CHECKING:
    from rich.console import Console

    from bemlint.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False, color: bool = False) -> str:
    """Render a ServiceResult to a string via Rich.

    Plain text unless *color* is set; failures get the error renderer,
    ops without a dedicated renderer get key-value lines.
    """
    console = create_console(color=color)

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode.

    One line per problem, or a single status line when there are none.
    """
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    lines: list[str] = []
    if result.op == "lint":
        for issue in result.data.get("issues", []):
            lines.append(f"{issue['path']}:{issue['line']}: {issue['name']}: {issue['message']}")
    elif result.op == "validate":
        for entry in result.data.get("results", []):
            for violation in entry.get("violations", []):
                lines.append(f"{entry['name']}: {violation['message']}")
    elif result.op == "variants":
        lines.extend(v["name"] for v in result.data.get("variants", []))

    return "\n".join(lines) if lines else f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK/ERROR status line."""
    label = Text("OK", style="bem.ok")
    op = Text(f"  {result.op}", style="bem.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="bem.key")
    if key == "path":
        v = Text(str(value), style="bem.path")
    elif key == "variant":
        v = Text(str(value), style="bem.name")
    else:
        v = Text(str(value))
    console.print(k, v, end="")
    console.print()


def _severity_label(severity: str) -> str:
    style = style_for_severity(severity)
    return f"[{style}]{severity}[/{style}]" if style else severity


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print meta block (verbose only)."""
    if not result.meta:
        return
    console.print()
    console.print(Text("  meta:", style="dim"))
    for k, v in result.meta.items():
        console.print(f"    {k}: {escape(str(v))}")


def _summary(console: Console, data: dict[str, Any], *, noun: str) -> None:
    errors = data.get("error_count", 0)
    warnings = data.get("warning_count", 0)
    console.print(f"\n{data.get('count', 0)} {noun}, {errors} errors, {warnings} warnings")


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="bem.error")
    op = Text(f"  {result.op}", style="bem.op")
    sep = Text(" — ")
    console.print(label, op, sep, Text(msg))

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {escape(str(v))}")


# ── Validate renderer ─────────────────────────────────────────────────


def _render_validate(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render per-name results as a table, then each violation."""
    d = result.data
    entries: list[dict[str, Any]] = d.get("results", [])

    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Class", style="bem.name", no_wrap=True)
    table.add_column("Namespace")
    table.add_column("Block")
    table.add_column("Element")
    table.add_column("Modifier")
    table.add_column("Status")
    for entry in entries:
        namespace = str(entry.get("namespace", ""))
        table.add_row(
            Text(str(entry.get("name", ""))),
            Text(namespace, style=style_for_namespace(namespace)),
            Text(entry.get("block") or ""),
            Text(entry.get("element") or ""),
            Text(entry.get("modifier") or ""),
            Text("ok", style="bem.ok") if entry.get("ok") else Text("fail", style="bem.error"),
        )
    console.print(table)

    for entry in entries:
        for violation in entry.get("violations", []):
            label = _severity_label(str(violation.get("severity", "error")))
            console.print(f"  {label} {escape(entry['name'])}: {escape(violation['message'])}")

    _summary(console, d, noun="classes")
    if verbose:
        _field(console, "variant", d.get("variant", ""))
        _field(console, "strict", d.get("strict", False))


# ── Lint renderer ─────────────────────────────────────────────────────


def _render_lint(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render lint issues grouped by file."""
    d = result.data
    issues: list[dict[str, Any]] = d.get("issues", [])

    if not issues:
        console.print("[bem.ok]OK[/bem.ok]  No issues found.")
        _field(console, "files_scanned", d.get("files_scanned", 0))
        _field(console, "classes_checked", d.get("classes_checked", 0))
        if verbose:
            _field(console, "variant", d.get("variant", ""))
            _render_meta(console, result)
        return

    by_path: dict[str, list[dict[str, Any]]] = {}
    for issue in issues:
        by_path.setdefault(str(issue.get("path", "?")), []).append(issue)

    for path, path_issues in by_path.items():
        console.print(f"\n[bold]{escape(path)}[/bold]")
        for issue in path_issues:
            label = _severity_label(str(issue.get("severity", "warning")))
            line = f"  {issue.get('line', '?')}:"
            name = escape(str(issue.get("name", "")))
            console.print(f"{line:<8}{label} {name}: {escape(str(issue.get('message', '')))}")
            if verbose:
                console.print(f"          kind: {escape(str(issue.get('kind', '')))}")

    _summary(console, d, noun="issues")
    console.print(
        f"{d.get('files_scanned', 0)} files, {d.get('classes_checked', 0)} classes checked"
    )
    if verbose:
        _field(console, "variant", d.get("variant", ""))
        _render_meta(console, result)


# ── Variants renderer ─────────────────────────────────────────────────


def _render_variants(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render each variant's prefix table."""
    default = result.data.get("default")
    for variant in result.data.get("variants", []):
        title = variant["name"]
        if title == default or default in variant.get("aliases", []):
            title += " (default)"
        table = Table(title=Text(title), show_header=True, pad_edge=False, expand=False)
        table.add_column("Prefix", style="bem.name", no_wrap=True)
        table.add_column("Namespace")
        table.add_column("Elements")
        table.add_column("Modifiers")
        for row in variant.get("prefixes", []):
            table.add_row(
                Text(row["prefix"]),
                Text(row["namespace"], style=style_for_namespace(row["namespace"])),
                "yes" if row["allow_element"] else "no",
                "yes" if row["allow_modifier"] else "no",
            )
        console.print(table)
        delimiters = (
            f"  element '{variant['element_delimiter']}'"
            f"  modifier '{variant['modifier_delimiter']}'"
        )
        console.print(Text(delimiters, style="bem.key"))
        if verbose:
            if variant.get("aliases"):
                _field(console, "aliases", ", ".join(variant["aliases"]))
            _field(console, "description", variant.get("description", ""))
        console.print()


# ── Generic fallback ──────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            _field(console, key, _json.dumps(value, separators=(",", ":")))
        else:
            _field(console, key, value)
    if verbose:
        _render_meta(console, result)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "validate": _render_validate,
    "lint": _render_lint,
    "variants": _render_variants,
}
