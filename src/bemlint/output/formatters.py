"""Pick the output mode for a ServiceResult.

``--json`` prints the result model as is, ``--quiet`` prints one line per
problem, anything else goes through the Rich renderers.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel

from bemlint.output.renderers import render_quiet, render_result

if TYPE_CHECKING:
    from bemlint.services.result import ServiceResult


class OutputSettings(BaseModel):
    """Output flags from the root command group."""

    model_config = {"frozen": True}

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    color: bool = False


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """JSON wins over quiet; quiet wins over Rich."""
    mode = settings or OutputSettings()
    if mode.json_output:
        return result.model_dump_json(indent=2)
    if mode.quiet:
        return render_quiet(result)
    return render_result(result, verbose=mode.verbose, color=mode.color)
