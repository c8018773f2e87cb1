"""AppContext: what the root group hands to every subcommand."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from bemlint.config.logging import configure_logging
from bemlint.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from bemlint.config.settings import BemlintSettings
    from bemlint.services.lint import LintService
    from bemlint.services.result import ServiceResult

EXIT_UNHEALTHY = 1
EXIT_FAILED = 2


class AppContext:
    """Settings, the lint service and result emission for one invocation.

    Subcommands receive it through ``@click.pass_obj``.
    """

    def __init__(self, settings: BemlintSettings) -> None:
        self.settings = settings
        self.output = OutputSettings(
            json_output=settings.json_output,
            quiet=settings.quiet,
            verbose=settings.verbose,
            color=True,
        )
        self._service: LintService | None = None
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def service(self) -> LintService:
        if self._service is None:
            from bemlint.services.lint import LintService

            self._service = LintService(self.settings)
        return self._service

    def emit(self, result: ServiceResult) -> None:
        """Print *result* and exit non-zero when it calls for it.

        Results that ran go to stdout; run warnings go to stderr unless
        they are already part of the JSON payload. Exit status 1 means
        violations at error severity, 2 means the operation could not run.
        """
        text = format_result(result, settings=self.output)
        if not result.ok:
            click.echo(text, err=True)
            raise SystemExit(EXIT_FAILED)

        click.echo(text)
        if not self.output.json_output:
            for warning in result.warnings:
                click.echo(f"WARNING: {warning}", err=True)
        if not result.healthy:
            raise SystemExit(EXIT_UNHEALTHY)
