"""AppContext — shared Click context for all commands.

Created once by the root CLI group and passed to subcommands via
``@click.pass_obj``. Owns the process's single Directory and centralizes
result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from empdir.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from collections.abc import Sequence

    from empdir.config.settings import EmpSettings
    from empdir.domain.directory import Directory
    from empdir.services.directory import DirectoryService
    from empdir.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The directory is created lazily and lives only as long as the process,
    so ``--help`` and ``--version`` never build one.
    """

    def __init__(self, settings: EmpSettings) -> None:
        self.settings = settings
        self._directory: Directory | None = None

        from empdir.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def directory(self) -> Directory:
        """The directory for this invocation (created on first access)."""
        if self._directory is None:
            from empdir.domain.directory import Directory

            self._directory = Directory()
        return self._directory

    @property
    def service(self) -> DirectoryService:
        from empdir.services.directory import DirectoryService

        return DirectoryService(self.directory)

    @property
    def output_settings(self) -> OutputSettings:
        return OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )

    def emit(self, result: ServiceResult, *, exit_on_error: bool = True) -> bool:
        """Format and output a ServiceResult.

        * Success: writes to stdout. Warnings go to stderr so they don't
          pollute piped output.
        * Failure: writes to stderr and, when *exit_on_error*, exits with
          code 1.

        Returns ``result.ok``.
        """
        settings = self.output_settings
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
            return True

        click.echo(output, err=True)
        if exit_on_error:
            raise SystemExit(1)
        return False

    def emit_many(self, results: Sequence[ServiceResult]) -> None:
        """Output several results from one command, exiting 1 if any failed.

        JSON mode writes a single array to stdout so the output stays
        parseable as one document.
        """
        failed = any(not r.ok for r in results)
        if self.settings.json_output:
            payload = [r.model_dump(mode="json") for r in results]
            click.echo(json.dumps(payload, indent=2))
        else:
            for result in results:
                self.emit(result, exit_on_error=False)
        if failed:
            raise SystemExit(1)
