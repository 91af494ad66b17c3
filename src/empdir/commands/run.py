"""Command: apply a batch of directory commands and report the result."""

from __future__ import annotations

from typing import IO, TYPE_CHECKING

import click

from empdir.commands._base import EmpCommand

if TYPE_CHECKING:
    from empdir.commands._context import AppContext
    from empdir.services.result import ServiceResult


@click.command(
    cls=EmpCommand,
    statements=True,
    examples="""\
  empdir run "Add Jason to Accounts" "Add Mary to Finance"
  empdir run "Add Jason to Accounts" --check jason
  empdir run -f commands.txt --stop-on-error
  cat commands.txt | empdir --json run -f -""",
)
@click.argument("commands", nargs=-1)
@click.option(
    "-f",
    "--file",
    "command_file",
    type=click.File("r"),
    default=None,
    help="Read commands from FILE, one per line ('-' for stdin).",
)
@click.option(
    "--stop-on-error/--keep-going",
    default=None,
    help="Halt at the first malformed command (default from [run] config).",
)
@click.option(
    "--check",
    "checks",
    multiple=True,
    metavar="NAME",
    help="After applying, report whether NAME is an employee. Repeatable.",
)
@click.pass_obj
def run(
    app: AppContext,
    commands: tuple[str, ...],
    command_file: IO[str] | None,
    stop_on_error: bool | None,
    checks: tuple[str, ...],
) -> None:
    """Apply COMMANDS in order, then print the resulting directory.

    Each COMMAND is one quoted statement such as "Add Jason to Accounts".
    The directory lives in memory for this invocation only.
    """
    lines = list(commands)
    if command_file is not None:
        lines.extend(command_file.read().splitlines())
    if not lines:
        raise click.UsageError("No commands given (pass COMMANDS or --file).")

    if stop_on_error is None:
        stop_on_error = app.settings.run.stop_on_error

    svc = app.service
    results: list[ServiceResult] = [svc.apply_batch(lines, stop_on_error=stop_on_error)]
    results.extend(svc.is_employee(name) for name in checks)
    results.append(svc.list_all())
    app.emit_many(results)
