"""Command: interactive loop over one in-memory directory."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from empdir.commands._base import EmpCommand, statement_forms

if TYPE_CHECKING:
    from empdir.commands._context import AppContext

_SHELL_COMMANDS = """\
  list          show every department
  total         number of employees
  check NAME    whether NAME is an employee
  help          show this message
  quit, exit    leave the shell"""


def _shell_help() -> str:
    forms = "\n".join(f"  {form}" for form, _ in statement_forms())
    return f"Directory commands:\n{forms}\nShell commands:\n{_SHELL_COMMANDS}"


@click.command(
    cls=EmpCommand,
    statements=True,
    examples="""\
  empdir shell
  printf 'Add Jason to Accounts\\nlist\\n' | empdir shell""",
)
@click.pass_obj
def shell(app: AppContext) -> None:
    """Read commands line by line until quit or end of input.

    Malformed commands are reported and the loop continues.
    """
    svc = app.service
    prompt = app.settings.shell.prompt

    while True:
        try:
            line = click.prompt(prompt, default="", show_default=False, prompt_suffix="")
        except click.Abort:
            break

        # Same whitespace rules as parse_command, so tabs separate words too.
        parts = line.split(maxsplit=1)
        if not parts:
            continue
        keyword = parts[0].lower()
        rest = parts[1].strip() if len(parts) > 1 else ""

        if keyword in ("quit", "exit"):
            break
        if keyword == "help":
            click.echo(_shell_help())
        elif keyword == "list" and not rest:
            app.emit(svc.list_all(), exit_on_error=False)
        elif keyword == "total" and not rest:
            app.emit(svc.total_employees(), exit_on_error=False)
        elif keyword == "check" and rest:
            app.emit(svc.is_employee(rest), exit_on_error=False)
        else:
            app.emit(svc.apply_command(line), exit_on_error=False)
