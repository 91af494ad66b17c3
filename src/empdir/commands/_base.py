"""Click base classes shared by the empdir commands.

``EmpCommand`` adds an eager ``--examples`` flag and, for commands that
read directory statements, a help section listing every accepted
statement form. ``EmpGroup`` lets a single bare statement stand in for
``run``: ``empdir Add Jason to Accounts`` is
``empdir run "Add Jason to Accounts"``.
"""

from __future__ import annotations

from typing import Any

import click

from empdir.domain.types import OPERATION_KEYWORDS, Operation

_OPERANDS = {
    Operation.ADD: "NAME to DEPT",
    Operation.DELETE: "NAME from DEPT",
    Operation.RESET: "department of DEPT",
}


def statement_forms() -> list[tuple[str, str]]:
    """``(form, operation)`` rows, one per accepted keyword."""
    return [
        (f"{keyword.title()} {_OPERANDS[operation]}", str(operation))
        for keyword, operation in OPERATION_KEYWORDS.items()
    ]


def _examples_option(examples: str) -> click.Option:
    def show(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if value:
            click.echo(f"Examples for '{ctx.command_path}':\n\n{examples}")
            ctx.exit(0)

    return click.Option(
        ["--examples"],
        is_flag=True,
        expose_value=False,
        is_eager=True,
        callback=show,
        help="Show usage examples.",
    )


class EmpCommand(click.Command):
    """Command with optional ``--examples`` and a statement-grammar help section."""

    def __init__(
        self,
        *args: Any,
        examples: str | None = None,
        statements: bool = False,
        **kwargs: Any,
    ) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        self.statements = statements
        if examples:
            self.params.append(_examples_option(examples))

    def format_epilog(self, ctx: click.Context, formatter: click.HelpFormatter) -> None:
        if self.statements:
            with formatter.section("Statements (keywords are case-insensitive)"):
                formatter.write_dl(statement_forms())
        super().format_epilog(ctx, formatter)


class EmpGroup(click.Group):
    """Root group that routes a bare statement to the ``run`` command."""

    def resolve_command(
        self, ctx: click.Context, args: list[str]
    ) -> tuple[str | None, click.Command | None, list[str]]:
        if args and args[0].upper() in OPERATION_KEYWORDS and args[0] not in self.commands:
            run = self.get_command(ctx, "run")
            if run is not None:
                return "run", run, [" ".join(args)]
        return super().resolve_command(ctx, args)
