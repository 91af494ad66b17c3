"""The ``empdir`` console script.

Global flags only set up settings, logging and output; every invocation
gets a fresh in-memory directory. A bare statement is shorthand for
``run`` (see :class:`~empdir.commands._base.EmpGroup`).
"""

from __future__ import annotations

import click

from empdir import __version__
from empdir.commands import register_commands
from empdir.commands._base import EmpGroup
from empdir.commands._context import AppContext
from empdir.config.settings import EmpSettings


@click.group(
    cls=EmpGroup,
    invoke_without_command=True,
    epilog='A single statement may be given without "run": empdir Add Jason to Accounts',
)
@click.version_option(version=__version__, prog_name="empdir")
@click.option("--json", "json_output", is_flag=True, help="Print results as JSON.")
@click.option("-q", "--quiet", is_flag=True, help="One-line results, listings as 'dept: names'.")
@click.option("-v", "--verbose", is_flag=True, help="Show debug logs and per-command detail.")
@click.option("--log-json", is_flag=True, help="Write logs to stderr as JSON lines.")
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Read settings from this empdir.toml instead of searching for one.",
)
@click.pass_context
def cli(ctx: click.Context, config_path: str | None, **flags: bool) -> None:
    """empdir: an in-memory employee directory driven by text statements."""
    # Only flags actually given override EMPDIR_* env vars and empdir.toml.
    given = {name: True for name, value in flags.items() if value}
    ctx.obj = AppContext(EmpSettings.from_cli(config_path=config_path, **given))
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
