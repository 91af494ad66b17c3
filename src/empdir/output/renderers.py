"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO). Renderers are
dispatched by ``result.op`` in :func:`render_result`; an op without a
renderer is rejected with ``ValueError``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from empdir.output.console import create_console, get_output

if TYPE_CHECKING:
    from collections.abc import Callable

    from rich.console import Console

    from empdir.services.result import ServiceResult

    Renderer = Callable[..., None]


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal, which is
    the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op)
        if renderer is None:
            msg = f"No renderer for op {result.op!r}"
            raise ValueError(msg)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        lines = [f"ERROR: {result.op} — {msg}"]
        for err in result.data.get("errors", []):
            lines.append(f"  [{err['index']}] {err['command']}: {err['message']}")
        return "\n".join(lines)

    if result.op == "list_all":
        departments: dict[str, list[str]] = result.data.get("departments", {})
        return "\n".join(
            f"{dept}: {', '.join(names)}".rstrip() for dept, names in departments.items()
        )
    if result.op == "is_employee":
        return "yes" if result.data.get("is_employee") else "no"
    if result.op == "total_employees":
        return str(result.data.get("total", 0))

    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    label = Text("OK", style="emp.ok")
    op = Text(f"  {result.op}", style="emp.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="emp.key")
    if key == "department":
        v = Text(str(value), style="emp.department")
    elif key == "total":
        v = Text(str(value), style="emp.count")
    else:
        v = Text(str(value))
    console.print(k, v, end="")
    console.print()


def _department_table(departments: dict[str, list[str]]) -> Table:
    """Build a Rich Table with one row per department."""
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Department", style="emp.department", no_wrap=True)
    table.add_column("Count", style="emp.count", justify="right")
    table.add_column("Employees", style="emp.name")

    for dept, names in departments.items():
        employees = Text(", ".join(names)) if names else Text("(empty)", style="emp.empty")
        # Department names are free-form text and may contain markup brackets.
        table.add_row(Text(dept), str(len(names)), employees)
    return table


def _render_batch_errors(console: Console, errors: list[dict[str, Any]]) -> None:
    for err in errors:
        line = Text("  ")
        line.append("error", style="emp.error")
        line.append(f" [{err['index']}] {err['command']!r}: {err['message']}")
        console.print(line)


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="emp.error")
    op = Text(f"  {result.op}", style="emp.op")
    sep = Text(" — ")
    console.print(label, op, sep, Text(msg))

    if result.op == "apply_batch":
        _field(console, "applied", len(result.data.get("applied", [])))
        _render_batch_errors(console, result.data.get("errors", []))
    elif err and verbose and err.detail:
        for key, value in err.detail.items():
            _field(console, key, value)


# ── Op renderers ──────────────────────────────────────────────────────


def _render_command(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render a single applied command."""
    _status_line(console, result)
    for key in ("operation", "name", "department", "total"):
        if key in result.data:
            _field(console, key, result.data[key])


def _render_batch(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    applied = result.data.get("applied", [])
    _field(console, "applied", len(applied))
    _field(console, "total", result.data.get("total", 0))
    if verbose:
        for item in applied:
            console.print(Text(f"    {item['command']}", style="dim"))


def _render_membership(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    name = result.data.get("name", "")
    if result.data.get("is_employee"):
        console.print(Text(f"  {name}", style="emp.name"), "is an employee")
    else:
        console.print(Text(f"  {name}", style="emp.empty"), "is not an employee")


def _render_total(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    _field(console, "total", result.data.get("total", 0))


def _render_listing(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render the full directory as a department table."""
    _status_line(console, result)
    departments = result.data.get("departments", {})
    if not departments:
        console.print(Text("  No departments.", style="emp.empty"))
        return
    console.print(_department_table(departments))
    _field(console, "total", result.data.get("total", 0))


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Renderer] = {
    "apply_command": _render_command,
    "apply_batch": _render_batch,
    "is_employee": _render_membership,
    "total_employees": _render_total,
    "list_all": _render_listing,
}
