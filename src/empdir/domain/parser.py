"""Command grammar — turn one raw line into an :class:`Instruction`.

Grammar::

    OPERATION NAME PREPOSITION DEPARTMENT

Tokens are split on any run of whitespace. The preposition ("to", "from",
"of", ...) is positional only and never checked. Pure functions, no state.
"""

from __future__ import annotations

from dataclasses import dataclass

from empdir.domain.errors import StructuralParseError, UnknownOperationError
from empdir.domain.types import OPERATION_KEYWORDS, STATEMENT_TOKENS, Operation


@dataclass(frozen=True)
class Instruction:
    """A parsed, validated command. Consumed once by the directory."""

    operation: Operation
    name: str
    department: str


def normalize_name(name: str) -> str:
    """Canonical form for stored and compared employee names.

    Examples:
        >>> normalize_name("Jason")
        'jason'
    """
    return name.lower()


def parse_operation(token: str, *, command: str = "") -> Operation:
    """Map an operation keyword to its :class:`Operation`, ignoring case."""
    operation = OPERATION_KEYWORDS.get(token.upper())
    if operation is None:
        raise UnknownOperationError(command or token, token)
    return operation


def parse_command(raw: str) -> Instruction:
    """Parse *raw* into an :class:`Instruction`.

    Raises:
        StructuralParseError: *raw* does not have exactly four tokens.
        UnknownOperationError: the first token is not ADD/REMOVE/DELETE/RESET.
    """
    tokens = raw.split()
    if len(tokens) != STATEMENT_TOKENS:
        raise StructuralParseError(raw, tokens)

    keyword, name, _preposition, department = tokens
    return Instruction(
        operation=parse_operation(keyword, command=raw),
        name=name,
        department=department,
    )
