"""Typed command errors raised by the parser.

Both kinds are recoverable: the directory is never touched when one is
raised, and the caller decides whether to log, retry or surface it.
"""

from __future__ import annotations


class CommandError(ValueError):
    """Base class for raw commands that cannot be turned into an instruction."""

    code = "INVALID_COMMAND"

    def __init__(self, message: str, *, command: str) -> None:
        super().__init__(message)
        self.message = message
        self.command = command

    def detail(self) -> dict[str, object]:
        return {"command": self.command}


class StructuralParseError(CommandError):
    """The command does not split into exactly four whitespace-separated tokens."""

    code = "INVALID_STATEMENT"

    def __init__(self, command: str, tokens: list[str]) -> None:
        msg = f"Invalid statement: expected 4 tokens, got {len(tokens)}"
        super().__init__(msg, command=command)
        self.tokens = tokens

    def detail(self) -> dict[str, object]:
        return {"command": self.command, "token_count": len(self.tokens)}


class UnknownOperationError(CommandError):
    """The first token is not a recognised operation keyword."""

    code = "UNKNOWN_OPERATION"

    def __init__(self, command: str, operation: str) -> None:
        msg = f"Invalid operation: {operation!r}"
        super().__init__(msg, command=command)
        self.operation = operation

    def detail(self) -> dict[str, object]:
        return {"command": self.command, "operation": self.operation}
