"""Operation tags and the keyword vocabulary that maps onto them."""

from __future__ import annotations

from enum import StrEnum


class Operation(StrEnum):
    """The closed set of directory mutations."""

    ADD = "add"
    DELETE = "delete"
    RESET = "reset"


# Upper-cased first token -> operation. REMOVE is an alias for DELETE.
OPERATION_KEYWORDS: dict[str, Operation] = {
    "ADD": Operation.ADD,
    "REMOVE": Operation.DELETE,
    "DELETE": Operation.DELETE,
    "RESET": Operation.RESET,
}

# OPERATION NAME PREPOSITION DEPARTMENT
STATEMENT_TOKENS = 4
