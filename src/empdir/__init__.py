"""empdir — in-memory employee directory driven by short text commands.

The embeddable core is :class:`~empdir.domain.directory.Directory` plus
:func:`~empdir.domain.parser.parse_command`. Everything else (services,
CLI, output) is a thin layer over it.
"""

from __future__ import annotations

from empdir.domain.directory import Directory
from empdir.domain.errors import CommandError, StructuralParseError, UnknownOperationError
from empdir.domain.parser import Instruction, normalize_name, parse_command
from empdir.domain.types import Operation

__version__ = "0.1.0"

__all__ = [
    "CommandError",
    "Directory",
    "Instruction",
    "Operation",
    "StructuralParseError",
    "UnknownOperationError",
    "__version__",
    "normalize_name",
    "parse_command",
]
