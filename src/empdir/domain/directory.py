"""Directory engine — owns the department -> employees mapping.

State per department key::

    absent --Add--> present --Reset--> present (empty)

Delete of a missing name (or on a missing department) changes nothing,
and no operation ever removes a department key once it exists.

INVARIANT: every stored entry is normalized (lower-case).
INVARIANT: ``apply`` never fails; only parsing can reject a command.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import assert_never

from empdir.domain.parser import Instruction, normalize_name, parse_command
from empdir.domain.types import Operation

logger = logging.getLogger(__name__)


class Directory:
    """In-memory employee directory keyed by department.

    Not thread-safe. One owner at a time; the embedding application is
    responsible for any locking.

    Usage::

        directory = Directory()
        directory.apply_command("Add Jason to Accounts")
        directory.is_employee("JASON")  # True
    """

    def __init__(self) -> None:
        self._departments: dict[str, list[str]] = {}

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def apply_command(self, raw: str) -> Instruction:
        """Parse *raw* and apply it. Returns the applied instruction.

        Raises :class:`~empdir.domain.errors.CommandError` before touching
        any state if *raw* is malformed.
        """
        instruction = parse_command(raw)
        self.apply(instruction)
        return instruction

    def apply(self, instruction: Instruction) -> None:
        """Apply a parsed instruction to the directory."""
        match instruction.operation:
            case Operation.ADD:
                self._add(instruction.name, instruction.department)
            case Operation.DELETE:
                self._delete(instruction.name, instruction.department)
            case Operation.RESET:
                self._reset(instruction.department)
            case _ as unreachable:
                assert_never(unreachable)

    def _add(self, name: str, department: str) -> None:
        entry = normalize_name(name)
        if department in self._departments:
            self._departments[department].append(entry)
        else:
            self._departments[department] = [entry]
        logger.debug("Added %s to %s", entry, department)

    def _delete(self, name: str, department: str) -> None:
        entries = self._departments.get(department)
        if entries is None:
            logger.debug("Delete on unknown department %s ignored", department)
            return
        target = normalize_name(name)
        # Removes every duplicate, not only the first.
        entries[:] = [entry for entry in entries if entry != target]

    def _reset(self, department: str) -> None:
        entries = self._departments.get(department)
        if entries is None:
            logger.debug("Reset on unknown department %s ignored", department)
            return
        entries.clear()

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def is_employee(self, name: str) -> bool:
        """True if *name* (case-insensitive) appears in any department."""
        target = normalize_name(name)
        return any(target in entries for entries in self._departments.values())

    def total_employees(self) -> int:
        """Number of entries across all departments, duplicates included."""
        return sum(len(entries) for entries in self._departments.values())

    def list_all(self) -> dict[str, list[str]]:
        """Copy of the full mapping, departments in first-seen order."""
        return {dept: list(entries) for dept, entries in self._departments.items()}

    def departments(self) -> list[str]:
        return list(self._departments)

    def employees_in(self, department: str) -> list[str]:
        """Entries of one department; empty for an unknown department."""
        return list(self._departments.get(department, []))

    def __len__(self) -> int:
        return self.total_employees()

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.is_employee(name)

    def __iter__(self) -> Iterator[str]:
        return iter(self.departments())

    def __repr__(self) -> str:
        return f"Directory({self.list_all()!r})"
