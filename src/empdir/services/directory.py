"""DirectoryService — parse-then-apply and queries as ServiceResults.

This is the Result-shaped entry point for embedding callers: bad input
comes back as ``ok=False`` with a ``code`` of ``INVALID_STATEMENT`` or
``UNKNOWN_OPERATION``; nothing is raised.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from empdir.domain.errors import CommandError
from empdir.services.base import BaseService
from empdir.services.result import RejectedCommand, ServiceError, ServiceResult

logger = logging.getLogger(__name__)


def _command_lines(commands: Iterable[str]) -> Iterable[tuple[int, str]]:
    """Yield ``(index, line)`` for non-blank, non-comment lines."""
    for index, line in enumerate(commands):
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue
        yield index, stripped


class DirectoryService(BaseService):
    """Applies raw commands and answers queries against one Directory."""

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def apply_command(self, raw: str) -> ServiceResult:
        """Parse and apply a single command.

        Delete and Reset aimed at a department that does not exist still
        succeed, with a warning.
        """
        op = "apply_command"
        try:
            instruction = self._directory.apply_command(raw)
        except CommandError as exc:
            logger.info(
                "Rejected command: %s", exc.message, extra={"command": raw, "code": exc.code}
            )
            return ServiceResult.failure(op, exc)

        total = self._directory.total_employees()
        logger.debug(
            "Applied command",
            extra={
                "command": raw,
                "operation": str(instruction.operation),
                "department": instruction.department,
                "total": total,
            },
        )
        warnings: list[str] = []
        if instruction.department not in self._directory.departments():
            warnings.append(f"No department {instruction.department!r}; nothing changed")
        return ServiceResult.success(
            op,
            {
                "operation": str(instruction.operation),
                "name": instruction.name,
                "department": instruction.department,
                "total": total,
            },
            warnings,
        )

    def apply_batch(
        self,
        commands: Iterable[str],
        *,
        stop_on_error: bool = False,
    ) -> ServiceResult:
        """Apply commands in order, collecting failures.

        Blank lines and ``#`` comments are skipped. Commands applied
        before a failure stay applied. With *stop_on_error* the batch
        halts at the first failing command.
        """
        op = "apply_batch"
        applied: list[dict[str, Any]] = []
        rejected: list[RejectedCommand] = []
        warnings: list[str] = []

        for index, line in _command_lines(commands):
            result = self.apply_command(line)
            if result.error is None:
                applied.append({"index": index, "command": line, **result.data})
                warnings.extend(f"[{index}] {w}" for w in result.warnings)
                continue
            rejected.append(RejectedCommand.from_error(index, line, result.error))
            if stop_on_error:
                break

        errors = [r.model_dump() for r in rejected]
        data: dict[str, Any] = {
            "applied": applied,
            "errors": errors,
            "total": self._directory.total_employees(),
        }
        counts = {"applied": len(applied), "failed": len(rejected)}
        if rejected:
            logger.info("Batch finished with failures", extra=counts)
            error = ServiceError(
                code="BATCH_FAILED",
                message=f"{len(rejected)} of {len(applied) + len(rejected)} commands failed",
                detail={"errors": errors},
            )
            return ServiceResult.failure(op, error, data)
        logger.debug("Batch finished", extra=counts)
        return ServiceResult.success(op, data, warnings)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def is_employee(self, name: str) -> ServiceResult:
        return ServiceResult.success(
            "is_employee", {"name": name, "is_employee": self._directory.is_employee(name)}
        )

    def total_employees(self) -> ServiceResult:
        total = self._directory.total_employees()
        return ServiceResult.success("total_employees", {"total": total})

    def list_all(self) -> ServiceResult:
        """Full department listing plus the overall total."""
        return ServiceResult.success(
            "list_all",
            {
                "departments": self._directory.list_all(),
                "total": self._directory.total_employees(),
            },
        )
