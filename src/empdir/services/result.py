"""ServiceResult and ServiceError: the result contract of the service layer.

INVARIANT: All service-layer methods return ServiceResult.
Malformed commands become ``ok=False`` results, never exceptions; the
conversion from :class:`~empdir.domain.errors.CommandError` lives here.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from empdir.domain.errors import CommandError


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult.

    ``code`` is one of ``INVALID_STATEMENT``, ``UNKNOWN_OPERATION`` (from the
    parser) or ``BATCH_FAILED``.
    """

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_command_error(cls, exc: CommandError) -> ServiceError:
        return cls(code=exc.code, message=exc.message, detail=exc.detail())


class RejectedCommand(BaseModel):
    """One failed line of a batch, as reported under ``data["errors"]``."""

    model_config = {"frozen": True}

    index: int
    command: str
    code: str
    message: str

    @classmethod
    def from_error(cls, index: int, command: str, error: ServiceError) -> RejectedCommand:
        return cls(index=index, command=command, code=error.code, message=error.message)


class ServiceResult(BaseModel):
    """Universal return type for all service operations.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (``apply_command``, ``apply_batch``,
            ``is_employee``, ``total_employees`` or ``list_all``).
        data: Operation-specific payload.
        warnings: Non-fatal notes, e.g. a Delete aimed at a department
            that does not exist.
        error: Structured error if ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None

    @classmethod
    def success(
        cls, op: str, data: dict[str, Any], warnings: list[str] | None = None
    ) -> ServiceResult:
        return cls(ok=True, op=op, data=data, warnings=warnings or [])

    @classmethod
    def failure(
        cls,
        op: str,
        error: ServiceError | CommandError,
        data: dict[str, Any] | None = None,
    ) -> ServiceResult:
        """Build an ``ok=False`` result; a raw CommandError is converted."""
        if isinstance(error, CommandError):
            error = ServiceError.from_command_error(error)
        return cls(ok=False, op=op, data=data or {}, error=error)
