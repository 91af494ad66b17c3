"""BaseService — foundation for services that operate on a Directory.

Every service receives the :class:`Directory` it works on at construction
time. There is no shared or global directory: two services built on two
directories never see each other's state.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from empdir.domain.directory import Directory


class BaseService:
    """Abstract base for service-layer classes.

    Usage::

        class DirectoryService(BaseService):
            def total_employees(self) -> ServiceResult:
                return ServiceResult(ok=True, op="total_employees",
                                     data={"total": len(self._directory)})
    """

    def __init__(self, directory: Directory) -> None:
        self._directory = directory

    @property
    def directory(self) -> Directory:
        return self._directory
