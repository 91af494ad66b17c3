"""Shared pytest fixtures and test helpers for empdir tests."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest
from click.testing import CliRunner

from empdir.domain.directory import Directory
from empdir.services.directory import DirectoryService


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def directory() -> Directory:
    """A fresh, empty directory."""
    return Directory()


@pytest.fixture
def service(directory: Directory) -> DirectoryService:
    """DirectoryService bound to the ``directory`` fixture."""
    return DirectoryService(directory)


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Run from an empty temp dir so no stray empdir.toml is discovered."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("EMPDIR_CONFIG", raising=False)
    yield


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def apply_all(directory: Directory, *commands: str) -> None:
    """Apply each command, failing the test on any parse error."""
    for command in commands:
        directory.apply_command(command)


@pytest.fixture(autouse=True)
def _restore_logging() -> Iterator[None]:
    """Undo any configure_logging() a CLI invocation performed."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    emp = logging.getLogger("empdir")
    emp_level = emp.level
    yield
    root.handlers = handlers
    root.setLevel(level)
    emp.setLevel(emp_level)
