"""Tests for the Rich renderers."""

import pytest

from empdir.domain.directory import Directory
from empdir.output.renderers import render_quiet, render_result
from empdir.services.directory import DirectoryService
from empdir.services.result import ServiceError, ServiceResult


def _service(*commands: str) -> DirectoryService:
    svc = DirectoryService(Directory())
    for command in commands:
        svc.apply_command(command)
    return svc


class TestRenderResult:
    def test_apply_command(self) -> None:
        output = render_result(_service().apply_command("Add Jason to Accounts"))
        assert "OK" in output
        assert "apply_command" in output
        assert "department: Accounts" in output
        assert "total: 1" in output

    def test_listing_table(self) -> None:
        svc = _service(
            "Add Jason to Accounts",
            "Add Mary to Accounts",
            "Add Lee to Finance",
            "Reset department of Finance",
        )
        output = render_result(svc.list_all())
        assert "Department" in output
        assert "Accounts" in output
        assert "jason, mary" in output
        assert "(empty)" in output
        assert "total: 2" in output

    def test_empty_listing(self) -> None:
        output = render_result(_service().list_all())
        assert "No departments." in output

    def test_membership(self) -> None:
        svc = _service("Add Jason to Accounts")
        assert "Jason is an employee" in render_result(svc.is_employee("Jason"))
        assert "Mary is not an employee" in render_result(svc.is_employee("Mary"))

    def test_total(self) -> None:
        output = render_result(_service("Add Jason to Accounts").total_employees())
        assert "total: 1" in output

    def test_batch(self) -> None:
        output = render_result(_service().apply_batch(["Add Jason to Accounts"]))
        assert "apply_batch" in output
        assert "applied: 1" in output

    def test_batch_verbose_lists_commands(self) -> None:
        result = _service().apply_batch(["Add Jason to Accounts"])
        assert "Add Jason to Accounts" in render_result(result, verbose=True)

    def test_batch_errors(self) -> None:
        result = _service().apply_batch(["Add Jason to Accounts", "Promote Jason to Finance"])
        output = render_result(result)
        assert output.startswith("ERROR")
        assert "1 of 2 commands failed" in output
        assert "applied: 1" in output
        assert "Promote Jason to Finance" in output
        assert "Invalid operation" in output

    def test_error(self) -> None:
        output = render_result(_service().apply_command("Add Jason Accounts"))
        assert output.startswith("ERROR")
        assert "Invalid statement" in output

    def test_error_detail_when_verbose(self) -> None:
        result = _service().apply_command("Hire Jason to Accounts")
        assert "operation: Hire" in render_result(result, verbose=True)

    def test_listing_keeps_bracketed_department_names(self) -> None:
        svc = _service("Add Jason to [/x]", "Add Mary to [bold]Ops")
        output = render_result(svc.list_all())
        assert "[/x]" in output
        assert "[bold]Ops" in output
        assert "jason" in output
        assert "mary" in output

    def test_command_keeps_bracketed_department_name(self) -> None:
        output = render_result(_service().apply_command("Add Jason to [bold]Ops"))
        assert "department: [bold]Ops" in output

    def test_unknown_op_rejected(self) -> None:
        result = ServiceResult(ok=True, op="other", data={"n": 3})
        with pytest.raises(ValueError, match="No renderer for op 'other'"):
            render_result(result)


class TestRenderQuiet:
    def test_listing(self) -> None:
        svc = _service("Add Jason to Accounts", "Add Mary to Accounts", "Add Lee to Finance")
        svc.apply_command("Reset department of Finance")
        assert render_quiet(svc.list_all()) == "Accounts: jason, mary\nFinance:"

    def test_membership(self) -> None:
        svc = _service("Add Jason to Accounts")
        assert render_quiet(svc.is_employee("JASON")) == "yes"
        assert render_quiet(svc.is_employee("Mary")) == "no"

    def test_total(self) -> None:
        assert render_quiet(_service("Add Jason to Accounts").total_employees()) == "1"

    def test_batch_errors(self) -> None:
        result = _service().apply_batch(["Add Jason Accounts"])
        lines = render_quiet(result).splitlines()
        assert lines[0] == "ERROR: apply_batch — 1 of 1 commands failed"
        assert lines[1].startswith("  [0] Add Jason Accounts: Invalid statement")

    def test_error_without_payload(self) -> None:
        result = ServiceResult(ok=False, op="x", error=ServiceError(code="E", message="boom"))
        assert render_quiet(result) == "ERROR: x — boom"
