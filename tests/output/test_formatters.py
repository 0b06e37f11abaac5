"""Tests for the format_result dispatcher and OutputSettings."""

import json

from biclog.output.formatters import OutputSettings, format_result
from biclog.services.result import ServiceError, ServiceResult


def _list(*names: str) -> ServiceResult:
    items = [{"id": i, "name": n} for i, n in enumerate(names, start=1)]
    return ServiceResult(
        ok=True,
        op="list_bicycle_type",
        data={"kind": "bicycle_type", "count": len(items), "items": items},
    )


def _err(op: str = "add_bicycle_type", msg: str = "missing bicycle type name") -> ServiceResult:
    error = ServiceError(code="VALIDATION_FAILED", message=msg)
    return ServiceResult(ok=False, op=op, error=error)


class TestOutputSettings:
    def test_defaults(self) -> None:
        s = OutputSettings()
        assert s.json_output is False
        assert s.quiet is False
        assert s.verbose is False
        assert s.separator == "  "


class TestFormatResultJSON:
    def test_json_mode_returns_valid_json(self) -> None:
        data = json.loads(format_result(_list("Road"), settings=OutputSettings(json_output=True)))
        assert data["ok"] is True
        assert data["op"] == "list_bicycle_type"
        assert data["data"]["items"] == [{"id": 1, "name": "Road"}]

    def test_json_mode_error(self) -> None:
        data = json.loads(format_result(_err(), settings=OutputSettings(json_output=True)))
        assert data["ok"] is False
        assert data["error"]["code"] == "VALIDATION_FAILED"

    def test_json_output_kwarg(self) -> None:
        data = json.loads(format_result(_list(), json_output=True))
        assert data["data"]["count"] == 0

    def test_json_wins_over_quiet(self) -> None:
        settings = OutputSettings(json_output=True, quiet=True)
        output = format_result(_list("Road"), settings=settings)
        assert json.loads(output)["ok"] is True


class TestFormatResultHuman:
    def test_list_table(self) -> None:
        lines = format_result(_list("Road", "MTB")).splitlines()
        assert lines == ["ID  TYPE", " 1  Road", " 2  MTB"]

    def test_separator(self) -> None:
        output = format_result(_list("Road"), settings=OutputSettings(separator=" | "))
        assert output.splitlines()[0] == "ID | TYPE"

    def test_error(self) -> None:
        assert format_result(_err()) == "ERROR: add_bicycle_type - missing bicycle type name"


class TestFormatResultQuiet:
    def test_list_ids_only(self) -> None:
        output = format_result(_list("Road", "MTB"), settings=OutputSettings(quiet=True))
        assert output == "1\n2"

    def test_mutation_silent(self) -> None:
        result = ServiceResult(ok=True, op="add_bicycle_type", data={"id": 1, "name": "Road"})
        assert format_result(result, settings=OutputSettings(quiet=True, verbose=True)) == ""

    def test_error_still_reported(self) -> None:
        output = format_result(_err(), settings=OutputSettings(quiet=True))
        assert output.startswith("ERROR: add_bicycle_type")
