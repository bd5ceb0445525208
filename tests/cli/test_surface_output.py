# topmark:header:start
#
#   project      : PkgSurface
#   file         : test_surface_output.py
#   file_relpath : tests/cli/test_surface_output.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests for the `surface` command and its output formats."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from pkgsurface.core.exit_codes import ExitCode
from tests.cli.conftest import assert_SUCCESS, run_cli_in
from tests.conftest import mark_cli, parametrize
from tests.model_factory import WEATHER_NS, WEATHER_TYPES, weather_model, write_model

if TYPE_CHECKING:
    from pathlib import Path


@mark_cli
def test_surface_json(tmp_path: Path, weather_model_path: Path) -> None:
    """JSON output carries the plan metadata and the ordered entries."""
    result = run_cli_in(tmp_path, ["surface", weather_model_path.name, "--format", "json"])

    assert_SUCCESS(result)
    data: dict[str, Any] = json.loads(result.output)
    assert data["meta"]["tool"] == "pkgsurface"
    assert data["service"] == f"{WEATHER_NS}#Weather"
    assert data["client"] == "Weather"
    assert data["base_exception"] == "WeatherServiceException"
    assert data["schema_mode"] is False
    assert data["kind"] == "types"
    assert [e["identifier"] for e in data["entries"]] == WEATHER_TYPES


@mark_cli
def test_surface_ndjson_runtime_with_schemas(tmp_path: Path, echo_model_path: Path) -> None:
    """NDJSON prints one record per entry; ``--schemas`` adds schema objects."""
    result = run_cli_in(
        tmp_path,
        ["surface", echo_model_path.name, "--kind", "runtime", "--schemas", "--format", "ndjson"],
    )

    assert_SUCCESS(result)
    records: list[dict[str, Any]] = [json.loads(line) for line in result.output.splitlines()]
    assert [r["identifier"] for r in records] == [
        "EchoClient",
        "Echo",
        "PingCommand",
        "Ping$",
        "EchoServiceException",
    ]
    assert all(r["kind"] == "runtime" for r in records)
    assert records[3]["role"] == "schema"
    assert records[3]["schema_of"] == "PingCommand"


@mark_cli
def test_surface_markdown(tmp_path: Path, echo_model_path: Path) -> None:
    """Markdown output is a heading and a table."""
    result = run_cli_in(tmp_path, ["surface", echo_model_path.name, "--format", "markdown"])

    assert_SUCCESS(result)
    assert result.output.startswith("# Echo types surface")
    assert "| Identifier" in result.output
    assert "| `PingCommandInput`" in result.output


@mark_cli
def test_surface_default_format(tmp_path: Path, echo_model_path: Path) -> None:
    """The default format groups entries by category."""
    result = run_cli_in(tmp_path, ["--no-color", "surface", echo_model_path.name])

    assert_SUCCESS(result)
    lines: list[str] = result.output.splitlines()
    assert lines[0] == "Echo types surface"
    assert "  service: example.echo#Echo" in lines
    assert "  schema mode: off" in lines
    assert "clients (2)" in lines
    assert "commands (3)" in lines
    assert "base_exception (1)" in lines
    assert any("EchoServiceException" in line and "< Error" in line for line in lines)


@parametrize(
    "service, client",
    [
        (f"{WEATHER_NS}#Weather", "Weather"),
        (f"{WEATHER_NS}#Other", "Other"),
    ],
)
@mark_cli
def test_surface_service_selection(tmp_path: Path, service: str, client: str) -> None:
    """``--service`` picks one of several services."""
    doc: dict[str, Any] = weather_model()
    doc["shapes"][f"{WEATHER_NS}#Other"] = {"type": "service", "version": "1"}
    write_model(tmp_path / "model.json", doc)

    ambiguous = run_cli_in(tmp_path, ["--no-color", "surface", "model.json"])
    assert ambiguous.exit_code == ExitCode.MODEL_ERROR, ambiguous.output

    result = run_cli_in(
        tmp_path, ["surface", "model.json", "--service", service, "--format", "json"]
    )
    assert_SUCCESS(result)
    assert json.loads(result.output)["client"] == client


@mark_cli
def test_surface_reads_config_next_to_model(tmp_path: Path, echo_model_path: Path) -> None:
    """Configuration next to the model applies unless ``--no-config`` is given."""
    (tmp_path / "pkgsurface.toml").write_text(
        '[generator]\nservice_name = "Reverb"\n', encoding="utf-8"
    )

    configured = run_cli_in(tmp_path, ["surface", echo_model_path.name, "--format", "json"])
    assert_SUCCESS(configured)
    assert json.loads(configured.output)["client"] == "Reverb"

    ignored = run_cli_in(
        tmp_path, ["surface", echo_model_path.name, "--no-config", "--format", "json"]
    )
    assert_SUCCESS(ignored)
    assert json.loads(ignored.output)["client"] == "Echo"
