# topmark:header:start
#
#   project      : PkgSurface
#   file         : test_generate_check.py
#   file_relpath : tests/cli/test_generate_check.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests for `generate` and `check`, including their exit codes."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pkgsurface.core.exit_codes import ExitCode
from tests.cli.conftest import assert_SUCCESS, assert_WOULD_CHANGE, run_cli_in
from tests.conftest import mark_cli
from tests.model_factory import write_model

if TYPE_CHECKING:
    from pathlib import Path

ARTIFACTS: tuple[str, ...] = (
    "test/index-types.ts",
    "test/index-objects.spec.mjs",
    "test/snapshots.integ.spec.ts",
)


@mark_cli
def test_generate_writes_all_artifacts(tmp_path: Path, echo_model_path: Path) -> None:
    """The first run creates every artifact; the second writes nothing."""
    first = run_cli_in(tmp_path, ["--no-color", "generate", echo_model_path.name])

    assert_SUCCESS(first)
    for relpath in ARTIFACTS:
        assert (tmp_path / relpath).is_file()
        assert f"created   {relpath}" in first.output
    assert "3 of 3 artifact(s) written." in first.output

    second = run_cli_in(tmp_path, ["--no-color", "generate", echo_model_path.name])
    assert_SUCCESS(second)
    assert "created" not in second.output
    assert "0 of 3 artifact(s) written." in second.output

    verbose = run_cli_in(tmp_path, ["--no-color", "-v", "generate", echo_model_path.name])
    assert_SUCCESS(verbose)
    assert "unchanged test/index-types.ts" in verbose.output


@mark_cli
def test_generate_only_and_out(tmp_path: Path, echo_model_path: Path) -> None:
    """``--only`` selects artifacts; ``--out`` moves them under the root."""
    result = run_cli_in(
        tmp_path,
        [
            "--no-color",
            "generate",
            echo_model_path.name,
            "--only",
            "types",
            "--out",
            "generated",
            "--root",
            "pkg",
        ],
    )

    assert_SUCCESS(result)
    assert (tmp_path / "pkg" / "generated" / "index-types.ts").is_file()
    assert not (tmp_path / "pkg" / "generated" / "index-objects.spec.mjs").exists()
    assert "1 of 1 artifact(s) written." in result.output


@mark_cli
def test_generate_quiet_prints_nothing(tmp_path: Path, echo_model_path: Path) -> None:
    """``-q`` suppresses the per-file report."""
    result = run_cli_in(tmp_path, ["-q", "generate", echo_model_path.name])

    assert_SUCCESS(result)
    assert result.output == ""
    assert (tmp_path / ARTIFACTS[0]).is_file()


@mark_cli
def test_check_before_and_after_generate(tmp_path: Path, echo_model_path: Path) -> None:
    """`check` exits 2 while artifacts are stale and 0 once they are generated."""
    before = run_cli_in(tmp_path, ["--no-color", "check", echo_model_path.name])

    assert_WOULD_CHANGE(before)
    assert "missing  test/index-types.ts" in before.output
    assert "3 of 3 artifact(s) would change" in before.output
    assert not (tmp_path / "test").exists()

    assert_SUCCESS(run_cli_in(tmp_path, ["generate", echo_model_path.name]))

    after = run_cli_in(tmp_path, ["--no-color", "check", echo_model_path.name])
    assert_SUCCESS(after)
    assert "All 3 artifact(s) are up to date." in after.output


@mark_cli
def test_check_diff_and_structural(tmp_path: Path, echo_model_path: Path) -> None:
    """``--diff`` prints a patch; ``--structural`` ignores comment-only edits."""
    assert_SUCCESS(run_cli_in(tmp_path, ["generate", echo_model_path.name]))
    runtime: Path = tmp_path / "test" / "index-objects.spec.mjs"
    runtime.write_text(
        "// checked by hand\n" + runtime.read_text(encoding="utf-8"), encoding="utf-8"
    )

    exact = run_cli_in(tmp_path, ["--no-color", "check", echo_model_path.name, "--diff"])
    assert_WOULD_CHANGE(exact)
    assert "changed  test/index-objects.spec.mjs" in exact.output
    assert "--- test/index-objects.spec.mjs (current)" in exact.output
    assert "-// checked by hand" in exact.output
    assert "1 of 3 artifact(s) would change" in exact.output

    structural = run_cli_in(
        tmp_path, ["--no-color", "check", echo_model_path.name, "--structural"]
    )
    assert_SUCCESS(structural)


@mark_cli
def test_check_notices_schema_mode_switch(tmp_path: Path, echo_model_path: Path) -> None:
    """Turning schema mode on changes the runtime and snapshot artifacts."""
    assert_SUCCESS(run_cli_in(tmp_path, ["generate", echo_model_path.name]))

    result = run_cli_in(tmp_path, ["--no-color", "check", echo_model_path.name, "--schemas"])

    assert_WOULD_CHANGE(result)
    assert "changed  test/index-objects.spec.mjs" in result.output
    assert "changed  test/snapshots.integ.spec.ts" in result.output
    assert "2 of 3 artifact(s) would change" in result.output


@mark_cli
def test_missing_model_exit_code(tmp_path: Path) -> None:
    """A model path that does not exist exits with FILE_NOT_FOUND."""
    result = run_cli_in(tmp_path, ["--no-color", "generate", "nope.json"])

    assert result.exit_code == ExitCode.FILE_NOT_FOUND, result.output
    assert "Model file not found" in result.output


@mark_cli
def test_malformed_model_exit_code(tmp_path: Path) -> None:
    """A model without a service exits with MODEL_ERROR."""
    write_model(tmp_path / "model.json", {"smithy": "2.0", "shapes": {}})

    result = run_cli_in(tmp_path, ["--no-color", "generate", "model.json"])

    assert result.exit_code == ExitCode.MODEL_ERROR, result.output
    assert not (tmp_path / "test").exists()


@mark_cli
def test_missing_config_file_exit_code(tmp_path: Path, echo_model_path: Path) -> None:
    """An explicit ``--config`` file that does not exist is a configuration error."""
    result = run_cli_in(
        tmp_path, ["--no-color", "check", echo_model_path.name, "--config", "missing.toml"]
    )

    assert result.exit_code == ExitCode.CONFIG_ERROR, result.output
    assert "Config file not found" in result.output


@mark_cli
def test_verbose_and_quiet_are_exclusive(tmp_path: Path, echo_model_path: Path) -> None:
    """Combining ``-v`` and ``-q`` is a usage error."""
    result = run_cli_in(tmp_path, ["-v", "-q", "generate", echo_model_path.name])

    assert result.exit_code == ExitCode.USAGE_ERROR, result.output
    assert "mutually exclusive" in result.output


@mark_cli
def test_config_warnings_are_reported(tmp_path: Path, echo_model_path: Path) -> None:
    """Unknown configuration keys are reported but do not fail the run."""
    (tmp_path / "pkgsurface.toml").write_text('[output]\ncolour = "red"\n', encoding="utf-8")

    result = run_cli_in(tmp_path, ["--no-color", "generate", echo_model_path.name])

    assert_SUCCESS(result)
    assert "Warning: Ignoring unknown key [output].colour" in result.output
