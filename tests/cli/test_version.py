# topmark:header:start
#
#   project      : PkgSurface
#   file         : test_version.py
#   file_relpath : tests/cli/test_version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test: `version` command output."""

from __future__ import annotations

import json

from pkgsurface.constants import PKGSURFACE_VERSION
from tests.cli.conftest import assert_SUCCESS, run_cli
from tests.conftest import mark_cli


@mark_cli
def test_version_outputs_version() -> None:
    """The default format prints the bare version string."""
    result = run_cli(["--no-color", "version"])

    assert_SUCCESS(result)
    assert result.output.strip() == PKGSURFACE_VERSION


@mark_cli
def test_version_json_format() -> None:
    """`version --format json` returns the tool metadata."""
    result = run_cli(["version", "--format", "json"])

    assert_SUCCESS(result)
    assert json.loads(result.output) == {"tool": "pkgsurface", "version": PKGSURFACE_VERSION}


@mark_cli
def test_version_markdown_format() -> None:
    """`version --format markdown` prints a heading and the version."""
    result = run_cli(["version", "--format", "markdown"])

    assert_SUCCESS(result)
    assert result.output.startswith("# PkgSurface Version")
    assert PKGSURFACE_VERSION in result.output


@mark_cli
def test_bare_invocation_prints_help() -> None:
    """Without a subcommand the group prints a hint and its help."""
    result = run_cli(["--no-color"])

    assert_SUCCESS(result)
    assert "pkgsurface generate MODEL" in result.output
    assert "generate" in result.output
    assert "check" in result.output
