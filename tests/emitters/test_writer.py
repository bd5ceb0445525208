# topmark:header:start
#
#   project      : PkgSurface
#   file         : test_writer.py
#   file_relpath : tests/emitters/test_writer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for `pkgsurface.emitters.writer.CodeWriter`."""

from __future__ import annotations

import pytest

from pkgsurface.emitters.writer import MAX_LINE_WIDTH, CodeWriter, is_relative
from tests.conftest import parametrize


def test_imports_are_grouped_sorted_and_deduplicated() -> None:
    """Packages come first, then relative paths; names sort case-insensitively."""
    writer = CodeWriter("// banner")
    writer.add_import("zeta", "../src")
    writer.add_import("Alpha", "../src")
    writer.add_import("alpha", "../src")
    writer.add_import("Alpha", "../src")
    writer.add_import("join", "node:path")
    writer.add_import("SnapshotRunner", "@smithy/snapshot-testing")
    writer.write("run();")

    assert writer.render() == "\n".join(
        [
            "// banner",
            'import { SnapshotRunner } from "@smithy/snapshot-testing";',
            'import { join } from "node:path";',
            "",
            'import { Alpha, alpha, zeta } from "../src";',
            "",
            "run();",
            "",
        ]
    )


def test_registration_order_does_not_matter() -> None:
    """The same imports registered in any order render identically."""
    names: list[str] = ["b", "A", "c$", "C", "a"]
    first = CodeWriter()
    second = CodeWriter()
    for name in names:
        first.add_import(name, "pkg")
    for name in reversed(names):
        second.add_import(name, "pkg")

    assert first.render() == second.render()
    assert first.imported_names("pkg") == ["A", "a", "b", "C", "c$"]


def test_aliases_and_default_imports() -> None:
    """Aliased names render as ``name as alias``; a default import precedes named ones."""
    writer = CodeWriter()
    writer.add_import("test", "vitest", alias="it")
    writer.add_import("describe", "vitest")
    writer.add_default_import("assert", "node:assert")
    writer.add_default_import("assert", "node:assert")
    writer.add_import("strict", "node:assert")

    assert writer.render_imports() == [
        'import assert, { strict } from "node:assert";',
        'import { describe, test as it } from "vitest";',
    ]
    assert writer.imported_names("vitest") == ["describe", "it"]
    assert writer.imported_names("missing") == []


def test_conflicting_default_import_raises() -> None:
    """A module can have only one default import."""
    writer = CodeWriter()
    writer.add_default_import("assert", "node:assert")

    with pytest.raises(ValueError, match="already has default import"):
        writer.add_default_import("ok", "node:assert")


def test_long_import_statements_wrap() -> None:
    """Statements over the width limit list one name per line."""
    writer = CodeWriter()
    names: list[str] = [f"VeryLongIdentifierNumber{i:02d}" for i in range(8)]
    for name in names:
        writer.add_import(name, "../dist-cjs/index.js")

    lines: list[str] = writer.render_imports()
    assert lines[0] == "import {"
    assert lines[1:-1] == [f"  {n}," for n in names]
    assert lines[-1] == '} from "../dist-cjs/index.js";'
    assert all(len(line) <= MAX_LINE_WIDTH for line in lines)


def test_indentation_and_blocks() -> None:
    """Blocks indent their body by two spaces; blank lines carry no indentation."""
    writer = CodeWriter()
    with writer.block("describe(() => {", "});"):
        writer.write("a();")
        writer.write()
        with writer.indented(2):
            writer.write("b();")

    assert writer.render() == "describe(() => {\n  a();\n\n      b();\n});\n"


def test_trailing_blank_lines_are_dropped() -> None:
    """The rendered text ends with exactly one newline."""
    writer = CodeWriter("// banner")
    writer.write_lines(["x();", "", ""])

    assert str(writer) == "// banner\nx();\n"


@parametrize(
    "module, expected",
    [
        ("../src", True),
        ("./index", True),
        ("..", True),
        (".", True),
        ("vitest", False),
        ("node:path", False),
        ("@smithy/snapshot-testing", False),
    ],
)
def test_is_relative(module: str, expected: bool) -> None:
    """Path-like module specifiers are relative imports."""
    assert is_relative(module) is expected
