# topmark:header:start
#
#   project      : PkgSurface
#   file         : recheck.py
#   file_relpath : src/pkgsurface/emitters/recheck.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Structural readers for generated artifacts.

``pkgsurface check --structural`` compares what an artifact checks rather than
its exact bytes, so hand-edited comments, blank lines and import formatting do
not count as drift. Comment lines are skipped by every reader.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Final

from pkgsurface.emitters.registry import ArtifactKind

if TYPE_CHECKING:
    from collections.abc import Iterator

_ID: Final[str] = r"[A-Za-z_$][A-Za-z0-9_$]*"

_TYPEOF_RE: Final[re.Pattern[str]] = re.compile(
    rf'^assert\(typeof ({_ID}) === "(function|object)"\);$'
)
_INSTANCEOF_RE: Final[re.Pattern[str]] = re.compile(
    rf"^assert\(({_ID})\.prototype instanceof ({_ID})\);$"
)
_EXPORT_NAME_RE: Final[re.Pattern[str]] = re.compile(rf"^({_ID}),?$")
_SCHEMA_PAIR_RE: Final[re.Pattern[str]] = re.compile(rf"^\[({_ID}), ({_ID})\],?$")


def _code_lines(text: str) -> Iterator[str]:
    for raw in text.splitlines():
        line: str = raw.strip()
        if not line or line.startswith("//"):
            continue
        yield line


def read_type_exports(text: str) -> list[str]:
    """Return the identifiers listed by ``export type { ... }`` blocks, in order."""
    names: list[str] = []
    inside: bool = False
    for line in _code_lines(text):
        if not inside:
            inside = line.startswith("export type {")
            continue
        if line.startswith("}"):
            inside = False
            continue
        m: re.Match[str] | None = _EXPORT_NAME_RE.match(line)
        if m:
            names.append(m.group(1))
    return names


def read_runtime_checks(text: str) -> list[tuple[str, str]]:
    """Return ``(identifier, check)`` pairs of a runtime-check script, in order.

    ``check`` is ``"function"``, ``"object"`` or ``"instanceof <Ancestor>"``.
    """
    checks: list[tuple[str, str]] = []
    for line in _code_lines(text):
        m: re.Match[str] | None = _TYPEOF_RE.match(line)
        if m:
            checks.append((m.group(1), m.group(2)))
            continue
        m = _INSTANCEOF_RE.match(line)
        if m:
            checks.append((m.group(1), f"instanceof {m.group(2)}"))
    return checks


def read_snapshot_schemas(text: str) -> list[tuple[str, str]]:
    """Return the ordered ``(schema, command)`` pairs of a snapshot harness."""
    pairs: list[tuple[str, str]] = []
    for line in _code_lines(text):
        m: re.Match[str] | None = _SCHEMA_PAIR_RE.match(line)
        if m:
            pairs.append((m.group(1), m.group(2)))
    return pairs


def read_structure(kind: ArtifactKind, text: str) -> list[str]:
    """Return the structural content of an artifact as comparable lines."""
    if kind is ArtifactKind.TYPES:
        return read_type_exports(text)
    if kind is ArtifactKind.RUNTIME:
        return [f"{ident}: {check}" for ident, check in read_runtime_checks(text)]
    return [f"{schema} -> {command}" for schema, command in read_snapshot_schemas(text)]
