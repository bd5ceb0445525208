# topmark:header:start
#
#   project      : PkgSurface
#   file         : writer.py
#   file_relpath : src/pkgsurface/emitters/writer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Line-oriented TypeScript/JavaScript text writer with import management.

`CodeWriter` collects body lines (with indentation) and ES module imports
separately, then renders:

    <banner>
    <package imports, one statement per module, modules sorted>

    <relative imports>

    <body>

Named imports are deduplicated per module and sorted case-insensitively
(ties broken case-sensitively), so the import block is independent of the
order in which identifiers were registered. Statements longer than
`MAX_LINE_WIDTH` are wrapped one name per line.
"""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Final

from pkgsurface.surface.ordering import name_sort_key

if TYPE_CHECKING:
    from collections.abc import Iterator

MAX_LINE_WIDTH: Final[int] = 120
INDENT: Final[str] = "  "


@dataclass(frozen=True)
class ImportName:
    """A named import, optionally aliased (``name as alias``)."""

    name: str
    alias: str | None = None

    def render(self) -> str:
        """Return the import specifier text."""
        return f"{self.name} as {self.alias}" if self.alias else self.name


def _import_key(item: ImportName) -> tuple[str, str, str]:
    folded, raw = name_sort_key(item.name)
    return (folded, raw, item.alias or "")


def is_relative(module: str) -> bool:
    """Return True for module specifiers that are paths (``./x``, ``../x``, ``..``)."""
    return module == "." or module == ".." or module.startswith(("./", "../"))


@dataclass
class _ModuleImports:
    default: str | None = None
    names: set[ImportName] = field(default_factory=set)


class CodeWriter:
    """Accumulates imports and body lines and renders them as one source file.

    Args:
        banner (str): First line of the rendered file; empty for none.
    """

    def __init__(self, banner: str = "") -> None:
        self._banner: str = banner
        self._imports: dict[str, _ModuleImports] = {}
        self._lines: list[str] = []
        self._level: int = 0

    # --- imports -----------------------------------------------------------

    def add_import(self, name: str, module: str, *, alias: str | None = None) -> None:
        """Register ``import { name [as alias] } from "module"``."""
        self._imports.setdefault(module, _ModuleImports()).names.add(ImportName(name, alias))

    def add_default_import(self, name: str, module: str) -> None:
        """Register ``import name from "module"``.

        Raises:
            ValueError: If ``module`` already has a different default import.
        """
        entry: _ModuleImports = self._imports.setdefault(module, _ModuleImports())
        if entry.default is not None and entry.default != name:
            raise ValueError(
                f"Module {module!r} already has default import {entry.default!r}, not {name!r}"
            )
        entry.default = name

    def imported_names(self, module: str) -> list[str]:
        """Return the local names imported from ``module`` in rendered order."""
        entry: _ModuleImports | None = self._imports.get(module)
        if entry is None:
            return []
        return [(i.alias or i.name) for i in sorted(entry.names, key=_import_key)]

    # --- body ----------------------------------------------------------------

    def write(self, line: str = "") -> CodeWriter:
        """Append one line at the current indentation; empty lines stay empty."""
        self._lines.append(f"{INDENT * self._level}{line}" if line else "")
        return self

    def write_lines(self, lines: list[str]) -> CodeWriter:
        """Append several lines at the current indentation."""
        for line in lines:
            self.write(line)
        return self

    @contextmanager
    def indented(self, levels: int = 1) -> Iterator[CodeWriter]:
        """Indent lines written inside the ``with`` block."""
        self._level += levels
        try:
            yield self
        finally:
            self._level -= levels

    @contextmanager
    def block(self, opening: str, closing: str) -> Iterator[CodeWriter]:
        """Write ``opening``, an indented body, then ``closing``."""
        self.write(opening)
        with self.indented():
            yield self
        self.write(closing)

    # --- rendering -----------------------------------------------------------

    def _render_statement(self, module: str, entry: _ModuleImports) -> list[str]:
        names: list[str] = [i.render() for i in sorted(entry.names, key=_import_key)]
        default: str = entry.default or ""
        if not names:
            return [f'import {default} from "{module}";']
        prefix: str = f"{default}, " if default else ""
        single: str = f'import {prefix}{{ {", ".join(names)} }} from "{module}";'
        if len(single) <= MAX_LINE_WIDTH:
            return [single]
        return [
            f"import {prefix}{{",
            *(f"{INDENT}{n}," for n in names),
            f'}} from "{module}";',
        ]

    def render_imports(self) -> list[str]:
        """Return the import block (packages, a blank line, relative paths)."""
        packages: list[str] = []
        relative: list[str] = []
        for module in sorted(self._imports, key=name_sort_key):
            target: list[str] = relative if is_relative(module) else packages
            target.extend(self._render_statement(module, self._imports[module]))
        if packages and relative:
            return [*packages, "", *relative]
        return packages or relative

    def render(self) -> str:
        """Return the full file text, terminated by a single newline."""
        out: list[str] = []
        if self._banner:
            out.append(self._banner)
        imports: list[str] = self.render_imports()
        if imports:
            out.extend(imports)
            out.append("")
        body: list[str] = list(self._lines)
        while body and not body[-1]:
            body.pop()
        out.extend(body)
        return "\n".join(out) + "\n"

    def __str__(self) -> str:
        return self.render()
