# topmark:header:start
#
#   project      : PkgSurface
#   file         : snapshot_harness.py
#   file_relpath : src/pkgsurface/emitters/snapshot_harness.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Snapshot-test harness.

The rendered vitest module pins the clock, configures a ``SnapshotRunner`` with
the bare client and an ordered map from each operation's schema object to its
command, and runs it inside a single ``describe`` block named after the client
and the active mode.

Only the command schemas of the enumeration are used. Without schema mode the
map is empty and the suite registers no test cases.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from pkgsurface.config.logging import get_logger
from pkgsurface.emitters.writer import CodeWriter
from pkgsurface.surface import naming
from pkgsurface.surface.types import Category

if TYPE_CHECKING:
    from collections.abc import Sequence

    from pkgsurface.config.logging import PkgSurfaceLogger
    from pkgsurface.config.model import Settings
    from pkgsurface.surface.types import SurfaceEntry

logger: PkgSurfaceLogger = get_logger(__name__)

PATH_MODULE: Final[str] = "node:path"


def snapshot_schema_pairs(entries: Sequence[SurfaceEntry]) -> list[tuple[str, str]]:
    """Return ``(schema, command)`` pairs for the operations in ``entries``, in order."""
    return [
        (e.identifier, e.schema_of)
        for e in entries
        if e.category is Category.COMMANDS and e.is_schema and e.schema_of
    ]


def _timeout_literal(ms: int) -> str:
    # 30000 -> 30_000
    return f"{ms:_}"


def render_snapshot_harness(
    entries: Sequence[SurfaceEntry],
    settings: Settings,
    client_name: str,
) -> str:
    """Render the snapshot-test harness.

    Args:
        entries (Sequence[SurfaceEntry]): The `TestKind.SNAPSHOT` enumeration.
        settings (Settings): Snapshot and output settings.
        client_name (str): Aggregate client identifier.

    Returns:
        str: The file text.
    """
    client: str = naming.bare_client_name(client_name)
    pairs: list[tuple[str, str]] = snapshot_schema_pairs(entries)

    writer = CodeWriter(settings.banner)
    writer.add_import("SnapshotRunner", settings.runner_package)
    writer.add_import("join", PATH_MODULE)
    for name in ("describe", "expect", "vi"):
        writer.add_import(name, settings.test_package)
    writer.add_import("test", settings.test_package, alias="it")
    writer.add_import(client, settings.snapshot_import)
    for schema, command in pairs:
        writer.add_import(schema, settings.snapshot_import)
        writer.add_import(command, settings.snapshot_import)

    writer.write(f"vi.setSystemTime(new Date({settings.system_time_ms}));")
    writer.write(f"const Client = {client};")
    writer.write()
    writer.write(
        f'const mode = (process.env.{settings.snapshot_mode_env} as "write" | "compare") '
        f'?? "{settings.snapshot_default_mode}";'
    )
    writer.write()
    writer.write(f'describe("{client}" + ` (${{mode}})`, () => {{')
    with writer.indented():
        with writer.block("const runner = new SnapshotRunner({", "});"):
            writer.write_lines(
                [
                    f'snapshotDirPath: join(__dirname, "{settings.snapshot_dir}"),',
                    "Client,",
                    "mode,",
                ]
            )
            with writer.block("testCase(caseName: string, run: () => Promise<void>) {", "},"):
                writer.write("it(caseName, run);")
            with writer.block(
                "assertions(caseName: string, expected: string, actual: string): Promise<void> {",
                "},",
            ):
                writer.write_lines(
                    ["expect(actual).toEqual(expected);", "return Promise.resolve();"]
                )
            if pairs:
                with writer.block("schemas: new Map<any, any>([", "]),"):
                    for schema, command in pairs:
                        writer.write(f"[{schema}, {command}],")
            else:
                writer.write("schemas: new Map<any, any>([]),")
        writer.write()
        writer.write("runner.run();")
    writer.write(f"}}, {_timeout_literal(settings.snapshot_timeout_ms)});")

    logger.debug("Rendered snapshot harness: %d operations", len(pairs))
    return writer.render()
