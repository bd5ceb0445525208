# topmark:header:start
#
#   project      : PkgSurface
#   file         : runtime_surface.py
#   file_relpath : src/pkgsurface/emitters/runtime_surface.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Runtime-check script.

The rendered ES module imports every runtime export of the package and asserts
its kind:

    - functions: ``assert(typeof X === "function");``
    - objects: ``assert(typeof X === "object");``
    - error classes: ``assert(X.prototype instanceof Ancestor);``

Category comments separate the groups for readability only; structural
re-checks skip them. The script ends by printing a success line naming the
aggregate client, so it doubles as a smoke test.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from pkgsurface.config.logging import get_logger
from pkgsurface.emitters.writer import CodeWriter
from pkgsurface.surface.types import Category, RuntimeKind

if TYPE_CHECKING:
    from collections.abc import Sequence

    from pkgsurface.config.logging import PkgSurfaceLogger
    from pkgsurface.config.model import Settings
    from pkgsurface.surface.types import SurfaceEntry

logger: PkgSurfaceLogger = get_logger(__name__)

ASSERT_MODULE: Final[str] = "node:assert"

# Section comment per category; the base exception shares the errors section.
CATEGORY_LABELS: Final[dict[Category, str]] = {
    Category.CLIENTS: "clients",
    Category.COMMANDS: "commands",
    Category.ENUMS: "enums",
    Category.STRUCTURES: "structural schemas",
    Category.ERRORS: "errors",
    Category.BASE_EXCEPTION: "errors",
    Category.WAITERS: "waiters",
    Category.PAGINATORS: "paginators",
}


def assertion_for(entry: SurfaceEntry) -> str:
    """Return the assertion statement checking ``entry``.

    Raises:
        ValueError: For type-only entries, which have no runtime value.
    """
    kind: RuntimeKind = entry.runtime_kind
    if kind is RuntimeKind.FUNCTION:
        return f'assert(typeof {entry.identifier} === "function");'
    if kind is RuntimeKind.OBJECT:
        return f'assert(typeof {entry.identifier} === "object");'
    if kind is RuntimeKind.ERROR_CLASS:
        if not entry.ancestor:
            raise ValueError(f"Error class {entry.identifier} has no ancestor")
        return f"assert({entry.identifier}.prototype instanceof {entry.ancestor});"
    raise ValueError(f"{entry.identifier} is {kind.value} and has no runtime value")


def render_runtime_surface(
    entries: Sequence[SurfaceEntry],
    settings: Settings,
    client_name: str,
) -> str:
    """Render the runtime-check script for ``entries``.

    Args:
        entries (Sequence[SurfaceEntry]): The `TestKind.RUNTIME` enumeration.
        settings (Settings): Provides the banner and the runtime entry point path.
        client_name (str): Aggregate client identifier named in the success line.

    Returns:
        str: The file text.
    """
    writer = CodeWriter(settings.banner)
    writer.add_default_import("assert", ASSERT_MODULE)

    label: str | None = None
    checked: int = 0
    for entry in entries:
        if entry.runtime_kind is RuntimeKind.TYPE_ONLY:
            logger.debug("Skipping type-only %s in the runtime surface", entry.identifier)
            continue
        if CATEGORY_LABELS[entry.category] != label:
            label = CATEGORY_LABELS[entry.category]
            writer.write(f"// {label}")
        writer.add_import(entry.identifier, settings.runtime_import)
        writer.write(assertion_for(entry))
        checked += 1

    writer.write(f"console.log(`{client_name} index test passed.`);")
    logger.debug("Rendered runtime surface: %d assertions", checked)
    return writer.render()
