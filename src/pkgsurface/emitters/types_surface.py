# topmark:header:start
#
#   project      : PkgSurface
#   file         : types_surface.py
#   file_relpath : src/pkgsurface/emitters/types_surface.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Type-only export list.

The rendered file re-exports every expected identifier from the package's type
declarations. Type-checking it fails when an identifier is missing or renamed.
It is an allow-list: exports the enumeration does not know about are tolerated.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pkgsurface.config.logging import get_logger
from pkgsurface.emitters.writer import CodeWriter

if TYPE_CHECKING:
    from collections.abc import Sequence

    from pkgsurface.config.logging import PkgSurfaceLogger
    from pkgsurface.config.model import Settings
    from pkgsurface.surface.types import SurfaceEntry

logger: PkgSurfaceLogger = get_logger(__name__)


def render_type_surface(entries: Sequence[SurfaceEntry], settings: Settings) -> str:
    """Render the type surface of ``entries``, in enumerator order.

    Args:
        entries (Sequence[SurfaceEntry]): The `TestKind.TYPES` enumeration.
        settings (Settings): Provides the banner and the type declarations path.

    Returns:
        str: The file text.
    """
    writer = CodeWriter(settings.banner)
    with writer.block("export type {", f'}} from "{settings.types_import}";'):
        for entry in entries:
            writer.write(f"{entry.identifier},")
    logger.debug("Rendered type surface: %d identifiers", len(entries))
    return writer.render()
