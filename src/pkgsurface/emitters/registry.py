# topmark:header:start
#
#   project      : PkgSurface
#   file         : registry.py
#   file_relpath : src/pkgsurface/emitters/registry.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Artifact registry.

Each `ArtifactKind` binds one artifact file to the `TestKind` it is enumerated
for and the renderer that turns the enumeration into text. `render_all` renders
the selected artifacts of one `SurfacePlan`.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import PurePosixPath
from typing import TYPE_CHECKING

from pkgsurface.config.logging import get_logger
from pkgsurface.emitters.runtime_surface import render_runtime_surface
from pkgsurface.emitters.snapshot_harness import render_snapshot_harness
from pkgsurface.emitters.types_surface import render_type_surface
from pkgsurface.surface.types import TestKind

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from pkgsurface.config.logging import PkgSurfaceLogger
    from pkgsurface.config.model import Settings
    from pkgsurface.surface.plan import SurfacePlan
    from pkgsurface.surface.types import SurfaceEntry

logger: PkgSurfaceLogger = get_logger(__name__)


class ArtifactKind(str, Enum):
    """The artifacts PkgSurface generates, in rendering order."""

    TYPES = "types"
    RUNTIME = "runtime"
    SNAPSHOT = "snapshot"

    @property
    def test_kind(self) -> TestKind:
        """Enumeration the artifact is rendered from."""
        return TestKind(self.value)

    def file_name(self, settings: Settings) -> str:
        """Configured file name of the artifact."""
        if self is ArtifactKind.TYPES:
            return settings.types_file
        if self is ArtifactKind.RUNTIME:
            return settings.runtime_file
        return settings.snapshot_file

    def render(self, entries: Sequence[SurfaceEntry], settings: Settings, client_name: str) -> str:
        """Render ``entries`` into the artifact text."""
        if self is ArtifactKind.TYPES:
            return render_type_surface(entries, settings)
        if self is ArtifactKind.RUNTIME:
            return render_runtime_surface(entries, settings, client_name)
        return render_snapshot_harness(entries, settings, client_name)


@dataclass(frozen=True, slots=True)
class GeneratedArtifact:
    """One rendered artifact.

    Attributes:
        kind (ArtifactKind): Which artifact this is.
        relpath (str): POSIX path relative to the package root
            (``<output_dir>/<file name>``).
        text (str): Full file content.
    """

    kind: ArtifactKind
    relpath: str
    text: str


def render_all(
    plan: SurfacePlan,
    settings: Settings,
    kinds: Iterable[ArtifactKind] | None = None,
) -> tuple[GeneratedArtifact, ...]:
    """Render the selected artifacts of ``plan``.

    Args:
        plan (SurfacePlan): Resolved generation inputs.
        settings (Settings): Output settings.
        kinds (Iterable[ArtifactKind] | None): Artifacts to render; all when None.

    Returns:
        tuple[GeneratedArtifact, ...]: The artifacts, in `ArtifactKind` order.
    """
    selected: set[ArtifactKind] = set(kinds) if kinds is not None else set(ArtifactKind)
    out: list[GeneratedArtifact] = []
    for kind in ArtifactKind:
        if kind not in selected:
            continue
        entries: tuple[SurfaceEntry, ...] = plan.entries(kind.test_kind)
        relpath: str = str(PurePosixPath(settings.output_dir) / kind.file_name(settings))
        out.append(
            GeneratedArtifact(
                kind=kind,
                relpath=relpath,
                text=kind.render(entries, settings, plan.client_name),
            )
        )
        logger.info("Rendered %s (%d entries)", relpath, len(entries))
    return tuple(out)
