# topmark:header:start
#
#   project      : PkgSurface
#   file         : __init__.py
#   file_relpath : src/pkgsurface/emitters/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Renderers turning surface enumerations into artifact files."""

from __future__ import annotations

from pkgsurface.emitters.registry import ArtifactKind, GeneratedArtifact, render_all
from pkgsurface.emitters.runtime_surface import render_runtime_surface
from pkgsurface.emitters.snapshot_harness import render_snapshot_harness
from pkgsurface.emitters.types_surface import render_type_surface
from pkgsurface.emitters.writer import CodeWriter

__all__: list[str] = [
    "ArtifactKind",
    "CodeWriter",
    "GeneratedArtifact",
    "render_all",
    "render_runtime_surface",
    "render_snapshot_harness",
    "render_type_surface",
]
