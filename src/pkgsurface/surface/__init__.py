# topmark:header:start
#
#   project      : PkgSurface
#   file         : __init__.py
#   file_relpath : src/pkgsurface/surface/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Surface enumeration: the ordered exports a generated client package must have."""

from __future__ import annotations

from pkgsurface.surface.enumerator import enumerate_surface, has_generated_symbol
from pkgsurface.surface.ordering import CATEGORY_ORDER, entry_sort_key, is_canonical
from pkgsurface.surface.plan import SurfacePlan, build_plan
from pkgsurface.surface.types import Category, Role, RuntimeKind, SurfaceEntry, TestKind

__all__: list[str] = [
    "CATEGORY_ORDER",
    "Category",
    "Role",
    "RuntimeKind",
    "SurfaceEntry",
    "SurfacePlan",
    "TestKind",
    "build_plan",
    "entry_sort_key",
    "enumerate_surface",
    "has_generated_symbol",
    "is_canonical",
]
