# topmark:header:start
#
#   project      : PkgSurface
#   file         : ordering.py
#   file_relpath : src/pkgsurface/surface/ordering.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Total order of surface entries.

Artifacts are committed to version control, so regenerating them from an
unchanged model must not produce a diff. The enumerator therefore never relies
on the order in which the closure returns shapes: it sorts with the keys
defined here.

Order:
    1. Category, in `CATEGORY_ORDER`.
    2. Owner: shape ids compare case-insensitively first, then case-sensitively
       (``ns#a`` < ``ns#B`` < ``ns#b``). Waiter and paginator names compare by
       code point (``waitForDBInstance`` < ``waitForDbCluster``).
    3. Role: primary, aggregate, input, output, schema.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from pkgsurface.surface.types import Category

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from pkgsurface.model.shapes import Shape
    from pkgsurface.surface.types import SurfaceEntry

CATEGORY_ORDER: Final[tuple[Category, ...]] = (
    Category.CLIENTS,
    Category.COMMANDS,
    Category.ENUMS,
    Category.STRUCTURES,
    Category.ERRORS,
    Category.BASE_EXCEPTION,
    Category.WAITERS,
    Category.PAGINATORS,
)

_CATEGORY_RANK: Final[dict[Category, int]] = {c: i for i, c in enumerate(CATEGORY_ORDER)}

# Owners of these categories are helper names, not shape ids.
_HELPER_CATEGORIES: Final[frozenset[Category]] = frozenset(
    {Category.WAITERS, Category.PAGINATORS}
)


def name_sort_key(name: str) -> tuple[str, str]:
    """Case-insensitive key with a case-sensitive tie-break."""
    return (name.casefold(), name)


def shape_sort_key(shape: Shape) -> tuple[str, str]:
    """Sort key of a shape: its absolute id under `name_sort_key`."""
    return name_sort_key(str(shape.id))


def sort_shapes(shapes: Iterable[Shape]) -> list[Shape]:
    """Return ``shapes`` in canonical order."""
    return sorted(shapes, key=shape_sort_key)


def sort_names(names: Iterable[str]) -> list[str]:
    """Return waiter or paginator names in code point order."""
    return sorted(names)


def entry_sort_key(entry: SurfaceEntry) -> tuple[int, str, str, int]:
    """Total order key of a surface entry."""
    if entry.category in _HELPER_CATEGORIES:
        return (_CATEGORY_RANK[entry.category], entry.owner, entry.owner, int(entry.role))
    folded, raw = name_sort_key(entry.owner)
    return (_CATEGORY_RANK[entry.category], folded, raw, int(entry.role))


def is_canonical(entries: Sequence[SurfaceEntry]) -> bool:
    """Return True when ``entries`` are strictly increasing under `entry_sort_key`."""
    keys = [entry_sort_key(e) for e in entries]
    return all(a < b for a, b in zip(keys, keys[1:]))
