# topmark:header:start
#
#   project      : PkgSurface
#   file         : enumerator.py
#   file_relpath : src/pkgsurface/surface/enumerator.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Surface enumerator.

Walks a service closure once per `TestKind` and produces the ordered,
duplicate-free tuple of `SurfaceEntry` the generated package must export.

Per category:
    - clients: the bare client and the aggregate client, always.
    - commands: one command per operation; the type surface adds the command's
      Input and Output types; runtime and snapshot surfaces add the
      operation's schema object in schema mode.
    - enums: every enum except string shapes whose enum values are unnamed
      (no symbol is generated for those). The filter is the same for every
      test kind, so the type and runtime surfaces agree.
    - structures: the structure or union type in the type surface; its schema
      object in the runtime and snapshot surfaces, and only in schema mode.
    - errors: every modeled error (an error class descending from the
      synthetic base exception), plus its schema object in schema mode.
    - base exception: the synthetic base exception, descending from the host
      base error type. Always present, even without modeled errors.
    - waiters, then paginators.

Schema mode is a single flag resolved by the caller; the enumeration is fully
resolved so renderers never consult it again.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pkgsurface.config.logging import get_logger
from pkgsurface.constants import HOST_BASE_ERROR
from pkgsurface.core.errors import SurfaceConflictError
from pkgsurface.surface import naming
from pkgsurface.surface.ordering import (
    CATEGORY_ORDER,
    entry_sort_key,
    sort_names,
    sort_shapes,
)
from pkgsurface.surface.types import Category, Role, RuntimeKind, SurfaceEntry, TestKind

if TYPE_CHECKING:
    from collections.abc import Iterable

    from pkgsurface.config.logging import PkgSurfaceLogger
    from pkgsurface.model.closure import ServiceClosureLike
    from pkgsurface.model.shapes import Shape
    from pkgsurface.model.symbols import SymbolProviderLike

logger: PkgSurfaceLogger = get_logger(__name__)


def has_generated_symbol(shape: Shape) -> bool:
    """Return False for string shapes whose enum trait leaves some values unnamed."""
    trait = shape.enum_trait
    return trait is None or trait.has_names


def enumerate_surface(
    closure: ServiceClosureLike,
    symbols: SymbolProviderLike,
    *,
    client_name: str,
    base_exception: str,
    test_kind: TestKind,
    schema_mode: bool,
) -> tuple[SurfaceEntry, ...]:
    """Enumerate the expected exports of a generated package.

    Args:
        closure (ServiceClosureLike): Closure of the service.
        symbols (SymbolProviderLike): Symbol provider used by the client generator.
        client_name (str): Aggregate client identifier.
        base_exception (str): Name of the synthetic base exception.
        test_kind (TestKind): Artifact family the enumeration is for.
        schema_mode (bool): Whether schema objects are part of the package.

    Returns:
        tuple[SurfaceEntry, ...]: Entries in canonical order (see
            `pkgsurface.surface.ordering`), each identifier at most once.

    Raises:
        SymbolResolutionError: If the symbol provider returns an unusable name.
        SurfaceConflictError: If one identifier is claimed with two runtime kinds.
        SchemaModeError: If ``schema_mode`` is set but the closure has no schema names.
    """
    with_schemas: bool = schema_mode and test_kind is not TestKind.TYPES
    entries: list[SurfaceEntry] = []

    def _schema(shape: Shape, category: Category, described: str) -> SurfaceEntry:
        return SurfaceEntry(
            identifier=closure.shape_schema_variable_name(shape, None),
            category=category,
            runtime_kind=RuntimeKind.OBJECT,
            owner=str(shape.id),
            role=Role.SCHEMA,
            schema_of=described,
        )

    # Clients
    entries.append(
        SurfaceEntry(
            identifier=naming.bare_client_name(client_name),
            category=Category.CLIENTS,
            runtime_kind=RuntimeKind.FUNCTION,
            role=Role.PRIMARY,
        )
    )
    entries.append(
        SurfaceEntry(
            identifier=naming.aggregate_client_name(client_name),
            category=Category.CLIENTS,
            runtime_kind=RuntimeKind.FUNCTION,
            role=Role.AGGREGATE,
        )
    )

    # Commands
    for op in sort_shapes(closure.operations()):
        name: str = naming.checked_name(symbols.to_symbol(op), op)
        command: str = naming.command_name(name)
        entries.append(
            SurfaceEntry(
                identifier=command,
                category=Category.COMMANDS,
                runtime_kind=RuntimeKind.FUNCTION,
                has_schema_artifact=with_schemas,
                owner=str(op.id),
            )
        )
        if test_kind is TestKind.TYPES:
            entries.append(
                SurfaceEntry(
                    identifier=naming.command_input_name(name),
                    category=Category.COMMANDS,
                    runtime_kind=RuntimeKind.TYPE_ONLY,
                    owner=str(op.id),
                    role=Role.INPUT,
                )
            )
            entries.append(
                SurfaceEntry(
                    identifier=naming.command_output_name(name),
                    category=Category.COMMANDS,
                    runtime_kind=RuntimeKind.TYPE_ONLY,
                    owner=str(op.id),
                    role=Role.OUTPUT,
                )
            )
        if with_schemas:
            entries.append(_schema(op, Category.COMMANDS, command))

    # Enums
    for shape in sort_shapes(closure.enums()):
        if not has_generated_symbol(shape):
            logger.debug("Skipping %s: enum values without names generate no symbol", shape.id)
            continue
        entries.append(
            SurfaceEntry(
                identifier=naming.checked_name(symbols.to_symbol(shape), shape),
                category=Category.ENUMS,
                runtime_kind=RuntimeKind.OBJECT,
                owner=str(shape.id),
            )
        )

    # Structures and unions
    for shape in sort_shapes(closure.structural_non_error_shapes()):
        name = naming.checked_name(symbols.to_symbol(shape), shape)
        if test_kind is TestKind.TYPES:
            entries.append(
                SurfaceEntry(
                    identifier=name,
                    category=Category.STRUCTURES,
                    runtime_kind=RuntimeKind.TYPE_ONLY,
                    owner=str(shape.id),
                )
            )
        elif with_schemas:
            entries.append(_schema(shape, Category.STRUCTURES, name))

    # Modeled errors
    for shape in sort_shapes(closure.error_shapes()):
        name = naming.checked_name(symbols.to_symbol(shape), shape)
        entries.append(
            SurfaceEntry(
                identifier=name,
                category=Category.ERRORS,
                runtime_kind=RuntimeKind.ERROR_CLASS,
                has_schema_artifact=with_schemas,
                owner=str(shape.id),
                ancestor=base_exception,
            )
        )
        if with_schemas:
            entries.append(_schema(shape, Category.ERRORS, name))

    # Synthetic base exception
    entries.append(
        SurfaceEntry(
            identifier=base_exception,
            category=Category.BASE_EXCEPTION,
            runtime_kind=RuntimeKind.ERROR_CLASS,
            owner=base_exception,
            ancestor=HOST_BASE_ERROR,
        )
    )

    # Derived helpers
    entries.extend(_helpers(Category.WAITERS, closure.waiter_names()))
    entries.extend(_helpers(Category.PAGINATORS, closure.paginator_names()))

    result: tuple[SurfaceEntry, ...] = _dedupe(sorted(entries, key=entry_sort_key))
    _log_summary(test_kind, result)
    return result


def _helpers(category: Category, names: Iterable[str]) -> list[SurfaceEntry]:
    return [
        SurfaceEntry(
            identifier=name,
            category=category,
            runtime_kind=RuntimeKind.FUNCTION,
            owner=name,
        )
        for name in sort_names(names)
    ]


def _dedupe(entries: Iterable[SurfaceEntry]) -> tuple[SurfaceEntry, ...]:
    """Drop repeated identifiers, keeping the first occurrence.

    Raises:
        SurfaceConflictError: If a repeat has a different runtime kind.
    """
    seen: dict[str, SurfaceEntry] = {}
    out: list[SurfaceEntry] = []
    for entry in entries:
        first: SurfaceEntry | None = seen.get(entry.identifier)
        if first is None:
            seen[entry.identifier] = entry
            out.append(entry)
            continue
        if first.runtime_kind is not entry.runtime_kind:
            raise SurfaceConflictError(
                entry.identifier, first.runtime_kind.value, entry.runtime_kind.value
            )
        logger.debug("Dropping repeated export %s (owner %s)", entry.identifier, entry.owner)
    return tuple(out)


def _log_summary(test_kind: TestKind, entries: tuple[SurfaceEntry, ...]) -> None:
    for category in CATEGORY_ORDER:
        count: int = sum(1 for e in entries if e.category is category)
        logger.debug("%s surface: %d %s", test_kind.value, count, category.value)
    for entry in entries:
        logger.trace("%s surface entry: %s", test_kind.value, entry)
