# topmark:header:start
#
#   project      : PkgSurface
#   file         : closure.py
#   file_relpath : src/pkgsurface/model/closure.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Service closure: the shapes a generated client package is built from.

`ServiceClosureLike` is the interface the surface enumerator consumes. The
enumerator applies its own total order, so implementations may return each
category in any deterministic order.

`ModelClosure` is the reference implementation over a loaded `Model`: it walks
every shape reachable from the service's operations (inputs, outputs, errors,
and member targets, transitively) and classifies the result.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, cast

from pkgsurface.config.logging import get_logger
from pkgsurface.constants import (
    PAGINATED_TRAIT,
    SCHEMA_SUFFIX,
    UNIT_SHAPE_ID,
    WAITABLE_TRAIT,
)
from pkgsurface.core.errors import ModelError, SchemaModeError
from pkgsurface.model.shapes import ShapeId
from pkgsurface.model.symbols import capitalize

if TYPE_CHECKING:
    from pkgsurface.config.logging import PkgSurfaceLogger
    from pkgsurface.model.service import ServiceDefinition
    from pkgsurface.model.shapes import Shape

logger: PkgSurfaceLogger = get_logger(__name__)

# Shapes in this namespace are built into every model and never generated.
PRELUDE_NAMESPACE = "smithy.api"


class ServiceClosureLike(Protocol):
    """Per-category view of the shapes that belong to one service."""

    @property
    def schema_mode(self) -> bool:
        """Whether schema variable names are defined for this closure."""
        ...

    def operations(self) -> tuple[Shape, ...]:
        """Operations contained in the service."""
        ...

    def enums(self) -> tuple[Shape, ...]:
        """Enum shapes and string shapes carrying the enum trait."""
        ...

    def structural_non_error_shapes(self) -> tuple[Shape, ...]:
        """Structures and unions that are not errors."""
        ...

    def error_shapes(self) -> tuple[Shape, ...]:
        """Structures carrying the error trait."""
        ...

    def waiter_names(self) -> tuple[str, ...]:
        """Names of the generated waiter functions."""
        ...

    def paginator_names(self) -> tuple[str, ...]:
        """Names of the generated paginator functions."""
        ...

    def shape_schema_variable_name(self, shape: Shape, context: Any = None) -> str:
        """Name of the runtime schema object describing ``shape``."""
        ...


class ModelClosure:
    """Closure of a `ServiceDefinition` computed from its model."""

    def __init__(self, service: ServiceDefinition, *, schema_mode: bool = False) -> None:
        self._service = service
        self._schema_mode = schema_mode
        self._operations: tuple[Shape, ...] = service.contained_operations()
        self._shapes: tuple[Shape, ...] = self._walk()
        logger.debug(
            "Closure of %s: %d operations, %d shapes",
            service.id,
            len(self._operations),
            len(self._shapes),
        )

    @property
    def schema_mode(self) -> bool:
        """Whether schema variable names are defined for this closure."""
        return self._schema_mode

    def _walk(self) -> tuple[Shape, ...]:
        model = self._service.model
        found: dict[ShapeId, Shape] = {}
        pending: list[ShapeId] = []

        for op in self._operations:
            if op.input is not None:
                pending.append(op.input)
            if op.output is not None:
                pending.append(op.output)
            pending.extend(op.errors)
        # Service-level errors can be raised by any operation.
        pending.extend(self._service.shape.errors)

        while pending:
            shape_id: ShapeId = pending.pop()
            if shape_id in found:
                continue
            shape: Shape | None = model.get_shape(shape_id)
            if shape is None:
                if shape_id.namespace == PRELUDE_NAMESPACE:
                    continue
                raise ModelError(f"Unresolved shape target: {shape_id}")
            if str(shape_id) == UNIT_SHAPE_ID:
                continue
            found[shape_id] = shape
            # Enum members target Unit; their values are not shapes of their own.
            if not shape.is_enum:
                pending.extend(m.target for m in shape.members)
        return tuple(found.values())

    def operations(self) -> tuple[Shape, ...]:
        """Operations contained in the service."""
        return self._operations

    def enums(self) -> tuple[Shape, ...]:
        """Enum shapes and string shapes carrying the enum trait."""
        return tuple(s for s in self._shapes if s.is_enum)

    def structural_non_error_shapes(self) -> tuple[Shape, ...]:
        """Structures and unions that are not errors."""
        return tuple(s for s in self._shapes if s.is_structural and not s.is_error)

    def error_shapes(self) -> tuple[Shape, ...]:
        """Structures carrying the error trait."""
        return tuple(s for s in self._shapes if s.is_error)

    def waiter_names(self) -> tuple[str, ...]:
        """Return ``waitFor<Name>`` and ``waitUntil<Name>`` for every declared waiter."""
        names: list[str] = []
        for op in self._operations:
            raw: Any = op.traits.get(WAITABLE_TRAIT)
            if raw is None:
                continue
            if not isinstance(raw, dict):
                raise ModelError(f"{op.id}: {WAITABLE_TRAIT} must be an object")
            for waiter in cast("dict[str, Any]", raw):
                names.append(f"waitFor{capitalize(waiter)}")
                names.append(f"waitUntil{capitalize(waiter)}")
        return tuple(names)

    def paginator_names(self) -> tuple[str, ...]:
        """Return ``paginate<Operation>`` for every paginated operation."""
        return tuple(
            f"paginate{capitalize(self._service.shape_name(op.id))}"
            for op in self._operations
            if op.has_trait(PAGINATED_TRAIT)
        )

    def shape_schema_variable_name(self, shape: Shape, context: Any = None) -> str:
        """Return the name of the runtime schema object describing ``shape``.

        The name is the shape's (renamed) name followed by ``$``. ``context`` is
        accepted for interface compatibility and ignored.

        Raises:
            SchemaModeError: If schema mode is disabled for this closure.
        """
        if not self._schema_mode:
            raise SchemaModeError(
                f"Schema variable name requested for {shape.id} while schema mode is off"
            )
        return self._service.shape_name(shape.id) + SCHEMA_SUFFIX
