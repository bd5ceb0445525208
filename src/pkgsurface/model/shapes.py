# topmark:header:start
#
#   project      : PkgSurface
#   file         : shapes.py
#   file_relpath : src/pkgsurface/model/shapes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shape graph of a service model.

A `Model` maps `ShapeId` to `Shape`. Shapes are immutable; relationships are
expressed as target shape ids (members, operation input/output/errors,
service and resource bindings) and resolved through the owning `Model`.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, cast

from pkgsurface.constants import ENUM_TRAIT, ERROR_TRAIT
from pkgsurface.core.errors import ModelError


class ShapeKind(str, Enum):
    """Shape types understood by the model loader (Smithy AST type names)."""

    SERVICE = "service"
    RESOURCE = "resource"
    OPERATION = "operation"
    STRUCTURE = "structure"
    UNION = "union"
    ENUM = "enum"
    INT_ENUM = "intEnum"
    LIST = "list"
    SET = "set"
    MAP = "map"
    STRING = "string"
    BLOB = "blob"
    BOOLEAN = "boolean"
    BYTE = "byte"
    SHORT = "short"
    INTEGER = "integer"
    LONG = "long"
    FLOAT = "float"
    DOUBLE = "double"
    BIG_INTEGER = "bigInteger"
    BIG_DECIMAL = "bigDecimal"
    TIMESTAMP = "timestamp"
    DOCUMENT = "document"

    @classmethod
    def parse(cls, value: str) -> ShapeKind:
        """Return the kind for a Smithy AST ``type`` string.

        Raises:
            ModelError: If ``value`` is not a known shape type.
        """
        try:
            return cls(value)
        except ValueError as exc:
            raise ModelError(f"Unknown shape type: {value!r}") from exc


@dataclass(frozen=True)
class ShapeId:
    """Absolute shape id of the form ``namespace#Name``."""

    namespace: str
    name: str

    @classmethod
    def parse(cls, text: str) -> ShapeId:
        """Parse an absolute shape id.

        Raises:
            ModelError: If ``text`` is not of the form ``namespace#Name``.
        """
        namespace, sep, name = text.partition("#")
        if not sep or not namespace or not name or "$" in name:
            raise ModelError(f"Invalid absolute shape id: {text!r}")
        return cls(namespace=namespace, name=name)

    def __str__(self) -> str:
        return f"{self.namespace}#{self.name}"


@dataclass(frozen=True)
class Member:
    """A named member of an aggregate shape, pointing at its target shape."""

    name: str
    target: ShapeId


@dataclass(frozen=True)
class EnumDefinition:
    """One value of an enum trait; ``name`` is optional in the trait form."""

    value: str
    name: str | None = None


@dataclass(frozen=True)
class EnumTrait:
    """Enum trait attached to a string shape."""

    definitions: tuple[EnumDefinition, ...]

    @property
    def has_names(self) -> bool:
        """Return True when every value carries a name.

        A string shape whose enum values are unnamed gets no generated symbol.
        """
        return bool(self.definitions) and all(d.name for d in self.definitions)


def _empty_mapping() -> Mapping[str, Any]:
    return MappingProxyType({})


@dataclass(frozen=True)
class Shape:
    """A node of the model's shape graph.

    Attributes:
        id (ShapeId): Absolute shape id.
        kind (ShapeKind): Shape type.
        traits (Mapping[str, Any]): Applied traits, keyed by absolute trait id.
        members (tuple[Member, ...]): Members of structures, unions, enums,
            lists (``member``) and maps (``key``/``value``).
        input (ShapeId | None): Operation input.
        output (ShapeId | None): Operation output.
        errors (tuple[ShapeId, ...]): Operation or service errors.
        operations (tuple[ShapeId, ...]): Operations bound to a service or resource,
            including resource lifecycle operations.
        resources (tuple[ShapeId, ...]): Resources bound to a service or resource.
        rename (Mapping[str, str]): Service rename map (absolute id to new name).
    """

    id: ShapeId
    kind: ShapeKind
    traits: Mapping[str, Any] = field(default_factory=_empty_mapping)
    members: tuple[Member, ...] = ()
    input: ShapeId | None = None
    output: ShapeId | None = None
    errors: tuple[ShapeId, ...] = ()
    operations: tuple[ShapeId, ...] = ()
    resources: tuple[ShapeId, ...] = ()
    rename: Mapping[str, str] = field(default_factory=_empty_mapping)

    def __hash__(self) -> int:
        return hash(self.id)

    def has_trait(self, trait_id: str) -> bool:
        """Return True if the trait with id ``trait_id`` is applied."""
        return trait_id in self.traits

    @property
    def is_error(self) -> bool:
        """True for structures carrying the error trait."""
        return self.kind is ShapeKind.STRUCTURE and self.has_trait(ERROR_TRAIT)

    @property
    def enum_trait(self) -> EnumTrait | None:
        """Return the parsed enum trait, or None if not applied."""
        raw: Any = self.traits.get(ENUM_TRAIT)
        if raw is None:
            return None
        if not isinstance(raw, list):
            raise ModelError(f"{self.id}: {ENUM_TRAIT} must be a list")
        definitions: list[EnumDefinition] = []
        for entry in cast("list[Any]", raw):
            if not isinstance(entry, dict) or "value" not in entry:
                raise ModelError(f"{self.id}: malformed {ENUM_TRAIT} definition {entry!r}")
            item = cast("dict[str, Any]", entry)
            name: Any = item.get("name")
            definitions.append(
                EnumDefinition(value=str(item["value"]), name=str(name) if name else None)
            )
        return EnumTrait(definitions=tuple(definitions))

    @property
    def is_enum(self) -> bool:
        """True for enum shapes and for string shapes carrying the enum trait."""
        if self.kind in (ShapeKind.ENUM, ShapeKind.INT_ENUM):
            return True
        return self.kind is ShapeKind.STRING and self.has_trait(ENUM_TRAIT)

    @property
    def is_structural(self) -> bool:
        """True for structures and unions."""
        return self.kind in (ShapeKind.STRUCTURE, ShapeKind.UNION)


class Model:
    """An immutable collection of shapes keyed by shape id."""

    def __init__(self, shapes: Mapping[ShapeId, Shape]) -> None:
        self._shapes: dict[ShapeId, Shape] = dict(shapes)

    def __len__(self) -> int:
        return len(self._shapes)

    def __contains__(self, shape_id: object) -> bool:
        return shape_id in self._shapes

    @property
    def shape_ids(self) -> tuple[ShapeId, ...]:
        """All shape ids, in document order."""
        return tuple(self._shapes)

    def shapes(self) -> tuple[Shape, ...]:
        """All shapes, in document order."""
        return tuple(self._shapes.values())

    def get_shape(self, shape_id: ShapeId) -> Shape | None:
        """Return the shape for ``shape_id``, or None."""
        return self._shapes.get(shape_id)

    def expect_shape(self, shape_id: ShapeId) -> Shape:
        """Return the shape for ``shape_id``.

        Raises:
            ModelError: If the model has no such shape.
        """
        shape: Shape | None = self._shapes.get(shape_id)
        if shape is None:
            raise ModelError(f"Shape not found: {shape_id}")
        return shape

    def services(self) -> tuple[Shape, ...]:
        """All service shapes, in document order."""
        return tuple(s for s in self._shapes.values() if s.kind is ShapeKind.SERVICE)
