# topmark:header:start
#
#   project      : PkgSurface
#   file         : fakes.py
#   file_relpath : tests/surface/fakes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""In-memory closure and symbol provider for enumerator tests.

They let tests control the order in which each category is returned and the
names the symbol provider hands out, without building a model document.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from pkgsurface.constants import ENUM_TRAIT, ERROR_TRAIT
from pkgsurface.core.errors import SchemaModeError
from pkgsurface.model.shapes import Shape, ShapeId, ShapeKind
from pkgsurface.model.symbols import Symbol

NS = "example.fake"


def operation(name: str) -> Shape:
    """Return an operation shape in the fake namespace."""
    return Shape(id=ShapeId(NS, name), kind=ShapeKind.OPERATION)


def structure(name: str) -> Shape:
    """Return a structure shape."""
    return Shape(id=ShapeId(NS, name), kind=ShapeKind.STRUCTURE)


def union(name: str) -> Shape:
    """Return a union shape."""
    return Shape(id=ShapeId(NS, name), kind=ShapeKind.UNION)


def error(name: str) -> Shape:
    """Return a structure carrying the error trait."""
    return Shape(id=ShapeId(NS, name), kind=ShapeKind.STRUCTURE, traits={ERROR_TRAIT: "client"})


def enum(name: str) -> Shape:
    """Return an enum shape."""
    return Shape(id=ShapeId(NS, name), kind=ShapeKind.ENUM)


def string_enum(name: str, *, named: bool) -> Shape:
    """Return a string shape with an enum trait whose values are (un)named."""
    values: list[dict[str, str]] = (
        [{"value": "a", "name": "A"}, {"value": "b", "name": "B"}]
        if named
        else [{"value": "a"}, {"value": "b"}]
    )
    return Shape(id=ShapeId(NS, name), kind=ShapeKind.STRING, traits={ENUM_TRAIT: values})


@dataclass
class FakeClosure:
    """A `ServiceClosureLike` returning its categories exactly as given."""

    ops: tuple[Shape, ...] = ()
    enum_shapes: tuple[Shape, ...] = ()
    structures: tuple[Shape, ...] = ()
    errors: tuple[Shape, ...] = ()
    waiters: tuple[str, ...] = ()
    paginators: tuple[str, ...] = ()
    schemas: bool = False

    @property
    def schema_mode(self) -> bool:
        return self.schemas

    def operations(self) -> tuple[Shape, ...]:
        return self.ops

    def enums(self) -> tuple[Shape, ...]:
        return self.enum_shapes

    def structural_non_error_shapes(self) -> tuple[Shape, ...]:
        return self.structures

    def error_shapes(self) -> tuple[Shape, ...]:
        return self.errors

    def waiter_names(self) -> tuple[str, ...]:
        return self.waiters

    def paginator_names(self) -> tuple[str, ...]:
        return self.paginators

    def shape_schema_variable_name(self, shape: Shape, context: Any = None) -> str:
        if not self.schemas:
            raise SchemaModeError(f"schema mode is off for {shape.id}")
        return shape.id.name + "$"


@dataclass
class FakeSymbols:
    """A `SymbolProviderLike` naming shapes after their shape name, with overrides."""

    overrides: dict[str, str] = field(default_factory=lambda: {})

    def to_symbol(self, shape: Shape) -> Symbol:
        return Symbol(name=self.overrides.get(shape.id.name, shape.id.name), namespace=NS)
