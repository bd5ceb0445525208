# topmark:header:start
#
#   project      : PkgSurface
#   file         : symbols.py
#   file_relpath : src/pkgsurface/model/symbols.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Symbols: the output identifiers a code generator assigns to shapes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from pkgsurface.constants import CLIENT_SUFFIX
from pkgsurface.model.shapes import ShapeKind

if TYPE_CHECKING:
    from pkgsurface.model.service import ServiceDefinition
    from pkgsurface.model.shapes import Shape


@dataclass(frozen=True)
class Symbol:
    """Output identifier assigned to a shape."""

    name: str
    namespace: str = ""


class SymbolProviderLike(Protocol):
    """Maps shapes to symbols; must be stable for a given model."""

    def to_symbol(self, shape: Shape) -> Symbol:
        """Return the symbol of ``shape``."""
        ...


def capitalize(text: str) -> str:
    """Upper-case the first character, leaving the rest untouched."""
    return text[:1].upper() + text[1:]


class ModelSymbolProvider:
    """Symbol provider following the TypeScript client generator's conventions.

    Shapes are named after their (renamed) shape name with the first letter
    capitalized; the service symbol gets a ``Client`` suffix.
    """

    def __init__(self, service: ServiceDefinition) -> None:
        self._service = service

    def to_symbol(self, shape: Shape) -> Symbol:
        """Return the symbol of ``shape``."""
        name: str = capitalize(self._service.shape_name(shape.id))
        if shape.kind is ShapeKind.SERVICE:
            name += CLIENT_SUFFIX
        return Symbol(name=name, namespace=shape.id.namespace)
