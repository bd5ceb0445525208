# topmark:header:start
#
#   project      : PkgSurface
#   file         : __init__.py
#   file_relpath : src/pkgsurface/model/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Service model, closure and symbol naming collaborators."""

from __future__ import annotations

from pkgsurface.model.closure import ModelClosure, ServiceClosureLike
from pkgsurface.model.loader import load_model, parse_model
from pkgsurface.model.service import (
    ServiceDefinition,
    schema_mode_allowed,
    service_name,
    synthetic_base_exception_name,
)
from pkgsurface.model.shapes import (
    EnumDefinition,
    EnumTrait,
    Member,
    Model,
    Shape,
    ShapeId,
    ShapeKind,
)
from pkgsurface.model.symbols import ModelSymbolProvider, Symbol, SymbolProviderLike

__all__: list[str] = [
    "EnumDefinition",
    "EnumTrait",
    "Member",
    "Model",
    "ModelClosure",
    "ModelSymbolProvider",
    "ServiceClosureLike",
    "ServiceDefinition",
    "Shape",
    "ShapeId",
    "ShapeKind",
    "Symbol",
    "SymbolProviderLike",
    "load_model",
    "parse_model",
    "schema_mode_allowed",
    "service_name",
    "synthetic_base_exception_name",
]
