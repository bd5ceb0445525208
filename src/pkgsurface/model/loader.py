# topmark:header:start
#
#   project      : PkgSurface
#   file         : loader.py
#   file_relpath : src/pkgsurface/model/loader.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load a service model from a Smithy JSON AST document.

The same document structure is accepted as TOML (parsed with `tomlkit`), which
is convenient for small hand-written fixtures. Only the parts of the AST the
surface enumeration needs are read: shape types, traits, member targets,
operation input/output/errors, service and resource bindings, and the service
``rename`` map. Malformed documents raise `ModelError`.
"""

from __future__ import annotations

import json
from pathlib import Path
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from pkgsurface.config.logging import get_logger
from pkgsurface.core.errors import ModelError
from pkgsurface.model.shapes import Member, Model, Shape, ShapeId, ShapeKind

if TYPE_CHECKING:
    from collections.abc import Mapping

    from pkgsurface.config.logging import PkgSurfaceLogger

logger: PkgSurfaceLogger = get_logger(__name__)

# Resource properties that bind a single lifecycle operation.
_LIFECYCLE_KEYS: tuple[str, ...] = ("create", "put", "read", "update", "delete", "list")


def load_model(path: Path) -> Model:
    """Load a model document from ``path``.

    Args:
        path (Path): A ``.json`` Smithy AST document, or a ``.toml`` document with
            the same structure.

    Returns:
        Model: The parsed model.

    Raises:
        ModelError: If the file cannot be read or parsed.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ModelError(f"Cannot read model {path}: {e}") from e

    document: Any
    if path.suffix.lower() == ".toml":
        try:
            document = tomlkit.parse(text).unwrap()
        except TomlkitParseError as e:
            raise ModelError(f"Invalid TOML model {path}: {e}") from e
    else:
        try:
            document = json.loads(text)
        except json.JSONDecodeError as e:
            raise ModelError(f"Invalid JSON model {path}: {e}") from e

    if not isinstance(document, dict):
        raise ModelError(f"Model document {path} must be an object")
    model: Model = parse_model(cast("Mapping[str, Any]", document))
    logger.debug("Loaded %d shapes from %s", len(model), path)
    return model


def parse_model(document: Mapping[str, Any]) -> Model:
    """Build a `Model` from a decoded Smithy AST document.

    Raises:
        ModelError: If the document has no ``shapes`` object or a shape is malformed.
    """
    raw_shapes: Any = document.get("shapes")
    if not isinstance(raw_shapes, dict):
        raise ModelError("Model document has no 'shapes' object")

    shapes: dict[ShapeId, Shape] = {}
    for raw_id, body in cast("dict[str, Any]", raw_shapes).items():
        shape_id: ShapeId = ShapeId.parse(raw_id)
        if not isinstance(body, dict):
            raise ModelError(f"{raw_id}: shape definition must be an object")
        shapes[shape_id] = _parse_shape(shape_id, cast("dict[str, Any]", body))
    return Model(shapes)


def _target(shape_id: ShapeId, key: str, value: Any) -> ShapeId:
    if not isinstance(value, dict) or not isinstance(value.get("target"), str):
        raise ModelError(f"{shape_id}: '{key}' must be an object with a 'target'")
    return ShapeId.parse(cast("str", value["target"]))


def _targets(shape_id: ShapeId, key: str, value: Any) -> tuple[ShapeId, ...]:
    if value is None:
        return ()
    if not isinstance(value, list):
        raise ModelError(f"{shape_id}: '{key}' must be a list")
    return tuple(_target(shape_id, key, item) for item in cast("list[Any]", value))


def _parse_members(shape_id: ShapeId, kind: ShapeKind, body: dict[str, Any]) -> tuple[Member, ...]:
    if kind in (ShapeKind.LIST, ShapeKind.SET):
        return (Member("member", _target(shape_id, "member", body.get("member"))),)
    if kind is ShapeKind.MAP:
        return (
            Member("key", _target(shape_id, "key", body.get("key"))),
            Member("value", _target(shape_id, "value", body.get("value"))),
        )
    raw: Any = body.get("members")
    if raw is None:
        return ()
    if not isinstance(raw, dict):
        raise ModelError(f"{shape_id}: 'members' must be an object")
    return tuple(
        Member(name, _target(shape_id, f"members.{name}", value))
        for name, value in cast("dict[str, Any]", raw).items()
    )


def _parse_shape(shape_id: ShapeId, body: dict[str, Any]) -> Shape:
    raw_type: Any = body.get("type")
    if not isinstance(raw_type, str):
        raise ModelError(f"{shape_id}: missing 'type'")
    kind: ShapeKind = ShapeKind.parse(raw_type)

    traits: Any = body.get("traits") or {}
    if not isinstance(traits, dict):
        raise ModelError(f"{shape_id}: 'traits' must be an object")

    operations: list[ShapeId] = list(_targets(shape_id, "operations", body.get("operations")))
    if kind is ShapeKind.RESOURCE:
        for key in _LIFECYCLE_KEYS:
            if key in body:
                operations.append(_target(shape_id, key, body[key]))
        operations.extend(
            _targets(shape_id, "collectionOperations", body.get("collectionOperations"))
        )

    rename: Any = body.get("rename") or {}
    if not isinstance(rename, dict):
        raise ModelError(f"{shape_id}: 'rename' must be an object")

    return Shape(
        id=shape_id,
        kind=kind,
        traits=MappingProxyType(dict(cast("dict[str, Any]", traits))),
        members=_parse_members(shape_id, kind, body),
        input=_target(shape_id, "input", body["input"]) if "input" in body else None,
        output=_target(shape_id, "output", body["output"]) if "output" in body else None,
        errors=_targets(shape_id, "errors", body.get("errors")),
        operations=tuple(operations),
        resources=_targets(shape_id, "resources", body.get("resources")),
        rename=MappingProxyType({str(k): str(v) for k, v in cast("dict[Any, Any]", rename).items()}),
    )
