# topmark:header:start
#
#   project      : PkgSurface
#   file         : service.py
#   file_relpath : src/pkgsurface/model/service.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Service definitions and the service-level naming rules.

A `ServiceDefinition` is the root entity of one generation pass: a service
shape plus the model that owns it. It resolves the operations a service
contains (directly or through resources) and the names its shapes take after
the service's ``rename`` map is applied.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pkgsurface.config.logging import get_logger
from pkgsurface.constants import CLIENT_SUFFIX, SERVICE_EXCEPTION_SUFFIX
from pkgsurface.core.errors import ModelError
from pkgsurface.model.shapes import Model, Shape, ShapeId, ShapeKind

if TYPE_CHECKING:
    from pkgsurface.config.logging import PkgSurfaceLogger
    from pkgsurface.config.model import Settings
    from pkgsurface.model.symbols import SymbolProviderLike

logger: PkgSurfaceLogger = get_logger(__name__)


class ServiceDefinition:
    """A service shape bound to the model that contains it."""

    def __init__(self, model: Model, shape: Shape) -> None:
        if shape.kind is not ShapeKind.SERVICE:
            raise ModelError(f"{shape.id} is a {shape.kind.value}, not a service")
        self.model: Model = model
        self.shape: Shape = shape

    @classmethod
    def from_model(cls, model: Model, service: str | None = None) -> ServiceDefinition:
        """Select the service to generate for.

        Args:
            model (Model): The loaded model.
            service (str | None): Absolute shape id of the service; when empty the
                model must contain exactly one service.

        Returns:
            ServiceDefinition: The selected service.

        Raises:
            ModelError: If the service is missing or the choice is ambiguous.
        """
        if service:
            return cls(model, model.expect_shape(ShapeId.parse(service)))
        services: tuple[Shape, ...] = model.services()
        if len(services) != 1:
            found: str = ", ".join(str(s.id) for s in services) or "none"
            raise ModelError(f"Expected exactly one service in the model, found: {found}")
        return cls(model, services[0])

    @property
    def id(self) -> ShapeId:
        """Absolute shape id of the service."""
        return self.shape.id

    def shape_name(self, shape_id: ShapeId) -> str:
        """Return the name of ``shape_id`` in the context of this service (after ``rename``)."""
        return self.shape.rename.get(str(shape_id), shape_id.name)

    def contained_operations(self) -> tuple[Shape, ...]:
        """Return every operation bound to the service or to one of its resources.

        Operations are returned once each, in discovery order.
        """
        found: dict[ShapeId, Shape] = {}
        visited_resources: set[ShapeId] = set()

        def _visit(container: Shape) -> None:
            for op_id in container.operations:
                if op_id not in found:
                    op: Shape = self.model.expect_shape(op_id)
                    if op.kind is not ShapeKind.OPERATION:
                        raise ModelError(f"{container.id} binds {op_id}, which is not an operation")
                    found[op_id] = op
            for res_id in container.resources:
                if res_id in visited_resources:
                    continue
                visited_resources.add(res_id)
                _visit(self.model.expect_shape(res_id))

        _visit(self.shape)
        return tuple(found.values())


def service_name(settings: Settings, service: ServiceDefinition, symbols: SymbolProviderLike) -> str:
    """Return the aggregate client identifier.

    The configured ``service_name`` wins; otherwise the service symbol name is used
    with a trailing ``Client`` removed.
    """
    if settings.service_name:
        return settings.service_name
    name: str = symbols.to_symbol(service.shape).name
    if name.endswith(CLIENT_SUFFIX) and name != CLIENT_SUFFIX:
        name = name[: -len(CLIENT_SUFFIX)]
    return name


def synthetic_base_exception_name(client_name: str, model: Model) -> str:
    """Return the name of the generated common ancestor of every modeled error.

    The name is ``<client_name>ServiceException``; it is prefixed with ``__`` when
    a shape of the model already uses that name.
    """
    name: str = client_name + SERVICE_EXCEPTION_SUFFIX
    if any(shape_id.name == name for shape_id in model.shape_ids):
        logger.debug("Model already defines %s; prefixing the synthetic base exception", name)
        name = "__" + name
    return name


def schema_mode_allowed(service: ServiceDefinition, settings: Settings) -> bool:
    """Return True when schema artifacts are generated for ``service``."""
    return settings.generate_schemas or str(service.id) in settings.schema_allowlist
