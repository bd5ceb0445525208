# topmark:header:start
#
#   project      : PkgSurface
#   file         : plan.py
#   file_relpath : src/pkgsurface/surface/plan.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Resolved inputs of one generation pass.

`build_plan` derives the aggregate client name, the synthetic base exception
and the schema-mode flag exactly once; every artifact rendered from the plan
sees the same values.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from pkgsurface.config.logging import get_logger
from pkgsurface.model.closure import ModelClosure
from pkgsurface.model.service import (
    ServiceDefinition,
    schema_mode_allowed,
    service_name,
    synthetic_base_exception_name,
)
from pkgsurface.model.symbols import ModelSymbolProvider
from pkgsurface.surface import naming
from pkgsurface.surface.enumerator import enumerate_surface

if TYPE_CHECKING:
    from pkgsurface.config.logging import PkgSurfaceLogger
    from pkgsurface.config.model import Settings
    from pkgsurface.model.closure import ServiceClosureLike
    from pkgsurface.model.shapes import Model
    from pkgsurface.model.symbols import SymbolProviderLike
    from pkgsurface.surface.types import SurfaceEntry, TestKind

logger: PkgSurfaceLogger = get_logger(__name__)


@dataclass(frozen=True)
class SurfacePlan:
    """Fully resolved inputs of one generation pass.

    Attributes:
        service_id (str): Absolute shape id of the service.
        client_name (str): Aggregate client identifier.
        base_exception (str): Name of the synthetic base exception.
        schema_mode (bool): Whether schema objects are generated.
        closure (ServiceClosureLike): Closure of the service.
        symbols (SymbolProviderLike): Symbol provider of the pass.
    """

    service_id: str
    client_name: str
    base_exception: str
    schema_mode: bool
    closure: ServiceClosureLike
    symbols: SymbolProviderLike

    @property
    def bare_client(self) -> str:
        """Identifier of the bare client class."""
        return naming.bare_client_name(self.client_name)

    def entries(self, kind: TestKind) -> tuple[SurfaceEntry, ...]:
        """Enumerate the surface for ``kind``."""
        return enumerate_surface(
            self.closure,
            self.symbols,
            client_name=self.client_name,
            base_exception=self.base_exception,
            test_kind=kind,
            schema_mode=self.schema_mode,
        )


def build_plan(model: Model, settings: Settings) -> SurfacePlan:
    """Resolve the generation inputs for the service selected by ``settings``.

    Args:
        model (Model): The loaded model.
        settings (Settings): Generation settings.

    Returns:
        SurfacePlan: The resolved plan.

    Raises:
        ModelError: If the service cannot be selected or its closure is broken.
    """
    service: ServiceDefinition = ServiceDefinition.from_model(model, settings.service or None)
    symbols = ModelSymbolProvider(service)
    schema_mode: bool = schema_mode_allowed(service, settings)
    client_name: str = service_name(settings, service, symbols)
    plan = SurfacePlan(
        service_id=str(service.id),
        client_name=client_name,
        base_exception=synthetic_base_exception_name(client_name, model),
        schema_mode=schema_mode,
        closure=ModelClosure(service, schema_mode=schema_mode),
        symbols=symbols,
    )
    logger.info(
        "Plan for %s: client %s, base exception %s, schema mode %s",
        plan.service_id,
        plan.client_name,
        plan.base_exception,
        "on" if schema_mode else "off",
    )
    return plan
