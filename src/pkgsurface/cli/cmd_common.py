# topmark:header:start
#
#   project      : PkgSurface
#   file         : cmd_common.py
#   file_relpath : src/pkgsurface/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Helpers shared by the PkgSurface commands."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pkgsurface import api
from pkgsurface.cli.errors import PkgSurfaceFileNotFoundError
from pkgsurface.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    import click

    from pkgsurface.cli.console import ConsoleLike
    from pkgsurface.config.logging import PkgSurfaceLogger
    from pkgsurface.config.model import Settings

logger: PkgSurfaceLogger = get_logger(__name__)


def get_console(ctx: click.Context) -> ConsoleLike:
    """Return the console created by the ``pkgsurface`` group."""
    ctx.ensure_object(dict)
    return ctx.obj["console"]


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity (negative when quiet)."""
    return int(ctx.obj.get("verbosity_level", 0))


def require_model(model_path: Path) -> None:
    """Raise a CLI error when the model file does not exist."""
    if not model_path.is_file():
        raise PkgSurfaceFileNotFoundError(f"Model file not found: {model_path}")


def load_cli_settings(
    model_path: Path,
    *,
    config_paths: Sequence[Path],
    no_config: bool,
    service: str | None,
    generate_schemas: bool | None,
    output_dir: str | None = None,
) -> Settings:
    """Resolve settings for a command: discovered files, ``--config`` files, then options."""
    overrides: dict[str, Any] = {
        "service": service,
        "generate_schemas": generate_schemas,
        "output_dir": output_dir,
    }
    settings: Settings = api.load_settings(
        model_path,
        config_files=config_paths,
        no_config=no_config,
        overrides=overrides,
    )
    logger.debug("Effective settings: %s", settings)
    return settings
