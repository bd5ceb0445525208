# topmark:header:start
#
#   project      : PkgSurface
#   file         : generate.py
#   file_relpath : src/pkgsurface/cli/commands/generate.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""PkgSurface `generate` command.

Renders the verification artifacts of a service model and writes them under
``<root>/<output directory>``. Files whose content is already up to date are
left untouched.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from pkgsurface import api
from pkgsurface.api import WriteStatus
from pkgsurface.cli.cmd_common import (
    get_console,
    get_effective_verbosity,
    load_cli_settings,
    require_model,
)
from pkgsurface.cli.errors import translate_errors
from pkgsurface.cli.options import common_config_options, common_output_options, model_argument

if TYPE_CHECKING:
    from pathlib import Path

    from pkgsurface.api import WriteResult
    from pkgsurface.cli.console import ConsoleLike
    from pkgsurface.config.model import Settings
    from pkgsurface.emitters.registry import ArtifactKind, GeneratedArtifact

_STATUS_COLORS: dict[WriteStatus, str] = {
    WriteStatus.CREATED: "green",
    WriteStatus.UPDATED: "yellow",
    WriteStatus.UNCHANGED: "bright_black",
}


@click.command(
    name="generate",
    help="Generate the type, runtime and snapshot artifacts for MODEL.",
)
@model_argument
@common_config_options
@common_output_options
def generate_command(
    *,
    model_path: Path,
    config_paths: tuple[Path, ...],
    no_config: bool,
    service: str | None,
    generate_schemas: bool | None,
    output_dir: str | None,
    root: Path,
    only: tuple[ArtifactKind, ...],
) -> None:
    """Generate and write the verification artifacts."""
    ctx = click.get_current_context()
    console: ConsoleLike = get_console(ctx)
    vlevel: int = get_effective_verbosity(ctx)

    require_model(model_path)
    with translate_errors():
        settings: Settings = load_cli_settings(
            model_path,
            config_paths=config_paths,
            no_config=no_config,
            service=service,
            generate_schemas=generate_schemas,
            output_dir=output_dir,
        )
        artifacts: tuple[GeneratedArtifact, ...] = api.generate(
            model_path, settings, kinds=only or None
        )
        results: list[WriteResult] = api.write_artifacts(artifacts, root)

    for warning in settings.warnings:
        console.warn(f"Warning: {warning}")
    if vlevel < 0:
        return
    for result in results:
        if result.status is WriteStatus.UNCHANGED and vlevel == 0:
            continue
        status: str = console.styled(
            f"{result.status.value:<9}", fg=_STATUS_COLORS[result.status]
        )
        console.print(f"{status} {result.relpath}")
    written: int = sum(1 for r in results if r.status is not WriteStatus.UNCHANGED)
    console.print(f"{written} of {len(results)} artifact(s) written.")
