# topmark:header:start
#
#   project      : PkgSurface
#   file         : check.py
#   file_relpath : src/pkgsurface/cli/commands/check.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""PkgSurface `check` command.

Regenerates the artifacts in memory and compares them with the files on disk.

Exit codes:
    - 0 (`ExitCode.SUCCESS`) when every artifact is in sync.
    - 2 (`ExitCode.WOULD_CHANGE`) when ``generate`` would create or modify a file.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from pkgsurface import api
from pkgsurface.api import CheckStatus
from pkgsurface.cli.cmd_common import (
    get_console,
    get_effective_verbosity,
    load_cli_settings,
    require_model,
)
from pkgsurface.cli.errors import translate_errors
from pkgsurface.cli.options import common_config_options, common_output_options, model_argument
from pkgsurface.core.exit_codes import ExitCode
from pkgsurface.utils.diff import render_patch

if TYPE_CHECKING:
    from pathlib import Path

    from pkgsurface.api import CheckResult
    from pkgsurface.cli.console import ConsoleLike
    from pkgsurface.config.model import Settings
    from pkgsurface.emitters.registry import ArtifactKind, GeneratedArtifact

_STATUS_LABELS: dict[CheckStatus, tuple[str, str]] = {
    CheckStatus.IN_SYNC: ("in sync", "green"),
    CheckStatus.CHANGED: ("changed", "yellow"),
    CheckStatus.MISSING: ("missing", "red"),
}


@click.command(
    name="check",
    help="Check that the committed artifacts for MODEL are up to date.",
)
@model_argument
@common_config_options
@common_output_options
@click.option(
    "--diff",
    "show_diff",
    is_flag=True,
    help="Show a unified diff for every artifact that would change.",
)
@click.option(
    "--structural",
    is_flag=True,
    help="Compare only exports, assertions and schema mappings (ignore comments and layout).",
)
def check_command(
    *,
    model_path: Path,
    config_paths: tuple[Path, ...],
    no_config: bool,
    service: str | None,
    generate_schemas: bool | None,
    output_dir: str | None,
    root: Path,
    only: tuple[ArtifactKind, ...],
    show_diff: bool,
    structural: bool,
) -> None:
    """Compare the expected artifacts with the files on disk."""
    ctx = click.get_current_context()
    console: ConsoleLike = get_console(ctx)
    vlevel: int = get_effective_verbosity(ctx)
    color: bool = bool(ctx.obj.get("color_enabled", False))

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
        results: list[CheckResult] = api.check_artifacts(artifacts, root, structural=structural)

    for warning in settings.warnings:
        console.warn(f"Warning: {warning}")

    stale: list[CheckResult] = [r for r in results if r.would_change]
    if vlevel >= 0:
        for result in results:
            if not result.would_change and vlevel == 0:
                continue
            label, fg = _STATUS_LABELS[result.status]
            console.print(f"{console.styled(f'{label:<8}', fg=fg)} {result.relpath}")
            if show_diff and result.diff:
                console.print(render_patch(result.diff) if color else result.diff, nl=False)
        if stale:
            console.print(
                f"{len(stale)} of {len(results)} artifact(s) would change; "
                "run 'pkgsurface generate' to update them."
            )
        else:
            console.print(f"All {len(results)} artifact(s) are up to date.")

    if stale:
        ctx.exit(ExitCode.WOULD_CHANGE)
