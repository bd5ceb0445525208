# topmark:header:start
#
#   project      : PkgSurface
#   file         : main.py
#   file_relpath : src/pkgsurface/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""PkgSurface command line entry point.

Group-level options (verbosity, color) are resolved once and placed into
``ctx.obj`` together with the console every subcommand prints through.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from pkgsurface.cli.commands.check import check_command
from pkgsurface.cli.commands.generate import generate_command
from pkgsurface.cli.commands.surface import surface_command
from pkgsurface.cli.commands.version import version_command
from pkgsurface.cli.console import ClickConsole
from pkgsurface.cli.options import (
    ColorMode,
    common_color_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from pkgsurface.config.logging import get_logger, resolve_env_log_level, setup_logging

if TYPE_CHECKING:
    from pkgsurface.cli.console import ConsoleLike

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity, logging, color, console) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.obj = ctx.obj or {}

    # Program-output verbosity: positive with -v, negative with -q.
    level_cli: int = resolve_verbosity(verbose, quiet)
    ctx.obj["verbosity_level"] = verbose - quiet

    # Internal logging: PKGSURFACE_LOG_LEVEL wins; otherwise -v/-q pick the level.
    level_env: int | None = resolve_env_log_level()
    log_level: int | None = level_env if level_env is not None else (
        level_cli if verbose or quiet else None
    )
    ctx.obj["log_level"] = log_level
    setup_logging(level=log_level)

    effective_color_mode: ColorMode = (
        ColorMode.NEVER if no_color else (color_mode or ColorMode.AUTO)
    )
    enable_color: bool = resolve_color_mode(cli_mode=effective_color_mode, output_format=None)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="PkgSurface: generate package-surface verification artifacts from a service model.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Entry point for the PkgSurface CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
    )
    console: ConsoleLike = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'pkgsurface generate MODEL' to write the artifacts.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(surface_command)

cli.add_command(generate_command)

cli.add_command(check_command)

if __name__ == "__main__":
    cli()
