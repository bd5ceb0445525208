# topmark:header:start
#
#   project      : PkgSurface
#   file         : version.py
#   file_relpath : src/pkgsurface/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""PkgSurface `version` command.

Prints the current PkgSurface version as installed in the active Python environment.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from pkgsurface.cli.cli_types import EnumChoiceParam
from pkgsurface.cli.cmd_common import get_console, get_effective_verbosity
from pkgsurface.cli.formats import OutputFormat, meta_payload, to_json, to_ndjson
from pkgsurface.constants import PKGSURFACE_VERSION

if TYPE_CHECKING:
    from pkgsurface.cli.console import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of PkgSurface.",
)
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=None,
    help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
)
def version_command(*, output_format: OutputFormat | None = None) -> None:
    """Show the current version of PkgSurface.

    Args:
        output_format (OutputFormat | None): Optional output format.
    """
    ctx = click.get_current_context()
    console: ConsoleLike = get_console(ctx)
    vlevel: int = get_effective_verbosity(ctx)
    fmt: OutputFormat = output_format or OutputFormat.DEFAULT

    if fmt is OutputFormat.JSON:
        console.print(to_json(meta_payload()))
    elif fmt is OutputFormat.NDJSON:
        console.print(to_ndjson([meta_payload()]))
    elif fmt is OutputFormat.MARKDOWN:
        console.print("# PkgSurface Version\n")
        console.print(f"**PkgSurface version: {PKGSURFACE_VERSION}**")
    elif vlevel > 0:
        console.print(console.styled("PkgSurface version:\n", bold=True, underline=True))
        console.print(f"    {console.styled(PKGSURFACE_VERSION, bold=True)}")
    else:
        console.print(console.styled(PKGSURFACE_VERSION, bold=True))
