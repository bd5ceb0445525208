# topmark:header:start
#
#   project      : PkgSurface
#   file         : options.py
#   file_relpath : src/pkgsurface/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI options and their resolution logic.

Reusable option groups (verbosity, color, configuration, output) live
here so commands stay thin.
"""

from __future__ import annotations

import logging
import os
import sys
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, ParamSpec, TypeVar

import click

from pkgsurface.cli.cli_types import EnumChoiceParam
from pkgsurface.cli.errors import PkgSurfaceUsageError
from pkgsurface.config.logging import TRACE_LEVEL
from pkgsurface.emitters.registry import ArtifactKind

if TYPE_CHECKING:
    from collections.abc import Callable

P = ParamSpec("P")
R = TypeVar("R")


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the logging level from ``-v`` and ``-q`` counts.

    Three or more ``-v`` select TRACE, two DEBUG, one INFO; any ``-q`` selects
    ERROR. The default is WARNING.

    Raises:
        PkgSurfaceUsageError: If both verbose and quiet flags are used.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise PkgSurfaceUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    if verbose_count >= 3:
        return TRACE_LEVEL
    if verbose_count == 2:
        return logging.DEBUG
    if verbose_count == 1:
        return logging.INFO
    if quiet_count >= 1:
        return logging.ERROR
    return logging.WARNING


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``-v/--verbose`` and ``-q/--quiet`` counting options."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity (repeat for more detail).",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress non-essential output.",
    )(f)
    return f


class ColorMode(str, Enum):
    """User intent for colorized terminal output."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(
    *,
    cli_mode: ColorMode | None,
    output_format: str | None,
    stdout_isatty: bool | None = None,
) -> bool:
    """Determine whether color output should be enabled.

    Machine formats (JSON/NDJSON) are never colored. Otherwise ``--color`` wins,
    then ``FORCE_COLOR`` and ``NO_COLOR``, then whether stdout is a TTY.
    """
    if output_format and output_format.lower() in {"json", "ndjson"}:
        return False
    if cli_mode == ColorMode.ALWAYS:
        return True
    if cli_mode == ColorMode.NEVER:
        return False
    force_color: str | None = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False
    if stdout_isatty is None:
        try:
            stdout_isatty = sys.stdout.isatty()
        except (AttributeError, ValueError):
            stdout_isatty = False
    return bool(stdout_isatty)


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--color {auto,always,never}`` and ``--no-color``."""
    f = click.option(
        "--color",
        "color_mode",
        type=EnumChoiceParam(ColorMode),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


def model_argument(f: Callable[P, R]) -> Callable[P, R]:
    """Add the ``MODEL`` argument (existence is checked by the command)."""
    return click.argument(
        "model_path",
        metavar="MODEL",
        type=click.Path(dir_okay=False, path_type=Path),
    )(f)


def common_config_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add the configuration options shared by every model-reading command."""
    f = click.option(
        "--config",
        "config_paths",
        multiple=True,
        metavar="FILE",
        type=click.Path(dir_okay=False, path_type=Path),
        help="Additional config file(s) to load and merge.",
    )(f)
    f = click.option(
        "--no-config",
        "no_config",
        is_flag=True,
        help="Ignore config files next to the model (only use defaults and --config).",
    )(f)
    f = click.option(
        "--service",
        "service",
        default=None,
        metavar="SHAPE_ID",
        help="Service shape id (required when the model declares several services).",
    )(f)
    f = click.option(
        "--schemas/--no-schemas",
        "generate_schemas",
        default=None,
        help="Force schema mode on or off (default: from configuration).",
    )(f)
    return f


def common_output_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add the artifact location and selection options of ``generate`` and ``check``."""
    f = click.option(
        "--out",
        "output_dir",
        default=None,
        metavar="DIR",
        help="Output directory, relative to --root (default: from configuration).",
    )(f)
    f = click.option(
        "--root",
        "root",
        default=".",
        show_default=True,
        type=click.Path(file_okay=False, path_type=Path),
        help="Package root the output directory is resolved against.",
    )(f)
    f = click.option(
        "--only",
        "only",
        multiple=True,
        type=EnumChoiceParam(ArtifactKind),
        help=f"Restrict to these artifacts ({', '.join(k.value for k in ArtifactKind)}).",
    )(f)
    return f
