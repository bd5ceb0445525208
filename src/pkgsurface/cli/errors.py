# topmark:header:start
#
#   project      : PkgSurface
#   file         : errors.py
#   file_relpath : src/pkgsurface/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the PkgSurface CLI.

Core code raises `pkgsurface.core.errors.PkgSurfaceError` subclasses. Commands
run their work inside `translate_errors`, which re-raises them as the
`click.ClickException` subclasses below so that each failure class maps to its
`ExitCode`.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import IO, TYPE_CHECKING, Any

import click

from pkgsurface.core.errors import (
    ConfigError,
    ModelError,
    PkgSurfaceError,
    SchemaModeError,
    SurfaceConflictError,
    SymbolResolutionError,
)
from pkgsurface.core.exit_codes import ExitCode

if TYPE_CHECKING:
    from collections.abc import Iterator


class PkgSurfaceCliError(click.ClickException):
    """Base class for all PkgSurface CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:
        """Return the plain error message text."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:
        """Display the error using the project console if available."""
        ctx: click.Context | None = click.get_current_context(silent=True)
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(f"Error: {self.format_message()}")
                return
        super().show(file)


class PkgSurfaceUsageError(PkgSurfaceCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class PkgSurfaceConfigError(PkgSurfaceCliError):
    """Error for configuration errors (missing/invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR


class PkgSurfaceModelError(PkgSurfaceCliError):
    """Error for malformed models or an unknown/ambiguous service."""

    exit_code = ExitCode.MODEL_ERROR


class PkgSurfaceFileNotFoundError(PkgSurfaceCliError):
    """Error when an input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class PkgSurfaceGenerationError(PkgSurfaceCliError):
    """Error for collaborator contract violations during enumeration."""

    exit_code = ExitCode.GENERATION_ERROR


class PkgSurfaceIOError(PkgSurfaceCliError):
    """Error for I/O errors reading/writing files."""

    exit_code = ExitCode.IO_ERROR


@contextmanager
def translate_errors() -> Iterator[None]:
    """Re-raise core errors as CLI errors carrying the matching exit code."""
    try:
        yield
    except ConfigError as e:
        raise PkgSurfaceConfigError(str(e)) from e
    except ModelError as e:
        raise PkgSurfaceModelError(str(e)) from e
    except (SymbolResolutionError, SurfaceConflictError, SchemaModeError) as e:
        raise PkgSurfaceGenerationError(str(e)) from e
    except PkgSurfaceError as e:
        raise PkgSurfaceCliError(str(e)) from e
    except FileNotFoundError as e:
        raise PkgSurfaceFileNotFoundError(str(e)) from e
    except OSError as e:
        raise PkgSurfaceIOError(str(e)) from e
