# topmark:header:start
#
#   project      : PkgSurface
#   file         : errors.py
#   file_relpath : src/pkgsurface/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised while building verification artifacts.

Generation is a pure transform over an already-validated model. When a
collaborator misbehaves (a malformed model, a symbol provider returning an
empty name, two shapes claiming one export) the error propagates to the caller
unchanged: a silently incorrect verification artifact is worse than a failed
generation run. The CLI maps these exceptions to exit codes at the command
boundary (see `pkgsurface.cli.errors`).
"""

from __future__ import annotations


class PkgSurfaceError(Exception):
    """Base class for all PkgSurface errors."""


class ConfigError(PkgSurfaceError):
    """A configuration file is missing, unreadable, or malformed."""


class ModelError(PkgSurfaceError):
    """The service model cannot be loaded or does not contain the requested service."""


class SymbolResolutionError(PkgSurfaceError):
    """The symbol provider returned an unusable name for a shape."""

    def __init__(self, shape_id: str, name: str) -> None:
        super().__init__(f"Symbol provider returned an invalid name {name!r} for {shape_id}")
        self.shape_id = shape_id
        self.name = name


class SurfaceConflictError(PkgSurfaceError):
    """Two surface entries claim the same identifier with different runtime kinds."""

    def __init__(self, identifier: str, first: str, second: str) -> None:
        super().__init__(
            f"Identifier {identifier!r} is exported as both {first} and {second}"
        )
        self.identifier = identifier


class SchemaModeError(PkgSurfaceError):
    """A schema variable name was requested while schema generation is disabled."""
